"""Tests for the MultiLabelDataset descriptor and its measures."""

import dataclasses
import math
import warnings

import numpy as np
import pandas as pd
import pytest

from labelscope import DegenerateLabel, InvalidInput, MultiLabelDataset


@pytest.fixture
def toy_dataset(toy_frame):
    return MultiLabelDataset.from_frame(toy_frame, label_names=["a", "b", "c"], name="toy")


# ============================================================================
# Construction
# ============================================================================


def test_label_statistics(toy_dataset):
    labels = {label.name: label for label in toy_dataset.labels}

    assert [label.count for label in toy_dataset.labels] == [2, 3, 1]
    assert labels["a"].ir == 1.0
    assert labels["b"].ir == 3.0
    assert labels["c"].ir == 3.0
    assert labels["a"].ir_lbl == 1.5
    assert labels["c"].ir_lbl == 3.0
    assert labels["b"].frequency == 0.75
    assert labels["a"].index == 2
    assert not any(label.degenerate for label in toy_dataset.labels)


def test_measures(toy_dataset):
    m = toy_dataset.measures

    assert m.num_instances == 4
    assert m.num_attributes == 5
    assert m.num_inputs == 2
    assert m.num_labels == 3
    assert m.num_labelsets == 4
    assert m.num_single_labelsets == 4
    assert m.single_labelset_ratio == 1.0
    assert m.max_frequency == 1
    assert m.cardinality == 1.5
    assert m.density == 0.5
    assert m.mean_ir == pytest.approx(7 / 3)
    assert m.mean_ir_lbl == pytest.approx(11 / 6)
    assert m.mean_scumble == pytest.approx(0.065157, abs=1e-6)
    assert m.tcs == pytest.approx(math.log(24))
    assert m.num_degenerate_labels == 0


def test_scumble_cv(toy_dataset):
    scores = toy_dataset.instance_scumble
    expected = np.std(scores, ddof=1) / np.mean(scores)
    assert toy_dataset.measures.scumble_cv == pytest.approx(expected)


def test_density_is_cardinality_over_labels(toy_dataset):
    m = toy_dataset.measures
    assert m.density == pytest.approx(m.cardinality / m.num_labels)


def test_labelsets_sum_to_instances(toy_dataset):
    assert sum(toy_dataset.labelsets.values()) == toy_dataset.num_instances


def test_instance_label_counts(toy_dataset):
    assert toy_dataset.instance_label_counts.tolist() == [1, 2, 1, 2]


def test_imbalanced_scenario(imbalanced_frame):
    ds = MultiLabelDataset.from_frame(imbalanced_frame, label_amount=2)
    a, b = ds.labels

    assert a.ir == pytest.approx(9.0)
    assert b.ir == pytest.approx(9.0)
    assert a.ir_lbl == 1.0
    assert b.ir_lbl == pytest.approx(9.0)
    assert ds.instance_scumble[0] == pytest.approx(0.4)
    assert ds.instance_scumble[50] == 0.0
    assert a.scumble == pytest.approx(0.4 / 9)
    assert b.scumble == pytest.approx(0.4)


def test_name_from_header_hint():
    frame = pd.DataFrame({"a": [1, 0], "b": [0, 1], "x": [0.1, 0.2]})
    ds = MultiLabelDataset.from_frame(frame, header_hint="'scene: -C 2'")
    assert ds.name == "scene"
    assert ds.label_names == ["a", "b"]


def test_malformed_header_hint_only_names_dataset():
    frame = pd.DataFrame({"x": [0.1, 0.2], "a": [1, 0]})
    ds = MultiLabelDataset.from_frame(frame, label_indices=[1], header_hint="toy: -C many")
    assert ds.name == "toy"
    assert ds.label_names == ["a"]


def test_numpy_integer_label_amount(toy_frame):
    ds = MultiLabelDataset.from_frame(toy_frame, label_amount=np.int64(3))
    assert ds.label_names == ["a", "b", "c"]


def test_default_name(toy_frame):
    ds = MultiLabelDataset.from_frame(toy_frame, label_amount=3)
    assert ds.name == "dataset"


def test_from_csv(tmp_path, toy_frame):
    path = tmp_path / "toy.csv"
    toy_frame.to_csv(path, index=False)

    ds = MultiLabelDataset.from_csv(path, label_amount=3)

    assert ds.name == "toy"
    assert ds.measures.cardinality == 1.5


def test_from_csv_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        MultiLabelDataset.from_csv(tmp_path / "missing.csv", label_amount=1)


def test_invalid_frame():
    with pytest.raises(InvalidInput):
        MultiLabelDataset.from_frame([[1, 0]], label_indices=[0])


def test_unresolvable_labels(toy_frame):
    with pytest.raises(InvalidInput):
        MultiLabelDataset.from_frame(toy_frame)


# ============================================================================
# Degenerate labels and edge cases
# ============================================================================


def test_constant_label_warns_and_is_flagged():
    frame = pd.DataFrame({"x": [1, 2, 3, 4], "a": [1, 0, 1, 0], "b": [1, 1, 1, 1]})

    with pytest.warns(DegenerateLabel, match="b"):
        ds = MultiLabelDataset.from_frame(frame, label_amount=2)

    a, b = ds.labels
    assert b.degenerate
    assert math.isinf(b.ir)
    assert not a.degenerate
    assert ds.measures.num_degenerate_labels == 1
    assert ds.measures.mean_ir == 1.0


def test_never_active_label():
    frame = pd.DataFrame({"x": [1, 2, 3], "a": [1, 0, 1], "b": [0, 0, 0]})

    with pytest.warns(DegenerateLabel):
        ds = MultiLabelDataset.from_frame(frame, label_amount=2)

    b = ds.labels[1]
    assert b.count == 0
    assert math.isinf(b.ir_lbl)
    assert math.isnan(b.scumble)
    assert ds.measures.mean_scumble == 0.0


def test_no_warning_for_varying_labels(toy_frame):
    with warnings.catch_warnings():
        warnings.simplefilter("error", DegenerateLabel)
        MultiLabelDataset.from_frame(toy_frame, label_amount=3)


def test_single_label_dataset():
    frame = pd.DataFrame({"x": [1, 2, 3], "a": [1, 0, 1]})
    ds = MultiLabelDataset.from_frame(frame, label_amount=1)

    assert ds.label_matrix.shape == (3, 1)
    assert (ds.instance_scumble == 0).all()
    assert ds.measures.mean_scumble == 0.0
    assert ds.measures.num_labelsets == 2


def test_empty_dataset():
    frame = pd.DataFrame({"x": pd.Series([], dtype=float), "a": pd.Series([], dtype=int)})

    with pytest.warns(DegenerateLabel):
        ds = MultiLabelDataset.from_frame(frame, label_amount=1)

    assert ds.num_instances == 0
    assert ds.measures.num_labelsets == 0
    assert math.isnan(ds.measures.cardinality)
    assert math.isnan(ds.labels[0].frequency)


# ============================================================================
# Immutability and views
# ============================================================================


def test_descriptor_is_frozen(toy_dataset):
    with pytest.raises(dataclasses.FrozenInstanceError):
        toy_dataset.name = "other"
    with pytest.raises(dataclasses.FrozenInstanceError):
        toy_dataset.measures.cardinality = 0.0


def test_arrays_are_read_only(toy_dataset):
    with pytest.raises(ValueError):
        toy_dataset.label_matrix[0, 0] = 0
    with pytest.raises(ValueError):
        toy_dataset.instance_scumble[0] = 1.0


def test_source_frame_changes_do_not_leak(toy_frame):
    ds = MultiLabelDataset.from_frame(toy_frame, label_amount=3)
    toy_frame.loc[0, "a"] = 0
    assert ds.label_matrix[0, 0] == 1
    assert ds.to_frame().loc[0, "a"] == 1


def test_labels_frame(toy_dataset):
    frame = toy_dataset.labels_frame()
    assert list(frame.index) == ["a", "b", "c"]
    assert frame.loc["b", "count"] == 3
    assert frame.loc["c", "ir_lbl"] == 3.0


def test_labelsets_frame(toy_dataset):
    frame = toy_dataset.labelsets_frame()
    assert list(frame.columns) == ["labelset", "labels", "count"]
    assert frame["labelset"].tolist() == ["100", "110", "010", "011"]
    assert frame.loc[1, "labels"] == ["a", "b"]


def test_instances_frame(toy_dataset):
    frame = toy_dataset.instances_frame()
    assert frame["label_count"].tolist() == [1, 2, 1, 2]
    assert frame.loc[3, "scumble"] == pytest.approx(1 - math.sqrt(3) / 2)


def test_summary(toy_dataset):
    summary = toy_dataset.summary()
    assert summary.name == "toy"
    assert summary["cardinality"] == 1.5
    assert summary["num_labels"] == 3


def test_repr(toy_dataset):
    assert repr(toy_dataset) == "MultiLabelDataset(name='toy', instances=4, labels=3, labelsets=4)"


def test_label_counts_sum_to_instance_label_counts(imbalanced_frame):
    ds = MultiLabelDataset.from_frame(imbalanced_frame, label_amount=2)
    assert sum(label.count for label in ds.labels) == ds.instance_label_counts.sum()


def test_scumble_only_on_co_occurring_instances(imbalanced_frame):
    ds = MultiLabelDataset.from_frame(imbalanced_frame, label_amount=2)
    assert (ds.instance_scumble[:10] > 0).all()
    assert (ds.instance_scumble[10:] == 0).all()
