"""Tests for descriptor summaries."""

import pandas as pd
import pytest

from labelscope import DescriptorKind, InvalidInput, MultiLabelDataset, evaluate, summarize


def test_dataset_summary(toy_frame):
    ds = MultiLabelDataset.from_frame(toy_frame, label_amount=3, name="toy")
    summary = summarize(ds)

    assert ds.kind is DescriptorKind.DATASET
    assert isinstance(summary, pd.Series)
    assert summary.name == "toy"
    assert set(ds.measures.to_dict()) == set(summary.index)
    assert summary["density"] == 0.5


def test_evaluation_summary(label_case):
    result = evaluate(*label_case, metrics=["micro_precision", "macro_recall"])
    summary = summarize(result)

    assert result.kind is DescriptorKind.EVALUATION
    assert list(summary.index) == [
        "micro_precision",
        "macro_recall",
        "macro_excluded_labels",
        "macro_auc_excluded_labels",
    ]
    assert summary["micro_precision"] == pytest.approx(0.75)
    assert summary["macro_excluded_labels"] == 0


def test_summary_method_matches_function(label_case):
    result = evaluate(*label_case)
    pd.testing.assert_series_equal(result.summary(), summarize(result))


def test_unknown_descriptor():
    with pytest.raises(InvalidInput):
        summarize(object())
