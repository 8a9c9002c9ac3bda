"""Tests for JSON export and text reports."""

import json

import numpy as np
import pandas as pd

from labelscope import MultiLabelDataset, evaluate
from labelscope.utils.reporting import (
    dataset_report,
    format_measures,
    format_metrics,
    save_json,
    to_serializable,
)


def test_to_serializable():
    value = {
        "ir": np.float64("inf"),
        "scumble": float("nan"),
        "counts": np.array([1, 2]),
        "flag": np.bool_(True),
        "n": np.int64(3),
    }
    assert to_serializable(value) == {
        "ir": "inf",
        "scumble": None,
        "counts": [1, 2],
        "flag": True,
        "n": 3,
    }


def test_to_serializable_frame():
    frame = pd.DataFrame({"count": [1, 2]}, index=pd.Index(["a", "b"], name="name"))
    assert to_serializable(frame) == [{"name": "a", "count": 1}, {"name": "b", "count": 2}]


def test_dataset_report_round_trips_through_json(tmp_path, toy_frame):
    ds = MultiLabelDataset.from_frame(toy_frame, label_amount=3, name="toy")

    path = save_json(dataset_report(ds), tmp_path / "reports" / "toy.json")

    with open(path) as f:
        report = json.load(f)
    assert report["name"] == "toy"
    assert report["measures"]["cardinality"] == 1.5
    assert report["attributes"]["source"] == "{blog,news,web}"
    assert [row["name"] for row in report["labels"]] == ["a", "b", "c"]
    assert report["labelsets"][0] == {"labelset": "100", "count": 1}


def test_format_measures(toy_frame):
    ds = MultiLabelDataset.from_frame(toy_frame, label_amount=3, name="toy")
    text = format_measures(ds)

    assert "DATASET SUMMARY: toy" in text
    assert "cardinality" in text
    assert "1.5000" in text


def test_format_metrics_marks_failures(label_case):
    Y, Z = label_case
    text = format_metrics(evaluate(Y, Z, metrics=["micro_precision", "one_error"]))

    assert "EVALUATION METRICS SUMMARY" in text
    assert "0.7500" in text
    assert "n/a" in text
    assert "Failed metrics:" in text
    assert "macro_excluded_labels" in text
