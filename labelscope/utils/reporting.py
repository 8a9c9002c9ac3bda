"""
Reporting helpers for dataset descriptors and evaluation results.

Functions:
    to_serializable: Convert numpy/pandas values to JSON-compatible Python values
    save_json: Write a dictionary to a JSON file
    dataset_report: Collect a dataset descriptor into a JSON-ready dictionary
    format_measures: Text table of dataset measures
    format_metrics: Text table of evaluation metrics
"""

import json
import math
from pathlib import Path
from typing import Any, Dict, Union

import numpy as np
import pandas as pd


def to_serializable(value: Any) -> Any:
    """
    Convert a value to something json.dump accepts.

    NaN becomes None and infinities become the strings "inf"/"-inf".

    Example:
        >>> to_serializable({'ir': np.float64('inf'), 'counts': np.array([1, 2])})
        {'ir': 'inf', 'counts': [1, 2]}
    """
    if isinstance(value, dict):
        return {str(k): to_serializable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_serializable(v) for v in value]
    if isinstance(value, np.ndarray):
        return [to_serializable(v) for v in value.tolist()]
    if isinstance(value, pd.DataFrame):
        return to_serializable(value.reset_index().to_dict(orient="records"))
    if isinstance(value, (np.bool_, bool)):
        return bool(value)
    if isinstance(value, np.integer):
        return int(value)
    if isinstance(value, (float, np.floating)):
        value = float(value)
        if math.isnan(value):
            return None
        if math.isinf(value):
            return "inf" if value > 0 else "-inf"
        return value
    return value


def save_json(data: Dict[str, Any], save_path: Union[str, Path]) -> Path:
    """Write data to a JSON file, creating parent directories."""
    save_path = Path(save_path)
    save_path.parent.mkdir(parents=True, exist_ok=True)

    with open(save_path, "w") as f:
        json.dump(to_serializable(data), f, indent=2)

    return save_path


def dataset_report(dataset) -> Dict[str, Any]:
    """Collect measures, labels and labelsets of a dataset into one dictionary."""
    return {
        "name": dataset.name,
        "measures": dataset.measures.to_dict(),
        "attributes": {a.name: a.type_string() for a in dataset.attributes},
        "labels": dataset.labels_frame(),
        "labelsets": dataset.labelsets_frame().drop(columns="labels"),
    }


def _format_rows(title: str, rows: Dict[str, Any]) -> str:
    width = max((len(k) for k in rows), default=0) + 2
    lines = ["=" * 80, title, "=" * 80]
    for key, value in rows.items():
        if isinstance(value, float):
            value = f"{value:.4f}"
        lines.append(f"  {key:<{width}}{value}")
    lines.append("=" * 80)
    return "\n".join(lines)


def format_measures(dataset) -> str:
    """
    Format the measures of a dataset as a text table.

    Example:
        >>> print(format_measures(dataset))
        ================================================================================
        DATASET SUMMARY: emotions
        ...
    """
    return _format_rows(f"DATASET SUMMARY: {dataset.name}", dataset.measures.to_dict())


def format_metrics(result) -> str:
    """Format an evaluation result as a text table, failed metrics marked."""
    rows: Dict[str, Any] = {}
    for name, value in result.items():
        rows[name] = "n/a" if name in result.errors else value
    for family, count in result.excluded_labels.items():
        rows[f"{family}_excluded_labels"] = count

    text = _format_rows("EVALUATION METRICS SUMMARY", rows)
    if result.errors:
        notes = "\n".join(f"  {name}: {message}" for name, message in result.errors.items())
        text += "\nFailed metrics:\n" + notes
    return text
