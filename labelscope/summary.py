"""
Summaries of labelscope descriptors.

Every descriptor exposes a ``kind`` discriminant. ``summarize`` looks up the
summarizer registered for that kind, so each descriptor kind has exactly one
summary implementation.

Classes:
    DescriptorKind: Discriminant of the descriptor types

Functions:
    summarize: Flat key -> scalar summary of a descriptor
"""

from enum import Enum
from typing import Callable, Dict

import pandas as pd

from labelscope.exceptions import InvalidInput


class DescriptorKind(str, Enum):
    DATASET = "dataset"
    EVALUATION = "evaluation"


def _summarize_dataset(dataset) -> pd.Series:
    values = dataset.measures.to_dict()
    return pd.Series(values, name=dataset.name, dtype=float)


def _summarize_evaluation(result) -> pd.Series:
    values = dict(result.metrics)
    for family, count in result.excluded_labels.items():
        values[f"{family}_excluded_labels"] = count
    return pd.Series(values, name="evaluation", dtype=float)


_SUMMARIZERS: Dict[DescriptorKind, Callable[[object], pd.Series]] = {
    DescriptorKind.DATASET: _summarize_dataset,
    DescriptorKind.EVALUATION: _summarize_evaluation,
}


def summarize(descriptor) -> pd.Series:
    """
    Summarize a dataset descriptor or an evaluation result.

    Args:
        descriptor: Object with a ``kind`` attribute (``MultiLabelDataset`` or
            ``EvaluationResult``)

    Returns:
        pd.Series: Flat key -> scalar table

    Raises:
        InvalidInput: If the object has no registered kind

    Example:
        >>> summarize(dataset)['cardinality']
        1.5
    """
    kind = getattr(descriptor, "kind", None)
    try:
        summarizer = _SUMMARIZERS[DescriptorKind(kind)]
    except (KeyError, ValueError):
        raise InvalidInput(f"No summary available for descriptor kind {kind!r}") from None
    return summarizer(descriptor)
