"""
Dataset-level summary measures.

Folds the per-label, per-labelset and per-instance statistics into one
immutable record.

Classes:
    DatasetMeasures: Fixed record of dataset-level scalars

Functions:
    compute_measures: Build a DatasetMeasures from precomputed statistics
"""

import math
from dataclasses import asdict, dataclass
from typing import Dict, Mapping

import numpy as np


@dataclass(frozen=True)
class DatasetMeasures:
    """
    Dataset-level measures.

    Attributes:
        num_attributes (int): Total number of columns, labels included
        num_instances (int): Number of rows
        num_inputs (int): Number of non-label attributes
        num_labels (int): Number of labels
        num_labelsets (int): Number of distinct labelsets
        num_single_labelsets (int): Labelsets that occur exactly once
        single_labelset_ratio (float): num_single_labelsets / num_labelsets
        max_frequency (int): Count of the most frequent labelset
        cardinality (float): Mean number of active labels per instance
        density (float): cardinality / num_labels
        mean_ir (float): Mean of the finite per-label imbalance ratios
        mean_ir_lbl (float): Mean of the finite inter-label imbalance ratios
        mean_scumble (float): Mean of the label-level SCUMBLE values, NaN excluded
        scumble_cv (float): Coefficient of variation of the instance SCUMBLE scores
        tcs (float): Theoretical complexity score, log(inputs * labels * labelsets)
        num_degenerate_labels (int): Labels constant across all instances
    """

    num_attributes: int
    num_instances: int
    num_inputs: int
    num_labels: int
    num_labelsets: int
    num_single_labelsets: int
    single_labelset_ratio: float
    max_frequency: int
    cardinality: float
    density: float
    mean_ir: float
    mean_ir_lbl: float
    mean_scumble: float
    scumble_cv: float
    tcs: float
    num_degenerate_labels: int

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)


def _finite_mean(values: np.ndarray) -> float:
    finite = values[np.isfinite(values)]
    if finite.size == 0:
        return float("nan")
    return float(finite.mean())


def compute_measures(
    num_attributes: int,
    label_matrix: np.ndarray,
    labelsets: Mapping[tuple, int],
    ir: np.ndarray,
    ir_lbl: np.ndarray,
    label_scumble: np.ndarray,
    instance_scumble: np.ndarray,
    degenerate: np.ndarray,
) -> DatasetMeasures:
    """
    Compute the dataset-level measures.

    Args:
        num_attributes (int): Total number of columns in the table
        label_matrix (np.ndarray): Binary matrix, shape (num_instances, num_labels)
        labelsets (Mapping[tuple, int]): Labelset counts
        ir (np.ndarray): Imbalance ratio per label
        ir_lbl (np.ndarray): Inter-label imbalance ratio per label
        label_scumble (np.ndarray): SCUMBLE per label
        instance_scumble (np.ndarray): SCUMBLE per instance
        degenerate (np.ndarray): Boolean degenerate flag per label

    Returns:
        DatasetMeasures: The assembled measures
    """
    num_instances, num_labels = label_matrix.shape
    num_inputs = num_attributes - num_labels

    counts = list(labelsets.values())
    num_labelsets = len(counts)
    num_single = sum(1 for c in counts if c == 1)

    if num_instances > 0:
        cardinality = float(label_matrix.sum()) / num_instances
    else:
        cardinality = float("nan")

    if num_instances > 1 and instance_scumble.mean() > 0:
        scumble_cv = float(instance_scumble.std(ddof=1) / instance_scumble.mean())
    else:
        scumble_cv = float("nan")

    complexity = num_inputs * num_labels * num_labelsets
    tcs = math.log(complexity) if complexity > 0 else float("nan")

    return DatasetMeasures(
        num_attributes=int(num_attributes),
        num_instances=int(num_instances),
        num_inputs=int(num_inputs),
        num_labels=int(num_labels),
        num_labelsets=num_labelsets,
        num_single_labelsets=num_single,
        single_labelset_ratio=num_single / num_labelsets if num_labelsets else float("nan"),
        max_frequency=max(counts) if counts else 0,
        cardinality=cardinality,
        density=cardinality / num_labels,
        mean_ir=_finite_mean(ir),
        mean_ir_lbl=_finite_mean(ir_lbl),
        mean_scumble=_finite_mean(label_scumble),
        scumble_cv=scumble_cv,
        tcs=tcs,
        num_degenerate_labels=int(np.count_nonzero(degenerate)),
    )
