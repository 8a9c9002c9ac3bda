"""
Label statistics for multi-label datasets.

This module computes the per-label and per-labelset statistics of a binary
label matrix:
- Positive/negative instance counts per label
- Imbalance ratio within each label (majority / minority)
- Inter-label imbalance ratio (most frequent label count / label count)
- Distinct labelsets with their frequencies

Classes:
    LabelDescriptor: Immutable record describing one label

Functions:
    compute_label_counts: Count positive and negative instances per label
    imbalance_ratios: Majority/minority ratio for each label
    inter_label_imbalance: Ratio of the most frequent label count to each label count
    compute_labelsets: Count distinct labelsets, rarest first
"""

from collections import Counter
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Tuple

import numpy as np


LabelsetKey = Tuple[int, ...]


@dataclass(frozen=True)
class LabelDescriptor:
    """
    Statistics of a single label.

    Attributes:
        index (int): Column position of the label in the table
        name (str): Label name
        count (int): Instances where the label is active
        negatives (int): Instances where the label is inactive
        frequency (float): count / number of instances (NaN for an empty dataset)
        ir (float): max(count, negatives) / min(count, negatives), inf when the
            label is constant
        ir_lbl (float): Inter-label imbalance ratio, inf when the label is never active
        scumble (float): Mean instance SCUMBLE over the instances where the label
            is active, NaN when it is never active
        degenerate (bool): True when the label has the same value in every instance
    """

    index: int
    name: str
    count: int
    negatives: int
    frequency: float
    ir: float
    ir_lbl: float
    scumble: float
    degenerate: bool


def compute_label_counts(label_matrix: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """
    Count positive and negative instances per label.

    Args:
        label_matrix (np.ndarray): Binary matrix, shape (num_instances, num_labels)

    Returns:
        Tuple[np.ndarray, np.ndarray]: Positive and negative counts, shape (num_labels,)

    Example:
        >>> compute_label_counts(np.array([[1, 0], [1, 1], [0, 0]]))
        (array([2, 1]), array([1, 2]))
    """
    positives = label_matrix.sum(axis=0).astype(np.int64)
    negatives = label_matrix.shape[0] - positives
    return positives, negatives


def imbalance_ratios(positives: np.ndarray, negatives: np.ndarray) -> np.ndarray:
    """
    Compute the imbalance ratio of every label.

    IR = majority count / minority count. It depends on the majority/minority
    roles only, so inverting a label column leaves it unchanged. Labels whose
    minority count is zero get +inf.

    Args:
        positives (np.ndarray): Positive counts per label
        negatives (np.ndarray): Negative counts per label

    Returns:
        np.ndarray: float64 ratios, shape (num_labels,)

    Example:
        >>> imbalance_ratios(np.array([90, 10, 5]), np.array([10, 90, 0]))
        array([ 9.,  9., inf])
    """
    majority = np.maximum(positives, negatives).astype(np.float64)
    minority = np.minimum(positives, negatives).astype(np.float64)

    ratios = np.full(majority.shape, np.inf)
    finite = minority > 0
    ratios[finite] = majority[finite] / minority[finite]
    return ratios


def inter_label_imbalance(positives: np.ndarray) -> np.ndarray:
    """
    Compute the inter-label imbalance ratio (IRLbl) of every label.

    IRLbl(l) = max over labels of the positive count / positive count of l.
    The most frequent label gets 1; labels that are never active get +inf.

    Args:
        positives (np.ndarray): Positive counts per label

    Returns:
        np.ndarray: float64 ratios, shape (num_labels,)

    Example:
        >>> inter_label_imbalance(np.array([90, 10, 0]))
        array([ 1.,  9., inf])
    """
    counts = positives.astype(np.float64)
    ratios = np.full(counts.shape, np.inf)
    active = counts > 0
    if active.any():
        ratios[active] = counts.max() / counts[active]
    return ratios


def compute_labelsets(label_matrix: np.ndarray) -> Mapping[LabelsetKey, int]:
    """
    Count the distinct labelsets of a label matrix.

    Each row is used as a composite key (a tuple of 0/1 per label). The result
    iterates in ascending order of count; labelsets with equal counts keep the
    order in which they first appear in the rows.

    Args:
        label_matrix (np.ndarray): Binary matrix, shape (num_instances, num_labels)

    Returns:
        Mapping[LabelsetKey, int]: Read-only mapping from labelset to count

    Example:
        >>> sets = compute_labelsets(np.array([[1, 0], [0, 1], [1, 0]]))
        >>> list(sets.items())
        [((0, 1), 1), ((1, 0), 2)]
    """
    # Counter keeps first-seen insertion order and sorted() is stable
    counts = Counter(tuple(int(v) for v in row) for row in label_matrix)
    ordered = dict(sorted(counts.items(), key=lambda item: item[1]))
    return MappingProxyType(ordered)
