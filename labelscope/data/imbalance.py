"""
Imbalance and concentration measures (SCUMBLE).

SCUMBLE quantifies how much an instance mixes very frequent labels with very
rare ones. For an instance i with active labels L(i):

    scumble(i) = 1 - GM(IRLbl(l), l in L(i)) / AM(IRLbl(l), l in L(i))

where GM and AM are the geometric and arithmetic means. Instances with fewer
than two active labels score 0. The label-level SCUMBLE is the mean of the
instance scores over the instances where the label is active.

Reference:
    Charte, F., Rivera, A., del Jesus, M. J., Herrera, F. (2014).
    Concurrence among imbalanced labels and its influence on multilabel
    resampling algorithms. HAIS 2014.

Functions:
    instance_scumble: SCUMBLE score of every instance
    label_scumble: Mean instance SCUMBLE per label
"""

import numpy as np


def instance_scumble(label_matrix: np.ndarray, ir_lbl: np.ndarray) -> np.ndarray:
    """
    Compute the SCUMBLE score of every instance.

    Args:
        label_matrix (np.ndarray): Binary matrix, shape (num_instances, num_labels)
        ir_lbl (np.ndarray): Inter-label imbalance ratio per label, shape (num_labels,)

    Returns:
        np.ndarray: Scores in [0, 1], shape (num_instances,)

    Example:
        >>> Y = np.array([[1, 1], [1, 0]])
        >>> instance_scumble(Y, np.array([1.0, 9.0]))
        array([0.4, 0. ])
    """
    active = label_matrix.astype(bool)
    num_active = active.sum(axis=1)
    scores = np.zeros(label_matrix.shape[0], dtype=np.float64)

    mixed = num_active > 1
    if not mixed.any():
        return scores

    # Active labels always have a finite, positive IRLbl
    safe_ir = np.where(np.isfinite(ir_lbl) & (ir_lbl > 0), ir_lbl, 1.0)
    weights = active[mixed]
    k = num_active[mixed]

    arithmetic = (weights * safe_ir).sum(axis=1) / k
    geometric = np.exp((weights * np.log(safe_ir)).sum(axis=1) / k)

    scores[mixed] = np.clip(1.0 - geometric / arithmetic, 0.0, 1.0)
    return scores


def label_scumble(label_matrix: np.ndarray, scores: np.ndarray) -> np.ndarray:
    """
    Average the instance SCUMBLE scores over the instances of each label.

    Args:
        label_matrix (np.ndarray): Binary matrix, shape (num_instances, num_labels)
        scores (np.ndarray): Instance SCUMBLE scores, shape (num_instances,)

    Returns:
        np.ndarray: Mean score per label, NaN for labels that are never active

    Example:
        >>> label_scumble(np.array([[1, 1], [1, 0]]), np.array([0.4, 0.0]))
        array([0.2, 0.4])
    """
    active = label_matrix.astype(bool)
    counts = active.sum(axis=0)
    totals = (active * scores[:, None]).sum(axis=0)

    result = np.full(label_matrix.shape[1], np.nan)
    present = counts > 0
    result[present] = totals[present] / counts[present]
    return result
