"""
Evaluation metrics for multi-label classification.

This module scores predictions against a binary ground-truth matrix:
- Example-based: subset accuracy, Hamming loss, accuracy, precision, recall, F-measure
- Ranking-based: one-error, coverage, ranking loss, average precision
- Label-based macro: precision, recall, F-measure and AUC per label, then averaged
- Label-based micro: precision, recall, F-measure and AUC on pooled counts

Predictions may be binary or real-valued scores. Scores are binarized with
``>= threshold`` for the bipartition metrics; ranking metrics need real-valued
scores and raise RequiresScores on purely binary predictions.

Classes:
    EvaluationResult: Read-only mapping of metric name to value

Functions:
    evaluate: Compute a set of metrics, degrading failures to NaN
    evaluate_dataset: Evaluate predictions against a dataset's label matrix
    apply_threshold: Convert scores to binary predictions
    is_binary: Check whether predictions are purely 0/1
    compute_per_label_metrics: Per-label precision, recall, F-measure, AUC, support
    compute_*: One function per metric
"""

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import Callable, Dict, Iterable, Iterator, Optional, Sequence, Tuple

import numpy as np
import pandas as pd
from sklearn.metrics import (
    accuracy_score,
    confusion_matrix,
    coverage_error,
    hamming_loss,
    label_ranking_average_precision_score,
    roc_auc_score,
)

from labelscope.exceptions import (
    InvalidInput,
    LabelscopeError,
    RequiresScores,
    ShapeMismatch,
)
from labelscope.summary import DescriptorKind, summarize

logger = logging.getLogger(__name__)


# ============================================================================
# Input handling
# ============================================================================


def _validate_inputs(targets, predictions) -> Tuple[np.ndarray, np.ndarray]:
    """Return ground truth as an int8 matrix and predictions as float64."""
    try:
        Y = np.asarray(targets, dtype=np.float64)
        P = np.asarray(predictions, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise InvalidInput(f"Targets and predictions must be numeric matrices: {e}") from e

    if Y.ndim != 2 or P.ndim != 2:
        raise InvalidInput(
            f"Targets and predictions must be 2-D, got {Y.ndim}-D and {P.ndim}-D"
        )
    if Y.shape != P.shape:
        raise ShapeMismatch(
            f"Targets have shape {Y.shape} but predictions have shape {P.shape}"
        )
    if Y.shape[0] < 1 or Y.shape[1] < 1:
        raise InvalidInput(f"At least one instance and one label are required, got {Y.shape}")
    if not np.isin(Y, (0.0, 1.0)).all():
        raise InvalidInput("Targets must be binary (0/1)")
    if not np.isfinite(P).all():
        raise InvalidInput("Predictions contain NaN or infinite values")

    return Y.astype(np.int8), P


def is_binary(predictions) -> bool:
    """
    Check whether every prediction is exactly 0 or 1.

    Example:
        >>> is_binary([[1, 0], [0, 1]])
        True
        >>> is_binary([[0.9, 0.1], [0.2, 0.7]])
        False
    """
    return bool(np.isin(np.asarray(predictions, dtype=np.float64), (0.0, 1.0)).all())


def apply_threshold(predictions, threshold: float = 0.5) -> np.ndarray:
    """
    Convert scores to binary predictions.

    Binary predictions are returned unchanged (as int8).

    Args:
        predictions: Prediction scores, shape (num_instances, num_labels)
        threshold (float, optional): Classification threshold. Defaults to 0.5.

    Returns:
        np.ndarray: Binary int8 predictions

    Example:
        >>> apply_threshold([[0.7, 0.3, 0.9], [0.2, 0.6, 0.4]])
        array([[1, 0, 1],
               [0, 1, 0]], dtype=int8)
    """
    P = np.asarray(predictions, dtype=np.float64)
    if is_binary(P):
        return P.astype(np.int8)
    return (P >= threshold).astype(np.int8)


def _require_scores(P: np.ndarray, metric: str) -> None:
    if is_binary(P):
        raise RequiresScores(
            f"{metric} is a ranking metric and needs real-valued scores, "
            "but the predictions are purely binary"
        )


# ============================================================================
# Example-based metrics
# ============================================================================


def compute_subset_accuracy(targets, predictions, threshold: float = 0.5) -> float:
    """
    Compute subset accuracy (exact match ratio).

    The fraction of instances whose predicted labelset equals the true one.

    Example:
        >>> compute_subset_accuracy([[1, 0], [0, 1], [1, 1]], [[1, 0], [0, 1], [1, 0]])
        0.6666666666666666
    """
    Y, P = _validate_inputs(targets, predictions)
    return float(accuracy_score(Y, apply_threshold(P, threshold)))


def compute_hamming_loss(targets, predictions, threshold: float = 0.5) -> float:
    """
    Compute Hamming loss (fraction of incorrect label bits).

    Lower is better (0 = perfect, 1 = every bit wrong).

    Example:
        >>> compute_hamming_loss([[1, 0], [0, 1], [1, 1]], [[1, 0], [0, 1], [1, 0]])
        0.16666666666666666
    """
    Y, P = _validate_inputs(targets, predictions)
    return float(hamming_loss(Y, apply_threshold(P, threshold)))


def _instance_overlap(targets, predictions, threshold: float):
    Y, P = _validate_inputs(targets, predictions)
    Z = apply_threshold(P, threshold)
    intersection = (Y & Z).sum(axis=1).astype(np.float64)
    n_true = Y.sum(axis=1).astype(np.float64)
    n_pred = Z.sum(axis=1).astype(np.float64)
    both_empty = (n_true == 0) & (n_pred == 0)
    return intersection, n_true, n_pred, both_empty


def _mean_ratio(numerator, denominator, both_empty) -> float:
    # Empty true and predicted labelsets agree perfectly; other zero
    # denominators contribute 0
    ratios = np.zeros_like(numerator)
    defined = denominator > 0
    ratios[defined] = numerator[defined] / denominator[defined]
    ratios[both_empty] = 1.0
    return float(ratios.mean())


def compute_accuracy(targets, predictions, threshold: float = 0.5) -> float:
    """
    Compute example-based accuracy, the mean of |T ∩ P| / |T ∪ P|.

    Example:
        >>> compute_accuracy([[1, 1], [0, 0]], [[1, 0], [0, 0]])
        0.75
    """
    intersection, n_true, n_pred, both_empty = _instance_overlap(targets, predictions, threshold)
    union = n_true + n_pred - intersection
    return _mean_ratio(intersection, union, both_empty)


def compute_precision(targets, predictions, threshold: float = 0.5) -> float:
    """Compute example-based precision, the mean of |T ∩ P| / |P|."""
    intersection, _, n_pred, both_empty = _instance_overlap(targets, predictions, threshold)
    return _mean_ratio(intersection, n_pred, both_empty)


def compute_recall(targets, predictions, threshold: float = 0.5) -> float:
    """Compute example-based recall, the mean of |T ∩ P| / |T|."""
    intersection, n_true, _, both_empty = _instance_overlap(targets, predictions, threshold)
    return _mean_ratio(intersection, n_true, both_empty)


def compute_fmeasure(targets, predictions, threshold: float = 0.5) -> float:
    """
    Compute example-based F-measure.

    Per instance this is the harmonic mean of precision and recall,
    2|T ∩ P| / (|T| + |P|), averaged over instances.
    """
    intersection, n_true, n_pred, both_empty = _instance_overlap(targets, predictions, threshold)
    return _mean_ratio(2.0 * intersection, n_true + n_pred, both_empty)


# ============================================================================
# Ranking-based metrics
# ============================================================================


def _ranking_rows(Y: np.ndarray, metric: str, need_negative: bool = False) -> np.ndarray:
    n_true = Y.sum(axis=1)
    rows = n_true > 0
    if need_negative:
        rows &= n_true < Y.shape[1]
    if not rows.any():
        raise InvalidInput(f"{metric} is undefined: no instance has a usable set of true labels")
    return rows


def compute_one_error(targets, predictions) -> float:
    """
    Compute one-error.

    The fraction of instances whose top-ranked label is not a true label.
    Instances without true labels are skipped; ties at the top go to the
    lowest label index.

    Raises:
        RequiresScores: If the predictions are purely binary

    Example:
        >>> compute_one_error([[1, 0, 0], [0, 1, 0]], [[0.9, 0.5, 0.1], [0.8, 0.6, 0.1]])
        0.5
    """
    Y, P = _validate_inputs(targets, predictions)
    _require_scores(P, "one_error")
    rows = _ranking_rows(Y, "one_error")

    top = P[rows].argmax(axis=1)
    hits = Y[rows][np.arange(top.size), top]
    return float((hits == 0).mean())


def compute_coverage(targets, predictions) -> float:
    """
    Compute coverage.

    The mean number of steps down the ranking (0-indexed) needed to reach every
    true label. Tied scores count as ranked ahead, so ties never lower the
    coverage. Instances without true labels are skipped.

    Raises:
        RequiresScores: If the predictions are purely binary

    Example:
        >>> compute_coverage([[1, 0, 1]], [[0.9, 0.5, 0.1]])
        2.0
    """
    Y, P = _validate_inputs(targets, predictions)
    _require_scores(P, "coverage")
    rows = _ranking_rows(Y, "coverage")

    # A single label is always at depth 0; sklearn needs two or more columns
    if Y.shape[1] == 1:
        return 0.0
    return float(coverage_error(Y[rows], P[rows])) - 1.0


def compute_ranking_loss(targets, predictions) -> float:
    """
    Compute ranking loss.

    For every instance, the fraction of (true, false) label pairs where the
    false label scores higher than the true one; tied pairs count 0.5. Averaged
    over instances that have at least one true and one false label.

    Raises:
        RequiresScores: If the predictions are purely binary

    Example:
        >>> compute_ranking_loss([[1, 0, 1]], [[0.9, 0.5, 0.1]])
        0.5
    """
    Y, P = _validate_inputs(targets, predictions)
    _require_scores(P, "ranking_loss")
    rows = _ranking_rows(Y, "ranking_loss", need_negative=True)

    losses = []
    for y, scores in zip(Y[rows], P[rows]):
        relevant = scores[y == 1][:, None]
        irrelevant = scores[y == 0][None, :]
        misordered = (relevant < irrelevant).sum() + 0.5 * (relevant == irrelevant).sum()
        losses.append(misordered / (relevant.size * irrelevant.size))

    return float(np.mean(losses))


def compute_average_precision(targets, predictions) -> float:
    """
    Compute label-ranking average precision.

    For each true label, the fraction of labels ranked at or above it that are
    true, averaged over the true labels of the instance and then over
    instances with at least one true label.

    Raises:
        RequiresScores: If the predictions are purely binary
    """
    Y, P = _validate_inputs(targets, predictions)
    _require_scores(P, "average_precision")
    rows = _ranking_rows(Y, "average_precision")
    return float(label_ranking_average_precision_score(Y[rows], P[rows]))


# ============================================================================
# Label-based metrics
# ============================================================================


def _label_confusion(targets, predictions, threshold: float):
    """Return per-label (tp, fp, fn, tn) vectors."""
    Y, P = _validate_inputs(targets, predictions)
    Z = apply_threshold(P, threshold)
    num_labels = Y.shape[1]
    cm = np.zeros((num_labels, 2, 2))

    # Each matrix is [[TN, FP], [FN, TP]]
    for j in range(num_labels):
        cm[j] = confusion_matrix(Y[:, j], Z[:, j], labels=[0, 1])

    return cm[:, 1, 1], cm[:, 0, 1], cm[:, 1, 0], cm[:, 0, 0]


def _labels_with_positives(tp: np.ndarray, fn: np.ndarray) -> np.ndarray:
    included = (tp + fn) > 0
    if not included.any():
        raise InvalidInput("Macro averages are undefined: no label has positive instances")
    return included


def _per_label_precision(tp: np.ndarray, fp: np.ndarray) -> np.ndarray:
    predicted = tp + fp
    return np.divide(tp, predicted, out=np.zeros_like(tp), where=predicted > 0)


def count_excluded_labels(targets) -> Dict[str, int]:
    """
    Count labels left out of the macro averages.

    Returns:
        Dict[str, int]: ``macro`` - labels without positive instances;
            ``macro_auc`` - labels without positive or without negative instances
    """
    Y = np.asarray(targets)
    positives = Y.sum(axis=0)
    negatives = Y.shape[0] - positives
    return {
        "macro": int(np.count_nonzero(positives == 0)),
        "macro_auc": int(np.count_nonzero((positives == 0) | (negatives == 0))),
    }


def compute_macro_precision(targets, predictions, threshold: float = 0.5) -> float:
    """
    Compute macro-averaged precision.

    Labels without positive instances are excluded from the mean. A label
    with no predicted positives has precision 0.
    """
    tp, fp, fn, _ = _label_confusion(targets, predictions, threshold)
    included = _labels_with_positives(tp, fn)
    return float(_per_label_precision(tp, fp)[included].mean())


def compute_macro_recall(targets, predictions, threshold: float = 0.5) -> float:
    """Compute macro-averaged recall over labels with positive instances."""
    tp, _, fn, _ = _label_confusion(targets, predictions, threshold)
    included = _labels_with_positives(tp, fn)
    return float((tp[included] / (tp[included] + fn[included])).mean())


def compute_macro_fmeasure(targets, predictions, threshold: float = 0.5) -> float:
    """Compute macro-averaged F-measure over labels with positive instances."""
    tp, fp, fn, _ = _label_confusion(targets, predictions, threshold)
    included = _labels_with_positives(tp, fn)
    f = 2 * tp[included] / (2 * tp[included] + fp[included] + fn[included])
    return float(f.mean())


def compute_macro_auc(targets, predictions) -> float:
    """
    Compute macro-averaged ROC-AUC.

    Each label's AUC is the rank-based estimate: the fraction of
    (positive, negative) instance pairs where the positive instance scores
    higher, ties credited 0.5. Labels lacking positive or negative instances
    are excluded.

    Example:
        >>> compute_macro_auc([[1, 0], [0, 1], [1, 1], [0, 0]],
        ...                   [[0.9, 0.2], [0.4, 0.7], [0.6, 0.4], [0.1, 0.3]])
        1.0
    """
    Y, P = _validate_inputs(targets, predictions)
    positives = Y.sum(axis=0)
    usable = (positives > 0) & (positives < Y.shape[0])
    if not usable.any():
        raise InvalidInput("Macro AUC is undefined: every label is constant")

    aucs = [roc_auc_score(Y[:, j], P[:, j]) for j in np.flatnonzero(usable)]
    return float(np.mean(aucs))


def compute_micro_precision(targets, predictions, threshold: float = 0.5) -> float:
    """Compute micro-averaged precision (0 when nothing is predicted)."""
    tp, fp, _, _ = _label_confusion(targets, predictions, threshold)
    predicted = tp.sum() + fp.sum()
    return float(tp.sum() / predicted) if predicted > 0 else 0.0


def compute_micro_recall(targets, predictions, threshold: float = 0.5) -> float:
    """Compute micro-averaged recall."""
    tp, _, fn, _ = _label_confusion(targets, predictions, threshold)
    actual = tp.sum() + fn.sum()
    if actual == 0:
        raise InvalidInput("Micro recall is undefined: there are no positive labels")
    return float(tp.sum() / actual)


def compute_micro_fmeasure(targets, predictions, threshold: float = 0.5) -> float:
    """Compute micro-averaged F-measure, 2TP / (2TP + FP + FN) on pooled counts."""
    tp, fp, fn, _ = _label_confusion(targets, predictions, threshold)
    denominator = 2 * tp.sum() + fp.sum() + fn.sum()
    if denominator == 0:
        raise InvalidInput(
            "Micro F-measure is undefined: no positive labels and no positive predictions"
        )
    return float(2 * tp.sum() / denominator)


def compute_micro_auc(targets, predictions) -> float:
    """
    Compute micro-averaged ROC-AUC over every (instance, label) pair pooled.

    Raises:
        InvalidInput: If the pooled ground truth holds only one class
    """
    Y, P = _validate_inputs(targets, predictions)
    pooled = Y.ravel()
    if pooled.min() == pooled.max():
        raise InvalidInput("Micro AUC is undefined: the ground truth holds a single class")
    return float(roc_auc_score(pooled, P.ravel()))


def compute_per_label_metrics(
    targets,
    predictions,
    label_names: Optional[Sequence[str]] = None,
    threshold: float = 0.5,
) -> pd.DataFrame:
    """
    Compute detailed metrics for each label.

    Args:
        targets: Ground truth binary labels, shape (num_instances, num_labels)
        predictions: Binary predictions or scores, same shape
        label_names (Optional[Sequence[str]], optional): Names of labels. If None, uses indices.
        threshold (float, optional): Classification threshold. Defaults to 0.5.

    Returns:
        pd.DataFrame: One row per label with columns:
            - 'precision': Precision for this label (0 if nothing predicted)
            - 'recall': Recall for this label (NaN without positive instances)
            - 'fmeasure': F-measure for this label (NaN without positive instances)
            - 'auc': ROC-AUC (NaN when the label is constant)
            - 'support': Number of positive instances

    Example:
        >>> table = compute_per_label_metrics(Y, scores, ['Action', 'Comedy', 'Drama'])
        >>> table.loc['Action', 'support']
        45
    """
    Y, P = _validate_inputs(targets, predictions)
    num_labels = Y.shape[1]

    if label_names is None:
        label_names = [f"label_{j}" for j in range(num_labels)]
    if len(label_names) != num_labels:
        raise InvalidInput(f"Expected {num_labels} label names, got {len(label_names)}")

    tp, fp, fn, _ = _label_confusion(Y, P, threshold)
    support = (tp + fn).astype(np.int64)
    has_positives = support > 0

    recall = np.full(num_labels, np.nan)
    recall[has_positives] = tp[has_positives] / support[has_positives]
    fmeasure = np.full(num_labels, np.nan)
    fmeasure[has_positives] = 2 * tp[has_positives] / (
        2 * tp[has_positives] + fp[has_positives] + fn[has_positives]
    )

    auc = np.full(num_labels, np.nan)
    for j in np.flatnonzero(has_positives & (support < Y.shape[0])):
        auc[j] = roc_auc_score(Y[:, j], P[:, j])

    return pd.DataFrame(
        {
            "precision": _per_label_precision(tp, fp),
            "recall": recall,
            "fmeasure": fmeasure,
            "auc": auc,
            "support": support,
        },
        index=pd.Index(list(label_names), name="label"),
    )


# ============================================================================
# Evaluation entry points
# ============================================================================


BIPARTITION_METRICS = (
    "subset_accuracy",
    "hamming_loss",
    "accuracy",
    "precision",
    "recall",
    "fmeasure",
)
RANKING_METRICS = ("one_error", "coverage", "ranking_loss", "average_precision")
MACRO_METRICS = ("macro_precision", "macro_recall", "macro_fmeasure", "macro_auc")
MICRO_METRICS = ("micro_precision", "micro_recall", "micro_fmeasure", "micro_auc")
ALL_METRICS = BIPARTITION_METRICS + RANKING_METRICS + MACRO_METRICS + MICRO_METRICS


def _score_only(func: Callable) -> Callable:
    return lambda targets, predictions, threshold: func(targets, predictions)


_METRIC_FUNCTIONS: Dict[str, Callable[[np.ndarray, np.ndarray, float], float]] = {
    "subset_accuracy": compute_subset_accuracy,
    "hamming_loss": compute_hamming_loss,
    "accuracy": compute_accuracy,
    "precision": compute_precision,
    "recall": compute_recall,
    "fmeasure": compute_fmeasure,
    "one_error": _score_only(compute_one_error),
    "coverage": _score_only(compute_coverage),
    "ranking_loss": _score_only(compute_ranking_loss),
    "average_precision": _score_only(compute_average_precision),
    "macro_precision": compute_macro_precision,
    "macro_recall": compute_macro_recall,
    "macro_fmeasure": compute_macro_fmeasure,
    "macro_auc": _score_only(compute_macro_auc),
    "micro_precision": compute_micro_precision,
    "micro_recall": compute_micro_recall,
    "micro_fmeasure": compute_micro_fmeasure,
    "micro_auc": _score_only(compute_micro_auc),
}


class EvaluationResult(Mapping):
    """
    Read-only mapping from metric name to value.

    A metric that could not be computed maps to NaN and its error message is
    kept in ``errors``.

    Attributes:
        metrics (Mapping[str, float]): Metric values in computation order
        errors (Mapping[str, str]): Error message per failed metric
        excluded_labels (Mapping[str, int]): Labels left out of the macro averages
        threshold (float): Threshold used to binarize scores
        binary_predictions (bool): Whether the predictions were purely 0/1
    """

    kind = DescriptorKind.EVALUATION

    def __init__(
        self,
        metrics: Dict[str, float],
        errors: Optional[Dict[str, str]] = None,
        excluded_labels: Optional[Dict[str, int]] = None,
        threshold: float = 0.5,
        binary_predictions: bool = False,
    ):
        self._metrics = MappingProxyType(dict(metrics))
        self._errors = MappingProxyType(dict(errors or {}))
        self._excluded = MappingProxyType(dict(excluded_labels or {}))
        self._threshold = float(threshold)
        self._binary = bool(binary_predictions)

    @property
    def metrics(self) -> Mapping:
        return self._metrics

    @property
    def errors(self) -> Mapping:
        return self._errors

    @property
    def excluded_labels(self) -> Mapping:
        return self._excluded

    @property
    def threshold(self) -> float:
        return self._threshold

    @property
    def binary_predictions(self) -> bool:
        return self._binary

    def __getitem__(self, name: str) -> float:
        return self._metrics[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._metrics)

    def __len__(self) -> int:
        return len(self._metrics)

    def as_table(self) -> pd.DataFrame:
        """
        Return the result as a flat table for display.

        Columns: ``metric``, ``value`` and ``error`` (empty string when the
        metric succeeded). The excluded-label counts follow the metrics as
        ``<family>_excluded_labels`` rows.
        """
        rows = [
            {"metric": name, "value": value, "error": self._errors.get(name, "")}
            for name, value in self._metrics.items()
        ]
        rows.extend(
            {"metric": f"{family}_excluded_labels", "value": float(count), "error": ""}
            for family, count in self._excluded.items()
        )
        return pd.DataFrame(rows, columns=["metric", "value", "error"])

    def summary(self) -> pd.Series:
        return summarize(self)

    def __repr__(self) -> str:
        shown = ", ".join(f"{k}={v:.4f}" for k, v in self._metrics.items())
        return f"EvaluationResult({shown})"


def _resolve_metric_names(metrics: Optional[Iterable[str]]) -> Tuple[str, ...]:
    if metrics is None:
        return ALL_METRICS
    if isinstance(metrics, str):
        metrics = [metrics]
    names = tuple(metrics)
    unknown = [name for name in names if name not in _METRIC_FUNCTIONS]
    if unknown:
        raise InvalidInput(f"Unknown metrics {unknown}; available: {list(ALL_METRICS)}")
    return names


def evaluate(
    targets,
    predictions,
    metrics: Optional[Iterable[str]] = None,
    threshold: float = 0.5,
) -> EvaluationResult:
    """
    Compute multi-label evaluation metrics.

    Every metric is computed independently. A metric that fails (for example
    a ranking metric on binary predictions, or a macro average with no usable
    labels) is logged, recorded in ``errors`` and reported as NaN; the other
    metrics are still returned.

    Args:
        targets: Ground truth binary labels, shape (num_instances, num_labels)
        predictions: Binary predictions or real-valued scores, same shape
        metrics (Optional[Iterable[str]], optional): Metric names to compute.
            Defaults to ALL_METRICS.
        threshold (float, optional): Threshold used to binarize scores. Defaults to 0.5.

    Returns:
        EvaluationResult: Mapping from metric name to value

    Raises:
        ShapeMismatch: If targets and predictions differ in shape
        InvalidInput: If the inputs are empty, not 2-D, targets are not binary,
            or an unknown metric is requested

    Example:
        >>> result = evaluate([[1, 0], [0, 1], [1, 1]], [[1, 0], [0, 1], [1, 0]])
        >>> result['subset_accuracy'], result['hamming_loss']
        (0.6666666666666666, 0.16666666666666666)
    """
    Y, P = _validate_inputs(targets, predictions)
    names = _resolve_metric_names(metrics)

    values: Dict[str, float] = {}
    errors: Dict[str, str] = {}
    for name in names:
        try:
            values[name] = float(_METRIC_FUNCTIONS[name](Y, P, threshold))
        except (LabelscopeError, ValueError, ZeroDivisionError, FloatingPointError) as e:
            logger.warning(f"Metric '{name}' could not be computed: {e}")
            values[name] = float("nan")
            errors[name] = str(e)

    result = EvaluationResult(
        values,
        errors=errors,
        excluded_labels=count_excluded_labels(Y),
        threshold=threshold,
        binary_predictions=is_binary(P),
    )
    logger.debug(f"Evaluated {len(names)} metrics on {Y.shape[0]} instances, {len(errors)} failed")
    return result


def evaluate_dataset(dataset, predictions, **kwargs) -> EvaluationResult:
    """
    Evaluate predictions against the label matrix of a dataset descriptor.

    Args:
        dataset: A ``MultiLabelDataset``
        predictions: Binary predictions or scores, shape (num_instances, num_labels)
        **kwargs: Passed on to ``evaluate``
    """
    return evaluate(dataset.label_matrix, predictions, **kwargs)
