"""
Evaluation package for multi-label classification.

This package provides evaluation metrics including:
- Subset accuracy and Hamming loss
- Example-based accuracy, precision, recall and F-measure
- Ranking metrics: one-error, coverage, ranking loss, average precision
- Macro and micro averaged precision, recall, F-measure and ROC-AUC

Modules:
    metrics: Evaluation metrics and utilities
"""

from .metrics import (
    ALL_METRICS,
    BIPARTITION_METRICS,
    RANKING_METRICS,
    MACRO_METRICS,
    MICRO_METRICS,
    EvaluationResult,
    evaluate,
    evaluate_dataset,
    apply_threshold,
    is_binary,
    count_excluded_labels,
    compute_subset_accuracy,
    compute_hamming_loss,
    compute_accuracy,
    compute_precision,
    compute_recall,
    compute_fmeasure,
    compute_one_error,
    compute_coverage,
    compute_ranking_loss,
    compute_average_precision,
    compute_macro_precision,
    compute_macro_recall,
    compute_macro_fmeasure,
    compute_macro_auc,
    compute_micro_precision,
    compute_micro_recall,
    compute_micro_fmeasure,
    compute_micro_auc,
    compute_per_label_metrics,
)

__all__ = [
    'ALL_METRICS',
    'BIPARTITION_METRICS',
    'RANKING_METRICS',
    'MACRO_METRICS',
    'MICRO_METRICS',
    'EvaluationResult',
    'evaluate',
    'evaluate_dataset',
    'apply_threshold',
    'is_binary',
    'count_excluded_labels',
    'compute_subset_accuracy',
    'compute_hamming_loss',
    'compute_accuracy',
    'compute_precision',
    'compute_recall',
    'compute_fmeasure',
    'compute_one_error',
    'compute_coverage',
    'compute_ranking_loss',
    'compute_average_precision',
    'compute_macro_precision',
    'compute_macro_recall',
    'compute_macro_fmeasure',
    'compute_macro_auc',
    'compute_micro_precision',
    'compute_micro_recall',
    'compute_micro_fmeasure',
    'compute_micro_auc',
    'compute_per_label_metrics',
]
