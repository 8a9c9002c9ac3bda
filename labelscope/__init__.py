"""
labelscope: characterization and evaluation of multi-label datasets.

Subpackages:
    data: Dataset descriptor, label statistics and SCUMBLE measures
    evaluation: Multi-label evaluation metrics
    utils: Configuration and reporting
"""

from .exceptions import (
    LabelscopeError,
    InvalidInput,
    ShapeMismatch,
    RequiresScores,
    DegenerateLabel,
)
from .summary import DescriptorKind, summarize
from .data import MultiLabelDataset, DatasetCatalog
from .evaluation import EvaluationResult, evaluate, evaluate_dataset

__version__ = "1.0.0"

__all__ = [
    'LabelscopeError',
    'InvalidInput',
    'ShapeMismatch',
    'RequiresScores',
    'DegenerateLabel',
    'DescriptorKind',
    'summarize',
    'MultiLabelDataset',
    'DatasetCatalog',
    'EvaluationResult',
    'evaluate',
    'evaluate_dataset',
]
