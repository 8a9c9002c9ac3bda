"""
Data package for multi-label datasets.

This package provides:
- Table validation and label coding
- Label resolution from indices, names, counts, label files or header hints
- Label, labelset and SCUMBLE statistics
- The immutable dataset descriptor and named dataset catalogs

Modules:
    table: Table model and label coercion
    label_sources: Label index resolution
    statistics: Per-label and per-labelset statistics
    imbalance: SCUMBLE concentration measures
    measures: Dataset-level measures
    dataset: MultiLabelDataset descriptor
    catalog: DatasetCatalog of named loaders
"""

from .table import (
    AttributeKind,
    AttributeDescriptor,
    LabeledTable,
    build_table,
    coerce_label_column,
)
from .label_sources import (
    resolve_label_indices,
    parse_header_hint,
    read_label_names,
)
from .statistics import (
    LabelDescriptor,
    compute_label_counts,
    imbalance_ratios,
    inter_label_imbalance,
    compute_labelsets,
)
from .imbalance import instance_scumble, label_scumble
from .measures import DatasetMeasures, compute_measures
from .dataset import MultiLabelDataset
from .catalog import DatasetCatalog

__all__ = [
    # Table
    'AttributeKind',
    'AttributeDescriptor',
    'LabeledTable',
    'build_table',
    'coerce_label_column',

    # Labels
    'resolve_label_indices',
    'parse_header_hint',
    'read_label_names',

    # Statistics
    'LabelDescriptor',
    'compute_label_counts',
    'imbalance_ratios',
    'inter_label_imbalance',
    'compute_labelsets',
    'instance_scumble',
    'label_scumble',
    'DatasetMeasures',
    'compute_measures',

    # Descriptors
    'MultiLabelDataset',
    'DatasetCatalog',
]
