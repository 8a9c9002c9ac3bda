"""
Multi-label dataset descriptor.

This module builds the immutable descriptor of a multi-label dataset from a
pandas DataFrame: the validated table, the label statistics, the labelsets,
the per-instance SCUMBLE scores and the dataset-level measures.

Construction is all-or-nothing. Every structure is computed before the
descriptor is created, so a failure anywhere surfaces as a single exception
and no partially populated object is ever returned.

Classes:
    MultiLabelDataset: Immutable descriptor of a multi-label dataset
"""

import logging
import warnings
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional, Sequence, Tuple, Union

import numpy as np
import pandas as pd

from labelscope.data.imbalance import instance_scumble, label_scumble
from labelscope.data.label_sources import parse_header_hint, resolve_label_indices
from labelscope.data.measures import DatasetMeasures, compute_measures
from labelscope.data.statistics import (
    LabelDescriptor,
    LabelsetKey,
    compute_label_counts,
    compute_labelsets,
    imbalance_ratios,
    inter_label_imbalance,
)
from labelscope.data.table import AttributeDescriptor, LabeledTable, build_table
from labelscope.exceptions import DegenerateLabel, InvalidInput
from labelscope.summary import DescriptorKind, summarize

logger = logging.getLogger(__name__)


def _read_only(array: np.ndarray) -> np.ndarray:
    array.flags.writeable = False
    return array


@dataclass(frozen=True, eq=False)
class MultiLabelDataset:
    """
    Immutable descriptor of a multi-label dataset.

    Attributes:
        name (str): Dataset name
        table (LabeledTable): Validated table with the binary label matrix
        labels (Tuple[LabelDescriptor, ...]): Statistics of every label, in label order
        labelsets (Mapping[LabelsetKey, int]): Distinct labelsets, rarest first
        instance_label_counts (np.ndarray): Active labels per instance
        instance_scumble (np.ndarray): SCUMBLE score per instance
        measures (DatasetMeasures): Dataset-level measures

    Example:
        >>> df = pd.DataFrame({
        ...     'x': [0.5, 1.5, 2.5],
        ...     'a': [1, 0, 1],
        ...     'b': [0, 1, 1],
        ... })
        >>> ds = MultiLabelDataset.from_frame(df, label_names=['a', 'b'], name='toy')
        >>> ds.measures.cardinality
        1.3333333333333333
    """

    name: str
    table: LabeledTable
    labels: Tuple[LabelDescriptor, ...]
    labelsets: Mapping[LabelsetKey, int]
    instance_label_counts: np.ndarray
    instance_scumble: np.ndarray
    measures: DatasetMeasures

    kind = DescriptorKind.DATASET

    @classmethod
    def from_frame(
        cls,
        frame: pd.DataFrame,
        label_indices: Optional[Sequence[int]] = None,
        label_names: Optional[Sequence[str]] = None,
        label_amount: Optional[int] = None,
        label_file: Optional[Union[str, Path, Sequence[str]]] = None,
        header_hint: Optional[str] = None,
        name: Optional[str] = None,
    ) -> "MultiLabelDataset":
        """
        Build a descriptor from a DataFrame.

        The label columns are resolved with the priority
        label_indices > label_names > label_amount > label_file > header_hint.

        Args:
            frame (pd.DataFrame): Table with one row per instance
            label_indices (Optional[Sequence[int]]): 0-based label column positions
            label_names (Optional[Sequence[str]]): Label column names
            label_amount (Optional[int]): Number of trailing label columns
            label_file (Optional): Side-channel label-name file, or a list of names
            header_hint (Optional[str]): Relation header with a ``-C n`` option;
                also supplies the dataset name when ``name`` is not given
            name (Optional[str]): Dataset name

        Returns:
            MultiLabelDataset: The descriptor

        Raises:
            InvalidInput: If the labels cannot be resolved or the table is invalid
        """
        if not isinstance(frame, pd.DataFrame):
            raise InvalidInput(f"Expected a pandas DataFrame, got {type(frame).__name__}")

        if name is None and header_hint is not None:
            name = parse_header_hint(header_hint, strict=False)[0] or None

        indices = resolve_label_indices(
            [str(c) for c in frame.columns],
            label_indices=label_indices,
            label_names=label_names,
            label_amount=label_amount,
            label_file=label_file,
            header_hint=header_hint,
        )
        table = build_table(frame, indices)
        return cls._from_table(table, name or "dataset")

    @classmethod
    def from_csv(
        cls, path: Union[str, Path], name: Optional[str] = None, **label_options
    ) -> "MultiLabelDataset":
        """
        Read a CSV file with pandas and build a descriptor.

        Args:
            path (Union[str, Path]): CSV file with a header row
            name (Optional[str]): Dataset name, defaults to the file stem
            **label_options: Label resolution options accepted by ``from_frame``

        Raises:
            FileNotFoundError: If the file does not exist
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Dataset file not found: {path}")

        frame = pd.read_csv(path)
        logger.info(f"Read {len(frame)} rows and {frame.shape[1]} columns from {path}")
        return cls.from_frame(frame, name=name or path.stem, **label_options)

    @classmethod
    def _from_table(cls, table: LabeledTable, name: str) -> "MultiLabelDataset":
        Y = table.label_matrix
        num_instances = table.num_instances

        positives, negatives = compute_label_counts(Y)
        ir = imbalance_ratios(positives, negatives)
        ir_lbl = inter_label_imbalance(positives)
        degenerate = np.minimum(positives, negatives) == 0

        labelsets = compute_labelsets(Y)
        label_counts = Y.sum(axis=1).astype(np.int64)
        scumble_per_instance = instance_scumble(Y, ir_lbl)
        scumble_per_label = label_scumble(Y, scumble_per_instance)

        label_names = table.label_names
        labels = tuple(
            LabelDescriptor(
                index=table.label_indices[j],
                name=label_names[j],
                count=int(positives[j]),
                negatives=int(negatives[j]),
                frequency=float(positives[j]) / num_instances if num_instances else float("nan"),
                ir=float(ir[j]),
                ir_lbl=float(ir_lbl[j]),
                scumble=float(scumble_per_label[j]),
                degenerate=bool(degenerate[j]),
            )
            for j in range(table.num_labels)
        )

        measures = compute_measures(
            num_attributes=table.num_attributes,
            label_matrix=Y,
            labelsets=labelsets,
            ir=ir,
            ir_lbl=ir_lbl,
            label_scumble=scumble_per_label,
            instance_scumble=scumble_per_instance,
            degenerate=degenerate,
        )

        dataset = cls(
            name=name,
            table=table,
            labels=labels,
            labelsets=labelsets,
            instance_label_counts=_read_only(label_counts),
            instance_scumble=_read_only(scumble_per_instance),
            measures=measures,
        )

        if degenerate.any():
            constant = [label.name for label in labels if label.degenerate]
            message = (
                f"Dataset '{name}': labels constant across all instances: {constant}; "
                "their imbalance ratio is infinite and excluded from mean_ir"
            )
            logger.warning(message)
            warnings.warn(message, DegenerateLabel, stacklevel=3)

        logger.info(
            f"Built dataset '{name}': {measures.num_instances} instances, "
            f"{measures.num_labels} labels, {measures.num_labelsets} labelsets"
        )
        return dataset

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------

    @property
    def label_matrix(self) -> np.ndarray:
        return self.table.label_matrix

    @property
    def label_names(self):
        return [label.name for label in self.labels]

    @property
    def attributes(self) -> Tuple[AttributeDescriptor, ...]:
        return self.table.attributes

    @property
    def num_instances(self) -> int:
        return self.measures.num_instances

    @property
    def num_labels(self) -> int:
        return self.measures.num_labels

    def to_frame(self) -> pd.DataFrame:
        """Return a copy of the table with label columns coded as 0/1."""
        return self.table.frame.copy()

    def labels_frame(self) -> pd.DataFrame:
        """Return the label statistics as a DataFrame indexed by label name."""
        frame = pd.DataFrame([vars(label) for label in self.labels])
        return frame.set_index("name")

    def labelsets_frame(self) -> pd.DataFrame:
        """
        Return the labelsets as a DataFrame, rarest first.

        Columns: ``labelset`` (the 0/1 string, e.g. ``"101"``), ``labels``
        (names of the active labels) and ``count``.
        """
        names = self.label_names
        rows = [
            {
                "labelset": "".join(str(bit) for bit in key),
                "labels": [names[j] for j, bit in enumerate(key) if bit],
                "count": count,
            }
            for key, count in self.labelsets.items()
        ]
        return pd.DataFrame(rows, columns=["labelset", "labels", "count"])

    def instances_frame(self) -> pd.DataFrame:
        """Return the per-instance label count and SCUMBLE score."""
        return pd.DataFrame(
            {
                "label_count": self.instance_label_counts,
                "scumble": self.instance_scumble,
            },
            index=self.table.frame.index,
        )

    def summary(self) -> pd.Series:
        return summarize(self)

    def __repr__(self) -> str:
        return (
            f"MultiLabelDataset(name={self.name!r}, "
            f"instances={self.num_instances}, labels={self.num_labels}, "
            f"labelsets={self.measures.num_labelsets})"
        )
