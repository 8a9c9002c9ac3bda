"""
Table model for multi-label datasets.

This module validates a raw pandas DataFrame together with the positions of its
label columns, coerces the label columns to {0, 1} and records the type of every
other attribute.

Classes:
    AttributeKind: Semantic type of an attribute
    AttributeDescriptor: Name, kind and nominal levels of one attribute
    LabeledTable: Validated table with a read-only label matrix

Functions:
    build_table: Validate a DataFrame and build a LabeledTable
    coerce_label_column: Map a raw label column to {0, 1}
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence, Tuple

import numpy as np
import pandas as pd
from pandas.api import types as ptypes

from labelscope.exceptions import InvalidInput

logger = logging.getLogger(__name__)


class AttributeKind(str, Enum):
    """Semantic type of a table attribute."""

    NUMERIC = "numeric"
    NOMINAL = "nominal"
    LABEL = "label"


@dataclass(frozen=True)
class AttributeDescriptor:
    """
    Description of one column of the table.

    Attributes:
        index (int): Column position in the table
        name (str): Column name
        kind (AttributeKind): Semantic type
        levels (Tuple[str, ...]): Observed levels for nominal attributes,
            ("0", "1") for labels, empty for numeric attributes
    """

    index: int
    name: str
    kind: AttributeKind
    levels: Tuple[str, ...] = ()

    @property
    def is_label(self) -> bool:
        return self.kind is AttributeKind.LABEL

    def type_string(self) -> str:
        """Return an ARFF-like type string ('numeric' or '{a,b,c}')."""
        if self.kind is AttributeKind.NUMERIC:
            return "numeric"
        return "{" + ",".join(self.levels) + "}"


@dataclass(frozen=True, eq=False)
class LabeledTable:
    """
    A validated table whose label columns are coded as {0, 1}.

    Attributes:
        frame (pd.DataFrame): Private copy of the data with coerced label columns
        attributes (Tuple[AttributeDescriptor, ...]): One descriptor per column
        label_indices (Tuple[int, ...]): Positions of the label columns
        label_matrix (np.ndarray): Read-only int8 array, shape (num_instances, num_labels)
    """

    frame: pd.DataFrame
    attributes: Tuple[AttributeDescriptor, ...]
    label_indices: Tuple[int, ...]
    label_matrix: np.ndarray

    @property
    def num_instances(self) -> int:
        return int(self.label_matrix.shape[0])

    @property
    def num_labels(self) -> int:
        return len(self.label_indices)

    @property
    def num_attributes(self) -> int:
        return len(self.attributes)

    @property
    def label_names(self) -> List[str]:
        return [self.attributes[i].name for i in self.label_indices]

    @property
    def input_indices(self) -> List[int]:
        return [a.index for a in self.attributes if not a.is_label]


def _validate_label_indices(
    label_indices: Sequence[int], num_columns: int
) -> Tuple[int, ...]:
    if num_columns == 0:
        raise InvalidInput("The table has no columns")

    if label_indices is None or len(label_indices) == 0:
        raise InvalidInput("At least one label column must be designated")

    validated = []
    for idx in label_indices:
        if isinstance(idx, (bool, np.bool_)) or not isinstance(idx, (int, np.integer)):
            raise InvalidInput(f"Label index {idx!r} is not an integer")
        if idx < 0 or idx >= num_columns:
            raise InvalidInput(
                f"Label index {idx} out of range for a table with {num_columns} columns"
            )
        validated.append(int(idx))

    if len(set(validated)) != len(validated):
        raise InvalidInput(f"Duplicated label indices: {list(label_indices)}")

    return tuple(validated)


def coerce_label_column(column: pd.Series) -> np.ndarray:
    """
    Map a raw label column to {0, 1}.

    Numeric columns (or columns whose every non-missing value parses as a
    number) become 1 where the value is nonzero and 0 where it is zero or
    missing. Any other column becomes 1 for non-empty values and 0 for missing
    or empty ones.

    Args:
        column (pd.Series): Raw label column

    Returns:
        np.ndarray: int8 array of zeros and ones

    Raises:
        InvalidInput: If the column holds more than two distinct raw values

    Example:
        >>> coerce_label_column(pd.Series(["1", "0", None]))
        array([1, 0, 0], dtype=int8)
    """
    present = column.dropna()
    if ptypes.is_object_dtype(column.dtype) or ptypes.is_string_dtype(column.dtype):
        present = present[present.astype(str).str.strip() != ""]

    distinct = pd.unique(present)
    if len(distinct) > 2:
        raise InvalidInput(
            f"Label column '{column.name}' has {len(distinct)} distinct values, "
            f"expected at most 2: {list(distinct[:5])}"
        )

    if ptypes.is_bool_dtype(column.dtype):
        return column.fillna(False).astype(bool).to_numpy().astype(np.int8)

    numeric = pd.to_numeric(present, errors="coerce")
    if ptypes.is_numeric_dtype(column.dtype) or not numeric.isna().any():
        values = pd.to_numeric(column, errors="coerce").fillna(0).to_numpy()
        return (values != 0).astype(np.int8)

    text = column.astype("string")
    active = text.notna() & (text.str.strip() != "")
    return active.fillna(False).to_numpy().astype(np.int8)


def _describe_attribute(index: int, name: str, column: pd.Series) -> AttributeDescriptor:
    if ptypes.is_bool_dtype(column.dtype) or ptypes.is_numeric_dtype(column.dtype):
        return AttributeDescriptor(index, name, AttributeKind.NUMERIC)

    if isinstance(column.dtype, pd.CategoricalDtype):
        levels = tuple(str(c) for c in column.cat.categories)
    else:
        levels = tuple(sorted({str(v) for v in column.dropna()}))

    return AttributeDescriptor(index, name, AttributeKind.NOMINAL, levels)


def build_table(
    frame: pd.DataFrame, label_indices: Optional[Sequence[int]]
) -> LabeledTable:
    """
    Validate a DataFrame and build a LabeledTable.

    Args:
        frame (pd.DataFrame): Raw table, one row per instance
        label_indices (Sequence[int]): 0-based positions of the label columns

    Returns:
        LabeledTable: Validated table

    Raises:
        InvalidInput: If the table has no columns, the label index set is
            empty, duplicated or out of range, or a label column is not binary

    Example:
        >>> df = pd.DataFrame({'x': [0.1, 0.2], 'a': [1, 0], 'b': [1, 1]})
        >>> table = build_table(df, [1, 2])
        >>> table.label_matrix
        array([[1, 1],
               [0, 1]], dtype=int8)
    """
    if not isinstance(frame, pd.DataFrame):
        raise InvalidInput(f"Expected a pandas DataFrame, got {type(frame).__name__}")

    indices = _validate_label_indices(label_indices, frame.shape[1])

    data = frame.copy()
    data.columns = [str(c) for c in data.columns]
    names = list(data.columns)

    label_columns = []
    for idx in indices:
        coerced = coerce_label_column(data.iloc[:, idx])
        data.isetitem(idx, coerced)
        label_columns.append(coerced)

    attributes = []
    for idx, name in enumerate(names):
        if idx in indices:
            attributes.append(
                AttributeDescriptor(idx, name, AttributeKind.LABEL, ("0", "1"))
            )
        else:
            attributes.append(_describe_attribute(idx, name, data.iloc[:, idx]))

    label_matrix = np.column_stack(label_columns).astype(np.int8)
    label_matrix = label_matrix.reshape(len(data), len(indices))
    label_matrix.flags.writeable = False

    logger.debug(
        f"Built table with {len(data)} instances, {len(names)} attributes, "
        f"{len(indices)} labels"
    )

    return LabeledTable(
        frame=data,
        attributes=tuple(attributes),
        label_indices=indices,
        label_matrix=label_matrix,
    )
