"""Tests for table validation and label coercion."""

import numpy as np
import pandas as pd
import pytest

from labelscope.data.table import (
    AttributeKind,
    build_table,
    coerce_label_column,
)
from labelscope.exceptions import InvalidInput


# ============================================================================
# Label coercion
# ============================================================================


def test_coerce_numeric_column():
    result = coerce_label_column(pd.Series([1, 0, 1, 0]))
    assert result.dtype == np.int8
    assert result.tolist() == [1, 0, 1, 0]


def test_coerce_numeric_strings_and_missing():
    result = coerce_label_column(pd.Series(["1", "0", None]))
    assert result.tolist() == [1, 0, 0]


def test_coerce_nonzero_values_are_active():
    result = coerce_label_column(pd.Series([0.0, 2.0, np.nan, 2.0]))
    assert result.tolist() == [0, 1, 0, 1]


def test_coerce_bool_column():
    result = coerce_label_column(pd.Series([True, False, True]))
    assert result.tolist() == [1, 0, 1]


def test_coerce_text_column_marks_non_empty_values():
    result = coerce_label_column(pd.Series(["yes", "", None, "yes"], dtype=object))
    assert result.tolist() == [1, 0, 0, 1]


def test_coerce_rejects_more_than_two_values():
    with pytest.raises(InvalidInput, match="distinct values"):
        coerce_label_column(pd.Series([0, 1, 2], name="bad"))


# ============================================================================
# Table building
# ============================================================================


def test_build_table_label_matrix(toy_frame):
    table = build_table(toy_frame, [2, 3, 4])

    assert table.num_instances == 4
    assert table.num_labels == 3
    assert table.num_attributes == 5
    assert table.label_names == ["a", "b", "c"]
    assert table.input_indices == [0, 1]
    np.testing.assert_array_equal(
        table.label_matrix,
        [[1, 0, 0], [1, 1, 0], [0, 1, 0], [0, 1, 1]],
    )


def test_label_matrix_is_read_only(toy_frame):
    table = build_table(toy_frame, [2, 3, 4])
    with pytest.raises(ValueError):
        table.label_matrix[0, 0] = 0


def test_build_table_does_not_modify_input():
    frame = pd.DataFrame({"x": [1.0, 2.0], "a": ["1", "0"]})
    build_table(frame, [1])
    assert frame["a"].tolist() == ["1", "0"]


def test_attribute_descriptors(toy_frame):
    table = build_table(toy_frame, [2, 3, 4])
    length, source, a = table.attributes[:3]

    assert length.kind is AttributeKind.NUMERIC
    assert length.type_string() == "numeric"
    assert source.kind is AttributeKind.NOMINAL
    assert source.levels == ("blog", "news", "web")
    assert source.type_string() == "{blog,news,web}"
    assert a.is_label
    assert a.type_string() == "{0,1}"


def test_categorical_levels_keep_category_order():
    frame = pd.DataFrame(
        {
            "size": pd.Categorical(["s", "l"], categories=["s", "m", "l"]),
            "a": [1, 0],
        }
    )
    table = build_table(frame, [1])
    assert table.attributes[0].levels == ("s", "m", "l")


def test_single_label_matrix_is_two_dimensional():
    table = build_table(pd.DataFrame({"x": [1, 2, 3], "a": [0, 1, 1]}), [1])
    assert table.label_matrix.shape == (3, 1)


def test_empty_table_keeps_label_width():
    frame = pd.DataFrame({"x": pd.Series([], dtype=float), "a": pd.Series([], dtype=int)})
    table = build_table(frame, [1])
    assert table.label_matrix.shape == (0, 1)


@pytest.mark.parametrize(
    "indices, message",
    [
        ([], "At least one label"),
        ([5], "out of range"),
        ([-1], "out of range"),
        ([2, 2], "Duplicated"),
        (["a"], "not an integer"),
    ],
)
def test_invalid_label_indices(toy_frame, indices, message):
    with pytest.raises(InvalidInput, match=message):
        build_table(toy_frame, indices)


def test_table_without_columns():
    with pytest.raises(InvalidInput, match="no columns"):
        build_table(pd.DataFrame(), [0])


def test_non_binary_label_column(toy_frame):
    with pytest.raises(InvalidInput):
        build_table(toy_frame, [0])
