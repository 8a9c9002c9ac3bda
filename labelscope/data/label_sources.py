"""
Resolution of which table columns act as labels.

A dataset can declare its labels in several ways. They are tried in a fixed
priority order:

1. explicit label indices
2. explicit label names
3. an explicit label count (the last ``label_amount`` columns)
4. a side-channel file listing label names
5. a ``-C n`` hint embedded in the relation header

Functions:
    resolve_label_indices: Apply the priority rules and return label positions
    parse_header_hint: Extract the dataset name and ``-C`` value from a relation header
    read_label_names: Read label names from a text or YAML side-channel file
"""

import logging
import shlex
from pathlib import Path
from typing import List, Optional, Sequence, Tuple, Union

import numpy as np
import yaml

from labelscope.exceptions import InvalidInput

logger = logging.getLogger(__name__)


def parse_header_hint(relation: str, strict: bool = True) -> Tuple[str, Optional[int]]:
    """
    Parse a relation header of the form ``"name: -C 6 -split ..."``.

    Args:
        relation (str): Relation string of the dataset
        strict (bool, optional): Raise on a malformed ``-C`` option. With False
            a malformed option is treated as absent. Defaults to True.

    Returns:
        Tuple[str, Optional[int]]: Dataset name and the ``-C`` value, or None
            when the header carries no label hint. A positive value means the
            first n attributes are labels, a negative one the last |n|.

    Raises:
        InvalidInput: If ``-C`` is present but not followed by an integer and
            strict is True

    Example:
        >>> parse_header_hint("'Yeast: -C 14'")
        ('Yeast', 14)
        >>> parse_header_hint("emotions")
        ('emotions', None)
    """
    text = relation.strip().strip("'\"")
    name, sep, options = text.partition(":")
    name = name.strip()
    if not sep:
        return name, None

    try:
        tokens = shlex.split(options)
        if "-C" not in tokens:
            return name, None
        return name, int(tokens[tokens.index("-C") + 1])
    except (IndexError, ValueError):
        if not strict:
            return name, None
        raise InvalidInput(
            f"Malformed -C option in relation header: {relation!r}"
        ) from None


def read_label_names(path: Union[str, Path]) -> List[str]:
    """
    Read label names from a side-channel file.

    ``.yaml``/``.yml`` files must contain a list of names (or a mapping with a
    ``labels`` list); any other file is read as one name per line, ignoring
    blank lines and lines starting with ``#``.

    Args:
        path (Union[str, Path]): Path to the label file

    Returns:
        List[str]: Label names in file order

    Raises:
        FileNotFoundError: If the file does not exist
        InvalidInput: If a YAML file does not hold a list of names
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Label file not found: {path}")

    if path.suffix.lower() in (".yaml", ".yml"):
        with open(path, "r") as f:
            content = yaml.safe_load(f)
        if isinstance(content, dict):
            content = content.get("labels")
        if not isinstance(content, list):
            raise InvalidInput(f"Label file {path} must contain a list of label names")
        return [str(name) for name in content]

    with open(path, "r") as f:
        lines = [line.strip() for line in f]
    return [line for line in lines if line and not line.startswith("#")]


def _indices_from_names(columns: Sequence[str], names: Sequence[str]) -> List[int]:
    positions = {str(col): idx for idx, col in enumerate(columns)}
    missing = [name for name in names if str(name) not in positions]
    if missing:
        raise InvalidInput(f"Label names not found among the attributes: {missing}")
    return sorted(positions[str(name)] for name in names)


def _check_amount(num_columns: int, amount: int) -> None:
    if amount == 0 or abs(amount) > num_columns:
        raise InvalidInput(
            f"{abs(amount)} labels requested for a table with {num_columns} attributes"
        )


def resolve_label_indices(
    columns: Sequence[str],
    label_indices: Optional[Sequence[int]] = None,
    label_names: Optional[Sequence[str]] = None,
    label_amount: Optional[int] = None,
    label_file: Optional[Union[str, Path, Sequence[str]]] = None,
    header_hint: Optional[str] = None,
) -> List[int]:
    """
    Determine the label column positions using the priority rules.

    Args:
        columns (Sequence[str]): Column names of the table
        label_indices (Optional[Sequence[int]]): Explicit 0-based label positions
        label_names (Optional[Sequence[str]]): Explicit label column names
        label_amount (Optional[int]): Number of trailing columns that are labels
        label_file (Optional): Path to a label-name file, or an already read
            list of label names
        header_hint (Optional[str]): Relation header possibly holding ``-C n``

    Returns:
        List[int]: Label positions. Explicit indices are returned in the given
            order; every other rule yields ascending positions.

    Raises:
        InvalidInput: If no rule resolves to a non-empty set of labels

    Example:
        >>> resolve_label_indices(['x', 'y', 'a', 'b'], label_amount=2)
        [2, 3]
        >>> resolve_label_indices(['a', 'b', 'x'], header_hint='toy: -C 2')
        [0, 1]
    """
    num_columns = len(columns)

    if label_indices is not None:
        logger.debug("Labels given by explicit indices")
        return list(label_indices)

    if label_names is not None:
        logger.debug("Labels given by explicit names")
        return _indices_from_names(columns, label_names)

    if label_amount is not None:
        logger.debug("Labels given by amount")
        is_integer = isinstance(label_amount, (int, np.integer)) and not isinstance(
            label_amount, (bool, np.bool_)
        )
        if not is_integer or label_amount < 1:
            raise InvalidInput(f"label_amount must be a positive integer, got {label_amount!r}")
        label_amount = int(label_amount)
        _check_amount(num_columns, label_amount)
        return list(range(num_columns - label_amount, num_columns))

    if label_file is not None:
        if isinstance(label_file, (str, Path)):
            logger.debug(f"Labels read from side-channel file {label_file}")
            names = read_label_names(label_file)
        else:
            names = list(label_file)
        return _indices_from_names(columns, names)

    if header_hint is not None:
        _, amount = parse_header_hint(header_hint)
        if amount is not None:
            logger.debug(f"Labels given by header hint -C {amount}")
            _check_amount(num_columns, amount)
            if amount > 0:
                return list(range(amount))
            return list(range(num_columns + amount, num_columns))

    raise InvalidInput(
        "Could not determine the label attributes: provide label_indices, "
        "label_names, label_amount, a label file or a header with a -C option"
    )
