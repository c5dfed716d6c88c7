"""Detection and coercion of numeric values.

Data loaded from CSV files is made of text cells only,
even when they represent numbers like ``"42"`` or ``"-3.5"``.

This module provides the rule that tells which values
are numbers and a way to convert the cells of a dataframe
column from their text form to actual numbers.

A valid number is either a value that is already numeric
or a string made of an optional minus sign, one or more digits
and an optional fractional part::

    42      valid
    -3.5    valid
    1e10    invalid, no exponent notation
    1,000   invalid, no thousands separator
    " 4"    invalid, no surrounding whitespace
"""

import logging
import math
import re
from typing import Any

from .base import Cell, Dataframe, is_index, is_sequence

logger = logging.getLogger(__name__)

NUMBER_PATTERN = re.compile(r"-?[0-9]+(\.[0-9]+)?")


def is_numeric(value: Any) -> bool:
    """Tell if the value already is a number and not its text form."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_valid_number(value: Any) -> bool:
    """Check if the value is a number or the text form of a number.

    >>> is_valid_number("42"), is_valid_number("-3.5"), is_valid_number(-1.2)
    (True, True, True)
    >>> is_valid_number("1e10"), is_valid_number("1,000"), is_valid_number(None)
    (False, False, False)
    """
    if is_numeric(value):
        return True
    return isinstance(value, str) and NUMBER_PATTERN.fullmatch(value) is not None


def to_number(value: Cell) -> float:
    """Convert a valid number to its floating point value.

    The value is expected to have been checked with :func:`is_valid_number`.
    Integers too large for a float become an infinity of the same sign.

    >>> to_number("-3.5"), to_number(-10**400)
    (-3.5, -inf)
    """
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def coerce_column(dataframe: Dataframe, column_index: int) -> int:
    """Convert the text numbers of a column into actual numbers.

    The dataframe is modified in place, for each row that has
    a cell at ``column_index`` holding the text form of a number,
    the cell is replaced with its floating point value.
    Cells that are already numeric or are not numbers at all are left untouched.

    No copy of the dataframe is made, callers that need
    the original text cells should copy the rows beforehand.
    Rows that are tuples can't be modified and are skipped.

    Returns how many cells were converted, so
    applying it twice on the same column returns 0 the second time.

    >>> df = [["1", "x"], ["2", "y"]]
    >>> coerce_column(df, 0)
    2
    >>> df
    [[1.0, 'x'], [2.0, 'y']]
    >>> coerce_column(df, 0)
    0

    :param dataframe: The rows to convert.
    :param column_index: The zero-based index of the column to convert.
    """
    if not is_sequence(dataframe) or len(dataframe) == 0 or not is_index(column_index):
        logger.debug("Nothing to coerce for column %r", column_index)
        return 0

    converted = 0
    for row in dataframe:
        if not isinstance(row, list) or not 0 <= column_index < len(row):
            continue
        value = row[column_index]
        if not is_numeric(value) and is_valid_number(value):
            row[column_index] = to_number(value)
            converted += 1

    logger.debug("Coerced %d cells of column %d to numbers", converted, column_index)
    return converted
