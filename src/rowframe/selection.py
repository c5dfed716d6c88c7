"""Slicing of dataframes.

A common request when analysing data is to select
only the rows that match a specific value and
only some of their columns. An example is the ``WHERE``
and ``SELECT`` clauses in SQL queries.

For example, given the dataframe::

    New York, Shop A, 10
    Los Angeles, Shop C, 8
    New York, Shop E, 20

selecting rows where column ``0`` is ``"New York"``
and exporting columns ``[2, 1]`` would lead to::

    10, Shop A
    20, Shop E
"""

import logging
from collections.abc import Sequence
from typing import Any

from .base import Cell, Dataframe, cell_at, is_index, is_sequence
from .numeric import is_numeric

logger = logging.getLogger(__name__)

WILDCARD = "*"

# Marks cells missing from short rows, so they never match a pattern.
_MISSING = object()


def strictly_equal(value: Any, pattern: Any) -> bool:
    """Compare two cells without any coercion.

    Numbers are compared by value, so ``1 == 1.0``,
    while any other value must also be of the same type
    so that ``"1"`` never matches ``1``.
    """
    if is_numeric(value) and is_numeric(pattern):
        return value == pattern
    return type(value) is type(pattern) and value == pattern


def create_slice(
    dataframe: Dataframe,
    column_index: int,
    pattern: Cell,
    export_columns: Sequence[int] = (),
) -> Dataframe:
    """Select the rows where a column matches a value.

    >>> df = [["a", 1], ["b", 2], ["a", 3]]
    >>> create_slice(df, 0, "a")
    [['a', 1], ['a', 3]]
    >>> create_slice(df, 0, WILDCARD, [1])
    [[1], [2], [3]]

    :param dataframe: The rows to slice.
    :param column_index: The column to compare against ``pattern``.
    :param pattern: The value the column must be strictly equal to,
                    :data:`WILDCARD` selects all rows.
    :param export_columns: Indices of the columns to include in each
                           resulting row, in that order. Indices may repeat.
                           When empty the selected rows are returned as they are.
    """
    if not is_sequence(dataframe) or len(dataframe) == 0:
        logger.debug("Nothing to slice in %s", type(dataframe).__name__)
        return []

    if isinstance(pattern, str) and pattern == WILDCARD:
        selected = list(dataframe)
    else:
        selected = [
            row
            for row in dataframe
            if strictly_equal(_cell_or_missing(row, column_index), pattern)
        ]

    if not export_columns:
        return selected
    return [[cell_at(row, idx) for idx in export_columns] for row in selected]


def _cell_or_missing(row: Any, index: int) -> Any:
    if not is_sequence(row) or not is_index(index) or not 0 <= index < len(row):
        return _MISSING
    return row[index]
