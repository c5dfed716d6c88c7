"""Inspect and change the shape of dataframes."""

import logging
from typing import Any

from .base import Dataframe, Dataset, cell_at, is_sequence

logger = logging.getLogger(__name__)


def dimensions(data: Any) -> tuple[int, int]:
    """Get the number of rows and columns of a dataframe.

    The number of columns is the length of the first row,
    rows are not required to share the same length so
    other rows might be longer or shorter.

    When the first row is not a sequence itself, or there
    are no rows at all, the number of columns is ``-1``.
    Data that isn't a dataframe at all gets ``(-1, -1)``.

    >>> dimensions([[1, 2], [3, 4]])
    (2, 2)
    >>> dimensions([5, 6])
    (2, -1)
    >>> dimensions([]), dimensions(None)
    ((0, -1), (-1, -1))
    """
    if not is_sequence(data):
        return (-1, -1)

    rows = len(data)
    cols = len(data[0]) if rows > 0 and is_sequence(data[0]) else -1
    return (rows, cols)


def flatten(dataframe: Dataframe) -> Dataset:
    """Turn a single column dataframe into a flat dataset.

    Only dataframes with exactly one column can be flattened,
    for any other dataframe an empty list is returned.

    >>> flatten([[1], [2], [3]])
    [1, 2, 3]
    >>> flatten([[1, 2]])
    []
    """
    rows, cols = dimensions(dataframe)
    if rows <= 0 or cols != 1:
        logger.debug("Can't flatten a dataframe of shape %s", (rows, cols))
        return []
    return [cell_at(row, 0) for row in dataframe]
