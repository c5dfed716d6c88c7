"""Aggregate statistics over datasets.

Frequently when analysing data it is necessary
to compute statistics like the sum or the average of a column.

The aggregations in this module work on a dataset, a flat list
of values like the one returned by :func:`rowframe.flatten`.
Datasets loaded from files frequently mix numbers with
text or empty cells, so all aggregations first filter the
dataset keeping only the valid numbers::

    [1, "2", "n/a", 3.5]  ->  [1.0, 2.0, 3.5]

The remaining values are converted to a :class:`pyarrow.Array`
and the statistic is computed through :mod:`pyarrow.compute`.

When there is nothing to aggregate, because the dataset
is not a list, is empty or contains no numbers, the result is ``0``.
"""

import logging
from typing import Any

import pyarrow as pa
import pyarrow.compute as pc

from .base import is_sequence
from .numeric import is_valid_number, to_number

__all__ = ("mean", "total", "median")

logger = logging.getLogger(__name__)


def valid_numbers(dataset: Any) -> pa.Array:
    """Extract the valid numbers of a dataset as a float array.

    >>> valid_numbers([1, "2", "abc", 3.5]).to_pylist()
    [1.0, 2.0, 3.5]
    """
    if not is_sequence(dataset):
        logger.debug("Dataset is not a list, got %s", type(dataset).__name__)
        return pa.array([], type=pa.float64())
    return pa.array(
        [to_number(v) for v in dataset if is_valid_number(v)], type=pa.float64()
    )


def mean(dataset: Any) -> float:
    """Compute the arithmetic mean of the numbers in a dataset.

    >>> mean([1, 2, "3", "x"])
    2.0
    """
    values = valid_numbers(dataset)
    if len(values) == 0:
        return 0
    return pc.mean(values).as_py()


def total(dataset: Any) -> float:
    """Compute the sum of the numbers in a dataset.

    >>> total(["1", "2", 3])
    6.0
    """
    values = valid_numbers(dataset)
    if len(values) == 0:
        return 0
    return pc.sum(values).as_py()


def median(dataset: Any) -> float:
    """Compute the median of the numbers in a dataset.

    The numbers are sorted in ascending order, for an odd
    amount of numbers the median is the middle one, for
    an even amount it's the average of the two central ones.

    >>> median([3, 1, 2]), median([4, 1, 3, 2])
    (2.0, 2.5)
    """
    values = valid_numbers(dataset)
    if len(values) == 0:
        return 0

    values = pc.take(values, pc.array_sort_indices(values, order="ascending"))
    mid = len(values) // 2
    if len(values) % 2 == 0:
        return (values[mid - 1].as_py() + values[mid].as_py()) / 2
    return values[mid].as_py()
