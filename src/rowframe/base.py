"""Base types and helpers shared by the rowframe modules.

A dataframe is represented with plain Python lists, so the
types here are only aliases that document the expected shape
of the data. Python dynamic typing already acts as the
union of numeric and text cells.
"""

from typing import Any

Cell = int | float | str | None
Row = list[Cell]
Dataframe = list[Row]
Dataset = list[Cell]


def is_sequence(obj: Any) -> bool:
    """Tell if the object can act as a dataframe, a row or a dataset.

    Only lists and tuples qualify, strings are sequences
    in Python but they are treated as scalar cells.

    >>> is_sequence([1, 2]), is_sequence((1, 2)), is_sequence("12")
    (True, True, False)
    """
    return isinstance(obj, (list, tuple))


def is_index(obj: Any) -> bool:
    """Tell if the object can be used as a row or column index.

    Booleans are integers in Python, but they are not accepted as indices.
    """
    return isinstance(obj, int) and not isinstance(obj, bool)


def cell_at(row: Any, index: int) -> Cell:
    """Get the cell at ``index`` of a row or ``None`` when there is none.

    Negative indices do not wrap around and rows that
    are not sequences have no cells at all.

    >>> cell_at(["a", "b"], 1), cell_at(["a", "b"], 2), cell_at(["a", "b"], -1)
    ('b', None, None)
    """
    if not is_sequence(row) or not is_index(index) or not 0 <= index < len(row):
        return None
    return row[index]
