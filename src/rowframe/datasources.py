"""Load dataframes from files.

The datasources are in charge of reading data from
some source and converting it into a dataframe,
a list of rows where each row is a list of cells.

The CSV support is intentionally minimal: rows are separated
by newlines and cells by commas, there is no support for
quoted fields, so a comma is always a cell separator.
No header is detected, the first line is a row like any other
and all cells are loaded as text, see :func:`rowframe.coerce_column`
to convert them to numbers.
"""

import logging
import os
from collections.abc import Collection

from .base import Dataframe

logger = logging.getLogger(__name__)

LINE_SEPARATOR = "\n"
CSV_DELIMITER = ","
CSV_ENCODING = "utf-8"


def file_exists(path: str | os.PathLike) -> bool:
    """Check if anything exists at the given path."""
    return isinstance(path, (str, os.PathLike)) and os.path.exists(path)


def load_csv(
    path: str | os.PathLike,
    ignore_rows: Collection[int] = (),
    ignore_cols: Collection[int] = (),
) -> tuple[Dataframe, int, int]:
    """Load a CSV file and return its rows along with their dimensions.

    Empty and whitespace only lines are discarded before anything
    else, so indices in ``ignore_rows`` refer to the position of
    the rows once blank lines have been removed.

    Returns a ``(rows, row_count, col_count)`` tuple.
    For compatibility with existing callers the row count is
    one more than the number of loaded rows, and ``ignore_cols``
    is accepted but no column is ever removed.
    The column count is the length of the first loaded row,
    or ``0`` when no row is left.

    Bytes that are not valid UTF-8 are replaced with U+FFFD.
    When the file does not exist or can't be opened the result is ``([], -1, -1)``.

    :param path: The path of the local CSV file.
    :param ignore_rows: Indices of the rows to skip.
    :param ignore_cols: Indices of the columns to skip, currently unused.
    """
    if not file_exists(path) or not os.path.isfile(path):
        logger.debug("CSV file %s not found", path)
        return ([], -1, -1)

    try:
        with open(path, encoding=CSV_ENCODING, errors="replace", newline="") as f:
            text = f.read()
    except OSError as e:
        logger.warning("Unable to read CSV file %s: %s", path, e)
        return ([], -1, -1)

    ignore_rows = ignore_rows or ()
    lines = [line for line in text.split(LINE_SEPARATOR) if line.strip()]
    rows = [
        line.split(CSV_DELIMITER)
        for idx, line in enumerate(lines)
        if idx not in ignore_rows
    ]
    logger.debug(
        "Loaded %d rows from %s, %d ignored", len(rows), path, len(lines) - len(rows)
    )

    row_count = len(rows) + 1
    col_count = len(rows[0]) if rows else 0
    return (rows, row_count, col_count)
