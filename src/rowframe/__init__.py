"""RowFrame

A minimal dataframe utility library working on plain Python lists.

A dataframe is just a list of rows, and each row is a list of cells.
There is no header row and there are no column names, columns are
referenced by their zero-based index. Rows are not required to share
the same length.

The library is constituted by a few modules, each in charge of one concern:

* :mod:`rowframe.datasources` loads CSV files into a dataframe.
* :mod:`rowframe.numeric` validates numeric values and coerces columns.
* :mod:`rowframe.shape` inspects and reshapes dataframes.
* :mod:`rowframe.aggregate` computes mean, sum and median of a dataset.
* :mod:`rowframe.selection` slices dataframes by the value of a column.

None of the functions raise on invalid input, they return
a sentinel value (``0``, ``-1``, ``[]`` or ``(-1, -1)``) instead:

>>> from rowframe import dimensions, mean
>>> dimensions(None)
(-1, -1)
>>> mean("not a dataset")
0
"""

from .aggregate import mean, median, total
from .datasources import file_exists, load_csv
from .numeric import coerce_column, is_valid_number, to_number
from .selection import WILDCARD, create_slice
from .shape import dimensions, flatten

__all__ = (
    "file_exists",
    "load_csv",
    "is_valid_number",
    "to_number",
    "coerce_column",
    "dimensions",
    "flatten",
    "mean",
    "total",
    "median",
    "create_slice",
    "WILDCARD",
)
