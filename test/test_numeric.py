import pytest

from rowframe.numeric import coerce_column, is_valid_number, to_number


@pytest.mark.parametrize("value", ["42", "-3.5", "0", "007", "-0.25", 0, -1.2, 10**20])
def test_valid_numbers(value):
    assert is_valid_number(value) is True


@pytest.mark.parametrize(
    "value",
    [
        "abc",
        "1e10",
        "",
        "1,000",
        None,
        " 4",
        "4 ",
        "4\n",
        "NaN",
        "Infinity",
        "+1",
        "1.",
        ".5",
        "--1",
        "١٢",
        True,
        [1],
    ],
)
def test_invalid_numbers(value):
    assert is_valid_number(value) is False


def test_to_number():
    assert to_number("-3.5") == -3.5
    assert isinstance(to_number("2"), float)


def test_coerce_column():
    df = [["1", "x"], ["2", "y"]]
    assert coerce_column(df, 0) == 2
    assert df == [[1.0, "x"], [2.0, "y"]]
    assert isinstance(df[0][0], float)


def test_coerce_column_twice():
    df = [["1", "x"], ["2.5", "y"]]
    coerce_column(df, 0)
    snapshot = [list(row) for row in df]
    assert coerce_column(df, 0) == 0
    assert df == snapshot


def test_coerce_column_mixed_cells():
    df = [["1"], ["abc"], [3], ["-4.5"], [None]]
    assert coerce_column(df, 0) == 2
    assert df == [[1.0], ["abc"], [3], [-4.5], [None]]
    assert isinstance(df[2][0], int)


def test_coerce_column_short_and_invalid_rows():
    df = [["a", "1"], ["b"], "not a row", ("c", "2"), ["d", "3"]]
    assert coerce_column(df, 1) == 2
    assert df == [["a", 1.0], ["b"], "not a row", ("c", "2"), ["d", 3.0]]


@pytest.mark.parametrize(
    "dataframe, column_index",
    [
        ([], 0),
        (None, 0),
        ("1,2", 0),
        ([["1"]], "0"),
        ([["1"]], None),
        ([["1"]], 0.5),
        ([["1"]], True),
    ],
)
def test_coerce_column_nothing_to_do(dataframe, column_index):
    assert coerce_column(dataframe, column_index) == 0


def test_coerce_column_negative_index():
    df = [["1", "2"]]
    assert coerce_column(df, -1) == 0
    assert df == [["1", "2"]]


def test_to_number_huge_integers():
    assert to_number(10**400) == float("inf")
    assert to_number(-(10**400)) == float("-inf")
