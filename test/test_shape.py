import pytest

from rowframe.shape import dimensions, flatten


@pytest.mark.parametrize(
    "data, expected",
    [
        ([[1, 2], [3, 4]], (2, 2)),
        ([[1, 2, 3], [4]], (2, 3)),
        ([], (0, -1)),
        (None, (-1, -1)),
        ("abc", (-1, -1)),
        (42, (-1, -1)),
        ({"a": 1}, (-1, -1)),
        ([5, 6], (2, -1)),
        ([[], [1]], (2, 0)),
        (((1, 2),), (1, 2)),
    ],
)
def test_dimensions(data, expected):
    assert dimensions(data) == expected


def test_flatten():
    assert flatten([[1], [2], [3]]) == [1, 2, 3]


def test_flatten_returns_new_list():
    df = [["a"], ["b"]]
    flat = flatten(df)
    flat.append("c")
    assert df == [["a"], ["b"]]


def test_flatten_short_rows():
    assert flatten([[1], [], [3, 4]]) == [1, None, 3]


@pytest.mark.parametrize(
    "dataframe", [[[1, 2]], [], None, [1, 2], [[], [1]], "abc"]
)
def test_flatten_not_single_column(dataframe):
    assert flatten(dataframe) == []
