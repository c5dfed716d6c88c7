import pytest

from rowframe.aggregate import mean, median, total, valid_numbers


def test_valid_numbers():
    assert valid_numbers([1, "2", "x", None, -3.5, "1e3"]).to_pylist() == [
        1.0,
        2.0,
        -3.5,
    ]


def test_mean():
    assert mean([1, 2, "3", "abc"]) == 2
    assert mean([1, 2]) == 1.5


def test_total():
    assert total(["1", "2", 3]) == 6
    assert total([-1, "1.5", "n/a"]) == 0.5


@pytest.mark.parametrize(
    "dataset, expected",
    [
        ([3, 1, 2], 2),
        ([4, 1, 3, 2], 2.5),
        (["10", 2, "-5"], 2),
        ([7], 7),
        (["9", "x", 1, "y"], 5),
    ],
)
def test_median(dataset, expected):
    assert median(dataset) == expected


def test_median_does_not_sort_input():
    dataset = [3, 1, 2]
    median(dataset)
    assert dataset == [3, 1, 2]


@pytest.mark.parametrize("aggregation", [mean, total, median])
@pytest.mark.parametrize(
    "dataset", [[], "not array", None, 5, ["a", "b"], ["", " 1"]]
)
def test_nothing_to_aggregate(aggregation, dataset):
    assert aggregation(dataset) == 0


def test_huge_integers():
    assert mean([10**400, 1]) == float("inf")
    assert total([-(10**400), "2"]) == float("-inf")
    assert median([10**400, 1, 2]) == 2
