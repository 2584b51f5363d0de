import pytest

from algokit.sorting.merging import merge_sort, partition, quick_sort, tim_sort


def test_merge_sort_basic():
    data = [10, 8, 4, 3, 1, 9, 2, 7, 5, 6]
    merge_sort(data)
    assert data == [1, 2, 3, 4, 5, 6, 7, 8, 9, 10]


def test_merge_sort_strings():
    data = ["a", "bb", "d", "cc"]
    merge_sort(data)
    assert data == ["a", "bb", "cc", "d"]


@pytest.mark.parametrize(
    ("data", "expected"),
    [
        ([], []),
        ([1], [1]),
        ([1, 2, 3, 4], [1, 2, 3, 4]),
        ([4, 3, 2, 1], [1, 2, 3, 4]),
    ],
)
def test_merge_sort_cases(data, expected):
    merge_sort(data)
    assert data == expected


def test_partition_places_pivot():
    data = [3, 1, 2]
    index = partition(data, 0, 2)
    assert index == 1
    assert data == [1, 2, 3]


def test_partition_invariant():
    data = [9, 4, 7, 1, 8, 2, 5]
    index = partition(data, 0, len(data) - 1)
    pivot = data[index]
    assert pivot == 5
    assert all(x <= pivot for x in data[:index])
    assert all(x >= pivot for x in data[index + 1 :])


@pytest.mark.parametrize(
    "data",
    [
        [],
        [1],
        [5, 2, 9, 1, 5, 6],
        [1, 2, 3, 4],
        [4, 3, 2, 1],
        [7, 7, 7],
        ["d", "a", "c", "b"],
    ],
)
def test_quick_sort(data):
    expected = sorted(data)
    quick_sort(data)
    assert data == expected


def test_tim_sort_basic():
    data = [-2, 7, 15, -14, 0, 15, 0, 7, -7, -4, -13, 5, 8, -14, 12]
    tim_sort(data, len(data))
    assert data == [-14, -14, -13, -7, -4, -2, 0, 0, 5, 7, 7, 8, 12, 15, 15]


def test_tim_sort_empty():
    data = []
    tim_sort(data, 0)
    assert data == []


def test_tim_sort_one_element():
    data = [3]
    tim_sort(data, 1)
    assert data == [3]


def test_tim_sort_pre_sorted():
    data = [0, 1, 2, 3, 4, 5, 6, 7, 8, 9]
    tim_sort(data, len(data))
    assert data == [0, 1, 2, 3, 4, 5, 6, 7, 8, 9]


def test_tim_sort_spans_several_runs():
    data = list(range(100, 0, -1))
    tim_sort(data, len(data))
    assert data == list(range(1, 101))


def test_tim_sort_prefix_only():
    data = [3, 2, 1, 0]
    tim_sort(data, 3)
    assert data == [1, 2, 3, 0]


def test_tim_sort_n_too_large_raises():
    with pytest.raises(ValueError):
        tim_sort([1, 2], 3)