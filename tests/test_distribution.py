import pytest

from algokit.sorting.distribution import (
    bucket_sort,
    counting_sort,
    generic_counting_sort,
    radix_sort,
)


@pytest.mark.parametrize(
    "data",
    [
        [],
        [4],
        [10, 9, 105],
        [35, 53, 1, 0],
        [1, 21, 5, 11, 58],
        [542, 542, 542, 542],
    ],
)
def test_bucket_sort(data):
    original = list(data)
    assert bucket_sort(data) == sorted(original)
    assert data == original


def test_bucket_sort_all_zero_raises():
    with pytest.raises(ZeroDivisionError):
        bucket_sort([0, 0])


def test_counting_sort_descending():
    data = [6, 5, 4, 3, 2, 1]
    counting_sort(data, 6)
    assert data == [1, 2, 3, 4, 5, 6]


def test_counting_sort_pre_sorted():
    data = [1, 2, 3, 4, 5, 6]
    counting_sort(data, 6)
    assert data == [1, 2, 3, 4, 5, 6]


def test_counting_sort_with_duplicates_and_zero():
    data = [3, 0, 3, 1, 0]
    counting_sort(data, 3)
    assert data == [0, 0, 1, 3, 3]


def test_counting_sort_value_above_max_raises():
    with pytest.raises(ValueError):
        counting_sort([1, 7], 6)


def test_generic_counting_sort():
    data = [100, 30, 60, 10, 20, 120, 1]
    generic_counting_sort(data, 120)
    assert data == [1, 10, 20, 30, 60, 100, 120]


def test_generic_counting_sort_presorted():
    data = [1, 2, 3, 4, 5, 6]
    generic_counting_sort(data, 6)
    assert data == [1, 2, 3, 4, 5, 6]


def test_generic_counting_sort_keeps_element_type():
    data = [True, False, True]
    generic_counting_sort(data, 1)
    assert data == [False, True, True]
    assert all(isinstance(x, bool) for x in data)


def test_generic_counting_sort_negative_raises():
    with pytest.raises(ValueError):
        generic_counting_sort([2, -1], 5)


def test_radix_sort_empty():
    data = []
    radix_sort(data)
    assert data == []


def test_radix_sort_descending():
    data = [201, 127, 64, 37, 24, 4, 1]
    radix_sort(data)
    assert data == [1, 4, 24, 37, 64, 127, 201]


def test_radix_sort_ascending():
    data = [1, 4, 24, 37, 64, 127, 201]
    radix_sort(data)
    assert data == [1, 4, 24, 37, 64, 127, 201]


def test_radix_sort_single_element():
    data = [5]
    radix_sort(data)
    assert data == [5]


def test_radix_sort_large_values():
    data = [10**12, 3, 999_999, 0, 3]
    radix_sort(data)
    assert data == [0, 3, 3, 999_999, 10**12]


def test_radix_sort_negative_raises():
    with pytest.raises(ValueError):
        radix_sort([3, -2])