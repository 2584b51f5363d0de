"""Distribution sorts: bucket sort, counting sort and radix sort."""

import operator
from collections.abc import MutableSequence, Sequence
from itertools import chain
from typing import Any

from algokit.sorting.insertion import insertion_sort


def bucket_sort(arr: Sequence[int]) -> list[int]:
    """Return a new list with the non-negative integers of ``arr`` in order.

    Raises ZeroDivisionError when the input is non-empty and its largest
    value is zero.
    """
    if not arr:
        return []
    largest = max(arr)
    n = len(arr)
    buckets: list[list[int]] = [[] for _ in range(n + 1)]
    for x in arr:
        buckets[n * x // largest].append(x)
    for bucket in buckets:
        insertion_sort(bucket)
    return list(chain.from_iterable(buckets))


def _check_range(value: int, maxval: int) -> None:
    if not 0 <= value <= maxval:
        raise ValueError(f"value {value} is outside the range 0..{maxval}")


def counting_sort(arr: MutableSequence[int], maxval: int) -> None:
    """Sort ``arr`` in place; every element must lie in ``0..maxval``."""
    occurrences = [0] * (maxval + 1)
    for value in arr:
        _check_range(value, maxval)
        occurrences[value] += 1
    arr[:] = [value for value, count in enumerate(occurrences) for _ in range(count)]


def generic_counting_sort(arr: MutableSequence[Any], maxval: int) -> None:
    """Sort ``arr`` in place by integer value, keeping the elements' own type.

    Elements may be any objects usable as integers (``int``, ``bool``, or
    types implementing ``__index__``) whose value lies in ``0..maxval``.
    """
    buckets: list[list[Any]] = [[] for _ in range(maxval + 1)]
    for item in arr:
        value = operator.index(item)
        _check_range(value, maxval)
        buckets[value].append(item)
    arr[:] = list(chain.from_iterable(buckets))


def radix_sort(arr: MutableSequence[int]) -> None:
    """Sort the non-negative integers of ``arr`` in place with LSD radix sort.

    The radix is the smallest power of two not below ``len(arr)``.
    """
    if len(arr) <= 1:
        if arr and arr[0] < 0:
            raise ValueError("radix_sort accepts only non-negative integers")
        return
    if min(arr) < 0:
        raise ValueError("radix_sort accepts only non-negative integers")
    largest = max(arr)
    radix = 1 << (len(arr) - 1).bit_length()
    place = 1
    while place <= largest:
        buckets: list[list[int]] = [[] for _ in range(radix)]
        for x in arr:
            buckets[x // place % radix].append(x)
        arr[:] = list(chain.from_iterable(buckets))
        place *= radix