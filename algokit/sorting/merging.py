"""Divide-and-conquer sorts: merge sort, quick sort and tim sort."""

from collections.abc import MutableSequence, Sequence
from typing import Any

_MIN_MERGE = 32


def _merge(left: Sequence[Any], right: Sequence[Any], *, stable: bool) -> list[Any]:
    """Merge two ascending runs.

    With ``stable`` an element of ``left`` wins ties; otherwise ``right`` does.
    """
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        take_left = left[i] <= right[j] if stable else left[i] < right[j]
        if take_left:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def _merge_range(arr: MutableSequence[Any], lo: int, mid: int, hi: int, *, stable: bool) -> None:
    arr[lo : hi + 1] = _merge(arr[lo : mid + 1], arr[mid + 1 : hi + 1], stable=stable)


def _merge_sort(arr: MutableSequence[Any], lo: int, hi: int) -> None:
    if lo < hi:
        mid = lo + (hi - lo) // 2
        _merge_sort(arr, lo, mid)
        _merge_sort(arr, mid + 1, hi)
        _merge_range(arr, lo, mid, hi, stable=False)


def merge_sort(arr: MutableSequence[Any]) -> None:
    """Sort ``arr`` in place with top-down merge sort."""
    if len(arr) > 1:
        _merge_sort(arr, 0, len(arr) - 1)


def partition(arr: MutableSequence[Any], lo: int, hi: int) -> int:
    """Partition ``arr[lo:hi + 1]`` around the pivot ``arr[hi]``.

    Returns the pivot's final index; smaller elements lie before it and
    larger ones after.
    """
    pivot = hi
    i = lo - 1
    j = hi
    while True:
        i += 1
        while arr[i] < arr[pivot]:
            i += 1
        j -= 1
        while j >= 0 and arr[j] > arr[pivot]:
            j -= 1
        if i >= j:
            break
        arr[i], arr[j] = arr[j], arr[i]
    arr[i], arr[pivot] = arr[pivot], arr[i]
    return i


def _quick_sort(arr: MutableSequence[Any], lo: int, hi: int) -> None:
    if lo < hi:
        p = partition(arr, lo, hi)
        _quick_sort(arr, lo, p - 1)
        _quick_sort(arr, p + 1, hi)


def quick_sort(arr: MutableSequence[Any]) -> None:
    """Sort ``arr`` in place with quick sort."""
    _quick_sort(arr, 0, len(arr) - 1)


def _min_run_length(n: int) -> int:
    r = 0
    while n >= _MIN_MERGE:
        r |= n & 1
        n >>= 1
    return n + r


def _insertion_sort_range(arr: MutableSequence[Any], left: int, right: int) -> None:
    for i in range(left + 1, right + 1):
        current = arr[i]
        j = i - 1
        while j >= left and arr[j] > current:
            arr[j + 1] = arr[j]
            j -= 1
        arr[j + 1] = current


def tim_sort(arr: MutableSequence[Any], n: int) -> None:
    """Sort the first ``n`` elements of ``arr`` in place with a simple tim sort."""
    if not 0 <= n <= len(arr):
        raise ValueError(f"n must lie in 0..{len(arr)}, got {n}")
    min_run = _min_run_length(_MIN_MERGE)

    for start in range(0, n, min_run):
        _insertion_sort_range(arr, start, min(start + _MIN_MERGE - 1, n - 1))

    size = min_run
    while size < n:
        for left in range(0, n, 2 * size):
            mid = left + size - 1
            right = min(left + 2 * size - 1, n - 1)
            if mid < right:
                _merge_range(arr, left, mid, right, stable=True)
        size *= 2