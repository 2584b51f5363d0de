"""Sorting by repeated exchange of neighbouring or gapped elements."""

from collections.abc import Iterable, MutableSequence
from typing import Any, TypeVar

T = TypeVar("T")

_COMB_SHRINK = 1.3


def _swap(arr: MutableSequence[Any], i: int, j: int) -> None:
    arr[i], arr[j] = arr[j], arr[i]


def bubble_sort(arr: MutableSequence[Any]) -> None:
    """Sort ``arr`` in place with bubble sort."""
    n = len(arr)
    for i in range(n):
        for j in range(n - 1 - i):
            if arr[j] > arr[j + 1]:
                _swap(arr, j, j + 1)


def cocktail_shaker_sort(arr: MutableSequence[Any]) -> None:
    """Sort ``arr`` in place, sweeping alternately forwards and backwards."""
    n = len(arr)
    if n == 0:
        return
    forward = range(n - 1)
    while True:
        swapped = False
        for i in forward:
            if arr[i] > arr[i + 1]:
                _swap(arr, i, i + 1)
                swapped = True
        if not swapped:
            break

        swapped = False
        for i in reversed(forward):
            if arr[i] > arr[i + 1]:
                _swap(arr, i, i + 1)
                swapped = True
        if not swapped:
            break


def comb_sort(arr: MutableSequence[Any]) -> None:
    """Sort ``arr`` in place with comb sort (gap shrink factor 1.3)."""
    gap = len(arr)
    done = False
    while not done:
        gap = int(gap / _COMB_SHRINK)
        if gap <= 1:
            gap = 1
            done = True
        for i in range(len(arr) - gap):
            j = i + gap
            if arr[i] > arr[j]:
                _swap(arr, i, j)
                done = False


def gnome_sort(arr: Iterable[T]) -> list[T]:
    """Return a new list holding the elements of ``arr`` in ascending order."""
    result = list(arr)
    i, j = 1, 2
    while i < len(result):
        if result[i - 1] < result[i]:
            i, j = j, j + 1
        else:
            _swap(result, i - 1, i)
            i -= 1
            if i == 0:
                i, j = j, j + 1
    return result


def odd_even_sort(arr: MutableSequence[Any]) -> None:
    """Sort ``arr`` in place with odd-even transposition sort."""
    n = len(arr)
    if n == 0:
        return
    done = False
    while not done:
        done = True
        for start in (1, 0):
            for i in range(start, n - 1, 2):
                if arr[i] > arr[i + 1]:
                    _swap(arr, i, i + 1)
                    done = False


def _stooge(arr: MutableSequence[Any], start: int, end: int) -> None:
    if arr[start] > arr[end]:
        _swap(arr, start, end)
    if start + 1 >= end:
        return
    k = (end - start + 1) // 3
    _stooge(arr, start, end - k)
    _stooge(arr, start + k, end)
    _stooge(arr, start, end - k)


def stooge_sort(arr: MutableSequence[Any]) -> None:
    """Sort ``arr`` in place with stooge sort."""
    if len(arr) == 0:
        return
    _stooge(arr, 0, len(arr) - 1)