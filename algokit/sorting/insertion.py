"""Insertion-based sorts: plain insertion sort and Shell sort."""

from collections.abc import MutableSequence
from typing import Any


def insertion_sort(arr: MutableSequence[Any]) -> None:
    """Sort ``arr`` in place with insertion sort."""
    for i in range(1, len(arr)):
        current = arr[i]
        j = i - 1
        while j >= 0 and arr[j] > current:
            arr[j + 1] = arr[j]
            j -= 1
        arr[j + 1] = current


def _gapped_insertion(values: MutableSequence[Any], start: int, gap: int) -> None:
    for i in range(start + gap, len(values), gap):
        current = values[i]
        pos = i
        while pos >= gap and values[pos - gap] > current:
            values[pos] = values[pos - gap]
            pos -= gap
        values[pos] = current


def shell_sort(values: MutableSequence[Any]) -> None:
    """Sort ``values`` in place with Shell sort, halving the gap each round."""
    gap = len(values) // 2
    while gap > 0:
        for start in range(gap):
            _gapped_insertion(values, start, gap)
        gap //= 2