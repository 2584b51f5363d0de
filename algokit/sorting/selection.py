"""Selection-based sorts: selection sort and heap sort."""

from collections.abc import MutableSequence
from typing import Any


def _swap(arr: MutableSequence[Any], i: int, j: int) -> None:
    arr[i], arr[j] = arr[j], arr[i]


def selection_sort(arr: MutableSequence[Any]) -> None:
    """Sort ``arr`` in place with selection sort."""
    n = len(arr)
    for left in range(n):
        smallest = left
        for right in range(left + 1, n):
            if arr[right] < arr[smallest]:
                smallest = right
        _swap(arr, smallest, left)


def _move_down(arr: MutableSequence[Any], root: int, end: int) -> None:
    """Sift ``arr[root]`` down within the max heap ``arr[:end]``."""
    last = end - 1
    while True:
        left = 2 * root + 1
        if left > last:
            break
        right = left + 1
        largest = right if right <= last and arr[right] > arr[left] else left
        if arr[largest] > arr[root]:
            _swap(arr, root, largest)
        root = largest


def heap_sort(arr: MutableSequence[Any]) -> None:
    """Sort ``arr`` in place with heap sort."""
    n = len(arr)
    if n <= 1:
        return
    for i in reversed(range((n - 2) // 2 + 1)):
        _move_down(arr, i, n)
    for end in reversed(range(1, n)):
        _swap(arr, 0, end)
        _move_down(arr, 0, end)