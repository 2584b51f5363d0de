"""Predicates over sequences used by the sorting routines and their callers."""

from collections.abc import Iterable
from itertools import pairwise
from typing import Any


def is_sorted(arr: Iterable[Any]) -> bool:
    """Return True if no element is greater than the one after it."""
    return not any(prev > item for prev, item in pairwise(arr))