"""Quadratic sorts: selection sort and two forms of insertion sort.

All functions sort a mutable sequence in place and return None.
"""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import Any


def selection_sort(arr: MutableSequence[Any]) -> None:
    """Sort ``arr`` in place by repeatedly moving the smallest remaining item forward."""
    n = len(arr)
    for i in range(n - 1):
        # min() keeps the first of equal items, as a strict comparison does
        min_index = min(range(i, n), key=arr.__getitem__)
        arr[i], arr[min_index] = arr[min_index], arr[i]


def insertion_sort_swapping(arr: MutableSequence[Any]) -> None:
    """Sort ``arr`` in place, swapping each item leftwards until it is in place."""
    for i in range(1, len(arr)):
        j = i
        while j > 0 and arr[j] < arr[j - 1]:
            arr[j], arr[j - 1] = arr[j - 1], arr[j]
            j -= 1


def insertion_sort(arr: MutableSequence[Any], lo: int = 0, hi: int | None = None) -> None:
    """Sort ``arr[lo..hi]`` in place; ``hi`` is inclusive and defaults to the last index.

    Each item is lifted out and larger items are shifted right instead of swapped.
    """
    if hi is None:
        hi = len(arr) - 1
    for i in range(lo + 1, hi + 1):
        item = arr[i]
        j = i
        while j > lo and arr[j - 1] > item:
            arr[j] = arr[j - 1]
            j -= 1
        arr[j] = item