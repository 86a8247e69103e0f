"""Top-down and bottom-up merge sort.

All functions sort a mutable sequence in place and return None.
"""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import Any

from sortlab.elementary import insertion_sort

# Ranges spanning at most this many index steps are finished by insertion sort.
_INSERTION_CUTOFF = 15


def merge(arr: MutableSequence[Any], lo: int, mid: int, hi: int) -> None:
    """Merge the sorted runs ``arr[lo..mid]`` and ``arr[mid+1..hi]`` (inclusive) in place.

    When the two runs hold equal items, the one from the right run is taken first.
    """
    if not 0 <= lo <= mid <= hi < len(arr):
        raise ValueError(f"invalid merge bounds lo={lo}, mid={mid}, hi={hi} for length {len(arr)}")
    left = list(arr[lo : mid + 1])
    right = list(arr[mid + 1 : hi + 1])
    i = j = 0
    for k in range(lo, hi + 1):
        if i >= len(left):
            arr[k] = right[j]
            j += 1
        elif j >= len(right):
            arr[k] = left[i]
            i += 1
        elif left[i] < right[j]:
            arr[k] = left[i]
            i += 1
        else:
            arr[k] = right[j]
            j += 1


def _merge_sort(arr: MutableSequence[Any], lo: int, hi: int) -> None:
    if hi - lo <= _INSERTION_CUTOFF:
        insertion_sort(arr, lo, hi)
        return
    mid = (lo + hi) // 2
    _merge_sort(arr, lo, mid)
    _merge_sort(arr, mid + 1, hi)
    # Runs already in order need no merge; this pays off on nearly ordered input.
    if arr[mid] > arr[mid + 1]:
        merge(arr, lo, mid, hi)


def merge_sort(arr: MutableSequence[Any]) -> None:
    """Sort ``arr`` in place with recursive merge sort, using insertion sort for small ranges."""
    _merge_sort(arr, 0, len(arr) - 1)


def merge_sort_bottom_up(arr: MutableSequence[Any]) -> None:
    """Sort ``arr`` in place by merging runs of width 1, 2, 4, ... without recursion."""
    n = len(arr)
    size = 1
    while size < n:
        for start in range(0, n - size, 2 * size):
            merge(arr, start, start + size - 1, min(start + 2 * size - 1, n - 1))
        size *= 2