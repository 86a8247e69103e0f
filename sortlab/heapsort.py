"""Heap sort in three forms: via heap inserts, via heapify, and in place.

All sorts work in place and return None.
"""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import Any

from sortlab.heap import MaxHeap


def heap_sort_insert(arr: MutableSequence[Any]) -> None:
    """Sort ``arr`` by inserting every item into a heap and extracting them back."""
    heap = MaxHeap(len(arr))
    for item in arr:
        heap.insert(item)
    for i in reversed(range(len(arr))):
        arr[i] = heap.extract_max()


def heap_sort_heapify(arr: MutableSequence[Any]) -> None:
    """Sort ``arr`` by building a heap in linear time and extracting its items back."""
    heap = MaxHeap.heapify(arr)
    for i in reversed(range(len(arr))):
        arr[i] = heap.extract_max()


def sift_down(arr: MutableSequence[Any], n: int, k: int) -> None:
    """Move ``arr[k]`` down the max-heap held in ``arr[0..n-1]`` until it is in place.

    Children are shifted up by assignment rather than swapped.
    """
    if not 0 <= k < n <= len(arr):
        raise IndexError(f"invalid sift bounds k={k}, n={n} for length {len(arr)}")
    item = arr[k]
    while 2 * k + 1 < n:
        j = 2 * k + 1
        if j + 1 < n and arr[j + 1] > arr[j]:
            j += 1
        if item >= arr[j]:
            break
        arr[k] = arr[j]
        k = j
    arr[k] = item


def heap_sort(arr: MutableSequence[Any]) -> None:
    """Sort ``arr`` in place with no extra storage by heapifying it and swapping out the root."""
    n = len(arr)
    for k in range((n - 2) // 2, -1, -1):
        sift_down(arr, n, k)
    for end in range(n - 1, 0, -1):
        arr[0], arr[end] = arr[end], arr[0]
        sift_down(arr, end, 0)