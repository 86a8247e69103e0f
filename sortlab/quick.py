"""Quick sort with one-way, two-way and three-way partitioning.

Each variant picks a random pivot from the range being partitioned and
finishes small ranges with insertion sort. The sorts work in place and
return None.
"""

from __future__ import annotations

import random
from collections.abc import Callable, MutableSequence
from typing import Any

from sortlab.elementary import insertion_sort

_INSERTION_CUTOFF = 15

Partitioner = Callable[[MutableSequence[Any], int, int, random.Random], int]


def _resolve_rng(rng: random.Random | None) -> random.Random:
    return rng if rng is not None else random.Random()


def _check_bounds(arr: MutableSequence[Any], lo: int, hi: int) -> None:
    if not 0 <= lo <= hi < len(arr):
        raise ValueError(f"invalid partition bounds lo={lo}, hi={hi} for length {len(arr)}")


def _choose_pivot(arr: MutableSequence[Any], lo: int, hi: int, rng: random.Random) -> Any:
    pick = rng.randint(lo, hi)
    arr[lo], arr[pick] = arr[pick], arr[lo]
    return arr[lo]


def partition(
    arr: MutableSequence[Any], lo: int, hi: int, rng: random.Random | None = None
) -> int:
    """Partition ``arr[lo..hi]`` around a random pivot and return its final index ``p``.

    Afterwards ``arr[lo..p-1] < arr[p]`` and ``arr[p+1..hi] >= arr[p]``.
    """
    _check_bounds(arr, lo, hi)
    pivot = _choose_pivot(arr, lo, hi, _resolve_rng(rng))
    j = lo
    for i in range(lo + 1, hi + 1):
        if arr[i] < pivot:
            j += 1
            arr[j], arr[i] = arr[i], arr[j]
    arr[lo], arr[j] = arr[j], arr[lo]
    return j


def partition_2ways(
    arr: MutableSequence[Any], lo: int, hi: int, rng: random.Random | None = None
) -> int:
    """Partition ``arr[lo..hi]`` from both ends around a random pivot; return its index ``p``.

    Items equal to the pivot are spread over both sides, so
    ``arr[lo..p-1] <= arr[p] <= arr[p+1..hi]``.
    """
    _check_bounds(arr, lo, hi)
    pivot = _choose_pivot(arr, lo, hi, _resolve_rng(rng))
    i, j = lo + 1, hi
    while True:
        # Strict comparisons stop on equal items, which keeps both sides balanced.
        while i <= hi and arr[i] < pivot:
            i += 1
        while j >= lo + 1 and arr[j] > pivot:
            j -= 1
        if i > j:
            break
        arr[i], arr[j] = arr[j], arr[i]
        i += 1
        j -= 1
    arr[lo], arr[j] = arr[j], arr[lo]
    return j


def _quick_sort(
    arr: MutableSequence[Any], lo: int, hi: int, split: Partitioner, rng: random.Random
) -> None:
    # Recurse into the smaller side and loop on the larger to bound the depth.
    while hi - lo > _INSERTION_CUTOFF:
        p = split(arr, lo, hi, rng)
        if p - lo < hi - p:
            _quick_sort(arr, lo, p - 1, split, rng)
            lo = p + 1
        else:
            _quick_sort(arr, p + 1, hi, split, rng)
            hi = p - 1
    insertion_sort(arr, lo, hi)


def quick_sort(arr: MutableSequence[Any], rng: random.Random | None = None) -> None:
    """Sort ``arr`` in place with one-way partitioning quick sort."""
    _quick_sort(arr, 0, len(arr) - 1, partition, _resolve_rng(rng))


def quick_sort_2ways(arr: MutableSequence[Any], rng: random.Random | None = None) -> None:
    """Sort ``arr`` in place with two-way partitioning quick sort."""
    _quick_sort(arr, 0, len(arr) - 1, partition_2ways, _resolve_rng(rng))


def _partition_3ways(
    arr: MutableSequence[Any], lo: int, hi: int, rng: random.Random
) -> tuple[int, int]:
    """Split ``arr[lo..hi]`` into < pivot, == pivot, > pivot; return (lt, gt).

    Afterwards ``arr[lo..lt-1] < v``, ``arr[lt..gt-1] == v`` and ``arr[gt..hi] > v``.
    """
    pivot = _choose_pivot(arr, lo, hi, rng)
    lt = lo
    gt = hi + 1
    i = lo + 1
    while i < gt:
        if arr[i] < pivot:
            arr[i], arr[lt + 1] = arr[lt + 1], arr[i]
            i += 1
            lt += 1
        elif arr[i] > pivot:
            arr[i], arr[gt - 1] = arr[gt - 1], arr[i]
            gt -= 1
        else:
            i += 1
    arr[lo], arr[lt] = arr[lt], arr[lo]
    return lt, gt


def _quick_sort_3ways(arr: MutableSequence[Any], lo: int, hi: int, rng: random.Random) -> None:
    while hi - lo > _INSERTION_CUTOFF:
        lt, gt = _partition_3ways(arr, lo, hi, rng)
        if lt - lo < hi - gt:
            _quick_sort_3ways(arr, lo, lt - 1, rng)
            lo = gt
        else:
            _quick_sort_3ways(arr, gt, hi, rng)
            hi = lt - 1
    insertion_sort(arr, lo, hi)


def quick_sort_3ways(arr: MutableSequence[Any], rng: random.Random | None = None) -> None:
    """Sort ``arr`` in place with three-way partitioning quick sort.

    Items equal to the pivot are settled in one pass, which suits input with many duplicates.
    """
    _quick_sort_3ways(arr, 0, len(arr) - 1, _resolve_rng(rng))