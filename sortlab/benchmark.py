"""Compare the running time of the package's sorts on generated data sets."""

from __future__ import annotations

import argparse
import random
from collections.abc import Callable, Iterable, MutableSequence, Sequence
from enum import Enum
from typing import Any

from sortlab.elementary import insertion_sort, insertion_sort_swapping, selection_sort
from sortlab.heap import MaxHeap
from sortlab.heapsort import heap_sort, heap_sort_heapify, heap_sort_insert
from sortlab.helpers import (
    SortTiming,
    generate_nearly_ordered_array,
    generate_random_array,
    test_sort,
)
from sortlab.merge import merge_sort, merge_sort_bottom_up
from sortlab.quick import quick_sort, quick_sort_2ways, quick_sort_3ways

# Pairs swapped when building a nearly ordered data set.
NEARLY_ORDERED_SWAPS = 100
# Upper bound of the values in the data set full of duplicates.
DUPLICATES_MAX = 10

DEFAULT_SIZE = 100_000
HEAP_DEMO_SIZE = 20


class Dataset(str, Enum):
    """The kinds of data set a benchmark can run on."""

    RANDOM = "random"
    NEARLY_ORDERED = "nearly-ordered"
    DUPLICATES = "duplicates"


_SORTS: dict[str, Callable[[MutableSequence[Any]], Any]] = {
    "Selection Sort": selection_sort,
    "Insertion Sort Swapping": insertion_sort_swapping,
    "Insertion Sort": insertion_sort,
    "Merge Sort": merge_sort,
    "Merge Sort Bottom Up": merge_sort_bottom_up,
    "Quick Sort": quick_sort,
    "Quick Sort 2 Ways": quick_sort_2ways,
    "Quick Sort 3 Ways": quick_sort_3ways,
    "Heap Sort 1": heap_sort_insert,
    "Heap Sort 2 Heapify": heap_sort_heapify,
    "Heap Sort 3 Optimize": heap_sort,
}

_LINEUP = (
    "Merge Sort",
    "Quick Sort",
    "Quick Sort 2 Ways",
    "Quick Sort 3 Ways",
    "Heap Sort 1",
    "Heap Sort 2 Heapify",
    "Heap Sort 3 Optimize",
)


def make_dataset(
    kind: Dataset | str, n: int, rng: random.Random | None = None
) -> list[int]:
    """Return a data set of ``n`` integers of the given kind.

    ``random`` draws from ``[0, n]``, ``nearly-ordered`` is ``0 .. n-1`` with a
    few random swaps, and ``duplicates`` draws from ``[0, 10]``.
    Raises ValueError for an unknown kind.
    """
    kind = Dataset(kind)
    if kind is Dataset.RANDOM:
        return generate_random_array(n, 0, n, rng)
    if kind is Dataset.NEARLY_ORDERED:
        swaps = NEARLY_ORDERED_SWAPS if n else 0
        return generate_nearly_ordered_array(n, swaps, rng)
    return generate_random_array(n, 0, DUPLICATES_MAX, rng)


def _describe(kind: Dataset, n: int) -> str:
    if kind is Dataset.RANDOM:
        return f"Test for random array, size = {n}, random range [0, {n}]"
    if kind is Dataset.NEARLY_ORDERED:
        return f"Test for nearly ordered array, size = {n}, swap time = {NEARLY_ORDERED_SWAPS}"
    return f"Test for random array, size = {n}, random range [0,{DUPLICATES_MAX}]"


def compare(names: Iterable[str], data: Sequence[Any]) -> list[SortTiming]:
    """Run each named sort on its own copy of ``data`` and return their timings.

    ``data`` itself is left untouched. Raises ValueError for an unknown sort
    name and NotSortedError if a sort leaves its copy out of order.
    """
    names = list(names)
    unknown = [name for name in names if name not in _SORTS]
    if unknown:
        raise ValueError(f"unknown sort: {', '.join(unknown)}")
    return [test_sort(name, _SORTS[name], list(data)) for name in names]


def _lineup_for(kind: Dataset) -> tuple[str, ...]:
    # One-way quick sort degrades to quadratic time on many equal keys.
    if kind is Dataset.DUPLICATES:
        return tuple(name for name in _LINEUP if name != "Quick Sort")
    return _LINEUP


def _heap_demo(rng: random.Random) -> str:
    heap = MaxHeap(100)
    for _ in range(HEAP_DEMO_SIZE):
        heap.insert(rng.randrange(100))
    return heap.render()


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="sortlab", description="Time the sorting algorithms on generated data."
    )
    parser.add_argument(
        "-n", "--size", type=int, default=DEFAULT_SIZE, help="number of items per data set"
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for the random generator")
    parser.add_argument(
        "--kind",
        action="append",
        choices=[kind.value for kind in Dataset],
        help="data set to run on; may be repeated (default: all)",
    )
    parser.add_argument(
        "--heap-demo",
        action="store_true",
        help=f"draw a max heap of {HEAP_DEMO_SIZE} random numbers instead",
    )
    args = parser.parse_args(argv)
    if args.size < 0:
        parser.error("size must not be negative")
    return args


def main(argv: Sequence[str] | None = None) -> int:
    """Run the benchmark from the command line and return the exit status."""
    args = _parse_args(argv)
    rng = random.Random(args.seed)

    if args.heap_demo:
        print(_heap_demo(rng), end="")
        return 0

    kinds = [Dataset(kind) for kind in args.kind] if args.kind else list(Dataset)
    for position, kind in enumerate(kinds):
        if position:
            print()
        print(_describe(kind, args.size))
        data = make_dataset(kind, args.size, rng)
        for timing in compare(_lineup_for(kind), data):
            print(timing)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())