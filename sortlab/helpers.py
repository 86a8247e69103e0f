"""Array generators, order checks and a timing harness for sort functions."""

from __future__ import annotations

import random
import time
from collections.abc import Callable, Iterable, MutableSequence, Sequence
from dataclasses import dataclass
from itertools import pairwise
from typing import Any


class NotSortedError(AssertionError):
    """Raised when a sort function leaves its input out of order."""


def _resolve_rng(rng: random.Random | None) -> random.Random:
    return rng if rng is not None else random.Random()


def generate_random_array(
    n: int, range_l: int, range_r: int, rng: random.Random | None = None
) -> list[int]:
    """Return ``n`` random integers, each in the closed range ``[range_l, range_r]``."""
    if range_l > range_r:
        raise ValueError(f"empty range [{range_l}, {range_r}]")
    if n < 0:
        raise ValueError(f"array length must not be negative, got {n}")
    gen = _resolve_rng(rng)
    return [gen.randint(range_l, range_r) for _ in range(n)]


def generate_nearly_ordered_array(
    n: int, swap_times: int, rng: random.Random | None = None
) -> list[int]:
    """Return ``0 .. n-1`` in order, then with ``swap_times`` random pairs swapped.

    With ``swap_times == 0`` the result is fully ordered; the more swaps,
    the less ordered it becomes.
    """
    if n < 0:
        raise ValueError(f"array length must not be negative, got {n}")
    if swap_times < 0:
        raise ValueError(f"swap count must not be negative, got {swap_times}")
    arr = list(range(n))
    if swap_times and not n:
        raise ValueError("cannot swap elements of an empty array")
    gen = _resolve_rng(rng)
    for _ in range(swap_times):
        x, y = gen.randrange(n), gen.randrange(n)
        arr[x], arr[y] = arr[y], arr[x]
    return arr


def is_sorted(seq: Iterable[Any]) -> bool:
    """Return True if no element is greater than the one after it."""
    return not any(a > b for a, b in pairwise(seq))


def format_array(seq: Iterable[Any]) -> str:
    """Return the elements of ``seq`` separated by single spaces."""
    return " ".join(str(item) for item in seq)


@dataclass(frozen=True)
class SortTiming:
    """The outcome of timing one sort run."""

    name: str
    seconds: float

    def __str__(self) -> str:
        return f"{self.name} : {self.seconds:g} s"


def test_sort(
    name: str, sort: Callable[[MutableSequence[Any]], Any], arr: MutableSequence[Any]
) -> SortTiming:
    """Sort ``arr`` in place with ``sort``, check the result and return the CPU time taken.

    Raises NotSortedError if ``arr`` is not in order afterwards.
    """
    start = time.process_time()
    sort(arr)
    elapsed = time.process_time() - start
    if not is_sorted(arr):
        raise NotSortedError(f"{name} left the array unsorted")
    return SortTiming(name, elapsed)


test_sort.__test__ = False  # keep test collectors from treating this as a test


def _check_sequence(seq: Sequence[Any]) -> None:
    if not isinstance(seq, Sequence):
        raise TypeError("expected a sequence")