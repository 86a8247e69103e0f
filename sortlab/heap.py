"""A fixed-capacity binary max-heap with a text rendering of its tree."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

# render() only draws heaps smaller than this, holding integers in [0, 100).
_RENDER_LIMIT = 100


class MaxHeap:
    """A binary max-heap that holds at most ``capacity`` items."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must not be negative, got {capacity}")
        self._capacity = capacity
        self._data: list[Any] = []

    @classmethod
    def heapify(cls, items: Iterable[Any]) -> MaxHeap:
        """Build a full heap from ``items`` in linear time; its capacity is their count."""
        data = list(items)
        heap = cls(len(data))
        heap._data = data
        for k in range(len(data) // 2 - 1, -1, -1):
            heap._shift_down(k)
        return heap

    def __len__(self) -> int:
        return len(self._data)

    def is_empty(self) -> bool:
        """Return True if the heap holds no items."""
        return not self._data

    def insert(self, item: Any) -> None:
        """Add ``item``; raises IndexError if the heap is already full."""
        if len(self._data) >= self._capacity:
            raise IndexError(f"heap is full (capacity {self._capacity})")
        self._data.append(item)
        self._shift_up(len(self._data) - 1)

    def extract_max(self) -> Any:
        """Remove and return the largest item; raises IndexError if the heap is empty."""
        if not self._data:
            raise IndexError("extract from an empty heap")
        data = self._data
        data[0], data[-1] = data[-1], data[0]
        root = data.pop()
        if data:
            self._shift_down(0)
        return root

    def _shift_up(self, k: int) -> None:
        data = self._data
        while k > 0:
            parent = (k - 1) // 2
            if not data[parent] < data[k]:
                break
            data[parent], data[k] = data[k], data[parent]
            k = parent

    def _shift_down(self, k: int) -> None:
        data = self._data
        n = len(data)
        while 2 * k + 1 < n:
            largest = k
            for child in (2 * k + 1, 2 * k + 2):
                if child < n and data[child] > data[largest]:
                    largest = child
            if largest == k:
                break
            data[k], data[largest] = data[largest], data[k]
            k = largest

    def render(self) -> str:
        """Return the heap's size, its items in array order, and a drawing of its tree.

        Only heaps of fewer than 100 integers, each in ``[0, 100)``, can be drawn.
        """
        count = len(self._data)
        if count >= _RENDER_LIMIT:
            raise ValueError(f"can only render heaps of fewer than {_RENDER_LIMIT} items")
        for item in self._data:
            if not isinstance(item, int) or isinstance(item, bool):
                raise TypeError("can only render heaps of integers")
            if not 0 <= item < _RENDER_LIMIT:
                raise ValueError(f"item {item} is outside [0, {_RENDER_LIMIT})")

        lines = [
            f"The max heap size is: {count}",
            "Data in the max heap: " + "".join(f"{item} " for item in self._data),
            "",
        ]

        max_level = 0
        remaining, per_level = count, 1
        while remaining > 0:
            max_level += 1
            remaining -= per_level
            per_level *= 2

        if max_level:
            width = 2 ** (max_level - 1) * 3 - 1
            tree_leaves = 2 ** (max_level - 1)
            items = iter(self._data)
            for level in range(max_level):
                tree_width = tree_leaves * 3 - 1
                level_count = min(count - 2**level + 1, 2**level)
                numbers = [" "] * width
                for position in range(level_count):
                    _put_number(numbers, next(items), position, tree_width, position % 2 == 0)
                lines.append("".join(numbers))
                if level == max_level - 1:
                    break
                branches = [" "] * width
                for position in range(level_count):
                    _put_branch(branches, position, tree_width)
                lines.append("".join(branches))
                tree_leaves //= 2

        return "\n".join(lines) + "\n"


def _put_number(line: list[str], num: int, position: int, tree_width: int, is_left: bool) -> None:
    sub_tree_width = (tree_width - 1) // 2
    offset = position * (tree_width + 1) + sub_tree_width
    if num >= 10:
        line[offset] = str(num // 10)
        line[offset + 1] = str(num % 10)
    elif is_left:
        line[offset] = str(num)
    else:
        line[offset + 1] = str(num)


def _put_branch(line: list[str], position: int, tree_width: int) -> None:
    sub_tree_width = (tree_width - 1) // 2
    sub_sub_tree_width = (sub_tree_width - 1) // 2
    base = position * (tree_width + 1)
    line[base + sub_sub_tree_width + 1] = "/"
    line[base + sub_tree_width + 1 + sub_sub_tree_width] = "\\"