"""A fixed-capacity indexed max-heap whose items can be looked up and changed by index."""

from __future__ import annotations

from typing import Any


class IndexMaxHeap:
    """A max-heap over items stored at caller-chosen indices ``0 .. capacity-1``.

    The heap orders indices by the items stored at them. Each index can hold at
    most one item at a time, and an item already in the heap can be read or
    changed through its index.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must not be negative, got {capacity}")
        self._capacity = capacity
        self._data: list[Any] = [None] * capacity
        # _heap[k] is the index stored at heap position k.
        self._heap: list[int] = []
        # _position[i] is the heap position of index i, or None if absent.
        self._position: list[int | None] = [None] * capacity

    def __len__(self) -> int:
        return len(self._heap)

    def is_empty(self) -> bool:
        """Return True if the heap holds no items."""
        return not self._heap

    def _check_index(self, index: int) -> None:
        if not 0 <= index < self._capacity:
            raise IndexError(f"index {index} is outside [0, {self._capacity})")

    def contains(self, index: int) -> bool:
        """Return True if an item is currently stored at ``index``."""
        self._check_index(index)
        return self._position[index] is not None

    def insert(self, index: int, item: Any) -> None:
        """Store ``item`` at ``index`` and add it to the heap.

        Raises IndexError if the heap is full or ``index`` is out of range, and
        ValueError if ``index`` already holds an item.
        """
        if len(self._heap) >= self._capacity:
            raise IndexError(f"heap is full (capacity {self._capacity})")
        self._check_index(index)
        if self._position[index] is not None:
            raise ValueError(f"index {index} already holds an item")
        self._data[index] = item
        self._heap.append(index)
        self._position[index] = len(self._heap) - 1
        self._shift_up(len(self._heap) - 1)

    def _pop_root(self) -> int:
        if not self._heap:
            raise IndexError("extract from an empty heap")
        self._swap(0, len(self._heap) - 1)
        top = self._heap.pop()
        self._position[top] = None
        if self._heap:
            self._shift_down(0)
        return top

    def extract_max(self) -> Any:
        """Remove the largest item and return it; raises IndexError if empty."""
        top = self._pop_root()
        item = self._data[top]
        self._data[top] = None
        return item

    def extract_max_index(self) -> int:
        """Remove the largest item and return the index it was stored at."""
        top = self._pop_root()
        self._data[top] = None
        return top

    def get_item(self, index: int) -> Any:
        """Return the item stored at ``index``; raises KeyError if there is none."""
        if not self.contains(index):
            raise KeyError(index)
        return self._data[index]

    def change_item(self, index: int, item: Any) -> None:
        """Replace the item at ``index`` and restore heap order.

        Raises KeyError if ``index`` holds no item.
        """
        if not self.contains(index):
            raise KeyError(index)
        self._data[index] = item
        k = self._position[index]
        assert k is not None
        self._shift_up(k)
        k = self._position[index]
        assert k is not None
        self._shift_down(k)

    def _key(self, k: int) -> Any:
        return self._data[self._heap[k]]

    def _swap(self, a: int, b: int) -> None:
        heap = self._heap
        heap[a], heap[b] = heap[b], heap[a]
        self._position[heap[a]] = a
        self._position[heap[b]] = b

    def _shift_up(self, k: int) -> None:
        while k > 0:
            parent = (k - 1) // 2
            if not self._key(parent) < self._key(k):
                break
            self._swap(parent, k)
            k = parent

    def _shift_down(self, k: int) -> None:
        n = len(self._heap)
        while 2 * k + 1 < n:
            largest = k
            for child in (2 * k + 1, 2 * k + 2):
                if child < n and self._key(child) > self._key(largest):
                    largest = child
            if largest == k:
                break
            self._swap(k, largest)
            k = largest