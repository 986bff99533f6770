"""Bounded binary heaps and heap sort.

Positions passed to heap methods are indexes into ``items()``.
"""

from __future__ import annotations

import operator
from typing import Any, Callable, Iterable


class _BoundedHeap:
    _outranks: Callable[[Any, Any], bool] = staticmethod(operator.gt)

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._items: list[Any] = []

    def _sift_up(self, i: int) -> None:
        items = self._items
        while i > 0:
            parent = (i - 1) // 2
            if not self._outranks(items[i], items[parent]):
                break
            items[i], items[parent] = items[parent], items[i]
            i = parent

    def _sift_down(self, i: int) -> None:
        items = self._items
        size = len(items)
        while True:
            best = i
            for child in (2 * i + 1, 2 * i + 2):
                if child < size and self._outranks(items[child], items[best]):
                    best = child
            if best == i:
                return
            items[i], items[best] = items[best], items[i]
            i = best

    def _check_position(self, position: int) -> None:
        if not 0 <= position < len(self._items):
            raise IndexError(f"No element at position {position}")

    def _extract(self) -> Any:
        if not self._items:
            raise IndexError("Heap empty")
        top = self._items[0]
        last = self._items.pop()
        if self._items:
            self._items[0] = last
            self._sift_down(0)
        return top

    def _insert(self, value: Any) -> None:
        if len(self._items) == self._capacity:
            raise IndexError("Heap full")
        self._items.append(value)
        self._sift_up(len(self._items) - 1)

    def _remove(self, position: int) -> Any:
        if not self._items:
            raise IndexError("Heap empty")
        self._check_position(position)
        items = self._items
        i = position
        while i > 0:
            parent = (i - 1) // 2
            items[i], items[parent] = items[parent], items[i]
            i = parent
        return self._extract()

    def _change_priority(self, position: int, value: Any) -> None:
        self._check_position(position)
        old = self._items[position]
        self._items[position] = value
        if self._outranks(value, old):
            self._sift_up(position)
        else:
            self._sift_down(position)


class MaxHeap(_BoundedHeap):
    """Bounded heap whose root is its largest element."""

    _outranks = staticmethod(operator.gt)

    def __init__(self, capacity: int) -> None:
        super().__init__(capacity)

    def insert(self, value: Any) -> None:
        """Add ``value`` to the heap."""
        self._insert(value)

    def extract_max(self) -> Any:
        """Remove and return the largest element."""
        return self._extract()

    def remove(self, position: int) -> Any:
        """Remove and return the element at ``position``."""
        return self._remove(position)

    def change_priority(self, position: int, value: Any) -> None:
        """Replace the element at ``position`` and restore heap order."""
        self._change_priority(position, value)

    def __len__(self) -> int:
        return len(self._items)

    def items(self) -> list[Any]:
        """The heap's elements in array order."""
        return list(self._items)


class MinHeap(_BoundedHeap):
    """Bounded heap whose root is its smallest element."""

    _outranks = staticmethod(operator.lt)

    def __init__(self, capacity: int) -> None:
        super().__init__(capacity)

    def insert(self, value: Any) -> None:
        """Add ``value`` to the heap."""
        self._insert(value)

    def extract_min(self) -> Any:
        """Remove and return the smallest element."""
        return self._extract()

    def remove(self, position: int) -> Any:
        """Remove and return the element at ``position``."""
        return self._remove(position)

    def change_priority(self, position: int, value: Any) -> None:
        """Replace the element at ``position`` and restore heap order."""
        self._change_priority(position, value)

    def __len__(self) -> int:
        return len(self._items)

    def items(self) -> list[Any]:
        """The heap's elements in array order."""
        return list(self._items)


def _heapify(values: list[Any], i: int, size: int) -> None:
    while True:
        largest = i
        for child in (2 * i + 1, 2 * i + 2):
            if child < size and values[child] > values[largest]:
                largest = child
        if largest == i:
            return
        values[i], values[largest] = values[largest], values[i]
        i = largest


def heap_sort(values: Iterable[Any]) -> list[Any]:
    """Return the values in ascending order, sorted with a max-heap."""
    result = list(values)
    size = len(result)
    for i in range(size // 2 - 1, -1, -1):
        _heapify(result, i, size)
    for end in range(size - 1, 0, -1):
        result[0], result[end] = result[end], result[0]
        _heapify(result, 0, end)
    return result