"""A fixed-capacity ring buffer queue."""

from __future__ import annotations

from typing import Any


class CircularQueue:
    """FIFO queue that reuses its slots in a ring."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._buffer: list[Any] = [None] * capacity
        self._front = 0
        self._size = 0

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the back."""
        capacity = len(self._buffer)
        if self._size == capacity:
            raise IndexError("Full")
        self._buffer[(self._front + self._size) % capacity] = value
        self._size += 1

    def dequeue(self) -> Any:
        """Remove and return the front value."""
        if self._size == 0:
            raise IndexError("Empty")
        value = self._buffer[self._front]
        self._buffer[self._front] = None
        self._front = (self._front + 1) % len(self._buffer)
        self._size -= 1
        return value

    def __len__(self) -> int:
        return self._size

    def items(self) -> list[Any]:
        """Queued values from front to back."""
        capacity = len(self._buffer)
        return [self._buffer[(self._front + i) % capacity] for i in range(self._size)]