"""A fixed-capacity queue kept in an array of slots, with empty slots holding 0."""

from __future__ import annotations


class ArrayQueue:
    """Queue stored at the front of a fixed array; dequeuing shifts the rest left."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._slots: list[int] = [0] * capacity
        self._size = 0

    def is_empty(self) -> bool:
        return self._size == 0

    def is_full(self) -> bool:
        return self._size == len(self._slots)

    def enqueue(self, value: int) -> None:
        """Put ``value`` in the first free slot."""
        if self.is_full():
            raise IndexError("Queue is full")
        self._slots[self._size] = value
        self._size += 1

    def dequeue(self) -> int:
        """Remove the front value, shifting the others one slot forward."""
        if self.is_empty():
            raise IndexError("Queue is empty")
        front = self._slots.pop(0)
        self._slots.append(0)
        self._size -= 1
        return front

    def update(self, index: int, value: int) -> None:
        """Dequeue the ``index`` values in front, then overwrite the new front."""
        if not 0 <= index < self._size:
            raise IndexError(f"No queued value at index {index}")
        for _ in range(index):
            self.dequeue()
        self._slots[0] = value

    def peek(self, index: int) -> int:
        """Return the content of slot ``index``."""
        if not 0 <= index < len(self._slots):
            raise IndexError(f"Index {index} is outside the queue")
        return self._slots[index]

    def count(self) -> int:
        """Number of slots holding a non-zero value."""
        return sum(1 for value in self._slots if value != 0)

    def slots(self) -> list[int]:
        """A copy of every slot, free ones included."""
        return list(self._slots)

    def render(self) -> str:
        """Text form of all slots, e.g. ``5-6-0-``."""
        return "".join(f"{value}-" for value in self._slots)