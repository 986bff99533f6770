"""A FIFO queue of keyed members."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Any, Iterator


@dataclass
class _Member:
    key: Any
    data: Any


class LinkedQueue:
    """First-in first-out queue whose members have unique keys."""

    def __init__(self) -> None:
        self._members: deque[_Member] = deque()
        self._keys: set[Any] = set()

    def enqueue(self, key: Any, data: Any) -> None:
        """Add a member at the back of the queue."""
        if key in self._keys:
            raise ValueError(f"Member already exists with key {key}")
        self._members.append(_Member(key, data))
        self._keys.add(key)

    def dequeue(self) -> tuple[Any, Any]:
        """Remove the front member and return its ``(key, data)``."""
        if not self._members:
            raise IndexError("Queue is empty")
        member = self._members.popleft()
        self._keys.discard(member.key)
        return member.key, member.data

    def update(self, key: Any, data: Any) -> None:
        """Dequeue every member ahead of ``key``, then set its data."""
        if key not in self._keys:
            raise KeyError(f"Member with key {key} does not exist")
        while self._members[0].key != key:
            self.dequeue()
        self._members[0].data = data

    def peek(self, key: Any) -> Any:
        """Return the data of the member holding ``key``."""
        for member in self._members:
            if member.key == key:
                return member.data
        raise KeyError(f"Member with key {key} does not exist")

    def __len__(self) -> int:
        return len(self._members)

    def __iter__(self) -> Iterator[tuple[Any, Any]]:
        return ((m.key, m.data) for m in self._members)

    def render(self) -> str:
        """Text form of the queue's data, e.g. ``10-20-``."""
        if not self._members:
            return "Queue is empty"
        return "".join(f"{m.data}-" for m in self._members)