"""A doubly linked list of unique integer keys, each carrying a data value."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator


@dataclass(eq=False)
class _Node:
    key: Any
    data: Any
    prev: _Node | None = field(default=None, repr=False)
    next: _Node | None = field(default=None, repr=False)


class DoublyLinkedList:
    """Keyed doubly linked list; keys are unique."""

    def __init__(self) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._index: dict[Any, _Node] = {}

    def _require_new(self, key: Any) -> None:
        if key in self._index:
            raise ValueError(f"The node with key {key} already exists")

    def _node(self, key: Any) -> _Node:
        try:
            return self._index[key]
        except KeyError:
            raise KeyError(f"Node with key {key} does not exist") from None

    def append(self, key: Any, data: Any) -> None:
        """Add a node at the end of the list."""
        self._require_new(key)
        node = _Node(key, data, prev=self._tail)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._index[key] = node

    def prepend(self, key: Any, data: Any) -> None:
        """Add a node at the front of the list."""
        self._require_new(key)
        node = _Node(key, data, next=self._head)
        if self._head is None:
            self._tail = node
        else:
            self._head.prev = node
        self._head = node
        self._index[key] = node

    def insert_after(self, after_key: Any, key: Any, data: Any) -> None:
        """Insert a new node directly after the node holding ``after_key``."""
        anchor = self._node(after_key)
        self._require_new(key)
        node = _Node(key, data, prev=anchor, next=anchor.next)
        if anchor.next is None:
            self._tail = node
        else:
            anchor.next.prev = node
        anchor.next = node
        self._index[key] = node

    def update(self, key: Any, data: Any) -> None:
        """Replace the data of the node holding ``key``."""
        self._node(key).data = data

    def remove(self, key: Any) -> None:
        """Unlink the node holding ``key``."""
        node = self._node(key)
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        node.prev = node.next = None
        del self._index[key]

    def peek(self, key: Any) -> Any:
        """Return the data stored under ``key``."""
        return self._node(key).data

    def __contains__(self, key: object) -> bool:
        return key in self._index

    def __len__(self) -> int:
        return len(self._index)

    def __iter__(self) -> Iterator[tuple[Any, Any]]:
        node = self._head
        while node is not None:
            yield node.key, node.data
            node = node.next

    def __reversed__(self) -> Iterator[tuple[Any, Any]]:
        node = self._tail
        while node is not None:
            yield node.key, node.data
            node = node.prev

    def render(self) -> str:
        """Text form of the list, e.g. ``(1,10)<->(2,20)<->``."""
        return "".join(f"({key},{data})<->" for key, data in self)