"""A singly linked circular list of unique keys, each carrying a data value."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator


@dataclass(eq=False)
class _Node:
    key: Any
    data: Any
    next: _Node | None = field(default=None, repr=False)


class CircularLinkedList:
    """Keyed circular list; the last node links back to the head."""

    def __init__(self) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._index: dict[Any, _Node] = {}

    def _require_new(self, key: Any) -> None:
        if key in self._index:
            raise ValueError(f"Node with key {key} already exists")

    def _node(self, key: Any) -> _Node:
        try:
            return self._index[key]
        except KeyError:
            raise KeyError(f"Node with key {key} does not exist") from None

    def _nodes(self) -> Iterator[_Node]:
        node = self._head
        if node is None:
            return
        while True:
            yield node
            node = node.next
            if node is self._head:
                return

    def _add_to_empty(self, node: _Node) -> None:
        node.next = node
        self._head = self._tail = node

    def append(self, key: Any, data: Any) -> None:
        """Add a node after the last node."""
        self._require_new(key)
        node = _Node(key, data)
        if self._tail is None:
            self._add_to_empty(node)
        else:
            node.next = self._head
            self._tail.next = node
            self._tail = node
        self._index[key] = node

    def prepend(self, key: Any, data: Any) -> None:
        """Add a node that becomes the new head."""
        self._require_new(key)
        node = _Node(key, data)
        if self._tail is None:
            self._add_to_empty(node)
        else:
            node.next = self._head
            self._tail.next = node
            self._head = node
        self._index[key] = node

    def insert_after(self, after_key: Any, key: Any, data: Any) -> None:
        """Insert a new node directly after the node holding ``after_key``."""
        anchor = self._node(after_key)
        self._require_new(key)
        node = _Node(key, data, next=anchor.next)
        anchor.next = node
        if anchor is self._tail:
            self._tail = node
        self._index[key] = node

    def update(self, key: Any, data: Any) -> None:
        """Replace the data of the node holding ``key``."""
        self._node(key).data = data

    def remove(self, key: Any) -> None:
        """Unlink the node holding ``key``."""
        node = self._node(key)
        if node.next is node:
            self._head = self._tail = None
        else:
            prev = next(n for n in self._nodes() if n.next is node) if node is not self._head else self._tail
            prev.next = node.next
            if node is self._head:
                self._head = node.next
            if node is self._tail:
                self._tail = prev
        node.next = None
        del self._index[key]

    def peek(self, key: Any) -> Any:
        """Return the data stored under ``key``."""
        return self._node(key).data

    def __contains__(self, key: object) -> bool:
        return key in self._index

    def __len__(self) -> int:
        return len(self._index)

    def __iter__(self) -> Iterator[tuple[Any, Any]]:
        for node in self._nodes():
            yield node.key, node.data

    def render(self) -> str:
        """Text form of one lap round the list, e.g. ``(1,10)->(2,20)->``."""
        if self._head is None:
            return "List is empty"
        return "".join(f"({key},{data})->" for key, data in self)