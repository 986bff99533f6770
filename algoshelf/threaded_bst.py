"""A right- and left-threaded binary search tree.

Empty child links point to the in-order predecessor or successor, so the
tree can be walked in order without a stack.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator


class DuplicateKeyError(ValueError):
    """Raised when a value already in the tree is inserted again."""


@dataclass(eq=False)
class _Node:
    value: Any
    left: _Node | None = field(default=None, repr=False)
    right: _Node | None = field(default=None, repr=False)
    left_thread: bool = True
    right_thread: bool = True


class ThreadedBST:
    """Threaded search tree of unique values, created with its root value."""

    def __init__(self, root_value: Any) -> None:
        self._root = _Node(root_value)

    def insert(self, value: Any) -> None:
        """Add ``value``; raise DuplicateKeyError if it is already present."""
        ptr = self._root
        while True:
            if value == ptr.value:
                raise DuplicateKeyError(f"Duplicate Key {value}")
            if value < ptr.value:
                if ptr.left_thread:
                    ptr.left = _Node(value, left=ptr.left, right=ptr)
                    ptr.left_thread = False
                    return
                ptr = ptr.left
            else:
                if ptr.right_thread:
                    ptr.right = _Node(value, left=ptr, right=ptr.right)
                    ptr.right_thread = False
                    return
                ptr = ptr.right

    @staticmethod
    def _leftmost(node: _Node) -> _Node:
        while not node.left_thread:
            node = node.left
        return node

    def __iter__(self) -> Iterator[Any]:
        node: _Node | None = self._leftmost(self._root)
        while node is not None:
            yield node.value
            if node.right_thread:
                node = node.right
            else:
                node = self._leftmost(node.right)