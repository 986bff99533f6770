"""A self-balancing AVL search tree of unique values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator


@dataclass(eq=False)
class _Node:
    value: Any
    height: int = 1
    left: _Node | None = None
    right: _Node | None = None


def _height(node: _Node | None) -> int:
    return node.height if node is not None else 0


def _refresh(node: _Node) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _balance(node: _Node | None) -> int:
    return _height(node.left) - _height(node.right) if node is not None else 0


def _rotate_left(a: _Node) -> _Node:
    b = a.right
    a.right = b.left
    b.left = a
    _refresh(a)
    _refresh(b)
    return b


def _rotate_right(b: _Node) -> _Node:
    a = b.left
    b.left = a.right
    a.right = b
    _refresh(b)
    _refresh(a)
    return a


def _rebalance(node: _Node) -> _Node:
    _refresh(node)
    balance = _balance(node)
    if balance > 1:
        if _balance(node.left) < 0:
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if balance < -1:
        if _balance(node.right) > 0:
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


def _insert(node: _Node | None, value: Any) -> tuple[_Node, bool]:
    if node is None:
        return _Node(value), True
    if value < node.value:
        node.left, added = _insert(node.left, value)
    elif value > node.value:
        node.right, added = _insert(node.right, value)
    else:
        return node, False
    return (_rebalance(node), True) if added else (node, False)


def _delete(node: _Node | None, value: Any) -> tuple[_Node | None, bool]:
    if node is None:
        return None, False
    if value < node.value:
        node.left, removed = _delete(node.left, value)
    elif value > node.value:
        node.right, removed = _delete(node.right, value)
    else:
        if node.left is None:
            return node.right, True
        if node.right is None:
            return node.left, True
        successor = node.right
        while successor.left is not None:
            successor = successor.left
        node.value = successor.value
        node.right, _ = _delete(node.right, successor.value)
        removed = True
    return (_rebalance(node), True) if removed else (node, False)


def _walk(node: _Node | None, order: str) -> Iterator[Any]:
    if node is None:
        return
    if order == "pre":
        yield node.value
    yield from _walk(node.left, order)
    if order == "in":
        yield node.value
    yield from _walk(node.right, order)
    if order == "post":
        yield node.value


class AVLTree:
    """Balanced search tree; duplicate values are ignored."""

    def __init__(self) -> None:
        self._root: _Node | None = None
        self._size = 0

    def insert(self, value: Any) -> bool:
        """Add ``value``; return False if it was already present."""
        self._root, added = _insert(self._root, value)
        self._size += added
        return added

    def delete(self, value: Any) -> bool:
        """Remove ``value``; return False if it was not present."""
        self._root, removed = _delete(self._root, value)
        self._size -= removed
        return removed

    def __contains__(self, value: object) -> bool:
        node = self._root
        while node is not None:
            if value == node.value:
                return True
            node = node.left if value < node.value else node.right
        return False

    def __len__(self) -> int:
        return self._size

    def height(self) -> int:
        """Number of levels in the tree; 0 when empty."""
        return _height(self._root)

    def in_order(self) -> list[Any]:
        return list(_walk(self._root, "in"))

    def pre_order(self) -> list[Any]:
        return list(_walk(self._root, "pre"))

    def post_order(self) -> list[Any]:
        return list(_walk(self._root, "post"))