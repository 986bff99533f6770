"""An unbalanced binary search tree in which equal values go to the left."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable


@dataclass
class BSTNode:
    """One node of the tree."""

    value: Any
    left: BSTNode | None = None
    right: BSTNode | None = None


def insert(root: BSTNode | None, value: Any) -> BSTNode:
    """Insert ``value`` and return the (possibly new) root."""
    node = BSTNode(value)
    if root is None:
        return node
    current = root
    while True:
        if value <= current.value:
            if current.left is None:
                current.left = node
                return root
            current = current.left
        else:
            if current.right is None:
                current.right = node
                return root
            current = current.right


def build(values: Iterable[Any]) -> BSTNode | None:
    """Build a tree by inserting the values in order."""
    root: BSTNode | None = None
    for value in values:
        root = insert(root, value)
    return root


def height(root: BSTNode | None) -> int:
    """Number of nodes on the longest root-to-leaf path; 0 for an empty tree."""
    depth = 0
    level = [root] if root is not None else []
    while level:
        depth += 1
        level = [child for node in level for child in (node.left, node.right) if child is not None]
    return depth


def in_order(root: BSTNode | None) -> list[Any]:
    """Values in left-node-right order."""
    result: list[Any] = []
    stack: list[BSTNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        result.append(node.value)
        node = node.right
    return result