"""Binary trees given as key/left/right tables, laid out in level order.

In the tables a child index of -1 means "no child". The level-order lists
returned here use heap indexing: node ``i`` has children ``2i+1`` and ``2i+2``.
"""

from __future__ import annotations

from collections import deque
from typing import Any, Iterator, Sequence

NO_CHILD = -1


def _check(keys: Sequence[Any], lefts: Sequence[int], rights: Sequence[int]) -> None:
    if not len(keys) == len(lefts) == len(rights):
        raise ValueError("keys, lefts and rights must have the same length")


def level_order(keys: Sequence[Any], lefts: Sequence[int], rights: Sequence[int]) -> list[Any]:
    """Keys in breadth-first order starting from node 0, skipping missing children."""
    _check(keys, lefts, rights)
    if not keys:
        return []
    order: list[Any] = []
    queue = deque([0])
    while queue:
        i = queue.popleft()
        order.append(keys[i])
        queue.extend(child for child in (lefts[i], rights[i]) if child != NO_CHILD)
    return order


def padded_level_order(keys: Sequence[Any], lefts: Sequence[int], rights: Sequence[int]) -> list[Any]:
    """Breadth-first keys with ``None`` standing in for missing nodes.

    The list ends at the last real node, so its positions follow heap indexing.
    """
    _check(keys, lefts, rights)
    total = len(keys)
    if total == 0:
        return []
    nodes: list[Any] = []
    found = 0
    pending_real = 1
    queue: deque[int | None] = deque([0])
    while True:
        if pending_real == 0:
            raise ValueError("not every node is reachable from node 0")
        i = queue.popleft()
        if i is None:
            nodes.append(None)
            queue.extend((None, None))
            continue
        pending_real -= 1
        nodes.append(keys[i])
        found += 1
        if found == total:
            return nodes
        for child in (lefts[i], rights[i]):
            if child == NO_CHILD:
                queue.append(None)
            else:
                queue.append(child)
                pending_real += 1


def _walk(nodes: Sequence[Any], i: int, order: str) -> Iterator[Any]:
    if i >= len(nodes):
        return
    here = [nodes[i]] if nodes[i] is not None else []
    left = _walk(nodes, 2 * i + 1, order)
    right = _walk(nodes, 2 * i + 2, order)
    if order == "pre":
        yield from here
        yield from left
        yield from right
    elif order == "in":
        yield from left
        yield from here
        yield from right
    else:
        yield from left
        yield from right
        yield from here


def in_order(nodes: Sequence[Any]) -> list[Any]:
    """Left-node-right traversal of a heap-indexed list, skipping ``None``."""
    return list(_walk(nodes, 0, "in"))


def pre_order(nodes: Sequence[Any]) -> list[Any]:
    """Node-left-right traversal of a heap-indexed list, skipping ``None``."""
    return list(_walk(nodes, 0, "pre"))


def post_order(nodes: Sequence[Any]) -> list[Any]:
    """Left-right-node traversal of a heap-indexed list, skipping ``None``."""
    return list(_walk(nodes, 0, "post"))