"""A trie of patterns and multi-pattern matching against a text."""

from __future__ import annotations

from typing import Iterable


class Trie:
    """Trie built from patterns; node 0 is the root and nodes are numbered as created."""

    def __init__(self, patterns: Iterable[str]) -> None:
        self._children: list[dict[str, int]] = [{}]
        for pattern in patterns:
            node = 0
            for letter in pattern:
                nxt = self._children[node].get(letter)
                if nxt is None:
                    nxt = len(self._children)
                    self._children.append({})
                    self._children[node][letter] = nxt
                node = nxt

    def _check(self, node: int) -> None:
        if not 0 <= node < len(self._children):
            raise IndexError(f"No node {node}")

    def child(self, node: int, letter: str) -> int | None:
        """The node reached from ``node`` along ``letter``, or None."""
        self._check(node)
        return self._children[node].get(letter)

    def is_leaf(self, node: int) -> bool:
        """Whether ``node`` has no outgoing edges."""
        self._check(node)
        return not self._children[node]

    def edges(self) -> list[tuple[int, int, str]]:
        """Every edge as ``(parent, child, letter)``, by parent then creation order."""
        return [
            (parent, child, letter)
            for parent, kids in enumerate(self._children)
            for letter, child in kids.items()
        ]

    def match_positions(self, text: str) -> list[int]:
        """Start positions in ``text`` from which walking the trie reaches a leaf."""
        positions: list[int] = []
        for start in range(len(text)):
            node: int | None = 0
            for letter in text[start:]:
                node = self._children[node].get(letter)
                if node is None:
                    break
                if not self._children[node]:
                    positions.append(start)
                    break
        return positions