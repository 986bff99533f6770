"""Disjoint-set (union-find) structures.

Elements and vertices are numbered from 1.
"""

from __future__ import annotations

from typing import Sequence


class DisjointSets:
    """Union by rank over elements ``1..size``; elements must be made into sets first."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._size = size
        self._parent: dict[int, int] = {}
        self._rank: dict[int, int] = {}

    def _require(self, element: int) -> None:
        if element not in self._parent:
            raise KeyError(f"Element {element} does not exist")

    def make_set(self, element: int) -> None:
        """Create the singleton set ``{element}``."""
        if not 1 <= element <= self._size:
            raise ValueError(f"Invalid element {element}")
        if element in self._parent:
            raise ValueError(f"Element {element} is already in a set")
        self._parent[element] = element
        self._rank[element] = 0

    def find(self, element: int) -> int:
        """Return the representative of the set holding ``element``."""
        self._require(element)
        while self._parent[element] != element:
            element = self._parent[element]
        return element

    def union(self, first: int, second: int) -> bool:
        """Join the sets of both elements; return False if they were already one set."""
        first_root = self.find(first)
        second_root = self.find(second)
        if first_root == second_root:
            return False
        if self._rank[first_root] > self._rank[second_root]:
            self._parent[second_root] = first_root
        else:
            self._parent[first_root] = second_root
            if self._rank[first_root] == self._rank[second_root]:
                self._rank[second_root] += 1
        return True

    def are_friends(self, first: int, second: int) -> bool:
        """Whether both elements belong to the same set."""
        return self.find(first) == self.find(second)

    def rank(self, element: int) -> int:
        """The rank recorded for ``element``."""
        self._require(element)
        return self._rank[element]

    def groups(self) -> list[list[int]]:
        """Members of every set, sorted, ordered by representative."""
        by_root: dict[int, list[int]] = {}
        for element in sorted(self._parent):
            by_root.setdefault(self.find(element), []).append(element)
        return [by_root[root] for root in sorted(by_root)]


class TableMerger:
    """Tables ``1..n`` with row counts; merging moves all rows into the larger table."""

    def __init__(self, row_counts: Sequence[int]) -> None:
        counts = list(row_counts)
        if any(count < 0 for count in counts):
            raise ValueError("row counts must not be negative")
        self._rows = [0] + counts
        self._parent = list(range(len(self._rows)))
        self._max = max(counts, default=0)

    def _find(self, table: int) -> int:
        if not 1 <= table < len(self._rows):
            raise IndexError(f"No table {table}")
        root = table
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[table] != root:
            self._parent[table], table = root, self._parent[table]
        return root

    def merge(self, destination: int, source: int) -> int:
        """Merge the two tables' groups and return the table now holding the rows."""
        dest_root = self._find(destination)
        source_root = self._find(source)
        if dest_root == source_root:
            return dest_root
        if self._rows[dest_root] > self._rows[source_root]:
            keep, gone = dest_root, source_root
        else:
            keep, gone = source_root, dest_root
        self._rows[keep] += self._rows[gone]
        self._rows[gone] = 0
        self._parent[gone] = keep
        self._max = max(self._max, self._rows[keep])
        return keep

    def max_rows(self) -> int:
        """Largest row count of any table."""
        return self._max


class Connectivity:
    """Tracks which of the vertices ``1..vertices`` are joined by undirected edges."""

    def __init__(self, vertices: int) -> None:
        if vertices < 0:
            raise ValueError("vertices must not be negative")
        self._parent = list(range(vertices + 1))

    def _find(self, vertex: int) -> int:
        if not 1 <= vertex < len(self._parent):
            raise ValueError(f"No vertex {vertex}")
        root = vertex
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[vertex] != root:
            self._parent[vertex], vertex = root, self._parent[vertex]
        return root

    def add_edge(self, x: int, y: int) -> None:
        x_root = self._find(x)
        y_root = self._find(y)
        if x_root != y_root:
            self._parent[x_root] = y_root

    def connected(self, x: int, y: int) -> bool:
        """Whether a path joins ``x`` and ``y``."""
        return self._find(x) == self._find(y)

    def group_count(self) -> int:
        """Number of connected components."""
        return len({self._find(v) for v in range(1, len(self._parent))})