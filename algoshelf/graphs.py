"""Directed and undirected graphs on vertices ``1..n`` held as adjacency lists."""

from __future__ import annotations

from collections import deque
from typing import Iterator


def _check_size(vertices: int) -> None:
    if vertices < 0:
        raise ValueError("vertices must not be negative")


def _post_order(adjacency: list[list[int]], start: int, visited: list[bool]) -> Iterator[int]:
    visited[start] = True
    stack = [(start, iter(adjacency[start]))]
    while stack:
        vertex, neighbours = stack[-1]
        for nxt in neighbours:
            if not visited[nxt]:
                visited[nxt] = True
                stack.append((nxt, iter(adjacency[nxt])))
                break
        else:
            stack.pop()
            yield vertex


class _Graph:
    def __init__(self, vertices: int) -> None:
        _check_size(vertices)
        self._vertices = vertices
        self._adj: list[list[int]] = [[] for _ in range(vertices + 1)]

    def _check(self, vertex: int) -> None:
        if not 1 <= vertex <= self._vertices:
            raise ValueError(f"No vertex {vertex}")

    def _all(self) -> range:
        return range(1, self._vertices + 1)


class DirectedGraph(_Graph):
    """Directed graph; edges keep the order in which they were added."""

    def __init__(self, vertices: int) -> None:
        super().__init__(vertices)
        self._rev: list[list[int]] = [[] for _ in range(vertices + 1)]

    def add_edge(self, x: int, y: int) -> None:
        """Add the edge ``x -> y``."""
        self._check(x)
        self._check(y)
        self._adj[x].append(y)
        self._rev[y].append(x)

    def dfs(self, start: int) -> list[int]:
        """Vertices reachable from ``start`` in depth-first visiting order."""
        self._check(start)
        visited = [False] * (self._vertices + 1)
        visited[start] = True
        order = [start]
        stack = [iter(self._adj[start])]
        while stack:
            for nxt in stack[-1]:
                if not visited[nxt]:
                    visited[nxt] = True
                    order.append(nxt)
                    stack.append(iter(self._adj[nxt]))
                    break
            else:
                stack.pop()
        return order

    def is_cyclic(self) -> bool:
        """Whether the graph contains a directed cycle (self-loops included)."""
        state = [0] * (self._vertices + 1)  # 0 unseen, 1 on the path, 2 finished
        for start in self._all():
            if state[start]:
                continue
            state[start] = 1
            stack = [(start, iter(self._adj[start]))]
            while stack:
                vertex, neighbours = stack[-1]
                for nxt in neighbours:
                    if state[nxt] == 1:
                        return True
                    if state[nxt] == 0:
                        state[nxt] = 1
                        stack.append((nxt, iter(self._adj[nxt])))
                        break
                else:
                    state[vertex] = 2
                    stack.pop()
        return False

    def _finish_order(self) -> list[int]:
        visited = [False] * (self._vertices + 1)
        finished: list[int] = []
        for vertex in self._all():
            if not visited[vertex]:
                finished.extend(_post_order(self._adj, vertex, visited))
        return finished

    def topological_order(self) -> list[int]:
        """Vertices in decreasing order of depth-first finishing time."""
        return self._finish_order()[::-1]

    def strongly_connected_count(self) -> int:
        """Number of strongly connected components."""
        visited = [False] * (self._vertices + 1)
        count = 0
        for vertex in reversed(self._finish_order()):
            if not visited[vertex]:
                for _ in _post_order(self._rev, vertex, visited):
                    pass
                count += 1
        return count


class UndirectedGraph(_Graph):
    """Undirected graph."""

    def __init__(self, vertices: int) -> None:
        super().__init__(vertices)

    def add_edge(self, x: int, y: int) -> None:
        """Add the edge ``x - y``."""
        self._check(x)
        self._check(y)
        self._adj[x].append(y)
        self._adj[y].append(x)

    def distance(self, source: int, destination: int) -> int:
        """Fewest edges from ``source`` to ``destination``, or -1 if unreachable."""
        self._check(source)
        self._check(destination)
        dist = {source: 0}
        queue = deque([source])
        while queue:
            vertex = queue.popleft()
            for nxt in self._adj[vertex]:
                if nxt not in dist:
                    dist[nxt] = dist[vertex] + 1
                    queue.append(nxt)
        return dist.get(destination, -1)

    def is_bipartite(self) -> bool:
        """Whether the vertices can be two-coloured with no edge inside a colour."""
        colour: dict[int, int] = {}
        for start in self._all():
            if start in colour:
                continue
            colour[start] = 0
            queue = deque([start])
            while queue:
                vertex = queue.popleft()
                for nxt in self._adj[vertex]:
                    if nxt not in colour:
                        colour[nxt] = 1 - colour[vertex]
                        queue.append(nxt)
                    elif colour[nxt] == colour[vertex]:
                        return False
        return True