"""Shortest total length of segments that connect every point (Kruskal's algorithm)."""

from __future__ import annotations

import math
from dataclasses import dataclass
from itertools import combinations
from typing import Iterable


@dataclass(frozen=True)
class Point:
    x: float
    y: float


def minimum_connection_length(points: Iterable[Point | tuple[float, float]]) -> float:
    """Total length of a minimum spanning tree over the points."""
    pts = [p if isinstance(p, Point) else Point(*p) for p in points]
    edges = sorted(
        (math.dist((a.x, a.y), (b.x, b.y)), i, j)
        for (i, a), (j, b) in combinations(enumerate(pts), 2)
    )
    parent = list(range(len(pts)))

    def find(i: int) -> int:
        while parent[i] != i:
            parent[i] = parent[parent[i]]
            i = parent[i]
        return i

    total = 0.0
    joined = 0
    for length, i, j in edges:
        if joined == len(pts) - 1:
            break
        root_i, root_j = find(i), find(j)
        if root_i != root_j:
            parent[root_j] = root_i
            total += length
            joined += 1
    return total