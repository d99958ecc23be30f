"""Directed unit-cost edge set stored as an adjacency list."""

from __future__ import annotations

from typing import List, Sequence

EDGE_COST = 1


class EdgeSet:
    """Adjacency list keyed by vertex index.

    Neighbours are kept in insertion order, which makes tie-breaks in
    the path-finders deterministic for a given input ordering.
    """

    def __init__(self, vertex_count: int = 0) -> None:
        self._adjacency: List[List[int]] = [[] for _ in range(vertex_count)]
        self._count = 0

    def _ensure(self, index: int) -> None:
        missing = index + 1 - len(self._adjacency)
        if missing > 0:
            self._adjacency.extend([] for _ in range(missing))

    def add(self, parent: int, child: int) -> None:
        """Append the directed edge ``parent -> child``."""
        self._ensure(max(parent, child))
        self._adjacency[parent].append(child)
        self._count += 1

    def out_edges(self, index: int) -> Sequence[int]:
        if index >= len(self._adjacency):
            return ()
        return tuple(self._adjacency[index])

    def __len__(self) -> int:
        return self._count
