"""Shortest-path computation over the subscriber graph.

Two interchangeable path-finders are provided. Both operate on vertex
indices and return the full path (source and target included) plus its
hop count:

- ``dijkstra``: min-heap keyed by ``(cost, vertex_index)``
- ``bfs``: FIFO frontier, valid because every edge costs 1

If no path exists, both return ``([], INFINITY)``.
"""

from __future__ import annotations

import heapq
import sys
from collections import deque
from typing import Callable, Deque, Dict, List, Optional, Tuple

from .edges import EDGE_COST
from .load_graph import SubscriberGraph

INFINITY = sys.maxsize

PathFinder = Callable[[SubscriberGraph, int, int], Tuple[List[int], int]]


def saturating_add(cost: int, weight: int) -> int:
    """Add ``weight`` to ``cost``, clamping at INFINITY."""
    if cost >= INFINITY or weight >= INFINITY - cost:
        return INFINITY
    return cost + weight


def _reconstruct(previous: Dict[int, int], start: int, end: int) -> List[int]:
    path: List[int] = [end]
    current = end
    while current != start:
        current = previous[current]
        path.append(current)
    path.reverse()
    return path


def _valid(graph: SubscriberGraph, *indices: int) -> bool:
    size = len(graph.registry)
    return all(0 <= index < size for index in indices)


def dijkstra(graph: SubscriberGraph, start: int, end: int) -> Tuple[List[int], int]:
    """Compute the minimum-hop path between two vertices using Dijkstra.

    Parameters
    ----------
    graph:
        Subscriber graph as produced by ``build_graph``.
    start:
        Index of the source vertex.
    end:
        Index of the target vertex.

    Returns
    -------
    list[int], int
        The vertex indices from ``start`` to ``end`` (inclusive) and the
        hop count. If no path exists, returns ``([], INFINITY)``.
    """
    if not _valid(graph, start, end):
        return [], INFINITY

    distances: Dict[int, int] = {start: 0}
    previous: Dict[int, int] = {}

    heap: List[Tuple[int, int]] = [(0, start)]
    visited = set()

    while heap:
        current_distance, u = heapq.heappop(heap)

        if u in visited:
            continue

        visited.add(u)

        if u == end:
            break

        for v in graph.edges.out_edges(u):
            if v in visited:
                continue
            new_distance = saturating_add(current_distance, EDGE_COST)
            if new_distance < distances.get(v, INFINITY):
                distances[v] = new_distance
                previous[v] = u
                heapq.heappush(heap, (new_distance, v))

    if end not in visited:
        return [], INFINITY

    return _reconstruct(previous, start, end), distances[end]


def bfs(graph: SubscriberGraph, start: int, end: int) -> Tuple[List[int], int]:
    """Breadth-first variant of ``dijkstra`` with the same contract."""
    if not _valid(graph, start, end):
        return [], INFINITY

    distances: Dict[int, int] = {start: 0}
    previous: Dict[int, int] = {}
    frontier: Deque[int] = deque([start])

    while frontier:
        u = frontier.popleft()
        if u == end:
            return _reconstruct(previous, start, end), distances[end]

        next_distance = saturating_add(distances[u], EDGE_COST)
        for v in graph.edges.out_edges(u):
            # First discovery is final in a unit-cost graph
            if v not in distances and next_distance < INFINITY:
                distances[v] = next_distance
                previous[v] = u
                frontier.append(v)

    return [], INFINITY


PATH_FINDER_STRATEGIES: Dict[str, PathFinder] = {
    "dijkstra": dijkstra,
    "bfs": bfs,
}


def get_path_finder(name: str) -> Optional[PathFinder]:
    return PATH_FINDER_STRATEGIES.get(name)
