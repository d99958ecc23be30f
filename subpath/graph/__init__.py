"""Graph-related utilities for representing the subscriber network.

This subpackage contains modules to build an in-memory graph from user
records and to run path-finding algorithms on top of that graph.
"""

from .dijkstra import INFINITY, PATH_FINDER_STRATEGIES, bfs, dijkstra
from .edges import EdgeSet
from .load_graph import SubscriberGraph, build_graph
from .registry import VertexRegistry

__all__ = [
    "INFINITY",
    "PATH_FINDER_STRATEGIES",
    "EdgeSet",
    "SubscriberGraph",
    "VertexRegistry",
    "bfs",
    "build_graph",
    "dijkstra",
]
