"""Graph adapters - Implementations of graph-related ports.

Available implementations:
- DijkstraPathSolver: Finds minimum-hop paths (Dijkstra or BFS)
"""

from .dijkstra_solver import DijkstraPathSolver

__all__ = ["DijkstraPathSolver"]
