"""Graph ports - Abstractions for path computation.

These protocols define the contract between the query driver and the
shortest-path engine.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..domain.models import PathResult
    from ..graph.load_graph import SubscriberGraph


class PathSolverPort(Protocol):
    """Port for shortest-path computation.

    Implementation: adapters/graph/dijkstra_solver.py
    """

    def solve(self, graph: SubscriberGraph, source: str, target: str) -> PathResult:
        """Find one minimum-hop path between two users.

        Args:
            graph: The subscriber graph.
            source: Email the path starts from.
            target: Email the path ends at.

        Returns:
            PathResult with the intermediate vertices and hop count.

        Raises:
            UnknownVertexError: If source or target is not a user.
            NoPathError: If target is unreachable from source.
        """
        ...

    def solve_safe(
        self, graph: SubscriberGraph, source: str, target: str
    ) -> PathResult:
        """Like solve(), but returns an empty PathResult on failure."""
        ...
