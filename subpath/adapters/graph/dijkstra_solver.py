"""Shortest-path solver adapter.

This adapter wraps the path-finders in graph/dijkstra.py and adds:
- Email to vertex resolution
- Domain model output (PathResult)
- Typed errors for unknown users and unreachable targets
- Logging
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ...domain.errors import ConfigurationError, NoPathError
from ...domain.models import PathEntry, PathResult
from ...graph.dijkstra import INFINITY, PathFinder, get_path_finder
from ...graph.load_graph import SubscriberGraph

_EMPTY = PathResult(intermediates=(), hops=INFINITY)


@dataclass
class DijkstraPathSolver:
    """Path solver over the subscriber graph.

    This adapter implements PathSolverPort. The underlying path-finder
    is picked by name from PATH_FINDER_STRATEGIES.

    Attributes:
        strategy: Name of the path-finder ("dijkstra" or "bfs")
    """

    strategy: str = "dijkstra"
    _finder: PathFinder = field(init=False, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)
        finder = get_path_finder(self.strategy)
        if finder is None:
            raise ConfigurationError(
                f"Unknown path-finding strategy: {self.strategy!r}",
                setting_name="solver.strategy",
                expected_type="dijkstra|bfs",
            )
        self._finder = finder

    def solve(self, graph: SubscriberGraph, source: str, target: str) -> PathResult:
        """Find one minimum-hop path from ``source`` to ``target``.

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
        self._logger.debug(
            "Solving path",
            extra={"source": source, "target": target, "strategy": self.strategy},
        )

        start = graph.registry.require(source)
        end = graph.registry.require(target)

        path, hops = self._finder(graph, start.index, end.index)

        if not path:
            raise NoPathError(
                f"No path from {source} to {target}",
                source=source,
                target=target,
            )

        result = self._to_result(graph, path, hops)
        self._logger.debug(
            "Path found",
            extra={"source": source, "target": target, "hops": hops},
        )
        return result

    def solve_safe(
        self, graph: SubscriberGraph, source: str, target: str
    ) -> PathResult:
        """Find the shortest path, returning an empty result on failure.

        Like solve(), but returns a PathResult with no intermediates and
        INFINITY hops instead of raising.
        """
        start = graph.registry.lookup(source)
        end = graph.registry.lookup(target)
        if start is None or end is None:
            return _EMPTY

        path, hops = self._finder(graph, start.index, end.index)

        if not path:
            return _EMPTY

        return self._to_result(graph, path, hops)

    @staticmethod
    def _to_result(graph: SubscriberGraph, path: list[int], hops: int) -> PathResult:
        intermediates = tuple(
            PathEntry(email=vertex.email, created=vertex.created)
            for vertex in (graph.registry.vertex(index) for index in path[1:-1])
        )
        return PathResult(intermediates=intermediates, hops=hops)
