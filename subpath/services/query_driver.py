"""Query driver service - Main orchestrator.

Builds the subscriber graph once, then answers every query in input
order. Per-query failures are recovered locally and produce a record
with an empty path.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence, Tuple

from ..domain.errors import ConfigurationError, NoPathError, UnknownVertexError
from ..domain.models import Query, ResultRecord, User
from ..graph.load_graph import SubscriberGraph, build_graph
from ..ports.graph import PathSolverPort
from ..ports.io import QuerySourcePort, ResultSinkPort, UserSourcePort


def number_queries(pairs: Iterable[Tuple[str, str]]) -> List[Query]:
    """Assign 1-based ids to ``(from, to)`` pairs by arrival order."""
    return [
        Query(id=index, source=source, target=target)
        for index, (source, target) in enumerate(pairs, start=1)
    ]


@dataclass
class ShortestPathService:
    """Main service for answering subscriber path queries.

    This service orchestrates the full pipeline:
    1. User loading and graph construction
    2. Query loading
    3. Path computation per query
    4. Result emission

    Attributes:
        path_solver: Computes minimum-hop paths
        user_source: Optional source of user records
        query_source: Optional source of query pairs
        result_sink: Optional destination of result records
    """

    path_solver: PathSolverPort
    user_source: Optional[UserSourcePort] = None
    query_source: Optional[QuerySourcePort] = None
    result_sink: Optional[ResultSinkPort] = None

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def answer(self, graph: SubscriberGraph, query: Query) -> ResultRecord:
        """Answer a single query against a built graph.

        Unknown endpoints and unreachable targets yield an empty path.
        """
        try:
            result = self.path_solver.solve(graph, query.source, query.target)
        except UnknownVertexError as e:
            self._logger.warning(
                "Unknown user in query",
                extra={"query_id": query.id, "email": e.email},
            )
            return ResultRecord(id=query.id, source=query.source, target=query.target)
        except NoPathError:
            self._logger.info(
                "No path found",
                extra={
                    "query_id": query.id,
                    "source": query.source,
                    "target": query.target,
                },
            )
            return ResultRecord(id=query.id, source=query.source, target=query.target)

        return ResultRecord(
            id=query.id,
            source=query.source,
            target=query.target,
            path=result.intermediates,
        )

    def run(
        self, users: Iterable[User], pairs: Iterable[Tuple[str, str]]
    ) -> List[ResultRecord]:
        """Build the graph from ``users`` and answer every query pair.

        Returns:
            One ResultRecord per pair, in input order.
        """
        graph = build_graph(users)
        queries = number_queries(pairs)

        records = [self.answer(graph, query) for query in queries]

        self._logger.info(
            "Queries answered",
            extra={
                "queries": len(records),
                "with_path": sum(1 for record in records if record.path),
            },
        )
        return records

    def execute(self) -> Sequence[ResultRecord]:
        """Run the pipeline against the configured sources and sink.

        Both sources are read before the query phase starts so that any
        input error aborts the run without partial output.

        Raises:
            ConfigurationError: If a source or the sink is not configured.
            InputUnreadableError: If an input document is unreadable.
            EmptyUserSetError: If there are no users.
            EmptyQuerySetError: If there are no queries.
            OutputUnwritableError: If the result cannot be written.
        """
        if self.user_source is None or self.query_source is None:
            raise ConfigurationError(
                "User and query sources are required",
                setting_name="sources",
            )
        if self.result_sink is None:
            raise ConfigurationError("Result sink is required", setting_name="sink")

        pairs = self.query_source.load()
        users = self.user_source.load()

        records = self.run(users, pairs)
        self.result_sink.write(records)
        return records
