"""Graph construction from user records.

This module defines the SubscriberGraph type used throughout the project
and builds it from a sequence of users. Every user becomes a vertex and
every subscriber reference becomes a directed edge ``user -> subscriber``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable

from .edges import EdgeSet
from .registry import VertexRegistry
from ..domain.models import User

logger = logging.getLogger(__name__)


@dataclass
class SubscriberGraph:
    """Vertex registry plus edge set, read-only once built."""

    registry: VertexRegistry = field(default_factory=VertexRegistry)
    edges: EdgeSet = field(default_factory=EdgeSet)

    def __len__(self) -> int:
        return len(self.registry)


def build_graph(users: Iterable[User]) -> SubscriberGraph:
    """Build the subscriber graph.

    Users are interned first so that subscriber references can point at
    users appearing later in the input. Subscribers that are not users
    themselves are dropped.
    """
    users = list(users)
    graph = SubscriberGraph()

    # 1) Register every user as a vertex
    for user in users:
        graph.registry.intern(user.email, user.created)

    # 2) Add an edge per subscriber reference
    dropped = 0
    for user in users:
        parent = graph.registry.require(user.email)
        for subscriber in user.subscribers:
            child = graph.registry.lookup(subscriber.email)
            if child is None:
                dropped += 1
                logger.debug(
                    "Dropping dangling subscriber",
                    extra={"user": user.email, "subscriber": subscriber.email},
                )
                continue
            graph.edges.add(parent.index, child.index)

    logger.info(
        "Graph built",
        extra={
            "vertices": len(graph),
            "edges": len(graph.edges),
            "dropped_edges": dropped,
        },
    )
    return graph
