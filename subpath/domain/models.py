"""Immutable domain models for the subscriber path resolver.

All models are frozen dataclasses with slots. They carry no I/O
concerns: adapters translate external documents into these types and
back.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass(frozen=True, slots=True)
class SubscriberRef:
    """Reference from a user to one of their subscribers.

    The embedded timestamp is kept for completeness only; path output
    always uses the referenced user's own ``created`` value.
    """

    email: str
    created: str = ""


@dataclass(frozen=True, slots=True)
class User:
    """A user record as read from the user source.

    Attributes:
        email: Unique identity of the user
        nick: Display nickname, informational only
        created: Opaque creation timestamp copied verbatim into output
        subscribers: Ordered subscriber references
    """

    email: str
    created: str
    nick: str = ""
    subscribers: tuple[SubscriberRef, ...] = field(default_factory=tuple)


@dataclass(frozen=True, slots=True)
class Vertex:
    """A registered user inside the graph.

    Attributes:
        index: Stable arena index of the vertex
        email: Identity of the vertex
        created: Creation timestamp of the user
    """

    index: int
    email: str
    created: str


@dataclass(frozen=True, slots=True)
class Query:
    """A shortest-path request.

    Attributes:
        id: 1-based sequence id assigned by arrival order
        source: Email the path starts from
        target: Email the path ends at
    """

    id: int
    source: str
    target: str


@dataclass(frozen=True, slots=True)
class PathEntry:
    """One intermediate vertex on a reconstructed path."""

    email: str
    created: str

    def to_dict(self) -> Dict[str, str]:
        return {"email": self.email, "created_at": self.created}


@dataclass(frozen=True, slots=True)
class PathResult:
    """Result of a single engine call.

    Attributes:
        intermediates: Vertices strictly between source and target
        hops: Number of edges traversed from source to target
    """

    intermediates: tuple[PathEntry, ...]
    hops: int

    @property
    def is_direct(self) -> bool:
        """Check if the path has no intermediate vertices."""
        return len(self.intermediates) == 0


@dataclass(frozen=True, slots=True)
class ResultRecord:
    """Output record for one query.

    Attributes:
        id: Query id
        source: Query source echoed verbatim
        target: Query target echoed verbatim
        path: Intermediate vertices in traversal order
    """

    id: int
    source: str
    target: str
    path: tuple[PathEntry, ...] = field(default_factory=tuple)

    def to_dict(self, omit_empty_path: bool = True) -> Dict[str, Any]:
        """Serialize to the result document layout."""
        data: Dict[str, Any] = {"id": self.id, "from": self.source, "to": self.target}
        if self.path or not omit_empty_path:
            path: List[Dict[str, str]] = [entry.to_dict() for entry in self.path]
            data["path"] = path
        return data
