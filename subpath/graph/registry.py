"""Vertex registry keyed by user email.

Vertices live in an arena list; the handle of a vertex is its index in
that list. Emails map to handles through a dictionary.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from ..domain.errors import UnknownVertexError
from ..domain.models import Vertex


class VertexRegistry:
    """Canonicalizes emails into stable vertex handles."""

    def __init__(self) -> None:
        self._vertices: List[Vertex] = []
        self._by_email: Dict[str, int] = {}

    def intern(self, email: str, created: str) -> Vertex:
        """Register ``email`` and return its vertex.

        Interning an email twice returns the same handle. The metadata of
        the latest call wins so that duplicate user rows collapse onto a
        single vertex.
        """
        index = self._by_email.get(email)
        if index is None:
            index = len(self._vertices)
            self._by_email[email] = index
            self._vertices.append(Vertex(index=index, email=email, created=created))
        elif self._vertices[index].created != created:
            self._vertices[index] = Vertex(index=index, email=email, created=created)
        return self._vertices[index]

    def lookup(self, email: str) -> Optional[Vertex]:
        index = self._by_email.get(email)
        if index is None:
            return None
        return self._vertices[index]

    def require(self, email: str) -> Vertex:
        """Like lookup(), but raises UnknownVertexError when missing."""
        vertex = self.lookup(email)
        if vertex is None:
            raise UnknownVertexError(f"Unknown user: {email}", email=email)
        return vertex

    def vertex(self, index: int) -> Vertex:
        return self._vertices[index]

    def __len__(self) -> int:
        return len(self._vertices)
