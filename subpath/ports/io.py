"""I/O ports - Abstractions for the input and output documents.

Sources produce domain objects; the sink consumes result records. The
core never touches files directly.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, Sequence, Tuple

if TYPE_CHECKING:
    from ..domain.models import ResultRecord, User


class UserSourcePort(Protocol):
    """Port for loading user records.

    Implementation: adapters/io/json_users.py
    """

    def load(self) -> Sequence[User]:
        """Load every user record.

        Raises:
            InputUnreadableError: If the document cannot be read or parsed.
            EmptyUserSetError: If the document holds no users.
        """
        ...


class QuerySourcePort(Protocol):
    """Port for loading query pairs.

    Implementation: adapters/io/csv_queries.py
    """

    def load(self) -> Sequence[Tuple[str, str]]:
        """Load ``(from, to)`` pairs in file order.

        Raises:
            InputUnreadableError: If the document cannot be read or parsed.
            EmptyQuerySetError: If the document holds no queries.
        """
        ...


class ResultSinkPort(Protocol):
    """Port for emitting result records.

    Implementation: adapters/io/json_results.py
    """

    def write(self, records: Sequence[ResultRecord]) -> None:
        """Write the full ordered list of result records.

        Raises:
            OutputUnwritableError: If the document cannot be written.
        """
        ...
