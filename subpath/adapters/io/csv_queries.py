"""CSV query source adapter.

Each row holds two fields, ``from_email`` and ``to_email``. There is no
header. Empty lines are skipped. All rows share the first row's field
count; fields past the second are read but unused.
"""

from __future__ import annotations

import csv
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Tuple

from ...config import get_config
from ...domain.errors import EmptyQuerySetError, InputUnreadableError


def parse_queries(rows: Iterable[Sequence[str]], source: str = "<csv>") -> List[Tuple[str, str]]:
    """Turn CSV rows into ``(from, to)`` pairs.

    Fields are kept exactly as read. Empty lines are skipped. Every row
    must have as many fields as the first one, and at least two.

    Raises:
        InputUnreadableError: If a row is too short or its field count
            differs from the first row's.
    """
    pairs: List[Tuple[str, str]] = []
    expected: Optional[int] = None
    for line_number, row in enumerate(rows, start=1):
        if not row:
            continue
        if expected is None:
            expected = len(row)
        if len(row) != expected or len(row) < 2:
            raise InputUnreadableError(
                f"Can't read query line {line_number}: "
                f"expected {max(expected, 2)} fields, got {len(row)}",
                file_path=source,
            )
        pairs.append((row[0], row[1]))
    return pairs


@dataclass
class CSVQuerySource:
    """Query source that reads a header-less CSV file.

    Attributes:
        path: Location of the queries file
    """

    path: Path = field(default_factory=lambda: get_config().data.queries_path)
    _logger: logging.Logger = field(init=False, repr=False)
    _queries: Optional[List[Tuple[str, str]]] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self.path = Path(self.path)
        self._logger = logging.getLogger(__name__)

    def load(self) -> Sequence[Tuple[str, str]]:
        """Load ``(from, to)`` pairs in file order.

        Raises:
            InputUnreadableError: If the file cannot be read or parsed.
            EmptyQuerySetError: If the file holds no queries.
        """
        if self._queries is not None:
            return self._queries

        self._logger.debug("Loading queries", extra={"queries_path": str(self.path)})

        try:
            with self.path.open(newline="", encoding="utf-8") as f:
                queries = parse_queries(csv.reader(f), source=str(self.path))
        except (OSError, UnicodeDecodeError, csv.Error) as e:
            raise InputUnreadableError(
                f"Can't read queries file {self.path}",
                file_path=str(self.path),
                cause=e,
            )

        if not queries:
            raise EmptyQuerySetError(
                f"No queries in file {self.path}", file_path=str(self.path)
            )

        self._queries = queries
        self._logger.info("Queries loaded", extra={"queries": len(queries)})
        return queries
