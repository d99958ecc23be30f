"""Typed domain errors for the subscriber path resolver.

Fatal errors (unreadable input, empty input sets, unwritable output)
abort the run before or after the query phase. Per-query errors
(unknown vertex, no path) are recovered by the query driver and turn
into a result record with an empty path.

All errors inherit from SubpathError and can optionally wrap a root
cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class SubpathError(Exception):
    """Base error for the subscriber path domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class InputUnreadableError(SubpathError):
    """An input document cannot be opened or parsed.

    Attributes:
        file_path: Path to the offending file if relevant
    """

    file_path: Optional[str] = None


@dataclass
class EmptyUserSetError(SubpathError):
    """The user source yielded zero users."""

    file_path: Optional[str] = None


@dataclass
class EmptyQuerySetError(SubpathError):
    """The query source yielded zero queries."""

    file_path: Optional[str] = None


@dataclass
class UnknownVertexError(SubpathError):
    """A query names an email that is not a registered user.

    Attributes:
        email: The email that was not found
    """

    email: str = ""


@dataclass
class NoPathError(SubpathError):
    """The target is unreachable from the source.

    Attributes:
        source: Email of the source vertex
        target: Email of the target vertex
    """

    source: str = ""
    target: str = ""


@dataclass
class OutputUnwritableError(SubpathError):
    """The result document could not be serialized or written.

    Attributes:
        file_path: Destination path if relevant
    """

    file_path: Optional[str] = None


@dataclass
class ConfigurationError(SubpathError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None


FATAL_ERRORS = (
    InputUnreadableError,
    EmptyUserSetError,
    EmptyQuerySetError,
    OutputUnwritableError,
    ConfigurationError,
)
