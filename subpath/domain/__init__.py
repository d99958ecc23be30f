"""Domain layer - Core models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    FATAL_ERRORS,
    ConfigurationError,
    EmptyQuerySetError,
    EmptyUserSetError,
    InputUnreadableError,
    NoPathError,
    OutputUnwritableError,
    SubpathError,
    UnknownVertexError,
)
from .models import (
    PathEntry,
    PathResult,
    Query,
    ResultRecord,
    SubscriberRef,
    User,
    Vertex,
)

__all__ = [
    # Models
    "SubscriberRef",
    "User",
    "Vertex",
    "Query",
    "PathEntry",
    "PathResult",
    "ResultRecord",
    # Errors
    "SubpathError",
    "InputUnreadableError",
    "EmptyUserSetError",
    "EmptyQuerySetError",
    "UnknownVertexError",
    "NoPathError",
    "OutputUnwritableError",
    "ConfigurationError",
    "FATAL_ERRORS",
]
