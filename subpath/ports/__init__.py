"""Ports layer - Abstract interfaces (Protocols) for the application.

Ports define the contracts between the application core and external
adapters. They enable dependency injection and make the system testable.

This module follows the Hexagonal Architecture pattern:
- Input ports: user and query sources
- Output ports: result sink
- Engine port: path solver
"""

from .graph import PathSolverPort
from .io import QuerySourcePort, ResultSinkPort, UserSourcePort

__all__ = [
    # Graph
    "PathSolverPort",
    # I/O
    "UserSourcePort",
    "QuerySourcePort",
    "ResultSinkPort",
]
