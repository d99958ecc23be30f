"""High-level pipeline orchestration for the subscriber path resolver.

The pipeline is organized in several stages:

1. Input acquisition (queries CSV and users JSON).
2. Graph construction (users to an in-memory subscriber graph).
3. Path computation (Dijkstra or BFS per query).
4. Output emission (result records to JSON).

This module wires these stages together without implementing any
business logic. Each step delegates work to dedicated, testable
modules.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence, Union

from .adapters.graph import DijkstraPathSolver
from .adapters.io import CSVQuerySource, JSONResultSink, JSONUserSource
from .config import AppConfig, get_config
from .container import Container
from .domain.models import ResultRecord
from .ports.graph import PathSolverPort
from .ports.io import QuerySourcePort, ResultSinkPort, UserSourcePort
from .services import ShortestPathService

PathLike = Union[str, Path]


def build_container(
    config: Optional[AppConfig] = None,
    *,
    users_path: Optional[PathLike] = None,
    queries_path: Optional[PathLike] = None,
    output_path: Optional[PathLike] = None,
    strategy: Optional[str] = None,
) -> Container:
    """Create the default container with optional per-run overrides."""
    config = config or get_config()
    container = Container.create_default(config)

    if users_path is not None:
        container.register(UserSourcePort, lambda: JSONUserSource(Path(users_path)))
    if queries_path is not None:
        container.register(QuerySourcePort, lambda: CSVQuerySource(Path(queries_path)))
    if output_path is not None:
        container.register(
            ResultSinkPort,
            lambda: JSONResultSink(Path(output_path), config.output),
        )
    if strategy is not None:
        container.register(PathSolverPort, lambda: DijkstraPathSolver(strategy=strategy))

    return container


def run_pipeline(
    config: Optional[AppConfig] = None,
    *,
    users_path: Optional[PathLike] = None,
    queries_path: Optional[PathLike] = None,
    output_path: Optional[PathLike] = None,
    strategy: Optional[str] = None,
) -> Sequence[ResultRecord]:
    """Run the end-to-end pipeline and return the written records.

    Raises:
        SubpathError: Any fatal error from the sources, solver or sink.
    """
    container = build_container(
        config,
        users_path=users_path,
        queries_path=queries_path,
        output_path=output_path,
        strategy=strategy,
    )
    service: ShortestPathService = container.resolve(ShortestPathService)
    return service.execute()
