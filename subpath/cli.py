"""Command line entry point for the subscriber path resolver."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Optional, Sequence

from .config import ObservabilityConfig, get_config
from .domain.errors import FATAL_ERRORS
from .graph.dijkstra import PATH_FINDER_STRATEGIES
from .logging_setup import configure_logging
from .pipeline import run_pipeline

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="subpath",
        description="Find shortest subscriber chains between pairs of users.",
    )
    parser.add_argument("--users", type=Path, help="Users JSON document")
    parser.add_argument("--queries", type=Path, help="Queries CSV file (from,to per row)")
    parser.add_argument("--output", type=Path, help="Destination of the result JSON")
    parser.add_argument(
        "--strategy",
        choices=sorted(PATH_FINDER_STRATEGIES),
        help="Path-finding strategy",
    )
    parser.add_argument("--log-level", help="Logging level (DEBUG, INFO, ...)")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = get_config()
        observability = config.observability
        if args.log_level:
            observability = ObservabilityConfig(
                level=args.log_level, format=observability.format
            )
        configure_logging(observability)

        records = run_pipeline(
            config,
            users_path=args.users,
            queries_path=args.queries,
            output_path=args.output,
            strategy=args.strategy,
        )
    except FATAL_ERRORS as e:
        logger.error("%s", e)
        return 1

    logger.info("Done", extra={"records": len(records)})
    return 0
