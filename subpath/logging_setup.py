"""Logging setup driven by ObservabilityConfig."""

from __future__ import annotations

import logging
import sys
from typing import Optional

from .config import ObservabilityConfig, get_config
from .domain.errors import ConfigurationError


def configure_logging(config: Optional[ObservabilityConfig] = None) -> None:
    """Configure the root logger from configuration.

    Raises:
        ConfigurationError: If the configured level is not a logging level.
    """
    config = config or get_config().observability
    level = logging.getLevelName(config.level.upper())
    if not isinstance(level, int):
        raise ConfigurationError(
            f"Invalid log level: {config.level}",
            setting_name="observability.level",
            expected_type="DEBUG|INFO|WARNING|ERROR|CRITICAL",
        )

    logging.basicConfig(
        format=config.format,
        stream=sys.stderr,
        level=level,
        force=True,
    )
