"""Centralized configuration using Pydantic Settings.

This module is the single source of truth for input/output locations,
solver selection, serialization and logging settings.

Configuration can be overridden via environment variables:
- SUBPATH_DATA_DATA_DIR=/path/to/data
- SUBPATH_DATA_USERS_FILE=users.json
- SUBPATH_SOLVER_STRATEGY=bfs
- SUBPATH_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from .domain.errors import ConfigurationError


class DataConfig(BaseSettings):
    """Input and output document locations.

    Environment variables prefixed with SUBPATH_DATA_.
    """

    model_config = SettingsConfigDict(env_prefix="SUBPATH_DATA_")

    data_dir: Path = Field(default_factory=Path.cwd)
    users_file: str = "users.json"
    queries_file: str = "input.csv"
    output_file: str = "result.json"

    @property
    def users_path(self) -> Path:
        """Full path to the users JSON document."""
        return self.data_dir / self.users_file

    @property
    def queries_path(self) -> Path:
        """Full path to the queries CSV file."""
        return self.data_dir / self.queries_file

    @property
    def output_path(self) -> Path:
        """Full path to the result JSON document."""
        return self.data_dir / self.output_file


class SolverConfig(BaseSettings):
    """Path-finder selection.

    Environment variables prefixed with SUBPATH_SOLVER_.
    """

    model_config = SettingsConfigDict(env_prefix="SUBPATH_SOLVER_")

    strategy: Literal["dijkstra", "bfs"] = "dijkstra"


class OutputConfig(BaseSettings):
    """Result document serialization.

    Environment variables prefixed with SUBPATH_OUTPUT_.
    """

    model_config = SettingsConfigDict(env_prefix="SUBPATH_OUTPUT_")

    indent: int = 4
    omit_empty_path: bool = True


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with SUBPATH_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="SUBPATH_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

    Sub-configurations can be accessed via attributes:

        config = get_config()
        print(config.data.users_path)
        print(config.solver.strategy)

    Environment variables prefixed with SUBPATH_.
    """

    model_config = SettingsConfigDict(env_prefix="SUBPATH_")

    data: DataConfig = Field(default_factory=DataConfig)
    solver: SolverConfig = Field(default_factory=SolverConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.

    Raises:
        ConfigurationError: If a setting fails validation.
    """
    try:
        return AppConfig()
    except ValidationError as e:
        errors = e.errors()
        setting = ".".join(str(part) for part in errors[0]["loc"]) if errors else ""
        raise ConfigurationError(
            f"Invalid configuration for {e.title}",
            setting_name=setting,
            cause=e,
        )


def reset_config() -> None:
    """Reset the configuration cache."""
    get_config.cache_clear()
