"""Centralized configuration using Pydantic Settings.

Configuration can be overridden via environment variables:
- TRN_GRAPH_DATA_DIR=/path/to/data
- TRN_GRAPH_NODES_FILE=stops.csv
- TRN_LOG_LEVEL=DEBUG
- TRN_LOG_STRUCTURED=true
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GraphConfig(BaseSettings):
    """Graph data configuration.

    Environment variables prefixed with TRN_GRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="TRN_GRAPH_")

    data_dir: Path = Field(
        default_factory=lambda: Path(__file__).resolve().parent / "data"
    )
    nodes_file: str = "nodes.csv"
    lanes_file: str = "lanes.csv"

    @property
    def nodes_path(self) -> Path:
        """Full path to the route nodes CSV file."""
        return self.data_dir / self.nodes_file

    @property
    def lanes_path(self) -> Path:
        """Full path to the lanes CSV file."""
        return self.data_dir / self.lanes_file


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with TRN_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="TRN_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = False  # Set True for JSON logging


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

        config = get_config()
        print(config.graph.nodes_path)

    Environment variables prefixed with TRN_.
    """

    model_config = SettingsConfigDict(env_prefix="TRN_")

    graph: GraphConfig = Field(default_factory=GraphConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache."""
    get_config.cache_clear()
