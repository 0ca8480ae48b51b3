"""Centralized configuration using Pydantic Settings.

This module provides a single source of truth for data paths, travel
time estimation, map styling and logging.

Configuration can be overridden via environment variables:
- CAMPUS_GRAPH_DATA_DIR=/path/to/data
- CAMPUS_ROUTING_MINUTES_PER_KM=12
- CAMPUS_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GraphConfig(BaseSettings):
    """Campus map data configuration.

    Environment variables prefixed with CAMPUS_GRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="CAMPUS_GRAPH_")

    data_dir: Path = Field(
        default_factory=lambda: Path(__file__).resolve().parent / "data"
    )
    locations_file: str = "locations.csv"
    roads_file: str = "roads.csv"

    @property
    def locations_path(self) -> Path:
        """Full path to locations CSV file."""
        return self.data_dir / self.locations_file

    @property
    def roads_path(self) -> Path:
        """Full path to roads CSV file."""
        return self.data_dir / self.roads_file


class RoutingConfig(BaseSettings):
    """Travel time estimation.

    Environment variables prefixed with CAMPUS_ROUTING_.
    """

    model_config = SettingsConfigDict(env_prefix="CAMPUS_ROUTING_")

    minutes_per_km: float = Field(default=2.0, ge=0)
    distance_unit: str = "km"


class RenderingConfig(BaseSettings):
    """Map rendering configuration.

    Environment variables prefixed with CAMPUS_RENDER_.
    """

    model_config = SettingsConfigDict(env_prefix="CAMPUS_RENDER_")

    output_file: str = "campus_route.html"
    road_color: str = "blue"
    path_color: str = "green"
    node_color: str = "red"
    path_weight: int = 5


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with CAMPUS_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="CAMPUS_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

    Sub-configurations can be accessed via attributes:

        config = get_config()
        print(config.routing.minutes_per_km)
        print(config.graph.locations_path)

    Environment variables prefixed with CAMPUS_.
    """

    model_config = SettingsConfigDict(env_prefix="CAMPUS_")

    graph: GraphConfig = Field(default_factory=GraphConfig)
    routing: RoutingConfig = Field(default_factory=RoutingConfig)
    rendering: RenderingConfig = Field(default_factory=RenderingConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)

    output_dir: Path = Field(default_factory=Path.cwd)

    @property
    def map_output_path(self) -> Path:
        return self.output_dir / self.rendering.output_file


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.

    Returns:
        The application configuration instance.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache.

    Call this in tests to ensure a fresh configuration is loaded.
    """
    get_config.cache_clear()


def configure_logging(config: Optional[AppConfig] = None) -> None:
    """Apply the observability settings to the root logger.

    Raises:
        ConfigurationError: If the configured level is not a logging level.
    """
    from .domain.errors import ConfigurationError

    observability = (config or get_config()).observability
    level = logging.getLevelName(observability.level.upper())
    if not isinstance(level, int):
        raise ConfigurationError(
            f"Unknown log level: {observability.level}",
            setting_name="CAMPUS_LOG_LEVEL",
        )

    logging.basicConfig(level=level, format=observability.format, force=True)
