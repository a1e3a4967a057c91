"""Centralized configuration using Pydantic Settings.

This module provides a single source of truth for all configuration.

Configuration can be overridden via environment variables:
- MAPNAV_GRAPH_MAX_LOCATIONS=250
- MAPNAV_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class GraphConfig(BaseSettings):
    """Road graph configuration.

    Environment variables prefixed with MAPNAV_GRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="MAPNAV_GRAPH_")

    # None lifts the limit entirely
    max_locations: Optional[int] = 100

    @field_validator("max_locations")
    @classmethod
    def _positive_capacity(cls, value: Optional[int]) -> Optional[int]:
        if value is not None and value < 1:
            raise ValueError(f"max_locations must be positive, got {value}")
        return value


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with MAPNAV_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="MAPNAV_LOG_")

    level: str = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    @field_validator("level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

    Sub-configurations can be accessed via attributes:

        config = get_config()
        print(config.graph.max_locations)
        print(config.observability.level)

    Environment variables prefixed with MAPNAV_.
    """

    model_config = SettingsConfigDict(env_prefix="MAPNAV_")

    graph: GraphConfig = Field(default_factory=GraphConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


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
