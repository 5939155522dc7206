"""
Configuration Models - Pydantic Models for Type-Safe Config.

All configuration is validated at load time using Pydantic.
"""

from __future__ import annotations

import logging
from enum import Enum

from pydantic import BaseModel, Field, field_validator

from filter_hooks.domain.entities import DEFAULT_PRIORITY


class ReentrancyPolicy(str, Enum):
    """What happens when a filter modifies the hook it runs on."""
    RAISE = "raise"  # Reject with ReentrantMutationError
    ALLOW = "allow"  # Apply; visible from the next pass


class RegistryConfig(BaseModel):
    """Behaviour of a FilterRegistry."""

    enforce_types: bool = True
    reentrancy: ReentrancyPolicy = ReentrancyPolicy.RAISE
    default_priority: int = Field(default=DEFAULT_PRIORITY)


class LoggingConfig(BaseModel):
    """Logging setup applied by configure_logging()."""

    level: str = Field(default="WARNING")
    format: str = Field(
        default="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
    )

    @field_validator("level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level


class MetricsConfig(BaseModel):
    """Configuration for apply metrics."""

    enabled: bool = False


class FilterHooksConfig(BaseModel):
    """Root configuration object."""

    version: str = "1.0"
    registry: RegistryConfig = Field(default_factory=RegistryConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    metrics: MetricsConfig = Field(default_factory=MetricsConfig)
