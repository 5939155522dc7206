"""
Configuration Package - Models and Loaders.

Configuration Structure:
    - FilterHooksConfig: Root configuration object
    - RegistryConfig: Type enforcement, reentrancy policy, default priority
    - LoggingConfig: Log level and format
    - MetricsConfig: Apply metrics on/off

Design Principles:
    - Type-safe via Pydantic
    - Validation on load (fail fast)
    - Support for profiles (e.g. strict, permissive)
"""

from filter_hooks.config.loader import ConfigLoader, load_config
from filter_hooks.config.models import (
    FilterHooksConfig,
    LoggingConfig,
    MetricsConfig,
    ReentrancyPolicy,
    RegistryConfig,
)

__all__ = [
    "ConfigLoader",
    "load_config",
    "FilterHooksConfig",
    "LoggingConfig",
    "MetricsConfig",
    "ReentrancyPolicy",
    "RegistryConfig",
]
