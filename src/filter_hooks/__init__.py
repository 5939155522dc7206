"""
Filter Hooks - Priority-Ordered Value Filters.

Named hooks collect transformation callbacks ("filters") that are applied
in sequence to a value, lowest priority first, in the style of WordPress
filters. Hooks can be bound to a value type so mismatches fail fast.

Main Components:
    - registry: FilterRegistry, typed Hook handles, process default registry
    - domain: Filter entries and registry errors
    - config: Pydantic configuration models and YAML loader
    - adapters: In-memory metrics collector

Example:
    >>> import filter_hooks
    >>> filter_hooks.add_filter("modify_number", 10, lambda v: v + 5)
    >>> filter_hooks.add_filter("modify_number", 20, lambda v: v * 2)
    >>> filter_hooks.apply_filters("modify_number", 10)
    30
"""

import logging
from typing import Union

from filter_hooks.config.models import LoggingConfig
from filter_hooks.domain.errors import (
    FilterHooksError,
    HookTypeMismatchError,
    ReentrantMutationError,
)
from filter_hooks.registry import (
    FilterRegistry,
    Hook,
    add_filter,
    apply_filters,
    get_default_registry,
    register,
    remove_all_filters,
    remove_filter,
    reset_default_registry,
    set_default_registry,
)

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())


def configure_logging(
    level: Union[int, str, LoggingConfig] = logging.INFO,
    format: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
) -> None:
    """
    Configure logging for Filter Hooks.

    The library stays silent unless this (or the host application's own
    logging setup) enables it.

    Args:
        level: Logging level as int or name (default: INFO), or the
               ``logging`` section of a loaded config, which also
               supplies the format
        format: Log message format

    Example:
        >>> import filter_hooks
        >>> filter_hooks.configure_logging("DEBUG")
        >>> config = filter_hooks.config.load_config("filter_hooks.yaml")
        >>> filter_hooks.configure_logging(config.logging)
    """
    if isinstance(level, LoggingConfig):
        level, format = level.level, level.format
    if isinstance(level, str):
        name = level
        level = logging.getLevelName(name.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {name}")
    logging.basicConfig(
        level=level,
        format=format,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger("filter_hooks").setLevel(level)


__all__ = [
    "FilterHooksError",
    "HookTypeMismatchError",
    "ReentrantMutationError",
    "FilterRegistry",
    "Hook",
    "add_filter",
    "apply_filters",
    "configure_logging",
    "get_default_registry",
    "register",
    "remove_all_filters",
    "remove_filter",
    "reset_default_registry",
    "set_default_registry",
]
