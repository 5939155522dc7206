"""
Process Default Registry.

Module-level add_filter/apply_filters/remove_filter/remove_all_filters
operate on a lazily created process-wide FilterRegistry. Applications
that want an explicit lifetime create their own FilterRegistry and pass
it around; tests swap or reset the default between cases.
"""

from __future__ import annotations

import logging
from threading import Lock
from typing import Any, Callable, Optional, TypeVar

from filter_hooks.registry.filter_registry import FilterRegistry

logger = logging.getLogger(__name__)

T = TypeVar("T")

_default_registry: Optional[FilterRegistry] = None
_default_lock = Lock()


def get_default_registry() -> FilterRegistry:
    """Return the process default registry, creating it on first use."""
    global _default_registry
    with _default_lock:
        if _default_registry is None:
            _default_registry = FilterRegistry()
        return _default_registry


def set_default_registry(registry: FilterRegistry) -> Optional[FilterRegistry]:
    """
    Install a registry as the process default.

    Returns:
        The previous default registry, or None if none was created yet
    """
    global _default_registry
    with _default_lock:
        previous = _default_registry
        _default_registry = registry
    logger.debug(f"Default registry replaced: {registry!r}")
    return previous


def reset_default_registry() -> None:
    """Discard the default registry; the next call creates a fresh one."""
    global _default_registry
    with _default_lock:
        _default_registry = None


def add_filter(
    hook: str,
    priority: int,
    callback: Callable[[T], T],
    value_type: Optional[type] = None,
) -> int:
    return get_default_registry().add_filter(hook, priority, callback, value_type)


def apply_filters(hook: str, value: T, value_type: Optional[type] = None) -> T:
    return get_default_registry().apply_filters(hook, value, value_type)


def remove_filter(hook: str, filter_id: int) -> bool:
    return get_default_registry().remove_filter(hook, filter_id)


def remove_all_filters(hook: str) -> None:
    get_default_registry().remove_all_filters(hook)


def register(
    hook: str,
    priority: Optional[int] = None,
    value_type: Optional[type] = None,
) -> Callable[[Callable[[Any], Any]], Callable[[Any], Any]]:
    return get_default_registry().register(hook, priority, value_type)
