"""
Registry Module - Hook Filter Management.

Components:
    - FilterRegistry: Thread-safe mapping of hooks to ordered filters
    - Hook: Typed handle binding a hook name to a value type
    - default: Process-wide default registry and module-level helpers
"""

from filter_hooks.registry.default import (
    add_filter,
    apply_filters,
    get_default_registry,
    register,
    remove_all_filters,
    remove_filter,
    reset_default_registry,
    set_default_registry,
)
from filter_hooks.registry.filter_registry import (
    FilterRegistry,
    FilterRegistryProtocol,
)
from filter_hooks.registry.typed_hook import Hook

__all__ = [
    "FilterRegistry",
    "FilterRegistryProtocol",
    "Hook",
    "add_filter",
    "apply_filters",
    "get_default_registry",
    "register",
    "remove_all_filters",
    "remove_filter",
    "reset_default_registry",
    "set_default_registry",
]
