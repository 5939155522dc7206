"""
Domain Layer - Filter Entries and Registry Errors.

Entities:
    - FilterEntry: A callback registered on a hook with priority and id
    - FilterInfo: Serializable snapshot of a filter entry

Errors:
    - FilterHooksError: Base class
    - HookTypeMismatchError: Value does not match the hook's type
    - ReentrantMutationError: Hook modified during its own application

Design Principles:
    - Immutable entries (frozen dataclass, frozen pydantic model)
    - No infrastructure dependencies
"""

from filter_hooks.domain.entities import (
    DEFAULT_PRIORITY,
    FilterCallback,
    FilterEntry,
    FilterInfo,
    callback_name,
)
from filter_hooks.domain.errors import (
    FilterHooksError,
    HookTypeMismatchError,
    ReentrantMutationError,
)

__all__ = [
    "DEFAULT_PRIORITY",
    "FilterCallback",
    "FilterEntry",
    "FilterInfo",
    "callback_name",
    "FilterHooksError",
    "HookTypeMismatchError",
    "ReentrantMutationError",
]
