"""
Typed Hook Handles.

A Hook[T] binds a hook name to a value type so every registration and
application through the handle is checked against the same type:

    title = Hook("document_title", str)
    title.add(10, str.strip)
    title.add(20, str.title)
    title.apply("  hello world ")  # -> "Hello World"
"""

from __future__ import annotations

from typing import Callable, Generic, List, Optional, Type, TypeVar

from filter_hooks.domain.entities import FilterInfo
from filter_hooks.registry.filter_registry import FilterRegistry

T = TypeVar("T")


class Hook(Generic[T]):
    """Handle for a hook whose filters all take and return ``T``."""

    def __init__(
        self,
        name: str,
        value_type: Type[T],
        registry: Optional[FilterRegistry] = None,
    ) -> None:
        self.name = name
        self.value_type = value_type
        self._registry = registry

    @property
    def registry(self) -> FilterRegistry:
        # Resolved lazily so a handle follows set_default_registry()
        if self._registry is not None:
            return self._registry
        from filter_hooks.registry.default import get_default_registry

        return get_default_registry()

    def add(self, priority: int, callback: Callable[[T], T]) -> int:
        return self.registry.add_filter(self.name, priority, callback, self.value_type)

    def register(
        self, priority: Optional[int] = None
    ) -> Callable[[Callable[[T], T]], Callable[[T], T]]:
        return self.registry.register(self.name, priority, self.value_type)

    def apply(self, value: T) -> T:
        return self.registry.apply_filters(self.name, value, self.value_type)

    def remove(self, filter_id: int) -> bool:
        return self.registry.remove_filter(self.name, filter_id)

    def clear(self) -> None:
        self.registry.remove_all_filters(self.name)

    def filters(self) -> List[FilterInfo]:
        return self.registry.get_filters(self.name)

    def __repr__(self) -> str:
        return f"Hook({self.name!r}, {getattr(self.value_type, '__name__', self.value_type)})"
