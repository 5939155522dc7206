"""
Domain Entities for the Filter Registry.

A filter entry couples a callback with its hook, priority and
process-wide id. Entries sort by (priority, filter_id); since ids only
grow, equal priorities keep their registration order.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional, TypeVar

from pydantic import BaseModel

T = TypeVar("T")

FilterCallback = Callable[[T], T]

# WordPress convention for filters registered without an explicit priority
DEFAULT_PRIORITY = 10


def callback_name(callback: Callable[..., Any]) -> str:
    """Best-effort readable name for a callback."""
    name = getattr(callback, "__qualname__", None) or getattr(
        callback, "__name__", None
    )
    if name is None:
        return type(callback).__name__
    module = getattr(callback, "__module__", None)
    return f"{module}.{name}" if module else name


@dataclass(order=True, frozen=True)
class FilterEntry:
    """A registered filter callback."""

    priority: int
    filter_id: int
    hook: str = field(compare=False)
    callback: Callable[[Any], Any] = field(compare=False, repr=False)
    value_type: Optional[type] = field(default=None, compare=False)

    @property
    def name(self) -> str:
        return callback_name(self.callback)

    def __call__(self, value: Any) -> Any:
        return self.callback(value)

    def to_info(self) -> "FilterInfo":
        """Create an immutable snapshot for introspection."""
        return FilterInfo(
            filter_id=self.filter_id,
            hook=self.hook,
            priority=self.priority,
            name=self.name,
            value_type=self.value_type.__name__ if self.value_type else None,
        )


class FilterInfo(BaseModel):
    """Metadata about a registered filter."""

    filter_id: int
    hook: str
    priority: int
    name: str
    value_type: Optional[str] = None

    model_config = {"frozen": True}

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return self.model_dump()
