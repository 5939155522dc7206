"""
Filter Registry - Priority-Ordered Hook Filters.

This module provides a thread-safe registry mapping hook names to
priority-ordered filter callbacks. Applying a hook folds a value through
its filters, lowest priority first; equal priorities run in registration
order.

Usage:
    registry = FilterRegistry()
    registry.add_filter("modify_number", 10, lambda v: v + 5)
    registry.add_filter("modify_number", 20, lambda v: v * 2)

    registry.apply_filters("modify_number", 10)  # -> 30

Concurrency:
    - One RLock guards the hook mapping and every hook's entry list
    - apply_filters() snapshots the entries under the lock and runs the
      callbacks outside it, so concurrent add/remove calls never affect a
      pass that is already running
    - A callback modifying the hook it is applied on is rejected unless
      the registry is configured with ReentrancyPolicy.ALLOW
"""

from __future__ import annotations

import inspect
import itertools
import logging
import time
import types
from bisect import insort
from contextvars import ContextVar
from threading import Lock, RLock
from typing import (
    TYPE_CHECKING,
    Any,
    Callable,
    Dict,
    List,
    Optional,
    Protocol,
    Tuple,
    TypeVar,
    Union,
    get_origin,
)

from filter_hooks.config.models import ReentrancyPolicy, RegistryConfig
from filter_hooks.domain.entities import FilterEntry, FilterInfo
from filter_hooks.domain.errors import HookTypeMismatchError, ReentrantMutationError

if TYPE_CHECKING:
    from filter_hooks.config.models import FilterHooksConfig
    from filter_hooks.interfaces.metrics_collector import MetricsCollector

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Ids are shared by every registry in the process and never reused
_filter_ids = itertools.count(1)
_filter_ids_lock = Lock()

# (registry id, hook) pairs whose filters are running in the current context
_applying: ContextVar[Tuple[Tuple[int, str], ...]] = ContextVar(
    "filter_hooks_applying", default=()
)


def _next_filter_id() -> int:
    with _filter_ids_lock:
        return next(_filter_ids)


# types.UnionType (``int | None``) only exists on Python 3.10+
_UNION_ORIGINS = tuple(
    origin for origin in (Union, getattr(types, "UnionType", None)) if origin is not None
)


def _runtime_type(value_type: Any) -> type:
    """Reduce a type hint to a class usable with isinstance()."""
    origin = get_origin(value_type)
    if origin in _UNION_ORIGINS:
        raise TypeError(f"value_type must be a single class, got union {value_type!r}")
    if origin is not None:
        value_type = origin
    if not isinstance(value_type, type):
        raise TypeError(f"value_type must be a class, got {value_type!r}")
    return value_type


class FilterRegistryProtocol(Protocol):
    """Protocol for filter registry implementations."""

    def add_filter(
        self,
        hook: str,
        priority: int,
        callback: Callable[[Any], Any],
        value_type: Optional[type] = None,
    ) -> int:
        """Register a filter and return its id."""
        ...

    def apply_filters(
        self,
        hook: str,
        value: Any,
        value_type: Optional[type] = None,
    ) -> Any:
        """Fold a value through the hook's filters."""
        ...

    def remove_filter(self, hook: str, filter_id: int) -> bool:
        """Remove one filter by id."""
        ...

    def remove_all_filters(self, hook: str) -> None:
        """Remove every filter of a hook."""
        ...


class FilterRegistry:
    """
    Thread-safe registry of priority-ordered hook filters.

    Supports:
        - Stable priority ordering (ties keep registration order)
        - Optional per-hook type binding with fail-fast checks
        - Snapshot-at-apply-start semantics
        - Apply metrics via an injected MetricsCollector
    """

    def __init__(
        self,
        config: Optional[RegistryConfig] = None,
        metrics_collector: Optional[MetricsCollector] = None,
    ) -> None:
        """
        Initialize empty registry.

        Args:
            config: Registry behaviour; defaults to RegistryConfig()
            metrics_collector: Optional collector for apply metrics
        """
        self._config = config or RegistryConfig()
        self._metrics_collector = metrics_collector
        self._hooks: Dict[str, List[FilterEntry]] = {}
        self._types: Dict[str, type] = {}
        self._lock = RLock()
        logger.debug("FilterRegistry initialized")

    @classmethod
    def from_config(
        cls,
        config: FilterHooksConfig,
        metrics_collector: Optional[MetricsCollector] = None,
    ) -> "FilterRegistry":
        """
        Build a registry from the root configuration.

        An InMemoryMetricsCollector is created when metrics are enabled
        and no collector is passed in.
        """
        if metrics_collector is None and config.metrics.enabled:
            from filter_hooks.adapters.metrics_collector import (
                InMemoryMetricsCollector,
            )

            metrics_collector = InMemoryMetricsCollector()
        return cls(config=config.registry, metrics_collector=metrics_collector)

    @property
    def config(self) -> RegistryConfig:
        return self._config

    @property
    def metrics_collector(self) -> Optional[MetricsCollector]:
        return self._metrics_collector

    def add_filter(
        self,
        hook: str,
        priority: int,
        callback: Callable[[T], T],
        value_type: Optional[type] = None,
    ) -> int:
        """
        Register a filter callback for a hook.

        Args:
            hook: Hook name
            priority: Lower values run earlier
            callback: Function taking and returning the filtered value
            value_type: Optional type to bind the hook to

        Returns:
            Process-wide unique filter id

        Raises:
            HookTypeMismatchError: If the hook is bound to another type
            ReentrantMutationError: If called from one of the hook's own
                                    filters under ReentrancyPolicy.RAISE
        """
        if not callable(callback):
            raise TypeError(f"Filter callback must be callable, got {callback!r}")
        if not isinstance(priority, int) or isinstance(priority, bool):
            raise TypeError(f"Priority must be an int, got {priority!r}")
        runtime_type = _runtime_type(value_type) if value_type is not None else None

        with self._lock:
            self._check_reentrancy(hook)

            bound = self._types.get(hook)
            if runtime_type is not None and bound is not None and bound is not runtime_type:
                raise self._type_mismatch(hook, bound, runtime_type)

            entry = FilterEntry(
                priority=priority,
                filter_id=_next_filter_id(),
                hook=hook,
                callback=callback,
                value_type=runtime_type,
            )
            insort(self._hooks.setdefault(hook, []), entry)
            if runtime_type is not None:
                self._types[hook] = runtime_type

        logger.debug(
            f"Added filter {entry.filter_id} ({entry.name}) to '{hook}' "
            f"at priority {priority}"
        )
        return entry.filter_id

    def register(
        self,
        hook: str,
        priority: Optional[int] = None,
        value_type: Optional[type] = None,
    ) -> Callable[[Callable[[T], T]], Callable[[T], T]]:
        """
        Decorator form of add_filter().

        The callback is returned unchanged; plain functions also get the
        new id as ``__filter_id__``.
        """
        if priority is None:
            priority = self._config.default_priority

        def decorator(callback: Callable[[T], T]) -> Callable[[T], T]:
            filter_id = self.add_filter(hook, priority, callback, value_type)
            if inspect.isfunction(callback):
                callback.__filter_id__ = filter_id  # type: ignore[attr-defined]
            return callback

        return decorator

    def apply_filters(
        self,
        hook: str,
        value: T,
        value_type: Optional[type] = None,
    ) -> T:
        """
        Fold a value through all filters of a hook.

        Args:
            hook: Hook name
            value: Initial value
            value_type: Type the caller expects the hook to carry

        Returns:
            The transformed value, or ``value`` itself if the hook is empty

        Raises:
            HookTypeMismatchError: If type enforcement is on and the value,
                                   an intermediate result or value_type does
                                   not match the hook's type
        """
        requested = _runtime_type(value_type) if value_type is not None else None

        with self._lock:
            entries = tuple(self._hooks.get(hook, ()))
            bound = self._types.get(hook)

        if not entries:
            return value

        expected: Optional[type] = None
        if self._config.enforce_types:
            if requested is not None and bound is not None and not issubclass(requested, bound):
                raise self._type_mismatch(hook, bound, requested)
            expected = bound or requested
            if expected is not None and not isinstance(value, expected):
                raise self._type_mismatch(hook, expected, type(value))

        token = _applying.set(_applying.get() + ((id(self), hook),))
        start = time.perf_counter()
        try:
            for entry in entries:
                value = entry(value)
                if expected is not None and not isinstance(value, expected):
                    raise self._type_mismatch(
                        hook, expected, type(value), entry.filter_id
                    )
        finally:
            _applying.reset(token)

        self._record_metrics(hook, len(entries), time.perf_counter() - start)
        return value

    def remove_filter(self, hook: str, filter_id: int) -> bool:
        """
        Remove a filter by id.

        Returns:
            True if the filter was removed, False if it was not registered
        """
        with self._lock:
            self._check_reentrancy(hook)

            entries = self._hooks.get(hook)
            if not entries:
                return False

            for index, entry in enumerate(entries):
                if entry.filter_id == filter_id:
                    del entries[index]
                    if not entries:
                        self._drop_hook(hook)
                    logger.debug(f"Removed filter {filter_id} from '{hook}'")
                    return True

        return False

    def remove_all_filters(self, hook: str) -> None:
        """Remove every filter of a hook. No-op for unknown hooks."""
        with self._lock:
            self._check_reentrancy(hook)
            removed = len(self._hooks.get(hook, ()))
            self._drop_hook(hook)

        if removed:
            logger.info(f"Removed all {removed} filters from '{hook}'")

    def has_filters(self, hook: str) -> bool:
        with self._lock:
            return bool(self._hooks.get(hook))

    def hooks(self) -> List[str]:
        """Names of hooks with at least one filter."""
        with self._lock:
            return list(self._hooks)

    def get_filters(self, hook: str) -> List[FilterInfo]:
        """Snapshots of a hook's filters in application order."""
        with self._lock:
            return [entry.to_info() for entry in self._hooks.get(hook, ())]

    def hook_type(self, hook: str) -> Optional[type]:
        """Type the hook is bound to, if any."""
        with self._lock:
            return self._types.get(hook)

    @property
    def filter_count(self) -> int:
        """Total number of filters across all hooks."""
        with self._lock:
            return sum(len(entries) for entries in self._hooks.values())

    def clear(self) -> None:
        """Remove all filters from every hook."""
        with self._lock:
            for hook in list(self._hooks):
                self._check_reentrancy(hook)
            self._hooks.clear()
            self._types.clear()
        logger.info("Cleared all filters from registry")

    def __contains__(self, hook: object) -> bool:
        return isinstance(hook, str) and self.has_filters(hook)

    def __len__(self) -> int:
        with self._lock:
            return len(self._hooks)

    def __repr__(self) -> str:
        return f"FilterRegistry(hooks={len(self)}, filters={self.filter_count})"

    def _drop_hook(self, hook: str) -> None:
        self._hooks.pop(hook, None)
        self._types.pop(hook, None)

    def _check_reentrancy(self, hook: str) -> None:
        if self._config.reentrancy is ReentrancyPolicy.ALLOW:
            return
        if (id(self), hook) in _applying.get():
            logger.warning(f"Rejected reentrant modification of hook '{hook}'")
            raise ReentrantMutationError(hook)

    def _type_mismatch(
        self,
        hook: str,
        expected: type,
        actual: type,
        filter_id: Optional[int] = None,
    ) -> HookTypeMismatchError:
        error = HookTypeMismatchError(hook, expected, actual, filter_id)
        logger.warning(str(error))
        return error

    def _record_metrics(self, hook: str, applied: int, duration: float) -> None:
        if self._metrics_collector is None:
            return
        tags = {"hook": hook}
        self._metrics_collector.record_timing("filter_hooks.apply_seconds", duration, tags)
        self._metrics_collector.record_count("filter_hooks.filters_applied", applied, tags)
