"""
Metrics Collector Protocol.

Defines the abstract interface the registry uses to report how long
filter chains take and how many filters ran.

Design Notes:
    - Non-blocking metric recording
    - Tag/label support for dimensionality (tagged by hook name)
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Protocol, runtime_checkable


@runtime_checkable
class MetricsCollector(Protocol):
    """Abstract interface for metrics collection."""

    def record_timing(
        self,
        name: str,
        duration_seconds: float,
        tags: Optional[Dict[str, str]] = None,
    ) -> None:
        """
        Record a timing metric (histogram).

        Args:
            name: Metric name (e.g., "filter_hooks.apply_seconds")
            duration_seconds: Duration value
            tags: Optional dimension tags
        """
        ...

    def record_count(
        self,
        name: str,
        value: int,
        tags: Optional[Dict[str, str]] = None,
    ) -> None:
        """
        Record a count metric (counter).

        Args:
            name: Metric name (e.g., "filter_hooks.filters_applied")
            value: Count value
            tags: Optional dimension tags
        """
        ...

    def get_metrics(self) -> Dict[str, Any]:
        """Get all collected metrics."""
        ...
