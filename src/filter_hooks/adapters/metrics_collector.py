"""
In-Memory Metrics Collector.

Keeps one running aggregate per metric name and tag set, so memory use
depends on the number of distinct series, not on how often hooks run.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from threading import Lock
from typing import Any, Dict, List, Optional, Tuple

SeriesKey = Tuple[Tuple[str, str], ...]


@dataclass
class MetricSeries:
    """Aggregate of all values recorded for one name and tag set."""

    metric_type: str
    tags: Dict[str, str]
    count: int = 0
    total: float = 0
    last: Optional[float] = None
    last_recorded: Optional[datetime] = None

    def add(self, value: float) -> None:
        self.count += 1
        self.total += value
        self.last = value
        self.last_recorded = datetime.now()

    @property
    def mean(self) -> float:
        return self.total / self.count if self.count else 0.0


class InMemoryMetricsCollector:
    """Thread-safe in-memory metrics collector."""

    def __init__(self) -> None:
        self._series: Dict[str, Dict[SeriesKey, MetricSeries]] = {}
        self._lock = Lock()

    def record_timing(
        self,
        name: str,
        duration_seconds: float,
        tags: Optional[Dict[str, str]] = None,
    ) -> None:
        self._record(name, "timing", duration_seconds, tags)

    def record_count(
        self,
        name: str,
        value: int,
        tags: Optional[Dict[str, str]] = None,
    ) -> None:
        self._record(name, "count", value, tags)

    def get_metrics(self) -> Dict[str, Any]:
        """Summarise metrics as count/total/last per metric name."""
        with self._lock:
            summary = {}
            for name, by_tags in self._series.items():
                latest = max(by_tags.values(), key=lambda s: s.last_recorded)
                summary[name] = {
                    "count": sum(s.count for s in by_tags.values()),
                    "total": sum(s.total for s in by_tags.values()),
                    "last": latest.last,
                }
            return summary

    def get_series(
        self,
        name: str,
        tags: Optional[Dict[str, str]] = None,
    ) -> List[MetricSeries]:
        """Series recorded under a name, optionally restricted to matching tags."""
        with self._lock:
            series = list(self._series.get(name, {}).values())
        if not tags:
            return series
        return [
            s for s in series
            if all(s.tags.get(k) == v for k, v in tags.items())
        ]

    def clear(self) -> None:
        with self._lock:
            self._series.clear()

    def _record(
        self,
        name: str,
        metric_type: str,
        value: float,
        tags: Optional[Dict[str, str]],
    ) -> None:
        tags = dict(tags or {})
        key: SeriesKey = tuple(sorted(tags.items()))
        with self._lock:
            by_tags = self._series.setdefault(name, {})
            series = by_tags.get(key)
            if series is None:
                series = by_tags[key] = MetricSeries(metric_type=metric_type, tags=tags)
            series.add(value)
