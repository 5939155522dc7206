"""
Adapters Package - Infrastructure Implementations.

Metrics:
    - InMemoryMetricsCollector: Running aggregates kept in memory
    - MetricSeries: Aggregate for one metric name and tag set
"""

from filter_hooks.adapters.metrics_collector import InMemoryMetricsCollector, MetricSeries

__all__ = ["InMemoryMetricsCollector", "MetricSeries"]
