"""
Interfaces Layer - Abstract Protocols for Dependencies.

Protocols:
    - MetricsCollector: Apply timing and count metrics
    - FilterRegistryProtocol: Registry surface (see filter_hooks.registry)

Design Principles:
    - Use typing.Protocol (not ABC) for Pythonic interfaces
    - Small, focused interfaces
"""

from filter_hooks.interfaces.metrics_collector import MetricsCollector

__all__ = ["MetricsCollector"]
