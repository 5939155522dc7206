"""
Pytest Configuration and Shared Fixtures.

This module contains fixtures available to all tests.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from filter_hooks.adapters.metrics_collector import InMemoryMetricsCollector
from filter_hooks.config.models import FilterHooksConfig, ReentrancyPolicy, RegistryConfig
from filter_hooks.registry import FilterRegistry, reset_default_registry


@pytest.fixture(autouse=True)
def fresh_default_registry():
    """Keep the process default registry from leaking between tests."""
    reset_default_registry()
    yield
    reset_default_registry()


@pytest.fixture
def sample_config_path() -> Path:
    """Path to sample configuration file."""
    return Path(__file__).parent / "fixtures" / "sample_config.yaml"


@pytest.fixture
def default_config() -> FilterHooksConfig:
    return FilterHooksConfig()


@pytest.fixture
def registry() -> FilterRegistry:
    """Registry with default (strict) configuration."""
    return FilterRegistry()


@pytest.fixture
def permissive_registry() -> FilterRegistry:
    """Registry without type enforcement that allows reentrant changes."""
    return FilterRegistry(
        config=RegistryConfig(
            enforce_types=False,
            reentrancy=ReentrancyPolicy.ALLOW,
        )
    )


@pytest.fixture
def metrics_collector() -> InMemoryMetricsCollector:
    return InMemoryMetricsCollector()
