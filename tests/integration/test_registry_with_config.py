"""
Integration Tests - Registries Built from YAML Configuration.

Loads the sample config, builds a registry with FilterRegistry.from_config
and runs realistic filter chains through it with metrics and logging on.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List

import pytest

import filter_hooks
from filter_hooks.adapters.metrics_collector import InMemoryMetricsCollector
from filter_hooks.config.loader import load_config
from filter_hooks.config.models import FilterHooksConfig
from filter_hooks.domain.errors import HookTypeMismatchError, ReentrantMutationError
from filter_hooks.registry import FilterRegistry, Hook


@pytest.fixture
def configured_registry(sample_config_path: Path) -> FilterRegistry:
    return FilterRegistry.from_config(load_config(sample_config_path))


class TestRegistryFromConfig:

    def test_wires_metrics_collector(self, configured_registry: FilterRegistry) -> None:
        assert isinstance(configured_registry.metrics_collector, InMemoryMetricsCollector)
        assert configured_registry.config.default_priority == 50

    def test_metrics_disabled_by_default(self, default_config: FilterHooksConfig) -> None:
        registry = FilterRegistry.from_config(default_config)

        assert registry.metrics_collector is None

    def test_explicit_collector_wins(self, default_config: FilterHooksConfig) -> None:
        collector = InMemoryMetricsCollector()

        registry = FilterRegistry.from_config(default_config, metrics_collector=collector)

        assert registry.metrics_collector is collector

    def test_allow_policy_from_config(self, configured_registry: FilterRegistry) -> None:
        registry = configured_registry

        def self_disabling(value: int) -> int:
            registry.remove_all_filters("once")
            return value + 1

        registry.add_filter("once", 10, self_disabling)

        assert registry.apply_filters("once", 0) == 1
        assert registry.apply_filters("once", 0) == 0

    def test_raise_policy_by_default(self, default_config: FilterHooksConfig) -> None:
        registry = FilterRegistry.from_config(default_config)

        def self_disabling(value: int) -> int:
            registry.remove_all_filters("once")
            return value + 1

        registry.add_filter("once", 10, self_disabling)

        with pytest.raises(ReentrantMutationError):
            registry.apply_filters("once", 0)


class TestRequestPipeline:
    """A small request-shaping pipeline built from typed hooks."""

    def test_pipeline(self, configured_registry: FilterRegistry) -> None:
        registry = configured_registry
        headers: Hook[Dict[str, Any]] = Hook("request_headers", dict, registry)

        @headers.register()
        def add_user_agent(value: Dict[str, Any]) -> Dict[str, Any]:
            return {**value, "User-Agent": "filter-hooks"}

        @headers.register(priority=0)
        def normalize(value: Dict[str, Any]) -> Dict[str, Any]:
            return {key.title(): item for key, item in value.items()}

        @headers.register(priority=100)
        def redact(value: Dict[str, Any]) -> Dict[str, Any]:
            return {
                key: ("***" if key == "Authorization" else item)
                for key, item in value.items()
            }

        result = headers.apply({"authorization": "Bearer abc", "accept": "*/*"})

        assert result == {
            "Authorization": "***",
            "Accept": "*/*",
            "User-Agent": "filter-hooks",
        }
        assert [info.name.rsplit(".", 1)[-1] for info in headers.filters()] == [
            "normalize",
            "add_user_agent",
            "redact",
        ]

        metrics = registry.metrics_collector.get_metrics()
        assert metrics["filter_hooks.filters_applied"]["last"] == 3

        with pytest.raises(HookTypeMismatchError):
            registry.add_filter("request_headers", 10, lambda v: v, value_type=list)

    def test_logging(self, configured_registry: FilterRegistry, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="filter_hooks")

        filter_id = configured_registry.add_filter("hook", 10, lambda v: v)
        configured_registry.remove_filter("hook", filter_id)
        configured_registry.add_filter("hook", 10, lambda v: v, value_type=int)
        configured_registry.remove_all_filters("hook")

        messages = [record.getMessage() for record in caplog.records]
        assert any(f"Added filter {filter_id}" in m for m in messages)
        assert any(f"Removed filter {filter_id} from 'hook'" in m for m in messages)
        assert any("Removed all 1 filters from 'hook'" in m for m in messages)

    def test_mismatch_logged_as_warning(
        self, configured_registry: FilterRegistry, caplog: pytest.LogCaptureFixture
    ) -> None:
        configured_registry.add_filter("hook", 10, lambda v: v, value_type=int)

        with caplog.at_level(logging.WARNING, logger="filter_hooks"):
            with pytest.raises(HookTypeMismatchError):
                configured_registry.apply_filters("hook", "1")

        assert any(r.levelno == logging.WARNING for r in caplog.records)


class TestConfigureLogging:

    @pytest.fixture(autouse=True)
    def restore_package_level(self):
        package_logger = logging.getLogger("filter_hooks")
        level = package_logger.level
        yield
        package_logger.setLevel(level)

    def test_accepts_level_name(self) -> None:
        filter_hooks.configure_logging("debug")

        assert logging.getLogger("filter_hooks").level == logging.DEBUG

    def test_accepts_logging_section(
        self, sample_config_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """The YAML logging section drives both level and format."""
        calls: List[Dict[str, Any]] = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
        config = load_config(sample_config_path)

        filter_hooks.configure_logging(config.logging)

        assert logging.getLogger("filter_hooks").level == logging.DEBUG
        assert calls[0]["level"] == logging.DEBUG
        assert calls[0]["format"] == "%(name)s: %(message)s"

    def test_logging_section_defaults(self, default_config: FilterHooksConfig) -> None:
        filter_hooks.configure_logging(default_config.logging)

        assert logging.getLogger("filter_hooks").level == logging.WARNING

    def test_rejects_unknown_level(self) -> None:
        with pytest.raises(ValueError, match="Unknown log level: loud"):
            filter_hooks.configure_logging("loud")
