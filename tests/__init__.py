"""
Test Suite for Filter Hooks.

Test organization:
    - unit/: Unit tests for individual components
    - integration/: Config-driven registries end to end
    - performance/: Apply throughput and contention benchmarks
    - fixtures/: Shared test data (sample YAML config)

Running Tests:
    pytest tests/                           # All tests
    pytest tests/unit/                      # Unit tests only
    pytest -m "not performance"             # Skip benchmarks
"""
