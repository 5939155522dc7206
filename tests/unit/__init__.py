"""
Unit Tests - Testing Individual Components in Isolation.

Test Files:
    - test_filter_registry.py: Ordering, removal, types, reentrancy, threads
    - test_typed_hook.py: Hook[T] handles
    - test_default_registry.py: Process default registry helpers
    - test_entities.py: FilterEntry / FilterInfo and errors
    - test_config_loader.py: Configuration loading/validation
    - test_metrics_collector.py: In-memory metrics
"""
