"""
Integration Tests - Config-Driven Registries.

These tests load YAML configuration, build registries from it and run
filter chains with metrics and logging enabled.
"""
