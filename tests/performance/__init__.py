"""
Performance Tests.

Benchmarks for apply throughput on long filter chains and under
concurrent registration.
"""
