"""
Benchmarks package for AVL trees.

This package contains ASV benchmarks for performance testing of:
- Insert and delete with different key orders
- Membership search with configurable hit ratios
- Order-statistic queries (k_smallest, count_less)
"""

from .benchmark_utils import BaseBenchmark, BenchmarkUtils

__all__ = ["BaseBenchmark", "BenchmarkUtils"]
