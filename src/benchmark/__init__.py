"""
Benchmark harness for the special-value selectors.

Drives the linear and closed-form strategies over many targets and reports
timing and mismatch counts.
"""

from src.benchmark.harness import BenchmarkConfig, BenchmarkReport, run_benchmark

__all__ = [
    "BenchmarkConfig",
    "BenchmarkReport",
    "run_benchmark",
]
