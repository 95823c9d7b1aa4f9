"""
Domain models and value objects.

Contains the immutable series model shared by the generator, the selectors
and the benchmark harness.
"""

from src.core.domain.series import GeneratedSeries

__all__ = [
    "GeneratedSeries",
]
