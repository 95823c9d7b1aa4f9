"""Benchmark harness — сравнение линейной и closed-form стратегий.

Строит серию длины count, прогоняет обе стратегии по целям z = 1..count,
печатает время и количество расхождений, возвращает immutable отчёт.
Алгоритмического поведения не содержит: только замер и сверка.
"""

import logging
import sys
import time
from dataclasses import dataclass
from typing import Optional, TextIO

from pydantic import BaseModel, Field

from src.core.math.series import build_series
from src.core.math.special_values import (
    check_series_length,
    pick_special,
    pick_special_alt,
)

logger = logging.getLogger(__name__)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class BenchmarkConfig:
    """Параметры серии для benchmark.

    По умолчанию: x = 1.0, y = 5062.5 (first_term = 1.62, growth_rate = 2.5).
    """
    x: float = 1.0
    y: float = 5062.5


# =============================================================================
# REPORT
# =============================================================================


class BenchmarkReport(BaseModel):
    """Результат benchmark (immutable)."""

    count: int = Field(..., ge=1, description="Количество целей z = 1..count")
    series_length: int = Field(..., ge=3, description="Фактическая длина серии")
    linear_elapsed_ms: float = Field(..., ge=0, description="Время линейной стратегии (мс)")
    closed_form_elapsed_ms: float = Field(
        ..., ge=0, description="Время closed-form стратегии (мс)"
    )
    mismatches: int = Field(..., ge=0, description="Количество несовпавших пар")

    model_config = {"frozen": True}

    def linear_ms_per_entry(self) -> float:
        return self.linear_elapsed_ms / self.count

    def closed_form_ms_per_entry(self) -> float:
        return self.closed_form_elapsed_ms / self.count

    def is_consistent(self) -> bool:
        """True если стратегии совпали на всех целях."""
        return self.mismatches == 0


# =============================================================================
# RUN
# =============================================================================


def run_benchmark(
    count: int,
    config: Optional[BenchmarkConfig] = None,
    stream: Optional[TextIO] = None,
) -> BenchmarkReport:
    """Замер обеих стратегий на серии длины count.

    Args:
        count: Длина серии и количество целей z = 1..count
        config: Параметры серии (default: BenchmarkConfig())
        stream: Поток для отчёта (default: sys.stdout на момент вызова)

    Returns:
        BenchmarkReport

    Raises:
        InvalidArgument: если серия короче 3 элементов
    """
    config = config or BenchmarkConfig()
    stream = stream or sys.stdout

    series = build_series(config.x, config.y, count)
    check_series_length(series.values)

    logger.info(
        "Benchmark: count=%d, x=%r, y=%r, growth_rate=%r",
        count,
        config.x,
        config.y,
        series.growth_rate,
    )

    # Линейная стратегия обходит серию последовательно
    linear_series = series.as_list()
    started = time.perf_counter()
    linear_results = [pick_special(float(z), linear_series) for z in range(1, count + 1)]
    linear_elapsed_ms = (time.perf_counter() - started) * 1000.0

    # Closed-form стратегия требует random access
    indexed_series = series.values
    growth_rate = series.growth_rate
    started = time.perf_counter()
    closed_form_results = [
        pick_special_alt(float(z), growth_rate, indexed_series) for z in range(1, count + 1)
    ]
    closed_form_elapsed_ms = (time.perf_counter() - started) * 1000.0

    mismatches = sum(
        1 for linear, closed_form in zip(linear_results, closed_form_results)
        if linear != closed_form
    )

    report = BenchmarkReport(
        count=count,
        series_length=len(series),
        linear_elapsed_ms=linear_elapsed_ms,
        closed_form_elapsed_ms=closed_form_elapsed_ms,
        mismatches=mismatches,
    )

    print(
        f"A: Took {report.linear_elapsed_ms:.3f}ms for {count} entries "
        f"({report.linear_ms_per_entry():.6f}ms per entry)",
        file=stream,
    )
    print(
        f"B: Took {report.closed_form_elapsed_ms:.3f}ms for {count} entries "
        f"({report.closed_form_ms_per_entry():.6f}ms per entry)",
        file=stream,
    )
    print(f"Number of mismatching records: {mismatches}/{count}", file=stream)

    if mismatches:
        logger.warning("Strategies disagree on %d of %d targets", mismatches, count)

    return report
