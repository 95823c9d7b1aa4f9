"""
Series Generator — Bounded Quarter-Rounded Geometric Series

Модуль генерирует строго возрастающую серию без дубликатов, длины не больше
запрошенной, из геометрической прогрессии:
- Первый член из квадратичной формулы по x
- Growth rate из линейной формулы по y
- Каждый член округляется к ближайшей четверти

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Генерация тотальна: ни одно числовое значение x/y/length не бросает exception
2. Невалидный первый член (NaN/Inf) или length < 1 → пустая серия
3. Невалидный или нулевой growth rate → серия из одного элемента
4. Удаление дубликатов выполняется ДО усечения до length
5. Сортировка выполняется последней

ФОРМУЛЫ:
    first_term = (0.5 * x^2 + 30 * x + 10) / 25
    growth_rate = (0.02 * y / 25) / first_term
    term[i] = growth_rate * first_term^i,  i = 1 .. length * CANDIDATE_CAP_FACTOR
"""

import logging
from typing import Final, Iterator

from src.core.domain.series import GeneratedSeries
from src.core.math.numerical_safeguards import (
    ieee_divide,
    is_valid_float,
    safe_power,
)
from src.core.math.rounding import round_quarter

logger = logging.getLogger(__name__)

# =============================================================================
# ПАРАМЕТРЫ ГЕНЕРАЦИИ
# =============================================================================

# Ограничение количества кандидатов: length * CANDIDATE_CAP_FACTOR.
# Для growth rate с модулем около 1 или со знакопеременной прогрессией многие
# члены округляются к одной четверти или сходятся к нулю.
CANDIDATE_CAP_FACTOR: Final[int] = 10000


# =============================================================================
# ПАРАМЕТРЫ ПРОГРЕССИИ
# =============================================================================


def compute_first_term(x: float) -> float:
    """
    Первый член прогрессии: (0.5 * x^2 + 30 * x + 10) / 25.

    x^2 вычисляется как x * x: переполнение даёт Inf, а не OverflowError.

    Examples:
        >>> compute_first_term(1.0)
        1.62
    """
    return (0.5 * x * x + 30.0 * x + 10.0) / 25.0


def compute_growth_rate(y: float, first_term: float) -> float:
    """
    Growth rate прогрессии: (0.02 * y / 25) / first_term.

    Деление с IEEE-семантикой: first_term == 0 даёт ±Inf или NaN.
    """
    return ieee_divide(0.02 * y / 25.0, first_term)


# =============================================================================
# ГЕНЕРАЦИЯ
# =============================================================================


def iter_series(x: float, y: float, length: int) -> Iterator[float]:
    """
    Ленивая генерация серии в порядке генерации (без сортировки).

    Выдаёт уникальные округлённые значения: сначала round_quarter(first_term),
    затем round_quarter(growth_rate * first_term^i). Останавливается после
    length значений, после исчерпания лимита кандидатов, после underflow
    степени к нулю или после двух переполнений подряд (дальше повторяются
    только ±Inf).

    Args:
        x: Параметр первого члена
        y: Параметр growth rate
        length: Максимальное количество значений

    Yields:
        Уникальные значения, кратные 0.25
    """
    if length < 1:
        return

    first_term = compute_first_term(x)
    if not is_valid_float(first_term):
        logger.debug("First term is not finite (x=%r), series is empty", x)
        return

    head = round_quarter(first_term)
    yield head

    growth_rate = compute_growth_rate(y, first_term)
    if not is_valid_float(growth_rate) or growth_rate == 0.0:
        logger.debug(
            "Growth rate %r cannot advance the progression (y=%r), single-element series",
            growth_rate,
            y,
        )
        return

    seen = {head}
    if len(seen) >= length:
        return

    cap = length * CANDIDATE_CAP_FACTOR
    overflowed_before = False

    for i in range(1, cap + 1):
        power = safe_power(first_term, i)
        candidate = round_quarter(growth_rate * power)

        if candidate not in seen:
            seen.add(candidate)
            yield candidate
            if len(seen) >= length:
                return

        # Underflow: все следующие члены равны нулю
        if power == 0.0:
            break

        overflowed = not is_valid_float(power)
        if overflowed and overflowed_before:
            break
        overflowed_before = overflowed

    logger.debug(
        "Candidate stream exhausted after %d distinct values of %d requested "
        "(first_term=%r, growth_rate=%r)",
        len(seen),
        length,
        first_term,
        growth_rate,
    )


def generate_series(x: float, y: float, length: int) -> list[float]:
    """
    Генерация серии: уникальные значения, не более length, по возрастанию.

    Args:
        x: Параметр первого члена
        y: Параметр growth rate
        length: Запрошенная длина (< 1 → пустая серия)

    Returns:
        Строго возрастающий список значений, кратных 0.25

    Examples:
        >>> generate_series(1.0, 5062.5, 5)
        [1.5, 4.0, 6.5, 10.75, 17.25]
        >>> generate_series(1.0, 5062.5, 0)
        []
        >>> generate_series(1.0, 0.0, 5)
        [1.5]
    """
    return sorted(iter_series(x, y, length))


def build_series(x: float, y: float, length: int) -> GeneratedSeries:
    """
    Генерация серии, материализованной в immutable модель с random access.

    Модель несёт growth rate этой же генерации, который требуется
    closed-form селектору.

    Args:
        x: Параметр первого члена
        y: Параметр growth rate
        length: Запрошенная длина

    Returns:
        GeneratedSeries с параметрами прогрессии и значениями
    """
    first_term = compute_first_term(x)
    growth_rate = compute_growth_rate(y, first_term)

    return GeneratedSeries(
        x=x,
        y=y,
        requested_length=length,
        first_term=first_term,
        growth_rate=growth_rate,
        values=tuple(generate_series(x, y, length)),
    )
