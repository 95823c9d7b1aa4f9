"""
Special Values — выбор пары special-значений из серии

Две независимые стратегии для одной и той же пары (special_a, special_b):
- pick_special: линейный guarded descent по отсортированной серии, O(n)
- pick_special_alt: closed-form оценка позиции через логарифм, O(1)

special_a = series[len - 3] (третий с конца элемент)
special_b = элемент серии, ближайший к approx = TARGET_CONSTANT / z;
            при равном расстоянии выбирается больший элемент

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Серия короче MIN_SERIES_LENGTH → InvalidArgument (обе стратегии)
2. Tie-break в сторону большего значения одинаков в обеих стратегиях
3. Для серии от generate_series и её growth rate стратегии дают равные пары

ФОРМУЛЫ (closed-form):
    approx = growth_rate * first^i
    i' = log_first(round_quarter(approx / growth_rate)),  first = series[0]
    окно индексов: [floor(i') - LEEWAY, ceil(i') + LEEWAY] ∩ [0, len - 1]
"""

import math
from typing import Final, NamedTuple, Sequence

from src.core.math.numerical_safeguards import ieee_divide, safe_log
from src.core.math.rounding import round_quarter

# =============================================================================
# ПАРАМЕТРЫ ВЫБОРА
# =============================================================================

# Константа целевого значения: approx = TARGET_CONSTANT / z
TARGET_CONSTANT: Final[float] = 1000.0

# Минимальная длина серии для выбора special-значений
MIN_SERIES_LENGTH: Final[int] = 3

# Запас окна вокруг оценки индекса (минимальный без расхождений стратегий)
LEEWAY: Final[int] = 2


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidArgument(ValueError):
    """
    Серия слишком короткая для выбора special-значений.

    Не перехватывается внутри модуля: решение о фатальности принимает
    вызывающий код.
    """
    pass


# =============================================================================
# RESULT
# =============================================================================


class SpecialPair(NamedTuple):
    """Пара special-значений. Сравнима с обычным tuple (a, b)."""
    special_a: float  # series[len - 3]
    special_b: float  # ближайший к TARGET_CONSTANT / z элемент


# =============================================================================
# ОБЩИЕ ХЕЛПЕРЫ
# =============================================================================


def check_series_length(series: Sequence[float]) -> None:
    """
    Проверка минимальной длины серии.

    Raises:
        InvalidArgument: если len(series) < MIN_SERIES_LENGTH
    """
    if len(series) < MIN_SERIES_LENGTH:
        raise InvalidArgument(
            f"Cannot be called on a list smaller than {MIN_SERIES_LENGTH} elements, "
            f"got {len(series)}"
        )


def target_approximation(z: float) -> float:
    """
    Целевое значение approx = TARGET_CONSTANT / z.

    z == 0 следует IEEE-семантике (±Inf), без exception.
    """
    return ieee_divide(TARGET_CONSTANT, z)


def estimate_index(approx: float, growth_rate: float, first: float) -> float | None:
    """
    Оценка индекса ближайшего элемента обращением геометрической формулы.

    Args:
        approx: Целевое значение
        growth_rate: Growth rate прогрессии, породившей серию
        first: Первый элемент серии (основание логарифма)

    Returns:
        Вещественная оценка индекса i', либо None если логарифм не определён
        (approx / growth_rate округляется к <= 0, основание <= 0 или == 1,
        NaN/Inf)

    Examples:
        >>> round(estimate_index(6.25, 2.5, 1.5), 4)
        2.2599
    """
    scaled = round_quarter(ieee_divide(approx, growth_rate))
    return safe_log(scaled, first)


# =============================================================================
# ЛИНЕЙНАЯ СТРАТЕГИЯ
# =============================================================================


def pick_special(z: float, series: Sequence[float]) -> SpecialPair:
    """
    Выбор special-значений линейным спуском по серии.

    Серия должна быть отсортирована по возрастанию: как только расстояние
    до approx начинает расти, лучше уже не будет, и спуск останавливается.
    При равном расстоянии возвращается больший элемент, дальше элементы
    только больше.

    Сложность: O(n) worst case, O(k) типично, k: расстояние до ответа.

    Args:
        z: Целевое отношение
        series: Серия по возрастанию (достаточно последовательного обхода
                и len/индексации для special_a)

    Returns:
        SpecialPair(series[len - 3], ближайший к approx элемент)

    Raises:
        InvalidArgument: если len(series) < 3

    Examples:
        >>> pick_special(160.0, [1.5, 4.0, 6.5, 10.75, 17.25])
        SpecialPair(special_a=6.5, special_b=6.5)
    """
    check_series_length(series)

    approx = target_approximation(z)
    values = iter(series)

    best = next(values)
    best_distance = abs(best - approx)

    for value in values:
        distance = abs(value - approx)

        if distance > best_distance:
            break

        if distance == best_distance:
            best = max(value, best)
            break

        best, best_distance = value, distance

    return SpecialPair(series[len(series) - 3], best)


# =============================================================================
# CLOSED-FORM СТРАТЕГИЯ
# =============================================================================


def pick_special_alt(
    z: float,
    growth_rate: float,
    series: Sequence[float],
) -> SpecialPair:
    """
    Выбор special-значений через closed-form оценку индекса, O(1).

    Оценка i' обращает формулу генерации; окно [floor(i') - LEEWAY,
    ceil(i') + LEEWAY] покрывает ошибку округления и сдвиг от удаления
    дубликатов. Кандидаты окна упорядочиваются по расстоянию до approx,
    при равенстве по убыванию значения.

    Args:
        z: Целевое отношение
        growth_rate: Growth rate генерации, породившей серию
        series: Серия по возрастанию с random access

    Returns:
        SpecialPair(series[len - 3], лучший кандидат окна); если окно пусто
        или оценка не определена, то series[0]

    Raises:
        InvalidArgument: если len(series) < 3

    Examples:
        >>> pick_special_alt(160.0, 2.5, (1.5, 4.0, 6.5, 10.75, 17.25))
        SpecialPair(special_a=6.5, special_b=6.5)
    """
    check_series_length(series)

    size = len(series)
    approx = target_approximation(z)
    special_a = series[size - 3]

    estimate = estimate_index(approx, growth_rate, series[0])
    if estimate is None:
        return SpecialPair(special_a, series[0])

    lower = max(math.floor(estimate) - LEEWAY, 0)
    upper = min(math.ceil(estimate) + LEEWAY, size - 1)
    if lower > upper:
        return SpecialPair(special_a, series[0])

    # (value, distance) пары
    candidates = [(series[i], abs(series[i] - approx)) for i in range(lower, upper + 1)]
    special_b, _ = min(candidates, key=lambda pair: (pair[1], -pair[0]))

    return SpecialPair(special_a, special_b)
