"""
Quarter Rounding — округление к ближайшей четверти

Все значения серии квантуются к шагу 0.25 и приводятся к 2 знакам после
запятой, чтобы убрать двоичный остаток вида 10.2500000001.

Правило округления: round half away from zero (через round_to_epsilon).
"""

from typing import Final

from src.core.math.numerical_safeguards import is_valid_float, round_to_epsilon

# =============================================================================
# ПАРАМЕТРЫ ОКРУГЛЕНИЯ
# =============================================================================

# Шаг квантования значений серии
QUARTER_STEP: Final[float] = 0.25

# Количество знаков после запятой в результате
QUARTER_DECIMALS: Final[int] = 2


def round_quarter(value: float) -> float:
    """
    Округление к ближайшему кратному 0.25 с точностью 2 знака.

    Тотальная функция: NaN/Inf возвращаются без изменений, как и конечные
    значения, у которых value / 0.25 переполняется (такие float уже целые).

    Args:
        value: Исходное значение

    Returns:
        Ближайшее кратное 0.25 (half away from zero)

    Examples:
        >>> round_quarter(10.10)
        10.0
        >>> round_quarter(10.21)
        10.25
        >>> round_quarter(10.63)
        10.75
        >>> round_quarter(12.12)
        12.0
    """
    if not is_valid_float(value) or not is_valid_float(value / QUARTER_STEP):
        return value

    return round(round_to_epsilon(value, QUARTER_STEP), QUARTER_DECIMALS)
