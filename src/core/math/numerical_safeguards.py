"""
Numerical Safeguards — Safe Math Primitives

Модуль обеспечивает численную устойчивость генерации серии и выбора
special-значений:
- Проверка float на конечность (NaN/Inf)
- IEEE-754 деление без ZeroDivisionError
- Возведение в степень без OverflowError
- Логарифм по основанию с явным None для неопределённых случаев
- Округление к ближайшему кратному шага (round half away from zero)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Python-исключения, которых нет в IEEE-арифметике (ZeroDivisionError,
   OverflowError, ValueError из math.log), никогда не возникают
2. NaN/Inf возвращаются как значения, решение принимает вызывающий код
3. Все операции детерминированы и воспроизводимы
"""

import math


# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


# =============================================================================
# IEEE-ДЕЛЕНИЕ И СТЕПЕНИ
# =============================================================================


def ieee_divide(numerator: float, denominator: float) -> float:
    """
    Деление с семантикой IEEE-754.

    Python бросает ZeroDivisionError при делении float на ноль, IEEE-754
    возвращает ±Inf или NaN. Генерация серии опирается на IEEE-семантику:
    невалидный результат детектируется через is_valid_float.

    Args:
        numerator: Числитель
        denominator: Знаменатель

    Returns:
        numerator / denominator, при denominator == 0:
        - NaN если numerator == 0 или NaN
        - ±Inf иначе (знак = знак numerator × знак denominator)

    Examples:
        >>> ieee_divide(10.0, 4.0)
        2.5
        >>> ieee_divide(1.0, 0.0)
        inf
        >>> ieee_divide(1.0, -0.0)
        -inf
        >>> ieee_divide(0.0, 0.0)
        nan
    """
    if denominator == 0.0:
        if numerator == 0.0 or math.isnan(numerator):
            return math.nan
        sign = math.copysign(1.0, numerator) * math.copysign(1.0, denominator)
        return math.copysign(math.inf, sign)

    return numerator / denominator


def safe_power(base: float, exponent: int) -> float:
    """
    Возведение float в целую неотрицательную степень без OverflowError.

    `float ** int` в Python бросает OverflowError при переполнении, тогда как
    умножение float даёт Inf. Здесь переполнение превращается в ±Inf.

    Args:
        base: Основание
        exponent: Целый показатель степени (>= 0)

    Returns:
        base ** exponent, либо ±Inf при переполнении
        (-Inf только для отрицательного base и нечётного exponent)

    Examples:
        >>> safe_power(2.0, 10)
        1024.0
        >>> safe_power(1e200, 2)
        inf
        >>> safe_power(-1e200, 3)
        -inf
    """
    try:
        return base ** exponent
    except OverflowError:
        if base < 0 and exponent % 2 == 1:
            return -math.inf
        return math.inf


def safe_log(value: float, base: float) -> float | None:
    """
    Логарифм value по основанию base.

    Args:
        value: Аргумент логарифма
        base: Основание логарифма

    Returns:
        log_base(value), либо None если логарифм не определён:
        value <= 0, base <= 0, base == 1 или любой аргумент NaN/Inf

    Examples:
        >>> safe_log(8.0, 2.0)
        3.0
        >>> safe_log(0.0, 2.0) is None
        True
        >>> safe_log(8.0, 1.0) is None
        True
    """
    if not (is_valid_float(value) and is_valid_float(base)):
        return None

    if value <= 0.0 or base <= 0.0 or base == 1.0:
        return None

    return math.log(value, base)


# =============================================================================
# ОКРУГЛЕНИЕ И КВАНТОВАНИЕ
# =============================================================================


def round_to_epsilon(value: float, eps: float) -> float:
    """
    Округление значения до ближайшего кратного epsilon.

    Использует математическое округление "round half away from zero":
    дробная часть ровно 0.5 округляется от нуля.

    Дробная часть вычисляется как abs(ratio) - floor(abs(ratio)), что точно
    для любого float, поэтому граничные случаи (0.49999999999999994,
    ratio >= 2**52) не сдвигают результат на лишний шаг.

    Args:
        value: Значение для округления (конечное)
        eps: Шаг квантования

    Returns:
        Округлённое значение

    Raises:
        ValueError: Если eps <= 0

    Examples:
        >>> round_to_epsilon(10.21, 0.25)
        10.25
        >>> round_to_epsilon(125.0, 10.0)
        130.0
        >>> round_to_epsilon(-10.125, 0.25)
        -10.25
    """
    if eps <= 0:
        raise ValueError(f"eps must be positive, got {eps}")

    # Количество шагов epsilon
    ratio = value / eps
    magnitude = abs(ratio)

    steps = math.floor(magnitude)
    if magnitude - steps >= 0.5:
        steps += 1

    if ratio < 0:
        steps = -steps

    return steps * eps
