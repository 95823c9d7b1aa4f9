"""
Тесты для модуля Numerical Safeguards

Проверяет:
1. NaN/Inf проверку
2. IEEE-деление без ZeroDivisionError
3. Возведение в степень без OverflowError
4. Логарифм с None для неопределённых случаев
5. Округление к кратному epsilon (half away from zero)
"""

import math

import pytest

from src.core.math.numerical_safeguards import (
    ieee_divide,
    is_valid_float,
    round_to_epsilon,
    safe_log,
    safe_power,
)

# =============================================================================
# ТЕСТЫ NaN/Inf ПРОВЕРКИ
# =============================================================================


class TestIsValidFloat:
    """Тесты для is_valid_float"""

    def test_finite_values_valid(self) -> None:
        """Конечные значения валидны"""
        assert is_valid_float(0.0) is True
        assert is_valid_float(-1.5) is True
        assert is_valid_float(1e308) is True
        assert is_valid_float(5e-324) is True

    def test_nan_inf_invalid(self) -> None:
        """NaN/Inf невалидны"""
        assert is_valid_float(float("nan")) is False
        assert is_valid_float(float("inf")) is False
        assert is_valid_float(float("-inf")) is False


# =============================================================================
# ТЕСТЫ IEEE-ДЕЛЕНИЯ
# =============================================================================


class TestIeeeDivide:
    """Тесты для ieee_divide"""

    def test_normal_division(self) -> None:
        """Обычное деление работает корректно"""
        assert ieee_divide(10.0, 4.0) == 2.5
        assert ieee_divide(-10.0, 2.0) == -5.0

    def test_division_by_zero_gives_signed_inf(self) -> None:
        """Деление на ноль даёт ±Inf со знаком по IEEE"""
        assert ieee_divide(1.0, 0.0) == math.inf
        assert ieee_divide(-1.0, 0.0) == -math.inf
        assert ieee_divide(1.0, -0.0) == -math.inf
        assert ieee_divide(-1.0, -0.0) == math.inf

    def test_zero_by_zero_gives_nan(self) -> None:
        """0/0 и NaN/0 дают NaN"""
        assert math.isnan(ieee_divide(0.0, 0.0))
        assert math.isnan(ieee_divide(float("nan"), 0.0))

    def test_overflow_gives_inf(self) -> None:
        """Переполнение деления даёт Inf, без exception"""
        assert ieee_divide(1e308, 1e-10) == math.inf

    def test_nan_propagates(self) -> None:
        """NaN в знаменателе даёт NaN"""
        assert math.isnan(ieee_divide(1.0, float("nan")))


# =============================================================================
# ТЕСТЫ СТЕПЕНИ
# =============================================================================


class TestSafePower:
    """Тесты для safe_power"""

    def test_normal_power(self) -> None:
        """Обычные степени совпадают с **"""
        assert safe_power(2.0, 10) == 1024.0
        assert safe_power(1.62, 2) == 1.62 ** 2
        assert safe_power(-2.0, 3) == -8.0

    def test_overflow_positive_base(self) -> None:
        """Переполнение положительного основания → +Inf"""
        assert safe_power(1e200, 2) == math.inf
        assert safe_power(1.62, 5000) == math.inf

    def test_overflow_negative_base_sign(self) -> None:
        """Знак переполнения зависит от чётности показателя"""
        assert safe_power(-1e200, 3) == -math.inf
        assert safe_power(-1e200, 2) == math.inf

    def test_underflow_to_zero(self) -> None:
        """Underflow даёт ноль без exception"""
        assert safe_power(0.5, 5000) == 0.0


# =============================================================================
# ТЕСТЫ ЛОГАРИФМА
# =============================================================================


class TestSafeLog:
    """Тесты для safe_log"""

    def test_normal_log(self) -> None:
        """Обычный логарифм по основанию"""
        assert safe_log(8.0, 2.0) == pytest.approx(3.0)
        assert safe_log(2.5, 1.5) == pytest.approx(2.259851, rel=1e-6)

    def test_value_below_one_gives_negative(self) -> None:
        """Аргумент < 1 при основании > 1 → отрицательный логарифм"""
        assert safe_log(0.25, 2.0) == pytest.approx(-2.0)

    def test_undefined_cases_return_none(self) -> None:
        """Неопределённый логарифм → None"""
        assert safe_log(0.0, 2.0) is None
        assert safe_log(-1.0, 2.0) is None
        assert safe_log(8.0, 1.0) is None
        assert safe_log(8.0, 0.0) is None
        assert safe_log(8.0, -2.0) is None

    def test_non_finite_returns_none(self) -> None:
        """NaN/Inf аргументы → None"""
        assert safe_log(float("inf"), 2.0) is None
        assert safe_log(float("nan"), 2.0) is None
        assert safe_log(8.0, float("inf")) is None


# =============================================================================
# ТЕСТЫ ОКРУГЛЕНИЯ
# =============================================================================


class TestRoundToEpsilon:
    """Тесты для round_to_epsilon"""

    def test_round_to_quarter(self) -> None:
        """Округление к шагу 0.25"""
        assert round_to_epsilon(10.10, 0.25) == 10.0
        assert round_to_epsilon(10.21, 0.25) == 10.25

    def test_half_away_from_zero(self) -> None:
        """Середина интервала округляется от нуля"""
        assert round_to_epsilon(125.0, 10.0) == 130.0
        assert round_to_epsilon(-125.0, 10.0) == -130.0
        assert round_to_epsilon(0.125, 0.25) == 0.25
        assert round_to_epsilon(-0.125, 0.25) == -0.25

    def test_just_below_half_rounds_down(self) -> None:
        """Значение чуть меньше середины не округляется вверх"""
        assert round_to_epsilon(0.49999999999999994, 1.0) == 0.0

    def test_large_odd_ratio_stable(self) -> None:
        """Большие ratio (>= 2**52) не сдвигаются на лишний шаг"""
        value = (2.0 ** 52 + 1.0) * 0.25
        assert round_to_epsilon(value, 0.25) == value

    def test_invalid_eps_raises(self) -> None:
        """Невалидный eps вызывает ошибку"""
        with pytest.raises(ValueError, match="eps must be positive"):
            round_to_epsilon(10.0, 0.0)

        with pytest.raises(ValueError, match="eps must be positive"):
            round_to_epsilon(10.0, -0.25)
