"""
Тесты численных примитивов

Проверяет:
1. NaN/Inf проверки
2. clamp (включая прохождение NaN)
3. safe_log10 без исключений
4. Целая и дробная части
5. Разбор десятичных чисел
"""

import math

import pytest

from eelevels.core.math.numerical_safeguards import (
    clamp,
    has_fractional_part,
    integer_digit_count,
    is_valid_float,
    parse_decimal,
    safe_log10,
)


# =============================================================================
# is_valid_float
# =============================================================================


class TestIsValidFloat:
    """Тесты is_valid_float"""

    def test_normal_values_valid(self) -> None:
        assert is_valid_float(0.0)
        assert is_valid_float(-1e300)

    def test_nan_invalid(self) -> None:
        assert not is_valid_float(math.nan)

    def test_inf_invalid(self) -> None:
        assert not is_valid_float(math.inf)
        assert not is_valid_float(-math.inf)


# =============================================================================
# clamp
# =============================================================================


class TestClamp:
    """Тесты clamp"""

    def test_inside_range(self) -> None:
        assert clamp(5.0, 0.0, 10.0) == 5.0

    def test_below_and_above(self) -> None:
        assert clamp(-1.0, 0.0, 10.0) == 0.0
        assert clamp(15.0, 0.0, 10.0) == 10.0

    def test_open_bounds(self) -> None:
        assert clamp(15.0, None, 10.0) == 10.0
        assert clamp(-15.0, 0.0, None) == 0.0
        assert clamp(-15.0) == -15.0

    def test_nan_passes_through(self) -> None:
        assert math.isnan(clamp(math.nan, 0.0, 1.0))

    def test_infinity_clamped(self) -> None:
        assert clamp(math.inf, None, 0.0) == 0.0
        assert clamp(-math.inf, None, 0.0) == -math.inf


# =============================================================================
# safe_log10
# =============================================================================


class TestSafeLog10:
    """Тесты safe_log10"""

    def test_positive(self) -> None:
        assert safe_log10(100.0) == pytest.approx(2.0)

    def test_zero_is_negative_infinity(self) -> None:
        assert safe_log10(0.0) == -math.inf

    def test_negative_is_nan(self) -> None:
        assert math.isnan(safe_log10(-1.0))

    def test_nan_is_nan(self) -> None:
        assert math.isnan(safe_log10(math.nan))


# =============================================================================
# ЦЕЛАЯ / ДРОБНАЯ ЧАСТИ
# =============================================================================


class TestIntegerAndFraction:
    """Тесты has_fractional_part / integer_digit_count"""

    def test_fractional_part(self) -> None:
        assert has_fractional_part(1.5)
        assert has_fractional_part(-0.25)
        assert not has_fractional_part(1500.0)
        assert not has_fractional_part(0.0)

    def test_non_finite_has_no_fraction(self) -> None:
        assert not has_fractional_part(math.nan)
        assert not has_fractional_part(math.inf)

    @pytest.mark.parametrize(
        "value,digits",
        [(0.0, 1), (0.5, 1), (999.9, 3), (1500.25, 4), (-1500.0, 4), (1e6, 7)],
    )
    def test_integer_digit_count(self, value: float, digits: int) -> None:
        assert integer_digit_count(value) == digits


# =============================================================================
# parse_decimal
# =============================================================================


class TestParseDecimal:
    """Тесты parse_decimal"""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("10", 10.0),
            ("-10.5", -10.5),
            ("+3", 3.0),
            (".5", 0.5),
            ("5.", 5.0),
            ("  2.83 ", 2.83),
        ],
    )
    def test_valid_numbers(self, text: str, expected: float) -> None:
        assert parse_decimal(text) == expected

    @pytest.mark.parametrize("text", ["", "   ", "abc", "1e3", "1.2.3", "- 5", "10mV", "."])
    def test_invalid_numbers(self, text: str) -> None:
        assert parse_decimal(text) is None

    def test_sign_disallowed(self) -> None:
        assert parse_decimal("-1", allow_sign=False) is None
        assert parse_decimal("+1", allow_sign=False) is None
        assert parse_decimal("1", allow_sign=False) == 1.0

    def test_none(self) -> None:
        assert parse_decimal(None) is None  # type: ignore[arg-type]
