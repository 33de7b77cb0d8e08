"""
Numerical Safeguards — Численные примитивы для уровней

Модуль собирает мелкие численные операции, на которые опираются
Quantity, конверсии и форматтер:
- NaN/Inf проверки
- Ограничение значения диапазоном (clamp)
- log10 с IEEE-семантикой (0 → -inf, отрицательное → NaN) без исключений
- Разбор десятичного числа с учётом локали (знак, десятичная точка)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. NaN проходит через clamp без изменений
2. safe_log10 никогда не бросает исключений
3. parse_decimal не принимает экспоненциальную запись и разделители тысяч
"""

import locale
import math
import re
from typing import Final, Optional

# =============================================================================
# ПАРАМЕТРЫ ОКРУГЛЕНИЯ
# =============================================================================

# Число знаков после запятой при промежуточном округлении форматтера
SCALING_ROUND_DIGITS: Final[int] = 6


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
# ОГРАНИЧЕНИЯ
# =============================================================================


def clamp(
    value: float,
    min_value: float | None = None,
    max_value: float | None = None,
) -> float:
    """
    Ограничение значения в заданном диапазоне.

    Args:
        value: Исходное значение
        min_value: Минимальное допустимое значение (optional)
        max_value: Максимальное допустимое значение (optional)

    Returns:
        Значение, ограниченное диапазоном [min_value, max_value]

    Examples:
        >>> clamp(5.0, 0.0, 10.0)
        5.0
        >>> clamp(-1.0, 0.0, 10.0)
        0.0
        >>> clamp(15.0, None, 10.0)
        10.0
    """
    result = value

    # max/min возвращают первый аргумент при сравнении с NaN
    if min_value is not None:
        result = max(result, min_value)

    if max_value is not None:
        result = min(result, max_value)

    return result


# =============================================================================
# ЛОГАРИФМЫ
# =============================================================================


def safe_log10(value: float) -> float:
    """
    Десятичный логарифм с IEEE-семантикой.

    math.log10 бросает ValueError для 0 и отрицательных значений;
    здесь вместо этого возвращается -inf и NaN соответственно.

    Examples:
        >>> safe_log10(100.0)
        2.0
        >>> safe_log10(0.0)
        -inf
    """
    if math.isnan(value) or value < 0:
        return math.nan
    if value == 0:
        return -math.inf
    return math.log10(value)


# =============================================================================
# ЦЕЛАЯ И ДРОБНАЯ ЧАСТИ
# =============================================================================


def has_fractional_part(value: float) -> bool:
    """True если у конечного значения есть ненулевая дробная часть."""
    if not is_valid_float(value):
        return False
    return math.modf(value)[0] != 0.0


def integer_digit_count(value: float) -> int:
    """
    Число десятичных цифр целой части (без знака).

    Examples:
        >>> integer_digit_count(1500.25)
        4
        >>> integer_digit_count(-0.5)
        1
    """
    return len(str(abs(int(value))))


# =============================================================================
# РАЗБОР ЧИСЕЛ
# =============================================================================


def _decimal_point() -> str:
    point = locale.localeconv().get("decimal_point") or "."
    return str(point)


def parse_decimal(text: str, allow_sign: bool = True) -> Optional[float]:
    """
    Разбор десятичного числа с учётом локали.

    Допускаются: необязательный ведущий знак, цифры, одна десятичная
    точка текущей локали (точка '.' принимается всегда).

    Args:
        text: Строка с числом
        allow_sign: Разрешить ведущий '+' / '-'

    Returns:
        float или None, если строка не является числом

    Examples:
        >>> parse_decimal("-10.5")
        -10.5
        >>> parse_decimal("-10.5", allow_sign=False) is None
        True
        >>> parse_decimal("1e3") is None
        True
    """
    if text is None:
        return None
    candidate = text.strip()
    if not candidate:
        return None

    points = {".", _decimal_point()}
    point_class = "".join(re.escape(p) for p in sorted(points))
    sign = r"[+-]?" if allow_sign else ""
    pattern = rf"{sign}(?:\d+(?:[{point_class}]\d*)?|[{point_class}]\d+)"
    if re.fullmatch(pattern, candidate) is None:
        return None

    for point in points:
        candidate = candidate.replace(point, ".")
    return float(candidate)
