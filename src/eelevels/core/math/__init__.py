"""
Core math modules для eelevels

Численные примитивы, на которые опираются Quantity, конверсии и форматтер.
"""

from eelevels.core.math.numerical_safeguards import (
    SCALING_ROUND_DIGITS,
    clamp,
    has_fractional_part,
    integer_digit_count,
    is_valid_float,
    parse_decimal,
    safe_log10,
)

__all__ = [
    "SCALING_ROUND_DIGITS",
    "clamp",
    "has_fractional_part",
    "integer_digit_count",
    "is_valid_float",
    "parse_decimal",
    "safe_log10",
]
