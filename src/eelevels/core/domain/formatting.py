"""
Formatting — Вывод величин с автоматическим подбором SI-префикса

Алгоритм (только для единиц с поддержкой множителей):

    Коррекция: положительный множитель единицы переносится в magnitude
    Фаза A (спуск):  пока есть дробная часть и |exp| < 24:
                     magnitude *= 1000, exp -= 3, round(6)
    Фаза B (подъём): пока целая часть длиннее 3 цифр и |exp| < 24:
                     magnitude /= 1000, exp += 3, round(6)

Жадный поиск приближает «наименьший префикс, дающий 1–3 цифры целой
части без усечения дроби»; он не оптимален глобально и упирается в
границу ±24 без дальнейшей коррекции.

Единица в выводе: символ префикса + base_symbol, RMS-суффикс не печатается.
"""

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from eelevels.core.domain.prefix import MAX_PREFIX_EXPONENT, prefix_for_exponent
from eelevels.core.domain.result import FormattingInvariantViolation
from eelevels.core.domain.unit import UnitDescriptor
from eelevels.core.math.numerical_safeguards import (
    SCALING_ROUND_DIGITS,
    has_fractional_part,
    integer_digit_count,
)

if TYPE_CHECKING:
    from eelevels.core.domain.quantity import Quantity


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

NAN_TEXT: Final[str] = "--"
INFINITY_TEXT: Final[str] = "∞"

# Максимум цифр целой части до подъёма на следующий префикс
MAX_INTEGER_DIGITS: Final[int] = 3

PREFIX_STEP_FACTOR: Final[float] = 1000.0


# =============================================================================
# КОНФИГУРАЦИЯ
# =============================================================================


@dataclass(frozen=True)
class FormatOptions:
    """Параметры вывода.

    - decimal_places: число знаков после запятой (0: только целое)
    - optional_decimals: целое значение печатается без дробной части
      (только для единиц с поддержкой множителей)
    """

    decimal_places: int = 2
    optional_decimals: bool = False

    def __post_init__(self) -> None:
        if self.decimal_places < 0:
            raise ValueError(f"decimal_places must be non-negative, got {self.decimal_places}")


DEFAULT_FORMAT_OPTIONS: Final[FormatOptions] = FormatOptions()


# =============================================================================
# ФОРМАТИРОВАНИЕ
# =============================================================================


def _scale_to_prefix(magnitude: float, exponent: int) -> tuple[float, int]:
    """Двухфазный подбор экспоненты. Возвращает (magnitude, exponent)."""
    # Фаза A: спуск, пока есть дробная часть
    while has_fractional_part(magnitude) and abs(exponent) < MAX_PREFIX_EXPONENT:
        magnitude = round(magnitude * PREFIX_STEP_FACTOR, SCALING_ROUND_DIGITS)
        exponent -= 3

    # Фаза B: подъём, пока целая часть длиннее 3 цифр
    while (
        integer_digit_count(magnitude) > MAX_INTEGER_DIGITS
        and abs(exponent) < MAX_PREFIX_EXPONENT
    ):
        magnitude = round(magnitude / PREFIX_STEP_FACTOR, SCALING_ROUND_DIGITS)
        exponent += 3

    return magnitude, exponent


def format_magnitude(
    magnitude: float,
    unit: UnitDescriptor,
    options: FormatOptions = DEFAULT_FORMAT_OPTIONS,
) -> str:
    """
    Форматирование пары (magnitude, unit).

    Args:
        magnitude: Значение, выраженное в unit (с учётом её множителя)
        unit: Единица; RMS-суффикс в вывод не попадает
        options: Параметры вывода

    Returns:
        Строка "<number> <prefix><base_symbol>"

    Examples:
        >>> format_magnitude(1500.0, HERTZ)
        '1.50 kHz'
        >>> format_magnitude(float("nan"), VOLT)
        '-- V'
    """
    if math.isnan(magnitude):
        return f"{NAN_TEXT} {unit.symbol}"
    if math.isinf(magnitude):
        return f"{INFINITY_TEXT} {unit.symbol}"

    exponent = unit.multiplier.exponent
    can_drop_decimals = False

    if unit.supports_multipliers:
        # Положительный множитель не должен встречаться после нормализации
        if exponent > 0:
            magnitude = unit.multiplier.apply(magnitude)
            exponent = 0
        magnitude, exponent = _scale_to_prefix(magnitude, exponent)
        can_drop_decimals = options.optional_decimals and not has_fractional_part(magnitude)

    if can_drop_decimals:
        number_text = str(int(magnitude))
    else:
        number_text = f"{magnitude:.{options.decimal_places}f}"

    unit_text = unit.base_symbol
    prefix = prefix_for_exponent(exponent)
    if prefix is not None and prefix.symbol:
        unit_text = prefix.symbol + unit_text

    return f"{number_text} {unit_text}"


def format_quantity(
    quantity: "Quantity",
    decimal_places: int = 2,
    optional_decimals: bool = False,
) -> str:
    """Форматирование Quantity с автоматическим SI-префиксом."""
    return format_magnitude(
        quantity.magnitude,
        quantity.unit,
        FormatOptions(decimal_places=decimal_places, optional_decimals=optional_decimals),
    )


def split_formatted(
    quantity: "Quantity",
    options: FormatOptions = DEFAULT_FORMAT_OPTIONS,
) -> tuple[str, str]:
    """
    Форматированная строка, разделённая на (число, единица).

    Raises:
        FormattingInvariantViolation: Если строка не состоит ровно из двух токенов
    """
    tokens = format_magnitude(quantity.magnitude, quantity.unit, options).split(" ")
    if len(tokens) != 2:
        raise FormattingInvariantViolation(
            f"formatted quantity split into {len(tokens)} tokens: {tokens}"
        )
    return tokens[0], tokens[1]
