"""
Conversion Engine — Конверсии уровней между представлениями

Чистые функции Quantity → Result[Quantity]:
- to_dbu / to_dbv          : линейный уровень → логарифмический
- to_vrms                  : dBu / dBV → Vrms
- to_watt                  : уровень → мощность на нагрузке z
- rms_translate            : RMS ↔ Peak ↔ Peak-Peak

Все конверсии определены только вне цифрового домена: Digital → DIGITAL_DOMAIN.

ФОРМУЛЫ:
    L(dBu) = 20 · log10(V / 0.7746)        V = 0.7746 · 10^(L / 20)
    L(dBV) = 20 · log10(V / 1.0)           V = 1.0    · 10^(L / 20)
    P      = Vrms² / z

    0 dBu = -2.2185 dBV = 0.7746 Vrms
    0 dBV =  2.2185 dBu = 1 Vrms

    Опорный уровень dBu один для обоих направлений (0.7746), поэтому
    to_vrms(to_dbu(v)) ≈ v; с опорой 0.7745 в прямом направлении 1 V
    давал бы 2.2196 dBu вместо 2.2185.

    Vp  = √2  · Vrms       Vrms = Vp  / √2
    Vpp = 2√2 · Vrms       Vrms = Vpp / 2√2
    Vpp = 2   · Vp
"""

import math
from typing import Final

from eelevels.core.domain.quantity import Quantity
from eelevels.core.domain.result import FailureReason, Result
from eelevels.core.domain.unit import (
    DBU,
    DBV,
    VOLT,
    WATT,
    RmsKind,
    parse_unit,
    suffix_for_rms_kind,
)
from eelevels.core.math.numerical_safeguards import safe_log10

# =============================================================================
# ОПОРНЫЕ УРОВНИ
# =============================================================================

# 0 dBu: sqrt(0.6) ≈ 0.7746 Vrms (1 mW на 600 Ом)
DBU_REFERENCE_VRMS: Final[float] = 0.7746

# 0 dBV: 1 Vrms
DBV_REFERENCE_VRMS: Final[float] = 1.0


# =============================================================================
# RMS-КОЭФФИЦИЕНТЫ
# =============================================================================

_SQRT2: Final[float] = math.sqrt(2.0)

# (source, target) → множитель; отсутствующие пары дают 1.0
RMS_RATIOS: Final[dict[tuple[RmsKind, RmsKind], float]] = {
    (RmsKind.RMS_VALUE, RmsKind.PEAK_VALUE): _SQRT2,
    (RmsKind.RMS_VALUE, RmsKind.PEAK_PEAK_VALUE): 2.0 * _SQRT2,
    (RmsKind.PEAK_VALUE, RmsKind.RMS_VALUE): 1.0 / _SQRT2,
    (RmsKind.PEAK_VALUE, RmsKind.PEAK_PEAK_VALUE): 2.0,
    (RmsKind.PEAK_PEAK_VALUE, RmsKind.RMS_VALUE): 1.0 / (2.0 * _SQRT2),
    (RmsKind.PEAK_PEAK_VALUE, RmsKind.PEAK_VALUE): 0.5,
}


def rms_ratio(source: RmsKind, target: RmsKind) -> float:
    """
    Множитель перевода между представлениями.

    Examples:
        >>> rms_ratio(RmsKind.PEAK_PEAK_VALUE, RmsKind.PEAK_VALUE)
        0.5
        >>> rms_ratio(RmsKind.NON_CONVERTIBLE, RmsKind.PEAK_VALUE)
        1.0
    """
    return RMS_RATIOS.get((source, target), 1.0)


def _digital_failure(quantity: Quantity) -> Result[Quantity]:
    return Result.failure(
        FailureReason.DIGITAL_DOMAIN,
        f"{quantity.unit} belongs to the digital domain",
    )


# =============================================================================
# ЛОГАРИФМИЧЕСКИЕ УРОВНИ
# =============================================================================


def to_dbu(quantity: Quantity) -> Result[Quantity]:
    """
    Конверсия в dBu.

    Уже dBu → тот же экземпляр. 0 V даёт -inf dBu.

    Args:
        quantity: Исходная величина (не Digital)

    Returns:
        Result[Quantity] в dBu
    """
    if quantity.unit == DBU:
        return Result.success(quantity)
    if quantity.unit.is_digital:
        return _digital_failure(quantity)
    level = 20.0 * safe_log10(quantity.magnitude / DBU_REFERENCE_VRMS)
    return Result.success(Quantity.from_number_and_unit(level, DBU))


def to_dbv(quantity: Quantity) -> Result[Quantity]:
    """Конверсия в dBV (опорный уровень 1 Vrms)."""
    if quantity.unit == DBV:
        return Result.success(quantity)
    if quantity.unit.is_digital:
        return _digital_failure(quantity)
    level = 20.0 * safe_log10(quantity.magnitude / DBV_REFERENCE_VRMS)
    return Result.success(Quantity.from_number_and_unit(level, DBV))


# =============================================================================
# ЛИНЕЙНЫЕ УРОВНИ
# =============================================================================


def to_vrms(quantity: Quantity) -> Result[Quantity]:
    """
    Конверсия в Vrms.

    Поддерживаемые источники: V (тождественно), dBu, dBV.
    Любая другая единица → UNSUPPORTED_SOURCE_UNIT.
    """
    if quantity.unit == VOLT:
        return Result.success(quantity)
    if quantity.unit.is_digital:
        return _digital_failure(quantity)

    if quantity.unit == DBU:
        vrms = DBU_REFERENCE_VRMS * 10.0 ** (quantity.magnitude / 20.0)
    elif quantity.unit == DBV:
        vrms = DBV_REFERENCE_VRMS * 10.0 ** (quantity.magnitude / 20.0)
    else:
        return Result.failure(
            FailureReason.UNSUPPORTED_SOURCE_UNIT,
            f"cannot convert {quantity.unit} to Vrms",
        )
    return Result.success(Quantity.from_number_and_unit(vrms, VOLT))


def to_watt(quantity: Quantity, impedance: float) -> Result[Quantity]:
    """
    Мощность на нагрузке: P = Vrms² / z.

    Args:
        quantity: Уровень (V, dBu, dBV) или уже мощность (W)
        impedance: Сопротивление нагрузки, Ом (> 0)

    Returns:
        Result[Quantity] в W
    """
    if impedance <= 0:
        return Result.failure(
            FailureReason.NON_POSITIVE_IMPEDANCE,
            f"impedance must be positive, got {impedance}",
        )
    if quantity.unit == WATT:
        return Result.success(quantity)
    if quantity.unit.is_digital:
        return _digital_failure(quantity)

    vrms = to_vrms(quantity)
    if not vrms.ok:
        return vrms

    volts = vrms.unwrap().magnitude
    return Result.success(Quantity.from_number_and_unit(volts * volts / impedance, WATT))


# =============================================================================
# RMS / PEAK / PEAK-PEAK
# =============================================================================


def rms_translate(quantity: Quantity, target: RmsKind) -> Result[Quantity]:
    """
    Перевод между RMS, Peak и Peak-Peak представлениями.

    Единица результата: base_symbol + суффикс target ('Vp', 'Vpp', 'Vrms').
    Пары с NonConvertible и одинаковые пары имеют множитель 1.

    Examples:
        >>> rms_translate(Quantity.from_number_and_unit(1.0, VOLT), RmsKind.PEAK_VALUE).value.magnitude
        1.4142135623730951
    """
    if quantity.unit.is_digital:
        return _digital_failure(quantity)

    parsed = parse_unit(quantity.unit.base_symbol + suffix_for_rms_kind(target))
    if not parsed.ok:
        return Result.failure(parsed.failure_reason, parsed.details)

    ratio = rms_ratio(quantity.unit.rms_kind, target)
    return Result.success(
        Quantity.from_number_and_unit(
            quantity.magnitude * ratio,
            parsed.unwrap(),
            clamp_to_non_negative=quantity.clamp_to_non_negative,
        )
    )
