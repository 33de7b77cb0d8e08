"""
Unit — Каталог единиц измерения и парсер строк единиц

Каталог поддерживаемых единиц (V, mV, A, mA, W, Hz, s, ms, %, dB, dBV,
dBm, dBu, FS, %FS, dBFS) и парсер произвольной строки единицы вида:

    [prefixChar]<baseSymbol>[rmsSuffix]

Каталог неизменяем: парсинг всегда возвращает НОВЫЙ дескриптор
(model_copy), записи каталога никогда не модифицируются.

Равенство дескрипторов определяется ТОЛЬКО по base_symbol:
"V" и "mV" равны, множитель и rms_kind не участвуют в сравнении.
Коллекции, использующие UnitDescriptor как ключ, склеивают разные масштабы.
"""

import logging
from enum import Enum
from typing import Final, Optional

from pydantic import BaseModel, Field

from eelevels.core.domain.prefix import UNITY, Prefix, prefix_for_symbol
from eelevels.core.domain.result import FailureReason, Result

logger = logging.getLogger(__name__)


# =============================================================================
# ENUMS
# =============================================================================


class UnitKind(str, Enum):
    """Физическая природа единицы"""

    LINEAR = "Linear"
    VOLTAGE = "Voltage"
    CURRENT = "Current"
    POWER = "Power"
    LOGARITHMIC = "Logarithmic"
    PERCENTAGE = "Percentage"
    FREQUENCY = "Frequency"
    TIME = "Time"


class UnitDomain(str, Enum):
    """Домен единицы; определяет допустимые конверсии"""

    ANALOG = "Analog"
    DIGITAL = "Digital"
    TIME = "Time"
    FREQUENCY = "Frequency"
    NONSPECIFIED = "Nonspecified"


class RmsKind(str, Enum):
    """Представление величины осциллирующего сигнала"""

    NON_CONVERTIBLE = "NonConvertible"
    RMS_VALUE = "RmsValue"
    PEAK_VALUE = "PeakValue"
    PEAK_PEAK_VALUE = "PeakPeakValue"


# =============================================================================
# RMS-СУФФИКСЫ
# =============================================================================

RMS_SUFFIX: Final[str] = "rms"
PEAK_PEAK_SUFFIX: Final[str] = "pp"
PEAK_SUFFIX: Final[str] = "p"

# Порядок проверки важен: "pp" оканчивается на "p"
_SUFFIX_PRIORITY: Final[tuple[tuple[str, RmsKind], ...]] = (
    (RMS_SUFFIX, RmsKind.RMS_VALUE),
    (PEAK_PEAK_SUFFIX, RmsKind.PEAK_PEAK_VALUE),
    (PEAK_SUFFIX, RmsKind.PEAK_VALUE),
)


def suffix_for_rms_kind(kind: RmsKind) -> str:
    """
    Текст суффикса для представления.

    Examples:
        >>> suffix_for_rms_kind(RmsKind.PEAK_VALUE)
        'p'
        >>> suffix_for_rms_kind(RmsKind.NON_CONVERTIBLE)
        ''
    """
    for suffix, suffix_kind in _SUFFIX_PRIORITY:
        if suffix_kind == kind:
            return suffix
    return ""


# =============================================================================
# UNIT DESCRIPTOR
# =============================================================================


class UnitDescriptor(BaseModel):
    """
    Описание единицы измерения.

    Immutable модель (frozen=True). Изменения (множитель, rms_kind)
    выполняются только через with_* методы, возвращающие новый экземпляр.
    """

    base_symbol: str = Field(..., min_length=1, description="Базовый символ ('V', 'dBFS')")
    kind: UnitKind = Field(..., description="Природа единицы")
    domain: UnitDomain = Field(..., description="Домен (Analog/Digital/...)")
    rms_kind: RmsKind = Field(..., description="RMS / Peak / Peak-Peak представление")
    supports_multipliers: bool = Field(True, description="Допускает ли SI-префиксы")
    multiplier: Prefix = Field(UNITY, description="SI-множитель")

    model_config = {"frozen": True}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UnitDescriptor):
            return NotImplemented
        return self.base_symbol == other.base_symbol

    def __hash__(self) -> int:
        return hash(self.base_symbol)

    def __str__(self) -> str:
        return self.symbol

    @property
    def symbol(self) -> str:
        """Символ с префиксом множителя: 'mV', 'kHz', 'dBu'"""
        return self.multiplier.symbol + self.base_symbol

    @property
    def qualified_symbol(self) -> str:
        """Базовый символ с RMS-суффиксом: 'Vrms', 'Vp', 'Vpp'"""
        return self.base_symbol + suffix_for_rms_kind(self.rms_kind)

    @property
    def is_unity_multiplier(self) -> bool:
        return self.multiplier.exponent == 0

    @property
    def is_analog(self) -> bool:
        return self.domain == UnitDomain.ANALOG

    @property
    def is_digital(self) -> bool:
        return self.domain == UnitDomain.DIGITAL

    @property
    def is_log(self) -> bool:
        return self.kind == UnitKind.LOGARITHMIC

    def with_multiplier(self, multiplier: Prefix) -> "UnitDescriptor":
        return self.model_copy(update={"multiplier": multiplier})

    def with_rms_kind(self, rms_kind: RmsKind) -> "UnitDescriptor":
        return self.model_copy(update={"rms_kind": rms_kind})


# =============================================================================
# КАТАЛОГ
# =============================================================================


def _define(
    symbol: str,
    kind: UnitKind,
    domain: UnitDomain,
    rms_kind: RmsKind,
    supports_multipliers: bool = True,
) -> UnitDescriptor:
    """
    Запись каталога из символа.

    Ведущий символ-префикс отделяется в множитель: 'mV' → base 'V' + milli.
    """
    multiplier = UNITY
    base_symbol = symbol
    if len(symbol) > 1:
        prefix = prefix_for_symbol(symbol[0])
        if prefix is not None:
            multiplier = prefix
            base_symbol = symbol[1:]
    return UnitDescriptor(
        base_symbol=base_symbol,
        kind=kind,
        domain=domain,
        rms_kind=rms_kind,
        supports_multipliers=supports_multipliers,
        multiplier=multiplier,
    )


FULL_SCALE: Final[UnitDescriptor] = _define(
    "FS", UnitKind.LINEAR, UnitDomain.DIGITAL, RmsKind.NON_CONVERTIBLE
)
FULL_SCALE_PERCENT: Final[UnitDescriptor] = _define(
    "%FS", UnitKind.PERCENTAGE, UnitDomain.DIGITAL, RmsKind.NON_CONVERTIBLE, False
)
DBFS: Final[UnitDescriptor] = _define(
    "dBFS", UnitKind.LOGARITHMIC, UnitDomain.DIGITAL, RmsKind.NON_CONVERTIBLE, False
)

VOLT: Final[UnitDescriptor] = _define(
    "V", UnitKind.VOLTAGE, UnitDomain.ANALOG, RmsKind.RMS_VALUE
)
MILLIVOLT: Final[UnitDescriptor] = _define(
    "mV", UnitKind.VOLTAGE, UnitDomain.ANALOG, RmsKind.RMS_VALUE
)
AMPERE: Final[UnitDescriptor] = _define(
    "A", UnitKind.CURRENT, UnitDomain.ANALOG, RmsKind.RMS_VALUE
)
MILLIAMPERE: Final[UnitDescriptor] = _define(
    "mA", UnitKind.CURRENT, UnitDomain.ANALOG, RmsKind.RMS_VALUE
)
WATT: Final[UnitDescriptor] = _define(
    "W", UnitKind.POWER, UnitDomain.ANALOG, RmsKind.RMS_VALUE
)

HERTZ: Final[UnitDescriptor] = _define(
    "Hz", UnitKind.FREQUENCY, UnitDomain.FREQUENCY, RmsKind.NON_CONVERTIBLE
)

SECOND: Final[UnitDescriptor] = _define(
    "s", UnitKind.TIME, UnitDomain.TIME, RmsKind.NON_CONVERTIBLE
)
MILLISECOND: Final[UnitDescriptor] = _define(
    "ms", UnitKind.TIME, UnitDomain.TIME, RmsKind.NON_CONVERTIBLE
)

PERCENT: Final[UnitDescriptor] = _define(
    "%", UnitKind.PERCENTAGE, UnitDomain.NONSPECIFIED, RmsKind.NON_CONVERTIBLE, False
)

DECIBEL: Final[UnitDescriptor] = _define(
    "dB", UnitKind.LOGARITHMIC, UnitDomain.NONSPECIFIED, RmsKind.NON_CONVERTIBLE, False
)
DBV: Final[UnitDescriptor] = _define(
    "dBV", UnitKind.LOGARITHMIC, UnitDomain.ANALOG, RmsKind.NON_CONVERTIBLE, False
)
DBU: Final[UnitDescriptor] = _define(
    "dBu", UnitKind.LOGARITHMIC, UnitDomain.ANALOG, RmsKind.NON_CONVERTIBLE, False
)
DBM: Final[UnitDescriptor] = _define(
    "dBm", UnitKind.LOGARITHMIC, UnitDomain.ANALOG, RmsKind.NON_CONVERTIBLE, False
)

# Порядок важен: поиск по base_symbol возвращает первую запись (V раньше mV)
SUPPORTED_UNITS: Final[tuple[UnitDescriptor, ...]] = (
    FULL_SCALE,
    FULL_SCALE_PERCENT,
    DBFS,
    VOLT,
    MILLIVOLT,
    AMPERE,
    MILLIAMPERE,
    WATT,
    HERTZ,
    SECOND,
    MILLISECOND,
    PERCENT,
    DECIBEL,
    DBV,
    DBU,
    DBM,
)


def lookup_base_symbol(base_symbol: str) -> Optional[UnitDescriptor]:
    """Первая запись каталога с точно таким base_symbol."""
    for unit in SUPPORTED_UNITS:
        if unit.base_symbol == base_symbol:
            return unit
    return None


# =============================================================================
# ПАРСЕР
# =============================================================================


def parse_unit(text: str) -> Result[UnitDescriptor]:
    """
    Разбор строки единицы в дескриптор.

    Алгоритм:
    1. trim; пустая строка → EMPTY_INPUT
    2. отрезается RMS-суффикс (приоритет: rms, pp, p)
    3. первый символ проверяется как SI-префикс и временно отрезается
    4. точный поиск base_symbol в каталоге; промах → UNKNOWN_UNIT
    5. префикс игнорируется, если единица не поддерживает множители;
       rms_kind каталога RmsValue заменяется найденным суффиксом
       (без суффикса: NonConvertible), иначе суффикс игнорируется
    6. возвращается новый дескриптор

    Args:
        text: Строка единицы без числового значения ('mVrms', 'kHz', 'dBFS')

    Returns:
        Result с новым UnitDescriptor или причиной отказа

    Examples:
        >>> parse_unit("Vpp").value.rms_kind
        <RmsKind.PEAK_PEAK_VALUE: 'PeakPeakValue'>
    """
    unit_text = (text or "").strip()
    if not unit_text:
        return Result.failure(FailureReason.EMPTY_INPUT, "unit text is empty")

    detected_rms = RmsKind.NON_CONVERTIBLE
    for suffix, suffix_kind in _SUFFIX_PRIORITY:
        if unit_text.endswith(suffix):
            detected_rms = suffix_kind
            unit_text = unit_text[: -len(suffix)]
            break

    if not unit_text:
        logger.debug("Unit text %r is a bare rms suffix", text)
        return Result.failure(FailureReason.UNKNOWN_UNIT, f"unknown unit {text!r}")

    detected_prefix = prefix_for_symbol(unit_text[0])
    if detected_prefix is not None:
        unit_text = unit_text[1:]

    candidate = lookup_base_symbol(unit_text)
    if candidate is None:
        logger.debug("Unit text %r does not match any supported unit", text)
        return Result.failure(FailureReason.UNKNOWN_UNIT, f"unknown unit {text!r}")

    multiplier = UNITY
    if detected_prefix is not None and candidate.supports_multipliers:
        multiplier = detected_prefix

    rms_kind = candidate.rms_kind
    if candidate.rms_kind == RmsKind.RMS_VALUE:
        rms_kind = detected_rms

    return Result.success(
        candidate.model_copy(update={"multiplier": multiplier, "rms_kind": rms_kind})
    )
