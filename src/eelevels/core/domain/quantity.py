"""
Quantity — Величина с единицей измерения

Immutable Pydantic модель пары (magnitude, unit).

ИНВАРИАНТЫ:
1. magnitude всегда выражена относительно единицы с множителем Unity:
   множитель, переданный при создании, сразу переносится в magnitude
2. magnitude всегда удовлетворяет правилу ограничения домена (cap_magnitude)
3. Экземпляры не изменяются; with_magnitude() возвращает новый экземпляр

Создание через фабрики:
- Quantity.from_number_and_unit(10, MILLIVOLT)  → 0.01 V
- Quantity.from_text("10 mV")                   → Result[Quantity]
- Quantity.from_text("10mV", hint="mV")         → Result[Quantity]
"""

import logging
import math
from typing import Any, Optional, Union

from pydantic import BaseModel, Field, model_validator

from eelevels.core.domain.formatting import FormatOptions, format_magnitude
from eelevels.core.domain.prefix import UNITY
from eelevels.core.domain.result import FailureReason, Result
from eelevels.core.domain.unit import (
    UnitDescriptor,
    UnitDomain,
    UnitKind,
    parse_unit,
)
from eelevels.core.math.numerical_safeguards import clamp, parse_decimal

logger = logging.getLogger(__name__)

UnitHint = Union[UnitDescriptor, str, None]


# =============================================================================
# ОГРАНИЧЕНИЕ ДОМЕНА
# =============================================================================


def cap_magnitude(
    magnitude: float, unit: UnitDescriptor, clamp_to_non_negative: bool = False
) -> float:
    """
    Ограничение magnitude по домену единицы.

    Приоритет правил:
    1. Digital + Linear (FS)        → [0, 1]
    2. Digital + Logarithmic (dBFS) → (-inf, 0]
    3. Percentage (%, %FS)          → [0, 100]
    4. clamp_to_non_negative        → [0, +inf)
    5. иначе без ограничений

    Examples:
        >>> cap_magnitude(5.0, DBFS)
        0.0
        >>> cap_magnitude(1.5, FULL_SCALE)
        1.0
    """
    if unit.domain == UnitDomain.DIGITAL and unit.kind == UnitKind.LINEAR:
        return clamp(magnitude, 0.0, 1.0)
    if unit.domain == UnitDomain.DIGITAL and unit.kind == UnitKind.LOGARITHMIC:
        return clamp(magnitude, None, 0.0)
    if unit.kind == UnitKind.PERCENTAGE:
        return clamp(magnitude, 0.0, 100.0)
    if clamp_to_non_negative:
        return clamp(magnitude, 0.0, None)
    return magnitude


# =============================================================================
# QUANTITY MODEL
# =============================================================================


class Quantity(BaseModel):
    """
    Величина с единицей измерения.

    Сравнение:
    - == : равные magnitude и равные единицы (по base_symbol)
    - <, >, <=, >= : только для совпадающих base_symbol, иначе False
    Арифметика:
    - add / subtract → Result (UNIT_MISMATCH при разных единицах)
    - +, - → Quantity или None
    - * на число → Quantity
    """

    magnitude: float = Field(..., description="Значение в единицах Unity")
    unit: UnitDescriptor = Field(..., description="Единица (всегда с множителем Unity)")
    clamp_to_non_negative: bool = Field(False, description="Отсекать отрицательные значения")
    absolute_only: bool = Field(False, description="Маркер: величина только абсолютная")

    model_config = {"frozen": True}

    @model_validator(mode="before")
    @classmethod
    def normalize_and_cap(cls, data: Any) -> Any:
        """
        Перенос множителя единицы в magnitude и ограничение домена.

        Выполняется до валидации полей, поэтому модель никогда не
        существует в ненормализованном состоянии.
        """
        if not isinstance(data, dict):
            return data

        unit = data.get("unit")
        magnitude = data.get("magnitude")
        if isinstance(unit, dict):
            unit = UnitDescriptor.model_validate(unit)
        if not isinstance(unit, UnitDescriptor):
            return data
        if isinstance(magnitude, bool) or not isinstance(magnitude, (int, float)):
            return data

        magnitude = float(magnitude)
        if not unit.is_unity_multiplier:
            magnitude = unit.multiplier.apply(magnitude)
            unit = unit.with_multiplier(UNITY)

        capped = cap_magnitude(magnitude, unit, bool(data.get("clamp_to_non_negative", False)))
        return {**data, "magnitude": capped, "unit": unit}

    # -------------------------------------------------------------------------
    # Фабрики
    # -------------------------------------------------------------------------

    @classmethod
    def from_number_and_unit(
        cls,
        magnitude: float,
        unit: UnitDescriptor,
        clamp_to_non_negative: bool = False,
    ) -> "Quantity":
        """
        Величина из числа и дескриптора. Всегда успешна.

        Examples:
            >>> Quantity.from_number_and_unit(10, MILLIVOLT).magnitude
            0.01
        """
        return cls(magnitude=magnitude, unit=unit, clamp_to_non_negative=clamp_to_non_negative)

    @classmethod
    def from_number_and_unit_text(cls, magnitude: float, unit_text: str) -> Result["Quantity"]:
        """Величина из числа и строки единицы ('mVrms', 'kHz')."""
        parsed = parse_unit(unit_text)
        if not parsed.ok:
            return Result.failure(parsed.failure_reason, parsed.details)
        return Result.success(cls.from_number_and_unit(magnitude, parsed.unwrap()))

    @classmethod
    def from_text(
        cls,
        text: Optional[str],
        hint: UnitHint = None,
        allow_negatives: bool = True,
    ) -> Result["Quantity"]:
        """
        Разбор строки значения.

        Поддерживаемые формы:
        - "<number>"        : требуется hint
        - "<number> <unit>" : ровно один пробел, обе части разбираются отдельно
        - "<number><unit>"  : текст hint удаляется из строки, остаток разбирается как число

        Удаление текста hint чисто текстовое (регистр и пробелы важны);
        расхождение hint и фактической единицы не является ошибкой и
        только пишется в debug-лог.

        Args:
            text: Строка значения ("10 mV", "-3.5dBu", "0.5")
            hint: Ожидаемая единица (UnitDescriptor или строка единицы)
            allow_negatives: Разрешить ведущий знак у числа

        Returns:
            Result[Quantity]
        """
        if text is None or not text.strip():
            return Result.failure(FailureReason.EMPTY_INPUT, "value text is empty")
        value_text = text.strip()

        hint_unit: Optional[UnitDescriptor] = None
        hint_text = ""
        if isinstance(hint, UnitDescriptor):
            hint_unit = hint
            hint_text = hint.symbol
        elif isinstance(hint, str) and hint.strip():
            parsed_hint = parse_unit(hint)
            if not parsed_hint.ok:
                return Result.failure(parsed_hint.failure_reason, parsed_hint.details)
            hint_unit = parsed_hint.unwrap()
            hint_text = hint.strip()

        # Только число
        number = parse_decimal(value_text, allow_sign=allow_negatives)
        if number is not None:
            if hint_unit is None:
                logger.debug("Failed parsing %r: bare number without unit hint", value_text)
                return Result.failure(
                    FailureReason.MISSING_UNIT_HINT, f"{value_text!r} has no unit and no hint"
                )
            return Result.success(cls.from_number_and_unit(number, hint_unit))

        # "<number> <unit>"
        if value_text.count(" ") == 1:
            number_text, unit_text = value_text.split(" ")
            number = parse_decimal(number_text, allow_sign=allow_negatives)
            if number is None:
                return Result.failure(
                    FailureReason.MALFORMED_NUMBER, f"{number_text!r} is not a number"
                )
            parsed = parse_unit(unit_text)
            if not parsed.ok:
                return Result.failure(parsed.failure_reason, parsed.details)
            unit = parsed.unwrap()
            if hint_unit is not None and unit != hint_unit:
                logger.debug("Unit mismatch for %r and given %s", value_text, hint_unit)
            return Result.success(cls.from_number_and_unit(number, unit))

        # "<number><unit>" с подсказкой
        if hint_unit is None:
            return Result.failure(
                FailureReason.MISSING_UNIT_HINT,
                f"cannot separate number from unit in {value_text!r} without a hint",
            )
        remainder = value_text.replace(hint_text, "")
        number = parse_decimal(remainder, allow_sign=allow_negatives)
        if number is None:
            logger.debug("Unit mismatch for %r and given %s", value_text, hint_text)
            return Result.failure(FailureReason.MALFORMED_NUMBER, f"{remainder!r} is not a number")
        return Result.success(cls.from_number_and_unit(number, hint_unit))

    # -------------------------------------------------------------------------
    # Изменение (новый экземпляр)
    # -------------------------------------------------------------------------

    def with_magnitude(self, magnitude: float) -> "Quantity":
        """Та же единица и флаги, новое значение (с повторным ограничением)."""
        return Quantity(
            magnitude=magnitude,
            unit=self.unit,
            clamp_to_non_negative=self.clamp_to_non_negative,
            absolute_only=self.absolute_only,
        )

    # -------------------------------------------------------------------------
    # Свойства
    # -------------------------------------------------------------------------

    @property
    def is_analog(self) -> bool:
        return self.unit.is_analog

    @property
    def is_log(self) -> bool:
        return self.unit.is_log

    @property
    def is_negative_infinite_log_level(self) -> bool:
        """True для логарифмического уровня -inf (например, dBu от 0 V)."""
        return self.is_log and self.magnitude == -math.inf

    @property
    def raw_text(self) -> str:
        """Неформатированное представление: '<magnitude> <symbol>'."""
        return f"{self.magnitude} {self.unit}"

    def formatted(self, decimal_places: int = 2, optional_decimals: bool = False) -> str:
        return format_magnitude(
            self.magnitude,
            self.unit,
            FormatOptions(decimal_places=decimal_places, optional_decimals=optional_decimals),
        )

    def to_contract(self) -> dict[str, Any]:
        """
        Сериализация в JSON-контракт quantity.

        Raises:
            ValueError: Если magnitude NaN/Inf (не представимо в JSON)
        """
        if not math.isfinite(self.magnitude):
            raise ValueError(f"magnitude must be finite for a contract, got {self.magnitude}")
        return {
            "schema_version": "1",
            "magnitude": self.magnitude,
            "unit": self.unit.qualified_symbol,
            "kind": self.unit.kind.value,
            "domain": self.unit.domain.value,
            "rms_kind": self.unit.rms_kind.value,
            "clamp_to_non_negative": self.clamp_to_non_negative,
            "absolute_only": self.absolute_only,
        }

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def add(self, other: "Quantity") -> Result["Quantity"]:
        if self.unit != other.unit:
            return Result.failure(
                FailureReason.UNIT_MISMATCH, f"cannot add {other.unit} to {self.unit}"
            )
        return Result.success(self.with_magnitude(self.magnitude + other.magnitude))

    def subtract(self, other: "Quantity") -> Result["Quantity"]:
        if self.unit != other.unit:
            return Result.failure(
                FailureReason.UNIT_MISMATCH, f"cannot subtract {other.unit} from {self.unit}"
            )
        return Result.success(self.with_magnitude(self.magnitude - other.magnitude))

    def scale(self, factor: float) -> "Quantity":
        return self.with_magnitude(self.magnitude * factor)

    def __add__(self, other: Optional["Quantity"]) -> Optional["Quantity"]:
        if other is None:
            return None
        if not isinstance(other, Quantity):
            return NotImplemented
        return self.add(other).value_or_none()

    def __sub__(self, other: Optional["Quantity"]) -> Optional["Quantity"]:
        if other is None:
            return None
        if not isinstance(other, Quantity):
            return NotImplemented
        return self.subtract(other).value_or_none()

    def __mul__(self, factor: float) -> "Quantity":
        if isinstance(factor, bool) or not isinstance(factor, (int, float)):
            return NotImplemented
        return self.scale(factor)

    __rmul__ = __mul__

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        return self.magnitude == other.magnitude and self.unit == other.unit

    def __hash__(self) -> int:
        return hash((self.magnitude, self.unit))

    def _comparable(self, other: object) -> bool:
        return isinstance(other, Quantity) and self.unit.base_symbol == other.unit.base_symbol

    def __lt__(self, other: "Quantity") -> bool:
        return self._comparable(other) and self.magnitude < other.magnitude

    def __gt__(self, other: "Quantity") -> bool:
        return self._comparable(other) and self.magnitude > other.magnitude

    def __le__(self, other: "Quantity") -> bool:
        return self._comparable(other) and self.magnitude <= other.magnitude

    def __ge__(self, other: "Quantity") -> bool:
        return self._comparable(other) and self.magnitude >= other.magnitude

    def __str__(self) -> str:
        return self.formatted()
