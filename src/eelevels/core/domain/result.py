"""
Result — Единый результат доменных операций

Все операции парсинга, арифметики и конверсии возвращают Result вместо
исключений: либо значение, либо причину отказа из FailureReason.

Исключения зарезервированы для:
- Result.unwrap() на неуспешном результате (QuantityError)
- недостижимых состояний форматтера (FormattingInvariantViolation)
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


# =============================================================================
# ENUMS
# =============================================================================


class FailureReason(str, Enum):
    """Причина отказа доменной операции"""

    EMPTY_INPUT = "empty_input"
    MALFORMED_NUMBER = "malformed_number"
    UNKNOWN_UNIT = "unknown_unit"
    MISSING_UNIT_HINT = "missing_unit_hint"
    UNIT_MISMATCH = "unit_mismatch"
    DIGITAL_DOMAIN = "digital_domain"
    UNSUPPORTED_SOURCE_UNIT = "unsupported_source_unit"
    NON_POSITIVE_IMPEDANCE = "non_positive_impedance"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class QuantityError(Exception):
    """
    Попытка извлечь значение из неуспешного Result.

    Атрибут reason содержит исходную причину отказа.
    """

    def __init__(self, reason: FailureReason, details: str = ""):
        self.reason = reason
        self.details = details
        super().__init__(f"{reason.value}: {details}" if details else reason.value)


class FormattingInvariantViolation(Exception):
    """
    Форматтер вернул строку с неожиданным числом токенов.

    Состояние недостижимо при корректной работе форматтера; не входит
    в обычную таксономию FailureReason.
    """

    pass


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class Result(Generic[T]):
    """Результат операции: value при успехе, failure_reason при отказе."""

    value: Optional[T]
    failure_reason: Optional[FailureReason] = None

    # Детали для диагностики
    details: str = ""

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, reason: FailureReason, details: str = "") -> "Result[T]":
        return cls(value=None, failure_reason=reason, details=details)

    @property
    def ok(self) -> bool:
        return self.failure_reason is None

    def unwrap(self) -> T:
        """
        Значение успешного результата.

        Raises:
            QuantityError: Если результат неуспешный
        """
        if self.failure_reason is not None:
            raise QuantityError(self.failure_reason, self.details)
        return self.value  # type: ignore[return-value]

    def value_or_none(self) -> Optional[T]:
        return self.value if self.ok else None
