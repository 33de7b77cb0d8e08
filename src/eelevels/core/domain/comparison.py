"""
Comparison — Критерии сравнения уровней

Критерий задаёт, как измеренная величина сопоставляется с порогом:
<, ≤, =, >, ≥ или ± (попадание в допуск).

Сравнение величин с разными base_symbol всегда даёт False
(как и операторы Quantity), а не исключение.
"""

from enum import Enum
from typing import Optional

from eelevels.core.domain.quantity import Quantity


class ComparisonCriterion(str, Enum):
    """Критерий сравнения"""

    LESS_THAN = "LessThan"
    LESS_OR_EQUAL = "LessOrEqualsThan"
    EQUAL = "Equals"
    GREATER_THAN = "GreaterThan"
    GREATER_OR_EQUAL = "GreaterOrEqualsThan"
    PLUS_MINUS = "PlusMinus"

    @property
    def symbol(self) -> str:
        """Математический символ критерия."""
        return _SYMBOLS[self]


_SYMBOLS = {
    ComparisonCriterion.LESS_THAN: "<",
    ComparisonCriterion.LESS_OR_EQUAL: "≤",
    ComparisonCriterion.EQUAL: "=",
    ComparisonCriterion.GREATER_THAN: ">",
    ComparisonCriterion.GREATER_OR_EQUAL: "≥",
    ComparisonCriterion.PLUS_MINUS: "±",
}


def satisfies(
    measured: Quantity,
    criterion: ComparisonCriterion,
    reference: Quantity,
    tolerance: Optional[Quantity] = None,
) -> bool:
    """
    Проверка measured <criterion> reference.

    Args:
        measured: Измеренная величина
        criterion: Критерий сравнения
        reference: Пороговая величина
        tolerance: Допуск для PLUS_MINUS (той же единицы)

    Returns:
        True если критерий выполнен; False также для несравнимых единиц

    Raises:
        ValueError: Если для PLUS_MINUS не передан tolerance
    """
    if criterion == ComparisonCriterion.LESS_THAN:
        return measured < reference
    if criterion == ComparisonCriterion.LESS_OR_EQUAL:
        return measured <= reference
    if criterion == ComparisonCriterion.EQUAL:
        return measured == reference
    if criterion == ComparisonCriterion.GREATER_THAN:
        return measured > reference
    if criterion == ComparisonCriterion.GREATER_OR_EQUAL:
        return measured >= reference

    # PLUS_MINUS: |measured - reference| <= tolerance
    if tolerance is None:
        raise ValueError("tolerance is required for the PlusMinus criterion")
    if not (measured.unit == reference.unit == tolerance.unit):
        return False
    return abs(measured.magnitude - reference.magnitude) <= abs(tolerance.magnitude)
