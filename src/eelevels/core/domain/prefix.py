"""
Prefix — Таблица SI-префиксов

Фиксированный каталог десятичных множителей (yotta … yocto) с шагом
экспоненты 3, плюс нулевой префикс Unity с пустым символом.

Таблица строится один раз при импорте и далее не изменяется:
- kilo представлен двумя символами ("k" и "K")
- micro представлен двумя символами ("μ" и "u")
- поиск по экспоненте возвращает первый префикс в порядке таблицы
"""

from typing import Final, Optional

from pydantic import BaseModel, Field, field_validator


# =============================================================================
# ГРАНИЦЫ ЭКСПОНЕНТЫ
# =============================================================================

# Максимальная по модулю экспонента (yotta / yocto)
MAX_PREFIX_EXPONENT: Final[int] = 24

# Шаг между соседними префиксами
PREFIX_EXPONENT_STEP: Final[int] = 3


# =============================================================================
# PREFIX MODEL
# =============================================================================


class Prefix(BaseModel):
    """
    SI-префикс: имя, односимвольный символ и десятичная экспонента.

    Immutable модель (frozen=True). Равенство определяется по имени,
    поэтому "k" и "K" считаются одним и тем же префиксом.
    """

    name: str = Field(..., description="Имя префикса (например, 'kilo')")
    symbol: str = Field(..., max_length=1, description="Символ префикса ('' для Unity)")
    exponent: int = Field(
        ..., ge=-MAX_PREFIX_EXPONENT, le=MAX_PREFIX_EXPONENT, description="Экспонента 10^n"
    )

    model_config = {"frozen": True}

    @field_validator("exponent")
    @classmethod
    def validate_exponent_step(cls, v: int) -> int:
        """Экспонента должна быть кратна шагу 3."""
        if v % PREFIX_EXPONENT_STEP != 0:
            raise ValueError(f"exponent {v} is not a multiple of {PREFIX_EXPONENT_STEP}")
        return v

    @property
    def decimal(self) -> float:
        """
        Десятичный множитель 10^exponent.

        Отрицательные экспоненты считаются через 1 / 10^|n|, чтобы
        0.001 получалось точно так же, как при ручной записи.
        """
        dec = 10.0 ** abs(self.exponent)
        return dec if self.exponent >= 0 else 1.0 / dec

    @property
    def is_unity(self) -> bool:
        return self.exponent == 0

    def apply(self, magnitude: float) -> float:
        """
        Перевод величины, выраженной с этим префиксом, в единицы Unity.

        Для отрицательных экспонент используется деление, а не умножение
        на decimal: 10 / 1000 даёт ровно 0.01.
        """
        if self.exponent >= 0:
            return magnitude * 10.0 ** self.exponent
        return magnitude / 10.0 ** -self.exponent

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Prefix):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __str__(self) -> str:
        return self.symbol


# =============================================================================
# ТАБЛИЦА ПРЕФИКСОВ
# =============================================================================

UNITY: Final[Prefix] = Prefix(name="unity", symbol="", exponent=0)

PREFIXES: Final[tuple[Prefix, ...]] = (
    Prefix(name="yotta", symbol="Y", exponent=24),
    Prefix(name="zetta", symbol="Z", exponent=21),
    Prefix(name="exa", symbol="E", exponent=18),
    Prefix(name="peta", symbol="P", exponent=15),
    Prefix(name="tera", symbol="T", exponent=12),
    Prefix(name="giga", symbol="G", exponent=9),
    Prefix(name="mega", symbol="M", exponent=6),
    Prefix(name="kilo", symbol="k", exponent=3),
    Prefix(name="kilo", symbol="K", exponent=3),
    UNITY,
    Prefix(name="milli", symbol="m", exponent=-3),
    Prefix(name="micro", symbol="μ", exponent=-6),
    Prefix(name="micro", symbol="u", exponent=-6),
    Prefix(name="nano", symbol="n", exponent=-9),
    Prefix(name="pico", symbol="p", exponent=-12),
    Prefix(name="femto", symbol="f", exponent=-15),
    Prefix(name="atto", symbol="a", exponent=-18),
    Prefix(name="zepto", symbol="z", exponent=-21),
    Prefix(name="yocto", symbol="y", exponent=-24),
)

_BY_SYMBOL: Final[dict[str, Prefix]] = {p.symbol: p for p in PREFIXES}


# =============================================================================
# ПОИСК
# =============================================================================


def prefix_for_symbol(symbol: str) -> Optional[Prefix]:
    """
    Префикс по точному символу.

    Args:
        symbol: Символ префикса ("k", "μ", "" и т.д.)

    Returns:
        Prefix или None, если символ не является префиксом
    """
    return _BY_SYMBOL.get(symbol)


def exponent_for_symbol(symbol: str) -> int:
    """
    Экспонента префикса по символу.

    ВАЖНО: неизвестный символ даёт 0, что неотличимо от Unity.

    Examples:
        >>> exponent_for_symbol("k")
        3
        >>> exponent_for_symbol("x")
        0
    """
    prefix = prefix_for_symbol(symbol)
    return prefix.exponent if prefix is not None else 0


def prefix_for_exponent(exponent: int) -> Optional[Prefix]:
    """
    Первый префикс таблицы с точно такой экспонентой (без интерполяции).

    Examples:
        >>> prefix_for_exponent(3).symbol
        'k'
        >>> prefix_for_exponent(4) is None
        True
    """
    for prefix in PREFIXES:
        if prefix.exponent == exponent:
            return prefix
    return None
