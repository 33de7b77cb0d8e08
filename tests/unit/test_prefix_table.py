"""
Тесты для таблицы SI-префиксов

Проверяет:
1. Состав таблицы (19 записей, Unity, дублирующиеся символы)
2. Поиск по символу и по экспоненте
3. Десятичные множители
4. Валидацию и неизменяемость модели Prefix
"""

import pytest
from pydantic import ValidationError

from eelevels.core.domain.prefix import (
    PREFIXES,
    UNITY,
    Prefix,
    exponent_for_symbol,
    prefix_for_exponent,
    prefix_for_symbol,
)


class TestPrefixTable:
    """Тесты состава таблицы"""

    def test_table_has_19_entries(self) -> None:
        """19 префиксов, включая Unity"""
        assert len(PREFIXES) == 19
        assert UNITY in PREFIXES

    def test_unity_has_empty_symbol(self) -> None:
        """Unity: пустой символ, экспонента 0"""
        assert UNITY.name == "unity"
        assert UNITY.symbol == ""
        assert UNITY.exponent == 0
        assert UNITY.decimal == 1.0

    def test_exponents_step_by_three(self) -> None:
        """Все экспоненты кратны 3 и лежат в [-24, 24]"""
        for prefix in PREFIXES:
            assert prefix.exponent % 3 == 0
            assert -24 <= prefix.exponent <= 24

    def test_kilo_and_micro_have_two_symbols(self) -> None:
        """kilo: 'k' и 'K'; micro: 'μ' и 'u'"""
        assert exponent_for_symbol("k") == exponent_for_symbol("K") == 3
        assert exponent_for_symbol("μ") == exponent_for_symbol("u") == -6


class TestPrefixLookup:
    """Тесты поиска префиксов"""

    def test_exponent_for_known_symbol(self) -> None:
        assert exponent_for_symbol("Y") == 24
        assert exponent_for_symbol("m") == -3
        assert exponent_for_symbol("y") == -24

    def test_exponent_for_unknown_symbol_is_zero(self) -> None:
        """Неизвестный символ даёт 0 (неотличимо от Unity)"""
        assert exponent_for_symbol("x") == 0
        assert exponent_for_symbol("") == 0

    def test_prefix_for_exponent_returns_first_match(self) -> None:
        """Для 3 и -6 возвращается первый символ в порядке таблицы"""
        assert prefix_for_exponent(3).symbol == "k"
        assert prefix_for_exponent(-6).symbol == "μ"
        assert prefix_for_exponent(0) is UNITY

    def test_prefix_for_exponent_exact_only(self) -> None:
        """Без интерполяции: 4 и 27 не найдены"""
        assert prefix_for_exponent(4) is None
        assert prefix_for_exponent(27) is None

    def test_prefix_for_symbol(self) -> None:
        assert prefix_for_symbol("G").name == "giga"
        assert prefix_for_symbol("") is UNITY
        assert prefix_for_symbol("V") is None


class TestPrefixModel:
    """Тесты модели Prefix"""

    def test_decimal_values(self) -> None:
        assert prefix_for_symbol("k").decimal == 1000.0
        assert prefix_for_symbol("m").decimal == pytest.approx(0.001)
        assert prefix_for_symbol("n").decimal == pytest.approx(1e-9)

    def test_apply_negative_exponent_is_exact(self) -> None:
        """10 в milli → ровно 0.01"""
        assert prefix_for_symbol("m").apply(10.0) == 0.01
        assert prefix_for_symbol("k").apply(1.5) == 1500.0

    def test_equality_by_name(self) -> None:
        """'k' и 'K': один и тот же префикс"""
        assert prefix_for_symbol("k") == prefix_for_symbol("K")
        assert prefix_for_symbol("k") != prefix_for_symbol("m")

    def test_invalid_exponent_step_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Prefix(name="bogus", symbol="b", exponent=4)

    def test_out_of_range_exponent_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Prefix(name="ronna", symbol="R", exponent=27)

    def test_symbol_longer_than_one_char_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Prefix(name="kilo", symbol="kk", exponent=3)

    def test_prefix_is_frozen(self) -> None:
        with pytest.raises(ValidationError):
            UNITY.exponent = 3  # type: ignore[misc]
