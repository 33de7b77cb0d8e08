"""
Тесты для каталога единиц и парсера строк единиц

Проверяет:
1. Состав каталога и разбор символов с префиксом ('mV' → V + milli)
2. Приоритет RMS-суффиксов (rms, pp, p)
3. Игнорирование префикса / суффикса для неподходящих единиц
4. Отказы парсера (пустая строка, неизвестная единица)
5. Неизменяемость каталога при повторном разборе
6. Равенство дескрипторов только по base_symbol
"""

import pytest

from eelevels.core.domain.prefix import UNITY
from eelevels.core.domain.quantity import Quantity
from eelevels.core.domain.result import FailureReason
from eelevels.core.domain.unit import (
    DBFS,
    DBU,
    FULL_SCALE_PERCENT,
    HERTZ,
    MILLISECOND,
    MILLIVOLT,
    SUPPORTED_UNITS,
    VOLT,
    RmsKind,
    UnitDomain,
    UnitKind,
    lookup_base_symbol,
    parse_unit,
    suffix_for_rms_kind,
)


class TestCatalog:
    """Тесты каталога единиц"""

    def test_catalog_size(self) -> None:
        assert len(SUPPORTED_UNITS) == 16

    def test_prefixed_catalog_entries_split_multiplier(self) -> None:
        """'mV' хранится как base 'V' + milli"""
        assert MILLIVOLT.base_symbol == "V"
        assert MILLIVOLT.multiplier.symbol == "m"
        assert MILLISECOND.base_symbol == "s"

    def test_catalog_attributes(self) -> None:
        assert VOLT.kind == UnitKind.VOLTAGE
        assert VOLT.domain == UnitDomain.ANALOG
        assert VOLT.rms_kind == RmsKind.RMS_VALUE
        assert DBFS.is_digital
        assert DBFS.is_log
        assert not DBFS.supports_multipliers
        assert FULL_SCALE_PERCENT.kind == UnitKind.PERCENTAGE

    def test_lookup_returns_first_entry(self) -> None:
        """Поиск 'V' возвращает VOLT с Unity, а не MILLIVOLT"""
        found = lookup_base_symbol("V")
        assert found is VOLT
        assert found.multiplier == UNITY

    def test_lookup_unknown(self) -> None:
        assert lookup_base_symbol("Ohm") is None


class TestParseUnitSuffixes:
    """Тесты RMS-суффиксов"""

    def test_rms_suffix(self) -> None:
        unit = parse_unit("Vrms").unwrap()
        assert unit.base_symbol == "V"
        assert unit.rms_kind == RmsKind.RMS_VALUE

    def test_peak_peak_wins_over_peak(self) -> None:
        """'pp' проверяется раньше 'p'"""
        unit = parse_unit("Vpp").unwrap()
        assert unit.base_symbol == "V"
        assert unit.rms_kind == RmsKind.PEAK_PEAK_VALUE

    def test_peak_suffix(self) -> None:
        unit = parse_unit("Vp").unwrap()
        assert unit.rms_kind == RmsKind.PEAK_VALUE
        assert unit.qualified_symbol == "Vp"

    def test_no_suffix_gives_non_convertible(self) -> None:
        """RMS-единица без суффикса: NonConvertible, каталог не меняется"""
        assert parse_unit("V").unwrap().rms_kind == RmsKind.NON_CONVERTIBLE
        assert parse_unit("mA").unwrap().rms_kind == RmsKind.NON_CONVERTIBLE
        assert parse_unit("W").unwrap().rms_kind == RmsKind.NON_CONVERTIBLE
        assert parse_unit("Hz").unwrap().rms_kind == RmsKind.NON_CONVERTIBLE
        assert VOLT.rms_kind == RmsKind.RMS_VALUE

    def test_suffix_ignored_for_non_convertible_units(self) -> None:
        """dBFS и % не имеют RMS-представления: суффикс игнорируется"""
        unit = parse_unit("dBFSrms").unwrap()
        assert unit.base_symbol == "dBFS"
        assert unit.rms_kind == RmsKind.NON_CONVERTIBLE

    def test_prefix_and_suffix_together(self) -> None:
        unit = parse_unit("mVpp").unwrap()
        assert unit.multiplier.exponent == -3
        assert unit.rms_kind == RmsKind.PEAK_PEAK_VALUE

    def test_suffix_text_for_kind(self) -> None:
        assert suffix_for_rms_kind(RmsKind.RMS_VALUE) == "rms"
        assert suffix_for_rms_kind(RmsKind.PEAK_VALUE) == "p"
        assert suffix_for_rms_kind(RmsKind.PEAK_PEAK_VALUE) == "pp"
        assert suffix_for_rms_kind(RmsKind.NON_CONVERTIBLE) == ""


class TestParseUnitPrefixes:
    """Тесты SI-префиксов в строке единицы"""

    @pytest.mark.parametrize(
        "text,exponent",
        [("kHz", 3), ("KHz", 3), ("MHz", 6), ("uV", -6), ("μV", -6), ("pV", -12), ("ms", -3)],
    )
    def test_prefix_detected(self, text: str, exponent: int) -> None:
        assert parse_unit(text).unwrap().multiplier.exponent == exponent

    def test_prefix_ignored_without_multiplier_support(self) -> None:
        """dBu не поддерживает множители: 'k' игнорируется"""
        unit = parse_unit("kdBu").unwrap()
        assert unit == DBU
        assert unit.multiplier == UNITY

    def test_whitespace_trimmed(self) -> None:
        assert parse_unit("  kHz ").unwrap().symbol == "kHz"


class TestParseUnitFailures:
    """Тесты отказов парсера"""

    @pytest.mark.parametrize("text", ["", "   "])
    def test_empty_input(self, text: str) -> None:
        result = parse_unit(text)
        assert not result.ok
        assert result.failure_reason == FailureReason.EMPTY_INPUT

    @pytest.mark.parametrize("text", ["Ohm", "xyz", "p", "m", "kV/m"])
    def test_unknown_unit(self, text: str) -> None:
        result = parse_unit(text)
        assert not result.ok
        assert result.failure_reason == FailureReason.UNKNOWN_UNIT
        assert result.value is None


class TestCatalogImmutability:
    """Разбор никогда не изменяет записи каталога"""

    def test_parsing_prefixed_variants_does_not_touch_catalog(self) -> None:
        kilo = parse_unit("kV").unwrap()
        milli = parse_unit("mVp").unwrap()

        assert kilo.multiplier.exponent == 3
        assert milli.multiplier.exponent == -3
        assert VOLT.multiplier == UNITY
        assert VOLT.rms_kind == RmsKind.RMS_VALUE
        assert MILLIVOLT.multiplier.exponent == -3

    def test_parse_returns_new_instance(self) -> None:
        assert parse_unit("V").unwrap() is not VOLT


class TestUnitEquality:
    """Равенство только по base_symbol"""

    def test_volt_and_millivolt_equal(self) -> None:
        assert parse_unit("V").unwrap() == parse_unit("mV").unwrap()
        assert VOLT == MILLIVOLT

    def test_rms_kind_ignored_in_equality(self) -> None:
        assert parse_unit("Vpp").unwrap() == parse_unit("Vrms").unwrap()

    def test_sets_coalesce_scales(self) -> None:
        assert len({VOLT, MILLIVOLT, parse_unit("kV").unwrap()}) == 1

    def test_different_base_symbols_differ(self) -> None:
        assert VOLT != HERTZ
        assert parse_unit("dBu").unwrap() != parse_unit("dBV").unwrap()


class TestCatalogRoundTrip:
    """Каждый символ каталога разбирается и печатается обратно"""

    @pytest.mark.parametrize(
        "symbol",
        ["V", "mV", "A", "mA", "W", "Hz", "s", "ms", "%", "dB", "dBV", "dBm", "dBu", "FS", "%FS", "dBFS"],
    )
    def test_parse_and_format(self, symbol: str) -> None:
        unit = parse_unit(symbol).unwrap()
        rendered = str(Quantity.from_number_and_unit(1.0, unit))
        assert unit.base_symbol in rendered
