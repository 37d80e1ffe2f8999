"""
Sanity-тест для модуля Units

Проверяет:
1. Приведение входов к Decimal (float через str)
2. Отказ для NaN/Inf, нечисловых строк и bool
3. Конверсия basis points → дробь
"""

from decimal import Decimal

import pytest

from src.core.domain.units import BPS_PER_UNIT, bps_to_fraction, to_decimal


class TestToDecimal:
    """Тесты для to_decimal"""

    def test_decimal_unchanged(self) -> None:
        value = Decimal("47.855")
        assert to_decimal(value) is value

    def test_int_and_str(self) -> None:
        assert to_decimal(10) == Decimal(10)
        assert to_decimal("1.05") == Decimal("1.05")

    def test_float_via_str(self) -> None:
        """Float не тащит двоичное приближение"""
        assert to_decimal(0.5) == Decimal("0.5")
        assert to_decimal(1.01) == Decimal("1.01")
        assert to_decimal(1.01) != Decimal(1.01)

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), "NaN", "-Infinity", Decimal("sNaN")])
    def test_non_finite_rejected(self, value) -> None:
        with pytest.raises(ValueError):
            to_decimal(value)

    @pytest.mark.parametrize("value", ["abc", "", "1,5"])
    def test_unparseable_string_rejected(self, value) -> None:
        with pytest.raises(ValueError):
            to_decimal(value)

    @pytest.mark.parametrize("value", [True, False, None, [1], object()])
    def test_unsupported_type_rejected(self, value) -> None:
        with pytest.raises(TypeError):
            to_decimal(value)


class TestBasisPoints:
    """Тесты конверсий basis points"""

    def test_bps_per_unit(self) -> None:
        assert BPS_PER_UNIT == 10000

    def test_bps_to_fraction(self) -> None:
        assert bps_to_fraction(100) == Decimal("0.01")
        assert bps_to_fraction("47.855") == Decimal("0.0047855")
        assert bps_to_fraction(0) == 0

    def test_exact_fraction(self) -> None:
        """Decimal конверсия без двоичной погрешности"""
        assert bps_to_fraction(0.1) == Decimal("0.00001")
        assert bps_to_fraction("150") * BPS_PER_UNIT == 150
