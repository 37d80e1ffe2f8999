"""Тесты для GATE 0: Reference Price Sanity.

Coverage:
- PASS строго внутри (lower_bound, upper_bound)
- Блокировка на границах (границы исключительные)
- Невалидные цены (NaN, Inf, нечисловые строки, None)
- Неположительные цены
- Кастомная конфигурация
"""

from decimal import Decimal

import pytest

from src.gatekeeper.gates.gate_00_reference_price import (
    DEFAULT_LOWER_BOUND,
    DEFAULT_UPPER_BOUND,
    Gate00Config,
    Gate00ReferencePrice,
    is_reference_price_safe,
)


@pytest.fixture
def gate00():
    """Fixture для GATE 0 с default конфигурацией."""
    return Gate00ReferencePrice()


class TestGate00Pass:
    """PASS сценарии."""

    @pytest.mark.parametrize("price", ["1.015", "1.05", "1.09", "1.0999"])
    def test_pass_inside_bounds(self, gate00, price):
        """PASS: цена строго внутри (1.01, 1.10)."""
        result = gate00.evaluate(Decimal(price))

        assert result.entry_allowed is True
        assert result.block_reason == ""
        assert result.reference_price == Decimal(price)

    def test_pass_float_input(self, gate00):
        """Float приводится через str: 1.05 → Decimal('1.05')."""
        result = gate00.evaluate(1.05)

        assert result.entry_allowed is True
        assert result.reference_price == Decimal("1.05")

    def test_details_field_populated(self, gate00):
        """details содержит границы."""
        result = gate00.evaluate("1.05")

        assert result.details.startswith("PASS")
        assert "1.01" in result.details
        assert "1.10" in result.details


class TestGate00Bounds:
    """Блокировка по границам."""

    @pytest.mark.parametrize("price", ["1.01", "1.0", "0.5", "1.0100"])
    def test_block_below_bound(self, gate00, price):
        """BLOCK: цена <= lower_bound."""
        result = gate00.evaluate(price)

        assert result.entry_allowed is False
        assert result.block_reason == "reference_price_below_bound"

    @pytest.mark.parametrize("price", ["1.1", "1.10", "1.5", "100"])
    def test_block_above_bound(self, gate00, price):
        """BLOCK: цена >= upper_bound."""
        result = gate00.evaluate(price)

        assert result.entry_allowed is False
        assert result.block_reason == "reference_price_above_bound"

    def test_float_on_bound_blocked(self, gate00):
        """Float 1.01 ровно на границе (а не 1.0100000000000000088817...)."""
        assert gate00.evaluate(1.01).block_reason == "reference_price_below_bound"
        assert gate00.evaluate(1.1).block_reason == "reference_price_above_bound"


class TestGate00InvalidPrice:
    """Невалидные и неположительные цены."""

    @pytest.mark.parametrize(
        "price",
        [float("nan"), float("inf"), Decimal("NaN"), Decimal("-Infinity"), "abc", "", None],
    )
    def test_block_invalid(self, gate00, price):
        """BLOCK: цена не приводится к конечному Decimal."""
        result = gate00.evaluate(price)

        assert result.entry_allowed is False
        assert result.block_reason == "reference_price_invalid"
        assert result.reference_price is None

    @pytest.mark.parametrize("price", [0, -1, "-1.05"])
    def test_block_non_positive(self, gate00, price):
        """BLOCK: цена <= 0 (раньше проверки границ)."""
        result = gate00.evaluate(price)

        assert result.entry_allowed is False
        assert result.block_reason == "reference_price_non_positive"

    def test_bool_is_invalid(self, gate00):
        """bool не считается числом."""
        assert gate00.evaluate(True).block_reason == "reference_price_invalid"


class TestGate00Config:
    """Конфигурация GATE 0."""

    def test_default_bounds(self):
        config = Gate00Config()

        assert config.lower_bound == DEFAULT_LOWER_BOUND == Decimal("1.01")
        assert config.upper_bound == DEFAULT_UPPER_BOUND == Decimal("1.10")

    def test_custom_bounds(self):
        """Кастомные границы расширяют допустимый диапазон."""
        gate = Gate00ReferencePrice(Gate00Config(lower_bound="0.5", upper_bound="3"))

        assert gate.evaluate("1.0").entry_allowed is True
        assert gate.evaluate("2").entry_allowed is True
        assert gate.evaluate("3").entry_allowed is False

    def test_bounds_coerced_to_decimal(self):
        config = Gate00Config(lower_bound=0.9, upper_bound=1.2)

        assert config.lower_bound == Decimal("0.9")
        assert config.upper_bound == Decimal("1.2")

    @pytest.mark.parametrize("lower, upper", [("1.1", "1.0"), ("1.05", "1.05")])
    def test_invalid_bounds(self, lower, upper):
        with pytest.raises(ValueError):
            Gate00Config(lower_bound=lower, upper_bound=upper)


class TestIsReferencePriceSafe:
    """Хелпер is_reference_price_safe."""

    @pytest.mark.parametrize(
        "price, expected",
        [
            ("1.015", True),
            ("1.09", True),
            ("1.01", False),
            ("1.1", False),
            ("1.10", False),
            ("1.0", False),
            ("0", False),
            ("-1", False),
            (float("nan"), False),
            ("abc", False),
        ],
    )
    def test_default_bounds(self, price, expected):
        assert is_reference_price_safe(price) is expected

    def test_with_config(self):
        config = Gate00Config(lower_bound="0.5", upper_bound="3")
        assert is_reference_price_safe("1.0", config) is True
