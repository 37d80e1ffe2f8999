"""
LiquidityLadder — Построение лестницы котировок

Разворачивает решение SpreadCurve в многоуровневую лестницу (slice_count
уровней на каждую сторону) для выставления лимитной ликвидности.
Каждый следующий уровень котируется против симулированного inventory,
как если бы все предыдущие уровни этой стороны уже были исполнены.
Исполнения не происходит: симуляция ведётся на локальном аккумуляторе.

BUY (мейкер тратит B, получает A), q_b = asset_b / n — постоянный:
    spread  = curve(BUY, a'*fair + q_b, b' - q_b)
    price   = fair * (1 - spread/10000)
    emit (BUY, price, q_b)
    a' += q_b / price;  b' -= q_b

SELL (мейкер тратит A, получает B), q_a = asset_a / n — постоянный:
    spread  = curve(SELL, (a' - q_a)*fair, b' + q_a*fair)
    price   = fair * (1 + spread/10000)
    q_b     = q_a * price
    emit (SELL, price, q_b)
    a' -= q_b / price;  b' += q_b

Кривая на стороне SELL опрашивается в точке ПОСЛЕ снятия слайса —
лестница получается с ценами, смещёнными к началу.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. len(ladder) == 2 * slice_count; ровно slice_count BUY и slice_count SELL
2. Лестница отсортирована по limit_price (неубывающе, сортировка стабильна)
3. Исходный Inventory не мутируется
4. slice_count == 0 → пустая лестница
"""

from decimal import Decimal
from typing import NamedTuple, Optional

from src.core.domain.curve_parameters import DEFAULT_CURVE_PARAMETERS, CurveParameters
from src.core.domain.inventory import Inventory
from src.core.domain.ladder import LadderSlice, Side, WireSlice
from src.core.domain.units import DecimalLike, bps_to_fraction, to_decimal
from src.core.math.spread_curve import (
    InvalidParameter,
    compute_spread_bp,
    validate_curve_parameters,
)


# =============================================================================
# ТИПЫ
# =============================================================================


class SimulatedInventory(NamedTuple):
    """Симулированный inventory, накапливаемый по уровням одной стороны."""

    asset_a: Decimal
    asset_b: Decimal


# =============================================================================
# ШАГИ АККУМУЛЯТОРА
# =============================================================================


def advance_buy_state(
    state: SimulatedInventory, quantity_b: Decimal, limit_price: Decimal
) -> SimulatedInventory:
    """
    Исполнение BUY-слайса в симуляции: тратим quantity_b, получаем A.

    Returns:
        (a + quantity_b / limit_price, b - quantity_b)
    """
    return SimulatedInventory(
        asset_a=state.asset_a + quantity_b / limit_price,
        asset_b=state.asset_b - quantity_b,
    )


def advance_sell_state(
    state: SimulatedInventory, quantity_b: Decimal, limit_price: Decimal
) -> SimulatedInventory:
    """
    Исполнение SELL-слайса в симуляции: отдаём A, получаем quantity_b.

    Returns:
        (a - quantity_b / limit_price, b + quantity_b)
    """
    return SimulatedInventory(
        asset_a=state.asset_a - quantity_b / limit_price,
        asset_b=state.asset_b + quantity_b,
    )


# =============================================================================
# СТОРОНЫ ЛЕСТНИЦЫ
# =============================================================================


def _validate_slice_count(slice_count: int) -> None:
    if isinstance(slice_count, bool) or not isinstance(slice_count, int):
        raise InvalidParameter(f"slice_count must be an integer, got {slice_count!r}")
    if slice_count < 0:
        raise InvalidParameter(f"slice_count must be non-negative, got {slice_count}")


def build_buy_side(
    inventory: Inventory,
    fair_price: DecimalLike,
    slice_count: int,
    params: Optional[CurveParameters] = None,
) -> list[LadderSlice]:
    """
    BUY-сторона лестницы в порядке генерации (от лучшей цены к худшей).

    Args:
        inventory: Текущие балансы
        fair_price: Справедливая цена (B за 1 A)
        slice_count: Количество уровней
        params: Параметры кривой

    Returns:
        slice_count BUY-слайсов с одинаковым quantity = asset_b / slice_count
    """
    _validate_slice_count(slice_count)
    if slice_count == 0:
        return []

    params = params or DEFAULT_CURVE_PARAMETERS
    fair = to_decimal(fair_price)
    quantity_b = inventory.asset_b / slice_count
    state = SimulatedInventory(inventory.asset_a, inventory.asset_b)

    slices: list[LadderSlice] = []
    for _ in range(slice_count):
        spread = compute_spread_bp(
            True,
            state.asset_a * fair + quantity_b,
            state.asset_b - quantity_b,
            params,
        )
        limit_price = fair * (1 - bps_to_fraction(spread))
        slices.append(
            LadderSlice(side=Side.BUY, limit_price=limit_price, quantity=quantity_b)
        )
        state = advance_buy_state(state, quantity_b, limit_price)

    return slices


def build_sell_side(
    inventory: Inventory,
    fair_price: DecimalLike,
    slice_count: int,
    params: Optional[CurveParameters] = None,
) -> list[LadderSlice]:
    """
    SELL-сторона лестницы в порядке генерации (от лучшей цены к худшей).

    quantity каждого слайса выражено в asset B: (asset_a / slice_count) * price.
    """
    _validate_slice_count(slice_count)
    if slice_count == 0:
        return []

    params = params or DEFAULT_CURVE_PARAMETERS
    fair = to_decimal(fair_price)
    quantity_a = inventory.asset_a / slice_count
    state = SimulatedInventory(inventory.asset_a, inventory.asset_b)

    slices: list[LadderSlice] = []
    for _ in range(slice_count):
        spread = compute_spread_bp(
            False,
            (state.asset_a - quantity_a) * fair,
            state.asset_b + quantity_a * fair,
            params,
        )
        limit_price = fair * (1 + bps_to_fraction(spread))
        quantity_b = quantity_a * limit_price
        slices.append(
            LadderSlice(side=Side.SELL, limit_price=limit_price, quantity=quantity_b)
        )
        state = advance_sell_state(state, quantity_b, limit_price)

    return slices


# =============================================================================
# ЛЕСТНИЦА
# =============================================================================


def build_ladder(
    inventory: Inventory,
    fair_price: DecimalLike,
    slice_count: int,
    params: Optional[CurveParameters] = None,
) -> list[LadderSlice]:
    """
    Полная лестница котировок, отсортированная по limit_price.

    Args:
        inventory: Текущие балансы (не мутируются)
        fair_price: Справедливая цена (B за 1 A)
        slice_count: Количество уровней на каждую сторону (>= 0)
        params: Параметры кривой (default: DEFAULT_CURVE_PARAMETERS)

    Returns:
        2 * slice_count слайсов по возрастанию limit_price

    Raises:
        InvalidParameter: Если exponent чётный или slice_count < 0

    Examples:
        >>> params = CurveParameters(min_spread_bp=5, max_spread_bp=100)
        >>> ladder = build_ladder(Inventory(asset_a=10, asset_b=10), 1, 1, params)
        >>> [(s.side.value, s.limit_price, s.quantity) for s in ladder]
        [('b', Decimal('0.99'), Decimal('10')), ('s', Decimal('1.01'), Decimal('10.10'))]
    """
    params = params or DEFAULT_CURVE_PARAMETERS
    validate_curve_parameters(params)
    _validate_slice_count(slice_count)

    buy_side = build_buy_side(inventory, fair_price, slice_count, params)
    sell_side = build_sell_side(inventory, fair_price, slice_count, params)

    return sorted(buy_side + sell_side, key=lambda s: s.limit_price)


def ladder_to_wire(ladder: list[LadderSlice]) -> list[WireSlice]:
    """Лестница в виде списка троек [side, price, quantity] для публикации."""
    return [s.to_wire() for s in ladder]
