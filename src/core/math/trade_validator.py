"""
TradeValidator — Проверка встречного предложения

Оценивает предложение контрагента против той же кривой, что строит
лестницу, с поправкой на фиксированную комиссию за сделку.

Обе ветви опрашивают кривую в точке ПОСЛЕ сделки (post-trade inventory):
мейкер оценивает сделку так, как будто она уже произошла. Каждая следующая
часть дроблёной заявки требует более высокой цены, чем предыдущая. Полной
защиты от дробления это не даёт: каждая часть сравнивается с собственной
предложенной ценой, и сумма частей может оказаться меньше оплаты одной
сделки того же объёма.

is_buy=True (контрагент покупает A → мейкер продаёт):
    spread   = curve(SELL, (A - tA)*fair, B - fee + tB)
    required = fair * (1 + spread/10000)
    offered  = (tB - fee) / tA
    accept   ⇔ required <= offered

is_buy=False (контрагент продаёт A → мейкер покупает):
    spread   = curve(BUY, (A - fee + tA)*fair, B - tB)
    required = fair * (1 + spread/10000)
    offered  = tB / (tA - fee)
    accept   ⇔ required >= offered

Деление на ноль (tA == 0, tA == fee) — ответственность вызывающей
стороны; decimal.DivisionByZero / InvalidOperation пропагируют как есть.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from src.core.domain.curve_parameters import DEFAULT_CURVE_PARAMETERS, CurveParameters
from src.core.domain.inventory import Inventory
from src.core.domain.trade_offer import TradeOffer
from src.core.domain.units import DecimalLike, bps_to_fraction, to_decimal
from src.core.math.spread_curve import compute_spread_bp


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class TradeEvaluation:
    """Результат оценки предложения."""

    accepted: bool

    # Спред кривой в post-trade точке (bp)
    spread_bp: Decimal

    # Требуемая кривой цена и предложенная эффективная цена (B за 1 A)
    required_price: Decimal
    offered_price: Decimal


# =============================================================================
# ЦЕНЫ
# =============================================================================


def post_trade_spread_bp(
    offer: TradeOffer,
    inventory: Inventory,
    fair_price: DecimalLike,
    params: Optional[CurveParameters] = None,
) -> Decimal:
    """
    Спред кривой в post-trade точке inventory.

    Когда контрагент покупает, мейкер продаёт (кривая SELL), и наоборот.
    """
    fair = to_decimal(fair_price)

    if offer.is_buy:
        return compute_spread_bp(
            False,
            (inventory.asset_a - offer.trade_asset_a) * fair,
            inventory.asset_b - offer.fee + offer.trade_asset_b,
            params,
        )

    return compute_spread_bp(
        True,
        (inventory.asset_a - offer.fee + offer.trade_asset_a) * fair,
        inventory.asset_b - offer.trade_asset_b,
        params,
    )


def offered_price(offer: TradeOffer) -> Decimal:
    """Эффективная цена предложения за вычетом комиссии (B за 1 A)."""
    if offer.is_buy:
        return (offer.trade_asset_b - offer.fee) / offer.trade_asset_a
    return offer.trade_asset_b / (offer.trade_asset_a - offer.fee)


# =============================================================================
# ОЦЕНКА
# =============================================================================


def evaluate_trade(
    offer: TradeOffer,
    inventory: Inventory,
    fair_price: DecimalLike,
    params: Optional[CurveParameters] = None,
) -> TradeEvaluation:
    """
    Оценка предложения контрагента.

    Args:
        offer: Предложение (с комиссией)
        inventory: Текущие балансы мейкера (до сделки)
        fair_price: Справедливая цена (B за 1 A)
        params: Параметры кривой (default: DEFAULT_CURVE_PARAMETERS)

    Returns:
        TradeEvaluation с решением и ценами

    Raises:
        InvalidParameter: Если exponent чётный
        ZeroDivisionError / decimal.InvalidOperation: вырожденное предложение
    """
    params = params or DEFAULT_CURVE_PARAMETERS
    fair = to_decimal(fair_price)

    spread = post_trade_spread_bp(offer, inventory, fair, params)
    required = fair * (1 + bps_to_fraction(spread))
    offered = offered_price(offer)

    if offer.is_buy:
        accepted = required <= offered
    else:
        accepted = required >= offered

    return TradeEvaluation(
        accepted=accepted,
        spread_bp=spread,
        required_price=required,
        offered_price=offered,
    )


def is_trade_acceptable(
    offer: TradeOffer,
    inventory: Inventory,
    fair_price: DecimalLike,
    params: Optional[CurveParameters] = None,
) -> bool:
    """Принять ли предложение (см. evaluate_trade)."""
    return evaluate_trade(offer, inventory, fair_price, params).accepted
