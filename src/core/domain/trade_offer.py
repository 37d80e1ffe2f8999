"""
TradeOffer — Встречное предложение контрагента

Immutable Pydantic модели:
- TradeOffer: предложенная внешней стороной сделка
- MarketFees: фиксированные комиссии площадки за сделку
"""

from decimal import Decimal
from typing import Any

from pydantic import BaseModel, Field, field_validator

from src.core.domain.units import to_decimal


class TradeOffer(BaseModel):
    """
    Предложение контрагента.

    is_buy=True: контрагент покупает asset A у мейкера, платя asset B.
    is_buy=False: контрагент продаёт asset A мейкеру за asset B.
    """

    is_buy: bool = Field(..., description="Контрагент покупает asset A")
    trade_asset_a: Decimal = Field(..., description="Объём asset A в сделке")
    trade_asset_b: Decimal = Field(..., description="Объём asset B в сделке")
    fee: Decimal = Field(default=Decimal(0), ge=0, description="Фиксированная комиссия")

    model_config = {"frozen": True}

    @field_validator("trade_asset_a", "trade_asset_b", "fee", mode="before")
    @classmethod
    def coerce_decimal(cls, v: Any) -> Decimal:
        return to_decimal(v)

    def with_fee(self, fee: Decimal) -> "TradeOffer":
        """Копия предложения с другой комиссией"""
        return self.model_copy(update={"fee": to_decimal(fee)})


class MarketFees(BaseModel):
    """
    Комиссии площадки.

    base_fee — в asset A, quote_fee — в asset B.
    Отрицательные значения приводятся к 0.
    """

    base_fee: Decimal = Field(default=Decimal(1), ge=0, description="Комиссия в asset A")
    quote_fee: Decimal = Field(default=Decimal(1), ge=0, description="Комиссия в asset B")

    model_config = {"frozen": True}

    @field_validator("base_fee", "quote_fee", mode="before")
    @classmethod
    def clamp_non_negative(cls, v: Any) -> Decimal:
        """max(fee, 0)"""
        return max(to_decimal(v), Decimal(0))

    def fee_for(self, is_buy: bool) -> Decimal:
        """
        Комиссия для предложения.

        Покупка контрагента оплачивается в asset B (quote_fee),
        продажа — в asset A (base_fee).
        """
        return self.quote_fee if is_buy else self.base_fee
