"""
Inventory — Текущие балансы маркет-мейкера

Immutable Pydantic модель пары балансов (asset A, asset B).
Создаётся оркестратором заново на каждый вызов и никогда не мутируется
ядром: построитель лестницы работает на локальных симулированных копиях.

Знак балансов не валидируется — неотрицательность гарантирует вызывающая сторона.
"""

from decimal import Decimal
from typing import Any

from pydantic import BaseModel, Field, field_validator

from src.core.domain.units import to_decimal


class Inventory(BaseModel):
    """Балансы asset A и asset B."""

    asset_a: Decimal = Field(..., description="Баланс asset A")
    asset_b: Decimal = Field(..., description="Баланс asset B")

    model_config = {"frozen": True}

    @field_validator("asset_a", "asset_b", mode="before")
    @classmethod
    def coerce_decimal(cls, v: Any) -> Decimal:
        return to_decimal(v)

    def is_empty(self) -> bool:
        """True если оба баланса нулевые"""
        return self.asset_a.is_zero() and self.asset_b.is_zero()
