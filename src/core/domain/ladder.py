"""
LadderSlice — Уровень лестницы котировок

Лестница — конечная упорядоченная (по limit_price) последовательность
слайсов, которую оркестратор публикует на площадке как есть.
quantity всегда выражено в эквиваленте asset B для обеих сторон.
"""

from decimal import Decimal
from enum import Enum
from typing import Any, Union

from pydantic import BaseModel, Field, field_validator

from src.core.domain.units import to_decimal


# =============================================================================
# ENUMS
# =============================================================================


class Side(str, Enum):
    """Сторона слайса (однобуквенные коды площадки)"""

    BUY = "b"  # мейкер покупает A, платит B
    SELL = "s"  # мейкер продаёт A, получает B


# =============================================================================
# LADDER SLICE MODEL
# =============================================================================

WireSlice = list[Union[str, float]]


class LadderSlice(BaseModel):
    """
    Один уровень лестницы котировок.

    Immutable модель (frozen=True).
    """

    side: Side = Field(..., description="Сторона (b/s)")
    limit_price: Decimal = Field(..., description="Лимитная цена (B за 1 A)")
    quantity: Decimal = Field(..., description="Количество в эквиваленте asset B")

    model_config = {"frozen": True}

    @field_validator("limit_price", "quantity", mode="before")
    @classmethod
    def coerce_decimal(cls, v: Any) -> Decimal:
        return to_decimal(v)

    def to_wire(self) -> WireSlice:
        """
        Сериализация в тройку [side, price, quantity].

        Числа становятся JSON numbers только здесь, на границе публикации.
        """
        return [self.side.value, float(self.limit_price), float(self.quantity)]
