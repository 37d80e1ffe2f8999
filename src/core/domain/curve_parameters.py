"""
CurveParameters — Параметры кривой спреда

Immutable Pydantic модель, задающая форму кривой спреда по дисбалансу
inventory. Загружается из статической конфигурации один раз и разделяется
всеми вызовами ядра котирования.

Чётность exponent НЕ проверяется моделью: это делает
src.core.math.spread_curve.validate_curve_parameters, чтобы ошибка
конфигурации всегда имела тип InvalidParameter.
"""

from decimal import Decimal
from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

from src.core.domain.units import to_decimal


# =============================================================================
# DEFAULTS
# =============================================================================

DEFAULT_MIN_SPREAD_BP: Decimal = Decimal(5)
DEFAULT_MAX_SPREAD_BP: Decimal = Decimal(150)
DEFAULT_EXPONENT: int = 3
DEFAULT_RANGE_FOCUS: Decimal = Decimal("0.5")


# =============================================================================
# CURVE PARAMETERS MODEL
# =============================================================================


class CurveParameters(BaseModel):
    """
    Параметры кривой спреда.

    - min_spread_bp: пол спреда (bp), возвращается при балансе или избытке
    - max_spread_bp: спред (bp) при полном истощении котируемой стороны
    - exponent: нечётная степень дисбаланса (знак сохраняется)
    - range_focus: вес sqrt-буста около нулевого дисбаланса

    Immutable модель (frozen=True).
    """

    min_spread_bp: Decimal = Field(
        default=DEFAULT_MIN_SPREAD_BP, ge=0, description="Минимальный спред (bp)"
    )
    max_spread_bp: Decimal = Field(
        default=DEFAULT_MAX_SPREAD_BP, ge=0, description="Максимальный спред (bp)"
    )
    exponent: int = Field(
        default=DEFAULT_EXPONENT, ge=1, description="Степень дисбаланса (нечётная)"
    )
    range_focus: Decimal = Field(
        default=DEFAULT_RANGE_FOCUS, ge=0, description="Вес sqrt-буста около баланса"
    )

    model_config = {"frozen": True}

    @field_validator("min_spread_bp", "max_spread_bp", "range_focus", mode="before")
    @classmethod
    def coerce_decimal(cls, v: Any) -> Decimal:
        """Float конвертируется через str (0.5 → Decimal('0.5'))"""
        return to_decimal(v)

    @model_validator(mode="after")
    def validate_spread_order(self) -> "CurveParameters":
        """Проверка min_spread_bp <= max_spread_bp"""
        if self.min_spread_bp > self.max_spread_bp:
            raise ValueError(
                f"min_spread_bp {self.min_spread_bp} must be <= "
                f"max_spread_bp {self.max_spread_bp}"
            )
        return self

    def to_contract(self) -> dict[str, Any]:
        """
        Форма контракта curve_parameters (JSON numbers).

        Float только для проверки схемой; ядро работает с Decimal полями.
        """
        return {
            "min_spread_bp": float(self.min_spread_bp),
            "max_spread_bp": float(self.max_spread_bp),
            "exponent": self.exponent,
            "range_focus": float(self.range_focus),
        }


DEFAULT_CURVE_PARAMETERS = CurveParameters()
