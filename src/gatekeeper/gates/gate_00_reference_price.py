"""GATE 0: Reference Price Sanity — проверка справедливой цены

Первый gate в цепочке котирования:
- Справедливая цена (курс B за 1 A) приходит от внешнего price-feed
- Для пары активов, торгующихся около паритета, курс должен лежать
  строго внутри (lower_bound, upper_bound) — иначе он устарел или
  искажён, и котировать по нему нельзя
- Границы исключительные: значения ровно на границе блокируются

Gate независим от кривой спреда: он решает, пригодна ли цена вообще,
до любого решения о котировках.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Final, Optional

from src.core.domain.units import DecimalLike, to_decimal


# =============================================================================
# CONSTANTS
# =============================================================================

DEFAULT_LOWER_BOUND: Final[Decimal] = Decimal("1.01")
DEFAULT_UPPER_BOUND: Final[Decimal] = Decimal("1.10")


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class Gate00Config:
    """Конфигурация GATE 0.

    Исключительные границы допустимого курса.
    """

    lower_bound: Decimal = DEFAULT_LOWER_BOUND
    upper_bound: Decimal = DEFAULT_UPPER_BOUND

    def __post_init__(self):
        # Границы приводятся к Decimal (float 1.01 → Decimal("1.01"))
        object.__setattr__(self, "lower_bound", to_decimal(self.lower_bound))
        object.__setattr__(self, "upper_bound", to_decimal(self.upper_bound))
        if self.lower_bound >= self.upper_bound:
            raise ValueError(
                f"lower_bound {self.lower_bound} must be < upper_bound {self.upper_bound}"
            )


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class Gate00Result:
    """Результат GATE 0."""

    entry_allowed: bool
    block_reason: str

    # Проверенная цена (None если не удалось привести к Decimal)
    reference_price: Optional[Decimal]

    # Детали
    details: str


# =============================================================================
# GATE 0
# =============================================================================


class Gate00ReferencePrice:
    """GATE 0: Reference Price Sanity.

    Порядок проверок:
    1. Цена приводится к конечному Decimal → иначе блокировка
    2. Цена > 0 → иначе блокировка
    3. lower_bound < цена < upper_bound → иначе блокировка
    """

    def __init__(self, config: Gate00Config | None = None):
        """Инициализация GATE 0.

        Args:
            config: конфигурация gate (опционально, используется default)
        """
        self.config = config or Gate00Config()

    def evaluate(self, reference_price: DecimalLike) -> Gate00Result:
        """Оценка GATE 0: пригодна ли справедливая цена для котирования.

        Args:
            reference_price: курс B за 1 A от внешнего price-feed

        Returns:
            Gate00Result с решением о допуске
        """
        try:
            price = to_decimal(reference_price)
        except (TypeError, ValueError) as e:
            return Gate00Result(
                entry_allowed=False,
                block_reason="reference_price_invalid",
                reference_price=None,
                details=f"Reference price is not a finite number: {e}",
            )

        if price <= 0:
            return Gate00Result(
                entry_allowed=False,
                block_reason="reference_price_non_positive",
                reference_price=price,
                details=f"Reference price must be positive, got {price}",
            )

        lower = self.config.lower_bound
        upper = self.config.upper_bound

        if price <= lower:
            return Gate00Result(
                entry_allowed=False,
                block_reason="reference_price_below_bound",
                reference_price=price,
                details=f"Reference price {price} <= lower bound {lower}",
            )

        if price >= upper:
            return Gate00Result(
                entry_allowed=False,
                block_reason="reference_price_above_bound",
                reference_price=price,
                details=f"Reference price {price} >= upper bound {upper}",
            )

        return Gate00Result(
            entry_allowed=True,
            block_reason="",
            reference_price=price,
            details=f"PASS: {lower} < {price} < {upper}",
        )


def is_reference_price_safe(
    reference_price: DecimalLike, config: Gate00Config | None = None
) -> bool:
    """True если цена строго внутри (lower_bound, upper_bound)."""
    return Gate00ReferencePrice(config).evaluate(reference_price).entry_allowed
