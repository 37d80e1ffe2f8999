"""
Units — Централизованный модуль числовых единиц ядра котирования

Единственный допустимый способ:
- приведения входов (int/str/float/Decimal) к Decimal
- конверсии basis points → дробь

Все вычисления ведутся в decimal.Decimal: сравнения спредов и вычитание
комиссии происходят на уровне долей basis point, где ошибки округления
float меняют решение accept/reject.

ЗАПРЕЩЕНО подавать float в арифметику ядра без to_decimal из этого модуля.
"""

from decimal import Decimal
from typing import Final, Union


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Количество basis points в единице
BPS_PER_UNIT: Final[Decimal] = Decimal(10000)

DecimalLike = Union[Decimal, int, str, float]


# =============================================================================
# ПРИВЕДЕНИЕ ТИПОВ
# =============================================================================


def to_decimal(value: DecimalLike) -> Decimal:
    """
    Приведение значения к Decimal.

    Float конвертируется через str(), поэтому 0.5 → Decimal("0.5"),
    а 1.01 → Decimal("1.01") (а не двоичное приближение).

    Args:
        value: Decimal, int, str или float

    Returns:
        Конечный Decimal

    Raises:
        ValueError: Если значение NaN/Inf или не парсится
        TypeError: Если тип не поддерживается (например, bool)

    Examples:
        >>> to_decimal(0.5)
        Decimal('0.5')
        >>> to_decimal("47.855")
        Decimal('47.855')
    """
    if isinstance(value, bool):
        raise TypeError("bool is not a numeric quantity")

    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, (int, str)):
        try:
            result = Decimal(value)
        except ArithmeticError as e:
            raise ValueError(f"Cannot convert {value!r} to Decimal") from e
    elif isinstance(value, float):
        result = Decimal(str(value))
    else:
        raise TypeError(f"Unsupported numeric type: {type(value).__name__}")

    if not result.is_finite():
        raise ValueError(f"Value must be finite, got {value!r}")

    return result


# =============================================================================
# BASIS POINTS
# =============================================================================


def bps_to_fraction(bps: DecimalLike) -> Decimal:
    """
    Конверсия basis points в дробь.

    Args:
        bps: Basis points (например, 100 bps = 1%)

    Returns:
        Дробь (например, 100 → Decimal('0.01'))
    """
    return to_decimal(bps) / BPS_PER_UNIT
