"""
SpreadCurve — Спред по дисбалансу inventory

Отображает дисбаланс inventory и сторону котировки в требуемый спред (bp).

ФОРМУЛА:
    imbalance = (A - B) / (A + B)            для BUY
    imbalance = (B - A) / (A + B)            для SELL
    imbalance = 0                            если A + B == 0
    boost     = range_focus * sqrt(max(imbalance, 0))
    raw       = (imbalance^exponent + boost) / (range_focus + 1) * max_spread_bp
    spread    = max(raw, min_spread_bp)

A и B — стоимости, уже приведённые вызывающей стороной к сопоставимым
единицам (например, asset_a * fair_price и asset_b).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. exponent нечётный и >= 1 → иначе InvalidParameter
2. Результат всегда >= min_spread_bp
3. compute_spread_bp(True, A, B) == compute_spread_bp(False, B, A)
4. A = B = 0 → ровно min_spread_bp (нейтральный дисбаланс)

Нечётная степень сохраняет знак: кривая расширяет спред на истощаемой
стороне и сужает его (до пола) на пополняемой. sqrt-буст делает отклик
S-образным: пологим около баланса и крутым при перекосе.
"""

from decimal import Decimal
from typing import Optional

from src.core.domain.curve_parameters import DEFAULT_CURVE_PARAMETERS, CurveParameters
from src.core.domain.units import DecimalLike, to_decimal
from src.core.math.numerical_safeguards import positive_part, ratio_or_fallback


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidParameter(ValueError):
    """
    Некорректный параметр ядра котирования (чётный exponent и т.п.).

    Это ошибка конфигурации: должна быть фатальной при старте,
    а не обрабатываться на каждом вызове.
    """

    pass


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_exponent(exponent: int) -> None:
    """
    Проверка, что exponent — нечётное целое >= 1.

    Raises:
        InvalidParameter: Если exponent чётный, < 1 или не целый
    """
    if isinstance(exponent, bool) or not isinstance(exponent, int):
        raise InvalidParameter(f"Exponent must be an integer, got {exponent!r}")

    if exponent < 1:
        raise InvalidParameter(f"Exponent must be >= 1, got {exponent}")

    if exponent % 2 == 0:
        raise InvalidParameter(f"Exponent should be odd number, got {exponent}")


def validate_curve_parameters(params: CurveParameters) -> None:
    """
    Стартовая валидация параметров кривой.

    Pydantic уже проверил знаки и порядок min/max; здесь — чётность.

    Raises:
        InvalidParameter: Если параметры непригодны для кривой
    """
    validate_exponent(params.exponent)


# =============================================================================
# ДИСБАЛАНС
# =============================================================================


def compute_imbalance(is_buy: bool, value_a: DecimalLike, value_b: DecimalLike) -> Decimal:
    """
    Нормированный знаковый дисбаланс, теоретически в (-1, 1).

    Args:
        is_buy: Котируемая сторона (True — мейкер покупает asset A)
        value_a: Стоимость asset A (в единицах B)
        value_b: Стоимость asset B

    Returns:
        Дисбаланс; 0 если value_a + value_b == 0
    """
    a = to_decimal(value_a)
    b = to_decimal(value_b)

    numerator = a - b if is_buy else b - a
    return ratio_or_fallback(numerator, a + b)


# =============================================================================
# SPREAD CURVE
# =============================================================================


def compute_spread_bp(
    is_buy: bool,
    value_a: DecimalLike,
    value_b: DecimalLike,
    params: Optional[CurveParameters] = None,
) -> Decimal:
    """
    Требуемый спред в basis points.

    Args:
        is_buy: Котируемая сторона (True — мейкер покупает asset A)
        value_a: Стоимость asset A (в единицах B), может быть отрицательной
        value_b: Стоимость asset B, может быть отрицательной
        params: Параметры кривой (default: DEFAULT_CURVE_PARAMETERS)

    Returns:
        Спред (bp) >= params.min_spread_bp

    Raises:
        InvalidParameter: Если exponent чётный

    Examples:
        >>> compute_spread_bp(True, 10, 0)
        Decimal('150')
        >>> compute_spread_bp(False, 10, 0)
        Decimal('5')
    """
    params = params or DEFAULT_CURVE_PARAMETERS
    validate_exponent(params.exponent)

    imbalance = compute_imbalance(is_buy, value_a, value_b)
    curve_boost = params.range_focus * positive_part(imbalance).sqrt()

    raw = (
        (imbalance ** params.exponent + curve_boost)
        / (params.range_focus + 1)
        * params.max_spread_bp
    )

    return raw if raw > params.min_spread_bp else params.min_spread_bp
