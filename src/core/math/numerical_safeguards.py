"""
Numerical Safeguards — Decimal Math Primitives

Модуль определяет поведение ядра в вырожденных численных случаях:
- Деление с явным fallback для нулевого знаменателя
- Квантование для отображения/сравнения с литералами

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. 0/0 в формуле дисбаланса → нейтральный результат, а не InvalidOperation
2. Прочие деления на ноль (вырожденные предложения) НЕ маскируются
3. Все операции детерминированы и воспроизводимы
"""

from decimal import ROUND_HALF_UP, Decimal


# =============================================================================
# ДЕЛЕНИЕ
# =============================================================================


def ratio_or_fallback(
    numerator: Decimal,
    denominator: Decimal,
    fallback: Decimal = Decimal(0),
) -> Decimal:
    """
    Деление с явным fallback для нулевого знаменателя.

    В отличие от float-математики, Decimal при 0/0 бросает InvalidOperation.
    Здесь нулевой знаменатель — штатный вырожденный случай (например,
    нулевой суммарный inventory), и результат определяется явно.

    Args:
        numerator: Числитель
        denominator: Знаменатель
        fallback: Результат при denominator == 0 (default: 0)

    Returns:
        numerator / denominator или fallback

    Examples:
        >>> ratio_or_fallback(Decimal(1), Decimal(4))
        Decimal('0.25')
        >>> ratio_or_fallback(Decimal(0), Decimal(0))
        Decimal('0')
    """
    if denominator.is_zero():
        return fallback
    return numerator / denominator


# =============================================================================
# ЗНАК
# =============================================================================


def positive_part(value: Decimal) -> Decimal:
    """max(value, 0)"""
    return value if value > 0 else Decimal(0)


# =============================================================================
# КВАНТОВАНИЕ
# =============================================================================


def quantize_places(value: Decimal, places: int) -> Decimal:
    """
    Округление до фиксированного числа знаков (ROUND_HALF_UP).

    Используется только для отображения и логов; вычисления ядра
    не округляются.

    Examples:
        >>> quantize_places(Decimal("47.85533905"), 3)
        Decimal('47.855')
    """
    if places < 0:
        raise ValueError(f"places must be non-negative, got {places}")
    return value.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)
