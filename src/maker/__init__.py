"""Maker — фасад ядра котирования и его конфигурация."""

from src.maker.quote_engine import OfferDecision, QuoteEngine, QuotingBlocked
from src.maker.settings import DEFAULT_SLICE_COUNT, MakerSettings

__all__ = [
    "DEFAULT_SLICE_COUNT",
    "MakerSettings",
    "OfferDecision",
    "QuoteEngine",
    "QuotingBlocked",
]
