"""
Domain models and value objects.

Contains the quoting core's value objects: CurveParameters, Inventory,
LadderSlice, TradeOffer, MarketFees.
"""

from src.core.domain.curve_parameters import (
    DEFAULT_CURVE_PARAMETERS,
    DEFAULT_EXPONENT,
    DEFAULT_MAX_SPREAD_BP,
    DEFAULT_MIN_SPREAD_BP,
    DEFAULT_RANGE_FOCUS,
    CurveParameters,
)
from src.core.domain.inventory import Inventory
from src.core.domain.ladder import LadderSlice, Side, WireSlice
from src.core.domain.trade_offer import MarketFees, TradeOffer
from src.core.domain.units import (
    BPS_PER_UNIT,
    DecimalLike,
    bps_to_fraction,
    to_decimal,
)

__all__ = [
    # Units module
    "BPS_PER_UNIT",
    "DecimalLike",
    "bps_to_fraction",
    "to_decimal",
    # Curve parameters
    "DEFAULT_CURVE_PARAMETERS",
    "DEFAULT_EXPONENT",
    "DEFAULT_MAX_SPREAD_BP",
    "DEFAULT_MIN_SPREAD_BP",
    "DEFAULT_RANGE_FOCUS",
    "CurveParameters",
    # Inventory
    "Inventory",
    # Ladder
    "LadderSlice",
    "Side",
    "WireSlice",
    # Trade offer
    "MarketFees",
    "TradeOffer",
]
