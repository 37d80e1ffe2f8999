"""
Core math modules для ядра котирования

Чистые функции: кривая спреда, лестница котировок, проверка предложений.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    positive_part,
    quantize_places,
    ratio_or_fallback,
)

# Spread Curve
from src.core.math.spread_curve import (
    InvalidParameter,
    compute_imbalance,
    compute_spread_bp,
    validate_curve_parameters,
    validate_exponent,
)

# Liquidity Ladder
from src.core.math.liquidity_ladder import (
    SimulatedInventory,
    advance_buy_state,
    advance_sell_state,
    build_buy_side,
    build_ladder,
    build_sell_side,
    ladder_to_wire,
)

# Trade Validator
from src.core.math.trade_validator import (
    TradeEvaluation,
    evaluate_trade,
    is_trade_acceptable,
    offered_price,
    post_trade_spread_bp,
)

__all__ = [
    # Numerical Safeguards
    "positive_part",
    "quantize_places",
    "ratio_or_fallback",
    # Spread Curve: Exceptions
    "InvalidParameter",
    # Spread Curve: Functions
    "compute_imbalance",
    "compute_spread_bp",
    "validate_curve_parameters",
    "validate_exponent",
    # Liquidity Ladder: Types
    "SimulatedInventory",
    # Liquidity Ladder: Functions
    "advance_buy_state",
    "advance_sell_state",
    "build_buy_side",
    "build_ladder",
    "build_sell_side",
    "ladder_to_wire",
    # Trade Validator: Types
    "TradeEvaluation",
    # Trade Validator: Functions
    "evaluate_trade",
    "is_trade_acceptable",
    "offered_price",
    "post_trade_spread_bp",
]
