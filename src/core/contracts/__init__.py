"""
Contract Validation Module

Модуль для валидации JSON контрактов ядра котирования.
"""

from .validators import (
    ContractValidator,
    CurveParametersValidator,
    LadderValidator,
    SchemaLoader,
    TradeOfferValidator,
    validate_curve_parameters_contract,
    validate_ladder,
    validate_trade_offer,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "CurveParametersValidator",
    "LadderValidator",
    "TradeOfferValidator",
    # Functions
    "validate_curve_parameters_contract",
    "validate_ladder",
    "validate_trade_offer",
]
