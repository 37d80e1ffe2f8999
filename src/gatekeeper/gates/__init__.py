"""Gates — индивидуальные гейты Gatekeeper системы котирования.

- GATE 0: Reference Price Sanity (справедливая цена в допустимом коридоре)
- GATE 1: Inventory Available (кошелёк не пуст)
"""

from .gate_00_reference_price import (
    DEFAULT_LOWER_BOUND,
    DEFAULT_UPPER_BOUND,
    Gate00Config,
    Gate00ReferencePrice,
    Gate00Result,
    is_reference_price_safe,
)
from .gate_01_inventory import Gate01InventoryAvailable, Gate01Result

__all__ = [
    "DEFAULT_LOWER_BOUND",
    "DEFAULT_UPPER_BOUND",
    "Gate00Config",
    "Gate00ReferencePrice",
    "Gate00Result",
    "is_reference_price_safe",
    "Gate01InventoryAvailable",
    "Gate01Result",
]
