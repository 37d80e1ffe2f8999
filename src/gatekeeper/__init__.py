"""Gatekeeper — система гейтов допуска к котированию.

- Gates с фиксированным порядком (GATE 0 → GATE 1)
- Каждый gate stateless и возвращает frozen Result с block_reason
"""

from .gates.gate_00_reference_price import (
    Gate00Config,
    Gate00ReferencePrice,
    Gate00Result,
    is_reference_price_safe,
)
from .gates.gate_01_inventory import Gate01InventoryAvailable, Gate01Result

__all__ = [
    "Gate00Config",
    "Gate00ReferencePrice",
    "Gate00Result",
    "is_reference_price_safe",
    "Gate01InventoryAvailable",
    "Gate01Result",
]
