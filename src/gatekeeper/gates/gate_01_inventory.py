"""GATE 1: Inventory Available — проверка наличия балансов

Второй gate в цепочке котирования (после GATE 0):
- Блокирует котирование, если оба баланса нулевые (кошелёк пуст):
  лестница из нулевых количеств бессмысленна для публикации
- Один нулевой баланс допустим: кривая котирует пополнение этой стороны

Интеграция:
- Использует результат GATE 0 (должен быть PASS)
"""

from dataclasses import dataclass

from src.core.domain.inventory import Inventory
from src.gatekeeper.gates.gate_00_reference_price import Gate00Result


@dataclass(frozen=True)
class Gate01Result:
    """Результат GATE 1."""

    entry_allowed: bool
    block_reason: str

    # Входные параметры для диагностики
    inventory: Inventory

    # Детали
    details: str


class Gate01InventoryAvailable:
    """GATE 1: Inventory Available.

    Порядок проверок:
    1. GATE 0 блокировка → пропуск причины
    2. Пустой inventory → блокировка
    """

    def __init__(self):
        """GATE 1 не требует зависимостей (stateless)."""
        pass

    def evaluate(self, gate00_result: Gate00Result, inventory: Inventory) -> Gate01Result:
        """Оценка GATE 1.

        Args:
            gate00_result: результат GATE 0
            inventory: текущие балансы мейкера

        Returns:
            Gate01Result с решением о допуске
        """
        if not gate00_result.entry_allowed:
            return Gate01Result(
                entry_allowed=False,
                block_reason=f"gate00_blocked: {gate00_result.block_reason}",
                inventory=inventory,
                details=f"GATE 0 blocked: {gate00_result.details}",
            )

        if inventory.is_empty():
            return Gate01Result(
                entry_allowed=False,
                block_reason="inventory_empty",
                inventory=inventory,
                details="Wallet empty: both asset balances are zero",
            )

        return Gate01Result(
            entry_allowed=True,
            block_reason="",
            inventory=inventory,
            details=f"PASS: asset_a={inventory.asset_a}, asset_b={inventory.asset_b}",
        )
