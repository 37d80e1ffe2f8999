"""QuoteEngine — фасад ядра котирования для оркестратора.

Композиция без состояния:
    GATE 0 (справедливая цена) → GATE 1 (inventory) → LiquidityLadder
    GATE 0 → GATE 1 → TradeValidator (с комиссией площадки)

Предложение может прийти как TradeOffer или как декодированный JSON-объект;
во втором случае оно проверяется по контракту trade_offer.

Движок не выполняет I/O: балансы, цену и предложения передаёт оркестратор,
он же публикует лестницу и исполняет принятые сделки. Вызовы можно делать
конкурентно — общего изменяемого состояния нет.
"""

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

from jsonschema import ValidationError

from src.core.contracts.validators import validate_ladder, validate_trade_offer
from src.core.domain.inventory import Inventory
from src.core.domain.ladder import LadderSlice, WireSlice
from src.core.domain.trade_offer import MarketFees, TradeOffer
from src.core.domain.units import DecimalLike, to_decimal
from src.core.math.liquidity_ladder import build_ladder, ladder_to_wire
from src.core.math.numerical_safeguards import quantize_places
from src.core.math.spread_curve import validate_curve_parameters
from src.core.math.trade_validator import TradeEvaluation, evaluate_trade
from src.gatekeeper.gates.gate_00_reference_price import Gate00ReferencePrice
from src.gatekeeper.gates.gate_01_inventory import Gate01InventoryAvailable, Gate01Result
from src.maker.settings import MakerSettings
from src.utils.logger import get_child_logger


# =============================================================================
# EXCEPTIONS
# =============================================================================


class QuotingBlocked(RuntimeError):
    """Gate запретил котирование (цена вне коридора, пустой inventory)."""

    def __init__(self, block_reason: str, details: str):
        super().__init__(f"{block_reason}: {details}")
        self.block_reason = block_reason
        self.details = details


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class OfferDecision:
    """Решение по предложению контрагента."""

    accepted: bool
    block_reason: str

    # None если предложение отклонено gate до оценки кривой
    evaluation: Optional[TradeEvaluation]


# =============================================================================
# ENGINE
# =============================================================================


class QuoteEngine:
    """Фасад: gates + лестница + проверка предложений."""

    def __init__(self, settings: MakerSettings | None = None):
        """
        Args:
            settings: конфигурация (default: MakerSettings())

        Raises:
            InvalidParameter: если параметры кривой непригодны (фатально)
        """
        self.settings = settings or MakerSettings()
        validate_curve_parameters(self.settings.curve)

        self._gate00 = Gate00ReferencePrice(self.settings.reference_gate)
        self._gate01 = Gate01InventoryAvailable()
        self._logger = get_child_logger(None, "quote_engine")

    def check_gates(self, inventory: Inventory, fair_price: DecimalLike) -> Gate01Result:
        """Прогон GATE 0 → GATE 1."""
        gate00_result = self._gate00.evaluate(fair_price)
        return self._gate01.evaluate(gate00_result, inventory)

    def quote(self, inventory: Inventory, fair_price: DecimalLike) -> list[LadderSlice]:
        """
        Лестница котировок для публикации.

        Raises:
            QuotingBlocked: если gate запретил котирование
        """
        gate_result = self.check_gates(inventory, fair_price)
        if not gate_result.entry_allowed:
            self._logger.warning("Quoting blocked: %s", gate_result.details)
            raise QuotingBlocked(gate_result.block_reason, gate_result.details)

        ladder = build_ladder(
            inventory, fair_price, self.settings.slice_count, self.settings.curve
        )
        self._logger.debug(
            "Ladder built: %d slices, fair_price=%s, asset_a=%s, asset_b=%s",
            len(ladder),
            quantize_places(to_decimal(fair_price), 8),
            inventory.asset_a,
            inventory.asset_b,
        )
        return ladder

    def quote_wire(self, inventory: Inventory, fair_price: DecimalLike) -> list[WireSlice]:
        """Лестница в форме публикации, проверенная по контракту ladder."""
        wire = ladder_to_wire(self.quote(inventory, fair_price))
        validate_ladder(wire)
        return wire

    def decode_offer(self, payload: Mapping[str, Any]) -> TradeOffer:
        """
        Предложение из декодированного JSON-объекта.

        Raises:
            jsonschema.ValidationError: если объект нарушает контракт trade_offer
        """
        try:
            validate_trade_offer(payload)
        except ValidationError as e:
            self._logger.warning("Offer payload violates contract: %s", e.message)
            raise
        return TradeOffer(**payload)

    def evaluate_offer(
        self,
        offer: Union[TradeOffer, Mapping[str, Any]],
        inventory: Inventory,
        fair_price: DecimalLike,
        fees: MarketFees | None = None,
    ) -> OfferDecision:
        """
        Оценка предложения контрагента с комиссией площадки.

        Комиссия берётся из fees (или settings.fees) по стороне предложения
        и заменяет offer.fee. Блокировка gate — отказ, а не исключение.
        Объект, нарушающий контракт trade_offer, — исключение (см. decode_offer).

        Args:
            offer: предложение контрагента (TradeOffer или JSON-объект)
            inventory: текущие балансы мейкера
            fair_price: справедливая цена
            fees: актуальные комиссии площадки (опционально)
        """
        if not isinstance(offer, TradeOffer):
            offer = self.decode_offer(offer)

        gate_result = self.check_gates(inventory, fair_price)
        if not gate_result.entry_allowed:
            self._logger.warning("Offer rejected by gate: %s", gate_result.details)
            return OfferDecision(
                accepted=False, block_reason=gate_result.block_reason, evaluation=None
            )

        market_fees = fees or self.settings.fees
        priced_offer = offer.with_fee(market_fees.fee_for(offer.is_buy))

        evaluation = evaluate_trade(priced_offer, inventory, fair_price, self.settings.curve)
        self._logger.debug(
            "Offer is_buy=%s a=%s b=%s fee=%s: required=%s offered=%s accepted=%s",
            priced_offer.is_buy,
            priced_offer.trade_asset_a,
            priced_offer.trade_asset_b,
            priced_offer.fee,
            evaluation.required_price,
            evaluation.offered_price,
            evaluation.accepted,
        )

        return OfferDecision(
            accepted=evaluation.accepted,
            block_reason="" if evaluation.accepted else "price_outside_curve",
            evaluation=evaluation,
        )
