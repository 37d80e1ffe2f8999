"""Maker settings — static configuration of the quoting core.

Загружается один раз при старте. Переменные окружения (все опциональны):

    MIN_SPREAD_BP, MAX_SPREAD_BP, EXPONENT, RANGE_FOCUS — кривая спреда
    SLICE                                               — уровней на сторону
    SAFE_RATIO_MIN, SAFE_RATIO_MAX                      — коридор GATE 0
    BASE_FEE, QUOTE_FEE                                 — комиссии площадки

Некорректные значения — фатальная ошибка старта: pydantic ValidationError или
ValueError для значений, jsonschema.ValidationError для нарушения контракта
curve_parameters (например, чётный EXPONENT).
"""

import os
from dataclasses import dataclass, field
from typing import Final, Mapping, Optional

from src.core.contracts.validators import validate_curve_parameters_contract
from src.core.domain.curve_parameters import CurveParameters
from src.core.domain.trade_offer import MarketFees
from src.core.math.spread_curve import InvalidParameter
from src.gatekeeper.gates.gate_00_reference_price import (
    DEFAULT_LOWER_BOUND,
    DEFAULT_UPPER_BOUND,
    Gate00Config,
)

DEFAULT_SLICE_COUNT: Final[int] = 10

# field name → env variable
_CURVE_ENV_VARS: Final[dict[str, str]] = {
    "min_spread_bp": "MIN_SPREAD_BP",
    "max_spread_bp": "MAX_SPREAD_BP",
    "exponent": "EXPONENT",
    "range_focus": "RANGE_FOCUS",
}
_FEE_ENV_VARS: Final[dict[str, str]] = {
    "base_fee": "BASE_FEE",
    "quote_fee": "QUOTE_FEE",
}


@dataclass(frozen=True)
class MakerSettings:
    """Конфигурация ядра котирования.

    Attributes:
        curve: параметры кривой спреда
        slice_count: количество уровней лестницы на каждую сторону
        reference_gate: коридор допустимой справедливой цены (GATE 0)
        fees: фиксированные комиссии площадки
    """

    curve: CurveParameters = field(default_factory=CurveParameters)
    slice_count: int = DEFAULT_SLICE_COUNT
    reference_gate: Gate00Config = field(default_factory=Gate00Config)
    fees: MarketFees = field(default_factory=MarketFees)

    def __post_init__(self):
        if isinstance(self.slice_count, bool) or not isinstance(self.slice_count, int):
            raise InvalidParameter(f"slice_count must be an integer, got {self.slice_count!r}")
        if self.slice_count < 0:
            raise InvalidParameter(f"slice_count must be non-negative, got {self.slice_count}")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "MakerSettings":
        """Загрузка настроек из переменных окружения (unset → default)."""
        env = os.environ if environ is None else environ

        curve = CurveParameters(
            **{name: env[var] for name, var in _CURVE_ENV_VARS.items() if var in env}
        )
        validate_curve_parameters_contract(curve.to_contract())
        fees = MarketFees(
            **{name: env[var] for name, var in _FEE_ENV_VARS.items() if var in env}
        )
        reference_gate = Gate00Config(
            lower_bound=env.get("SAFE_RATIO_MIN", DEFAULT_LOWER_BOUND),
            upper_bound=env.get("SAFE_RATIO_MAX", DEFAULT_UPPER_BOUND),
        )
        slice_count = int(env.get("SLICE", DEFAULT_SLICE_COUNT))

        return cls(
            curve=curve,
            slice_count=slice_count,
            reference_gate=reference_gate,
            fees=fees,
        )
