"""Liquidation risk for leveraged positions.

Uses the maintenance-margin-ratio model:

    long liquidation  = entry * (1 - 1/leverage + MMR)
    short liquidation = entry * (1 + 1/leverage - MMR)

The safety buffer is a policy cushion held back from the balance. It gates
whether a new position should be opened and never moves the liquidation
price. All functions are pure computation, no I/O.
"""

import logging
import math
import numbers
from dataclasses import dataclass
from typing import Any, Literal

from hedge_tracker.config import EngineConfig
from hedge_tracker.models import Trade
from hedge_tracker.services.trade_normalizer import InvalidInput, validate_for_risk

logger = logging.getLogger(__name__)

Side = Literal["long", "short"]


@dataclass(frozen=True)
class RiskAssessment:
    """Risk projection for one account side.

    A result with ``long_liquidation_price is None`` means the inputs could
    not be computed (missing price, zero quantity, ...); render it as "N/A".
    """
    long_liquidation_price: float | None
    short_liquidation_price: float | None
    buffer: float | None  # long-side distance to liquidation, in price points
    is_safe: bool
    can_open: bool = False
    maintenance_amount: float | None = None
    safety_buffer_amount: float | None = None
    effective_collateral: float | None = None
    margin_required: float | None = None
    buffer_long: float | None = None
    buffer_short: float | None = None
    distance_long_pct: float | None = None
    distance_short_pct: float | None = None
    # The two halves of is_safe, reported separately
    collateral_covers_margin: bool = False
    has_price_buffer: bool = False

    @property
    def computable(self) -> bool:
        return self.long_liquidation_price is not None

    def liquidation_price(self, side: Side) -> float | None:
        return self.long_liquidation_price if side == "long" else self.short_liquidation_price

    def distance(self, side: Side) -> float | None:
        return self.buffer_long if side == "long" else self.buffer_short

    def distance_pct(self, side: Side) -> float | None:
        return self.distance_long_pct if side == "long" else self.distance_short_pct


NOT_COMPUTABLE = RiskAssessment(
    long_liquidation_price=None,
    short_liquidation_price=None,
    buffer=None,
    is_safe=False,
)


@dataclass(frozen=True)
class HedgeRiskComparison:
    """The same intended position assessed on both exchanges."""
    side: Side
    entry_price: float | None
    quantity: float | None
    leverage: float
    exchange_a: RiskAssessment
    exchange_b: RiskAssessment
    liquidation_price: float | None
    distance: float | None
    distance_pct: float | None
    is_safe: bool  # both legs individually safe
    can_open_a: bool
    can_open_b: bool

    @property
    def can_open(self) -> bool:
        return self.can_open_a and self.can_open_b


def _usable(value: Any) -> bool:
    """True for a finite, strictly positive real number."""
    if value is None or isinstance(value, bool) or not isinstance(value, numbers.Real):
        return False
    return math.isfinite(value) and value > 0


def liquidation_distance_pct(buffer: float | None, entry_price: float | None) -> float | None:
    """Distance to liquidation as a percentage of the entry price."""
    if buffer is None or not _usable(entry_price):
        return None
    return buffer / entry_price * 100


class LiquidationRiskCalculator:
    """Estimates liquidation prices and whether collateral leaves a safe margin.

    Policy defaults (maintenance and safety percentages, default leverage)
    come from the ``EngineConfig`` given at construction; every call may
    override the percentages.
    """

    def __init__(self, config: EngineConfig | None = None):
        self.config = config or EngineConfig()

    def assess(
        self,
        balance: float | None,
        entry_price: float | None,
        quantity: float | None,
        leverage: float | None,
        maintenance_percent: float | None = None,
        safety_percent: float | None = None,
    ) -> RiskAssessment:
        """Assess one account side.

        Args:
            balance: Account equity on the exchange.
            entry_price: Position entry price. May be None while the live
                price has not arrived yet.
            quantity: Position size in coin units.
            leverage: Position leverage.
            maintenance_percent: Maintenance margin in percent units
                (0.5 means 0.5%). Accepted as given.
            safety_percent: Safety cushion in percent of balance.

        Returns:
            A RiskAssessment, or NOT_COMPUTABLE when any of balance,
            entry_price, quantity or leverage is missing, zero, negative or
            non-finite.
        """
        if maintenance_percent is None:
            maintenance_percent = self.config.maintenance_percent
        if safety_percent is None:
            safety_percent = self.config.safety_percent

        inputs = {
            "balance": balance,
            "entry_price": entry_price,
            "quantity": quantity,
            "leverage": leverage,
        }
        unusable = [name for name, value in inputs.items() if not _usable(value)]
        if unusable:
            logger.debug(f"Liquidation not computable, unusable inputs: {', '.join(unusable)}")
            return NOT_COMPUTABLE

        mmr = maintenance_percent / 100
        raw_long_liq = entry_price * (1 - 1 / leverage + mmr)
        long_liq = max(raw_long_liq, 0.0)
        short_liq = entry_price * (1 + 1 / leverage - mmr)

        maintenance_amount = balance * maintenance_percent / 100
        safety_buffer_amount = balance * safety_percent / 100
        effective_collateral = balance - maintenance_amount - safety_buffer_amount
        margin_required = entry_price * quantity / leverage

        # Distance is taken before the floor; only the reported price is clamped
        buffer_long = abs(entry_price - raw_long_liq)
        buffer_short = abs(short_liq - entry_price)

        covers_margin = effective_collateral > margin_required
        has_buffer = buffer_long > 0 or buffer_short > 0

        return RiskAssessment(
            long_liquidation_price=long_liq,
            short_liquidation_price=short_liq,
            buffer=buffer_long,
            is_safe=covers_margin and has_buffer,
            can_open=effective_collateral >= margin_required,
            maintenance_amount=maintenance_amount,
            safety_buffer_amount=safety_buffer_amount,
            effective_collateral=effective_collateral,
            margin_required=margin_required,
            buffer_long=buffer_long,
            buffer_short=buffer_short,
            distance_long_pct=liquidation_distance_pct(buffer_long, entry_price),
            distance_short_pct=liquidation_distance_pct(buffer_short, entry_price),
            collateral_covers_margin=covers_margin,
            has_price_buffer=has_buffer,
        )

    def assess_trade(
        self,
        trade: Trade | dict,
        balance: float | None,
        maintenance_percent: float | None = None,
        safety_percent: float | None = None,
    ) -> RiskAssessment:
        """Assess a trade leg against the balance of the account holding it."""
        checked = validate_for_risk(trade)
        if isinstance(checked, InvalidInput):
            return NOT_COMPUTABLE
        return self.assess(
            balance,
            checked.open_price,
            checked.quantity,
            checked.leverage,
            maintenance_percent=maintenance_percent,
            safety_percent=safety_percent,
        )

    def compare(
        self,
        balance_a: float | None,
        balance_b: float | None,
        entry_price: float | None,
        quantity: float | None,
        side: Side = "long",
        leverage: float | None = None,
        maintenance_percent: float | None = None,
        safety_percent: float | None = None,
    ) -> HedgeRiskComparison:
        """Assess one intended position on two exchanges at once.

        The hedge is labelled safe only when both exchanges are safe.
        Leverage falls back to the configured default.
        """
        if side not in ("long", "short"):
            raise ValueError(f"side must be 'long' or 'short', got {side!r}")
        if leverage is None:
            leverage = self.config.default_leverage

        info_a = self.assess(balance_a, entry_price, quantity, leverage, maintenance_percent, safety_percent)
        info_b = self.assess(balance_b, entry_price, quantity, leverage, maintenance_percent, safety_percent)

        # Same price, leverage and policy on both sides; A's figures stand for the pair
        reference = info_a if info_a.computable else info_b

        return HedgeRiskComparison(
            side=side,
            entry_price=entry_price,
            quantity=quantity,
            leverage=leverage,
            exchange_a=info_a,
            exchange_b=info_b,
            liquidation_price=reference.liquidation_price(side),
            distance=reference.distance(side),
            distance_pct=reference.distance_pct(side),
            is_safe=info_a.is_safe and info_b.is_safe,
            can_open_a=info_a.can_open,
            can_open_b=info_b.can_open,
        )
