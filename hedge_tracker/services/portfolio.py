"""Portfolio-level totals across all hedge pairs."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from hedge_tracker.config import EngineConfig
from hedge_tracker.models import HedgedPair
from hedge_tracker.services.pair_aggregator import notional_volume

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PortfolioTotals:
    """Sums per leg slot. Leg A and leg B volume are kept apart so each
    exchange can be tracked against the shared monthly target."""
    total_pnl: float = 0.0
    total_fees: float = 0.0
    total_volume_a: float = 0.0
    total_volume_b: float = 0.0

    @property
    def total_volume(self) -> float:
        return self.total_volume_a + self.total_volume_b

    def __add__(self, other: "PortfolioTotals") -> "PortfolioTotals":
        if not isinstance(other, PortfolioTotals):
            return NotImplemented
        return PortfolioTotals(
            total_pnl=self.total_pnl + other.total_pnl,
            total_fees=self.total_fees + other.total_fees,
            total_volume_a=self.total_volume_a + other.total_volume_a,
            total_volume_b=self.total_volume_b + other.total_volume_b,
        )


@dataclass(frozen=True)
class PortfolioSummary:
    total_pnl: float
    total_fees: float
    total_volume_a: float
    total_volume_b: float
    total_volume: float
    starting_equity: float
    equity: float
    volume_target: float
    volume_progress_a: float
    volume_progress_b: float
    pair_count: int
    winning_pairs: int
    win_rate: float


def volume_progress(volume: float, target: float) -> float:
    """Percent of target reached, clamped to [0, 100]. Zero target gives 0."""
    if not target > 0:
        return 0.0
    return max(0.0, min(volume / target, 1.0)) * 100


def _num(value: float | None) -> float:
    return value if value is not None else 0.0


class PortfolioAggregator:
    """Folds hedge pairs into portfolio totals using explicit policy defaults."""

    def __init__(self, config: EngineConfig | None = None):
        self.config = config or EngineConfig()

    def aggregate(self, pairs: Iterable[HedgedPair]) -> PortfolioTotals:
        total_pnl = 0.0
        total_fees = 0.0
        volume_a = 0.0
        volume_b = 0.0
        for pair in pairs:
            a, b = pair.leg_a, pair.leg_b
            total_pnl += _num(a.pnl) + _num(b.pnl)
            total_fees += _num(a.fee) + _num(b.fee)
            volume_a += notional_volume(a)
            volume_b += notional_volume(b)
        return PortfolioTotals(
            total_pnl=total_pnl,
            total_fees=total_fees,
            total_volume_a=volume_a,
            total_volume_b=volume_b,
        )

    def equity(self, total_pnl: float, starting_equity: float | None = None) -> float:
        if starting_equity is None:
            starting_equity = self.config.starting_equity
        return starting_equity + total_pnl

    def summarize(
        self,
        pairs: Iterable[HedgedPair],
        starting_equity: float | None = None,
        volume_target: float | None = None,
    ) -> PortfolioSummary:
        """Totals, equity, per-exchange target progress and win rate."""
        pairs = list(pairs)
        if starting_equity is None:
            starting_equity = self.config.starting_equity
        if volume_target is None:
            volume_target = self.config.monthly_volume_target

        totals = self.aggregate(pairs)
        winning = sum(1 for p in pairs if _num(p.leg_a.pnl) + _num(p.leg_b.pnl) > 0)
        win_rate = winning / len(pairs) * 100 if pairs else 0.0

        logger.debug(
            f"Portfolio summary: {len(pairs)} pairs, pnl={totals.total_pnl:.2f}, "
            f"volume_a={totals.total_volume_a:.2f}, volume_b={totals.total_volume_b:.2f}"
        )

        return PortfolioSummary(
            total_pnl=totals.total_pnl,
            total_fees=totals.total_fees,
            total_volume_a=totals.total_volume_a,
            total_volume_b=totals.total_volume_b,
            total_volume=totals.total_volume,
            starting_equity=starting_equity,
            equity=self.equity(totals.total_pnl, starting_equity),
            volume_target=volume_target,
            volume_progress_a=volume_progress(totals.total_volume_a, volume_target),
            volume_progress_b=volume_progress(totals.total_volume_b, volume_target),
            pair_count=len(pairs),
            winning_pairs=winning,
            win_rate=win_rate,
        )
