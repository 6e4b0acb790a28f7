"""Per-pair slippage and combined totals.

All functions are pure computation. Missing numeric fields count as zero so
a pair with one incomplete leg still shows partial totals.
"""

from dataclasses import dataclass

from hedge_tracker.models import HedgedPair, Trade


@dataclass(frozen=True)
class Slippage:
    """Fill divergence between the two legs. Always non-negative."""
    open_slippage: float
    close_slippage: float
    total_slippage: float


@dataclass(frozen=True)
class PairTotals:
    total_fee: float
    total_pnl: float
    trading_volume: float  # notional at entry, both legs


@dataclass(frozen=True)
class PairSummary:
    """One dashboard row."""
    pair_id: str
    team: str
    slippage: Slippage
    totals: PairTotals


def _num(value: float | None) -> float:
    return value if value is not None else 0.0


def notional_volume(trade: Trade) -> float:
    """Entry notional of one leg: open price times quantity."""
    return _num(trade.open_price) * _num(trade.quantity)


def slippage(pair: HedgedPair) -> Slippage:
    a, b = pair.leg_a, pair.leg_b
    open_slippage = abs(_num(b.open_price) - _num(a.open_price))
    close_slippage = abs(_num(b.close_price) - _num(a.close_price))
    return Slippage(
        open_slippage=open_slippage,
        close_slippage=close_slippage,
        total_slippage=open_slippage + close_slippage,
    )


def totals(pair: HedgedPair) -> PairTotals:
    a, b = pair.leg_a, pair.leg_b
    return PairTotals(
        total_fee=_num(a.fee) + _num(b.fee),
        total_pnl=_num(a.pnl) + _num(b.pnl),
        trading_volume=notional_volume(a) + notional_volume(b),
    )


def summarize(pair: HedgedPair) -> PairSummary:
    return PairSummary(
        pair_id=pair.id,
        team=pair.team,
        slippage=slippage(pair),
        totals=totals(pair),
    )
