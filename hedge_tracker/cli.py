"""CLI tool for quick calculations.

Usage:
    python -m hedge_tracker.cli liquidation <balance> <entry_price> <quantity> [leverage]
    python -m hedge_tracker.cli summary <workspace.json>
"""

import logging
import math
import sys
from pathlib import Path

from pydantic import ValidationError

from hedge_tracker.config import EngineConfig, settings
from hedge_tracker.models import Workspace
from hedge_tracker.services import pair_aggregator
from hedge_tracker.services.liquidation import LiquidationRiskCalculator
from hedge_tracker.services.portfolio import PortfolioAggregator
from hedge_tracker.utils.formatting import (
    format_compact,
    format_currency,
    format_number,
    format_percent,
)
from hedge_tracker.utils.logging import setup_logging

logger = logging.getLogger(__name__)

USAGE = "Usage: python -m hedge_tracker.cli <command>"
COMMANDS = "Commands: liquidation, summary"


def _parse_float(label: str, text: str) -> float:
    try:
        value = float(text)
    except ValueError:
        print(f"{label} must be a number, got '{text}'.")
        sys.exit(1)
    if not math.isfinite(value):
        print(f"{label} must be finite.")
        sys.exit(1)
    return value


def liquidation(args: list[str], config: EngineConfig):
    """Print liquidation estimates for one account."""
    if len(args) not in (3, 4):
        print("Usage: python -m hedge_tracker.cli liquidation <balance> <entry_price> <quantity> [leverage]")
        sys.exit(1)

    balance = _parse_float("balance", args[0])
    entry_price = _parse_float("entry_price", args[1])
    quantity = _parse_float("quantity", args[2])
    leverage = _parse_float("leverage", args[3]) if len(args) == 4 else config.default_leverage

    info = LiquidationRiskCalculator(config).assess(balance, entry_price, quantity, leverage)
    if not info.computable:
        print("Liquidation: N/A (balance, entry price, quantity and leverage must be positive)")
        return

    print(f"Entry price:             {format_currency(entry_price)} (leverage {leverage:g}x)")
    print(f"Est. liq. price (long):  {format_currency(info.long_liquidation_price)}"
          f"  [{format_percent(info.distance_long_pct, 2)} away]")
    print(f"Est. liq. price (short): {format_currency(info.short_liquidation_price)}"
          f"  [{format_percent(info.distance_short_pct, 2)} away]")
    print(f"Maintenance amount:      {format_currency(info.maintenance_amount)}")
    print(f"Safety buffer:           {format_currency(info.safety_buffer_amount)}")
    print(f"Effective collateral:    {format_currency(info.effective_collateral)}")
    print(f"Margin required:         {format_currency(info.margin_required)}")
    verdict = "Safe" if info.is_safe else "High risk"
    print(f"Verdict:                 {verdict} ({info.buffer:.0f} price points), "
          f"can open: {'yes' if info.can_open else 'no'}")


def summary(args: list[str], config: EngineConfig):
    """Print the portfolio summary of a workspace export."""
    if len(args) != 1:
        print("Usage: python -m hedge_tracker.cli summary <workspace.json>")
        sys.exit(1)

    path = Path(args[0])
    try:
        workspace = Workspace.model_validate_json(path.read_text(encoding="utf-8"))
    except OSError as e:
        print(f"Cannot read {path}: {e}")
        sys.exit(1)
    except ValidationError as e:
        print(f"Invalid workspace file {path}:\n{e}")
        sys.exit(1)

    result = PortfolioAggregator(config).summarize(
        workspace.hedged_pairs,
        starting_equity=workspace.starting_equity,
        volume_target=workspace.monthly_volume_target,
    )
    logger.info(f"Loaded {result.pair_count} pairs from {path}")

    for pair in workspace.hedged_pairs:
        row = pair_aggregator.summarize(pair)
        print(
            f"{row.pair_id:>6} {pair.leg_a.coin or '?':<5} "
            f"open slip {format_number(row.slippage.open_slippage, 2):>8}  "
            f"close slip {format_number(row.slippage.close_slippage, 2):>8}  "
            f"fee {format_currency(row.totals.total_fee):>10}  "
            f"pnl {format_currency(row.totals.total_pnl):>10}"
        )

    print(f"\nPairs:          {result.pair_count} (win rate {format_percent(result.win_rate)})")
    print(f"Total PnL:      {format_currency(result.total_pnl)}")
    print(f"Total fees:     {format_currency(result.total_fees)}")
    print(f"Total volume:   {format_currency(result.total_volume)}")
    print(f"Equity:         {format_currency(result.equity)}")
    print(f"Volume A:       {format_compact(result.total_volume_a)} / "
          f"{format_compact(result.volume_target)} ({format_percent(result.volume_progress_a)})")
    print(f"Volume B:       {format_compact(result.total_volume_b)} / "
          f"{format_compact(result.volume_target)} ({format_percent(result.volume_progress_b)})")


def main():
    if len(sys.argv) < 2:
        print(USAGE)
        print(COMMANDS)
        sys.exit(1)

    setup_logging()
    config = EngineConfig.from_settings(settings)

    command = sys.argv[1]
    if command == "liquidation":
        liquidation(sys.argv[2:], config)
    elif command == "summary":
        summary(sys.argv[2:], config)
    else:
        print(f"Unknown command: {command}")
        sys.exit(1)


if __name__ == "__main__":
    main()
