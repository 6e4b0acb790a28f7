"""Dashboard API: portfolio summary and per-pair rows for a workspace."""

import logging
from dataclasses import asdict

from fastapi import APIRouter, Depends

from hedge_tracker.api.deps import get_portfolio_aggregator
from hedge_tracker.models import Workspace
from hedge_tracker.services import pair_aggregator
from hedge_tracker.services.portfolio import PortfolioAggregator

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/dashboard", tags=["dashboard"])


@router.post("/summary")
def dashboard_summary(
    workspace: Workspace,
    aggregator: PortfolioAggregator = Depends(get_portfolio_aggregator),
):
    """Aggregated stats across all pairs plus one row per pair."""
    summary = aggregator.summarize(
        workspace.hedged_pairs,
        starting_equity=workspace.starting_equity,
        volume_target=workspace.monthly_volume_target,
    )
    logger.info(
        f"Dashboard summary for {summary.pair_count} pairs: "
        f"pnl=${summary.total_pnl:.2f} equity=${summary.equity:.2f}"
    )
    return {
        "summary": asdict(summary),
        "pairs": [asdict(pair_aggregator.summarize(p)) for p in workspace.hedged_pairs],
    }
