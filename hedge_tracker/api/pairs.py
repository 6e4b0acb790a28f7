"""Pair API: slippage and combined totals for one hedge pair."""

from dataclasses import asdict

from fastapi import APIRouter

from hedge_tracker.models import HedgedPair
from hedge_tracker.services import pair_aggregator

router = APIRouter(prefix="/api/pairs", tags=["pairs"])


@router.post("/metrics")
def pair_metrics(pair: HedgedPair):
    return asdict(pair_aggregator.summarize(pair))
