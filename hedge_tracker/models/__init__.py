"""Engine records."""

from hedge_tracker.models.trade import Trade
from hedge_tracker.models.hedged_pair import HedgedPair
from hedge_tracker.models.workspace import Workspace

__all__ = [
    "Trade",
    "HedgedPair",
    "Workspace",
]
