"""Workspace model: a user's hedge pairs plus their portfolio targets.

Only used as an input shape; storing workspaces is left to the caller.
"""

from pydantic import Field

from hedge_tracker.models.base import RecordModel
from hedge_tracker.models.hedged_pair import HedgedPair


class Workspace(RecordModel):
    hedged_pairs: list[HedgedPair] = Field(default_factory=list)
    monthly_volume_target: float | None = Field(default=None, ge=0)
    starting_equity: float | None = None  # None falls back to EngineConfig
