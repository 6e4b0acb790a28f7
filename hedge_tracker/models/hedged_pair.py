"""HedgedPair model: two trades executed as one intended hedge."""

from datetime import date

from pydantic import AliasChoices, Field, field_validator

from hedge_tracker.models.base import RecordModel
from hedge_tracker.models.trade import Trade


class HedgedPair(RecordModel):
    id: str = Field(min_length=1)
    trade_date: date | None = Field(
        default=None,
        validation_alias=AliasChoices("date", "trade_date"),
        serialization_alias="date",
    )
    team: str = ""  # owner label
    leg_a: Trade = Field(
        validation_alias=AliasChoices("legA", "leg_a", "tradeA"),
        serialization_alias="legA",
    )
    leg_b: Trade = Field(
        validation_alias=AliasChoices("legB", "leg_b", "tradeB"),
        serialization_alias="legB",
    )
    note: str | None = None

    @field_validator("id")
    @classmethod
    def _trim_id(cls, value: str) -> str:
        text = value.strip()
        if not text:
            raise ValueError("must not be empty")
        return text
