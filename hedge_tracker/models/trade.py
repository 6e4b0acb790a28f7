"""Trade model: one leg of a hedge on one exchange."""

from datetime import datetime

from pydantic import AliasChoices, Field, field_validator, model_validator

from hedge_tracker.models.base import RecordModel


class Trade(RecordModel):
    external_id: str | None = Field(
        default=None,
        validation_alias=AliasChoices("externalId", "external_id", "uid"),
        serialization_alias="externalId",
    )  # opaque exchange reference
    open_price: float | None = Field(default=None, ge=0)
    close_price: float | None = Field(default=None, ge=0)
    open_time: datetime | None = None
    close_time: datetime | None = None
    quantity: float | None = Field(default=None, ge=0)
    coin: str = ""
    fee: float | None = None  # stored as a magnitude, see _fee_magnitude
    pnl: float | None = None  # signed realized PnL
    leverage: float | None = Field(default=None, ge=0)

    @field_validator("external_id", "open_time", "close_time", mode="before")
    @classmethod
    def _blank_as_missing(cls, value):
        # An unfilled form leg carries "" for its reference and timestamps
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("fee")
    @classmethod
    def _fee_magnitude(cls, value: float | None) -> float | None:
        if value is None:
            return None
        return abs(value)

    @field_validator("coin")
    @classmethod
    def _normalize_coin(cls, value: str) -> str:
        return value.strip().upper()

    @model_validator(mode="after")
    def _validate_times(self):
        if self.open_time is None or self.close_time is None:
            return self
        if (self.open_time.tzinfo is None) != (self.close_time.tzinfo is None):
            raise ValueError("openTime and closeTime must both carry a timezone or neither")
        if self.close_time < self.open_time:
            raise ValueError("closeTime must not be earlier than openTime")
        return self
