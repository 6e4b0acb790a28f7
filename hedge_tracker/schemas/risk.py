"""Pydantic schemas for the risk API."""

from typing import Literal

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class LiquidationRequest(BaseModel):
    # Missing or zero values are allowed: the result degrades to "not computable"
    balance: float | None = None
    entry_price: float | None = None
    quantity: float | None = None
    leverage: float | None = None
    maintenance_percent: float | None = None
    safety_percent: float | None = None

    model_config = {"alias_generator": to_camel, "populate_by_name": True, "allow_inf_nan": False}


class HedgeCompareRequest(BaseModel):
    balance_a: float | None = None
    balance_b: float | None = None
    entry_price: float | None = None  # live reference price, may not have arrived yet
    quantity: float | None = None
    side: Literal["long", "short"] = "long"
    leverage: float | None = Field(default=None, gt=0)
    maintenance_percent: float | None = None
    safety_percent: float | None = None

    model_config = {"alias_generator": to_camel, "populate_by_name": True, "allow_inf_nan": False}
