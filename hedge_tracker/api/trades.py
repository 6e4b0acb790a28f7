"""Trade API: normalize structured trade records."""

from typing import Any

from fastapi import APIRouter, Body, HTTPException

from hedge_tracker.services.trade_normalizer import InvalidInput, normalize_trade, validate_for_risk

router = APIRouter(prefix="/api/trades", tags=["trades"])


def _reject(invalid: InvalidInput):
    raise HTTPException(
        status_code=422,
        detail={"reason": invalid.reason, "fields": list(invalid.fields)},
    )


@router.post("/normalize")
def normalize(record: Any = Body(...), for_risk: bool = False):
    """Validate a trade leg produced by the form or the text parser.

    With ``for_risk=true`` the trade must also carry quantity, open price and
    leverage.
    """
    trade = validate_for_risk(record) if for_risk else normalize_trade(record)
    if isinstance(trade, InvalidInput):
        _reject(trade)
    return trade.model_dump(mode="json", by_alias=True)
