"""Trade record normalization at the engine boundary.

Records arrive from the order form or the text-parsing collaborator already
split into fields. Malformed records come back as an ``InvalidInput`` value
instead of an exception: a half-filled form is an expected state, and the
caller decides whether to block on it or render "N/A".
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ValidationError

from hedge_tracker.models import HedgedPair, Trade

logger = logging.getLogger(__name__)

# Fields a trade needs before anything divides by them
RISK_REQUIRED_FIELDS = ("quantity", "open_price", "leverage")


@dataclass(frozen=True)
class InvalidInput:
    """A record that cannot enter the calculation it was meant for."""
    reason: str
    fields: tuple[str, ...] = ()


def _invalid_from_error(exc: ValidationError, prefix: str = "") -> InvalidInput:
    fields: list[str] = []
    messages: list[str] = []
    for err in exc.errors():
        loc = ".".join(str(part) for part in err["loc"]) or "record"
        if prefix:
            loc = f"{prefix}.{loc}"
        if loc not in fields:
            fields.append(loc)
        messages.append(f"{loc}: {err['msg']}")
    return InvalidInput(reason="; ".join(messages), fields=tuple(fields))


def _validate(model: type[BaseModel], record: Any, label: str):
    if isinstance(record, model):
        return record
    if not isinstance(record, Mapping):
        return InvalidInput(reason=f"{label} must be a mapping, got {type(record).__name__}")
    try:
        return model.model_validate(dict(record))
    except ValidationError as e:
        invalid = _invalid_from_error(e)
        logger.debug(f"Rejected {label} record: {invalid.reason}")
        return invalid


def normalize_trade(record: Mapping[str, Any] | Trade) -> Trade | InvalidInput:
    """Validate one trade leg.

    The fee is stored as a magnitude and numeric fields must be finite.
    Missing numbers are allowed here; aggregation counts them as zero.
    """
    return _validate(Trade, record, "trade")


def normalize_pair(record: Mapping[str, Any] | HedgedPair) -> HedgedPair | InvalidInput:
    """Validate a hedge pair and both of its legs."""
    return _validate(HedgedPair, record, "pair")


def validate_for_risk(record: Mapping[str, Any] | Trade) -> Trade | InvalidInput:
    """Normalize a trade and require the fields risk calculation divides by."""
    trade = normalize_trade(record)
    if isinstance(trade, InvalidInput):
        return trade

    missing = tuple(name for name in RISK_REQUIRED_FIELDS if not getattr(trade, name))
    if missing:
        invalid = InvalidInput(
            reason=f"missing or zero for risk calculation: {', '.join(missing)}",
            fields=missing,
        )
        logger.debug(f"Trade not risk-ready: {invalid.reason}")
        return invalid
    return trade
