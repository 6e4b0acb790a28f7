"""Tests for trade and pair normalization at the engine boundary."""

import copy
import logging

import pytest
from pydantic import ValidationError

from hedge_tracker.models import HedgedPair, Trade
from hedge_tracker.services.trade_normalizer import (
    InvalidInput,
    normalize_pair,
    normalize_trade,
    validate_for_risk,
)

from conftest import BTC_PAIR, EMPTY_TRADE


def _record(**overrides) -> dict:
    data = {
        "openPrice": 3800.0,
        "closePrice": 3810.0,
        "quantity": 1.0,
        "coin": "eth",
        "fee": 1.5,
        "pnl": 10.0,
        "leverage": 100,
    }
    data.update(overrides)
    return data


# ---------------------------------------------------------------------------
# 1. normalize_trade
# ---------------------------------------------------------------------------

class TestNormalizeTrade:
    def test_valid_record(self):
        trade = normalize_trade(_record())
        assert isinstance(trade, Trade)
        assert trade.open_price == 3800.0
        assert trade.leverage == 100
        assert trade.coin == "ETH"

    def test_negative_fee_becomes_magnitude(self):
        trade = normalize_trade(_record(fee=-9.97))
        assert trade.fee == pytest.approx(9.97)

    def test_uid_alias_maps_to_external_id(self):
        trade = normalize_trade(_record(uid="10027267"))
        assert trade.external_id == "10027267"

    def test_snake_case_names_accepted(self):
        trade = normalize_trade({"open_price": 10.0, "external_id": "x"})
        assert trade.open_price == 10.0
        assert trade.external_id == "x"

    def test_missing_numbers_are_allowed(self):
        trade = normalize_trade({"coin": "BTC"})
        assert isinstance(trade, Trade)
        assert trade.quantity is None
        assert trade.fee is None

    def test_already_normalized_trade_passes_through(self):
        trade = Trade(open_price=1.0)
        assert normalize_trade(trade) is trade

    @pytest.mark.parametrize("field", ["openPrice", "closePrice", "quantity", "leverage"])
    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_numbers_rejected(self, field, value):
        result = normalize_trade(_record(**{field: value}))
        assert isinstance(result, InvalidInput)
        assert result.fields

    @pytest.mark.parametrize("field", ["openPrice", "closePrice", "quantity", "leverage"])
    def test_negative_numbers_rejected(self, field):
        result = normalize_trade(_record(**{field: -1}))
        assert isinstance(result, InvalidInput)

    def test_european_formatted_string_rejected(self):
        # separator disambiguation belongs to the text parser, not the engine
        result = normalize_trade(_record(openPrice="3.828,65"))
        assert isinstance(result, InvalidInput)

    def test_close_before_open_rejected(self):
        result = normalize_trade(_record(
            openTime="2025-10-22T15:59:09",
            closeTime="2025-10-22T15:58:01",
        ))
        assert isinstance(result, InvalidInput)
        assert "closeTime" in result.reason

    def test_unknown_field_rejected(self):
        result = normalize_trade(_record(side="long"))
        assert isinstance(result, InvalidInput)

    def test_non_mapping_rejected(self):
        result = normalize_trade([1, 2, 3])
        assert isinstance(result, InvalidInput)
        assert "mapping" in result.reason

    def test_rejection_logged_at_debug(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="hedge_tracker.services.trade_normalizer"):
            normalize_trade(_record(quantity=-1))
        assert "Rejected trade record" in caplog.text

    def test_trade_is_immutable(self):
        trade = normalize_trade(_record())
        with pytest.raises(ValidationError):
            trade.fee = 0.0


# ---------------------------------------------------------------------------
# 2. validate_for_risk
# ---------------------------------------------------------------------------

class TestValidateForRisk:
    def test_complete_trade_passes(self):
        assert isinstance(validate_for_risk(_record()), Trade)

    @pytest.mark.parametrize("field,attr", [
        ("quantity", "quantity"),
        ("openPrice", "open_price"),
        ("leverage", "leverage"),
    ])
    def test_missing_required_field(self, field, attr):
        record = _record()
        del record[field]
        result = validate_for_risk(record)
        assert isinstance(result, InvalidInput)
        assert result.fields == (attr,)

    def test_zero_quantity_flagged(self):
        result = validate_for_risk(_record(quantity=0))
        assert isinstance(result, InvalidInput)
        assert "quantity" in result.fields

    def test_malformed_record_reason_preserved(self):
        result = validate_for_risk(_record(leverage=float("nan")))
        assert isinstance(result, InvalidInput)
        assert "leverage" in result.reason


# ---------------------------------------------------------------------------
# 3. normalize_pair
# ---------------------------------------------------------------------------

def test_normalize_pair_accepts_original_shape():
    pair = normalize_pair(BTC_PAIR)
    assert isinstance(pair, HedgedPair)
    assert pair.leg_a.external_id == "10027267"
    assert pair.leg_b.fee == pytest.approx(5.93)
    assert str(pair.trade_date) == "2025-10-22"


def test_normalize_pair_rejects_bad_leg():
    record = copy.deepcopy(BTC_PAIR)
    record["tradeB"]["quantity"] = float("nan")
    result = normalize_pair(record)
    assert isinstance(result, InvalidInput)


def test_normalize_pair_accepts_unfilled_leg():
    pair = normalize_pair({**BTC_PAIR, "tradeB": EMPTY_TRADE})
    assert isinstance(pair, HedgedPair)
    assert pair.leg_b.open_time is None
    assert pair.leg_b.close_time is None
    assert pair.leg_b.external_id is None
    assert pair.leg_a.external_id == "10027267"


@pytest.mark.parametrize("blank", ["", "   "])
def test_blank_timestamps_read_as_missing(blank):
    trade = normalize_trade(_record(openTime=blank, closeTime="2025-10-22T15:59:09"))
    assert isinstance(trade, Trade)
    assert trade.open_time is None
    assert trade.close_time is not None


def test_normalize_pair_requires_both_legs():
    record = copy.deepcopy(BTC_PAIR)
    del record["tradeB"]
    assert isinstance(normalize_pair(record), InvalidInput)


def test_pair_serializes_with_wire_names(btc_pair):
    dumped = btc_pair.model_dump(by_alias=True)
    assert set(dumped) >= {"id", "date", "team", "legA", "legB", "note"}
    assert dumped["legA"]["externalId"] == "10027267"
