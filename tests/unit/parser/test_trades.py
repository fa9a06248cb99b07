from decimal import Decimal

import pytest

from tokenlaunch.domain.enums.malformed import MalformedReason
from tokenlaunch.domain.enums.trade import TradeSide
from tokenlaunch.domain.errors import MalformedRecordError
from tokenlaunch.domain.models.amount import FixedAmount
from tokenlaunch.parser.trades import classify_trade, parse_trade, parse_trade_page, validate_trade_data

WEI = 10**18


def _buy(**overrides) -> dict:
    record = {
        "id": "0xbuy000000000001",
        "trader": "0xtrader",
        "buyer": "0xtrader",
        "aweAmount": str(2 * WEI),
        "tokenAmount": str(1000 * WEI),
        "blockNumber": "100",
        "blockTimestamp": "1700000000",
        "transactionHash": "0xhash",
    }
    record.update(overrides)
    return record


def _sell(**overrides) -> dict:
    record = _buy(**overrides)
    record["seller"] = record.pop("buyer")
    return record


class TestClassifyTrade:
    def test_explicit_tag_wins(self):
        assert classify_trade(_buy(tradeType="SELL")) == TradeSide.SELL

    def test_infers_buy_from_buyer_field(self):
        assert classify_trade(_buy()) == TradeSide.BUY

    def test_infers_sell_from_seller_field(self):
        assert classify_trade(_sell()) == TradeSide.SELL

    def test_invalid_tag(self):
        with pytest.raises(MalformedRecordError) as exc_info:
            classify_trade(_buy(tradeType="SWAP"))
        assert exc_info.value.reason == MalformedReason.UNKNOWN_TRADE_TYPE

    def test_no_tag_no_role(self):
        record = _buy()
        del record["buyer"]
        with pytest.raises(MalformedRecordError) as exc_info:
            classify_trade(record)
        assert exc_info.value.reason == MalformedReason.UNDETERMINED_TRADE_TYPE

    def test_empty_tag_falls_back_to_shape(self):
        assert classify_trade(_sell(tradeType="")) == TradeSide.SELL


class TestParseTrade:
    def test_buy(self):
        event = parse_trade(_buy())
        assert event.side == TradeSide.BUY
        assert event.trader_address == "0xtrader"
        assert event.quote_amount == FixedAmount(2 * WEI)
        assert event.base_amount == FixedAmount(1000 * WEI)
        assert event.block_timestamp == 1700000000
        assert event.timestamp_ms == 1700000000000
        assert event.block_number == 100
        assert event.tx_hash == "0xhash"

    def test_quote_per_base(self):
        assert parse_trade(_buy()).quote_per_base == Decimal("0.002")

    def test_trader_falls_back_to_role_field(self):
        record = _sell()
        del record["trader"]
        assert parse_trade(record).trader_address == "0xtrader"

    def test_zero_base_amount(self):
        with pytest.raises(MalformedRecordError) as exc_info:
            parse_trade(_buy(tokenAmount="0"))
        assert exc_info.value.reason == MalformedReason.NON_POSITIVE_AMOUNT

    def test_negative_quote_amount(self):
        with pytest.raises(MalformedRecordError) as exc_info:
            parse_trade(_buy(aweAmount="-5"))
        assert exc_info.value.reason == MalformedReason.NON_POSITIVE_AMOUNT

    def test_unparseable_amount(self):
        with pytest.raises(MalformedRecordError) as exc_info:
            parse_trade(_buy(aweAmount="1.5e18"))
        assert exc_info.value.reason == MalformedReason.INVALID_AMOUNT

    def test_missing_amount(self):
        record = _buy()
        del record["tokenAmount"]
        with pytest.raises(MalformedRecordError) as exc_info:
            parse_trade(record)
        assert exc_info.value.reason == MalformedReason.MISSING_FIELD

    def test_bad_timestamp(self):
        with pytest.raises(MalformedRecordError) as exc_info:
            parse_trade(_buy(blockTimestamp="yesterday"))
        assert exc_info.value.reason == MalformedReason.INVALID_TIMESTAMP

    def test_out_of_range_timestamp(self):
        with pytest.raises(MalformedRecordError) as exc_info:
            parse_trade(_buy(blockTimestamp="1700000000000000"))
        assert exc_info.value.reason == MalformedReason.INVALID_TIMESTAMP

    def test_already_parsed_event_passes_through(self):
        event = parse_trade(_buy())
        assert parse_trade(event) is event


class TestParseTradePage:
    def test_skips_malformed_records(self, caplog):
        records = [_buy(id="a"), _buy(id="b", tokenAmount="0"), _sell(id="c"), _buy(id="d", tradeType="X")]
        events = parse_trade_page(records)
        assert [e.id for e in events] == ["a", "c"]
        assert "Skipping trade b" in caplog.text
        assert "Skipping trade d" in caplog.text

    def test_empty(self):
        assert parse_trade_page([]) == []


class TestValidateTradeData:
    def test_valid(self):
        result = validate_trade_data(_buy())
        assert result.is_valid
        assert result.errors == []
        assert result.trade_id == "0xbuy00000..."

    def test_collects_every_error(self):
        record = _buy(aweAmount="0", tokenAmount="", blockTimestamp="0", tradeType="HOLD")
        result = validate_trade_data(record)
        assert not result.is_valid
        assert result.errors == [
            "Invalid or zero AWE amount",
            "Invalid or zero token amount",
            "Invalid or missing trade type",
            "Invalid or missing block timestamp",
        ]

    def test_missing_id(self):
        record = _buy()
        del record["id"]
        assert validate_trade_data(record).trade_id == "unknown"
