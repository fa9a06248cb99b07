"""Parse raw bonding-curve buy/sell records from the indexer into TradeEvent.

Raw records look like::

    {"id": ..., "trader": "0x..", "buyer": "0x..",      # or "seller"
     "aweAmount": "1500000000000000000", "tokenAmount": "...",
     "blockNumber": "123", "blockTimestamp": "1700000000",
     "transactionHash": "0x..", "tradeType": "BUY"}     # tradeType optional
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from tokenlaunch.domain.enums.malformed import MalformedReason
from tokenlaunch.domain.enums.trade import TradeSide
from tokenlaunch.domain.errors import AmountParseError, MalformedRecordError
from tokenlaunch.domain.models.amount import FixedAmount
from tokenlaunch.domain.models.trade import TradeEvent, TradeValidation
from tokenlaunch.utils.dates import is_valid_unix_seconds

logger = logging.getLogger(__name__)

TRADE_TYPE_KEY = "tradeType"
BUYER_KEY = "buyer"
SELLER_KEY = "seller"
QUOTE_AMOUNT_KEY = "aweAmount"
BASE_AMOUNT_KEY = "tokenAmount"
TIMESTAMP_KEY = "blockTimestamp"


def _record_id(record: Mapping[str, Any]) -> str | None:
    raw = record.get("id")
    return str(raw) if raw is not None else None


def classify_trade(record: Mapping[str, Any]) -> TradeSide:
    """Decide BUY or SELL for a raw record.

    An explicit ``tradeType`` tag wins and must be BUY or SELL. Without a tag
    the side is inferred from which role field the record carries.
    """
    tag = record.get(TRADE_TYPE_KEY)
    if tag:
        if tag not in (TradeSide.BUY, TradeSide.SELL):
            raise MalformedRecordError(
                MalformedReason.UNKNOWN_TRADE_TYPE,
                f"Invalid trade type: {tag!r}",
                _record_id(record),
            )
        return TradeSide(tag)

    if BUYER_KEY in record:
        return TradeSide.BUY
    if SELLER_KEY in record:
        return TradeSide.SELL
    raise MalformedRecordError(
        MalformedReason.UNDETERMINED_TRADE_TYPE,
        "Cannot determine trade type from record shape",
        _record_id(record),
    )


def _parse_amount(record: Mapping[str, Any], key: str) -> FixedAmount:
    if record.get(key) is None:
        raise MalformedRecordError(MalformedReason.MISSING_FIELD, f"Missing {key}", _record_id(record))
    try:
        amount = FixedAmount.parse(record[key])
    except AmountParseError as exc:
        raise MalformedRecordError(MalformedReason.INVALID_AMOUNT, str(exc), _record_id(record)) from exc
    if not amount.is_positive:
        raise MalformedRecordError(
            MalformedReason.NON_POSITIVE_AMOUNT,
            f"Non-positive {key}: {amount.wei}",
            _record_id(record),
        )
    return amount


def _parse_timestamp(record: Mapping[str, Any]) -> int:
    raw = record.get(TIMESTAMP_KEY)
    try:
        value = int(str(raw).strip())
    except ValueError as exc:
        raise MalformedRecordError(
            MalformedReason.INVALID_TIMESTAMP,
            f"Invalid {TIMESTAMP_KEY}: {raw!r}",
            _record_id(record),
        ) from exc
    if not is_valid_unix_seconds(value):
        raise MalformedRecordError(
            MalformedReason.INVALID_TIMESTAMP,
            f"{TIMESTAMP_KEY} out of range: {value}",
            _record_id(record),
        )
    return value


def _parse_block_number(record: Mapping[str, Any]) -> int | None:
    raw = record.get("blockNumber")
    try:
        return int(str(raw)) if raw is not None else None
    except ValueError:
        return None


def parse_trade(record: Mapping[str, Any] | TradeEvent) -> TradeEvent:
    """Validate one raw record into a TradeEvent. Raises MalformedRecordError."""
    if isinstance(record, TradeEvent):
        return record

    quote_amount = _parse_amount(record, QUOTE_AMOUNT_KEY)
    base_amount = _parse_amount(record, BASE_AMOUNT_KEY)
    side = classify_trade(record)
    role_key = BUYER_KEY if side == TradeSide.BUY else SELLER_KEY

    return TradeEvent(
        id=_record_id(record) or "",
        trader_address=str(record.get("trader") or record.get(role_key) or ""),
        side=side,
        base_amount=base_amount,
        quote_amount=quote_amount,
        block_timestamp=_parse_timestamp(record),
        block_number=_parse_block_number(record),
        tx_hash=str(record.get("transactionHash") or ""),
    )


def parse_trade_page(records: Iterable[Mapping[str, Any] | TradeEvent]) -> list[TradeEvent]:
    """Parse every record, skipping (and logging) the malformed ones."""
    events: list[TradeEvent] = []
    for record in records:
        try:
            events.append(parse_trade(record))
        except MalformedRecordError as exc:
            logger.warning("Skipping trade %s (%s): %s", exc.record_id, exc.reason.value, exc)
    return events


def validate_trade_data(record: Mapping[str, Any]) -> TradeValidation:
    """Report every problem with a raw trade record instead of stopping at the first."""
    errors: list[str] = []

    for key, message in (
        (QUOTE_AMOUNT_KEY, "Invalid or zero AWE amount"),
        (BASE_AMOUNT_KEY, "Invalid or zero token amount"),
    ):
        try:
            _parse_amount(record, key)
        except MalformedRecordError:
            errors.append(message)

    try:
        classify_trade(record)
    except MalformedRecordError:
        errors.append("Invalid or missing trade type")

    try:
        timestamp_ok = _parse_timestamp(record) > 0
    except MalformedRecordError:
        timestamp_ok = False
    if not timestamp_ok:
        errors.append("Invalid or missing block timestamp")

    record_id = _record_id(record)
    return TradeValidation(
        is_valid=not errors,
        errors=errors,
        trade_id=f"{record_id[:10]}..." if record_id else "unknown",
    )
