"""Bonding-curve price chart: trades to USD price series, stats, graduation line.

Price per trade is the executed price: AWE paid (or received) per token,
converted to USD with the caller-supplied AWE price.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Iterable, Mapping
from decimal import Decimal
from typing import Any

from tokenlaunch.domain.models.pagination import Page, page_records
from tokenlaunch.domain.models.trade import ChartPoint, PriceStats, TradeEvent, VisualMapPiece
from tokenlaunch.parser.trades import parse_trade_page

logger = logging.getLogger(__name__)

GRADUATION_THRESHOLD_AWE = Decimal(100000)
DEFAULT_TOTAL_SUPPLY = Decimal(100_000_000_000)  # 100B tokens

BELOW_THRESHOLD_COLOR = "#E73420"
ABOVE_THRESHOLD_COLOR = "#28A86E"

EMPTY_SERIES_LOOKBACK_MS = 30 * 24 * 60 * 60 * 1000


def transform_trades_to_chart(
    trades: Page | Iterable[Mapping[str, Any] | TradeEvent] | None,
    awe_price_usd: Decimal | float,
) -> list[ChartPoint]:
    """Build a chronological USD price series from a page of buy/sell records.

    Malformed trades (non-positive amounts, unknown side, bad timestamp) are
    skipped. Input order does not matter; output is sorted by timestamp.
    """
    records = page_records(trades)
    events = parse_trade_page(records)
    awe_price = Decimal(str(awe_price_usd))

    points = [ChartPoint(e.timestamp_ms, float(e.quote_per_base * awe_price)) for e in events]
    points.sort(key=lambda p: p.timestamp_ms)

    if len(points) < len(records):
        logger.debug("Chart built from %d of %d trades", len(points), len(records))
    return points


def calculate_price_stats(points: list[ChartPoint]) -> PriceStats:
    if not points:
        return PriceStats()

    prices = [p.price_usd for p in points]
    current = prices[-1]
    previous = prices[-2] if len(prices) > 1 else current
    change = current - previous

    return PriceStats(
        current_price=current,
        previous_price=previous,
        highest_price=max(prices),
        lowest_price=min(prices),
        price_change=change,
        price_change_percent=change / previous * 100 if previous > 0 else 0.0,
    )


def calculate_graduation_price_threshold(
    total_supply: Decimal | int | float | None,
    awe_price_usd: Decimal | float,
    *,
    graduation_threshold_awe: Decimal | int = GRADUATION_THRESHOLD_AWE,
) -> float:
    """USD token price at which the curve reaches the graduation market cap."""
    supply = DEFAULT_TOTAL_SUPPLY if total_supply is None else Decimal(str(total_supply))
    if supply == 0:
        return 0.0
    price_awe = Decimal(graduation_threshold_awe) / supply
    return float(price_awe * Decimal(str(awe_price_usd)))


def calculate_visual_map_pieces(graduation_threshold: float) -> list[VisualMapPiece]:
    return [
        VisualMapPiece(gt=0, lte=graduation_threshold, color=BELOW_THRESHOLD_COLOR),
        VisualMapPiece(gt=graduation_threshold, color=ABOVE_THRESHOLD_COLOR),
    ]


def get_earliest_timestamp(points: list[ChartPoint], now_ms: int | None = None) -> int:
    """First point's timestamp; 30 days before now for an empty series."""
    if not points:
        now = int(time.time() * 1000) if now_ms is None else now_ms
        return now - EMPTY_SERIES_LOOKBACK_MS
    return points[0].timestamp_ms


def filter_points_since(points: list[ChartPoint], start_ms: int) -> list[ChartPoint]:
    return [p for p in points if p.timestamp_ms >= start_ms]
