"""Chart x-axis helpers: per-bucket deduplication and time-range windows."""

from __future__ import annotations

import logging
from collections.abc import Hashable, Sequence
from datetime import datetime, timezone
from typing import TypeVar

from tokenlaunch.domain.enums.chart import DedupStrategy, TimeFilter
from tokenlaunch.domain.models.trade import ChartPoint

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)

DAY_MS = 24 * 60 * 60 * 1000

TIME_FILTER_DAYS: dict[TimeFilter, int] = {
    TimeFilter.ONE_DAY: 1,
    TimeFilter.SEVEN_DAYS: 7,
    TimeFilter.ONE_MONTH: 30,
    TimeFilter.ONE_YEAR: 365,
}


def _aggregate(values: list[float], strategy: DedupStrategy) -> float:
    if strategy == DedupStrategy.EARLIEST:
        return values[0]
    if strategy == DedupStrategy.AVERAGE:
        return sum(values) / len(values)
    if strategy == DedupStrategy.SUM:
        return sum(values)
    if strategy == DedupStrategy.MAX:
        return max(values)
    if strategy == DedupStrategy.MIN:
        return min(values)
    return values[-1]


def deduplicate_chart_data(
    points: Sequence[tuple[K, float]],
    strategy: DedupStrategy | str = DedupStrategy.LATEST,
) -> list[tuple[K, float]]:
    """Collapse points sharing an x-axis bucket into one value per bucket.

    Buckets keep the order in which they were first seen. Pass the complete
    set of points at once; merging already-deduplicated pages changes results.
    """
    try:
        strategy = DedupStrategy(strategy)
    except ValueError:
        logger.warning("Unknown dedup strategy %r, using latest", strategy)
        strategy = DedupStrategy.LATEST

    grouped: dict[K, list[float]] = {}
    for bucket, value in points:
        grouped.setdefault(bucket, []).append(value)

    return [(bucket, _aggregate(values, strategy)) for bucket, values in grouped.items()]


def day_bucket(timestamp_ms: int) -> str:
    """UTC calendar day (YYYY-MM-DD) of a millisecond timestamp."""
    return datetime.fromtimestamp(timestamp_ms / 1000, tz=timezone.utc).date().isoformat()


def bucket_by_day(points: Sequence[ChartPoint]) -> list[tuple[str, float]]:
    """Re-key a price series by UTC day, ready for ``deduplicate_chart_data``."""
    return [(day_bucket(p.timestamp_ms), p.price_usd) for p in points]


def filter_by_time_range(
    points: Sequence[ChartPoint],
    time_filter: TimeFilter | str,
) -> list[ChartPoint]:
    """Keep the window ending at the newest point. The cutoff is relative to the data, not to now."""
    time_filter = TimeFilter(time_filter)
    ordered = sorted(points, key=lambda p: p.timestamp_ms)
    if time_filter == TimeFilter.MAX or not ordered:
        return ordered

    cutoff = ordered[-1].timestamp_ms - TIME_FILTER_DAYS[time_filter] * DAY_MS
    return [p for p in ordered if p.timestamp_ms >= cutoff]
