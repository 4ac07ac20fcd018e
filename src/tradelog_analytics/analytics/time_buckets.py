"""Time-based performance breakdowns.

Answers questions like "Am I better on Tuesdays?", "Which hour of the
day loses money?" or "How did March go?".

Grouping keys:

* day-of-week, weekly and monthly buckets use ``trade_date`` only;
* hour-of-day uses the ``created_at`` timestamp, converted to the
  reporting timezone.

All functions expect closed trades (``store.query.closed_trades``).
"""

from __future__ import annotations

import logging
from collections import defaultdict
from datetime import datetime, time, timedelta, timezone, tzinfo
from typing import Iterable

from pydantic import BaseModel

from ..core.models import Trade, parse_trade_date
from .buckets import (
    BucketAccumulator,
    DayOfWeekStats,
    HourOfDayStats,
    MonthlyReturn,
    WeeklyPnl,
)

logger = logging.getLogger(__name__)

DAY_NAMES = ["Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"]

# Hour bucket for trades with no creation timestamp
DEFAULT_HOUR = 12


class TradeHeatmapDay(BaseModel):
    date: str
    trade_count: int = 0
    pnl: float = 0.0


def _midday(trade_date: str) -> datetime:
    """Anchor a date-only value at 12:00 so no offset can roll it a day."""
    return datetime.combine(parse_trade_date(trade_date), time(12))


def weekday_index(trade_date: str) -> int:
    """Day of week for ``trade_date`` with Sunday = 0 .. Saturday = 6."""
    return (_midday(trade_date).weekday() + 1) % 7


def entry_hour(trade: Trade, tz: tzinfo = timezone.utc) -> int:
    """Hour of ``created_at`` in ``tz``, or ``DEFAULT_HOUR`` if unknown."""
    if trade.created_at is None:
        return DEFAULT_HOUR
    return trade.created_at.astimezone(tz).hour


def week_start(trade_date: str) -> str:
    """Monday of the ISO week containing ``trade_date``."""
    day = _midday(trade_date)
    return (day - timedelta(days=day.weekday())).date().isoformat()


def month_key(trade_date: str) -> str:
    """``YYYY-MM`` prefix of the trade date string."""
    return trade_date[:7]


# ---------------------------------------------------------------------------
# Fixed buckets
# ---------------------------------------------------------------------------

def day_of_week_stats(trades: Iterable[Trade]) -> list[DayOfWeekStats]:
    """Seven buckets, Sunday first, zero-filled for days with no trades."""
    buckets = [BucketAccumulator() for _ in range(7)]
    for t in trades:
        buckets[weekday_index(t.trade_date)].record(t)

    return [
        DayOfWeekStats(day=i, day_name=DAY_NAMES[i], **b.common_fields())
        for i, b in enumerate(buckets)
    ]


def hour_of_day_stats(
    trades: Iterable[Trade], tz: tzinfo = timezone.utc
) -> list[HourOfDayStats]:
    """Twenty-four buckets by entry hour, zero-filled."""
    buckets = [BucketAccumulator() for _ in range(24)]
    for t in trades:
        buckets[entry_hour(t, tz)].record(t)

    return [
        HourOfDayStats(hour=h, **b.common_fields())
        for h, b in enumerate(buckets)
    ]


# ---------------------------------------------------------------------------
# Calendar buckets
# ---------------------------------------------------------------------------

def weekly_pnl(trades: Iterable[Trade]) -> list[WeeklyPnl]:
    """One bucket per active week, ascending by ``week_start``."""
    weeks: dict[str, BucketAccumulator] = defaultdict(BucketAccumulator)
    for t in trades:
        weeks[week_start(t.trade_date)].record(t)

    return [
        WeeklyPnl(week_start=key, **weeks[key].common_fields())
        for key in sorted(weeks)
    ]


def monthly_returns(trades: Iterable[Trade]) -> list[MonthlyReturn]:
    """One bucket per active month, ascending by ``month``."""
    months: dict[str, BucketAccumulator] = defaultdict(BucketAccumulator)
    for t in trades:
        months[month_key(t.trade_date)].record(t)

    return [
        MonthlyReturn(month=key, **months[key].common_fields())
        for key in sorted(months)
    ]


def trade_heatmap(
    trades: Iterable[Trade], year: int, month: int
) -> list[TradeHeatmapDay]:
    """Per-day trade count and P&L for one calendar month.

    Only days with at least one trade are returned, in date order.
    """
    if not 1 <= month <= 12:
        raise ValueError(f"month must be in 1..12, got {month}")
    prefix = f"{year:04d}-{month:02d}"

    days: dict[str, TradeHeatmapDay] = {}
    for t in trades:
        if month_key(t.trade_date) != prefix:
            continue
        day = days.setdefault(t.trade_date, TradeHeatmapDay(date=t.trade_date))
        day.trade_count += 1
        day.pnl += t.realized_pnl

    logger.debug("Heatmap %s: %d active days", prefix, len(days))
    return [days[d] for d in sorted(days)]
