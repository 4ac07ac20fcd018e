"""Bucket accumulator and the bucket shapes every breakdown emits.

A bucket is an aggregation cell receiving qualifying trades.  All
breakdowns (time-based and categorical) share one accumulator so the
zero-default and breakeven rules are applied identically everywhere:

* a missing ``pnl`` is 0 for arithmetic and is neither a win nor a loss;
* a missing ``rr_ratio`` is left out of the R:R average;
* every ratio has an explicit 0 result when its denominator is 0.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel

from ..core.enums import TradeDirection, TradeEmotion
from ..core.models import Trade


def safe_ratio(numerator: float, denominator: float) -> float:
    """``numerator / denominator``, or 0.0 when the denominator is zero."""
    if denominator == 0:
        return 0.0
    return numerator / denominator


def percentage(part: int, whole: int) -> float:
    return safe_ratio(part, whole) * 100


@dataclass
class BucketAccumulator:
    """Running totals for one bucket."""

    trade_count: int = 0
    win_count: int = 0
    loss_count: int = 0
    total_pnl: float = 0.0
    rr_total: float = 0.0
    rr_count: int = 0
    best: float | None = None
    worst: float | None = None

    def record(self, trade: Trade) -> None:
        pnl = trade.realized_pnl
        self.trade_count += 1
        self.total_pnl += pnl
        if pnl > 0:
            self.win_count += 1
        elif pnl < 0:
            self.loss_count += 1
        if trade.rr_ratio is not None:
            self.rr_total += trade.rr_ratio
            self.rr_count += 1
        if self.best is None or pnl > self.best:
            self.best = pnl
        if self.worst is None or pnl < self.worst:
            self.worst = pnl

    @property
    def win_rate(self) -> float:
        return percentage(self.win_count, self.trade_count)

    @property
    def avg_pnl(self) -> float:
        return safe_ratio(self.total_pnl, self.trade_count)

    @property
    def avg_rr(self) -> float:
        return safe_ratio(self.rr_total, self.rr_count)

    @property
    def best_trade(self) -> float:
        return self.best if self.best is not None else 0.0

    @property
    def worst_trade(self) -> float:
        return self.worst if self.worst is not None else 0.0

    def common_fields(self) -> dict[str, Any]:
        """Fields shared by every bucket shape."""
        return {
            "trade_count": self.trade_count,
            "win_count": self.win_count,
            "win_rate": self.win_rate,
            "total_pnl": self.total_pnl,
            "avg_pnl": self.avg_pnl,
        }


def sort_by_count(buckets: list[Any]) -> list[Any]:
    """Descending by trade_count; ties keep first-seen order."""
    return sorted(buckets, key=lambda b: b.trade_count, reverse=True)


# ---------------------------------------------------------------------------
# Output shapes
# ---------------------------------------------------------------------------

class BucketStats(BaseModel):
    trade_count: int = 0
    win_count: int = 0
    win_rate: float = 0.0  # Percent, 0-100
    total_pnl: float = 0.0
    avg_pnl: float = 0.0


class DayOfWeekStats(BucketStats):
    day: int  # 0 = Sunday .. 6 = Saturday
    day_name: str


class HourOfDayStats(BucketStats):
    hour: int  # 0-23


class WeeklyPnl(BucketStats):
    week_start: str  # Monday, "YYYY-MM-DD"


class MonthlyReturn(BucketStats):
    month: str  # "YYYY-MM"


class DirectionStats(BucketStats):
    direction: TradeDirection
    avg_rr: float = 0.0
    best_trade: float = 0.0
    worst_trade: float = 0.0


class EmotionStats(BucketStats):
    emotion: TradeEmotion


class SetupStats(BucketStats):
    setup: str


class MistakeStats(BucketStats):
    """P&L associated with a mistake tag.

    A trade listing several mistakes is counted in each of them, so
    totals across tags are not a partition of the trade set.
    """

    mistake: str


class RiskRewardBucket(BucketStats):
    bucket: str  # RiskRewardRange label


class PairBreakdown(BucketStats):
    pair: str
    loss_count: int = 0
