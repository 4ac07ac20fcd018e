"""Equity curve, drawdown and streak analysis.

All computations are a single forward pass over closed trades in
chronological order (``trade_date``, then ``created_at``).  Same-day
P&L is summed first, so the curve has one point per active day.

Drawdown is measured on cumulative realised P&L, not on an account
balance: the running peak starts at 0 and only moves up, and the
drawdown at each point is ``peak - cumulative_pnl`` (never negative).

Streaks are signed run lengths: +N after N consecutive wins, -N after
N consecutive losses, 0 right after a breakeven trade.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator

from pydantic import BaseModel

from ..core.models import Trade
from ..store.query import sort_ascending

logger = logging.getLogger(__name__)


class EquityCurvePoint(BaseModel):
    date: str
    cumulative_pnl: float
    trade_count: int  # Trades closed on this day


class DrawdownPoint(BaseModel):
    date: str
    drawdown: float  # peak - cumulative_pnl, >= 0
    drawdown_pct: float  # Percent of peak; 0 while peak <= 0


@dataclass(frozen=True)
class DrawdownSummary:
    max_drawdown: float = 0.0
    max_drawdown_pct: float = 0.0
    current_drawdown: float = 0.0
    peak: float = 0.0
    final_pnl: float = 0.0


@dataclass(frozen=True)
class StreakSummary:
    current_streak: int = 0  # Positive = wins, negative = losses
    longest_win_streak: int = 0
    longest_loss_streak: int = 0


@dataclass(frozen=True)
class _DayPoint:
    date: str
    cumulative_pnl: float
    trade_count: int
    peak: float

    @property
    def drawdown(self) -> float:
        return self.peak - self.cumulative_pnl

    @property
    def drawdown_pct(self) -> float:
        if self.peak <= 0:
            return 0.0
        return self.drawdown / self.peak * 100


def _daily_points(trades: Iterable[Trade]) -> Iterator[_DayPoint]:
    """Walk trades chronologically, yielding one point per active day."""
    cumulative = 0.0
    peak = 0.0
    current_date: str | None = None
    day_pnl = 0.0
    day_count = 0

    for t in sort_ascending(trades):
        if t.trade_date != current_date:
            if current_date is not None:
                cumulative += day_pnl
                peak = max(peak, cumulative)
                yield _DayPoint(current_date, cumulative, day_count, peak)
            current_date = t.trade_date
            day_pnl = 0.0
            day_count = 0
        day_pnl += t.realized_pnl
        day_count += 1

    if current_date is not None:
        cumulative += day_pnl
        peak = max(peak, cumulative)
        yield _DayPoint(current_date, cumulative, day_count, peak)


def equity_curve(trades: Iterable[Trade]) -> list[EquityCurvePoint]:
    """Cumulative realised P&L per active day."""
    return [
        EquityCurvePoint(
            date=p.date, cumulative_pnl=p.cumulative_pnl, trade_count=p.trade_count
        )
        for p in _daily_points(trades)
    ]


def drawdown_curve(trades: Iterable[Trade]) -> list[DrawdownPoint]:
    """Peak-to-current decline per active day."""
    return [
        DrawdownPoint(date=p.date, drawdown=p.drawdown, drawdown_pct=p.drawdown_pct)
        for p in _daily_points(trades)
    ]


def drawdown_summary(trades: Iterable[Trade]) -> DrawdownSummary:
    """Maximum and current drawdown.

    ``max_drawdown_pct`` is the percentage recorded at the point where
    ``max_drawdown`` was reached, so the two always describe the same
    day.
    """
    max_dd = 0.0
    max_dd_pct = 0.0
    last: _DayPoint | None = None

    for p in _daily_points(trades):
        if p.drawdown > max_dd:
            max_dd = p.drawdown
            max_dd_pct = p.drawdown_pct
        last = p

    if last is None:
        return DrawdownSummary()
    logger.debug("Max drawdown %.2f (%.2f%%) over closed trades", max_dd, max_dd_pct)
    return DrawdownSummary(
        max_drawdown=max_dd,
        max_drawdown_pct=max_dd_pct,
        current_drawdown=last.drawdown,
        peak=last.peak,
        final_pnl=last.cumulative_pnl,
    )


def streaks(trades: Iterable[Trade]) -> StreakSummary:
    """Signed current streak and the longest win/loss runs.

    A breakeven trade (including one with no recorded P&L) resets the
    current streak to 0 without starting a new run.  The longest runs
    are maxima over the whole scan, not just the run in progress.
    """
    current = 0
    longest_win = 0
    longest_loss = 0

    for t in sort_ascending(trades):
        pnl = t.realized_pnl
        if pnl > 0:
            current = current + 1 if current > 0 else 1
            longest_win = max(longest_win, current)
        elif pnl < 0:
            current = current - 1 if current < 0 else -1
            longest_loss = max(longest_loss, -current)
        else:
            current = 0

    return StreakSummary(
        current_streak=current,
        longest_win_streak=longest_win,
        longest_loss_streak=longest_loss,
    )
