"""Portfolio summary: one snapshot over a trader's whole journal.

Two trade subsets feed the summary and must not be mixed up:

* P&L totals and position counts use open and closed trades;
* drawdown, streaks and active days use closed trades only.

First/last trade dates span every trade handed in.
"""

from __future__ import annotations

from typing import Iterable

from pydantic import BaseModel

from ..core.models import Trade
from .equity import drawdown_summary, streaks


class PortfolioSummary(BaseModel):
    # balances
    total_pnl: float = 0.0
    open_pnl: float = 0.0
    closed_pnl: float = 0.0

    # positions
    open_positions: int = 0
    closed_positions: int = 0

    # risk
    max_drawdown: float = 0.0
    max_drawdown_pct: float = 0.0
    current_drawdown: float = 0.0

    # streaks
    current_streak: int = 0  # Positive = wins, negative = losses
    longest_win_streak: int = 0
    longest_loss_streak: int = 0

    # time
    first_trade_date: str | None = None
    last_trade_date: str | None = None
    active_days: int = 0  # Distinct trade dates among closed trades


def portfolio_summary(trades: Iterable[Trade]) -> PortfolioSummary:
    """Compose balances, risk, streak and time figures for ``trades``."""
    trades = list(trades)
    open_trades = [t for t in trades if t.is_open]
    closed = [t for t in trades if t.is_closed]

    open_pnl = sum(t.realized_pnl for t in open_trades)
    closed_pnl = sum(t.realized_pnl for t in closed)

    dd = drawdown_summary(closed)
    streak = streaks(closed)
    dates = [t.trade_date for t in trades]

    return PortfolioSummary(
        total_pnl=closed_pnl + open_pnl,
        open_pnl=open_pnl,
        closed_pnl=closed_pnl,
        open_positions=len(open_trades),
        closed_positions=len(closed),
        max_drawdown=dd.max_drawdown,
        max_drawdown_pct=dd.max_drawdown_pct,
        current_drawdown=dd.current_drawdown,
        current_streak=streak.current_streak,
        longest_win_streak=streak.longest_win_streak,
        longest_loss_streak=streak.longest_loss_streak,
        first_trade_date=min(dates) if dates else None,
        last_trade_date=max(dates) if dates else None,
        active_days=len({t.trade_date for t in closed}),
    )
