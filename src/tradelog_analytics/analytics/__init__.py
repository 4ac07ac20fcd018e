"""Trading performance analytics engine.

Pure functions over an in-memory trade collection, plus the
``TradeAnalytics`` facade that reads a trade store.

Key components
--------------
compute_trade_stats     Win rate, profit factor, average win/loss, best/worst
day_of_week_stats       Sunday..Saturday buckets keyed on trade_date
hour_of_day_stats       0..23 buckets keyed on created_at
weekly_pnl              Buckets per ISO week (Monday start)
monthly_returns         Buckets per YYYY-MM
trade_heatmap           Per-day count and P&L for a calendar month
equity_curve            Cumulative realised P&L per active day
drawdown_curve          Peak-to-current decline per active day
streaks                 Signed current streak and longest win/loss runs
direction_stats         Long/short breakdown
emotion_stats           Breakdown by tagged emotion
setup_stats             Breakdown by setup name
mistake_stats           Fan-out breakdown by mistake tag
risk_reward_distribution  Four fixed R:R ranges
pair_breakdown          Per-instrument results
portfolio_summary       Balances, risk, streaks and activity in one object
TradeAnalytics          Store-backed facade with sync/async snapshots
"""

from .breakdowns import (
    direction_stats,
    emotion_stats,
    mistake_stats,
    pair_breakdown,
    risk_reward_distribution,
    setup_stats,
)
from .equity import drawdown_curve, drawdown_summary, equity_curve, streaks
from .portfolio import PortfolioSummary, portfolio_summary
from .service import AnalyticsSnapshot, TradeAnalytics
from .stats import PROFIT_FACTOR_UNBOUNDED, TradeStats, compute_trade_stats
from .time_buckets import (
    day_of_week_stats,
    hour_of_day_stats,
    monthly_returns,
    trade_heatmap,
    weekly_pnl,
)

__all__ = [
    "AnalyticsSnapshot",
    "PROFIT_FACTOR_UNBOUNDED",
    "PortfolioSummary",
    "TradeAnalytics",
    "TradeStats",
    "compute_trade_stats",
    "day_of_week_stats",
    "direction_stats",
    "drawdown_curve",
    "drawdown_summary",
    "emotion_stats",
    "equity_curve",
    "hour_of_day_stats",
    "mistake_stats",
    "monthly_returns",
    "pair_breakdown",
    "portfolio_summary",
    "risk_reward_distribution",
    "setup_stats",
    "streaks",
    "trade_heatmap",
    "weekly_pnl",
]
