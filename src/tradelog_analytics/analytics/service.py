"""Analytics facade over a trade store.

``TradeAnalytics`` fetches the trader's journal from an ``ITradeStore``,
applies the query filter, and hands the resulting collection to the
pure engines.  Nothing is cached: every call reads the store again and
recomputes, so two calls over the same trades give identical results.

Usage::

    settings = load_settings("tradelog.toml")
    configure_logging(settings)
    analytics = TradeAnalytics(InMemoryTradeStore.from_json("trades.json"), settings)
    stats = analytics.get_trade_stats()
    snap = await analytics.snapshot_async(date_from="2025-01-01")
    print(snap.summary.max_drawdown, snap.stats.profit_factor)
"""

from __future__ import annotations

import asyncio
from datetime import datetime
from typing import Any, Callable, Sequence

from pydantic import BaseModel, ConfigDict

from ..core.config import Settings
from ..core.enums import TradeStatus
from ..core.interfaces import ITradeStore
from ..core.models import Trade, TradeFilter, TradePage
from ..observability.logger import get_logger, request_scope
from ..store import query
from . import breakdowns, equity, time_buckets
from .buckets import (
    DayOfWeekStats,
    DirectionStats,
    EmotionStats,
    HourOfDayStats,
    MistakeStats,
    MonthlyReturn,
    PairBreakdown,
    RiskRewardBucket,
    SetupStats,
    WeeklyPnl,
)
from .equity import DrawdownPoint, EquityCurvePoint
from .portfolio import PortfolioSummary, portfolio_summary
from .stats import TradeStats, compute_trade_stats
from .time_buckets import TradeHeatmapDay

logger = get_logger(__name__)


class AnalyticsSnapshot(BaseModel):
    """Every breakdown for one date range, computed from one store read."""

    model_config = ConfigDict(ser_json_inf_nan="constants")

    date_from: str | None = None
    date_to: str | None = None
    stats: TradeStats
    day_of_week: list[DayOfWeekStats]
    hour_of_day: list[HourOfDayStats]
    weekly_pnl: list[WeeklyPnl]
    monthly_returns: list[MonthlyReturn]
    direction: list[DirectionStats]
    emotion: list[EmotionStats]
    setup: list[SetupStats]
    mistakes: list[MistakeStats]
    risk_reward: list[RiskRewardBucket]
    pairs: list[PairBreakdown]
    equity_curve: list[EquityCurvePoint]
    drawdown_curve: list[DrawdownPoint]
    summary: PortfolioSummary


class TradeAnalytics:
    """Performance analytics for one trader's journal.

    Parameters
    ----------
    store : ITradeStore
        Read-only source of the trader's trades.  Its exceptions are not
        caught or retried here.
    settings : Settings | None
        Page size and reporting timezone.  Defaults to ``Settings()``.
    """

    def __init__(self, store: ITradeStore, settings: Settings | None = None) -> None:
        self._store = store
        self._settings = settings or Settings()

    # ------------------------------------------------------------------ #
    # Trade queries                                                        #
    # ------------------------------------------------------------------ #

    def _all_trades(self) -> Sequence[Trade]:
        return self._store.list_trades()

    def get_trades(
        self, cursor: datetime | None = None, filters: TradeFilter | None = None
    ) -> TradePage:
        """Newest-first page of the journal."""
        return query.paginate(
            self._all_trades(),
            cursor=cursor,
            filters=filters,
            page_size=self._settings.analytics.page_size,
        )

    def get_closed_trades(
        self, date_from: str | None = None, date_to: str | None = None
    ) -> list[Trade]:
        return query.closed_trades(self._all_trades(), date_from, date_to)

    def get_open_positions(self) -> list[Trade]:
        return query.open_positions(self._all_trades())

    def get_day_trades(self, trade_date: str) -> list[Trade]:
        return query.day_trades(self._all_trades(), trade_date)

    # ------------------------------------------------------------------ #
    # Metrics                                                              #
    # ------------------------------------------------------------------ #

    def get_trade_stats(self, filters: TradeFilter | None = None) -> TradeStats:
        """Core metrics over closed trades matching ``filters``.

        Any ``status`` on ``filters`` is overridden with closed.
        """
        filters = (filters or TradeFilter()).model_copy(
            update={"status": TradeStatus.CLOSED}
        )
        return compute_trade_stats(query.filter_trades(self._all_trades(), filters))

    def get_trade_heatmap(self, year: int, month: int) -> list[TradeHeatmapDay]:
        return time_buckets.trade_heatmap(self.get_closed_trades(), year, month)

    def get_day_of_week_stats(self, date_from=None, date_to=None) -> list[DayOfWeekStats]:
        return time_buckets.day_of_week_stats(self.get_closed_trades(date_from, date_to))

    def get_hour_of_day_stats(self, date_from=None, date_to=None) -> list[HourOfDayStats]:
        return time_buckets.hour_of_day_stats(
            self.get_closed_trades(date_from, date_to),
            self._settings.analytics.tzinfo,
        )

    def get_weekly_pnl(self, date_from=None, date_to=None) -> list[WeeklyPnl]:
        return time_buckets.weekly_pnl(self.get_closed_trades(date_from, date_to))

    def get_monthly_returns(self, date_from=None, date_to=None) -> list[MonthlyReturn]:
        return time_buckets.monthly_returns(self.get_closed_trades(date_from, date_to))

    def get_direction_stats(self, date_from=None, date_to=None) -> list[DirectionStats]:
        return breakdowns.direction_stats(self.get_closed_trades(date_from, date_to))

    def get_emotion_stats(self, date_from=None, date_to=None) -> list[EmotionStats]:
        return breakdowns.emotion_stats(self.get_closed_trades(date_from, date_to))

    def get_setup_stats(self, date_from=None, date_to=None) -> list[SetupStats]:
        return breakdowns.setup_stats(self.get_closed_trades(date_from, date_to))

    def get_mistake_stats(self, date_from=None, date_to=None) -> list[MistakeStats]:
        return breakdowns.mistake_stats(self.get_closed_trades(date_from, date_to))

    def get_risk_reward_distribution(
        self, date_from=None, date_to=None
    ) -> list[RiskRewardBucket]:
        return breakdowns.risk_reward_distribution(
            self.get_closed_trades(date_from, date_to)
        )

    def get_pair_breakdown(self, date_from=None, date_to=None) -> list[PairBreakdown]:
        return breakdowns.pair_breakdown(self.get_closed_trades(date_from, date_to))

    def get_equity_curve(self, date_from=None, date_to=None) -> list[EquityCurvePoint]:
        return equity.equity_curve(self.get_closed_trades(date_from, date_to))

    def get_drawdown_curve(self, date_from=None, date_to=None) -> list[DrawdownPoint]:
        return equity.drawdown_curve(self.get_closed_trades(date_from, date_to))

    def get_portfolio_summary(self, date_from=None, date_to=None) -> PortfolioSummary:
        """Summary over open and closed trades in the date range."""
        in_range = query.filter_trades(
            self._all_trades(), TradeFilter(date_from=date_from, date_to=date_to)
        )
        return portfolio_summary(query.sort_ascending(in_range))

    # ------------------------------------------------------------------ #
    # Snapshot                                                             #
    # ------------------------------------------------------------------ #

    def _engines(
        self, date_from: str | None, date_to: str | None
    ) -> dict[str, Callable[[], Any]]:
        """Bind every engine to one read of the store."""
        trades = tuple(self._all_trades())
        closed = tuple(query.closed_trades(trades, date_from, date_to))
        in_range = tuple(query.sort_ascending(query.filter_trades(
            trades, TradeFilter(date_from=date_from, date_to=date_to)
        )))
        tz = self._settings.analytics.tzinfo

        return {
            "stats": lambda: compute_trade_stats(closed),
            "day_of_week": lambda: time_buckets.day_of_week_stats(closed),
            "hour_of_day": lambda: time_buckets.hour_of_day_stats(closed, tz),
            "weekly_pnl": lambda: time_buckets.weekly_pnl(closed),
            "monthly_returns": lambda: time_buckets.monthly_returns(closed),
            "direction": lambda: breakdowns.direction_stats(closed),
            "emotion": lambda: breakdowns.emotion_stats(closed),
            "setup": lambda: breakdowns.setup_stats(closed),
            "mistakes": lambda: breakdowns.mistake_stats(closed),
            "risk_reward": lambda: breakdowns.risk_reward_distribution(closed),
            "pairs": lambda: breakdowns.pair_breakdown(closed),
            "equity_curve": lambda: equity.equity_curve(closed),
            "drawdown_curve": lambda: equity.drawdown_curve(closed),
            "summary": lambda: portfolio_summary(in_range),
        }

    def snapshot(
        self, date_from: str | None = None, date_to: str | None = None
    ) -> AnalyticsSnapshot:
        """Compute every breakdown sequentially."""
        with request_scope():
            engines = self._engines(date_from, date_to)
            logger.info("snapshot_started", date_from=date_from, date_to=date_to)
            results = {name: run() for name, run in engines.items()}
            snap = AnalyticsSnapshot(date_from=date_from, date_to=date_to, **results)
            logger.info("snapshot_finished", closed_trades=snap.stats.total_trades)
        return snap

    async def snapshot_async(
        self, date_from: str | None = None, date_to: str | None = None
    ) -> AnalyticsSnapshot:
        """Compute every breakdown concurrently and join the results.

        The engines share one immutable trade tuple and write nothing, so
        they run side by side in worker threads without locking.
        """
        with request_scope():
            engines = self._engines(date_from, date_to)
            logger.info(
                "snapshot_started", date_from=date_from, date_to=date_to, concurrent=True
            )
            values = await asyncio.gather(
                *(asyncio.to_thread(run) for run in engines.values())
            )
            snap = AnalyticsSnapshot(
                date_from=date_from, date_to=date_to, **dict(zip(engines, values))
            )
            logger.info("snapshot_finished", closed_trades=snap.stats.total_trades)
        return snap
