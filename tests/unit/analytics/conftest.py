"""Shared fixtures for analytics tests."""

from __future__ import annotations

import itertools
from datetime import datetime, timezone

import pytest

from tradelog_analytics.core.models import Trade
from tradelog_analytics.store.memory import InMemoryTradeStore

_ids = itertools.count(1)


def make_trade(
    pnl: float | None = 0.0,
    trade_date: str = "2025-01-06",
    *,
    status: str = "closed",
    direction: str = "long",
    pair: str = "EURUSD",
    created_at: datetime | str | None = None,
    rr_ratio: float | None = None,
    emotion: str | None = None,
    setup: str | None = None,
    mistakes: tuple[str, ...] | list[str] = (),
    trade_id: str | None = None,
) -> Trade:
    """Helper to create a Trade with sensible defaults."""
    return Trade(
        id=trade_id or f"trade_{next(_ids)}",
        user_id="user_1",
        pair=pair,
        direction=direction,
        status=status,
        trade_date=trade_date,
        created_at=created_at,
        pnl=pnl,
        rr_ratio=rr_ratio,
        emotion=emotion,
        setup=setup,
        mistakes=mistakes,
    )


def make_day_sequence(pnls: list[float], start_day: int = 6) -> list[Trade]:
    """One closed trade per consecutive January 2025 day."""
    return [
        make_trade(
            pnl,
            trade_date=f"2025-01-{start_day + i:02d}",
            created_at=datetime(2025, 1, start_day + i, 10, tzinfo=timezone.utc),
        )
        for i, pnl in enumerate(pnls)
    ]


@pytest.fixture
def journal_trades() -> list[Trade]:
    """A small mixed journal: closed wins/losses/breakeven plus open trades."""
    return [
        make_trade(100.0, "2025-01-06", created_at="2025-01-06T09:00:00Z",
                   pair="EURUSD", rr_ratio=2.5, emotion="confident",
                   setup="breakout"),
        make_trade(-40.0, "2025-01-06", created_at="2025-01-06T14:00:00Z",
                   pair="GBPUSD", direction="short", rr_ratio=0.8,
                   emotion="fearful", mistakes=["moved_stop", "oversized"]),
        make_trade(60.0, "2025-01-07", created_at="2025-01-07T09:30:00Z",
                   pair="EURUSD", rr_ratio=1.5, emotion="confident",
                   setup="breakout"),
        make_trade(None, "2025-01-08", created_at="2025-01-08T16:00:00Z",
                   pair="XAUUSD", setup="range", mistakes=["moved_stop"]),
        make_trade(-80.0, "2025-01-13", created_at="2025-01-13T09:15:00Z",
                   pair="EURUSD", direction="short", emotion="revenge",
                   mistakes=["revenge_trade"]),
        make_trade(25.0, "2025-01-14", status="open",
                   created_at="2025-01-14T11:00:00Z", pair="GBPUSD"),
        make_trade(-5.0, "2025-02-03", status="open",
                   created_at="2025-02-03T11:00:00Z", pair="EURUSD"),
    ]


@pytest.fixture
def store(journal_trades) -> InMemoryTradeStore:
    return InMemoryTradeStore(journal_trades)
