"""Core performance metrics over a set of closed trades.

The caller is responsible for passing closed trades only (see
``store.query.closed_trades``).  Every metric has a zero default so an
empty set yields an all-zero ``TradeStats`` instead of an error.
"""

from __future__ import annotations

import logging
import math
from typing import Iterable

from pydantic import BaseModel, ConfigDict

from ..core.models import Trade
from .buckets import percentage, safe_ratio

logger = logging.getLogger(__name__)

# Gross profit with no gross loss.  Serialised to JSON as ``Infinity``.
PROFIT_FACTOR_UNBOUNDED = math.inf


class TradeStats(BaseModel):
    """Aggregate scalar metrics for a closed-trade set."""

    model_config = ConfigDict(ser_json_inf_nan="constants")

    total_trades: int = 0
    win_count: int = 0
    loss_count: int = 0
    breakeven_count: int = 0
    win_rate: float = 0.0  # Percent, 0-100
    total_pnl: float = 0.0
    avg_pnl: float = 0.0
    avg_rr: float = 0.0
    best_trade: float = 0.0
    worst_trade: float = 0.0
    profit_factor: float = 0.0
    avg_win: float = 0.0
    avg_loss: float = 0.0  # Magnitude, >= 0

    @property
    def profit_factor_unbounded(self) -> bool:
        return self.profit_factor == PROFIT_FACTOR_UNBOUNDED


def profit_factor(gross_profit: float, gross_loss: float) -> float:
    """Gross profit over gross loss magnitude.

    ``PROFIT_FACTOR_UNBOUNDED`` when there are profits but no losses,
    0.0 when there are neither.
    """
    if gross_loss > 0:
        return gross_profit / gross_loss
    if gross_profit > 0:
        return PROFIT_FACTOR_UNBOUNDED
    return 0.0


def compute_trade_stats(trades: Iterable[Trade]) -> TradeStats:
    """Compute ``TradeStats`` for closed trades.

    A missing ``pnl`` is treated as 0 and classified as breakeven; a
    missing ``rr_ratio`` is excluded from ``avg_rr``.
    """
    pnls: list[float] = []
    rr_values: list[float] = []
    gross_profit = 0.0
    gross_loss = 0.0
    wins = losses = 0

    for t in trades:
        pnl = t.realized_pnl
        pnls.append(pnl)
        if pnl > 0:
            wins += 1
            gross_profit += pnl
        elif pnl < 0:
            losses += 1
            gross_loss += pnl
        if t.rr_ratio is not None:
            rr_values.append(t.rr_ratio)

    total = len(pnls)
    if total == 0:
        return TradeStats()

    gross_loss = abs(gross_loss)
    total_pnl = sum(pnls)
    stats = TradeStats(
        total_trades=total,
        win_count=wins,
        loss_count=losses,
        breakeven_count=total - wins - losses,
        win_rate=percentage(wins, total),
        total_pnl=total_pnl,
        avg_pnl=total_pnl / total,
        avg_rr=safe_ratio(sum(rr_values), len(rr_values)),
        best_trade=max(pnls),
        worst_trade=min(pnls),
        profit_factor=profit_factor(gross_profit, gross_loss),
        avg_win=safe_ratio(gross_profit, wins),
        avg_loss=safe_ratio(gross_loss, losses),
    )
    logger.debug(
        "Trade stats: %d trades, win_rate=%.2f, pf=%s",
        total, stats.win_rate, stats.profit_factor,
    )
    return stats
