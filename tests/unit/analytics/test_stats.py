"""Tests for compute_trade_stats: core closed-trade metrics."""

import json
import math

import pytest

from tradelog_analytics.analytics.stats import (
    PROFIT_FACTOR_UNBOUNDED,
    TradeStats,
    compute_trade_stats,
    profit_factor,
)

from .conftest import make_trade


class TestEmptySet:
    def test_all_zero(self):
        stats = compute_trade_stats([])
        assert stats == TradeStats()
        assert stats.total_trades == 0
        assert stats.win_rate == 0.0
        assert stats.profit_factor == 0.0
        assert stats.best_trade == 0.0
        assert stats.worst_trade == 0.0

    def test_no_nan_or_inf(self):
        dumped = compute_trade_stats([]).model_dump()
        for key, value in dumped.items():
            assert math.isfinite(value), key


class TestSameDayScenario:
    """Closed trades [+100, -40, +60] on one day."""

    @pytest.fixture
    def stats(self):
        return compute_trade_stats([
            make_trade(100.0), make_trade(-40.0), make_trade(60.0),
        ])

    def test_counts(self, stats):
        assert stats.total_trades == 3
        assert stats.win_count == 2
        assert stats.loss_count == 1
        assert stats.breakeven_count == 0

    def test_win_rate(self, stats):
        assert stats.win_rate == pytest.approx(66.6667, abs=1e-3)

    def test_pnl(self, stats):
        assert stats.total_pnl == pytest.approx(120.0)
        assert stats.avg_pnl == pytest.approx(40.0)

    def test_profit_factor(self, stats):
        assert stats.profit_factor == pytest.approx(4.0)
        assert not stats.profit_factor_unbounded

    def test_avg_win_loss(self, stats):
        assert stats.avg_win == pytest.approx(80.0)
        assert stats.avg_loss == pytest.approx(40.0)

    def test_best_worst(self, stats):
        assert stats.best_trade == 100.0
        assert stats.worst_trade == -40.0


class TestMissingPnl:
    def test_missing_pnl_is_breakeven(self):
        stats = compute_trade_stats([make_trade(None), make_trade(10.0)])
        assert stats.breakeven_count == 1
        assert stats.win_count == 1
        assert stats.total_pnl == 10.0
        assert stats.avg_pnl == 5.0

    def test_missing_pnl_counts_toward_best_worst(self):
        stats = compute_trade_stats([make_trade(None), make_trade(10.0)])
        assert stats.worst_trade == 0.0
        assert stats.best_trade == 10.0

    def test_all_losses_best_is_negative(self):
        stats = compute_trade_stats([make_trade(-5.0), make_trade(-10.0)])
        assert stats.best_trade == -5.0
        assert stats.worst_trade == -10.0


class TestProfitFactor:
    def test_unbounded_when_no_losses(self):
        stats = compute_trade_stats([make_trade(50.0), make_trade(0.0)])
        assert stats.profit_factor == PROFIT_FACTOR_UNBOUNDED
        assert stats.profit_factor_unbounded
        assert not math.isnan(stats.profit_factor)

    def test_zero_when_only_breakeven(self):
        stats = compute_trade_stats([make_trade(0.0), make_trade(None)])
        assert stats.profit_factor == 0.0

    def test_zero_when_only_losses(self):
        assert profit_factor(0.0, 30.0) == 0.0

    def test_unbounded_serialises_to_json(self):
        stats = compute_trade_stats([make_trade(50.0)])
        payload = json.loads(stats.model_dump_json())
        assert payload["profit_factor"] == math.inf


class TestRiskReward:
    def test_avg_rr_excludes_missing(self):
        stats = compute_trade_stats([
            make_trade(10.0, rr_ratio=1.0),
            make_trade(10.0, rr_ratio=3.0),
            make_trade(10.0),
        ])
        assert stats.avg_rr == pytest.approx(2.0)

    def test_avg_rr_zero_without_values(self):
        stats = compute_trade_stats([make_trade(10.0)])
        assert stats.avg_rr == 0.0


class TestIdempotence:
    def test_repeated_calls_identical(self):
        trades = [make_trade(1.1), make_trade(-2.3), make_trade(0.7)]
        assert compute_trade_stats(trades) == compute_trade_stats(trades)

    def test_accepts_generator(self):
        stats = compute_trade_stats(make_trade(p) for p in (1.0, -1.0))
        assert stats.total_trades == 2
