"""Categorical performance breakdowns.

Two presence policies are in use and deliberately differ:

* fixed vocabularies that are always fully reported, zero-filled
  (direction, risk:reward ranges);
* vocabularies where only categories present in the data are reported,
  most frequent first (emotion, setup, mistakes, pair).

All functions expect closed trades (``store.query.closed_trades``).
"""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import Iterable

from ..core.enums import RiskRewardRange, TradeDirection, TradeEmotion
from ..core.models import Trade
from .buckets import (
    BucketAccumulator,
    DirectionStats,
    EmotionStats,
    MistakeStats,
    PairBreakdown,
    RiskRewardBucket,
    SetupStats,
    sort_by_count,
)

logger = logging.getLogger(__name__)


def direction_stats(trades: Iterable[Trade]) -> list[DirectionStats]:
    """Long then short, both always present."""
    buckets = {d: BucketAccumulator() for d in TradeDirection}
    for t in trades:
        buckets[t.direction].record(t)

    return [
        DirectionStats(
            direction=d,
            avg_rr=b.avg_rr,
            best_trade=b.best_trade,
            worst_trade=b.worst_trade,
            **b.common_fields(),
        )
        for d, b in buckets.items()
    ]


def emotion_stats(trades: Iterable[Trade]) -> list[EmotionStats]:
    """Only emotions that appear in the data, most frequent first."""
    buckets: dict[TradeEmotion, BucketAccumulator] = defaultdict(BucketAccumulator)
    for t in trades:
        if t.emotion is not None:
            buckets[t.emotion].record(t)

    # Vocabulary order before the count sort keeps ties deterministic
    return sort_by_count([
        EmotionStats(emotion=e, **buckets[e].common_fields())
        for e in TradeEmotion
        if e in buckets
    ])


def setup_stats(trades: Iterable[Trade]) -> list[SetupStats]:
    """One bucket per distinct setup name, most frequent first."""
    buckets: dict[str, BucketAccumulator] = defaultdict(BucketAccumulator)
    for t in trades:
        if t.setup:
            buckets[t.setup].record(t)

    return sort_by_count([
        SetupStats(setup=name, **b.common_fields()) for name, b in buckets.items()
    ])


def mistake_stats(trades: Iterable[Trade]) -> list[MistakeStats]:
    """One bucket per mistake tag, most frequent first.

    Each trade is recorded once under every distinct tag it lists, so one
    trade can appear in several buckets.  Empty tags are ignored.
    """
    buckets: dict[str, BucketAccumulator] = defaultdict(BucketAccumulator)
    for t in trades:
        for tag in dict.fromkeys(m for m in t.mistakes if m):
            buckets[tag].record(t)

    return sort_by_count([
        MistakeStats(mistake=tag, **b.common_fields()) for tag, b in buckets.items()
    ])


def risk_reward_distribution(trades: Iterable[Trade]) -> list[RiskRewardBucket]:
    """Four fixed R:R ranges; trades without an ``rr_ratio`` are skipped."""
    buckets = {r: BucketAccumulator() for r in RiskRewardRange}
    skipped = 0
    for t in trades:
        if t.rr_ratio is None:
            skipped += 1
            continue
        buckets[RiskRewardRange.classify(t.rr_ratio)].record(t)

    if skipped:
        logger.debug("R:R distribution skipped %d trades without rr_ratio", skipped)
    return [
        RiskRewardBucket(bucket=r.value, **b.common_fields())
        for r, b in buckets.items()
    ]


def pair_breakdown(trades: Iterable[Trade]) -> list[PairBreakdown]:
    """Per-instrument results, most traded first."""
    buckets: dict[str, BucketAccumulator] = defaultdict(BucketAccumulator)
    for t in trades:
        buckets[t.pair].record(t)

    return sort_by_count([
        PairBreakdown(pair=pair, loss_count=b.loss_count, **b.common_fields())
        for pair, b in buckets.items()
    ])
