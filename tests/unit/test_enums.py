"""Test all enums have expected members."""

from tradelog_analytics.core.enums import (
    RiskRewardRange,
    TradeDirection,
    TradeEmotion,
    TradeStatus,
)


class TestTradeDirection:
    def test_members(self):
        assert {d.value for d in TradeDirection} == {"long", "short"}


class TestTradeStatus:
    def test_values(self):
        assert TradeStatus.OPEN.value == "open"
        assert TradeStatus.CLOSED.value == "closed"
        assert TradeStatus.BREAKEVEN.value == "breakeven"


class TestTradeEmotion:
    def test_vocabulary(self):
        assert [e.value for e in TradeEmotion] == [
            "confident", "neutral", "fearful", "greedy", "revenge",
        ]


class TestRiskRewardRange:
    def test_labels_in_order(self):
        assert [r.value for r in RiskRewardRange] == [
            "< 1:1", "1:1 - 2:1", "2:1 - 3:1", "3:1+",
        ]
