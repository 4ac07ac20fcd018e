"""Enumerations used across the analytics engine."""

from enum import Enum


class TradeDirection(str, Enum):
    LONG = "long"
    SHORT = "short"


class TradeStatus(str, Enum):
    OPEN = "open"
    CLOSED = "closed"
    BREAKEVEN = "breakeven"  # Legacy status; neither open nor closed


class TradeEmotion(str, Enum):
    """Fixed emotion vocabulary a trader can attach to a trade."""

    CONFIDENT = "confident"
    NEUTRAL = "neutral"
    FEARFUL = "fearful"
    GREEDY = "greedy"
    REVENGE = "revenge"


class RiskRewardRange(str, Enum):
    """Risk:reward distribution ranges (lower bound inclusive)."""

    BELOW_ONE = "< 1:1"
    ONE_TO_TWO = "1:1 - 2:1"
    TWO_TO_THREE = "2:1 - 3:1"
    THREE_PLUS = "3:1+"

    @classmethod
    def classify(cls, rr_ratio: float) -> "RiskRewardRange":
        if rr_ratio < 1:
            return cls.BELOW_ONE
        if rr_ratio < 2:
            return cls.ONE_TO_TWO
        if rr_ratio < 3:
            return cls.TWO_TO_THREE
        return cls.THREE_PLUS
