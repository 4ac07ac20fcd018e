"""Core domain models consumed by the analytics engine.

A ``Trade`` mirrors the record shape the trade store hands out.  The
engine only reads trades; every field it does not use for analytics is
carried through untouched.
"""

from __future__ import annotations

import re
from datetime import date, datetime, timezone
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .enums import TradeDirection, TradeEmotion, TradeStatus
from .errors import MalformedTradeDateError

_TRADE_DATE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")

# NaN or infinite P&L would leak into every ratio downstream
FiniteFloat = Annotated[float, Field(allow_inf_nan=False)]


def parse_trade_date(value: Any) -> date:
    """Validate a ``YYYY-MM-DD`` string and return the calendar date.

    Monthly grouping slices the first seven characters of the string, so
    anything other than the exact zero-padded form is rejected rather
    than bucketed.
    """
    if not isinstance(value, str) or not _TRADE_DATE_RE.fullmatch(value):
        raise MalformedTradeDateError(value)
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise MalformedTradeDateError(value) from None


def _as_utc(value: datetime | None) -> datetime | None:
    if value is None or value.tzinfo is not None:
        return value
    return value.replace(tzinfo=timezone.utc)


# ---------------------------------------------------------------------------
# Trade
# ---------------------------------------------------------------------------

class Trade(BaseModel):
    """One journal entry as stored by the trade store."""

    model_config = ConfigDict(frozen=True)

    id: str
    user_id: str = ""
    pair: str  # Instrument symbol, e.g. "EURUSD"
    direction: TradeDirection
    status: TradeStatus = TradeStatus.CLOSED
    trade_date: str  # "YYYY-MM-DD", no time component
    created_at: datetime | None = None
    closed_at: datetime | None = None

    pnl: FiniteFloat | None = None
    rr_ratio: FiniteFloat | None = None
    emotion: TradeEmotion | None = None
    setup: str | None = None
    mistakes: tuple[str, ...] = ()

    # Journal fields the engine does not analyse
    entry_price: float | None = None
    exit_price: float | None = None
    lot_size: float | None = None
    notes: str | None = None
    tags: tuple[str, ...] = ()

    @field_validator("trade_date", mode="before")
    @classmethod
    def _check_trade_date(cls, v: Any) -> str:
        parse_trade_date(v)
        return v

    @field_validator("created_at", "closed_at")
    @classmethod
    def _default_utc(cls, v: datetime | None) -> datetime | None:
        return _as_utc(v)

    @field_validator("mistakes", "tags", mode="before")
    @classmethod
    def _none_to_empty(cls, v: Any) -> Any:
        return () if v is None else v

    @property
    def realized_pnl(self) -> float:
        """P&L used for arithmetic; a missing value counts as zero."""
        return self.pnl if self.pnl is not None else 0.0

    @property
    def is_closed(self) -> bool:
        return self.status == TradeStatus.CLOSED

    @property
    def is_open(self) -> bool:
        return self.status == TradeStatus.OPEN


# ---------------------------------------------------------------------------
# Query types
# ---------------------------------------------------------------------------

class TradeFilter(BaseModel):
    """AND-combined trade selection.  ``None`` means no constraint."""

    status: TradeStatus | None = None
    pair: str | None = None
    direction: TradeDirection | None = None
    date_from: str | None = None  # Inclusive
    date_to: str | None = None  # Inclusive

    @field_validator("date_from", "date_to", mode="before")
    @classmethod
    def _check_bounds(cls, v: Any) -> Any:
        if v is not None:
            parse_trade_date(v)
        return v


class TradePage(BaseModel):
    """One page of the newest-first trade listing."""

    data: list[Trade] = Field(default_factory=list)
    next_cursor: datetime | None = None
    has_more: bool = False
