"""Trade query filter: selection, ordering and pagination.

Everything here operates on an already-fetched trade collection and
returns new lists; the input is never mutated.

Two orderings are in use:

* the journal listing is newest first (``trade_date`` desc, then
  ``created_at`` desc) and paginates with a ``created_at`` cursor;
* analytics consumers read oldest first (``trade_date`` asc, then
  ``created_at`` asc).
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Iterable

from ..core.enums import TradeStatus
from ..core.models import Trade, TradeFilter, TradePage, parse_trade_date

DEFAULT_PAGE_SIZE = 20

# Trades without a creation timestamp sort first within their day
_NO_TIMESTAMP = datetime.min.replace(tzinfo=timezone.utc)


def _created_key(trade: Trade) -> datetime:
    return trade.created_at or _NO_TIMESTAMP


def _chronological_key(trade: Trade) -> tuple[str, datetime]:
    return trade.trade_date, _created_key(trade)


def matches(trade: Trade, filters: TradeFilter | None) -> bool:
    """True if ``trade`` satisfies every constraint set on ``filters``."""
    if filters is None:
        return True
    if filters.status is not None and trade.status != filters.status:
        return False
    if filters.pair is not None and trade.pair != filters.pair:
        return False
    if filters.direction is not None and trade.direction != filters.direction:
        return False
    # Zero-padded ISO dates compare correctly as strings
    if filters.date_from is not None and trade.trade_date < filters.date_from:
        return False
    if filters.date_to is not None and trade.trade_date > filters.date_to:
        return False
    return True


def filter_trades(
    trades: Iterable[Trade], filters: TradeFilter | None = None
) -> list[Trade]:
    """Return the trades matching ``filters`` in input order."""
    return [t for t in trades if matches(t, filters)]


def sort_ascending(trades: Iterable[Trade]) -> list[Trade]:
    """Oldest first by (trade_date, created_at)."""
    return sorted(trades, key=_chronological_key)


def sort_descending(trades: Iterable[Trade]) -> list[Trade]:
    """Newest first by (trade_date, created_at)."""
    return sorted(trades, key=_chronological_key, reverse=True)


def closed_trades(
    trades: Iterable[Trade],
    date_from: str | None = None,
    date_to: str | None = None,
) -> list[Trade]:
    """Closed trades inside the optional inclusive date range, oldest first.

    This is the shared input of every breakdown function.
    """
    filters = TradeFilter(
        status=TradeStatus.CLOSED, date_from=date_from, date_to=date_to
    )
    return sort_ascending(filter_trades(trades, filters))


def open_positions(trades: Iterable[Trade]) -> list[Trade]:
    """Open trades, most recent ``trade_date`` first."""
    return sort_descending(t for t in trades if t.is_open)


def day_trades(trades: Iterable[Trade], trade_date: str) -> list[Trade]:
    """Closed trades on a single date, in creation order."""
    parse_trade_date(trade_date)
    selected = [t for t in trades if t.is_closed and t.trade_date == trade_date]
    return sorted(selected, key=_created_key)


def paginate(
    trades: Iterable[Trade],
    cursor: datetime | None = None,
    filters: TradeFilter | None = None,
    page_size: int = DEFAULT_PAGE_SIZE,
) -> TradePage:
    """One page of the newest-first listing.

    ``cursor`` is the ``created_at`` of the last row of the previous page;
    only rows created strictly before it are returned.  Rows without a
    ``created_at`` cannot be placed against a cursor, so they only appear
    on the first page, and a page ending on such a row is the last one.
    """
    if page_size < 1:
        raise ValueError(f"page_size must be positive, got {page_size}")

    rows = sort_descending(filter_trades(trades, filters))
    if cursor is not None:
        if cursor.tzinfo is None:
            cursor = cursor.replace(tzinfo=timezone.utc)
        rows = [t for t in rows if t.created_at is not None and t.created_at < cursor]

    page = rows[:page_size]
    has_more = len(rows) > page_size and page[-1].created_at is not None
    return TradePage(
        data=page,
        next_cursor=page[-1].created_at if has_more else None,
        has_more=has_more,
    )
