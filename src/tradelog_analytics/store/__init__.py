"""Trade store adapters and the trade query filter."""

from .memory import InMemoryTradeStore
from .query import (
    DEFAULT_PAGE_SIZE,
    closed_trades,
    day_trades,
    filter_trades,
    open_positions,
    paginate,
    sort_ascending,
    sort_descending,
)

__all__ = [
    "InMemoryTradeStore",
    "DEFAULT_PAGE_SIZE",
    "closed_trades",
    "day_trades",
    "filter_trades",
    "open_positions",
    "paginate",
    "sort_ascending",
    "sort_descending",
]
