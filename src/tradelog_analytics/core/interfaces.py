"""Protocol interfaces for the analytics engine.

The trade store is the only collaborator; implementations (in-memory,
database, HTTP) can be swapped without changing callers.
"""

from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable

from .models import Trade


@runtime_checkable
class ITradeStore(Protocol):
    """Read-only source of trade records for one trader.

    Failures (network, auth) propagate to the caller unchanged; retry
    policy belongs to the implementation.
    """

    def list_trades(self) -> Sequence[Trade]: ...
