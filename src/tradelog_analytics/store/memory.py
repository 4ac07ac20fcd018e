"""In-memory trade store.

Reference implementation of ``ITradeStore`` holding an immutable tuple
of trades.  Used by tests and by callers that already have the rows in
hand (for example a JSON export of the journal).
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterable, Mapping

from pydantic import ValidationError

from ..core.errors import MalformedTradeError
from ..core.models import Trade

logger = logging.getLogger(__name__)


class InMemoryTradeStore:
    """Read-only store over a fixed trade collection."""

    def __init__(self, trades: Iterable[Trade] = ()) -> None:
        self._trades: tuple[Trade, ...] = tuple(trades)

    def __len__(self) -> int:
        return len(self._trades)

    def list_trades(self) -> tuple[Trade, ...]:
        return self._trades

    @classmethod
    def from_records(cls, records: Iterable[Mapping[str, Any]]) -> InMemoryTradeStore:
        """Validate raw store rows into trades.

        Raises:
            MalformedTradeError: A row fails validation (including a
                malformed ``trade_date``).
        """
        trades = []
        for i, record in enumerate(records):
            try:
                trades.append(Trade.model_validate(record))
            except ValidationError as exc:
                record_id = record.get("id", f"#{i}")
                errors = "; ".join(
                    f"{'.'.join(str(p) for p in e['loc'])}: {e['msg']}"
                    for e in exc.errors()
                )
                raise MalformedTradeError(record_id, errors) from exc
        logger.debug("Loaded %d trade records", len(trades))
        return cls(trades)

    @classmethod
    def from_json(cls, path: str | Path) -> InMemoryTradeStore:
        """Load a JSON array of trade rows from ``path``."""
        with open(path) as f:
            records = json.load(f)
        if not isinstance(records, list):
            raise MalformedTradeError(str(path), "expected a JSON array of trades")
        return cls.from_records(records)
