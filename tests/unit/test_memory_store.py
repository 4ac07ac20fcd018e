"""Tests for InMemoryTradeStore loading and validation."""

import json

import pytest

from tradelog_analytics.core.errors import MalformedTradeError
from tradelog_analytics.store.memory import InMemoryTradeStore


def _record(**overrides):
    record = {
        "id": "t1",
        "user_id": "u1",
        "pair": "EURUSD",
        "direction": "long",
        "status": "closed",
        "trade_date": "2025-01-06",
        "created_at": "2025-01-06T09:00:00Z",
        "closed_at": None,
        "pnl": 12.5,
        "rr_ratio": None,
        "emotion": "neutral",
        "setup": None,
        "mistakes": [],
    }
    record.update(overrides)
    return record


class TestFromRecords:
    def test_loads(self):
        store = InMemoryTradeStore.from_records([_record(), _record(id="t2", pnl=None)])
        assert len(store) == 2
        trades = store.list_trades()
        assert trades[0].pnl == 12.5
        assert trades[1].pnl is None

    def test_list_is_immutable(self):
        store = InMemoryTradeStore.from_records([_record()])
        assert isinstance(store.list_trades(), tuple)

    def test_ignores_extra_columns(self):
        store = InMemoryTradeStore.from_records([_record(swap=0.0, commission=1.2)])
        assert len(store) == 1

    def test_malformed_date_names_record(self):
        with pytest.raises(MalformedTradeError, match=r"\[bad\].*trade_date"):
            InMemoryTradeStore.from_records([_record(id="bad", trade_date="2025-1-6")])

    def test_missing_id_uses_position(self):
        record = _record(direction="sideways")
        del record["id"]
        with pytest.raises(MalformedTradeError) as exc_info:
            InMemoryTradeStore.from_records([_record(), record])
        assert exc_info.value.record_id == "#1"


class TestFromJson:
    def test_loads_file(self, tmp_path):
        path = tmp_path / "trades.json"
        path.write_text(json.dumps([_record(), _record(id="t2")]))
        assert len(InMemoryTradeStore.from_json(path)) == 2

    def test_rejects_non_array(self, tmp_path):
        path = tmp_path / "trades.json"
        path.write_text(json.dumps({"trades": []}))
        with pytest.raises(MalformedTradeError):
            InMemoryTradeStore.from_json(path)

    def test_missing_file_propagates(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            InMemoryTradeStore.from_json(tmp_path / "nope.json")
