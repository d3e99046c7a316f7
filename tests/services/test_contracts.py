"""Tests for payload contracts and converters."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest
from pydantic import ValidationError

from renamectl.domain.items import EditSession, Item, RenameRecord
from renamectl.services.contracts import (
    CommitResultData,
    HistoryResultData,
    dump_validated,
    item_payload,
    record_payload,
    session_payload,
)

T0 = datetime(2026, 4, 1, 8, 30, tzinfo=UTC)


class TestConverters:
    def test_item_payload(self) -> None:
        item = Item(  # type: ignore[call-arg]
            id="a", name="A", tags=("t",), created=T0, modified=T0, size=10
        )
        data = item_payload(item)
        assert data["created"] == "2026-04-01T08:30:00Z"
        assert data["tags"] == ["t"]
        assert data["kind"] == "item"
        assert data["size"] == 10

    def test_session_payload_has_dirty(self) -> None:
        session = EditSession.open(Item(id="a", name="A"), started_at=T0).with_draft("B")
        data = session_payload(session)
        assert data["dirty"] is True
        assert data["started_at"] == "2026-04-01T08:30:00Z"

    def test_record_payload(self) -> None:
        record = RenameRecord(item_id="a", old_name="A", new_name="B", timestamp=T0)
        assert record_payload(record) == {
            "item_id": "a",
            "old_name": "A",
            "new_name": "B",
            "timestamp": "2026-04-01T08:30:00Z",
            "item_kind": "item",
        }


class TestDumpValidated:
    def test_fills_defaults(self) -> None:
        assert dump_validated(HistoryResultData, {"count": 0, "total": 0}) == {
            "count": 0,
            "total": 0,
            "records": [],
        }

    def test_rejects_wrong_state(self) -> None:
        item = item_payload(Item(id="a", name="A", created=T0, modified=T0))
        with pytest.raises(ValidationError):
            dump_validated(CommitResultData, {"state": "editing", "changed": False, "item": item})
