"""Tests for output mode selection."""

from __future__ import annotations

import json

from renamectl.output.formatters import OutputSettings, format_result
from renamectl.services.result import ServiceError, ServiceResult

_LIST = ServiceResult(
    ok=True,
    op="list_items",
    data={
        "count": 1,
        "items": [
            {
                "id": "ITEM-0001",
                "name": "report.pdf",
                "kind": "file",
                "tags": [],
                "created": "2026-01-01T09:00:00Z",
                "modified": "2026-01-01T09:00:00Z",
            }
        ],
        "query": None,
        "editing_id": None,
    },
)


class TestFormatResult:
    def test_json(self) -> None:
        output = format_result(_LIST, settings=OutputSettings(json_output=True))
        parsed = json.loads(output)
        assert parsed["ok"] is True
        assert parsed["data"]["items"][0]["id"] == "ITEM-0001"

    def test_json_wins_over_quiet(self) -> None:
        output = format_result(_LIST, settings=OutputSettings(json_output=True, quiet=True))
        assert output.lstrip().startswith("{")

    def test_quiet(self) -> None:
        assert format_result(_LIST, settings=OutputSettings(quiet=True)) == "ITEM-0001"

    def test_human_default(self) -> None:
        output = format_result(_LIST)
        assert "report.pdf" in output
        assert "1 items" in output

    def test_error_json(self) -> None:
        result = ServiceResult(
            ok=False,
            op="commit",
            error=ServiceError(code="EMPTY_NAME", message="Name cannot be empty"),
        )
        parsed = json.loads(format_result(result, settings=OutputSettings(json_output=True)))
        assert parsed["error"]["code"] == "EMPTY_NAME"
