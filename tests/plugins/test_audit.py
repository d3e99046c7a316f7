"""Tests for the built-in audit plugin."""

from __future__ import annotations

from typing import Any

import structlog

from renamectl.infrastructure.workspace import Workspace
from renamectl.plugins.builtins.audit import AuditLogPlugin
from renamectl.services.collection import CollectionService


class TestAuditLogPlugin:
    def test_rename_logged(self, workspace: Workspace) -> None:
        workspace.init_event_bus(discover=False)
        ctl = workspace.controller
        with structlog.testing.capture_logs() as logs:
            ctl.start_edit("ITEM-0002")
            ctl.update_draft("Pictures")
            ctl.commit()
        renamed = [entry for entry in logs if entry["event"] == "item.renamed"]
        assert len(renamed) == 1
        entry: dict[str, Any] = renamed[0]
        assert entry["log_level"] == "info"
        assert entry["item_id"] == "ITEM-0002"
        assert entry["old_name"] == "Photos"
        assert entry["new_name"] == "Pictures"
        assert entry["renamed_at"] == workspace.history.query(1)[0].timestamp.isoformat()

    def test_session_events_at_debug(self, workspace: Workspace) -> None:
        workspace.init_event_bus(discover=False)
        with structlog.testing.capture_logs() as logs:
            workspace.controller.start_edit("ITEM-0001")
            workspace.controller.cancel()
        assert [(e["event"], e["log_level"]) for e in logs] == [
            ("edit.start", "debug"),
            ("edit.cancel", "debug"),
        ]

    def test_remove_logged(self, workspace: Workspace) -> None:
        workspace.init_event_bus(discover=False)
        with structlog.testing.capture_logs() as logs:
            CollectionService(workspace).remove_item("ITEM-0003")
        assert logs == [
            {
                "event": "item.removed",
                "log_level": "info",
                "item_id": "ITEM-0003",
                "name": "notes.txt",
            }
        ]

    def test_direct_call(self) -> None:
        plugin = AuditLogPlugin()
        with structlog.testing.capture_logs() as logs:
            plugin.post_edit_start(item_id="x", name="X")
        assert logs[0]["event"] == "edit.start"
