"""Tests for BaseService event dispatch."""

from __future__ import annotations

from typing import Any

import pluggy

from renamectl.infrastructure.workspace import Workspace
from renamectl.services.base import BaseService

hookimpl = pluggy.HookimplMarker("renamectl")


class _Probe(BaseService):
    def fire(self, hook_name: str, payload: dict[str, Any]) -> list[str]:
        warnings: list[str] = []
        self._dispatch_event(hook_name, payload, warnings)
        return warnings


class TestDispatchEvent:
    def test_no_bus_is_noop(self, workspace: Workspace) -> None:
        assert _Probe(workspace).fire("post_commit", {"item_id": "a", "changed": True}) == []

    def test_delivered(self, workspace: Workspace, recorder: Any) -> None:
        warnings = _Probe(workspace).fire("post_commit", {"item_id": "a", "changed": True})
        assert warnings == []
        assert recorder.calls == [("post_commit", {"item_id": "a", "changed": True})]

    def test_failure_becomes_warning(self, workspace: Workspace) -> None:
        class Broken:
            @hookimpl
            def post_commit(self, item_id: str, changed: bool) -> None:
                raise RuntimeError("boom")

        bus = workspace.init_event_bus(discover=False)
        bus.plugin_manager.register_plugin(Broken())
        warnings = _Probe(workspace).fire("post_commit", {"item_id": "a", "changed": True})
        assert warnings == ["Event dispatch failed for post_commit"]
        assert len(bus.failed) == 1
