"""Shared pytest fixtures and test helpers for renamectl tests."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from datetime import UTC, datetime, timedelta
from pathlib import Path
from typing import Any

import pluggy
import pytest
import structlog
from click.testing import CliRunner

from renamectl.config.discovery import CONFIG_ENV_VAR
from renamectl.config.settings import RenameSettings
from renamectl.domain.items import Item
from renamectl.domain.types import ItemKind
from renamectl.infrastructure.workspace import Workspace
from renamectl.services.telemetry import disable_telemetry

hookimpl = pluggy.HookimplMarker("renamectl")

EPOCH = datetime(2026, 1, 1, 9, 0, tzinfo=UTC)


class StepClock:
    """Deterministic clock: every call is one second after the previous one."""

    def __init__(self, start: datetime = EPOCH, step: timedelta = timedelta(seconds=1)) -> None:
        self.current = start
        self.step = step

    def __call__(self) -> datetime:
        self.current += self.step
        return self.current


class RecordingPlugin:
    """Subscriber that records every hook call in order."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, dict[str, Any]]] = []

    def names(self) -> list[str]:
        return [name for name, _ in self.calls]

    @hookimpl
    def post_edit_start(self, item_id: str, name: str) -> None:
        self.calls.append(("post_edit_start", {"item_id": item_id, "name": name}))

    @hookimpl
    def post_draft_update(self, item_id: str, draft: str) -> None:
        self.calls.append(("post_draft_update", {"item_id": item_id, "draft": draft}))

    @hookimpl
    def post_rename(self, item_id: str, old_name: str, new_name: str, timestamp: str) -> None:
        self.calls.append(
            (
                "post_rename",
                {
                    "item_id": item_id,
                    "old_name": old_name,
                    "new_name": new_name,
                    "timestamp": timestamp,
                },
            )
        )

    @hookimpl
    def post_commit(self, item_id: str, changed: bool) -> None:
        self.calls.append(("post_commit", {"item_id": item_id, "changed": changed}))

    @hookimpl
    def post_cancel(self, item_id: str, draft: str) -> None:
        self.calls.append(("post_cancel", {"item_id": item_id, "draft": draft}))

    @hookimpl
    def post_item_add(self, item_id: str, name: str, kind: str) -> None:
        self.calls.append(("post_item_add", {"item_id": item_id, "name": name, "kind": kind}))

    @hookimpl
    def post_item_remove(self, item_id: str, name: str) -> None:
        self.calls.append(("post_item_remove", {"item_id": item_id, "name": name}))


def sample_items() -> list[Item]:
    """Three items: two files and a folder, all created at EPOCH."""
    return [
        Item(
            id="ITEM-0001",
            name="report.pdf",
            kind=ItemKind.FILE,
            tags=("work",),
            created=EPOCH,
            modified=EPOCH,
        ),
        Item(id="ITEM-0002", name="Photos", kind=ItemKind.FOLDER, created=EPOCH, modified=EPOCH),
        Item(
            id="ITEM-0003",
            name="notes.txt",
            kind=ItemKind.FILE,
            tags=("personal", "draft"),
            created=EPOCH,
            modified=EPOCH,
        ),
    ]


@pytest.fixture(autouse=True)
def _reset_process_state() -> Iterator[None]:
    """CLI runs configure logging and (with ``-v``) telemetry for the whole process."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    app = logging.getLogger("renamectl")
    app_level = app.level
    yield
    disable_telemetry()
    root.handlers = handlers
    root.setLevel(level)
    app.setLevel(app_level)
    structlog.reset_defaults()


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def clock() -> StepClock:
    return StepClock()


@pytest.fixture
def workspace_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Empty temp directory with no config file in reach of env overrides."""
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    return tmp_path


@pytest.fixture
def settings(workspace_root: Path) -> RenameSettings:
    """Default settings with entry-point discovery disabled."""
    return RenameSettings.from_cli(workspace_root=workspace_root, plugins={"discover": False})


def make_workspace(
    settings: RenameSettings,
    clock: StepClock | None = None,
    **overrides: Any,
) -> Workspace:
    """Workspace over :func:`sample_items`, with optional settings section overrides."""
    if overrides:
        settings = settings.model_copy(
            update={
                key: getattr(settings, key).model_copy(update=value)
                for key, value in overrides.items()
            }
        )
    return Workspace(settings, sample_items(), clock=clock or StepClock())


@pytest.fixture
def workspace(settings: RenameSettings, clock: StepClock) -> Workspace:
    """Workspace seeded with :func:`sample_items` and a stepping clock."""
    return make_workspace(settings, clock)


@pytest.fixture
def recorder(workspace: Workspace) -> RecordingPlugin:
    """RecordingPlugin subscribed to the workspace's event bus."""
    bus = workspace.init_event_bus(discover=False)
    plugin = RecordingPlugin()
    bus.plugin_manager.register_plugin(plugin, name="recorder")
    return plugin


@pytest.fixture
def make_ws(settings: RenameSettings) -> Any:
    """Factory for workspaces with section overrides, e.g. ``make_ws(editing={...})``."""

    def factory(**overrides: Any) -> Workspace:
        return make_workspace(settings, **overrides)

    return factory


@pytest.fixture
def _isolated_workspace(workspace_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to an empty temp directory so the CLI finds no config.

    Use via ``@pytest.mark.usefixtures("_isolated_workspace")`` on command
    test classes.
    """
    monkeypatch.chdir(workspace_root)


def write_config(root: Path, body: str) -> Path:
    """Write ``renamectl.toml`` under *root* and return its path."""
    path = root / "renamectl.toml"
    path.write_text(body, encoding="utf-8")
    return path


SAMPLE_CONFIG = """\
[plugins]
discover = false

[[collection.items]]
id = "ITEM-0001"
name = "report.pdf"
kind = "file"
tags = ["work"]

[[collection.items]]
id = "ITEM-0002"
name = "Photos"
kind = "folder"

[[collection.items]]
name = "notes.txt"
kind = "file"
tags = ["personal"]
"""


@pytest.fixture
def configured_root(workspace_root: Path) -> Path:
    """Temp root holding a ``renamectl.toml`` with three seed items."""
    write_config(workspace_root, SAMPLE_CONFIG)
    return workspace_root
