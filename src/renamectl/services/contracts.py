"""Typed payload contracts for service and adapter boundaries.

Domain models are converted to plain dicts (timestamps as ISO strings)
before they leave the service layer, and each payload shape is checked
against its contract model so key regressions fail fast in tests.
"""

from __future__ import annotations

from typing import Any, Literal, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from renamectl.domain.items import EditSession, Item, RenameRecord

T = TypeVar("T", bound=BaseModel)


def dump_validated(model_cls: type[T], data: dict[str, Any]) -> dict[str, Any]:
    """Validate *data* against *model_cls* and return a normalized payload dict."""
    model = model_cls.model_validate(data)
    return model.model_dump(mode="python")


class ItemData(BaseModel):
    """One item row."""

    model_config = ConfigDict(extra="allow")

    id: str
    name: str
    kind: str
    tags: list[str]
    created: str
    modified: str


class SessionData(BaseModel):
    """The active edit session."""

    target_id: str
    original_name: str
    draft_name: str
    started_at: str
    dirty: bool


class RenameRecordData(BaseModel):
    """One history entry."""

    item_id: str
    old_name: str
    new_name: str
    timestamp: str
    item_kind: str


class FinalizedData(BaseModel):
    """How the previous session was resolved by an auto-finalizing ``start_edit``."""

    item_id: str
    outcome: Literal["committed", "unchanged", "cancelled"]
    error: str | None = None


class StartEditResultData(BaseModel):
    """Payload contract for ``EditSessionController.start_edit``."""

    state: Literal["editing"]
    session: SessionData
    resumed: bool
    finalized: FinalizedData | None = None


class CommitResultData(BaseModel):
    """Payload contract for ``EditSessionController.commit``."""

    state: Literal["idle"]
    changed: bool
    item: ItemData
    record: RenameRecordData | None = None


class CancelResultData(BaseModel):
    """Payload contract for ``EditSessionController.cancel``."""

    state: Literal["idle"]
    cancelled: bool
    item_id: str | None = None
    discarded_draft: str | None = None


class ListItemsResultData(BaseModel):
    """Payload contract for ``CollectionService.list_items`` and ``search``."""

    count: int
    items: list[ItemData]
    query: str | None = None
    editing_id: str | None = None


class HistoryResultData(BaseModel):
    """Payload contract for ``HistoryService.recent``."""

    count: int
    total: int
    records: list[RenameRecordData] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Domain -> payload converters
# ---------------------------------------------------------------------------


def item_payload(item: Item) -> dict[str, Any]:
    """Plain-dict form of *item*, extra domain fields included."""
    return item.model_dump(mode="json")


def session_payload(session: EditSession) -> dict[str, Any]:
    data = session.model_dump(mode="json")
    data["dirty"] = session.is_dirty
    return data


def record_payload(record: RenameRecord) -> dict[str, Any]:
    return record.model_dump(mode="json")
