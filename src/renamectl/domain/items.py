"""Item, EditSession, and RenameRecord models.

All three are frozen. Changing an item's name produces a new Item via
``model_copy``; the store swaps it in place. An EditSession only ever
changes through :meth:`EditSession.with_draft`.
"""

from __future__ import annotations

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field

from renamectl.domain.types import ItemKind

ItemId = str


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(UTC)


class Item(BaseModel):
    """A named member of a collection.

    Additional domain fields (size, genre, starred, ...) are accepted and
    carried through renames untouched.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    id: ItemId = Field(min_length=1)
    name: str
    kind: ItemKind = ItemKind.ITEM
    tags: tuple[str, ...] = ()
    created: datetime = Field(default_factory=utc_now)
    modified: datetime = Field(default_factory=utc_now)

    def renamed(self, new_name: str, *, modified: datetime | None = None) -> Item:
        """Return a copy carrying *new_name* and a bumped ``modified`` time."""
        return self.model_copy(update={"name": new_name, "modified": modified or utc_now()})


class EditSession(BaseModel):
    """The single in-flight rename: which item, its original name, and the draft."""

    model_config = ConfigDict(frozen=True)

    target_id: ItemId
    original_name: str
    draft_name: str
    started_at: datetime = Field(default_factory=utc_now)

    @classmethod
    def open(cls, item: Item, *, started_at: datetime | None = None) -> EditSession:
        """Open a session on *item* with the draft initialised to its name."""
        return cls(
            target_id=item.id,
            original_name=item.name,
            draft_name=item.name,
            started_at=started_at or utc_now(),
        )

    def with_draft(self, text: str) -> EditSession:
        """Return a copy of this session holding *text* as the draft."""
        return self.model_copy(update={"draft_name": text})

    @property
    def is_dirty(self) -> bool:
        """Whether the draft differs from the original name."""
        return self.draft_name != self.original_name


class RenameRecord(BaseModel):
    """One completed rename. Immutable once appended to the history log."""

    model_config = ConfigDict(frozen=True)

    item_id: ItemId
    old_name: str
    new_name: str
    timestamp: datetime = Field(default_factory=utc_now)
    item_kind: ItemKind = ItemKind.ITEM
