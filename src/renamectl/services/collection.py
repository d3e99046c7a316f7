"""CollectionService: list, search, add, copy, and remove items.

These are the collaborator flows around renaming: a new item appears at
the top of the collection, a copy lands right after its source, and an
item cannot be removed while it is being edited.
"""

from __future__ import annotations

from collections.abc import Iterable

from renamectl.domain.ids import next_item_id
from renamectl.domain.items import Item, ItemId
from renamectl.domain.types import ItemKind
from renamectl.domain.validation import validate_name
from renamectl.services._helpers import fail, matches_text
from renamectl.services.base import BaseService
from renamectl.services.contracts import ListItemsResultData, dump_validated, item_payload
from renamectl.services.result import ServiceResult
from renamectl.services.telemetry import traced


class CollectionService(BaseService):
    """Read and structural-change operations on the collection store."""

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    @traced
    def list_items(self, *, kind: str | None = None) -> ServiceResult:
        """All items in display order, optionally filtered by kind."""
        items = [i for i in self._workspace.store.list() if kind is None or i.kind == kind]
        return self._items_result("list_items", items)

    @traced
    def get_item(self, item_id: ItemId) -> ServiceResult:
        op = "get_item"
        item = self._workspace.store.get(item_id)
        if item is None:
            return fail(op, "NOT_FOUND", f"No item found with ID: {item_id}", item_id=item_id)
        data = item_payload(item)
        data["editing"] = self._workspace.controller.is_editing(item_id)
        return ServiceResult(ok=True, op=op, data=data)

    @traced
    def search(self, text: str, *, kind: str | None = None) -> ServiceResult:
        """Case-insensitive match on item names and tags.

        An empty *text* matches every item.
        """
        needle = text.strip()
        items = [
            i
            for i in self._workspace.store.list()
            if (kind is None or i.kind == kind)
            and (not needle or matches_text(needle, i.name, *i.tags))
        ]
        return self._items_result("search", items, query=needle)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    @traced
    def add_item(
        self,
        name: str,
        *,
        kind: str = ItemKind.ITEM,
        tags: Iterable[str] = (),
        index: int | None = 0,
    ) -> ServiceResult:
        """Add a new item (at the top by default) under a generated ID."""
        op = "add_item"
        store = self._workspace.store
        cfg = self._workspace.settings.editing

        try:
            item_kind = ItemKind(kind)
        except ValueError:
            allowed = ", ".join(ItemKind)
            msg = f"Unknown item kind: {kind!r} (expected one of: {allowed})"
            return fail(op, "INVALID_KIND", msg, kind=kind)

        vr = validate_name(
            name,
            existing_names=store.names(),
            reject_duplicates=cfg.reject_duplicates,
        )
        if not vr.valid:
            return fail(op, str(vr.error), vr.message or "Invalid name", category="validation")

        now = self._workspace.now()
        item = Item(
            id=next_item_id(store.ids()),
            name=vr.name,
            kind=item_kind,
            tags=tuple(tags),
            created=now,
            modified=now,
        )
        store.insert(item, index=index)

        warnings: list[str] = []
        self._dispatch_event(
            "post_item_add",
            {"item_id": item.id, "name": item.name, "kind": str(item.kind)},
            warnings,
        )
        return ServiceResult(ok=True, op=op, data=item_payload(item), warnings=warnings)

    @traced
    def copy_item(self, item_id: ItemId) -> ServiceResult:
        """Duplicate an item under a new ID, placed right after the source.

        The copy is named ``<name><copy_suffix>`` and keeps kind, tags, and
        extra domain fields.
        """
        op = "copy_item"
        store = self._workspace.store
        source = store.get(item_id)
        if source is None:
            return fail(op, "NOT_FOUND", f"No item found with ID: {item_id}", item_id=item_id)

        now = self._workspace.now()
        suffix = self._workspace.settings.editing.copy_suffix
        copy = source.model_copy(
            update={
                "id": next_item_id(store.ids()),
                "name": f"{source.name}{suffix}",
                "created": now,
                "modified": now,
            }
        )
        position = store.index_of(item_id)
        store.insert(copy, index=None if position is None else position + 1)

        warnings: list[str] = []
        self._dispatch_event(
            "post_item_add",
            {"item_id": copy.id, "name": copy.name, "kind": str(copy.kind)},
            warnings,
        )
        data = item_payload(copy)
        data["source_id"] = source.id
        return ServiceResult(ok=True, op=op, data=data, warnings=warnings)

    @traced
    def remove_item(self, item_id: ItemId) -> ServiceResult:
        """Remove an item. Refused while that item is being edited."""
        op = "remove_item"
        if self._workspace.controller.is_editing(item_id):
            return fail(
                op,
                "ITEM_LOCKED",
                f"Item {item_id} is being edited; commit or cancel first",
                item_id=item_id,
            )

        item = self._workspace.store.remove(item_id)
        if item is None:
            return fail(op, "NOT_FOUND", f"No item found with ID: {item_id}", item_id=item_id)

        warnings: list[str] = []
        self._dispatch_event("post_item_remove", {"item_id": item.id, "name": item.name}, warnings)
        return ServiceResult(
            ok=True,
            op=op,
            data={"id": item.id, "name": item.name},
            warnings=warnings,
        )

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _items_result(
        self,
        op: str,
        items: list[Item],
        *,
        query: str | None = None,
    ) -> ServiceResult:
        session = self._workspace.controller.current_session()
        return ServiceResult(
            ok=True,
            op=op,
            data=dump_validated(
                ListItemsResultData,
                {
                    "count": len(items),
                    "items": [item_payload(i) for i in items],
                    "query": query,
                    "editing_id": session.target_id if session is not None else None,
                },
            ),
        )
