"""CollectionStore: the authoritative in-memory set of named items.

Items are kept in display order and indexed by ID. The store never
validates names: callers validate before calling :meth:`rename`.
Every mutation is visible to the very next :meth:`get` or :meth:`list`.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from datetime import datetime

from renamectl.domain.items import Item, ItemId

logger = logging.getLogger(__name__)


class CollectionStore:
    """Ordered, ID-keyed item collection with a single rename path."""

    def __init__(self, items: Iterable[Item] = ()) -> None:
        self._order: list[ItemId] = []
        self._items: dict[ItemId, Item] = {}
        for item in items:
            self.insert(item)

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def get(self, item_id: ItemId) -> Item | None:
        """Look up an item. Returns None when the ID is unknown."""
        return self._items.get(item_id)

    def list(self) -> tuple[Item, ...]:
        """Snapshot of all items in display order."""
        return tuple(self._items[item_id] for item_id in self._order)

    def ids(self) -> tuple[ItemId, ...]:
        return tuple(self._order)

    def names(self, *, exclude: ItemId | None = None) -> tuple[str, ...]:
        """Names of all items, optionally skipping the item *exclude*."""
        return tuple(
            self._items[item_id].name for item_id in self._order if item_id != exclude
        )

    def index_of(self, item_id: ItemId) -> int | None:
        try:
            return self._order.index(item_id)
        except ValueError:
            return None

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._items

    def __len__(self) -> int:
        return len(self._order)

    def __iter__(self) -> Iterator[Item]:
        return iter(self.list())

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def rename(
        self,
        item_id: ItemId,
        new_name: str,
        *,
        modified: datetime | None = None,
    ) -> Item | None:
        """Replace the item's name. Returns the updated item, or None if unknown."""
        current = self._items.get(item_id)
        if current is None:
            return None
        updated = current.renamed(new_name, modified=modified)
        self._items[item_id] = updated
        logger.debug("Renamed %s: %r -> %r", item_id, current.name, new_name)
        return updated

    def insert(self, item: Item, *, index: int | None = None) -> Item:
        """Add *item* at *index* (default: the end).

        Raises:
            ValueError: If an item with the same ID already exists.
        """
        if item.id in self._items:
            msg = f"Duplicate item ID: {item.id}"
            raise ValueError(msg)
        self._items[item.id] = item
        if index is None:
            self._order.append(item.id)
        else:
            self._order.insert(index, item.id)
        return item

    def remove(self, item_id: ItemId) -> Item | None:
        """Remove and return the item, or None if unknown."""
        item = self._items.pop(item_id, None)
        if item is not None:
            self._order.remove(item_id)
        return item
