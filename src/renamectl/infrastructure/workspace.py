"""Workspace — the single dependency injected into every service.

A Workspace owns the collection store, the rename history, the optional
plugin event bus, and the one edit-session controller. Everything is in
memory; loading and saving the collection is left to the host application.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from datetime import datetime
from typing import TYPE_CHECKING

from renamectl.config.models import seed_item_fields
from renamectl.domain.ids import next_item_id
from renamectl.domain.items import Item, utc_now
from renamectl.infrastructure.history import HistoryLog
from renamectl.infrastructure.store import CollectionStore

if TYPE_CHECKING:
    from renamectl.config.settings import RenameSettings
    from renamectl.plugins.event_bus import EventBus
    from renamectl.services.editing import EditSessionController

logger = logging.getLogger(__name__)


class Workspace:
    """In-memory collection, history, and controller for one UI focus.

    Args:
        settings: Resolved settings.
        items: Initial items. When omitted, ``[collection] items`` from the
            settings are used as the seed.
        clock: Source of timestamps for sessions and history records.
    """

    def __init__(
        self,
        settings: RenameSettings,
        items: Iterable[Item] | None = None,
        *,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._settings = settings
        self._clock = clock
        self._store = CollectionStore(items if items is not None else self._seed_items())
        self._history = HistoryLog(max_records=settings.history.max_records)
        self._event_bus: EventBus | None = None
        self._controller: EditSessionController | None = None
        logger.debug("Workspace ready with %d items", len(self._store))

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def settings(self) -> RenameSettings:
        """The resolved settings for this workspace."""
        return self._settings

    @property
    def store(self) -> CollectionStore:
        return self._store

    @property
    def history(self) -> HistoryLog:
        return self._history

    def now(self) -> datetime:
        """Current time from the workspace clock."""
        return self._clock()

    @property
    def event_bus(self) -> EventBus | None:
        """The plugin event bus (None if not initialized)."""
        return self._event_bus

    @property
    def controller(self) -> EditSessionController:
        """The workspace's edit-session controller (created on first access).

        INVARIANT: One controller per workspace, so at most one session.
        """
        if self._controller is None:
            from renamectl.services.editing import EditSessionController

            self._controller = EditSessionController(self)
        return self._controller

    # ------------------------------------------------------------------
    # Setup
    # ------------------------------------------------------------------

    def init_event_bus(self, *, discover: bool | None = None) -> EventBus:
        """Create the plugin manager and event bus.

        Discovers entry-point plugins (unless disabled) and registers the
        built-in audit plugin when ``[plugins] audit_log`` is on.
        """
        from renamectl.plugins.builtins.audit import AuditLogPlugin
        from renamectl.plugins.event_bus import EventBus
        from renamectl.plugins.manager import PluginManager

        cfg = self._settings.plugins
        if discover is None:
            discover = cfg.discover

        pm = PluginManager()
        if discover:
            pm.discover_and_load()
        if cfg.audit_log:
            pm.register_plugin(AuditLogPlugin(), name="audit-builtin")

        self._event_bus = EventBus(pm)
        return self._event_bus

    def _seed_items(self) -> list[Item]:
        """Build items from ``[collection] items``, assigning IDs where missing."""
        seeds = [seed_item_fields(seed) for seed in self._settings.collection.items]
        # Generated IDs must not collide with explicit IDs later in the list.
        taken = [fields["id"] for fields in seeds if "id" in fields]
        items: list[Item] = []
        for fields in seeds:
            if "id" not in fields:
                fields["id"] = next_item_id(taken)
                taken.append(fields["id"])
            items.append(Item.model_validate(fields))
        return items
