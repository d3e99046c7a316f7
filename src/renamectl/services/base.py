"""BaseService — foundation for all renamectl services.

Every service receives a :class:`Workspace` at construction time and
reaches the collection store, history log, and event bus through it.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from renamectl.infrastructure.workspace import Workspace

logger = logging.getLogger(__name__)


class BaseService:
    """Base for all service-layer classes.

    Usage::

        class CollectionService(BaseService):
            def get_item(self, item_id: str) -> ServiceResult:
                item = self._workspace.store.get(item_id)
                ...
    """

    def __init__(self, workspace: Workspace) -> None:
        self._workspace = workspace

    def _dispatch_event(
        self,
        hook_name: str,
        payload: dict[str, Any],
        warnings: list[str],
    ) -> None:
        """Notify subscribers. No-op if the event bus is not initialized.

        INVARIANT: Plugin failures are warnings, never errors.
        """
        bus = self._workspace.event_bus
        if bus is None:
            return
        try:
            bus.dispatch(hook_name, payload)
        except Exception:
            logger.debug("Event dispatch failed for %s", hook_name, exc_info=True)
            warnings.append(f"Event dispatch failed for {hook_name}")

    def _drain_events(self, warnings: list[str]) -> None:
        """Retry queued events; events that exhaust their retries become warnings."""
        bus = self._workspace.event_bus
        if bus is None:
            return
        for summary in bus.drain():
            if summary["status"] == "dead_letter":
                warnings.append(f"Event {summary['hook_name']} dropped after repeated failures")
