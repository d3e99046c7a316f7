"""Built-in audit plugin: structured log lines for every rename event.

Registered by :meth:`Workspace.init_event_bus` when ``[plugins] audit_log``
is on. Renames log at INFO, session bookkeeping at DEBUG.
"""

from __future__ import annotations

import pluggy
import structlog

hookimpl = pluggy.HookimplMarker("renamectl")


class AuditLogPlugin:
    """Writes rename-session events to the ``renamectl.audit`` logger."""

    def __init__(self, logger_name: str = "renamectl.audit") -> None:
        self._log = structlog.get_logger(logger_name)

    @hookimpl
    def post_edit_start(self, item_id: str, name: str) -> None:
        self._log.debug("edit.start", item_id=item_id, name=name)

    @hookimpl
    def post_rename(
        self,
        item_id: str,
        old_name: str,
        new_name: str,
        timestamp: str,
    ) -> None:
        self._log.info(
            "item.renamed",
            item_id=item_id,
            old_name=old_name,
            new_name=new_name,
            renamed_at=timestamp,
        )

    @hookimpl
    def post_cancel(self, item_id: str, draft: str) -> None:
        self._log.debug("edit.cancel", item_id=item_id, draft=draft)

    @hookimpl
    def post_item_remove(self, item_id: str, name: str) -> None:
        self._log.info("item.removed", item_id=item_id, name=name)
