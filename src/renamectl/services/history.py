"""HistoryService: read-only audit view over the rename history."""

from __future__ import annotations

from renamectl.domain.items import ItemId
from renamectl.services.base import BaseService
from renamectl.services.contracts import HistoryResultData, dump_validated, record_payload
from renamectl.services.result import ServiceResult
from renamectl.services.telemetry import traced


class HistoryService(BaseService):
    """Queries the history log, most recent rename first."""

    @traced
    def recent(self, limit: int | None = None, *, item_id: ItemId | None = None) -> ServiceResult:
        """Return up to *limit* records (default: ``[history] default_limit``)."""
        log = self._workspace.history
        if limit is None:
            limit = self._workspace.settings.history.default_limit
        records = log.query(limit, item_id=item_id)
        return ServiceResult(
            ok=True,
            op="history",
            data=dump_validated(
                HistoryResultData,
                {
                    "count": len(records),
                    "total": len(log),
                    "records": [record_payload(r) for r in records],
                },
            ),
        )
