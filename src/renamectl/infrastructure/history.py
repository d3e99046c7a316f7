"""HistoryLog: append-only audit trail of completed renames.

Records are never edited or deleted individually. With ``max_records``
set, the oldest records are truncated as new ones arrive.

INVARIANT: Timestamps are non-decreasing in append order.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator

from renamectl.domain.items import ItemId, RenameRecord


class HistoryLog:
    """Ordered log of :class:`RenameRecord`, queried most recent first."""

    def __init__(self, *, max_records: int | None = None) -> None:
        if max_records is not None and max_records < 1:
            msg = f"max_records must be positive, got {max_records}"
            raise ValueError(msg)
        self._records: deque[RenameRecord] = deque(maxlen=max_records)

    @property
    def max_records(self) -> int | None:
        return self._records.maxlen

    def append(self, record: RenameRecord) -> RenameRecord:
        """Append *record*, clamping its timestamp to keep the log monotonic.

        Returns the record as stored.
        """
        if self._records and record.timestamp < self._records[-1].timestamp:
            record = record.model_copy(update={"timestamp": self._records[-1].timestamp})
        self._records.append(record)
        return record

    def query(
        self,
        limit: int | None = None,
        *,
        item_id: ItemId | None = None,
    ) -> list[RenameRecord]:
        """Return records most recent first, optionally for one item only."""
        result: list[RenameRecord] = []
        for record in reversed(self._records):
            if item_id is not None and record.item_id != item_id:
                continue
            if limit is not None and len(result) >= limit:
                break
            result.append(record)
        return result

    def last(self) -> RenameRecord | None:
        return self._records[-1] if self._records else None

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[RenameRecord]:
        """Iterate in append order (oldest first)."""
        return iter(tuple(self._records))
