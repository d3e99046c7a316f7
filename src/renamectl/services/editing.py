"""EditSessionController — the rename-session state machine.

States: IDLE (no session) and EDITING (exactly one session).

    start_edit ──▶ EDITING ──update_draft──▶ EDITING
                      │
          commit / cancel / start_edit(other id)
                      ▼
                    IDLE

Commit pipeline: VALIDATE → COMPARE → APPLY → RECORD → NOTIFY.

INVARIANT: At most one EditSession exists per workspace. A ``start_edit``
on another item finalizes the open session first (commit, falling back to
cancel) so two sessions never coexist.
INVARIANT: cancel never touches the collection store or the history log.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from renamectl.domain.items import EditSession, ItemId, RenameRecord
from renamectl.domain.lifecycle import (
    EditState,
    FinalizeOutcome,
    InvalidCommitPolicy,
    is_valid_transition,
)
from renamectl.domain.validation import validate_name
from renamectl.services._helpers import fail
from renamectl.services.base import BaseService
from renamectl.services.contracts import (
    CancelResultData,
    CommitResultData,
    StartEditResultData,
    dump_validated,
    item_payload,
    record_payload,
    session_payload,
)
from renamectl.services.result import ServiceError, ServiceResult
from renamectl.services.telemetry import trace_span, traced

if TYPE_CHECKING:
    from renamectl.infrastructure.workspace import Workspace

logger = logging.getLogger(__name__)


class EditSessionController(BaseService):
    """Orchestrates the single in-flight rename against the collection store.

    Obtain the workspace's controller through ``workspace.controller``;
    constructing a second controller on the same workspace would allow a
    second session.
    """

    def __init__(self, workspace: Workspace) -> None:
        super().__init__(workspace)
        self._session: EditSession | None = None

    # ------------------------------------------------------------------
    # State accessors
    # ------------------------------------------------------------------

    @property
    def state(self) -> EditState:
        return EditState.IDLE if self._session is None else EditState.EDITING

    def current_session(self) -> EditSession | None:
        """The active session, or None while idle. Read-only for the UI."""
        return self._session

    def is_editing(self, item_id: ItemId | None = None) -> bool:
        """Whether a session is open (on *item_id*, when given)."""
        if self._session is None:
            return False
        return item_id is None or self._session.target_id == item_id

    def describe(self) -> ServiceResult:
        """Current state as a ServiceResult, for UI layers that render results."""
        session = self._session
        return ServiceResult(
            ok=True,
            op="session",
            data={
                "state": str(self.state),
                "session": session_payload(session) if session is not None else None,
            },
        )

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    @traced
    def start_edit(self, item_id: ItemId) -> ServiceResult:
        """Open a session on *item_id*.

        Same item already being edited: returns the existing session
        unchanged. Another item being edited: that session is finalized
        first and the outcome is reported under ``finalized``.
        """
        op = "start_edit"
        store = self._workspace.store

        if item_id not in store:
            return fail(op, "NOT_FOUND", f"No item found with ID: {item_id}", item_id=item_id)

        warnings: list[str] = []
        finalized: dict[str, Any] | None = None

        if self._session is not None:
            if self._session.target_id == item_id:
                return ServiceResult(
                    ok=True,
                    op=op,
                    data=dump_validated(
                        StartEditResultData,
                        {
                            "state": "editing",
                            "session": session_payload(self._session),
                            "resumed": True,
                        },
                    ),
                )
            with trace_span("auto_finalize") as span:
                finalized = self._finalize(warnings)
                if span:
                    span.annotate("outcome", finalized["outcome"])

        item = store.get(item_id)
        assert item is not None
        if not is_valid_transition(self.state, EditState.EDITING):
            msg = f"Cannot start an edit session from state {self.state}"
            raise RuntimeError(msg)
        self._session = EditSession.open(item, started_at=self._workspace.now())
        logger.debug("Edit session opened on %s (%r)", item.id, item.name)

        self._dispatch_event("post_edit_start", {"item_id": item.id, "name": item.name}, warnings)

        return ServiceResult(
            ok=True,
            op=op,
            data=dump_validated(
                StartEditResultData,
                {
                    "state": "editing",
                    "session": session_payload(self._session),
                    "resumed": False,
                    "finalized": finalized,
                },
            ),
            warnings=warnings,
        )

    @traced
    def update_draft(self, text: str) -> ServiceResult:
        """Replace the draft of the active session with *text* (unvalidated)."""
        op = "update_draft"
        if self._session is None:
            return _no_session(op)

        self._session = self._session.with_draft(text)

        warnings: list[str] = []
        self._dispatch_event(
            "post_draft_update",
            {"item_id": self._session.target_id, "draft": text},
            warnings,
        )
        return ServiceResult(
            ok=True,
            op=op,
            data={"state": "editing", "session": session_payload(self._session)},
            warnings=warnings,
        )

    @traced
    def commit(self) -> ServiceResult:
        """Validate the draft and apply it.

        VALIDATE → COMPARE → APPLY → RECORD → NOTIFY

        A rejected draft leaves the session open unless the workspace is
        configured with ``invalid_commit = "cancel"``. A draft equal to the
        original name closes the session without touching store or history.
        """
        op = "commit"
        session = self._session
        if session is None:
            return _no_session(op)

        store = self._workspace.store
        cfg = self._workspace.settings.editing
        warnings: list[str] = []

        # --- VALIDATE ---
        item = store.get(session.target_id)
        if item is None:
            self._session = None
            return fail(
                op,
                "NOT_FOUND",
                f"Item {session.target_id} was removed while being edited",
                item_id=session.target_id,
                session_cleared=True,
            )

        vr = validate_name(
            session.draft_name,
            existing_names=store.names(exclude=item.id),
            reject_duplicates=cfg.reject_duplicates,
        )
        if not vr.valid:
            assert vr.error is not None
            cancelled = cfg.invalid_commit == InvalidCommitPolicy.CANCEL
            if cancelled:
                self._close(session, warnings)
            logger.debug("Commit rejected for %s: %s", item.id, vr.error)
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code=str(vr.error),
                    message=vr.message or "Invalid name",
                    detail={
                        "category": "validation",
                        "item_id": item.id,
                        "name": vr.name,
                        "session_cancelled": cancelled,
                    },
                ),
                warnings=warnings,
            )

        # --- COMPARE ---
        if vr.name == session.original_name:
            self._session = None
            self._dispatch_event("post_commit", {"item_id": item.id, "changed": False}, warnings)
            self._drain_events(warnings)
            return ServiceResult(
                ok=True,
                op=op,
                data=dump_validated(
                    CommitResultData,
                    {"state": "idle", "changed": False, "item": item_payload(item)},
                ),
                warnings=warnings,
            )

        # --- APPLY ---
        now = self._workspace.now()
        updated = store.rename(item.id, vr.name, modified=now)
        assert updated is not None

        # --- RECORD ---
        record = self._workspace.history.append(
            RenameRecord(
                item_id=item.id,
                old_name=session.original_name,
                new_name=vr.name,
                timestamp=now,
                item_kind=item.kind,
            )
        )
        self._session = None
        logger.debug("Committed rename of %s: %r -> %r", item.id, record.old_name, record.new_name)

        # --- NOTIFY ---
        self._dispatch_event(
            "post_rename",
            {
                "item_id": item.id,
                "old_name": record.old_name,
                "new_name": record.new_name,
                "timestamp": record.timestamp.isoformat(),
            },
            warnings,
        )
        self._dispatch_event("post_commit", {"item_id": item.id, "changed": True}, warnings)
        # Session closed: retry events that failed earlier.
        self._drain_events(warnings)

        return ServiceResult(
            ok=True,
            op=op,
            data=dump_validated(
                CommitResultData,
                {
                    "state": "idle",
                    "changed": True,
                    "item": item_payload(updated),
                    "record": record_payload(record),
                },
            ),
            warnings=warnings,
        )

    @traced
    def cancel(self) -> ServiceResult:
        """Discard the active session. A no-op, not an error, while idle."""
        op = "cancel"
        session = self._session
        if session is None:
            return ServiceResult(
                ok=True,
                op=op,
                data=dump_validated(CancelResultData, {"state": "idle", "cancelled": False}),
            )

        warnings: list[str] = []
        self._close(session, warnings)
        self._drain_events(warnings)
        return ServiceResult(
            ok=True,
            op=op,
            data=dump_validated(
                CancelResultData,
                {
                    "state": "idle",
                    "cancelled": True,
                    "item_id": session.target_id,
                    "discarded_draft": session.draft_name,
                },
            ),
            warnings=warnings,
        )

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _close(self, session: EditSession, warnings: list[str]) -> None:
        """Drop *session* without applying it and notify subscribers."""
        self._session = None
        logger.debug("Edit session on %s discarded", session.target_id)
        self._dispatch_event(
            "post_cancel",
            {"item_id": session.target_id, "draft": session.draft_name},
            warnings,
        )

    def _finalize(self, warnings: list[str]) -> dict[str, Any]:
        """Resolve the open session before another one starts.

        Commits the pending draft; if the commit fails for any reason the
        session is cancelled instead.
        """
        assert self._session is not None
        item_id = self._session.target_id

        result = self.commit()
        warnings.extend(result.warnings)
        if result.ok:
            changed = bool(result.data.get("changed"))
            outcome = FinalizeOutcome.COMMITTED if changed else FinalizeOutcome.UNCHANGED
            return {"item_id": item_id, "outcome": str(outcome)}

        if self._session is not None:
            warnings.extend(self.cancel().warnings)
        error_code = result.error_code
        warnings.append(f"Discarded draft for {item_id}: {error_code}")
        return {
            "item_id": item_id,
            "outcome": str(FinalizeOutcome.CANCELLED),
            "error": error_code,
        }


def _no_session(op: str) -> ServiceResult:
    return fail(op, "NO_ACTIVE_SESSION", "No active edit session")
