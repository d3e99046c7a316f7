"""Edit-session lifecycle.

Two states, no terminal state: the controller cycles between IDLE and
EDITING for the lifetime of the workspace.
"""

from __future__ import annotations

from enum import StrEnum


class EditState(StrEnum):
    """Controller state."""

    IDLE = "idle"
    EDITING = "editing"


class FinalizeOutcome(StrEnum):
    """How an open session was resolved when another edit was requested."""

    COMMITTED = "committed"
    UNCHANGED = "unchanged"
    CANCELLED = "cancelled"


class InvalidCommitPolicy(StrEnum):
    """What happens to the session when a commit fails validation."""

    KEEP_OPEN = "keep_open"
    CANCEL = "cancel"


# --- Transition map (state -> allowed next states) ---

EDIT_TRANSITIONS: dict[str, list[str]] = {
    "idle": ["editing"],
    "editing": ["idle", "editing"],  # editing -> editing via auto-finalize
}


def is_valid_transition(
    current: str,
    target: str,
    transitions: dict[str, list[str]] = EDIT_TRANSITIONS,
) -> bool:
    """Check if transitioning from *current* to *target* is allowed."""
    allowed = transitions.get(current, [])
    return target in allowed
