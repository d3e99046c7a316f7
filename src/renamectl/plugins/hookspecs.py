"""Pluggy hook specifications for rename-session and collection events.

UI layers subscribe to these hooks to re-render when the controller or
the collection changes, instead of polling controller state. Hooks are
dispatched synchronously after the state change has completed.
"""

from __future__ import annotations

import pluggy

hookspec = pluggy.HookspecMarker("renamectl")


class RenameHookSpec:
    """Hook specifications for the renamectl plugin system."""

    @hookspec
    def post_edit_start(self, item_id: str, name: str) -> None:
        """Called after an edit session opens on *item_id*."""

    @hookspec
    def post_draft_update(self, item_id: str, draft: str) -> None:
        """Called after the draft of the active session changes."""

    @hookspec
    def post_rename(
        self,
        item_id: str,
        old_name: str,
        new_name: str,
        timestamp: str,
    ) -> None:
        """Called after a commit renamed an item and recorded it in history."""

    @hookspec
    def post_commit(self, item_id: str, changed: bool) -> None:
        """Called after any successful commit, including same-name no-ops."""

    @hookspec
    def post_cancel(self, item_id: str, draft: str) -> None:
        """Called after a session was discarded; *draft* is the abandoned text."""

    @hookspec
    def post_item_add(self, item_id: str, name: str, kind: str) -> None:
        """Called after an item is added to the collection."""

    @hookspec
    def post_item_remove(self, item_id: str, name: str) -> None:
        """Called after an item is removed from the collection."""
