"""Synchronous in-process event dispatch via pluggy.

Every controller operation runs to completion before its event is
dispatched, so subscribers always observe settled state. A hook that
raises leaves the event in the failed queue; :meth:`EventBus.drain`
retries queued events until they succeed or hit ``max_retries``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from itertools import count
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from renamectl.plugins.manager import PluginManager

logger = logging.getLogger(__name__)


@dataclass
class Event:
    """A dispatched hook call and its delivery state."""

    id: int
    hook_name: str
    payload: dict[str, Any]
    status: str = "pending"
    retries: int = 0
    error: str | None = field(default=None, repr=False)


class HookFailedError(RuntimeError):
    """Raised by :meth:`EventBus.dispatch` when a subscriber fails."""


class EventBus:
    """Dispatches hook calls to the plugin manager and tracks failures.

    Parameters:
        plugin_manager: PluginManager holding the subscribers.
        max_retries: Attempts before an event is marked ``dead_letter``.
    """

    def __init__(self, plugin_manager: PluginManager, *, max_retries: int = 3) -> None:
        self._pm = plugin_manager
        self._max_retries = max_retries
        self._ids = count(1)
        self._failed: list[Event] = []
        self._dead: list[Event] = []

    @property
    def plugin_manager(self) -> PluginManager:
        return self._pm

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def dispatch(self, hook_name: str, payload: dict[str, Any]) -> Event:
        """Call *hook_name* on every subscriber.

        Raises:
            HookFailedError: If a subscriber raised. The event stays queued
                for :meth:`drain`.
        """
        event = Event(id=next(self._ids), hook_name=hook_name, payload=payload)
        self._execute(event)
        if event.status != "completed":
            msg = f"Hook {hook_name} failed: {event.error}"
            raise HookFailedError(msg)
        return event

    def drain(self) -> list[dict[str, Any]]:
        """Retry failed events once each.

        Returns a summary list of ``{id, hook_name, status}`` per retried event.
        """
        queued, self._failed = self._failed, []
        results: list[dict[str, Any]] = []
        for event in queued:
            self._execute(event)
            results.append({"id": event.id, "hook_name": event.hook_name, "status": event.status})
        return results

    @property
    def failed(self) -> list[Event]:
        """Events awaiting retry."""
        return list(self._failed)

    @property
    def dead_letters(self) -> list[Event]:
        """Events that exhausted their retries."""
        return list(self._dead)

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _execute(self, event: Event) -> None:
        hook_fn = getattr(self._pm.hook, event.hook_name, None)
        if hook_fn is None:
            event.status = "completed"
            return

        try:
            hook_fn(**event.payload)
        except Exception as exc:
            logger.debug("Hook %s failed: %s", event.hook_name, exc)
            event.retries += 1
            event.error = str(exc)
            if event.retries >= self._max_retries:
                event.status = "dead_letter"
                self._dead.append(event)
            else:
                event.status = "failed"
                self._failed.append(event)
        else:
            event.status = "completed"
