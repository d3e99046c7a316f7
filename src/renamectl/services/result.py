"""The result contract shared by every service operation.

INVARIANT: Expected failures (unknown item, no active session, rejected
name) come back as ``ok=False`` results; services do not raise them.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ServiceError(BaseModel):
    """Why an operation failed.

    ``code`` is stable and machine-readable (``NOT_FOUND``, ``EMPTY_NAME``,
    ...); ``message`` is for people; ``detail`` holds structured context
    such as ``category="validation"``.
    """

    model_config = ConfigDict(frozen=True)

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one operation, named by ``op``.

    ``data`` is the payload on success, ``warnings`` collects non-fatal
    problems (failed event subscribers, discarded drafts), and ``meta``
    carries telemetry when it is enabled.
    """

    model_config = ConfigDict(frozen=True)

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @property
    def error_code(self) -> str | None:
        return self.error.code if self.error is not None else None
