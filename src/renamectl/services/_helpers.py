"""Shared service-layer helper functions."""

from __future__ import annotations

from typing import Any

from renamectl.services.result import ServiceError, ServiceResult


def fail(op: str, code: str, message: str, **detail: Any) -> ServiceResult:
    """Build an ``ok=False`` result with a structured error."""
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code=code, message=message, detail=detail),
    )


def matches_text(needle: str, *haystacks: str) -> bool:
    """Case-insensitive containment check across several strings.

    Examples:
        >>> matches_text("TXT", "notes.txt")
        True
        >>> matches_text("work", "Report", "personal")
        False
    """
    folded = needle.casefold()
    return any(folded in h.casefold() for h in haystacks)
