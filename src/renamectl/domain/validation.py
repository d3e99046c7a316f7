"""Name validation: pure draft-to-name decision.

The validator trims the draft and either accepts the trimmed name or
rejects it with a :class:`ValidationErrorCode`. Duplicate rejection is a
policy flag, off by default: most collections tolerate repeated names.
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import StrEnum

from pydantic import BaseModel, ConfigDict


class ValidationErrorCode(StrEnum):
    """Why a draft name was rejected."""

    EMPTY_NAME = "EMPTY_NAME"
    DUPLICATE_NAME = "DUPLICATE_NAME"


class NameValidation(BaseModel):
    """Outcome of :func:`validate_name`.

    Attributes:
        valid: Whether the draft was accepted.
        name: The trimmed name (also set on rejection, for display).
        error: Rejection reason when ``valid`` is False.
        message: Human-readable rejection message.
    """

    model_config = ConfigDict(frozen=True)

    valid: bool
    name: str
    error: ValidationErrorCode | None = None
    message: str | None = None


def normalize_name(draft: str) -> str:
    """Strip leading and trailing whitespace (including newlines)."""
    return draft.strip()


def validate_name(
    draft: str,
    *,
    existing_names: Iterable[str] = (),
    reject_duplicates: bool = False,
) -> NameValidation:
    """Validate *draft* as a new item name.

    *existing_names* should exclude the item being renamed, otherwise an
    unchanged name would count as its own duplicate.

    Examples:
        >>> validate_name("  b.txt ").name
        'b.txt'
        >>> validate_name("   ").error
        <ValidationErrorCode.EMPTY_NAME: 'EMPTY_NAME'>
    """
    name = normalize_name(draft)
    if not name:
        return NameValidation(
            valid=False,
            name=name,
            error=ValidationErrorCode.EMPTY_NAME,
            message="Name cannot be empty",
        )

    if reject_duplicates and name in set(existing_names):
        return NameValidation(
            valid=False,
            name=name,
            error=ValidationErrorCode.DUPLICATE_NAME,
            message=f"An item named {name!r} already exists",
        )

    return NameValidation(valid=True, name=name)
