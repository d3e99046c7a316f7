"""Item ID patterns and generation.

Generated IDs are sequential: ``ITEM-`` followed by at least four digits.
Seed items loaded from configuration may carry any non-empty string ID.

INVARIANT: IDs are permanent. Renaming an item never changes its ID.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

ITEM_PREFIX = "ITEM-"

ITEM_ID_PATTERN: re.Pattern[str] = re.compile(r"^ITEM-(\d{4,})$")


def format_item_id(number: int) -> str:
    """Render a sequence number as an item ID (minimum 4 digits)."""
    return f"{ITEM_PREFIX}{number:04d}"


def next_item_id(existing: Iterable[str]) -> str:
    """Return the next sequential ID after the highest generated one in *existing*.

    IDs that do not match the generated pattern are ignored.

    Examples:
        >>> next_item_id([])
        'ITEM-0001'
        >>> next_item_id(["ITEM-0007", "readme", "ITEM-0002"])
        'ITEM-0008'
    """
    highest = 0
    for item_id in existing:
        match = ITEM_ID_PATTERN.match(item_id)
        if match is not None:
            highest = max(highest, int(match.group(1)))
    return format_item_id(highest + 1)


def validate_item_id(item_id: str) -> bool:
    """Check whether *item_id* is a generated sequential ID."""
    return ITEM_ID_PATTERN.match(item_id) is not None
