"""Locate ``renamectl.toml``.

The file is searched from a start directory upward, the way git finds
``.git``. ``RENAMECTL_CONFIG`` names a file directly and disables the
search.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "renamectl.toml"
CONFIG_ENV_VAR = "RENAMECTL_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the nearest ``renamectl.toml`` at or above *start* (default: CWD).

    When ``RENAMECTL_CONFIG`` is set, its file is returned if it exists
    and None otherwise.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override)
        return path if path.is_file() else None

    origin = (start or Path.cwd()).resolve()
    for directory in (origin, *origin.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None

