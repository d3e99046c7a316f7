"""Item kinds found in renameable collections.

The kinds mirror the collections a rename action is usually attached to:
files and folders in a file browser, projects, notes, photos, playlists.
"""

from __future__ import annotations

from enum import StrEnum


class ItemKind(StrEnum):
    """Classification of an item in a collection (no lifecycle rules)."""

    ITEM = "item"
    FILE = "file"
    FOLDER = "folder"
    DOCUMENT = "document"
    PROJECT = "project"
    NOTE = "note"
    IMAGE = "image"
    VIDEO = "video"
    PLAYLIST = "playlist"
