"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, renamectl.toml only contains
overrides. A fresh workspace needs no config file at all.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from renamectl.domain.lifecycle import InvalidCommitPolicy

# --- renamectl.toml sections ---


class EditingConfig(BaseModel):
    """[editing] section."""

    model_config = {"frozen": True}

    reject_duplicates: bool = False
    invalid_commit: InvalidCommitPolicy = InvalidCommitPolicy.KEEP_OPEN
    copy_suffix: str = " copy"


class HistoryConfig(BaseModel):
    """[history] section."""

    model_config = {"frozen": True}

    max_records: int | None = Field(default=None, ge=1)
    default_limit: int = Field(default=20, ge=1)


class PluginsConfig(BaseModel):
    """[plugins] section."""

    model_config = {"frozen": True}

    audit_log: bool = True
    discover: bool = True


class SeedItemConfig(BaseModel):
    """One ``[[collection.items]]`` entry."""

    model_config = {"frozen": True, "extra": "allow"}

    id: str | None = None
    name: str
    kind: str = "item"
    tags: list[str] = Field(default_factory=list)


class CollectionConfig(BaseModel):
    """[collection] section: seed items loaded into a new workspace."""

    model_config = {"frozen": True}

    items: list[SeedItemConfig] = Field(default_factory=list)


def seed_item_fields(seed: SeedItemConfig) -> dict[str, Any]:
    """Flatten a seed entry (including extra domain fields) to Item kwargs."""
    return seed.model_dump(exclude_none=True)
