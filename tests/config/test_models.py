"""Tests for config section models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from renamectl.config.models import (
    HistoryConfig,
    SeedItemConfig,
    seed_item_fields,
)


class TestHistoryConfig:
    def test_max_records_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            HistoryConfig(max_records=0)

    def test_default_limit_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            HistoryConfig(default_limit=0)


class TestSeedItem:
    def test_name_required(self) -> None:
        with pytest.raises(ValidationError):
            SeedItemConfig.model_validate({"kind": "file"})

    def test_fields_drop_missing_id(self) -> None:
        seed = SeedItemConfig(name="Intro")
        assert seed_item_fields(seed) == {"name": "Intro", "kind": "item", "tags": []}

    def test_extra_fields_kept(self) -> None:
        seed = SeedItemConfig.model_validate({"id": "s1", "name": "Intro", "genre": "jazz"})
        assert seed_item_fields(seed)["genre"] == "jazz"
