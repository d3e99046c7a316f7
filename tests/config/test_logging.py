"""Tests for structlog configuration."""

from __future__ import annotations

import json
import logging

import pytest
import structlog

from renamectl.config.logging import configure_logging


class TestLevels:
    def test_verbose_is_debug(self) -> None:
        configure_logging(verbose=True)
        assert logging.getLogger("renamectl").level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_quiet_by_default(self) -> None:
        configure_logging()
        assert logging.getLogger("renamectl").level == logging.WARNING

    def test_pluggy_stays_quiet(self) -> None:
        configure_logging(verbose=True)
        assert logging.getLogger("pluggy").level == logging.WARNING

    def test_single_root_handler(self) -> None:
        configure_logging()
        configure_logging()
        assert len(logging.getLogger().handlers) == 1


class TestJsonOutput:
    def test_structlog_event(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        structlog.get_logger("renamectl.audit").info("item.renamed", item_id="ITEM-0001")
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "item.renamed"
        assert parsed["item_id"] == "ITEM-0001"
        assert parsed["level"] == "info"
        assert parsed["logger"] == "renamectl.audit"
        assert "timestamp" in parsed

    def test_stdlib_logger_rendered_as_json(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        logging.getLogger("renamectl.services.editing").debug("Edit session on %s discarded", "x")
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "Edit session on x discarded"
        assert parsed["level"] == "debug"
        assert parsed["logger"] == "renamectl.services.editing"

    def test_info_suppressed_without_verbose(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=False, log_json=True)
        structlog.get_logger("renamectl.audit").info("item.renamed")
        assert capfd.readouterr().err == ""
