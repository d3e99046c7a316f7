"""Tests for the stand-alone check_name operation."""

from __future__ import annotations

from renamectl.services.naming import check_name


class TestCheckName:
    def test_ok(self) -> None:
        result = check_name("report.pdf")
        assert result.ok
        assert result.op == "check_name"
        assert result.data == {"name": "report.pdf", "trimmed": False}

    def test_trimmed(self) -> None:
        result = check_name("  report.pdf\n")
        assert result.data == {"name": "report.pdf", "trimmed": True}

    def test_empty(self) -> None:
        result = check_name("   ")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "EMPTY_NAME"
        assert result.error.detail == {"category": "validation", "name": ""}

    def test_duplicate_only_when_rejecting(self) -> None:
        assert check_name("a", existing_names=["a"]).ok
        result = check_name("a", existing_names=["a"], reject_duplicates=True)
        assert result.error.code == "DUPLICATE_NAME"  # type: ignore[union-attr]
