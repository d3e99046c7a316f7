"""Tests for the ``--examples`` flag on every command."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from renamectl.cli import cli

EXAMPLES_COMMANDS: list[tuple[list[str], list[str]]] = [
    (["items", "--examples"], ["renamectl items list", "renamectl items search"]),
    (["items", "list", "--examples"], ["--kind folder"]),
    (["items", "search", "--examples"], ["renamectl items search invoice"]),
    (["check-name", "--examples"], ["--reject-duplicates"]),
    (["shell", "--examples"], ["renamectl shell", "--json shell"]),
]


@pytest.mark.usefixtures("_isolated_workspace")
class TestExamples:
    @pytest.mark.parametrize(("args", "keywords"), EXAMPLES_COMMANDS)
    def test_examples_printed(
        self, cli_runner: CliRunner, args: list[str], keywords: list[str]
    ) -> None:
        result = cli_runner.invoke(cli, args)
        assert result.exit_code == 0, result.output
        assert result.output.startswith("Examples for")
        for keyword in keywords:
            assert keyword in result.output

    def test_examples_skip_required_arguments(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["check-name", "--examples"])
        assert "Missing argument" not in result.output

    def test_help_mentions_flag(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["items", "list", "--help"])
        assert "--examples" in result.output
