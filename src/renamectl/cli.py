"""Root CLI group for renamectl with global flags and command registration."""

from __future__ import annotations

from typing import Any

import click

from renamectl import __version__
from renamectl.commands import register_commands
from renamectl.commands._context import AppContext
from renamectl.config.settings import RenameSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="renamectl")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option(
    "--reject-duplicates",
    is_flag=True,
    help="Refuse names already used by another item.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    reject_duplicates: bool,
) -> None:
    """Rename items in a named collection, one edit session at a time."""
    ctx.ensure_object(dict)
    overrides: dict[str, Any] = {}
    if reject_duplicates:
        overrides["editing"] = {"reject_duplicates": True}
    settings = RenameSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
        **overrides,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
