"""Standalone command: validate a draft name."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from renamectl.commands._base import RenameCommand
from renamectl.services.naming import check_name as run_check

if TYPE_CHECKING:
    from renamectl.commands._context import AppContext


@click.command(
    "check-name",
    cls=RenameCommand,
    examples="""\
  renamectl check-name "  Report.pdf "
  renamectl check-name notes.txt --existing notes.txt --reject-duplicates
  renamectl --json check-name ''""",
)
@click.argument("draft")
@click.option(
    "--existing",
    "existing",
    multiple=True,
    help="Name already in use (repeatable).",
)
@click.option(
    "--reject-duplicates",
    is_flag=True,
    help="Treat a match in --existing as an error.",
)
@click.pass_obj
def check_name(
    app: AppContext,
    draft: str,
    existing: tuple[str, ...],
    reject_duplicates: bool,
) -> None:
    """Check whether DRAFT would be accepted as an item name."""
    app.emit(
        run_check(
            draft,
            existing_names=existing,
            reject_duplicates=reject_duplicates or app.settings.editing.reject_duplicates,
        )
    )
