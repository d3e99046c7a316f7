"""Command group: inspect the configured collection."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from renamectl.commands._base import RenameGroup
from renamectl.domain.types import ItemKind
from renamectl.services.collection import CollectionService

if TYPE_CHECKING:
    from renamectl.commands._context import AppContext

_ITEMS_EXAMPLES = """\
  renamectl items list
  renamectl items list --kind file
  renamectl items search report
  renamectl --json items search "q3" --kind document"""

_KIND_CHOICE = click.Choice([k.value for k in ItemKind])


@click.group(cls=RenameGroup, examples=_ITEMS_EXAMPLES)
def items() -> None:
    """List and search the items in the collection."""


@items.command(
    "list",
    examples="""\
  renamectl items list
  renamectl items list --kind folder
  renamectl -q items list""",
)
@click.option("--kind", type=_KIND_CHOICE, default=None, help="Only items of this kind.")
@click.pass_obj
def list_cmd(app: AppContext, kind: str | None) -> None:
    """List items in display order."""
    app.emit(CollectionService(app.workspace).list_items(kind=kind))


@items.command(
    examples="""\
  renamectl items search invoice
  renamectl items search draft --kind note"""
)
@click.argument("text")
@click.option("--kind", type=_KIND_CHOICE, default=None, help="Only items of this kind.")
@click.pass_obj
def search(app: AppContext, text: str, kind: str | None) -> None:
    """Case-insensitive search over item names and tags."""
    app.emit(CollectionService(app.workspace).search(text, kind=kind))
