"""Standalone command: interactive rename shell.

Reads one command per line from stdin and drives the workspace's edit
controller, standing in for a list UI: ``edit`` is a long-press,
``draft`` is typing, ``commit``/``blur`` is pressing Done or losing
focus, and ``cancel`` is Escape.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

import click

from renamectl.commands._base import RenameCommand
from renamectl.services.collection import CollectionService
from renamectl.services.history import HistoryService

if TYPE_CHECKING:
    from renamectl.commands._context import AppContext
    from renamectl.infrastructure.workspace import Workspace
    from renamectl.services.result import ServiceResult

SHELL_HELP = """\
Commands:
  list              show all items
  search TEXT       filter items by name or tag
  edit ID           start renaming an item
  draft TEXT        replace the draft name
  commit            apply the draft (also: blur, done)
  cancel            discard the draft
  session           show the current session
  history [N]       show the N most recent renames
  add NAME          add an item at the top
  copy ID           duplicate an item
  remove ID         remove an item
  help              show this help
  quit              leave the shell (also: exit)"""

_Handler = Callable[["Workspace", str], "ServiceResult"]


class ShellUsageError(ValueError):
    """A shell line that could not be turned into an operation."""


def _require(arg: str, usage: str) -> str:
    if not arg.strip():
        raise ShellUsageError(f"usage: {usage}")
    return arg.strip()


def _history(ws: Workspace, arg: str) -> ServiceResult:
    limit: int | None = None
    if arg.strip():
        try:
            limit = int(arg)
        except ValueError:
            raise ShellUsageError("usage: history [N]") from None
        if limit < 1:
            raise ShellUsageError("usage: history [N] with N >= 1")
    return HistoryService(ws).recent(limit)


_HANDLERS: dict[str, _Handler] = {
    "list": lambda ws, _arg: CollectionService(ws).list_items(),
    "search": lambda ws, arg: CollectionService(ws).search(arg),
    "edit": lambda ws, arg: ws.controller.start_edit(_require(arg, "edit ID")),
    # The draft is passed through untrimmed; trimming happens on commit.
    "draft": lambda ws, arg: ws.controller.update_draft(arg),
    "commit": lambda ws, _arg: ws.controller.commit(),
    "cancel": lambda ws, _arg: ws.controller.cancel(),
    "session": lambda ws, _arg: ws.controller.describe(),
    "history": _history,
    "add": lambda ws, arg: CollectionService(ws).add_item(arg),
    "copy": lambda ws, arg: CollectionService(ws).copy_item(_require(arg, "copy ID")),
    "remove": lambda ws, arg: CollectionService(ws).remove_item(_require(arg, "remove ID")),
}

_ALIASES = {"blur": "commit", "done": "commit", "exit": "quit", "ls": "list"}


def parse_line(line: str) -> tuple[str, str]:
    """Split a shell line into ``(command, argument)``.

    The argument keeps its inner and trailing spaces so drafts can be
    typed verbatim.

    Examples:
        >>> parse_line("draft  My File ")
        ('draft', ' My File ')
        >>> parse_line("BLUR")
        ('commit', '')
    """
    line = line.rstrip("\r\n").lstrip()
    command, _, arg = line.partition(" ")
    command = command.lower()
    return _ALIASES.get(command, command), arg


def run_line(workspace: Workspace, line: str) -> ServiceResult | None:
    """Execute one shell line. Returns None for blank lines.

    Raises:
        ShellUsageError: Unknown command or malformed argument.
    """
    command, arg = parse_line(line)
    if not command:
        return None
    handler = _HANDLERS.get(command)
    if handler is None:
        raise ShellUsageError(f"unknown command: {command!r} (try 'help')")
    if command in ("draft", "add"):
        return handler(workspace, arg)
    return handler(workspace, arg.strip())


@click.command(
    cls=RenameCommand,
    examples="""\
  printf 'edit ITEM-1\\ndraft Q3 report.pdf\\ncommit\\nhistory\\n' | renamectl shell
  renamectl --reject-duplicates shell < session.txt
  renamectl --json shell < session.txt""",
)
@click.option("--prompt/--no-prompt", default=None, help="Show a prompt (default: on a TTY).")
@click.pass_obj
def shell(app: AppContext, prompt: bool | None) -> None:
    """Drive a rename session from stdin, one command per line.

    Failed operations are reported and the shell keeps reading; only
    ``quit`` or end of input ends it.
    """
    stdin = click.get_text_stream("stdin")
    if prompt is None:
        prompt = stdin.isatty()
    workspace = app.workspace

    while True:
        if prompt:
            click.echo("rename> ", nl=False)
        line = stdin.readline()
        if not line:
            break
        command, _ = parse_line(line)
        if command == "quit":
            break
        if command == "help":
            click.echo(SHELL_HELP)
            continue
        try:
            result = run_line(workspace, line)
        except ShellUsageError as exc:
            click.echo(f"error: {exc}", err=True)
            continue
        if result is not None:
            app.render(result)
