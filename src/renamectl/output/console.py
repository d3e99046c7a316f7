"""Buffered Rich consoles for the human renderers.

Renderers draw into an in-memory console and hand back the captured
text. Rich drops colour on its own when stdout is not a terminal.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

DEFAULT_WIDTH = 120

RENAME_THEME = Theme(
    {
        # status
        "rn.ok": "bold green",
        "rn.error": "bold red",
        "rn.warning": "bold yellow",
        "rn.op": "bold cyan",
        "rn.key": "dim",
        # items
        "rn.id": "bold blue",
        "rn.name": "bold",
        "rn.draft": "italic yellow",
        "rn.editing": "reverse",
        # history
        "rn.old": "red",
        "rn.new": "green",
        "rn.time": "dim",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Return a themed console writing into a fresh ``StringIO``."""
    buffer = StringIO()
    return Console(
        file=buffer,
        theme=RENAME_THEME,
        width=width or DEFAULT_WIDTH,
        no_color=no_color,
        highlight=False,
    )


def get_output(console: Console) -> str:
    buffer = console.file
    if not isinstance(buffer, StringIO):
        raise TypeError("console was not created by create_console()")
    return buffer.getvalue()
