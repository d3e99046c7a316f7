"""Click command classes that take an ``examples=`` text.

Commands built with ``examples`` get an eager ``--examples`` flag that
prints the text and exits, so ``--help`` stays short.
"""

from __future__ import annotations

from typing import Any

import click


def _examples_option(examples: str) -> click.Option:
    def show(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    return click.Option(
        ["--examples"],
        is_flag=True,
        expose_value=False,
        is_eager=True,
        callback=show,
        help="Show usage examples.",
    )


class ExamplesMixin:
    """Appends ``--examples`` to the command's params when given example text."""

    params: list[click.Parameter]

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(_examples_option(examples))


class RenameCommand(ExamplesMixin, click.Command):
    pass


class RenameGroup(ExamplesMixin, click.Group):
    """Group whose subcommands are :class:`RenameCommand` by default."""

    command_class = RenameCommand
