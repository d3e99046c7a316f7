"""Subcommand modules for renamectl.

Provides register_commands() which uses deferred imports to keep
``renamectl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the ``items`` group and the standalone commands on the root group."""
    from renamectl.commands.items import items

    cli.add_command(items)

    from renamectl.commands.check_name import check_name
    from renamectl.commands.shell import shell

    cli.add_command(check_name)
    cli.add_command(shell)
