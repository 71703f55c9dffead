"""Subcommand modules for timefield.

Provides register_commands() which uses deferred imports to keep
``timefield --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from timefield.commands.interval import interval
    from timefield.commands.shell import shell
    from timefield.commands.tasks import delete, list_cmd, new, show

    cli.add_command(interval)
    cli.add_command(list_cmd)
    cli.add_command(new)
    cli.add_command(show)
    cli.add_command(delete)
    cli.add_command(shell)
