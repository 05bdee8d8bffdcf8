"""Subcommand modules for studentctl.

Provides register_commands() which uses deferred imports to keep
``studentctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the record commands and the interactive menu on the root group."""
    from studentctl.commands.records import add, delete, show, update
    from studentctl.commands.run import run
    from studentctl.commands.search import gpa, list_cmd, major, search

    cli.add_command(add)
    cli.add_command(list_cmd)
    cli.add_command(show)
    cli.add_command(update)
    cli.add_command(delete)
    cli.add_command(search)
    cli.add_command(major)
    cli.add_command(gpa)
    cli.add_command(run)
