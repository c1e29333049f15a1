"""Subcommand modules for contentmenu.

Provides register_commands() which uses deferred imports to keep
``contentmenu --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from contentmenu.commands.init_cmd import init_cmd
    from contentmenu.commands.load import load
    from contentmenu.commands.locations import locations
    from contentmenu.commands.render import render

    cli.add_command(init_cmd)
    cli.add_command(load)
    cli.add_command(locations)
    cli.add_command(render)
