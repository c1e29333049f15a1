"""init — create the site database and extension directories."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from contentmenu.commands._base import CmCommand
from contentmenu.services.site import SiteService

if TYPE_CHECKING:
    from contentmenu.commands._context import AppContext


@click.command(
    "init",
    cls=CmCommand,
    examples="""\
  contentmenu init
  contentmenu --json init""",
)
@click.pass_obj
def init_cmd(app: AppContext) -> None:
    """Create the site database under .contentmenu/."""
    app.emit(SiteService(app.site).init())
