"""locations — list dynamic menu locations and their menus."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from contentmenu.commands._base import CmCommand
from contentmenu.services.site import SiteService

if TYPE_CHECKING:
    from contentmenu.commands._context import AppContext


@click.command(
    cls=CmCommand,
    examples="""\
  contentmenu locations
  contentmenu -q locations""",
)
@click.pass_obj
def locations(app: AppContext) -> None:
    """List menu locations: the front page and every dynamic-template page."""
    app.emit(SiteService(app.site).locations())
