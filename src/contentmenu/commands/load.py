"""load — import a YAML site fixture."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from contentmenu.commands._base import CmCommand
from contentmenu.services.site import SiteService

if TYPE_CHECKING:
    from contentmenu.commands._context import AppContext


@click.command(
    cls=CmCommand,
    examples="""\
  contentmenu load site.yaml
  contentmenu --json load fixtures/front-page.yaml""",
)
@click.argument("fixture", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.pass_obj
def load(app: AppContext, fixture: Path) -> None:
    """Load content types, terms, items, and menus from FIXTURE."""
    app.emit(SiteService(app.site).load(fixture))
