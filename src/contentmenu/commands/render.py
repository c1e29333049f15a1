"""render — print the dynamic content menu of a location."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from contentmenu.commands._base import CmCommand
from contentmenu.services.render import RenderService

if TYPE_CHECKING:
    from contentmenu.commands._context import AppContext


@click.command(
    cls=CmCommand,
    examples="""\
  contentmenu render front_page
  contentmenu render 42 --container-id page-42-menu
  contentmenu render front_page -o build/front.html
  contentmenu --json render front_page""",
)
@click.argument("location", default="front_page")
@click.option("--container-id", default=None, help="Container element id.")
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, writable=True, path_type=Path),
    default=None,
    help="Write markup to a file instead of stdout.",
)
@click.pass_obj
def render(app: AppContext, location: str, container_id: str | None, output: Path | None) -> None:
    """Render the menu at LOCATION (front_page or a page id) as HTML."""
    result = RenderService(app.site).render_dynamic_menu(location, container_id=container_id)
    if not result.ok or app.settings.json_output:
        app.emit(result)
        return

    markup = result.data["markup"]
    if output is not None:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(markup + "\n", encoding="utf-8")
    else:
        click.echo(markup)
    app.emit_warnings(result)
