"""The ``contentmenu`` command line."""

from __future__ import annotations

from pathlib import Path

import click

from contentmenu import __version__
from contentmenu.commands import register_commands
from contentmenu.commands._base import CmGroup
from contentmenu.commands._context import AppContext
from contentmenu.config.settings import ContentMenuSettings

_EXAMPLES = """\
  contentmenu init
  contentmenu load site.yaml
  contentmenu locations
  contentmenu render front_page
  contentmenu --json render 11"""


@click.group(cls=CmGroup, invoke_without_command=True, examples=_EXAMPLES)
@click.version_option(version=__version__, prog_name="contentmenu")
@click.option("--json", "json_output", is_flag=True, help="Print results as JSON.")
@click.option("-q", "--quiet", is_flag=True, help="Print only the essentials.")
@click.option("-v", "--verbose", is_flag=True, help="Show debug logs and result details.")
@click.option("--log-json", is_flag=True, help="Write logs to stderr as JSON lines.")
@click.option("-c", "--config", "config_path", default=None, help="Path to contentmenu.toml.")
@click.option(
    "--site-root",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Site directory (default: the config file's directory).",
)
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, site_root: Path | None, **flags: bool) -> None:
    """Render navigation menus as page content."""
    app = AppContext(
        ContentMenuSettings.from_cli(config_path=config_path, site_root=site_root, **flags)
    )
    ctx.obj = app
    ctx.call_on_close(app.close)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
