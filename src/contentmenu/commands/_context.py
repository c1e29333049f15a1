"""AppContext: the object every subcommand receives via ``@click.pass_obj``."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from contentmenu.config.logging import configure_logging
from contentmenu.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from contentmenu.config.settings import ContentMenuSettings
    from contentmenu.infrastructure.site import Site
    from contentmenu.services.result import ServiceResult


class AppContext:
    """Settings, the open site, and result printing for one invocation.

    Logging is configured as soon as the context exists. The site (and with
    it the database) is opened on first access, so ``--help`` and
    ``--examples`` never create files.
    """

    def __init__(self, settings: ContentMenuSettings) -> None:
        self.settings = settings
        self._site: Site | None = None
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def site(self) -> Site:
        if self._site is None:
            from contentmenu.infrastructure.site import Site

            self._site = Site(self.settings)
        return self._site

    def close(self) -> None:
        site, self._site = self._site, None
        if site is not None:
            site.close()

    def emit(self, result: ServiceResult) -> None:
        """Print *result*; a failed result goes to stderr and exits with status 1."""
        output = format_result(
            result,
            settings=OutputSettings(
                json_output=self.settings.json_output,
                quiet=self.settings.quiet,
                verbose=self.settings.verbose,
            ),
        )
        if not result.ok:
            click.echo(output, err=True)
            raise SystemExit(1)
        click.echo(output)
        self.emit_warnings(result)

    def emit_warnings(self, result: ServiceResult) -> None:
        # JSON output already lists the warnings.
        if self.settings.json_output:
            return
        for warning in result.warnings:
            click.echo(f"WARNING: {warning}", err=True)
