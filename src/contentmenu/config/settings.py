"""ContentMenuSettings: one frozen object for flags, env vars, and TOML.

Sources, strongest first:

1. keyword arguments (the CLI flags Click parsed)
2. ``CONTENTMENU_*`` environment variables, ``__`` between nested keys
   (``CONTENTMENU_DISPLAY__ARCHIVE_LIMIT=5``)
3. the ``contentmenu.toml`` in effect
4. defaults baked into :mod:`contentmenu.config.models`
"""

from __future__ import annotations

import tomllib
from contextvars import ContextVar
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from contentmenu.config.discovery import find_config
from contentmenu.config.models import DisplayConfig, SiteConfig

# TOML file for the settings object currently being built by from_cli().
_active_toml: ContextVar[Path | None] = ContextVar("_active_toml", default=None)


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Top-level tables of a TOML file as a settings source."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path is None or not toml_path.is_file():
            return
        try:
            with toml_path.open("rb") as fh:
                self._data = tomllib.load(fh)
        except tomllib.TOMLDecodeError as exc:
            import click

            msg = f"Invalid TOML in {toml_path}: {exc}"
            raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._data.get(field_name), field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return dict(self._data)


class ContentMenuSettings(BaseSettings):
    """Resolved configuration of one contentmenu process.

    Attributes:
        site_root: Directory holding ``.contentmenu/``; the config file's
            directory when one was found, else the working directory.
        config_path: The TOML file that was read, if any.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "CONTENTMENU_",
        "env_nested_delimiter": "__",
    }

    site_root: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None

    # Global CLI flags
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # contentmenu.toml tables
    site: SiteConfig = Field(default_factory=SiteConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        toml = TomlSettingsSource(settings_cls, _active_toml.get())
        return init_settings, env_settings, toml

    @property
    def data_dir(self) -> Path:
        """Directory holding the database, plugins, and template overrides."""
        return self.site_root / ".contentmenu"

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        site_root: Path | None = None,
        **cli_flags: Any,
    ) -> ContentMenuSettings:
        """Build settings the way the CLI does.

        An explicit *config_path* is used only if it exists; otherwise the
        config is discovered walking up from *site_root* (or the working
        directory).
        """
        if config_path:
            explicit = Path(config_path)
            toml_path = explicit if explicit.is_file() else None
        else:
            toml_path = find_config(site_root)

        if site_root is None:
            site_root = toml_path.parent if toml_path is not None else Path.cwd()

        token = _active_toml.set(toml_path)
        try:
            return cls(site_root=site_root, config_path=toml_path, **cli_flags)
        finally:
            _active_toml.reset(token)
