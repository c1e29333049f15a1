"""Site — the single dependency injected into every service.

Owns the database engine and hands out the content and menu repositories,
the plugin manager, and the block template environment. Plugins and
templates are built lazily so commands that never render skip discovery.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import TYPE_CHECKING

from contentmenu.infrastructure.database.engine import init_database
from contentmenu.infrastructure.repositories import ContentRepository, MenuRepository
from contentmenu.infrastructure.templates import build_template_environment

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

    from jinja2 import Environment
    from sqlalchemy import Connection

    from contentmenu.config.settings import ContentMenuSettings
    from contentmenu.plugins.manager import PluginManager

logger = logging.getLogger(__name__)

TEMPLATE_GROUP = "blocks"


class Site:
    """Database, repositories, plugins, and templates for one site root."""

    def __init__(
        self,
        settings: ContentMenuSettings,
        *,
        plugins: PluginManager | None = None,
    ) -> None:
        self._settings = settings
        self._engine = init_database(settings.site_root)
        self._plugins = plugins
        self._templates: Environment | None = None
        self.content = ContentRepository(self._engine)
        self.menus = MenuRepository(self._engine)

    @property
    def settings(self) -> ContentMenuSettings:
        return self._settings

    @property
    def root(self) -> Path:
        return self._settings.site_root

    @property
    def plugins(self) -> PluginManager:
        """Plugin manager with built-ins, entry points, and site-local plugins."""
        if self._plugins is None:
            from contentmenu.plugins.manager import create_plugin_manager

            self._plugins = create_plugin_manager(local_dir=self._settings.data_dir / "plugins")
            logger.debug("Loaded plugins: %s", self._plugins.list_plugin_names())
        return self._plugins

    @property
    def templates(self) -> Environment:
        if self._templates is None:
            self._templates = build_template_environment(TEMPLATE_GROUP, site_root=self.root)
        return self._templates

    @contextmanager
    def transaction(self) -> Iterator[Connection]:
        """Yield a connection inside a transaction that commits on success."""
        with self._engine.begin() as conn:
            yield conn

    def close(self) -> None:
        """Dispose of the database engine."""
        self._engine.dispose()
