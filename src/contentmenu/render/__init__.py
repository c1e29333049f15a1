"""Render layer — menu items to content blocks.

MenuWalk -> ItemTypeDispatcher (per item) -> ArchiveRenderer or a block
builder -> thumbnail geometry whenever an image is shown.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from contentmenu.render.archive import ArchiveRenderer
from contentmenu.render.context import RenderContext, TextFilters
from contentmenu.render.dispatch import ItemTypeDispatcher
from contentmenu.render.walk import MenuWalk

if TYPE_CHECKING:
    from jinja2 import Environment

    from contentmenu.config.models import DisplayConfig, SiteConfig
    from contentmenu.domain.ports import ContentSource
    from contentmenu.plugins.manager import PluginManager


def build_menu_walk(
    content: ContentSource,
    *,
    display: DisplayConfig,
    site: SiteConfig,
    templates: Environment,
    plugins: PluginManager | None = None,
) -> MenuWalk:
    """Wire a MenuWalk with its dispatcher and archive renderer."""
    ctx = RenderContext(
        content=content,
        display=display,
        site=site,
        filters=TextFilters(plugins),
        templates=templates,
    )
    return MenuWalk(ctx, ItemTypeDispatcher(ctx, ArchiveRenderer(ctx)))


__all__ = [
    "ArchiveRenderer",
    "ItemTypeDispatcher",
    "MenuWalk",
    "RenderContext",
    "TextFilters",
    "build_menu_walk",
]
