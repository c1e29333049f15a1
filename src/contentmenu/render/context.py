"""Explicit render context and the text-formatting seam.

Everything a block builder needs is passed in a :class:`RenderContext`;
nothing is read from ambient or global state, so the item being rendered
is always an explicit argument.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from markupsafe import Markup, escape

if TYPE_CHECKING:
    from jinja2 import Environment

    from contentmenu.config.models import DisplayConfig, SiteConfig
    from contentmenu.domain.models import MenuItem
    from contentmenu.domain.ports import ContentSource
    from contentmenu.plugins.manager import PluginManager


class TextFilters:
    """Route display text through the plugin filter chains.

    Plain-text results are escaped; ``Markup`` results are trusted.
    Without a plugin manager the text is only escaped.
    """

    def __init__(self, plugins: PluginManager | None = None) -> None:
        self._plugins = plugins

    def title(self, text: str, context_id: int) -> Markup:
        return self._apply("format_title", text, context_id)

    def content(self, text: str, context_id: int) -> Markup:
        return self._apply("format_content", text, context_id)

    def unknown_item(self, item: MenuItem) -> None:
        """Notify plugins about a menu item of an unrecognized type."""
        if self._plugins is not None:
            self._plugins.notify("unknown_menu_item", item_type=item.type, menu_item=item)

    def _apply(self, hook_name: str, text: str, context_id: int) -> Markup:
        value: str = text
        if self._plugins is not None:
            value = self._plugins.apply_filters(hook_name, text, context_id=context_id)
        return escape(value)


@dataclass(frozen=True)
class RenderContext:
    """Read-only dependencies shared by the block builders of one render."""

    content: ContentSource
    display: DisplayConfig
    site: SiteConfig
    filters: TextFilters
    templates: Environment

    @property
    def limit(self) -> int:
        """Items per archive (and per recent-items list)."""
        return self.display.archive_limit

    def render_template(self, name: str, **values: Any) -> Markup:
        """Render an autoescaped block template to trusted markup."""
        return Markup(self.templates.get_template(name).render(**values))
