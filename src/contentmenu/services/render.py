"""RenderService — the page-template entry point for dynamic menus.

A page asks for the menu at its location (``front_page`` or a page id);
the service resolves the ``<location>_content`` key, walks the assigned
menu, and returns the container markup. An empty or missing menu renders
an empty container.
"""

from __future__ import annotations

import logging
from typing import Any

from contentmenu.config.logging import render_scope
from contentmenu.domain.errors import ContentLookupError
from contentmenu.domain.locations import location_key
from contentmenu.domain.models import MenuContainer
from contentmenu.render import build_menu_walk
from contentmenu.services.base import BaseService
from contentmenu.services.result import ServiceResult

logger = logging.getLogger(__name__)


def default_container_id(key: str, menu: dict[str, Any] | None) -> str:
    """``menu-<slug>`` for an assigned menu, else the location key."""
    if menu is not None:
        return f"menu-{menu['slug']}"
    return key


class RenderService(BaseService):
    """Render the dynamic content menu of a location."""

    def render_dynamic_menu(
        self,
        location: str | int,
        *,
        container_id: str | None = None,
    ) -> ServiceResult:
        """Render the menu at *location* inside its container element.

        Args:
            location: Location name without the ``_content`` suffix
                (``front_page`` or a page id); a full key is accepted too.
            container_id: Override for the container's ``id`` attribute.
        """
        op = "render_menu"
        key = location_key(location)
        config = self._site.settings
        warnings: list[str] = []

        try:
            registered = self._site.menus.list_locations(config.site.dynamic_template)
            assigned = self._site.menus.get_assigned_menu(key)
            menu = self._site.menus.get_menu(key)
        except ContentLookupError as exc:
            logger.warning("Menu lookup failed for %s", key, exc_info=True)
            return self._fail(op, "LOOKUP_FAILED", str(exc), location=key)

        if key not in registered:
            warnings.append(f"Location '{key}' is not registered")

        container = MenuContainer(
            id_attr=container_id or default_container_id(key, assigned),
            class_attr=f"{config.display.menu_class} content-menu",
        )
        walk = build_menu_walk(
            self._site.content,
            display=config.display,
            site=config.site,
            templates=self._site.templates,
            plugins=self._site.plugins,
        )
        with render_scope(key):
            blocks = walk.blocks(menu)
            markup = walk.wrap(blocks, container)
            logger.debug("Rendered %d of %d menu items", len(blocks), len(menu))

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "location": key,
                "menu": assigned["name"] if assigned else None,
                "blocks": [block.anchor_id for block in blocks],
                "count": len(blocks),
                "markup": str(markup),
            },
            warnings=warnings,
            meta={"menu_items": len(menu), "skipped": len(menu) - len(blocks)},
        )
