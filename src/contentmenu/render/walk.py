"""MenuWalk — expand a flat menu into its container of content blocks."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from markupsafe import Markup

from contentmenu.domain.models import MenuContainer, MenuItem, RenderedBlock

if TYPE_CHECKING:
    from contentmenu.render.context import RenderContext
    from contentmenu.render.dispatch import ItemTypeDispatcher

logger = logging.getLogger(__name__)


class MenuWalk:
    """Walk menu items in stored order, one block per resolvable top-level item.

    Nested items (``depth > 0``) are tolerated and skipped: dynamic menus
    are flat.
    """

    def __init__(self, ctx: RenderContext, dispatcher: ItemTypeDispatcher) -> None:
        self._ctx = ctx
        self._dispatcher = dispatcher

    def blocks(self, menu: Sequence[MenuItem]) -> list[RenderedBlock]:
        """Dispatch each top-level item; drop items that produce nothing."""
        rendered: list[RenderedBlock] = []
        for item in menu:
            if not item.is_top_level:
                logger.debug("Skipping nested menu item %s (depth %s)", item.id, item.depth)
                continue
            block = self._dispatcher.dispatch(item)
            if block is not None:
                rendered.append(block)
        return rendered

    def render(self, menu: Sequence[MenuItem], container: MenuContainer) -> Markup:
        """Return the container element holding every rendered block."""
        return self.wrap(self.blocks(menu), container)

    def wrap(self, blocks: Sequence[RenderedBlock], container: MenuContainer) -> Markup:
        """Concatenate *blocks* inside the container element."""
        return self._ctx.render_template(
            "container.html.j2",
            container=container,
            blocks=Markup("").join(block.markup for block in blocks),
        )
