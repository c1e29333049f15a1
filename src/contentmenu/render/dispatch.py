"""ItemTypeDispatcher — turn one menu item into a block, or nothing.

Dispatch is an exhaustive match over :class:`MenuItemType`. Every lookup
failure, missing entity, or empty archive means the item contributes no
block; unknown types are handed to plugins and contribute nothing either.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, assert_never

from contentmenu.domain.errors import ContentLookupError
from contentmenu.domain.models import ArchiveQuery, ContentItem, MenuItem, RenderedBlock
from contentmenu.domain.types import MenuItemType
from contentmenu.render.archive import ArchiveRenderer
from contentmenu.render.blocks import render_custom_link, render_single_item

if TYPE_CHECKING:
    from contentmenu.render.context import RenderContext

logger = logging.getLogger(__name__)


class ItemTypeDispatcher:
    """Fetch the data a menu item refers to and build its block."""

    def __init__(self, ctx: RenderContext, archive: ArchiveRenderer | None = None) -> None:
        self._ctx = ctx
        self._archive = archive or ArchiveRenderer(ctx)

    def dispatch(self, item: MenuItem) -> RenderedBlock | None:
        """Return the block for *item*, or None when it has nothing to show."""
        kind = item.kind
        try:
            match kind:
                case MenuItemType.SINGLE_ITEM:
                    return self._single_item(item)
                case MenuItemType.TAXONOMY:
                    return self._taxonomy(item)
                case MenuItemType.TYPE_ARCHIVE:
                    return self._type_archive(item)
                case MenuItemType.CUSTOM_LINK:
                    return render_custom_link(self._ctx, item)
                case MenuItemType.UNKNOWN:
                    logger.debug("Menu item %s has unknown type %r", item.id, item.type)
                    self._ctx.filters.unknown_item(item)
                    return None
                case _:
                    assert_never(kind)
        except ContentLookupError:
            logger.warning("Lookup failed for menu item %s; skipping", item.id, exc_info=True)
            return None

    # ------------------------------------------------------------------
    # Per-type handlers
    # ------------------------------------------------------------------

    def _single_item(self, item: MenuItem) -> RenderedBlock | None:
        if item.object_id is None:
            return None
        content = self._ctx.content.get_by_id(item.object_id)
        if content is None:
            logger.debug("Menu item %s points at missing item %s", item.id, item.object_id)
            return None

        recent: tuple[ContentItem, ...] = ()
        if self._ctx.site.posts_page_id == content.id:
            site = self._ctx.site
            recent = tuple(self._ctx.content.recent_published(site.posts_type, self._ctx.limit))
        return render_single_item(self._ctx, item, content, recent)

    def _taxonomy(self, item: MenuItem) -> RenderedBlock | None:
        if item.object_id is None:
            return None
        term = self._ctx.content.get_term(item.object_id, item.object_ref)
        if term is None:
            logger.debug("Menu item %s points at missing term %s", item.id, item.object_id)
            return None
        items = ArchiveQuery.for_term(term.taxonomy, term.id, self._ctx.limit).run(self._ctx.content)
        if not items:
            return None
        return self._archive.render_archive(items, item, term)

    def _type_archive(self, item: MenuItem) -> RenderedBlock | None:
        if not self._ctx.content.type_exists(item.object_ref):
            logger.debug("Menu item %s points at unknown type %r", item.id, item.object_ref)
            return None
        items = ArchiveQuery.for_type(item.object_ref, self._ctx.limit).run(self._ctx.content)
        if not items:
            return None
        return self._archive.render_archive(items, item)
