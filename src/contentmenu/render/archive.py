"""Archive blocks — one section listing several content items.

Used for taxonomy-term and content-type menu items. The section shows the
first available thumbnail as its lead image, the menu item's title and
description, and an excerpt per item in fetch order.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from contentmenu.domain.models import ContentItem, MenuItem, RenderedBlock, Term, Thumbnail
from contentmenu.domain.types import MenuItemType
from contentmenu.render.blocks import header_values, panel_image, render_excerpts

if TYPE_CHECKING:
    from contentmenu.render.context import RenderContext


def find_lead_image(items: Sequence[ContentItem]) -> Thumbnail | None:
    """Return the thumbnail of the first item that has one, else None."""
    for item in items:
        if item.thumbnail is not None:
            return item.thumbnail
    return None


class ArchiveRenderer:
    """Render a non-empty list of content items as one archive section."""

    def __init__(self, ctx: RenderContext) -> None:
        self._ctx = ctx

    def render_archive(
        self,
        items: Sequence[ContentItem],
        origin: MenuItem,
        term: Term | None = None,
    ) -> RenderedBlock:
        """Build the archive block for *origin* from already-fetched *items*.

        Args:
            items: Content to list, in display order. Must not be empty.
            origin: The menu item the archive was built for.
            term: The resolved term for taxonomy items; looked up from the
                content source when omitted.

        Raises:
            ValueError: If *items* is empty.
        """
        if not items:
            msg = f"Archive for menu item {origin.id} has no items"
            raise ValueError(msg)

        lead = find_lead_image(items)
        classes = ["archive", f"object-{origin.object_ref}", f"type-{origin.type}"]
        if lead is not None:
            classes.append("has-post-thumbnail")

        header = header_values(self._ctx, origin)
        if header["description"] is None:
            fallback = self._term_description(origin, term)
            if fallback:
                header["description"] = self._ctx.filters.title(fallback, origin.id)

        markup = self._ctx.render_template(
            "archive.html.j2",
            anchor_id=origin.anchor_id,
            classes=" ".join(classes),
            image=panel_image(lead),
            excerpts=render_excerpts(self._ctx, items),
            **header,
        )
        return RenderedBlock(anchor_id=origin.anchor_id, markup=markup)

    def _term_description(self, origin: MenuItem, term: Term | None) -> str:
        if origin.kind is not MenuItemType.TAXONOMY:
            return ""
        if term is None and origin.object_id is not None:
            term = self._ctx.content.get_term(origin.object_id, origin.object_ref)
        return term.description if term is not None else ""
