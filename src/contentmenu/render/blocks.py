"""Block builders for single content items and custom links.

Each builder is a pure function of its arguments and the render context,
returning one immutable :class:`RenderedBlock`. Data fetching happens in the
dispatcher; builders only shape markup.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any
from urllib.parse import urlsplit

from markupsafe import Markup

from contentmenu.domain.geometry import format_ratio
from contentmenu.domain.models import ContentItem, MenuItem, RenderedBlock, Thumbnail
from contentmenu.render.excerpt import make_excerpt

if TYPE_CHECKING:
    from contentmenu.render.context import RenderContext

ALLOWED_SCHEMES = frozenset({"http", "https", "mailto"})

# Characters that could close an attribute or a CSS url() around the value.
_BREAKOUT_CHARS = frozenset("()'\";")


def safe_url(url: str | None) -> str:
    """Return *url* fit for an ``href`` or a CSS ``url()``, else ``""``.

    Relative URLs and the schemes in :data:`ALLOWED_SCHEMES` pass; anything
    else (``javascript:``, ``data:``, unparseable input) is dropped.
    Characters that could end the surrounding attribute or ``url()`` are
    percent-encoded.
    """
    url = (url or "").strip()
    if not url:
        return ""
    try:
        scheme = urlsplit(url).scheme
    except ValueError:
        return ""
    if scheme and scheme not in ALLOWED_SCHEMES:
        return ""
    return "".join(
        f"%{ord(ch):02X}" if ch in _BREAKOUT_CHARS or ch.isspace() else ch for ch in url
    )


def panel_image(thumbnail: Thumbnail | None) -> dict[str, str] | None:
    """Template values for a fixed-ratio lead image, or None without a thumbnail."""
    if thumbnail is None:
        return None
    return {"url": safe_url(thumbnail.url), "padding": format_ratio(thumbnail.ratio)}


def item_classes(item: ContentItem) -> str:
    """CSS classes for an article wrapping *item*."""
    classes = [
        f"post-{item.id}",
        item.content_type,
        f"type-{item.content_type}",
        f"status-{item.status.value}",
    ]
    if item.has_thumbnail:
        classes.append("has-post-thumbnail")
    return " ".join(classes)


def header_values(ctx: RenderContext, origin: MenuItem) -> dict[str, Any]:
    """Title, link, and optional description shared by every block header."""
    description = None
    if origin.description:
        description = ctx.filters.title(origin.description, origin.id)
    return {
        "title": ctx.filters.title(origin.title, origin.id),
        "url": safe_url(origin.url),
        "description": description,
    }


def render_excerpt(ctx: RenderContext, item: ContentItem) -> Markup:
    """One archive entry: the item's title link and its excerpt."""
    excerpt = make_excerpt(item, ctx.display.excerpt_length, ctx.display.excerpt_more)
    return ctx.render_template(
        "excerpt.html.j2",
        item=item,
        url=safe_url(item.url),
        classes=item_classes(item),
        title=ctx.filters.title(item.title, item.id),
        excerpt=ctx.filters.content(excerpt, item.id),
    )


def render_excerpts(ctx: RenderContext, items: Sequence[ContentItem]) -> Markup:
    """Excerpt entries for *items*, in the given order."""
    return Markup("").join(render_excerpt(ctx, item) for item in items)


def render_single_item(
    ctx: RenderContext,
    origin: MenuItem,
    item: ContentItem,
    recent: Sequence[ContentItem] = (),
) -> RenderedBlock:
    """Full-content block for the content item a menu item points to.

    *recent* is the appendix shown under the posts landing page; empty
    for every other item.
    """
    markup = ctx.render_template(
        "single_item.html.j2",
        anchor_id=origin.anchor_id,
        classes=item_classes(item),
        image=panel_image(item.thumbnail),
        body=ctx.filters.content(item.body, item.id),
        recent=render_excerpts(ctx, recent) if recent else None,
        **header_values(ctx, origin),
    )
    return RenderedBlock(anchor_id=origin.anchor_id, markup=markup)


def render_custom_link(ctx: RenderContext, origin: MenuItem) -> RenderedBlock:
    """Title link block for an arbitrary URL; the description is its body."""
    body = None
    if origin.description:
        body = ctx.filters.content(origin.description, origin.id)
    markup = ctx.render_template(
        "custom_link.html.j2",
        anchor_id=origin.anchor_id,
        title=ctx.filters.title(origin.title, origin.id),
        url=safe_url(origin.url),
        body=body,
    )
    return RenderedBlock(anchor_id=origin.anchor_id, markup=markup)
