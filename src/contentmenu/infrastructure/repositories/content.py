"""Read-side repository for content items and taxonomy terms."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from sqlalchemy import Select, select
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from contentmenu.domain.errors import ContentLookupError
from contentmenu.domain.models import ContentItem, Term, Thumbnail
from contentmenu.domain.types import ContentStatus
from contentmenu.infrastructure.database.schema import (
    content_items,
    content_types,
    item_terms,
    terms,
)

logger = logging.getLogger(__name__)


@contextmanager
def lookup_errors(operation: str) -> Iterator[None]:
    """Translate database failures into :class:`ContentLookupError`."""
    try:
        yield
    except SQLAlchemyError as exc:
        msg = f"{operation} failed: {exc}"
        raise ContentLookupError(msg) from exc


def row_to_content_item(row: Any) -> ContentItem:
    """Build a ContentItem from a ``content_items`` row mapping.

    Thumbnails with missing or unusable dimensions are dropped, so a
    ContentItem only ever carries geometry that can produce a ratio.
    """
    thumbnail: Thumbnail | None = None
    width, height = row["thumbnail_width"], row["thumbnail_height"]
    if row["thumbnail_url"]:
        if width is not None and height is not None and width > 0 and height >= 0:
            thumbnail = Thumbnail(url=row["thumbnail_url"], width=width, height=height)
        else:
            logger.debug("Ignoring thumbnail of item %s with size %sx%s", row["id"], width, height)

    return ContentItem(
        id=row["id"],
        title=row["title"],
        body=row["body"] or "",
        excerpt=row["excerpt"] or "",
        url=row["url"] or "",
        content_type=row["content_type"],
        status=row["status"],
        published=row["published"],
        thumbnail=thumbnail,
    )


class ContentRepository:
    """Encapsulates SQL for content lookups made while rendering menus.

    Archive-style queries return published items only, newest first.
    """

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def get_by_id(self, item_id: int) -> ContentItem | None:
        """Fetch one content item by id, whatever its status."""
        stmt = select(content_items).where(content_items.c.id == item_id)
        with lookup_errors("get_by_id"), self._engine.connect() as conn:
            row = conn.execute(stmt).mappings().first()
        return row_to_content_item(row) if row is not None else None

    def query_by_type(self, content_type: str, limit: int) -> list[ContentItem]:
        """Fetch up to *limit* published items of *content_type*."""
        stmt = self._published().where(content_items.c.content_type == content_type)
        return self._fetch("query_by_type", stmt.limit(limit))

    def query_by_term(self, taxonomy: str, term_id: int, limit: int) -> list[ContentItem]:
        """Fetch up to *limit* published items of any type tagged with a term."""
        stmt = (
            self._published()
            .join(item_terms, item_terms.c.item_id == content_items.c.id)
            .join(terms, terms.c.id == item_terms.c.term_id)
            .where(terms.c.id == term_id, terms.c.taxonomy == taxonomy)
        )
        return self._fetch("query_by_term", stmt.limit(limit))

    def recent_published(self, content_type: str, limit: int) -> list[ContentItem]:
        """Most recent published items of *content_type*."""
        stmt = self._published().where(content_items.c.content_type == content_type)
        return self._fetch("recent_published", stmt.limit(limit))

    def get_term(self, term_id: int, taxonomy: str) -> Term | None:
        """Fetch a term, which must belong to *taxonomy*."""
        stmt = select(terms).where(terms.c.id == term_id, terms.c.taxonomy == taxonomy)
        with lookup_errors("get_term"), self._engine.connect() as conn:
            row = conn.execute(stmt).mappings().first()
        if row is None:
            return None
        return Term(
            id=row["id"],
            taxonomy=row["taxonomy"],
            name=row["name"],
            slug=row["slug"] or "",
            description=row["description"] or "",
        )

    def type_exists(self, content_type: str) -> bool:
        """Whether *content_type* is a registered content type."""
        stmt = select(content_types.c.name).where(content_types.c.name == content_type)
        with lookup_errors("type_exists"), self._engine.connect() as conn:
            return conn.execute(stmt).first() is not None

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _published() -> Select[Any]:
        return (
            select(content_items)
            .where(content_items.c.status == ContentStatus.PUBLISH.value)
            .order_by(content_items.c.published.desc(), content_items.c.id.desc())
        )

    def _fetch(self, operation: str, stmt: Select[Any]) -> list[ContentItem]:
        with lookup_errors(operation), self._engine.connect() as conn:
            rows = conn.execute(stmt).mappings().all()
        return [row_to_content_item(row) for row in rows]
