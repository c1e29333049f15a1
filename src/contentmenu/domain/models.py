"""Request-scoped value objects for a dynamic menu render.

Everything here is frozen: menu items and content items are read-only
snapshots for the duration of one render, and a rendered block is never
mutated once produced.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Self

from markupsafe import Markup
from pydantic import BaseModel, Field, model_validator

from contentmenu.domain.geometry import thumbnail_ratio
from contentmenu.domain.types import ContentStatus, MenuItemType

if TYPE_CHECKING:
    from contentmenu.domain.ports import ContentSource

ANCHOR_PREFIX = "nav-menu-item-"


def anchor_id_for(menu_item_id: int) -> str:
    """Stable DOM id for the block produced by a menu item."""
    return f"{ANCHOR_PREFIX}{menu_item_id}"


class Thumbnail(BaseModel):
    """A featured image with its natural dimensions."""

    model_config = {"frozen": True}

    url: str
    width: int = Field(gt=0)
    height: int = Field(ge=0)

    @property
    def ratio(self) -> float:
        """Padding ratio (percent) for a fixed-aspect placeholder box."""
        return thumbnail_ratio(self.width, self.height)


class ContentItem(BaseModel):
    """A single piece of published content (post, page, or custom type)."""

    model_config = {"frozen": True}

    id: int
    title: str
    body: str = ""
    excerpt: str = ""
    url: str = ""
    content_type: str = "post"
    status: ContentStatus = ContentStatus.PUBLISH
    published: str | None = None
    thumbnail: Thumbnail | None = None

    @property
    def has_thumbnail(self) -> bool:
        return self.thumbnail is not None


class Term(BaseModel):
    """A taxonomy term (category, tag, or custom taxonomy)."""

    model_config = {"frozen": True}

    id: int
    taxonomy: str
    name: str
    slug: str = ""
    description: str = ""


class MenuItem(BaseModel):
    """One editor-authored entry of a flat menu.

    ``type`` keeps the stored type name verbatim so unrecognized types can
    still be reported by name; :attr:`kind` is the closed classification.
    ``object_ref`` names a taxonomy or content type and ``object_id`` the
    referenced entity. Both are meaningless for custom links.
    """

    model_config = {"frozen": True}

    id: int
    title: str = ""
    url: str = ""
    description: str = ""
    type: str = MenuItemType.CUSTOM_LINK.value
    object_ref: str = ""
    object_id: int | None = None
    depth: int = Field(default=0, ge=0)

    @property
    def kind(self) -> MenuItemType:
        return MenuItemType.parse(self.type)

    @property
    def anchor_id(self) -> str:
        return anchor_id_for(self.id)

    @property
    def is_top_level(self) -> bool:
        return self.depth == 0


class MenuContainer(BaseModel):
    """Attributes of the element wrapping all rendered blocks."""

    model_config = {"frozen": True}

    id_attr: str
    class_attr: str = "menu content-menu"


class ArchiveQuery(BaseModel):
    """Fetch plan for an archive-style menu item.

    Exactly one filter applies: a content type, or a taxonomy term.
    """

    model_config = {"frozen": True}

    limit: int = Field(gt=0)
    content_type: str | None = None
    taxonomy: str | None = None
    term_id: int | None = None

    @model_validator(mode="after")
    def _one_filter(self) -> Self:
        by_term = self.taxonomy is not None and self.term_id is not None
        if by_term == (self.content_type is not None):
            msg = "ArchiveQuery needs either content_type or taxonomy + term_id"
            raise ValueError(msg)
        return self

    @classmethod
    def for_type(cls, content_type: str, limit: int) -> ArchiveQuery:
        return cls(content_type=content_type, limit=limit)

    @classmethod
    def for_term(cls, taxonomy: str, term_id: int, limit: int) -> ArchiveQuery:
        return cls(taxonomy=taxonomy, term_id=term_id, limit=limit)

    def run(self, source: ContentSource) -> list[ContentItem]:
        """Execute against *source*, returning items in store order."""
        if self.content_type is not None:
            return list(source.query_by_type(self.content_type, self.limit))
        assert self.taxonomy is not None and self.term_id is not None
        return list(source.query_by_term(self.taxonomy, self.term_id, self.limit))


@dataclass(frozen=True)
class RenderedBlock:
    """Markup produced for one menu item, keyed by its anchor id."""

    anchor_id: str
    markup: Markup
