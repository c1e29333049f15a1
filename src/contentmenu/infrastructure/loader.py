"""YAML site fixtures — bulk-load content, terms, and menus.

A fixture document looks like::

    content_types: [post, page, {name: article, label: Articles}]
    terms:
      - {id: 7, taxonomy: category, name: News, description: Latest news}
    items:
      - id: 1
        title: Hello
        type: post
        published: "2024-05-01T09:00:00"
        terms: [7]
        thumbnail: {url: /img/hello.jpg, width: 1600, height: 900}
    menus:
      - id: 1
        name: Front
        locations: [front_page]
        items:
          - {id: 10, type: custom_link, title: About, url: /about}
          - id: 11
            type: type_archive
            object_ref: post
            title: Blog
            children:
              - {id: 12, type: custom_link, title: Nested}

Menu item ``children`` are flattened in document order with ``parent_id``
links; locations accept either ``front_page`` or ``front_page_content``.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, Field, ValidationError, field_validator
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError
from sqlalchemy import insert

from contentmenu.domain.locations import location_key
from contentmenu.domain.types import ContentStatus
from contentmenu.infrastructure.database.schema import (
    content_items,
    content_types,
    item_terms,
    menu_items,
    menu_locations,
    menus,
    terms,
)

if TYPE_CHECKING:
    from sqlalchemy import Connection

    from contentmenu.infrastructure.site import Site

logger = logging.getLogger(__name__)


class FixtureError(ValueError):
    """A fixture file that cannot be parsed or validated."""


# ---------------------------------------------------------------------------
# Fixture schema
# ---------------------------------------------------------------------------


class ContentTypeSpec(BaseModel):
    name: str
    label: str | None = None


class TermSpec(BaseModel):
    id: int
    taxonomy: str
    name: str
    slug: str | None = None
    description: str = ""


class ThumbnailSpec(BaseModel):
    url: str
    width: int
    height: int


class ItemSpec(BaseModel):
    id: int
    title: str
    type: str = "post"
    status: ContentStatus = ContentStatus.PUBLISH
    body: str = ""
    excerpt: str = ""
    slug: str | None = None
    url: str = ""
    template: str | None = None
    published: str | None = None
    terms: list[int] = Field(default_factory=list)
    thumbnail: ThumbnailSpec | None = None


class MenuItemSpec(BaseModel):
    id: int
    type: str = "custom_link"
    title: str = ""
    url: str = ""
    description: str = ""
    object_ref: str = ""
    object_id: int | None = None
    children: list[MenuItemSpec] = Field(default_factory=list)


class MenuSpec(BaseModel):
    id: int
    name: str
    slug: str | None = None
    locations: list[str] = Field(default_factory=list)
    items: list[MenuItemSpec] = Field(default_factory=list)


class SiteFixture(BaseModel):
    """Root of a fixture document."""

    content_types: list[ContentTypeSpec] = Field(default_factory=list)
    terms: list[TermSpec] = Field(default_factory=list)
    items: list[ItemSpec] = Field(default_factory=list)
    menus: list[MenuSpec] = Field(default_factory=list)

    @field_validator("content_types", mode="before")
    @classmethod
    def _names_as_specs(cls, value: Any) -> Any:
        if isinstance(value, list):
            return [{"name": v} if isinstance(v, str) else v for v in value]
        return value


def read_fixture(path: Path) -> SiteFixture:
    """Parse and validate a YAML fixture file."""
    try:
        raw = YAML(typ="safe").load(path.read_text(encoding="utf-8"))
    except (OSError, YAMLError) as exc:
        msg = f"Cannot read fixture {path}: {exc}"
        raise FixtureError(msg) from exc

    try:
        return SiteFixture.model_validate(raw or {})
    except ValidationError as exc:
        msg = f"Invalid fixture {path}: {exc}"
        raise FixtureError(msg) from exc


# ---------------------------------------------------------------------------
# Loader
# ---------------------------------------------------------------------------


class SiteLoader:
    """Insert a :class:`SiteFixture` into the site database in one transaction."""

    def __init__(self, site: Site) -> None:
        self._site = site

    def load(self, path: Path) -> dict[str, int]:
        """Load the fixture at *path*; return inserted row counts per kind."""
        return self.load_fixture(read_fixture(path))

    def load_fixture(self, fixture: SiteFixture) -> dict[str, int]:
        counts = {"content_types": 0, "terms": 0, "items": 0, "menus": 0, "menu_items": 0}
        with self._site.transaction() as conn:
            counts["content_types"] = self._insert_types(conn, fixture)
            for term in fixture.terms:
                conn.execute(insert(terms).values(**term.model_dump()))
                counts["terms"] += 1
            for item in fixture.items:
                self._insert_item(conn, item)
                counts["items"] += 1
            for menu in fixture.menus:
                counts["menu_items"] += self._insert_menu(conn, menu)
                counts["menus"] += 1
        logger.debug("Loaded fixture: %s", counts)
        return counts

    @staticmethod
    def _insert_types(conn: Connection, fixture: SiteFixture) -> int:
        declared = {spec.name: spec.label for spec in fixture.content_types}
        for item in fixture.items:
            declared.setdefault(item.type, None)
        for name, label in declared.items():
            conn.execute(insert(content_types).values(name=name, label=label or name.title()))
        return len(declared)

    @staticmethod
    def _insert_item(conn: Connection, item: ItemSpec) -> None:
        thumb = item.thumbnail
        conn.execute(
            insert(content_items).values(
                id=item.id,
                title=item.title,
                body=item.body,
                excerpt=item.excerpt,
                slug=item.slug,
                url=item.url,
                content_type=item.type,
                status=item.status.value,
                template=item.template,
                published=item.published,
                thumbnail_url=thumb.url if thumb else None,
                thumbnail_width=thumb.width if thumb else None,
                thumbnail_height=thumb.height if thumb else None,
            )
        )
        for term_id in item.terms:
            conn.execute(insert(item_terms).values(item_id=item.id, term_id=term_id))

    @staticmethod
    def _insert_menu(conn: Connection, menu: MenuSpec) -> int:
        conn.execute(
            insert(menus).values(
                id=menu.id,
                name=menu.name,
                slug=menu.slug or menu.name.lower().replace(" ", "-"),
            )
        )
        position = 0

        def insert_items(specs: list[MenuItemSpec], parent_id: int | None) -> None:
            nonlocal position
            for spec in specs:
                position += 1
                conn.execute(
                    insert(menu_items).values(
                        id=spec.id,
                        menu_id=menu.id,
                        parent_id=parent_id,
                        position=position,
                        title=spec.title,
                        url=spec.url,
                        description=spec.description,
                        type=spec.type,
                        object_ref=spec.object_ref,
                        object_id=spec.object_id,
                    )
                )
                insert_items(spec.children, spec.id)

        insert_items(menu.items, None)
        for location in menu.locations:
            conn.execute(
                insert(menu_locations).values(location=location_key(location), menu_id=menu.id)
            )
        return position
