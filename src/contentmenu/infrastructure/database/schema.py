"""SQLAlchemy Core table definitions for the contentmenu site database.

Content (items, types, taxonomy terms) and menus (menus, locations, items)
live side by side. Menu items are stored flat with an optional
``parent_id``; nesting depth is derived when a menu is read.
"""

from __future__ import annotations

from sqlalchemy import (
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    Table,
    Text,
    UniqueConstraint,
)

metadata = MetaData()

content_types = Table(
    "content_types",
    metadata,
    Column("name", Text, primary_key=True),
    Column("label", Text),
)

content_items = Table(
    "content_items",
    metadata,
    Column("id", Integer, primary_key=True),
    Column("title", Text, nullable=False),
    Column("body", Text, nullable=False, default="", server_default=""),
    Column("excerpt", Text, nullable=False, default="", server_default=""),
    Column("slug", Text),
    Column("url", Text, nullable=False, default="", server_default=""),
    Column("content_type", Text, ForeignKey("content_types.name"), nullable=False),
    Column("status", Text, nullable=False, default="publish", server_default="publish"),
    Column("template", Text),  # page template name, e.g. "dynamic"
    Column("published", Text),  # ISO timestamp
    Column("thumbnail_url", Text),
    Column("thumbnail_width", Integer),
    Column("thumbnail_height", Integer),
)

terms = Table(
    "terms",
    metadata,
    Column("id", Integer, primary_key=True),
    Column("taxonomy", Text, nullable=False),
    Column("name", Text, nullable=False),
    Column("slug", Text),
    Column("description", Text, nullable=False, default="", server_default=""),
)

item_terms = Table(
    "item_terms",
    metadata,
    Column("item_id", Integer, ForeignKey("content_items.id"), nullable=False),
    Column("term_id", Integer, ForeignKey("terms.id"), nullable=False),
    UniqueConstraint("item_id", "term_id"),
)

menus = Table(
    "menus",
    metadata,
    Column("id", Integer, primary_key=True),
    Column("name", Text, nullable=False),
    Column("slug", Text, nullable=False, unique=True),
)

menu_locations = Table(
    "menu_locations",
    metadata,
    Column("location", Text, primary_key=True),
    Column("menu_id", Integer, ForeignKey("menus.id"), nullable=False),
)

menu_items = Table(
    "menu_items",
    metadata,
    Column("id", Integer, primary_key=True),
    Column("menu_id", Integer, ForeignKey("menus.id"), nullable=False),
    Column("parent_id", Integer, ForeignKey("menu_items.id")),
    Column("position", Integer, nullable=False),
    Column("title", Text, nullable=False, default="", server_default=""),
    Column("url", Text, nullable=False, default="", server_default=""),
    Column("description", Text, nullable=False, default="", server_default=""),
    Column("type", Text, nullable=False),
    Column("object_ref", Text, nullable=False, default="", server_default=""),
    Column("object_id", Integer),
)

# ---------------------------------------------------------------------------
# Indexes for frequently filtered columns
# ---------------------------------------------------------------------------

Index("ix_content_items_type_status", content_items.c.content_type, content_items.c.status)
Index("ix_content_items_published", content_items.c.published)
Index("ix_terms_taxonomy", terms.c.taxonomy)
Index("ix_item_terms_term", item_terms.c.term_id)
Index("ix_menu_items_menu", menu_items.c.menu_id, menu_items.c.position)
