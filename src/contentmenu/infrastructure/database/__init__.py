"""SQLite database engine and schema via SQLAlchemy Core."""

from contentmenu.infrastructure.database.engine import create_db_engine, init_database
from contentmenu.infrastructure.database.schema import (
    content_items,
    content_types,
    item_terms,
    menu_items,
    menu_locations,
    menus,
    metadata,
    terms,
)

__all__ = [
    "content_items",
    "content_types",
    "create_db_engine",
    "init_database",
    "item_terms",
    "menu_items",
    "menu_locations",
    "menus",
    "metadata",
    "terms",
]
