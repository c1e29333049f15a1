"""SQLite engine for a site's ``.contentmenu/site.db``.

Rendering issues a few short reads per menu, so SQLAlchemy Core is used
directly with no ORM session.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from sqlalchemy import Engine, create_engine, event

from contentmenu.infrastructure.database.schema import metadata

DB_FILENAME = "site.db"
SITE_SUBDIRS = ("plugins", "templates")

_PRAGMAS = ("journal_mode=WAL", "foreign_keys=ON")


def create_db_engine(db_path: Path) -> Engine:
    engine = create_engine(f"sqlite:///{db_path}")

    @event.listens_for(engine, "connect")
    def _on_connect(dbapi_conn: Any, _record: Any) -> None:
        cursor = dbapi_conn.cursor()
        for pragma in _PRAGMAS:
            cursor.execute(f"PRAGMA {pragma}")
        cursor.close()

    return engine


def init_database(site_root: Path) -> Engine:
    """Create ``.contentmenu/`` with its plugin and template dirs, then the tables.

    Running it again on an existing site changes nothing.
    """
    data_dir = site_root / ".contentmenu"
    for sub in SITE_SUBDIRS:
        (data_dir / sub).mkdir(parents=True, exist_ok=True)
    engine = create_db_engine(data_dir / DB_FILENAME)
    metadata.create_all(engine)
    return engine
