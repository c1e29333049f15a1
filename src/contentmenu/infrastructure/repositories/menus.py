"""Menu store: menus, their items, and location assignments."""

from __future__ import annotations

from typing import Any

from sqlalchemy import delete, insert, select
from sqlalchemy.engine import Engine

from contentmenu.domain.locations import (
    FRONT_PAGE_LABEL,
    FRONT_PAGE_LOCATION,
    location_key,
    page_location_label,
)
from contentmenu.domain.models import MenuItem
from contentmenu.domain.types import ContentStatus
from contentmenu.infrastructure.database.schema import (
    content_items,
    menu_items,
    menu_locations,
    menus,
)
from contentmenu.infrastructure.repositories.content import lookup_errors


def compute_depths(rows: list[dict[str, Any]]) -> dict[int, int]:
    """Map menu item id -> nesting depth from ``parent_id`` links.

    Items whose parent is missing from the menu count as top level.
    A parent cycle stops at the first repeated item.
    """
    parents = {row["id"]: row["parent_id"] for row in rows}
    depths: dict[int, int] = {}
    for item_id in parents:
        depth = 0
        seen = {item_id}
        parent = parents[item_id]
        while parent is not None and parent in parents and parent not in seen:
            seen.add(parent)
            depth += 1
            parent = parents[parent]
        depths[item_id] = depth
    return depths


class MenuRepository:
    """Encapsulates SQL for menus and menu locations."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def get_menu(self, location_key: str) -> list[MenuItem]:
        """Return the items of the menu assigned to *location_key*, in display order.

        Returns an empty list if no menu is assigned.
        """
        stmt = (
            select(menu_items)
            .join(menu_locations, menu_locations.c.menu_id == menu_items.c.menu_id)
            .where(menu_locations.c.location == location_key)
            .order_by(menu_items.c.position, menu_items.c.id)
        )
        with lookup_errors("get_menu"), self._engine.connect() as conn:
            rows = [dict(row) for row in conn.execute(stmt).mappings().all()]

        depths = compute_depths(rows)
        return [
            MenuItem(
                id=row["id"],
                title=row["title"],
                url=row["url"],
                description=row["description"],
                type=row["type"],
                object_ref=row["object_ref"],
                object_id=row["object_id"],
                depth=depths[row["id"]],
            )
            for row in rows
        ]

    def get_assigned_menu(self, location_key: str) -> dict[str, Any] | None:
        """Return ``{id, name, slug}`` of the menu at *location_key*, if any."""
        stmt = (
            select(menus.c.id, menus.c.name, menus.c.slug)
            .join(menu_locations, menu_locations.c.menu_id == menus.c.id)
            .where(menu_locations.c.location == location_key)
        )
        with lookup_errors("get_assigned_menu"), self._engine.connect() as conn:
            row = conn.execute(stmt).mappings().first()
        return dict(row) if row is not None else None

    def list_locations(self, dynamic_template: str) -> dict[str, str]:
        """Return registered location keys and their labels.

        The front page location always exists; every published page using
        *dynamic_template* adds one more.
        """
        locations = {FRONT_PAGE_LOCATION: FRONT_PAGE_LABEL}
        stmt = (
            select(content_items.c.id, content_items.c.title)
            .where(
                content_items.c.content_type == "page",
                content_items.c.status == ContentStatus.PUBLISH.value,
                content_items.c.template == dynamic_template,
            )
            .order_by(content_items.c.id)
        )
        with lookup_errors("list_locations"), self._engine.connect() as conn:
            for row in conn.execute(stmt).fetchall():
                locations[location_key(row.id)] = page_location_label(row.title)
        return locations

    def assignments(self) -> dict[str, str]:
        """Map location key -> assigned menu name."""
        stmt = select(menu_locations.c.location, menus.c.name).join(
            menus, menus.c.id == menu_locations.c.menu_id
        )
        with lookup_errors("assignments"), self._engine.connect() as conn:
            rows = conn.execute(stmt).fetchall()
        return {str(row.location): str(row.name) for row in rows}

    def assign(self, location: str, menu_id: int) -> None:
        """Assign a menu to a location, replacing any previous assignment."""
        with lookup_errors("assign"), self._engine.begin() as conn:
            conn.execute(delete(menu_locations).where(menu_locations.c.location == location))
            conn.execute(insert(menu_locations).values(location=location, menu_id=menu_id))
