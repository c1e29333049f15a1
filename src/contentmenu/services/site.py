"""SiteService — database setup, fixture loading, and location listing."""

from __future__ import annotations

from pathlib import Path

from sqlalchemy.exc import SQLAlchemyError

from contentmenu.domain.errors import ContentLookupError
from contentmenu.infrastructure.database.engine import DB_FILENAME
from contentmenu.infrastructure.loader import FixtureError, SiteLoader
from contentmenu.services.base import BaseService
from contentmenu.services.result import ServiceResult


class SiteService(BaseService):
    """Administrative operations on a site database."""

    def init(self) -> ServiceResult:
        """Report the initialized database (the Site creates it on open)."""
        data_dir = self._site.settings.data_dir
        return ServiceResult(
            ok=True,
            op="init",
            data={
                "site_root": str(self._site.root),
                "database": str(data_dir / DB_FILENAME),
                "plugins_dir": str(data_dir / "plugins"),
                "templates_dir": str(data_dir / "templates"),
            },
        )

    def load(self, path: Path) -> ServiceResult:
        """Import a YAML site fixture."""
        op = "load"
        try:
            counts = SiteLoader(self._site).load(path)
        except FixtureError as exc:
            return self._fail(op, "INVALID_FIXTURE", str(exc), path=str(path))
        except SQLAlchemyError as exc:
            reason = getattr(exc, "orig", None) or exc
            return self._fail(op, "LOAD_FAILED", str(reason), path=str(path))
        return ServiceResult(ok=True, op=op, data={"path": str(path), **counts})

    def locations(self) -> ServiceResult:
        """List registered menu locations with their assigned menus."""
        op = "locations"
        config = self._site.settings.site
        try:
            registered = self._site.menus.list_locations(config.dynamic_template)
            assigned = self._site.menus.assignments()
        except ContentLookupError as exc:
            return self._fail(op, "LOOKUP_FAILED", str(exc))

        items = [
            {"location": key, "label": label, "menu": assigned.get(key)}
            for key, label in registered.items()
        ]
        warnings = [
            f"Menu '{name}' is assigned to unregistered location '{key}'"
            for key, name in assigned.items()
            if key not in registered
        ]
        return ServiceResult(
            ok=True,
            op=op,
            data={"items": items, "count": len(items)},
            warnings=warnings,
        )
