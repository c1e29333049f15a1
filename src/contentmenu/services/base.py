"""BaseService — abstract foundation for all contentmenu services.

Every service receives a :class:`Site` at construction time. The Site
provides the repositories, plugins, and templates.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from contentmenu.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from contentmenu.infrastructure.site import Site


class BaseService:
    """Abstract base for all service-layer classes.

    Usage::

        class RenderService(BaseService):
            def render_dynamic_menu(self, location: str) -> ServiceResult:
                menu = self._site.menus.get_menu(...)
                ...
    """

    def __init__(self, site: Site) -> None:
        self._site = site

    @staticmethod
    def _fail(op: str, code: str, message: str, **detail: object) -> ServiceResult:
        """Build a failed ServiceResult."""
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(code=code, message=message, detail=dict(detail)),
        )
