"""Read-model repositories for content and menus."""

from contentmenu.infrastructure.repositories.content import ContentRepository
from contentmenu.infrastructure.repositories.menus import MenuRepository

__all__ = ["ContentRepository", "MenuRepository"]
