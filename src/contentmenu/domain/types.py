"""Menu item kinds and content status enums."""

from __future__ import annotations

from enum import StrEnum


class MenuItemType(StrEnum):
    """What a menu item points to.

    ``UNKNOWN`` is never stored; it is the kind of any item whose stored
    type name is not one of the others.
    """

    SINGLE_ITEM = "single_item"
    TAXONOMY = "taxonomy"
    TYPE_ARCHIVE = "type_archive"
    CUSTOM_LINK = "custom_link"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, value: str) -> MenuItemType:
        """Map a stored type name to its kind, ``UNKNOWN`` if unrecognized."""
        try:
            kind = cls(value)
        except ValueError:
            return cls.UNKNOWN
        return kind


class ContentStatus(StrEnum):
    """Publication status of a content item."""

    PUBLISH = "publish"
    FUTURE = "future"
    DRAFT = "draft"
    PENDING = "pending"
    PRIVATE = "private"
    TRASH = "trash"
