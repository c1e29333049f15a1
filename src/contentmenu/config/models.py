"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, contentmenu.toml only contains
overrides. A fresh site needs nothing at all.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator

DEFAULT_ARCHIVE_LIMIT = 3

# --- contentmenu.toml sections ---


class SiteConfig(BaseModel):
    """[site] section."""

    model_config = {"frozen": True}

    name: str = "my-site"
    posts_page_id: int | None = None
    posts_type: str = "post"
    dynamic_template: str = "dynamic"


class DisplayConfig(BaseModel):
    """[display] section.

    ``archive_limit`` is the number of items fetched for every archive-style
    menu item and for the recent-items list under the posts landing page.
    """

    model_config = {"frozen": True}

    archive_limit: int = DEFAULT_ARCHIVE_LIMIT
    excerpt_length: int = 55
    excerpt_more: str = "\u2026"
    menu_class: str = "menu"

    @field_validator("archive_limit", mode="before")
    @classmethod
    def _sanitize_limit(cls, value: Any) -> int:
        """Coerce to a positive integer; unset or zero falls back to the default."""
        if value is None or value == "":
            return DEFAULT_ARCHIVE_LIMIT
        limit = abs(int(value))
        return limit or DEFAULT_ARCHIVE_LIMIT

    @field_validator("excerpt_length")
    @classmethod
    def _positive_length(cls, value: int) -> int:
        if value <= 0:
            msg = "excerpt_length must be positive"
            raise ValueError(msg)
        return value


class ContentMenuConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    site: SiteConfig = Field(default_factory=SiteConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)
