"""Read-side interfaces the renderer needs from its collaborators.

The SQLAlchemy repositories in :mod:`contentmenu.infrastructure.repositories`
satisfy these structurally; tests substitute in-memory fakes.

Implementations raise :class:`~contentmenu.domain.errors.ContentLookupError`
when the underlying store fails. "Not found" is ``None`` or an empty list,
never an exception.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from contentmenu.domain.models import ContentItem, Term


class ContentSource(Protocol):
    """Content repository port."""

    def get_by_id(self, item_id: int) -> ContentItem | None: ...

    def query_by_type(self, content_type: str, limit: int) -> Sequence[ContentItem]: ...

    def query_by_term(self, taxonomy: str, term_id: int, limit: int) -> Sequence[ContentItem]: ...

    def get_term(self, term_id: int, taxonomy: str) -> Term | None: ...

    def type_exists(self, content_type: str) -> bool: ...

    def recent_published(self, content_type: str, limit: int) -> Sequence[ContentItem]: ...
