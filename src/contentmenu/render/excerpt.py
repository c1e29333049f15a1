"""Excerpts for archive listings."""

from __future__ import annotations

from markupsafe import Markup

from contentmenu.domain.models import ContentItem


def trim_words(text: str, length: int, more: str) -> str:
    """Keep the first *length* words of *text*, appending *more* if cut."""
    words = text.split()
    if len(words) <= length:
        return " ".join(words)
    return f"{' '.join(words[:length])}{more}"


def make_excerpt(item: ContentItem, length: int, more: str) -> str:
    """Plain-text excerpt: the manual excerpt, else the trimmed body.

    Markup in the body is stripped (and entities decoded) before trimming.
    """
    if item.excerpt.strip():
        return item.excerpt
    return trim_words(Markup(item.body).striptags(), length, more)
