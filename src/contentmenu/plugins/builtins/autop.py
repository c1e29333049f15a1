"""Built-in content filter: escape plain text and wrap paragraphs.

Registered before any discovered plugin, so pluggy calls it last in the
``format_content`` chain: other filters see the raw text, and whatever
plain text they hand on is escaped here.
"""

from __future__ import annotations

import re

import pluggy
from markupsafe import Markup, escape

hookimpl = pluggy.HookimplMarker("contentmenu")

_BLANK_LINES = re.compile(r"\n\s*\n")


def autop(text: str) -> Markup:
    """Wrap blank-line-separated blocks in ``<p>``, single newlines as ``<br />``.

    Plain ``str`` input is escaped; ``Markup`` input is trusted as-is.
    """
    if not text.strip():
        return Markup("")
    normalized = text.replace("\r\n", "\n").replace("\r", "\n").strip()
    paragraphs = []
    for block in _BLANK_LINES.split(normalized):
        lines = [escape(line.strip()) for line in block.split("\n")]
        paragraphs.append(Markup("<p>{}</p>").format(Markup("<br />\n").join(lines)))
    return Markup("\n").join(paragraphs)


class AutoParagraphPlugin:
    """Format bodies and descriptions as paragraphs of escaped text."""

    @hookimpl
    def format_content(self, text: str, context_id: int) -> str:
        if isinstance(text, Markup):
            return text
        return autop(text)
