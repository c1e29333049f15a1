"""Buffered Rich consoles and the contentmenu colour theme.

Renderers print into a :class:`~rich.console.Console` backed by a
``StringIO`` and hand the captured text to Click. Rich drops colour codes
by itself when stdout is not a terminal.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

DEFAULT_WIDTH = 120

CM_THEME = Theme(
    {
        # status words
        "cm.ok": "bold green",
        "cm.error": "bold red",
        "cm.op": "bold cyan",
        "cm.key": "dim",
        # locations table
        "cm.location": "bold blue",
        "cm.menu": "bold",
        "cm.unassigned": "dim italic",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    return Console(
        file=StringIO(),
        theme=CM_THEME,
        no_color=no_color,
        highlight=False,
        width=width or DEFAULT_WIDTH,
    )


def get_output(console: Console) -> str:
    """Everything printed to a console made by :func:`create_console`."""
    buffer = console.file
    assert isinstance(buffer, StringIO)
    return buffer.getvalue()
