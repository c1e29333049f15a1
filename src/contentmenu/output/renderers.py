"""Rich rendering of service results for terminal output.

Each operation may register its own renderer with :func:`_renders`;
operations without one are printed as ``key: value`` lines.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import TYPE_CHECKING

from rich.table import Table
from rich.text import Text

from contentmenu.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from contentmenu.services.result import ServiceResult

Renderer = Callable[["ServiceResult", "Console", bool], None]

_RENDERERS: dict[str, Renderer] = {}


def _renders(op: str) -> Callable[[Renderer], Renderer]:
    def register(fn: Renderer) -> Renderer:
        _RENDERERS[op] = fn
        return fn

    return register


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render *result* with its operation's renderer and return the text."""
    console = create_console()
    if not result.ok:
        _render_failure(result, console, verbose)
    else:
        _RENDERERS.get(result.op, _render_fields)(result, console, verbose)
    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """One line per location for listings, else a bare OK or ERROR line."""
    if not result.ok:
        return f"ERROR: {result.op} — {_error_message(result)}"
    items = result.data.get("items")
    if isinstance(items, list) and items:
        return "\n".join(str(item.get("location", "")) for item in items)
    return f"OK: {result.op}"


def _error_message(result: ServiceResult) -> str:
    return result.error.message if result.error else "Unknown error"


def _field(console: Console, key: str, value: object) -> None:
    if isinstance(value, (dict, list)):
        value = json.dumps(value, separators=(",", ":"))
    console.print(Text(f"  {key}: ", style="cm.key"), Text(str(value)), sep="")


def _render_fields(result: ServiceResult, console: Console, verbose: bool) -> None:
    console.print(Text("OK", style="cm.ok"), Text(f"  {result.op}", style="cm.op"))
    for key, value in result.data.items():
        _field(console, key, value)
    if verbose and result.meta:
        _field(console, "meta", result.meta)


@_renders("locations")
def _render_locations(result: ServiceResult, console: Console, verbose: bool) -> None:
    console.print(Text("OK", style="cm.ok"), Text(f"  {result.op}", style="cm.op"))
    table = Table(show_header=True, header_style="bold")
    table.add_column("Location", style="cm.location")
    table.add_column("Label")
    table.add_column("Menu")
    for item in result.data.get("items", []):
        menu = item.get("menu")
        table.add_row(
            item["location"],
            item["label"],
            Text(menu, style="cm.menu") if menu else Text("(none)", style="cm.unassigned"),
        )
    console.print(table)


def _render_failure(result: ServiceResult, console: Console, verbose: bool) -> None:
    console.print(
        Text("ERROR", style="cm.error"), Text(f"  {result.op} — {_error_message(result)}")
    )
    if verbose and result.error is not None:
        for key, value in result.error.detail.items():
            _field(console, key, value)
