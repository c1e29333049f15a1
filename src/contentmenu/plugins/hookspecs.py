"""Pluggy hook specifications for contentmenu rendering.

Two filter hooks form text-formatting chains: every registered
implementation receives the previous implementation's output (see
:meth:`PluginManager.apply_filters`). One notification hook lets plugins
observe menu items whose type the renderer does not know.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pluggy

if TYPE_CHECKING:
    from contentmenu.domain.models import MenuItem

hookspec = pluggy.HookspecMarker("contentmenu")


class ContentMenuHookSpec:
    """Hook specifications for the contentmenu plugin system."""

    @hookspec
    def format_title(self, text: str, context_id: int) -> str:
        """Filter a display title. Return ``markupsafe.Markup`` for trusted HTML."""

    @hookspec
    def format_content(self, text: str, context_id: int) -> str:
        """Filter a body or description. Return ``markupsafe.Markup`` for trusted HTML."""

    @hookspec
    def unknown_menu_item(self, item_type: str, menu_item: MenuItem) -> None:
        """Called for a top-level menu item of an unrecognized type.

        Fire-and-forget: return values are ignored and the item contributes
        no block of its own.
        """
