"""Shared Jinja2 template loading with per-site override support."""

from __future__ import annotations

from pathlib import Path

from jinja2 import BaseLoader, ChoiceLoader, Environment, FileSystemLoader, PackageLoader


def build_template_environment(group: str, *, site_root: Path | None = None) -> Environment:
    """Build an autoescaping Jinja2 environment, site overrides before packaged defaults.

    User overrides are loaded from ``.contentmenu/templates/`` inside the
    site. Both a namespaced directory (for example
    ``.contentmenu/templates/blocks/``) and the shared root are supported.
    """

    loaders: list[BaseLoader] = []
    if site_root is not None:
        template_root = site_root / ".contentmenu" / "templates"
        loaders.append(FileSystemLoader([str(template_root / group), str(template_root)]))

    loaders.append(PackageLoader("contentmenu", f"templates/{group}"))
    return Environment(
        loader=ChoiceLoader(loaders),
        autoescape=True,
        trim_blocks=True,
        lstrip_blocks=True,
    )
