"""Locate and read ``contentmenu.toml``.

The file is found like git finds ``.git/``: in the starting directory or
the nearest ancestor. ``CONTENTMENU_CONFIG`` names a file directly and
disables the search.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path

from contentmenu.config.models import ContentMenuConfig

CONFIG_FILENAME = "contentmenu.toml"
CONFIG_ENV_VAR = "CONTENTMENU_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file governing *start* (default: cwd), or None."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override)
        return path if path.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def load_config(path: Path | None = None, cwd: Path | None = None) -> ContentMenuConfig:
    """Validate the ``[site]`` and ``[display]`` tables of a config file.

    Without *path* the file is discovered from *cwd*; with no file at all
    every section keeps its defaults.
    """
    path = path or find_config(cwd)
    if path is None:
        return ContentMenuConfig()
    with path.open("rb") as fh:
        return ContentMenuConfig.model_validate(tomllib.load(fh))
