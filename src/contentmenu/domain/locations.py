"""Menu location naming.

Every dynamic menu lives at a location key ending in ``_content``: one for
the front page, plus one per published page that uses the dynamic template.
"""

from __future__ import annotations

LOCATION_SUFFIX = "_content"
FRONT_PAGE = "front_page"
FRONT_PAGE_LOCATION = f"{FRONT_PAGE}{LOCATION_SUFFIX}"
FRONT_PAGE_LABEL = "Front Page Content"


def location_key(location: str | int) -> str:
    """Return the menu location key for a page id or the front page name.

    Accepts an already-suffixed key unchanged.
    """
    name = str(location)
    if name.endswith(LOCATION_SUFFIX):
        return name
    return f"{name}{LOCATION_SUFFIX}"


def page_location_label(page_title: str) -> str:
    return f"{page_title} Content"
