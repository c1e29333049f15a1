"""Thumbnail geometry — aspect ratio for padding-based placeholder boxes.

A lead image is rendered as a background image over a box whose
``padding-top`` is the image height as a percentage of its width, so the
layout space is reserved before the image loads.
"""

from __future__ import annotations

import math

from contentmenu.domain.errors import InvalidGeometryError


def thumbnail_ratio(width: float, height: float) -> float:
    """Return ``height / width * 100``.

    Raises:
        InvalidGeometryError: If *width* is not positive or *height* is
            negative (or either is not finite).
    """
    if not (math.isfinite(width) and math.isfinite(height)):
        raise InvalidGeometryError(width, height)
    if width <= 0 or height < 0:
        raise InvalidGeometryError(width, height)
    return height / width * 100


def format_ratio(ratio: float) -> str:
    """Render *ratio* as a plain decimal string for a CSS percentage.

    No exponent notation, at most six decimals, trailing zeros trimmed:
    ``56.25`` -> ``"56.25"``, ``75.0`` -> ``"75"``.
    """
    text = f"{ratio:.6f}".rstrip("0").rstrip(".")
    return text or "0"
