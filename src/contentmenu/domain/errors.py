"""Exceptions shared by the domain, render, and infrastructure layers."""

from __future__ import annotations


class InvalidGeometryError(ValueError):
    """Image dimensions that cannot produce an aspect ratio.

    Raised for a non-positive width (or negative height). Indicates a caller
    bug: renderers only compute geometry for confirmed thumbnails.
    """

    def __init__(self, width: float, height: float) -> None:
        super().__init__(f"Invalid thumbnail geometry: width={width!r}, height={height!r}")
        self.width = width
        self.height = height


class ContentLookupError(RuntimeError):
    """A content or menu store could not answer a lookup."""
