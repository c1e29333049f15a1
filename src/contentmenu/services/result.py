"""What every service call hands back to the CLI.

Services never raise for expected failures such as a missing menu or a bad
fixture file. They return a :class:`ServiceResult` with ``ok=False`` and a
:class:`ServiceError` naming the failure code.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Why an operation failed: a stable ``code`` plus a readable message."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one service operation.

    ``data`` carries the payload of a successful call (for ``render_menu``
    the markup and the location key). ``warnings`` collects problems that
    did not stop the operation, such as a menu assigned to a location the
    site does not register. ``meta`` holds counts for verbose output.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None
