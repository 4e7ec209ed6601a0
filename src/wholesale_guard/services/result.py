"""ServiceResult and ServiceError, the contract every service returns.

INVARIANT: All service-layer functions and methods return ServiceResult.
The CLI and the plugin hooks consume this type; neither inspects
service internals.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Why an operation did not succeed."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one service operation.

    Attributes:
        ok: Whether the operation succeeded.
        op: Operation name (``"validate_coupons"``, ``"check_compat"``).
        data: Operation-specific payload.
        warnings: Non-fatal issues collected along the way.
        error: Populated when ``ok`` is False.
        meta: Optional extras for renderers.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None
