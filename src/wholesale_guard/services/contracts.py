"""Typed payload contracts for service results.

Payloads are validated before they leave the service layer so a renamed
key fails in tests instead of in a renderer.
"""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import BaseModel

T = TypeVar("T", bound=BaseModel)


def dump_validated(model_cls: type[T], data: dict[str, Any]) -> dict[str, Any]:
    """Validate *data* against *model_cls* and return a normalized payload dict."""
    model = model_cls.model_validate(data)
    return model.model_dump(mode="python")


class CouponValidationData(BaseModel):
    """Payload contract for ``CheckoutCouponService.validate_coupons``."""

    email: str
    checked: list[str]
    removed: list[str]
    skipped: list[str]
    count: int


class CompatibilityData(BaseModel):
    """Payload contract for ``check_platform_version``."""

    compatible: bool
    platform_version: str | None
    required: str
    tested_up_to: str
