"""Store snapshots: a TOML description of one shopper's storefront.

Example::

    [platform]
    version = "4.0.0"

    [[accounts]]
    id = 7
    email = "buyer@example.com"
    roles = ["wholesale"]

    [[coupons]]
    code = "SAVE10"
    valid = true

    [cart]
    applied_coupons = ["SAVE10"]

    [checkout]
    billing_email = "Buyer@Example.com"

Cart codes without a ``[[coupons]]`` row resolve to an invalid coupon.
"""

from __future__ import annotations

import tomllib
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from wholesale_guard.infrastructure.storefront import (
    AccountRecord,
    CouponRecord,
    InMemoryAccountDirectory,
    InMemoryCart,
    InMemoryCouponCatalog,
    InMemoryStorefront,
)


class SnapshotError(Exception):
    """Raised when a snapshot file cannot be read or fails validation."""


class PlatformSnapshot(BaseModel):
    model_config = {"frozen": True}

    version: str | None = None


class AccountSnapshot(BaseModel):
    model_config = {"frozen": True}

    id: int
    email: str
    roles: list[str] = Field(default_factory=list)


class CouponSnapshot(BaseModel):
    model_config = {"frozen": True}

    code: str
    valid: bool = True


class CartSnapshot(BaseModel):
    model_config = {"frozen": True}

    applied_coupons: list[str] = Field(default_factory=list)


class StoreSnapshot(BaseModel):
    """Root of a snapshot file."""

    model_config = {"frozen": True, "extra": "forbid"}

    platform: PlatformSnapshot = Field(default_factory=PlatformSnapshot)
    accounts: list[AccountSnapshot] = Field(default_factory=list)
    coupons: list[CouponSnapshot] = Field(default_factory=list)
    cart: CartSnapshot = Field(default_factory=CartSnapshot)
    checkout: dict[str, str] = Field(default_factory=dict)

    def build_storefront(self) -> InMemoryStorefront:
        """Materialize a fresh storefront; each call starts from the snapshot."""
        try:
            accounts = InMemoryAccountDirectory(
                AccountRecord(id=a.id, email=a.email, roles=tuple(a.roles)) for a in self.accounts
            )
        except ValueError as exc:
            raise SnapshotError(str(exc)) from exc
        return InMemoryStorefront(
            cart=InMemoryCart(self.cart.applied_coupons),
            coupons=InMemoryCouponCatalog(
                CouponRecord(code=c.code, valid=c.valid) for c in self.coupons
            ),
            accounts=accounts,
        )


def load_snapshot(path: Path) -> StoreSnapshot:
    """Read and validate a snapshot file."""
    if not path.is_file():
        raise SnapshotError(f"Snapshot not found: {path}")
    raw = path.read_text(encoding="utf-8")
    try:
        data = tomllib.loads(raw)
    except tomllib.TOMLDecodeError as exc:
        raise SnapshotError(f"Invalid TOML in {path}: {exc}") from exc
    try:
        return StoreSnapshot.model_validate(data)
    except ValidationError as exc:
        raise SnapshotError(f"Invalid snapshot {path}: {exc}") from exc
