"""Shared pytest fixtures and test helpers for wholesale-guard tests."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

import pytest
from click.testing import CliRunner

from wholesale_guard.infrastructure.storefront import (
    AccountRecord,
    CouponRecord,
    InMemoryAccountDirectory,
    InMemoryCart,
    InMemoryCouponCatalog,
    InMemoryStorefront,
)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def _isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty directory with no config or env overrides."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("WHOLESALE_GUARD_CONFIG", raising=False)
    monkeypatch.delenv("WHOLESALE_GUARD_PLATFORM__VERSION", raising=False)


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


class RecordingAccountDirectory(InMemoryAccountDirectory):
    """Account directory that remembers every email it was asked for."""

    def __init__(self, accounts: Iterable[AccountRecord] = ()) -> None:
        super().__init__(accounts)
        self.lookups: list[str] = []

    def get_by_email(self, email: str) -> AccountRecord | None:
        self.lookups.append(email)
        return super().get_by_email(email)


def make_storefront(
    *,
    applied: Iterable[str] = (),
    coupons: Iterable[tuple[str, bool]] = (),
    accounts: Iterable[tuple[int, str, tuple[str, ...]]] = (),
) -> InMemoryStorefront:
    """Build a storefront from plain tuples."""
    return InMemoryStorefront(
        cart=InMemoryCart(applied),
        coupons=InMemoryCouponCatalog(CouponRecord(code=c, valid=v) for c, v in coupons),
        accounts=RecordingAccountDirectory(
            AccountRecord(id=i, email=e, roles=r) for i, e, r in accounts
        ),
    )


SNAPSHOT_TOML = """\
[platform]
version = "4.0.0"

[[accounts]]
id = 7
email = "buyer@example.com"
roles = ["wholesale"]

[[accounts]]
id = 8
email = "retail@example.com"
roles = ["customer"]

[[coupons]]
code = "SAVE10"
valid = true

[[coupons]]
code = "WHOLESALE5"
valid = true

[cart]
applied_coupons = ["SAVE10", "WHOLESALE5"]

[checkout]
billing_email = "Buyer@Example.com"
"""


@pytest.fixture
def snapshot_file(tmp_path: Path) -> Path:
    """A snapshot whose purchaser is a wholesale account with two coupons."""
    path = tmp_path / "store.toml"
    path.write_text(SNAPSHOT_TOML, encoding="utf-8")
    return path
