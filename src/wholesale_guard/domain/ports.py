"""Host platform capabilities consumed by the coupon restriction rule.

The storefront owns carts, coupons, accounts, notices and sessions. The
rule only sees them through these protocols, so a live platform bridge and
the in-memory storefront are interchangeable.
"""

from __future__ import annotations

from collections.abc import Collection, Sequence
from typing import Any, Protocol, runtime_checkable


class Coupon(Protocol):
    """A discount code with platform-managed validity."""

    @property
    def code(self) -> str: ...

    def is_valid(self) -> bool:
        """Expiry, usage limits and other platform rules, opaque to the rule."""
        ...


class Cart(Protocol):
    """The shopper's active cart."""

    @property
    def applied_coupons(self) -> Sequence[str]: ...

    def remove_coupon(self, code: str) -> bool:
        """Drop *code* from the applied coupons. Returns False if it was absent."""
        ...


class CouponLookup(Protocol):
    def get_coupon(self, code: str) -> Coupon: ...


class Account(Protocol):
    @property
    def id(self) -> int: ...

    @property
    def email(self) -> str: ...


class AccountDirectory(Protocol):
    """Customer accounts keyed by id, searchable by email."""

    def get_by_email(self, email: str) -> Account | None:
        """Case-insensitive lookup. None when no account uses *email*."""
        ...

    def get_roles(self, account_id: int) -> Collection[str]: ...


class NoticeQueue(Protocol):
    def add_notice(self, message: str, severity: str) -> None: ...


class SessionStore(Protocol):
    def set(self, key: str, value: Any) -> None: ...


class Translator(Protocol):
    def __call__(self, text: str, domain: str) -> str: ...


@runtime_checkable
class Storefront(Protocol):
    """Everything a checkout hook may touch, bundled per request."""

    @property
    def cart(self) -> Cart: ...

    @property
    def coupons(self) -> CouponLookup: ...

    @property
    def accounts(self) -> AccountDirectory: ...

    @property
    def notices(self) -> NoticeQueue: ...

    @property
    def session(self) -> SessionStore: ...
