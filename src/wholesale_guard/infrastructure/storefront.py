"""In-memory storefront implementing every host port.

Backs the ``checkout`` CLI command and the test suite. Coupon codes and
emails are matched case-insensitively, as the platform does.
"""

from __future__ import annotations

from collections.abc import Collection, Iterable, Sequence
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class CouponRecord:
    """A coupon whose validity is fixed up front."""

    code: str
    valid: bool = True

    def is_valid(self) -> bool:
        return self.valid


@dataclass(frozen=True)
class AccountRecord:
    id: int
    email: str
    roles: tuple[str, ...] = ()


class InMemoryCart:
    """Ordered, unique applied coupon codes."""

    def __init__(self, codes: Iterable[str] = ()) -> None:
        self._codes: list[str] = []
        for code in codes:
            self.apply_coupon(code)

    @property
    def applied_coupons(self) -> Sequence[str]:
        return tuple(self._codes)

    def apply_coupon(self, code: str) -> bool:
        normalized = code.strip().lower()
        if not normalized or normalized in (c.lower() for c in self._codes):
            return False
        self._codes.append(code.strip())
        return True

    def remove_coupon(self, code: str) -> bool:
        normalized = code.strip().lower()
        for index, existing in enumerate(self._codes):
            if existing.lower() == normalized:
                del self._codes[index]
                return True
        return False


class InMemoryCouponCatalog:
    """Coupon lookup by code. Unknown codes resolve to an invalid coupon."""

    def __init__(self, coupons: Iterable[CouponRecord] = ()) -> None:
        self._coupons: dict[str, CouponRecord] = {}
        for coupon in coupons:
            self.add(coupon)

    def add(self, coupon: CouponRecord) -> None:
        self._coupons[coupon.code.lower()] = coupon

    def get_coupon(self, code: str) -> CouponRecord:
        return self._coupons.get(code.lower(), CouponRecord(code=code, valid=False))


class InMemoryAccountDirectory:
    def __init__(self, accounts: Iterable[AccountRecord] = ()) -> None:
        self._by_id: dict[int, AccountRecord] = {}
        self._by_email: dict[str, AccountRecord] = {}
        for account in accounts:
            self.add(account)

    def add(self, account: AccountRecord) -> None:
        if account.id in self._by_id:
            raise ValueError(f"Duplicate account id: {account.id}")
        key = account.email.lower()
        if key in self._by_email:
            raise ValueError(f"Duplicate account email: {account.email}")
        self._by_id[account.id] = account
        self._by_email[key] = account

    def get_by_email(self, email: str) -> AccountRecord | None:
        return self._by_email.get(email.lower())

    def get_roles(self, account_id: int) -> Collection[str]:
        account = self._by_id.get(account_id)
        return account.roles if account is not None else ()


@dataclass
class InMemoryNoticeQueue:
    notices: list[tuple[str, str]] = field(default_factory=list)

    def add_notice(self, message: str, severity: str) -> None:
        self.notices.append((message, str(severity)))

    def messages(self, severity: str | None = None) -> list[str]:
        return [m for m, s in self.notices if severity is None or s == severity]


@dataclass
class InMemorySessionStore:
    values: dict[str, Any] = field(default_factory=dict)

    def set(self, key: str, value: Any) -> None:
        self.values[key] = value

    def get(self, key: str, default: Any = None) -> Any:
        return self.values.get(key, default)


@dataclass
class InMemoryStorefront:
    """One shopper's view of the store."""

    cart: InMemoryCart = field(default_factory=InMemoryCart)
    coupons: InMemoryCouponCatalog = field(default_factory=InMemoryCouponCatalog)
    accounts: InMemoryAccountDirectory = field(default_factory=InMemoryAccountDirectory)
    notices: InMemoryNoticeQueue = field(default_factory=InMemoryNoticeQueue)
    session: InMemorySessionStore = field(default_factory=InMemorySessionStore)
