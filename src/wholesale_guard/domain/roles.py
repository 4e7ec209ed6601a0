"""Role rules for coupon eligibility."""

from __future__ import annotations

from collections.abc import Iterable

from wholesale_guard.domain.types import RESTRICTED_ROLES


def restricted_roles_held(
    roles: Iterable[str],
    restricted: frozenset[str] = RESTRICTED_ROLES,
) -> frozenset[str]:
    """Return the restricted roles present in *roles*.

    Examples:
        >>> sorted(restricted_roles_held(["customer", "wholesale"]))
        ['wholesale']
        >>> restricted_roles_held(["customer"])
        frozenset()
    """
    return frozenset(roles) & restricted


def has_restricted_role(
    roles: Iterable[str],
    restricted: frozenset[str] = RESTRICTED_ROLES,
) -> bool:
    """Whether any of *roles* is in the restricted set."""
    return bool(restricted_roles_held(roles, restricted))
