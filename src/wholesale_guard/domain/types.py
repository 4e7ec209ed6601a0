"""Fixed values of the coupon restriction rule.

None of these are configuration. The restricted role set and the minimum
platform version are part of the rule itself.
"""

from __future__ import annotations

from enum import StrEnum

REQUIRED_PLATFORM_VERSION = "3.5.0"
TESTED_PLATFORM_VERSION = "4.0.0"
PLATFORM_NAME = "WooCommerce"

WHOLESALE_ROLE = "wholesale"
RESTRICTED_ROLES: frozenset[str] = frozenset({WHOLESALE_ROLE})

BILLING_EMAIL_FIELD = "billing_email"
REFRESH_TOTALS_KEY = "refresh_totals"

COUPON_DENIED_MESSAGE = "Sorry, coupons are not available for wholesale customers."


class NoticeSeverity(StrEnum):
    """Severity labels understood by the storefront notice queue."""

    ERROR = "error"
