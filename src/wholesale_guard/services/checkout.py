"""CheckoutCouponService: strip coupons from restricted purchasers at checkout.

Runs once per checkout attempt, inside the platform's validation phase.
Every applied coupon that is otherwise valid is checked against the
purchaser's account. Coupons the purchaser may not use are removed, an
error notice is queued for the shopper, and the cart totals are flagged
for recomputation.

Eligibility:
- No account for the billing email: denied. A guest cannot show that it
  is not a wholesale customer.
- Account holding a restricted role: denied.
- Any other account: allowed.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from wholesale_guard.domain.roles import has_restricted_role
from wholesale_guard.domain.types import (
    BILLING_EMAIL_FIELD,
    COUPON_DENIED_MESSAGE,
    REFRESH_TOTALS_KEY,
    RESTRICTED_ROLES,
    NoticeSeverity,
)
from wholesale_guard.services.base import BaseService
from wholesale_guard.services.contracts import CouponValidationData, dump_validated
from wholesale_guard.services.result import ServiceResult

logger = logging.getLogger(__name__)


class CheckoutCouponService(BaseService):
    """Enforce the wholesale coupon restriction on one storefront."""

    def validate_coupons(self, posted: Mapping[str, str]) -> ServiceResult:
        """Check every applied coupon against the submitted billing email.

        The cart's order is followed and no coupon is skipped because an
        earlier one was removed. A coupon whose own validity check fails is
        left for the platform to invalidate.
        """
        applied = list(self._storefront.cart.applied_coupons)
        # The platform's required-field validation reports a missing email.
        email = posted.get(BILLING_EMAIL_FIELD, "") or ""

        checked: list[str] = []
        removed: list[str] = []
        skipped: list[str] = []

        for code in applied:
            coupon = self._storefront.coupons.get_coupon(code)
            if not coupon.is_valid():
                logger.debug("Coupon %s is invalid, leaving it to the platform", code)
                skipped.append(code)
                continue

            checked.append(code)
            if not self.is_coupon_allowed(email.lower()):
                self.remove_coupon(code, COUPON_DENIED_MESSAGE)
                removed.append(code)

        data = dump_validated(
            CouponValidationData,
            {
                "email": email,
                "checked": checked,
                "removed": removed,
                "skipped": skipped,
                "count": len(removed),
            },
        )
        return ServiceResult(ok=True, op="validate_coupons", data=data)

    def is_coupon_allowed(self, email: str) -> bool:
        """Whether the account behind *email* may use coupons.

        Reads the account directory only; never touches the cart.
        """
        accounts = self._storefront.accounts
        account = accounts.get_by_email(email)
        if account is None:
            logger.debug("No account for %r, coupons denied", email)
            return False

        roles = accounts.get_roles(account.id)
        if has_restricted_role(roles, RESTRICTED_ROLES):
            logger.debug("Account %s holds a restricted role, coupons denied", account.id)
            return False
        return True

    def remove_coupon(self, code: str, message: str) -> None:
        """Remove *code*, tell the shopper why, and flag totals for refresh.

        Not guarded against repeats: a second call for the same code finds
        nothing to remove but still queues a notice and sets the flag.
        """
        self._storefront.cart.remove_coupon(code)
        self._storefront.notices.add_notice(message, NoticeSeverity.ERROR)
        self._storefront.session.set(REFRESH_TOTALS_KEY, True)
        logger.debug("Removed coupon %s", code)
