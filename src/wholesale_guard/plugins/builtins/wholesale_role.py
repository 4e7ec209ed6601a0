"""Built-in plugin: no coupons for wholesale customers.

Hooks into platform start-up to gate on the platform version, and into
checkout validation to strip coupons from restricted purchasers.

- Incompatible or missing platform: one admin notice, and the plugin stays
  inert for the rest of the process.
- Checkout validation runs ``tryfirst`` so coupons are removed before
  other validators and before totals are finalized.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING

from wholesale_guard import PLUGIN_NAME
from wholesale_guard.domain.notices import identity_translator, render_compatibility_notice
from wholesale_guard.domain.types import PLATFORM_NAME, REQUIRED_PLATFORM_VERSION
from wholesale_guard.plugins.hookspecs import hookimpl
from wholesale_guard.services.checkout import CheckoutCouponService
from wholesale_guard.services.compat import check_platform_version

if TYPE_CHECKING:
    from wholesale_guard.domain.ports import Storefront, Translator
    from wholesale_guard.services.result import ServiceResult

logger = logging.getLogger(__name__)


class WholesaleRolePlugin:
    """Coupon restriction for accounts holding the wholesale role."""

    required_version = REQUIRED_PLATFORM_VERSION

    def __init__(self, translate: Translator = identity_translator) -> None:
        self._translate = translate
        self._enabled = False
        self._notice: str | None = None
        self.last_result: ServiceResult | None = None

    @property
    def enabled(self) -> bool:
        return self._enabled

    @hookimpl
    def plugins_loaded(self, platform_version: str | None) -> None:
        """Enable the rule only when the platform meets the minimum version."""
        result = check_platform_version(platform_version, required=self.required_version)
        if result.ok:
            self._enabled = True
            return

        self._enabled = False
        self._notice = render_compatibility_notice(
            PLUGIN_NAME,
            PLATFORM_NAME,
            self.required_version,
            translate=self._translate,
        )
        assert result.error is not None
        logger.warning("%s disabled: %s", PLUGIN_NAME, result.error.message)

    @hookimpl
    def admin_notices(self) -> str | None:
        """The compatibility warning, on every admin page while the rule is inert."""
        return self._notice

    @hookimpl(tryfirst=True)
    def after_checkout_validation(
        self,
        posted: Mapping[str, str],
        storefront: Storefront,
    ) -> None:
        """Remove coupons the purchaser is not allowed to use."""
        if not self._enabled:
            return
        self.last_result = CheckoutCouponService(storefront).validate_coupons(posted)
        removed = self.last_result.data["count"]
        if removed:
            logger.debug("Removed %d coupon(s) at checkout", removed)
