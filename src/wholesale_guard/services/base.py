"""BaseService, the foundation for storefront-bound services.

Every service receives a :class:`Storefront` at construction time and
reaches the cart, coupons, accounts, notices and session only through it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from wholesale_guard.domain.ports import Storefront


class BaseService:
    """Base for service classes that act on one shopper's storefront.

    Usage::

        class CheckoutCouponService(BaseService):
            def validate_coupons(self, posted) -> ServiceResult:
                for code in self._storefront.cart.applied_coupons:
                    ...
    """

    def __init__(self, storefront: Storefront) -> None:
        self._storefront = storefront
