"""Pluggy hook specifications for the host platform's plugin events.

Two events reach plugins during a request's lifetime, plus one render-time
hook for the admin surface. All three are dispatched synchronously.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING

import pluggy

if TYPE_CHECKING:
    from wholesale_guard.domain.ports import Storefront

PROJECT_NAME = "wholesale_guard"

hookspec = pluggy.HookspecMarker(PROJECT_NAME)
hookimpl = pluggy.HookimplMarker(PROJECT_NAME)


class StorefrontHookSpec:
    """Hook specifications for storefront plugins."""

    @hookspec
    def plugins_loaded(self, platform_version: str | None) -> None:
        """Called once per process after the platform has initialized.

        *platform_version* is None when the platform is not active.
        """

    @hookspec
    def after_checkout_validation(
        self,
        posted: Mapping[str, str],
        storefront: Storefront,
    ) -> None:
        """Called once per checkout attempt with the submitted fields."""

    @hookspec
    def admin_notices(self) -> str | None:
        """Return an HTML notice for the admin surface, or None."""
