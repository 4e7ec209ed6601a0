"""HostEvents: the platform side of the hook contract.

The platform calls these methods at fixed points in a request; each one
fans out to every registered plugin through the pluggy hook relay.
Dispatch is synchronous and runs to completion before returning.

INVARIANT: Plugin failures are warnings, never errors.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from wholesale_guard.domain.ports import Storefront
    from wholesale_guard.plugins.manager import PluginManager

logger = logging.getLogger(__name__)


class HostEvents:
    """Typed dispatch surface over a loaded PluginManager.

    Parameters:
        plugin_manager: Manager whose plugins receive the events.
    """

    def __init__(self, plugin_manager: PluginManager) -> None:
        self._pm = plugin_manager
        self._initialized = False

    @property
    def initialized(self) -> bool:
        """Whether platform_initialized() has already fired."""
        return self._initialized

    def platform_initialized(self, platform_version: str | None) -> list[str]:
        """Fire ``plugins_loaded``. Only the first call per process dispatches.

        Returns warnings for plugins that failed.
        """
        if self._initialized:
            logger.debug("plugins_loaded already dispatched; ignoring")
            return []
        self._initialized = True
        warnings: list[str] = []
        self._call("plugins_loaded", {"platform_version": platform_version}, warnings)
        return warnings

    def checkout_submitted(
        self,
        posted: Mapping[str, str],
        storefront: Storefront,
    ) -> list[str]:
        """Fire ``after_checkout_validation`` for one checkout attempt."""
        warnings: list[str] = []
        self._call(
            "after_checkout_validation",
            {"posted": posted, "storefront": storefront},
            warnings,
        )
        return warnings

    def render_admin_notices(self, warnings: list[str] | None = None) -> list[str]:
        """Collect HTML notices from every plugin that has one to show.

        Plugin failures are appended to *warnings* when a list is given.
        """
        if warnings is None:
            warnings = []
        notices = self._call("admin_notices", {}, warnings)
        return list(notices or [])

    def _call(self, hook_name: str, payload: dict[str, Any], warnings: list[str]) -> Any:
        hook_fn = getattr(self._pm.hook, hook_name)
        try:
            return hook_fn(**payload)
        except Exception:
            logger.debug("Hook %s failed", hook_name, exc_info=True)
            warnings.append(f"Hook {hook_name} failed")
            return None
