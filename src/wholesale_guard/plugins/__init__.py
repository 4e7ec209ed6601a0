"""Extension layer: storefront plugin system via pluggy.

Discovery: entry_points (pip-installed) via pluggy setuptools entrypoints.
INVARIANT: Plugin failures are warnings, never errors.
"""

from wholesale_guard.plugins.dispatch import HostEvents
from wholesale_guard.plugins.manager import PluginManager

__all__ = ["HostEvents", "PluginManager"]
