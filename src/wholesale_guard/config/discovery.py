"""Config file discovery.

wholesale-guard.toml is found by walking up from the working directory.
WHOLESALE_GUARD_CONFIG, when set, names the file directly and wins.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "wholesale-guard.toml"
CONFIG_ENV_VAR = "WHOLESALE_GUARD_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the nearest wholesale-guard.toml at or above *start*, or None."""
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        explicit = Path(env_path)
        return explicit if explicit.is_file() else None

    origin = (start or Path.cwd()).resolve()
    for directory in (origin, *origin.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
