"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, wholesale-guard.toml only
contains overrides. The restricted roles, the minimum platform version and
the platform name are rule constants and deliberately absent.
"""

from __future__ import annotations

from pydantic import BaseModel


class PlatformConfig(BaseModel):
    """[platform] section."""

    model_config = {"frozen": True}

    version: str | None = None
