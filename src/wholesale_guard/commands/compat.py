"""Command: check the platform version against the plugin's minimum."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from wholesale_guard.commands._base import GuardCommand

if TYPE_CHECKING:
    from wholesale_guard.commands._context import AppContext


@click.command(
    cls=GuardCommand,
    examples="""\
  wholesale-guard --platform-version 4.0.0 compat
  WHOLESALE_GUARD_PLATFORM__VERSION=3.4.9 wholesale-guard compat
  wholesale-guard --json compat""",
)
@click.pass_obj
def compat(app: AppContext) -> None:
    """Check whether the configured platform version is supported."""
    from wholesale_guard import PLUGIN_NAME
    from wholesale_guard.domain.notices import render_compatibility_notice
    from wholesale_guard.domain.types import PLATFORM_NAME
    from wholesale_guard.services.compat import check_platform_version

    result = check_platform_version(app.settings.platform.version)
    if not result.ok:
        notice = render_compatibility_notice(
            PLUGIN_NAME,
            PLATFORM_NAME,
            result.data["required"],
        )
        result = result.model_copy(update={"data": {**result.data, "notice": notice}})
    app.emit(result)
