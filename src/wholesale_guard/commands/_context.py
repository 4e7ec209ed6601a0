"""AppContext, the shared Click context for all commands.

Created once by the root CLI group and passed to subcommands via
``@click.pass_obj``. Configures logging and owns result emission
(stdout/stderr routing and exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from wholesale_guard.config.logging import configure_logging
from wholesale_guard.output.formatters import format_result

if TYPE_CHECKING:
    from wholesale_guard.config.settings import GuardSettings
    from wholesale_guard.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: GuardSettings, *, platform_version: str | None = None) -> None:
        self.settings = settings
        # Only set when --platform-version was passed on the command line.
        self.platform_version_override = platform_version
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: stdout, warnings to stderr (human mode only).
        * Failure: stderr, exit code 1.
        """
        output = format_result(result, json_output=self.settings.json_output)
        if result.ok:
            click.echo(output)
            if not self.settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
