"""Root CLI group for wholesale-guard with global flags and command registration."""

from __future__ import annotations

import click

from wholesale_guard import __version__
from wholesale_guard.commands import register_commands
from wholesale_guard.commands._context import AppContext
from wholesale_guard.config.settings import GuardSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="wholesale-guard")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging to stderr.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option("--platform-version", default=None, help="Override the platform version.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    platform_version: str | None,
) -> None:
    """wholesale-guard: no coupons for wholesale customers."""
    settings = GuardSettings.from_cli(
        config_path=config_path,
        platform_version=platform_version,
        json_output=json_output,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings, platform_version=platform_version)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
