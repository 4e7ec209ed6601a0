"""Subcommand modules for wholesale-guard.

Provides register_commands() which uses deferred imports to keep
``wholesale-guard --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the standalone commands on the root CLI group."""
    from wholesale_guard.commands.checkout import checkout
    from wholesale_guard.commands.compat import compat

    cli.add_command(compat)
    cli.add_command(checkout)
