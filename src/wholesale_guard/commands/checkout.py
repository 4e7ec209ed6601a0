"""Command: replay one checkout attempt against a store snapshot."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from wholesale_guard.commands._base import GuardCommand

if TYPE_CHECKING:
    from wholesale_guard.commands._context import AppContext


@click.command(
    cls=GuardCommand,
    examples="""\
  wholesale-guard checkout store.toml
  wholesale-guard checkout store.toml --email buyer@example.com
  wholesale-guard --platform-version 3.4.9 checkout store.toml
  wholesale-guard --json checkout store.toml""",
)
@click.argument("snapshot", type=click.Path(path_type=Path))
@click.option("--email", default=None, help="Billing email to submit (overrides [checkout]).")
@click.pass_obj
def checkout(app: AppContext, snapshot: Path, email: str | None) -> None:
    """Boot the plugin on a store snapshot and submit its checkout.

    The platform version is taken from --platform-version when given, then
    from the snapshot's [platform] section, then from configuration.
    """
    from wholesale_guard.infrastructure.snapshot import SnapshotError, load_snapshot
    from wholesale_guard.plugins.builtins.wholesale_role import WholesaleRolePlugin
    from wholesale_guard.plugins.dispatch import HostEvents
    from wholesale_guard.plugins.manager import PluginManager
    from wholesale_guard.services.result import ServiceError, ServiceResult

    try:
        store = load_snapshot(snapshot)
        storefront = store.build_storefront()
    except SnapshotError as exc:
        app.emit(
            ServiceResult(
                ok=False,
                op="checkout",
                error=ServiceError(
                    code="INVALID_SNAPSHOT",
                    message=str(exc),
                    detail={"path": str(snapshot)},
                ),
            )
        )
        return

    posted = dict(store.checkout)
    if email is not None:
        posted["billing_email"] = email

    plugin = WholesaleRolePlugin()
    pm = PluginManager()
    pm.register_plugin(plugin, name="wholesale_role")
    events = HostEvents(pm)

    platform_version = (
        app.platform_version_override
        or store.platform.version
        or app.settings.platform.version
    )
    warnings = events.platform_initialized(platform_version)
    admin_notices = events.render_admin_notices(warnings)
    if not plugin.enabled:
        warnings.append("Coupon restriction disabled: platform version not supported")
    warnings.extend(events.checkout_submitted(posted, storefront))

    report = plugin.last_result.data if plugin.last_result is not None else {}
    app.emit(
        ServiceResult(
            ok=True,
            op="checkout",
            data={
                "enabled": plugin.enabled,
                "removed": report.get("removed", []),
                "skipped": report.get("skipped", []),
                "applied_coupons": list(storefront.cart.applied_coupons),
                "notices": [message for message, _severity in storefront.notices.notices],
                "session": dict(storefront.session.values),
                "admin_notices": admin_notices,
            },
            warnings=warnings,
        )
    )
