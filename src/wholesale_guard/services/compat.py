"""Platform version gate."""

from __future__ import annotations

import logging

from wholesale_guard.domain.types import REQUIRED_PLATFORM_VERSION, TESTED_PLATFORM_VERSION
from wholesale_guard.domain.versions import compare_versions, is_at_least
from wholesale_guard.services.contracts import CompatibilityData, dump_validated
from wholesale_guard.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)


def check_platform_version(
    platform_version: str | None,
    *,
    required: str = REQUIRED_PLATFORM_VERSION,
    tested_up_to: str = TESTED_PLATFORM_VERSION,
) -> ServiceResult:
    """Check that the host platform is present and at least *required*.

    A missing platform (``None`` or an empty string) is incompatible.
    Never raises; incompatibility is reported as ``ok=False``. A platform
    newer than *tested_up_to* is compatible but comes with a warning.
    """
    version = (platform_version or "").strip() or None
    compatible = version is not None and is_at_least(version, required)
    data = dump_validated(
        CompatibilityData,
        {
            "compatible": compatible,
            "platform_version": version,
            "required": required,
            "tested_up_to": tested_up_to,
        },
    )

    if compatible:
        logger.debug("Platform version %s satisfies %s", version, required)
        warnings: list[str] = []
        if version is not None and compare_versions(version, tested_up_to) > 0:
            warnings.append(f"Platform version {version} is newer than tested {tested_up_to}")
        return ServiceResult(ok=True, op="check_compat", data=data, warnings=warnings)

    if version is None:
        message = f"Platform not detected; version {required} or newer is required"
    else:
        message = f"Platform version {version} is older than required {required}"
    logger.debug(message)
    return ServiceResult(
        ok=False,
        op="check_compat",
        data=data,
        error=ServiceError(
            code="INCOMPATIBLE_PLATFORM",
            message=message,
            detail={"platform_version": version, "required": required},
        ),
    )
