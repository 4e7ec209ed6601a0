"""Tests for the platform version gate."""

from __future__ import annotations

import pytest

from wholesale_guard.services.compat import check_platform_version


class TestCheckPlatformVersion:
    @pytest.mark.parametrize("version", ["3.5.0", "4.0.0"])
    def test_compatible(self, version: str) -> None:
        result = check_platform_version(version)
        assert result.ok is True
        assert result.op == "check_compat"
        assert result.data == {
            "compatible": True,
            "platform_version": version,
            "required": "3.5.0",
            "tested_up_to": "4.0.0",
        }
        assert result.warnings == []
        assert result.error is None

    def test_older_version_incompatible(self) -> None:
        result = check_platform_version("3.4.9")
        assert result.ok is False
        assert result.data["compatible"] is False
        assert result.error is not None
        assert result.error.code == "INCOMPATIBLE_PLATFORM"
        assert result.error.detail == {"platform_version": "3.4.9", "required": "3.5.0"}
        assert "3.4.9" in result.error.message

    @pytest.mark.parametrize("version", [None, "", "   "])
    def test_missing_platform_incompatible(self, version: str | None) -> None:
        result = check_platform_version(version)
        assert result.ok is False
        assert result.data["platform_version"] is None
        assert result.error is not None
        assert result.error.code == "INCOMPATIBLE_PLATFORM"

    def test_custom_minimum(self) -> None:
        assert check_platform_version("4.0.0", required="4.1.0").ok is False
        assert check_platform_version("4.1.0", required="4.1.0").ok is True

    def test_newer_than_tested_warns(self) -> None:
        result = check_platform_version("4.1.0")
        assert result.ok is True
        assert result.data["tested_up_to"] == "4.0.0"
        assert result.warnings == ["Platform version 4.1.0 is newer than tested 4.0.0"]

    def test_unicode_digit_does_not_raise(self) -> None:
        result = check_platform_version("3.5.²")
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "INCOMPATIBLE_PLATFORM"
