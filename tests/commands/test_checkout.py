"""Tests for the checkout CLI command."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from wholesale_guard.cli import cli
from wholesale_guard.domain.types import COUPON_DENIED_MESSAGE


@pytest.mark.usefixtures("_isolated_config")
class TestCheckoutCommand:
    def test_wholesale_snapshot(self, cli_runner: CliRunner, snapshot_file: Path) -> None:
        result = cli_runner.invoke(cli, ["--json", "checkout", str(snapshot_file)])
        assert result.exit_code == 0
        data = json.loads(result.stdout)["data"]
        assert data["enabled"] is True
        assert data["removed"] == ["SAVE10", "WHOLESALE5"]
        assert data["applied_coupons"] == []
        assert data["notices"] == [COUPON_DENIED_MESSAGE, COUPON_DENIED_MESSAGE]
        assert data["session"] == {"refresh_totals": True}
        assert data["admin_notices"] == []

    def test_email_override(self, cli_runner: CliRunner, snapshot_file: Path) -> None:
        result = cli_runner.invoke(
            cli, ["--json", "checkout", str(snapshot_file), "--email", "retail@example.com"]
        )
        assert result.exit_code == 0
        data = json.loads(result.stdout)["data"]
        assert data["removed"] == []
        assert data["applied_coupons"] == ["SAVE10", "WHOLESALE5"]
        assert data["notices"] == []
        assert data["session"] == {}

    def test_incompatible_platform_leaves_cart(
        self, cli_runner: CliRunner, tmp_path: Path
    ) -> None:
        path = tmp_path / "old.toml"
        path.write_text(
            '[[accounts]]\nid = 1\nemail = "w@example.com"\nroles = ["wholesale"]\n'
            '[[coupons]]\ncode = "SAVE10"\n'
            '[cart]\napplied_coupons = ["SAVE10"]\n'
            '[checkout]\nbilling_email = "w@example.com"\n',
            encoding="utf-8",
        )
        result = cli_runner.invoke(
            cli, ["--json", "--platform-version", "3.4.9", "checkout", str(path)]
        )
        assert result.exit_code == 0
        payload = json.loads(result.stdout)
        assert payload["data"]["enabled"] is False
        assert payload["data"]["applied_coupons"] == ["SAVE10"]
        assert len(payload["data"]["admin_notices"]) == 1
        assert any("disabled" in w for w in payload["warnings"])

    def test_human_output(self, cli_runner: CliRunner, snapshot_file: Path) -> None:
        result = cli_runner.invoke(cli, ["checkout", str(snapshot_file)])
        assert result.exit_code == 0
        assert "OK: checkout" in result.stdout
        assert "SAVE10" in result.stdout

    def test_missing_snapshot(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        result = cli_runner.invoke(cli, ["--json", "checkout", str(tmp_path / "nope.toml")])
        assert result.exit_code == 1
        payload = json.loads(result.stderr)
        assert payload["error"]["code"] == "INVALID_SNAPSHOT"

    def test_platform_version_flag_beats_snapshot(
        self, cli_runner: CliRunner, snapshot_file: Path
    ) -> None:
        result = cli_runner.invoke(
            cli, ["--json", "--platform-version", "3.4.9", "checkout", str(snapshot_file)]
        )
        assert result.exit_code == 0
        data = json.loads(result.stdout)["data"]
        assert data["enabled"] is False
        assert data["applied_coupons"] == ["SAVE10", "WHOLESALE5"]
        assert data["removed"] == []

    def test_snapshot_beats_environment(
        self, cli_runner: CliRunner, snapshot_file: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("WHOLESALE_GUARD_PLATFORM__VERSION", "3.4.9")
        result = cli_runner.invoke(cli, ["--json", "checkout", str(snapshot_file)])
        assert result.exit_code == 0
        data = json.loads(result.stdout)["data"]
        assert data["enabled"] is True
        assert data["removed"] == ["SAVE10", "WHOLESALE5"]
