"""Tests for GuardSettings and config discovery."""

from __future__ import annotations

from pathlib import Path

import click
import pytest
from pydantic import ValidationError

from wholesale_guard.config.discovery import CONFIG_FILENAME, find_config
from wholesale_guard.config.settings import GuardSettings


@pytest.mark.usefixtures("_isolated_config")
class TestFindConfig:
    def test_none_when_absent(self, tmp_path: Path) -> None:
        assert find_config(tmp_path) is None

    def test_walks_up(self, tmp_path: Path) -> None:
        config = tmp_path / CONFIG_FILENAME
        config.write_text("", encoding="utf-8")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        assert find_config(nested) == config.resolve()

    def test_env_var_wins(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("", encoding="utf-8")
        explicit = tmp_path / "elsewhere.toml"
        explicit.write_text("", encoding="utf-8")
        monkeypatch.setenv("WHOLESALE_GUARD_CONFIG", str(explicit))
        assert find_config(tmp_path) == explicit

    def test_env_var_missing_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("WHOLESALE_GUARD_CONFIG", str(tmp_path / "nope.toml"))
        assert find_config(tmp_path) is None


@pytest.mark.usefixtures("_isolated_config")
class TestGuardSettings:
    def test_defaults(self) -> None:
        settings = GuardSettings.from_cli()
        assert settings.config_path is None
        assert settings.platform.version is None
        assert settings.json_output is False

    def test_toml_section(self, tmp_path: Path) -> None:
        (tmp_path / CONFIG_FILENAME).write_text(
            '[platform]\nversion = "3.4.9"\n', encoding="utf-8"
        )
        settings = GuardSettings.from_cli()
        assert settings.platform.version == "3.4.9"
        assert settings.config_path is not None

    def test_env_overrides_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / CONFIG_FILENAME).write_text(
            '[platform]\nversion = "3.4.9"\n', encoding="utf-8"
        )
        monkeypatch.setenv("WHOLESALE_GUARD_PLATFORM__VERSION", "4.0.0")
        assert GuardSettings.from_cli().platform.version == "4.0.0"

    def test_cli_version_overrides_everything(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        (tmp_path / CONFIG_FILENAME).write_text(
            '[platform]\nversion = "3.4.9"\n', encoding="utf-8"
        )
        monkeypatch.setenv("WHOLESALE_GUARD_PLATFORM__VERSION", "4.0.0")
        settings = GuardSettings.from_cli(platform_version="3.5.0")
        assert settings.platform.version == "3.5.0"

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom.toml"
        custom.write_text('[platform]\nversion = "4.0.0"\n', encoding="utf-8")
        settings = GuardSettings.from_cli(config_path=str(custom))
        assert settings.config_path == custom
        assert settings.platform.version == "4.0.0"

    def test_invalid_toml_raises_click_exception(self, tmp_path: Path) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("[platform\n", encoding="utf-8")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            GuardSettings.from_cli()

    def test_frozen(self) -> None:
        settings = GuardSettings.from_cli()
        with pytest.raises(ValidationError):
            settings.verbose = True  # type: ignore[misc]
