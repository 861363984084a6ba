"""Tests for splitbook.config."""

import stat
import tomllib
from pathlib import Path

import pytest

from splitbook.config import Settings, create_default_config, get_config_path, load_settings, save_config
from splitbook.domain.models import DEFAULT_CATEGORIES, DEFAULT_PAYERS


class TestGetConfigPath:
    """Tests for get_config_path."""

    def test_uses_xdg_config_home(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Should place the config under XDG_CONFIG_HOME."""
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
        assert get_config_path() == tmp_path / "splitbook" / "config.toml"


class TestLoadSettings:
    """Tests for load_settings."""

    def test_missing_file_gives_defaults(self, tmp_path: Path) -> None:
        """Should fall back to the defaults."""
        settings = load_settings(tmp_path / "missing.toml")

        assert settings == Settings()
        assert settings.payers == DEFAULT_PAYERS
        assert settings.categories == DEFAULT_CATEGORIES
        assert settings.persist_categories is False

    def test_default_config_round_trip(self, tmp_path: Path) -> None:
        """Should read back the file written by init."""
        path = tmp_path / "config.toml"
        create_default_config(path)

        assert load_settings(path) == Settings()
        assert stat.S_IMODE(path.stat().st_mode) == 0o600

    def test_overrides(self, tmp_path: Path) -> None:
        """Should use values from the file."""
        path = tmp_path / "config.toml"
        save_config({"payers": ["Ana", "Bia", "Caio"], "categories": ["Viagem"], "persist_categories": True}, path)

        settings = load_settings(path)

        assert settings.payers == ["Ana", "Bia", "Caio"]
        assert settings.categories == ["Viagem"]
        assert settings.persist_categories is True

    def test_invalid_values_fall_back(self, tmp_path: Path) -> None:
        """Should ignore values of the wrong type."""
        path = tmp_path / "config.toml"
        save_config({"payers": [], "categories": [1, 2], "persist_categories": "yes"}, path)

        assert load_settings(path) == Settings()

    def test_malformed_toml_raises(self, tmp_path: Path) -> None:
        """Should raise for a file that is not TOML."""
        path = tmp_path / "config.toml"
        path.write_text("payers = [", encoding="utf-8")

        with pytest.raises(tomllib.TOMLDecodeError):
            load_settings(path)
