"""Configuration file management for splitbook."""

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import tomli_w

from splitbook.domain.models import DEFAULT_CATEGORIES, DEFAULT_PAYERS, CategoryName, PayerName


@dataclass(frozen=True)
class Settings:
    """Effective configuration after merging the file over the defaults."""

    payers: list[PayerName] = field(default_factory=lambda: list(DEFAULT_PAYERS))
    categories: list[CategoryName] = field(default_factory=lambda: list(DEFAULT_CATEGORIES))
    persist_categories: bool = False


def get_xdg_config_home() -> Path:
    """Get XDG config directory, with fallback to ~/.config."""
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config)
    return Path.home() / ".config"


def get_config_path() -> Path:
    """Get the config file path (XDG compliant).

    Returns:
        Path to the config file.
    """
    return get_xdg_config_home() / "splitbook" / "config.toml"


def default_config() -> dict[str, Any]:
    """Build the configuration written by 'splitbook init'."""
    return {
        "payers": list(DEFAULT_PAYERS),
        "categories": list(DEFAULT_CATEGORIES),
        "persist_categories": False,
    }


def create_default_config(config_path: Path | None = None) -> None:
    """Create default config file with secure permissions.

    Args:
        config_path: Path to config file. If None, uses default location.
    """
    save_config(default_config(), config_path)


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load configuration from TOML file.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Configuration dictionary.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        tomllib.TOMLDecodeError: If the file is not valid TOML.
    """
    if config_path is None:
        config_path = get_config_path()

    with open(config_path, "rb") as f:
        return tomllib.load(f)


def save_config(config: dict[str, Any], config_path: Path | None = None) -> None:
    """Save configuration to TOML file.

    Args:
        config: Configuration dictionary.
        config_path: Path to config file. If None, uses default location.
    """
    if config_path is None:
        config_path = get_config_path()

    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "wb") as f:
        tomli_w.dump(config, f)

    os.chmod(config_path, 0o600)


def _names(value: Any, fallback: list[str]) -> list[str]:
    if isinstance(value, list) and value and all(isinstance(name, str) and name for name in value):
        return list(value)
    return list(fallback)


def load_settings(config_path: Path | None = None) -> Settings:
    """Load effective settings.

    A missing config file gives the defaults. Invalid values for a key fall back
    to that key's default.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Settings for this run.

    Raises:
        tomllib.TOMLDecodeError: If the file is not valid TOML.
    """
    try:
        config = load_config(config_path)
    except FileNotFoundError:
        return Settings()

    persist = config.get("persist_categories", False)

    return Settings(
        payers=[PayerName(name) for name in _names(config.get("payers"), DEFAULT_PAYERS)],
        categories=[CategoryName(name) for name in _names(config.get("categories"), DEFAULT_CATEGORIES)],
        persist_categories=persist if isinstance(persist, bool) else False,
    )
