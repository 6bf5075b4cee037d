"""Centralized settings loader for the object manager.

Infrastructure-level module — must not import from managers/, repositories/,
config.py, or logging_config.py to avoid circular imports.
"""

import tomllib
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

SETTINGS_PATH = Path(__file__).resolve().parent / "settings.toml"

_cached_settings: dict[Path, dict] = {}


def _load_settings(settings_path: Path = SETTINGS_PATH) -> dict:
    """Load and cache settings from a TOML file."""
    settings_path = Path(settings_path)
    cached = _cached_settings.get(settings_path)
    if cached is not None:
        return cached
    try:
        with open(settings_path, "rb") as f:
            settings = tomllib.load(f)
    except Exception as e:
        logger.error("Failed to load settings from %s: %s", settings_path, e)
        raise
    _cached_settings[settings_path] = settings
    return settings


def clear_settings_cache() -> None:
    """Forget every cached settings file so the next read hits disk."""
    _cached_settings.clear()


class SettingsService:
    """Read-only accessor for application settings.

    Settings are cached at module level after the first read.
    """

    def __init__(self, settings_path: str | Path = SETTINGS_PATH):
        self.settings_path = Path(settings_path)
        self.settings = _load_settings(self.settings_path)

    @property
    def settings_dict(self) -> dict:
        return self.settings

    @property
    def log_level(self) -> str:
        return self.settings["env"]["log_level"]

    @property
    def env(self) -> str:
        return self.settings["env"]["env"]

    @property
    def database_url(self) -> str:
        return self.settings["database"]["url"]

    @property
    def database_echo(self) -> bool:
        return bool(self.settings["database"].get("echo", False))

    @property
    def expire_on_commit(self) -> bool:
        return bool(self.settings["database"].get("expire_on_commit", False))
