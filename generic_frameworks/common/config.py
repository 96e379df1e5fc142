"""
================================================================================
Configuration Loader
================================================================================

Reads the environment tables in config/environments.yaml.

The file holds one table per framework (``api.environments`` and
``ui.environments``); the active row is chosen by ``TEST_ENV``. Per-variable
overrides (API_BASE_URL, UI_BASE_URL, ...) are applied by the environment
modules on top of the selected row.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from loguru import logger


PROJECT_ROOT = Path(__file__).parent.parent.parent
DEFAULT_CONFIG_PATH = PROJECT_ROOT / "config" / "environments.yaml"

# Environment variable that selects the active environment
ENV_SELECTOR = "TEST_ENV"


class ConfigurationError(Exception):
    """Raised when configuration loading or access fails."""
    pass


class ConfigLoader:
    """
    Process-wide view of the YAML environment tables.

    Usage:
        >>> ConfigLoader().get_section("api.environments")
        {'dev': {...}, 'staging': {...}, 'prod': {...}}
    """

    _instance: Optional["ConfigLoader"] = None

    def __new__(cls, config_path: Optional[Path] = None) -> "ConfigLoader":
        """Singleton: configuration is read once per worker process."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self, config_path: Optional[Path] = None) -> None:
        if getattr(self, "_initialized", False):
            return

        self._config_path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH
        self._config: Dict[str, Any] = self._load()
        self._initialized = True

    def _load(self) -> Dict[str, Any]:
        if not self._config_path.exists():
            logger.warning(
                f"Configuration file not found: {self._config_path}. "
                f"Using built-in environments and environment variables only."
            )
            return {}

        try:
            with open(self._config_path, "r", encoding="utf-8") as f:
                loaded = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in configuration file: {e}") from e

        if not isinstance(loaded, dict):
            raise ConfigurationError(
                f"Configuration root must be a mapping, got {type(loaded).__name__}"
            )

        logger.debug(f"Loaded configuration from: {self._config_path}")
        return loaded

    @property
    def config_path(self) -> Path:
        return self._config_path

    def get_section(self, section: str) -> Dict[str, Any]:
        """
        Get a configuration section by dot-notation path.

        Returns:
            Section dictionary, or an empty dict when the path is missing or
            does not lead to a mapping
        """
        value: Any = self._config
        for part in section.split("."):
            if not isinstance(value, dict):
                return {}
            value = value.get(part)
        return value if isinstance(value, dict) else {}

    @classmethod
    def reset(cls) -> None:
        """Drop the cached instance so the next call re-reads the file."""
        cls._instance = None


def selected_environment_name(default: str) -> str:
    """Return the value of TEST_ENV, or ``default`` when it is unset or blank."""
    return os.getenv(ENV_SELECTOR, "").strip() or default


__all__ = [
    "ConfigLoader",
    "ConfigurationError",
    "ENV_SELECTOR",
    "selected_environment_name",
]
