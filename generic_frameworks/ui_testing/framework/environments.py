"""
================================================================================
UI Environments
================================================================================

Resolves the UI environment record (base URL, credentials, test data files)
for the environment named by ``TEST_ENV``.

Resolution order:
    1. Built-in table (dev / staging / prod)
    2. ``ui.environments.<name>`` in config/environments.yaml
    3. ``UI_BASE_URL`` / ``UI_USERNAME`` / ``UI_PASSWORD`` environment variables

Unknown or unset environment names fall back to ``prod``. The prod
credentials come from the ``standardUser`` entry of ``data/users.json``.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from loguru import logger

from generic_frameworks.common.config import ConfigLoader, ConfigurationError, selected_environment_name


DATA_DIR = Path(__file__).parent.parent / "data"
DEFAULT_UI_ENVIRONMENT = "prod"
DEFAULT_TEST_DATA_FILES = ("products.json", "users.json")

BUILTIN_UI_ENVIRONMENTS: Dict[str, Dict[str, Any]] = {
    "dev": {"base_url": "https://dev.saucedemo.com", "username": "", "password": ""},
    "staging": {"base_url": "https://staging.saucedemo.com", "username": "", "password": ""},
    "prod": {"base_url": "https://www.saucedemo.com"},
}


def load_data_file(name: str, data_dir: Optional[Path] = None) -> Any:
    """Load one JSON test data file from ``data_dir`` (default: ui_testing/data)."""
    path = (data_dir or DATA_DIR) / name
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError as e:
        raise ConfigurationError(f"Test data file not found: {path}") from e
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Invalid JSON in test data file {path}: {e}") from e


@dataclass(frozen=True)
class UiEnvironment:
    """
    Settings for one UI environment.

    Attributes:
        name: Environment name
        base_url: Application URL; relative navigation is joined onto it
        username: Default login user
        password: Default login password
        test_data_files: JSON files under ``data_dir`` holding test data
    """
    name: str
    base_url: str
    username: str = ""
    password: str = ""
    test_data_files: Tuple[str, ...] = DEFAULT_TEST_DATA_FILES
    data_dir: Path = field(default=DATA_DIR, compare=False)

    def load_test_data(self) -> Dict[str, Any]:
        """
        Load every test data file, keyed by file stem.

        Example:
            >>> data = env.load_test_data()
            >>> data["users"]["standardUser"]["username"]
            'standard_user'
        """
        return {
            Path(name).stem: load_data_file(name, self.data_dir)
            for name in self.test_data_files
        }


def _environment_table(config: ConfigLoader) -> Dict[str, Dict[str, Any]]:
    table = {name: dict(values) for name, values in BUILTIN_UI_ENVIRONMENTS.items()}
    for name, values in config.get_section("ui.environments").items():
        table.setdefault(name, {}).update(values or {})
    return table


def _standard_user(data_dir: Path) -> Dict[str, str]:
    users = load_data_file("users.json", data_dir)
    return users.get("standardUser", {})


def get_ui_environment(
    name: Optional[str] = None,
    config: Optional[ConfigLoader] = None,
    data_dir: Optional[Path] = None,
) -> UiEnvironment:
    """
    Return the UI environment record.

    Args:
        name: Environment name. Defaults to ``TEST_ENV``, then ``prod``.
        config: Configuration loader. Uses the process-wide one if None.
        data_dir: Directory holding the JSON test data files.

    Returns:
        Resolved UiEnvironment
    """
    config = config or ConfigLoader()
    data_dir = data_dir or DATA_DIR
    requested = name or selected_environment_name(DEFAULT_UI_ENVIRONMENT)
    table = _environment_table(config)

    if requested not in table:
        logger.warning(
            f"Unknown UI environment '{requested}', falling back to '{DEFAULT_UI_ENVIRONMENT}'"
        )
        requested = DEFAULT_UI_ENVIRONMENT

    values = table[requested]
    username = values.get("username")
    password = values.get("password")
    if username is None or password is None:
        standard_user = _standard_user(data_dir)
        username = standard_user.get("username", "") if username is None else username
        password = standard_user.get("password", "") if password is None else password

    environment = UiEnvironment(
        name=requested,
        base_url=str(values["base_url"]),
        username=username,
        password=password,
        test_data_files=tuple(values.get("test_data_files") or DEFAULT_TEST_DATA_FILES),
        data_dir=data_dir,
    )

    overrides = {
        "base_url": os.getenv("UI_BASE_URL"),
        "username": os.getenv("UI_USERNAME"),
        "password": os.getenv("UI_PASSWORD"),
    }
    overrides = {key: value for key, value in overrides.items() if value}
    if overrides:
        environment = replace(environment, **overrides)

    logger.debug(f"Resolved UI environment: {environment.name} -> {environment.base_url}")
    return environment


__all__ = [
    "UiEnvironment",
    "BUILTIN_UI_ENVIRONMENTS",
    "DEFAULT_UI_ENVIRONMENT",
    "get_ui_environment",
    "load_data_file",
]
