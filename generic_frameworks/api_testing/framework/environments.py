"""
================================================================================
API Environments
================================================================================

Resolves the API environment record (base URL, API key, timeout, retries)
for the environment named by ``TEST_ENV``.

Resolution order:
    1. Built-in table (dev / staging / prod)
    2. ``api.environments.<name>`` in config/environments.yaml
    3. ``API_BASE_URL`` / ``API_KEY`` environment variables

Unknown or unset environment names fall back to ``dev``.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Any, Dict, Optional

from loguru import logger

from generic_frameworks.common.config import ConfigLoader, selected_environment_name


DEFAULT_API_ENVIRONMENT = "dev"

BUILTIN_API_ENVIRONMENTS: Dict[str, Dict[str, Any]] = {
    "dev": {"base_url": "https://reqres.in", "timeout": 30000, "retries": 2, "api_key": "reqres-free-v1"},
    "staging": {"base_url": "https://staging.reqres.in", "timeout": 45000, "retries": 3},
    "prod": {"base_url": "https://reqres.in", "timeout": 60000, "retries": 1, "api_key": "reqres-free-v1"},
}


@dataclass(frozen=True)
class ApiEnvironment:
    """
    Settings for one API environment.

    Attributes:
        name: Environment name (dev, staging, prod, ...)
        base_url: Base URL for API endpoints
        timeout: Request timeout in milliseconds
        retries: Connection retry attempts handed to the HTTP transport
        api_key: Optional value for the ``x-api-key`` header
    """
    name: str
    base_url: str
    timeout: int
    retries: int
    api_key: Optional[str] = None

    @property
    def timeout_seconds(self) -> float:
        return self.timeout / 1000.0


def _environment_table(config: ConfigLoader) -> Dict[str, Dict[str, Any]]:
    table = {name: dict(values) for name, values in BUILTIN_API_ENVIRONMENTS.items()}
    for name, values in config.get_section("api.environments").items():
        table.setdefault(name, {}).update(values or {})
    return table


def get_environment(
    name: Optional[str] = None,
    config: Optional[ConfigLoader] = None,
) -> ApiEnvironment:
    """
    Return the API environment record.

    Args:
        name: Environment name. Defaults to ``TEST_ENV``, then ``dev``.
        config: Configuration loader. Uses the process-wide one if None.

    Returns:
        Resolved ApiEnvironment
    """
    config = config or ConfigLoader()
    requested = name or selected_environment_name(DEFAULT_API_ENVIRONMENT)
    table = _environment_table(config)

    if requested not in table:
        logger.warning(
            f"Unknown API environment '{requested}', falling back to '{DEFAULT_API_ENVIRONMENT}'"
        )
        requested = DEFAULT_API_ENVIRONMENT

    values = table[requested]
    environment = ApiEnvironment(
        name=requested,
        base_url=str(values["base_url"]),
        timeout=int(values.get("timeout", 30000)),
        retries=int(values.get("retries", 0)),
        api_key=values.get("api_key") or None,
    )

    base_url_override = os.getenv("API_BASE_URL")
    if base_url_override:
        environment = replace(environment, base_url=base_url_override)
    api_key_override = os.getenv("API_KEY")
    if api_key_override:
        environment = replace(environment, api_key=api_key_override)

    logger.debug(f"Resolved API environment: {environment.name} -> {environment.base_url}")
    return environment


__all__ = [
    "ApiEnvironment",
    "BUILTIN_API_ENVIRONMENTS",
    "DEFAULT_API_ENVIRONMENT",
    "get_environment",
]
