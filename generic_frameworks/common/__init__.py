"""
================================================================================
Common Utilities
================================================================================

Shared configuration, logging and factory plumbing for the API and UI
frameworks.

Exports:
    - ConfigLoader: Singleton YAML configuration manager
    - init_logger: loguru setup (console + combined log + error log)
    - Registry / NotFoundError: name-based construction dispatch

================================================================================
"""

from .config import ConfigLoader, ConfigurationError, selected_environment_name
from .log_config import init_logger, reset_logger
from .registry import NotFoundError, Registry

__all__ = [
    "ConfigLoader",
    "ConfigurationError",
    "selected_environment_name",
    "init_logger",
    "reset_logger",
    "NotFoundError",
    "Registry",
]
