"""
Repository-level pytest configuration.

Responsibilities:
  - Start the shared loguru sinks once per session
  - Skip tests that drive live services unless explicitly requested

Important:
  Live suites hit the public ReqRes API and the SauceDemo store. They are marked
  ``requires_external`` and only run when RUN_EXTERNAL_TESTS=1.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Generator

import pytest
from loguru import logger

from generic_frameworks.common.log_config import init_logger


EXTERNAL_TESTS_FLAG = "RUN_EXTERNAL_TESTS"


def _external_tests_enabled() -> bool:
    return os.getenv(EXTERNAL_TESTS_FLAG, "").lower() in ("1", "true", "yes", "on")


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return repo root path."""
    return Path(__file__).parent


@pytest.fixture(scope="session", autouse=True)
def _session_logging() -> Generator[None, None, None]:
    log_dir = init_logger()
    logger.info(f"Test session logging to: {log_dir}")
    yield
    logger.info("Test session finished")


def pytest_runtest_setup(item):
    if item.get_closest_marker("requires_external") and not _external_tests_enabled():
        pytest.skip(f"requires live services; set {EXTERNAL_TESTS_FLAG}=1 to run")
