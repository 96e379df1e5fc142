"""
Shared fixtures for the offline framework unit tests.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from generic_frameworks.common.config import ConfigLoader
from generic_frameworks.ui_testing.framework import page_base
from generic_frameworks.ui_testing.framework.browser_session import BrowserSession

from fakes import FakeBrowserType


@pytest.fixture
def browser_type() -> FakeBrowserType:
    return FakeBrowserType()


@pytest.fixture
async def fake_session(browser_type: FakeBrowserType):
    session = BrowserSession(headless=True, browser_type=browser_type)
    yield session
    await session.release()


@pytest.fixture
def screenshot_dir(monkeypatch, tmp_path) -> Path:
    """Redirect failure screenshots into the test's tmp dir with a fixed clock."""
    target = tmp_path / "screenshots"
    monkeypatch.setattr(page_base, "SCREENSHOT_DIR", target)
    monkeypatch.setattr(page_base, "_epoch_millis", lambda: 1700000000000)
    return target


@pytest.fixture
def fresh_config():
    """Drop the cached ConfigLoader before and after the test."""
    ConfigLoader.reset()
    yield
    ConfigLoader.reset()
