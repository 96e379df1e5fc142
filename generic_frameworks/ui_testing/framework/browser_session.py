"""
================================================================================
Browser Session
================================================================================

Holds the one browser and the one page a test worker uses.

The session is created by the test harness (see ``ui_testing/tests/conftest.py``)
and handed to every Page Object, so all Page Objects of a test drive the same
page. Handles are created lazily on the first ``acquire()`` and destroyed by
``release()``; the next ``acquire()`` after a release starts fresh.

State machine:
    Empty    --acquire()--> Acquired  (launch browser, open page)
    Acquired --acquire()--> Acquired  (same page returned)
    Acquired --release()--> Empty     (page and browser closed)
    Empty    --release()--> Empty     (no-op)

Each pytest-xdist worker is its own process and builds its own session.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import asyncio
import os
from typing import Any, Dict, Optional

from loguru import logger
from playwright.async_api import Browser, BrowserType, Page, Playwright, async_playwright


class BrowserSession:
    """
    Lazily created browser + page pair with explicit teardown.

    Usage:
        session = BrowserSession()
        page = await session.acquire()      # launches chromium, opens a page
        same = await session.acquire()      # same page, nothing new launched
        await session.release()             # closes page, then browser

        async with BrowserSession(headless=True) as session:
            page = await session.acquire()
    """

    DEFAULT_LAUNCH_OPTIONS: Dict[str, Any] = {
        "args": [
            "--ignore-certificate-errors",
        ],
    }

    def __init__(
        self,
        headless: bool = False,
        browser_name: str = "chromium",
        browser_type: Optional[BrowserType] = None,
        launch_options: Optional[Dict[str, Any]] = None,
    ):
        """
        Initialize browser session.

        Args:
            headless: Run browser in headless mode. Visible by default for
                local debugging.
            browser_name: 'chromium', 'firefox' or 'webkit'
            browser_type: Pre-built launcher. When None, Playwright is started
                on first use and ``browser_name`` picks the launcher.
            launch_options: Extra options merged over DEFAULT_LAUNCH_OPTIONS
        """
        self.headless = headless
        self.browser_name = browser_name
        self.launch_options = {**self.DEFAULT_LAUNCH_OPTIONS, **(launch_options or {})}

        self._browser_type = browser_type
        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._page: Optional[Page] = None
        self._lock: Optional[asyncio.Lock] = None

    @classmethod
    def from_env(cls) -> "BrowserSession":
        """
        Build a session from UI_HEADLESS and UI_BROWSER.

        The browser stays visible unless UI_HEADLESS is set to a truthy value.
        """
        headless = os.getenv("UI_HEADLESS", "").strip().lower() in ("1", "true", "yes", "on")
        return cls(headless=headless, browser_name=os.getenv("UI_BROWSER", "chromium"))

    async def __aenter__(self) -> "BrowserSession":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.release()

    @property
    def is_active(self) -> bool:
        return self._page is not None

    @property
    def page(self) -> Optional[Page]:
        return self._page

    @property
    def browser(self) -> Optional[Browser]:
        return self._browser

    def _get_lock(self) -> asyncio.Lock:
        # Created on first use so it binds to the running test loop
        if self._lock is None:
            self._lock = asyncio.Lock()
        return self._lock

    async def acquire(self) -> Page:
        """
        Return the session page, launching the browser and page if needed.

        Launch failures propagate to the caller; nothing is retried.
        """
        async with self._get_lock():
            if self._browser is None:
                launcher = await self._resolve_browser_type()
                self._browser = await launcher.launch(
                    headless=self.headless,
                    **self.launch_options,
                )
                logger.debug(
                    f"Browser started: {self.browser_name} (headless={self.headless})"
                )

            if self._page is None:
                self._page = await self._browser.new_page()
                logger.debug("Page opened")

            return self._page

    async def release(self) -> None:
        """Close the page, then the browser. Safe to call when nothing is held."""
        async with self._get_lock():
            if self._page is not None:
                try:
                    await self._page.close()
                finally:
                    self._page = None
                logger.debug("Page closed")

            if self._browser is not None:
                try:
                    await self._browser.close()
                finally:
                    self._browser = None
                logger.debug("Browser closed")

            if self._playwright is not None:
                try:
                    await self._playwright.stop()
                finally:
                    self._playwright = None

    async def _resolve_browser_type(self) -> BrowserType:
        if self._browser_type is not None:
            return self._browser_type

        if self._playwright is None:
            self._playwright = await async_playwright().start()

        if self.browser_name == "firefox":
            return self._playwright.firefox
        if self.browser_name == "webkit":
            return self._playwright.webkit
        return self._playwright.chromium


__all__ = [
    "BrowserSession",
]
