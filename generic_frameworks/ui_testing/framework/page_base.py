"""
================================================================================
Base Page Object
================================================================================

Foundation class for Page Object Model implementation.

Provides:
    - Page handle acquisition from the injected BrowserSession
    - Navigation, click, fill, wait, read and visibility primitives
    - A uniform failure contract for every primitive:
        log error -> screenshot "<action>-error-<epoch-millis>" -> raise typed error
    - Screenshot capture with Allure attachment

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import time
from pathlib import Path
from typing import Optional

import allure
from loguru import logger
from playwright.async_api import Page

from .browser_session import BrowserSession
from .environments import get_ui_environment
from .errors import ActionKind, ElementActionError, NavigationError


# Screenshots land relative to the working directory the runner starts in
SCREENSHOT_DIR = Path("screenshots")


def _epoch_millis() -> int:
    return int(time.time() * 1000)


class BasePage:
    """
    Base class for all page objects.

    Page objects never launch browsers themselves: they share the page held by
    the ``BrowserSession`` they are given.

    Usage:
        class LoginPage(BasePage):
            async def login(self, username: str, password: str):
                await self.fill("#user-name", username)
                await self.fill("#password", password)
                await self.click("#login-button")

        login_page = LoginPage(session)
        await login_page.init()
        await login_page.navigate("/")
    """

    def __init__(
        self,
        session: BrowserSession,
        base_url: str = "",
    ):
        """
        Initialize page object.

        Args:
            session: Browser session shared by the test's page objects
            base_url: Base URL for relative navigation. Defaults to the
                active UI environment.
        """
        self.session = session
        if not base_url:
            base_url = get_ui_environment().base_url
        self.base_url = base_url.rstrip("/")
        self.page: Optional[Page] = None

    async def init(self) -> "BasePage":
        """Attach this page object to the session page (created on first use)."""
        self.page = await self.session.acquire()
        return self

    async def close_browser(self) -> None:
        """Release the session: closes the shared page and browser."""
        await self.session.release()
        self.page = None

    @property
    def current_url(self) -> str:
        return self._driver.url

    @property
    def _driver(self) -> Page:
        if self.page is None:
            raise RuntimeError(
                f"{type(self).__name__} is not initialized. Call 'await init()' first."
            )
        return self.page

    def resolve_url(self, url: str) -> str:
        """Join relative paths onto ``base_url``; absolute URLs pass through."""
        if url.startswith(("http://", "https://")):
            return url
        return f"{self.base_url}/{url.lstrip('/')}"

    # =========================================================================
    # Driver Primitives
    # =========================================================================

    async def navigate(self, url: str) -> None:
        """
        Navigate to ``url`` (absolute, or relative to ``base_url``).

        Raises:
            NavigationError: the driver failed to load the URL
        """
        page = self._driver
        target = self.resolve_url(url)
        with allure.step(f"Navigate to {target}"):
            try:
                await page.goto(target)
                logger.info(f"Navigated to URL: {target}")
            except Exception as e:
                logger.error(f"Navigation failed for URL: {target} - {e}")
                await self._capture_failure(ActionKind.NAVIGATE)
                raise NavigationError(target, e) from e

    async def click(self, selector: str) -> None:
        """
        Click the element matching ``selector``.

        Raises:
            ElementActionError: the click failed
        """
        page = self._driver
        with allure.step(f"Click: {selector}"):
            try:
                await page.click(selector)
                logger.info(f"Clicked element: {selector}")
            except Exception as e:
                logger.error(f"Click failed for selector: {selector} - {e}")
                await self._capture_failure(ActionKind.CLICK)
                raise ElementActionError(ActionKind.CLICK, selector, e) from e

    async def fill(self, selector: str, text: str) -> None:
        """
        Fill the input matching ``selector`` with ``text``.

        Values of password fields are masked in logs and reports.

        Raises:
            ElementActionError: the fill failed
        """
        page = self._driver
        shown = "*" * len(text) if "password" in selector.lower() else text
        with allure.step(f"Fill {selector}: {shown}"):
            try:
                await page.fill(selector, text)
                logger.info(f"Filled element: {selector} with text: {shown}")
            except Exception as e:
                logger.error(f"Fill failed for selector: {selector} - {e}")
                await self._capture_failure(ActionKind.FILL)
                raise ElementActionError(ActionKind.FILL, selector, e) from e

    async def wait_for_selector(self, selector: str) -> None:
        """
        Wait until ``selector`` appears in the DOM.

        Raises:
            ElementActionError: the wait timed out or failed
        """
        page = self._driver
        with allure.step(f"Wait for: {selector}"):
            try:
                await page.wait_for_selector(selector)
                logger.info(f"Waited for selector: {selector}")
            except Exception as e:
                logger.error(f"Wait for selector failed: {selector} - {e}")
                await self._capture_failure(ActionKind.WAIT)
                raise ElementActionError(ActionKind.WAIT, selector, e) from e

    async def get_text(self, selector: str) -> Optional[str]:
        """
        Return the text content of ``selector``.

        Returns:
            The text, or None (with a warning) when no element matches

        Raises:
            ElementActionError: the driver failed while reading
        """
        page = self._driver
        with allure.step(f"Read text: {selector}"):
            try:
                element = await page.query_selector(selector)
                if element is None:
                    logger.warning(f"Element not found for get_text: {selector}")
                    return None
                text = await element.text_content()
                logger.info(f"Got text from element: {selector}")
                return text
            except Exception as e:
                logger.error(f"get_text failed for selector: {selector} - {e}")
                await self._capture_failure(ActionKind.READ)
                raise ElementActionError(ActionKind.READ, selector, e) from e

    async def is_visible(self, selector: str) -> bool:
        """
        Check whether ``selector`` is visible.

        Raises:
            ElementActionError: the driver failed during the check
        """
        page = self._driver
        with allure.step(f"Check visible: {selector}"):
            try:
                visible = await page.is_visible(selector)
                logger.info(f"Checked visibility for: {selector} - {visible}")
                return visible
            except Exception as e:
                logger.error(f"is_visible failed for selector: {selector} - {e}")
                await self._capture_failure(ActionKind.VISIBILITY_CHECK)
                raise ElementActionError(ActionKind.VISIBILITY_CHECK, selector, e) from e

    # =========================================================================
    # Screenshot Utilities
    # =========================================================================

    async def take_screenshot(self, name: str, attach_to_allure: bool = True) -> Path:
        """
        Save a screenshot as ``SCREENSHOT_DIR/<name>.png``.

        Args:
            name: Screenshot name (without extension)
            attach_to_allure: Whether to attach the image to the Allure report

        Returns:
            Path to saved screenshot
        """
        SCREENSHOT_DIR.mkdir(parents=True, exist_ok=True)
        filepath = SCREENSHOT_DIR / f"{name}.png"

        image = await self._driver.screenshot(path=str(filepath))

        if attach_to_allure and image:
            allure.attach(
                image,
                name=name,
                attachment_type=allure.attachment_type.PNG
            )

        logger.info(f"Screenshot taken: {filepath}")
        return filepath

    async def _capture_failure(self, action: ActionKind) -> Path:
        # Not guarded: a failing screenshot surfaces instead of the action error
        return await self.take_screenshot(f"{action.value}-error-{_epoch_millis()}")


__all__ = [
    "BasePage",
    "SCREENSHOT_DIR",
]
