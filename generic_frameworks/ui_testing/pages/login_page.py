"""
================================================================================
Login Page Object (Async / Playwright)
================================================================================

Login screen of the demo store.

``login()`` is the one *soft* action in the framework: instead of raising the
``PageActionError`` of a failed fill/click, it returns a failed
``LoginResult``. The result is falsy on failure, so tests can write
``assert not await login_page.login(...)``.

================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import allure
from loguru import logger

from generic_frameworks.ui_testing.framework.errors import PageActionError
from generic_frameworks.ui_testing.framework.page_base import BasePage


@dataclass(frozen=True)
class LoginResult:
    """
    Outcome of ``LoginPage.login``; truthy only on success.

    Compares equal to the bool it stands for, so ``result == False`` and
    ``not result`` agree.
    """
    success: bool
    error: Optional[PageActionError] = None

    def __bool__(self) -> bool:
        return self.success

    def __eq__(self, other: object) -> bool:
        if isinstance(other, bool):
            return self.success is other
        if isinstance(other, LoginResult):
            return (self.success, self.error) == (other.success, other.error)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.success)


class LoginPage(BasePage):
    """Login page object (async)."""

    USERNAME_INPUT = "#user-name"
    PASSWORD_INPUT = "#password"
    LOGIN_BUTTON = "#login-button"
    ERROR_MESSAGE = ".error-message-container.error"

    async def open(self) -> "LoginPage":
        """Navigate to the login page (the application root)."""
        await self.navigate("/")
        return self

    @allure.step("Login (username={username})")
    async def login(self, username: str, password: str) -> LoginResult:
        """
        Fill the credentials and submit.

        Success only means every action went through; whether the
        application accepted the user is checked by the caller (URL, error
        banner).

        Args:
            username: Value for the username field
            password: Value for the password field

        Returns:
            LoginResult, falsy when a fill or click failed
        """
        try:
            await self.fill(self.USERNAME_INPUT, username)
            logger.info(f'Entered username: "{username}" on login page.')

            await self.fill(self.PASSWORD_INPUT, password)
            logger.info("Entered password on login page (value hidden for security).")

            await self.click(self.LOGIN_BUTTON)
            logger.info("Clicked login button.")
        except PageActionError as e:
            logger.error(f"Login action failed: {e}")
            return LoginResult(success=False, error=e)

        return LoginResult(success=True)

    async def get_error_message(self) -> Optional[str]:
        """Text of the login error banner, or None when there is none."""
        return await self.get_text(self.ERROR_MESSAGE)

    async def is_error_message_visible(self) -> bool:
        return await self.is_visible(self.ERROR_MESSAGE)


__all__ = [
    "LoginPage",
    "LoginResult",
]
