"""
================================================================================
Login Feature UI Tests (Async / Playwright)
================================================================================

Covers:
  - Successful login for the standard and performance-glitch users
  - Locked-out user is blocked with the expected error banner

================================================================================
"""

import allure
import pytest

from generic_frameworks.ui_testing.pages.login_page import LoginPage


pytestmark = pytest.mark.requires_external


@allure.epic("UI Testing")
@allure.feature("Authentication")
class TestLogin:
    """Login UI test suite (async)."""

    @allure.story("Happy Path")
    @allure.title("Standard user can login successfully")
    @allure.severity(allure.severity_level.BLOCKER)
    @pytest.mark.P0
    @pytest.mark.smoke
    @pytest.mark.asyncio
    async def test_standard_user_login(self, login_page: LoginPage, test_data):
        user = test_data["users"]["standardUser"]

        await login_page.open()
        result = await login_page.login(user["username"], user["password"])

        assert result, f"Login actions failed: {result.error}"
        await login_page.wait_for_selector(".inventory_list")
        assert "/inventory.html" in login_page.current_url

    @allure.story("Happy Path")
    @allure.title("Performance glitch user can login successfully")
    @allure.severity(allure.severity_level.NORMAL)
    @pytest.mark.P1
    @pytest.mark.regression
    @pytest.mark.asyncio
    async def test_performance_glitch_user_login(self, login_page: LoginPage, test_data):
        user = test_data["users"]["performance_glitch_user"]

        await login_page.open()
        result = await login_page.login(user["username"], user["password"])

        assert result
        await login_page.wait_for_selector(".inventory_list")
        assert "/inventory.html" in login_page.current_url

    @allure.story("Negative Path")
    @allure.title("Locked out user cannot login")
    @allure.severity(allure.severity_level.CRITICAL)
    @pytest.mark.P0
    @pytest.mark.smoke
    @pytest.mark.asyncio
    async def test_locked_out_user_is_blocked(self, login_page: LoginPage, test_data):
        user = test_data["users"]["locked_out_user"]

        await login_page.open()
        await login_page.login(user["username"], user["password"])

        assert "/inventory.html" not in login_page.current_url
        assert await login_page.is_error_message_visible()
        assert "Sorry, this user has been locked out." in (await login_page.get_error_message() or "")
