"""
================================================================================
UI Testing Pytest Configuration
================================================================================

This module configures pytest for UI tests, providing fixtures for browser
session management, page objects and test data.

Key Features:
- One BrowserSession per test, released on teardown
- Page Object fixtures built through PageFactory
- Test data loaded from the active UI environment

UI test modules drive the live demo store and carry
``pytestmark = pytest.mark.requires_external``.

================================================================================
"""

from typing import Any, AsyncGenerator, Dict

import pytest
from loguru import logger

from generic_frameworks.ui_testing.framework.browser_session import BrowserSession
from generic_frameworks.ui_testing.framework.environments import UiEnvironment, get_ui_environment
from generic_frameworks.ui_testing.framework.page_factory import PageFactory
from generic_frameworks.ui_testing.pages.inventory_page import InventoryPage
from generic_frameworks.ui_testing.pages.login_page import LoginPage


# ================================================================================
# Environment Fixtures
# ================================================================================

@pytest.fixture(scope="session")
def ui_environment() -> UiEnvironment:
    """Active UI environment (TEST_ENV, default prod)."""
    return get_ui_environment()


@pytest.fixture(scope="session")
def test_data(ui_environment: UiEnvironment) -> Dict[str, Any]:
    """
    Test data keyed by file stem.

    Example:
        test_data["users"]["standardUser"]["username"]
        test_data["products"][0]["name"]
    """
    return ui_environment.load_test_data()


# ================================================================================
# Browser Fixtures
# ================================================================================

@pytest.fixture
async def browser_session() -> AsyncGenerator[BrowserSession, None]:
    """
    Function-scoped browser session.

    Headed by default; set UI_HEADLESS=1 (CI) to hide the browser.
    """
    session = BrowserSession.from_env()
    yield session
    await session.release()
    logger.info("UI test teardown: Browser and Page closed.")


# ================================================================================
# Page Object Fixtures
# ================================================================================

@pytest.fixture
async def login_page(browser_session: BrowserSession, ui_environment: UiEnvironment) -> LoginPage:
    """Initialized LoginPage on the test's browser session."""
    page = PageFactory.get_page("LoginPage", browser_session, ui_environment.base_url)
    await page.init()
    return page


@pytest.fixture
async def inventory_page(browser_session: BrowserSession, ui_environment: UiEnvironment) -> InventoryPage:
    """Initialized InventoryPage sharing the login page's browser page."""
    page = PageFactory.get_page("InventoryPage", browser_session, ui_environment.base_url)
    await page.init()
    return page


@pytest.fixture
async def logged_in_inventory(
    login_page: LoginPage,
    inventory_page: InventoryPage,
    test_data: Dict[str, Any],
) -> InventoryPage:
    """InventoryPage after logging in as the standard user."""
    user = test_data["users"]["standardUser"]

    logger.info("Inventory test setup: Navigating to login and logging in.")
    await login_page.open()
    result = await login_page.login(user["username"], user["password"])
    assert result, f"Standard user login failed: {result.error}"

    logger.info("Inventory test setup complete: Logged in as standard user.")
    return inventory_page
