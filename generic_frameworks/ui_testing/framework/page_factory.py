"""
Factory for page objects.

Pages are looked up by class name and bound to the caller's
``BrowserSession``. A new instance is returned on every call; instances built
from the same session drive the same browser page once initialized.
"""

from __future__ import annotations

from typing import Any

from generic_frameworks.common.registry import Registry
from generic_frameworks.ui_testing.pages.inventory_page import InventoryPage
from generic_frameworks.ui_testing.pages.login_page import LoginPage

from .browser_session import BrowserSession


PAGE_REGISTRY: Registry[Any] = Registry("Page")
PAGE_REGISTRY.register("LoginPage", LoginPage)
PAGE_REGISTRY.register("InventoryPage", InventoryPage)


class PageFactory:
    """Creates page objects bound to a browser session."""

    @staticmethod
    def get_page(page_name: str, session: BrowserSession, base_url: str = "") -> Any:
        """
        Build the page object registered under ``page_name``.

        Raises:
            NotFoundError: ``page_name`` is not registered
        """
        return PAGE_REGISTRY.create(page_name, session, base_url)

    @staticmethod
    def available() -> list:
        return PAGE_REGISTRY.names()


__all__ = [
    "PAGE_REGISTRY",
    "PageFactory",
]
