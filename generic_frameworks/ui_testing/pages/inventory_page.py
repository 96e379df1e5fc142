"""
================================================================================
Inventory Page Object (Async / Playwright)
================================================================================

Product listing shown after a successful login; manages the shopping cart.

Add/remove buttons carry ``data-test`` ids derived from the product name
("Sauce Labs Backpack" -> ``add-to-cart-sauce-labs-backpack``).

================================================================================
"""

from __future__ import annotations

import allure
from loguru import logger

from generic_frameworks.ui_testing.framework.page_base import BasePage


def product_slug(item_name: str) -> str:
    return item_name.strip().lower().replace(" ", "-")


class InventoryPage(BasePage):
    """Inventory page object (async)."""

    URL_PATH = "/inventory.html"

    SHOPPING_CART_BADGE = ".shopping_cart_badge"
    SHOPPING_CART_ICON = "#shopping_cart_container"
    INVENTORY_LIST = ".inventory_list"

    def add_to_cart_selector(self, item_name: str) -> str:
        return f'[data-test="add-to-cart-{product_slug(item_name)}"]'

    def remove_selector(self, item_name: str) -> str:
        return f'[data-test="remove-{product_slug(item_name)}"]'

    async def open(self) -> "InventoryPage":
        await self.navigate(self.URL_PATH)
        await self.wait_for_selector(self.INVENTORY_LIST)
        return self

    @allure.step("Add to cart: {item_name}")
    async def add_item_to_cart(self, item_name: str) -> None:
        await self.click(self.add_to_cart_selector(item_name))
        logger.info(f'Added item to cart: "{item_name}"')

    @allure.step("Remove from cart: {item_name}")
    async def remove_item_from_cart(self, item_name: str) -> None:
        await self.click(self.remove_selector(item_name))
        logger.info(f'Removed item from cart: "{item_name}"')

    async def get_cart_item_count(self) -> int:
        """
        Number shown on the cart badge.

        The badge is removed from the DOM when the cart is empty, so a
        missing badge counts as 0.
        """
        count_text = await self.get_text(self.SHOPPING_CART_BADGE)
        count = int((count_text or "0").strip() or "0")
        logger.info(f"Current cart item count: {count}")
        return count

    async def open_cart(self) -> None:
        await self.click(self.SHOPPING_CART_ICON)


__all__ = [
    "InventoryPage",
    "product_slug",
]
