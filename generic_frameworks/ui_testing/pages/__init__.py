"""
================================================================================
Page Objects
================================================================================

Page Object Model implementations for the demo store.

Each page class encapsulates:
    - Element selectors
    - Page-specific actions
    - Verification helpers

Author: Automation Team
License: MIT
================================================================================
"""

from .inventory_page import InventoryPage
from .login_page import LoginPage, LoginResult

__all__ = [
    "InventoryPage",
    "LoginPage",
    "LoginResult",
]
