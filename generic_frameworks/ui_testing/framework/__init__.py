"""
================================================================================
UI Testing Framework
================================================================================

Playwright-based UI automation framework (Page Object Model).

Components:
    - browser_session: Lazily created browser/page pair injected into pages
    - page_base: Base page object with the uniform action failure contract
    - errors: Typed action and navigation errors
    - environments: UI environment records selected by TEST_ENV
    - page_factory: Name-based page object construction (import it directly;
      it depends on the pages package)

Author: Automation Team
License: MIT
================================================================================
"""

from .browser_session import BrowserSession
from .environments import UiEnvironment, get_ui_environment
from .errors import ActionKind, ElementActionError, NavigationError, PageActionError
from .page_base import BasePage

__all__ = [
    "ActionKind",
    "BasePage",
    "BrowserSession",
    "ElementActionError",
    "NavigationError",
    "PageActionError",
    "UiEnvironment",
    "get_ui_environment",
]
