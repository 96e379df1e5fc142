"""
Typed failures raised by page object actions.

Each error keeps the driver exception on ``original_error`` and is raised
with ``raise ... from`` so the traceback shows both.
"""

from __future__ import annotations

from enum import Enum


class ActionKind(str, Enum):
    """Driver actions wrapped by ``BasePage``."""
    CLICK = "click"
    FILL = "fill"
    NAVIGATE = "navigate"
    WAIT = "wait"
    READ = "read"
    VISIBILITY_CHECK = "visibility-check"


class PageActionError(Exception):
    """Base class for wrapped driver failures."""

    def __init__(self, action: ActionKind, target: str, original_error: BaseException, message: str):
        super().__init__(message)
        self.action = action
        self.target = target
        self.original_error = original_error


class ElementActionError(PageActionError):
    """An element interaction (click, fill, wait, read, visibility check) failed."""

    def __init__(self, action: ActionKind, selector: str, original_error: BaseException):
        super().__init__(
            action,
            selector,
            original_error,
            f"Failed to {action.value} on selector: {selector}. Error: {original_error}",
        )

    @property
    def selector(self) -> str:
        return self.target


class NavigationError(PageActionError):
    """Navigation to a URL failed."""

    def __init__(self, url: str, original_error: BaseException):
        super().__init__(
            ActionKind.NAVIGATE,
            url,
            original_error,
            f"Failed to navigate to URL: {url}. Error: {original_error}",
        )

    @property
    def url(self) -> str:
        return self.target


__all__ = [
    "ActionKind",
    "PageActionError",
    "ElementActionError",
    "NavigationError",
]
