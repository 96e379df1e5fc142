"""
Playwright doubles for the offline unit tests.

They stand in for the objects ``BrowserSession`` and ``BasePage`` talk to
(browser type, browser, page, element), so the failure contract and the
session lifecycle can be checked without a browser.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Dict, List, Optional


FAKE_PNG = b"\x89PNG fake"


class FakeElement:
    def __init__(self, text: Optional[str]):
        self._text = text

    async def text_content(self) -> Optional[str]:
        return self._text


class FakePage:
    """Records calls; methods named in ``failures`` raise the mapped exception."""

    def __init__(self):
        self.url = "about:blank"
        self.calls: List[tuple] = []
        self.failures: Dict[str, Exception] = {}
        self.elements: Dict[str, FakeElement] = {}
        self.visible: Dict[str, bool] = {}
        self.closed = False
        self.close_count = 0

    def _record(self, name: str, *args) -> None:
        self.calls.append((name,) + args)
        if name in self.failures:
            raise self.failures[name]

    async def goto(self, url: str) -> None:
        self._record("goto", url)
        self.url = url

    async def click(self, selector: str) -> None:
        self._record("click", selector)

    async def fill(self, selector: str, value: str) -> None:
        self._record("fill", selector, value)

    async def wait_for_selector(self, selector: str) -> None:
        self._record("wait_for_selector", selector)

    async def query_selector(self, selector: str) -> Optional[FakeElement]:
        self._record("query_selector", selector)
        return self.elements.get(selector)

    async def is_visible(self, selector: str) -> bool:
        self._record("is_visible", selector)
        return self.visible.get(selector, False)

    async def screenshot(self, path: str) -> bytes:
        self._record("screenshot", path)
        Path(path).write_bytes(FAKE_PNG)
        return FAKE_PNG

    async def close(self) -> None:
        self.closed = True
        self.close_count += 1


class FakeBrowser:
    def __init__(self):
        self.pages: List[FakePage] = []
        self.closed = False
        self.close_count = 0

    async def new_page(self) -> FakePage:
        page = FakePage()
        self.pages.append(page)
        return page

    async def close(self) -> None:
        self.closed = True
        self.close_count += 1


class FakeBrowserType:
    """Launcher double; set ``launch_error`` to make the next launch fail."""

    def __init__(self):
        self.browsers: List[FakeBrowser] = []
        self.launch_kwargs: List[dict] = []
        self.launch_error: Optional[Exception] = None

    async def launch(self, **kwargs) -> FakeBrowser:
        # Yield to the loop so concurrent acquires interleave
        await asyncio.sleep(0)
        self.launch_kwargs.append(kwargs)
        if self.launch_error is not None:
            raise self.launch_error
        browser = FakeBrowser()
        self.browsers.append(browser)
        return browser

    @property
    def launch_count(self) -> int:
        return len(self.browsers)

