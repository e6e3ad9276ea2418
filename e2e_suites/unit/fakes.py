"""
In-memory stand-in for the async Playwright Page.

The fake keeps page state in plain dicts keyed by selector string. Region
scoping is not modelled: `locator(parent).locator(child)` resolves `child`
against the whole page, except for locators returned by `.all()`, which read
text from their own item dict.

    fake_page.visible.add(LoginSelectors.ERROR_MESSAGE.value)
    fake_page.texts[LoginSelectors.ERROR_MESSAGE.value] = "Invalid credentials"
"""

from __future__ import annotations

import asyncio
from fnmatch import fnmatch
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple

from playwright.async_api import TimeoutError as PlaywrightTimeoutError


PNG_BYTES = b"\x89PNG\r\n\x1a\nfake"


class FakeLocator:
    def __init__(self, page: "FakePage", selector: str, item: Optional[Dict[str, str]] = None):
        self._page = page
        self.selector = selector
        self._item = item

    @property
    def first(self) -> "FakeLocator":
        return self

    def locator(self, selector: str) -> "FakeLocator":
        return FakeLocator(self._page, selector, self._item)

    def _record(self, *action: Any) -> None:
        self._page.actions.append(action)

    async def wait_for(self, state: str = "visible", timeout: Optional[float] = None) -> None:
        page = self._page
        if self.selector in page.visible:
            return

        delay = page.delayed.get(self.selector)
        if delay is not None:
            if timeout is None or delay * 1000 <= timeout:
                await asyncio.sleep(delay)
                page.visible.add(self.selector)
                return
            await asyncio.sleep(timeout / 1000)

        raise PlaywrightTimeoutError(
            f"Timeout {timeout}ms exceeded waiting for {self.selector} to be {state}"
        )

    async def click(self, **kwargs: Any) -> None:
        self._record("click", self.selector)
        effect = self._page.click_effects.get(self.selector)
        if effect is not None:
            effect()

    async def fill(self, value: str) -> None:
        self._record("fill", self.selector, value)
        self._page.values[self.selector] = value

    async def clear(self) -> None:
        self._record("clear", self.selector)
        self._page.values[self.selector] = ""

    async def press(self, keys: str) -> None:
        self._record("press", self.selector, keys)

    async def select_option(self, value: str) -> None:
        self._record("select_option", self.selector, value)

    async def set_checked(self, checked: bool) -> None:
        self._record("set_checked", self.selector, checked)
        self._page.checked[self.selector] = checked

    async def is_checked(self) -> bool:
        return self._page.checked.get(self.selector, False)

    async def set_input_files(self, files: Any) -> None:
        self._record("set_input_files", self.selector, files)

    async def scroll_into_view_if_needed(self) -> None:
        self._record("scroll", self.selector)

    async def text_content(self) -> Optional[str]:
        if self._item is not None:
            return self._item.get(self.selector)
        return self._page.texts.get(self.selector)

    async def get_attribute(self, name: str) -> Optional[str]:
        return self._page.attributes.get((self.selector, name))

    async def input_value(self) -> str:
        return self._page.values.get(self.selector, "")

    async def count(self) -> int:
        page = self._page
        if self.selector in page.items:
            return len(page.items[self.selector])
        if self.selector in page.visible:
            return 1
        return int(any(selector == self.selector for selector, _ in page.attributes))

    async def all_text_contents(self) -> List[str]:
        return list(self._page.all_texts.get(self.selector, []))

    async def all(self) -> List["FakeLocator"]:
        return [
            FakeLocator(self._page, self.selector, item)
            for item in self._page.items.get(self.selector, [])
        ]

    async def bounding_box(self) -> Optional[Dict[str, float]]:
        return self._page.boxes.get(self.selector)

    async def evaluate(self, expression: str) -> Any:
        return self._page.evaluations.get(self.selector)


class FakePage:
    """Async Page double with the subset of the API the page objects use."""

    def __init__(self, url: str = "http://localhost:3000/"):
        self.url = url
        self.title_text = ""

        self.visible: set = set()
        self.delayed: Dict[str, float] = {}
        self.texts: Dict[str, str] = {}
        self.attributes: Dict[Tuple[str, str], str] = {}
        self.values: Dict[str, str] = {}
        self.checked: Dict[str, bool] = {}
        self.items: Dict[str, List[Dict[str, str]]] = {}
        self.all_texts: Dict[str, List[str]] = {}
        self.boxes: Dict[str, Dict[str, float]] = {}
        self.evaluations: Dict[str, Any] = {}

        self.click_effects: Dict[str, Callable[[], None]] = {}
        # (delay in seconds, url) reached after submit, consumed by wait_for_url
        self.url_after: Optional[Tuple[float, str]] = None
        self.screenshot_error: Optional[Exception] = None

        self.actions: List[tuple] = []
        self.handlers: Dict[str, List[Callable]] = {}

    def show(self, *selectors: Any, text: Optional[str] = None) -> None:
        """Mark selectors (strings or SelectorTable members) visible, optionally with text."""
        for selector in selectors:
            key = str(selector)
            self.visible.add(key)
            if text is not None:
                self.texts[key] = text

    def locator(self, selector: str) -> FakeLocator:
        return FakeLocator(self, selector)

    def on(self, event: str, handler: Callable) -> None:
        self.handlers.setdefault(event, []).append(handler)

    async def goto(self, url: str, **kwargs: Any) -> None:
        self.actions.append(("goto", url))
        self.url = url

    async def wait_for_load_state(self, state: str = "load", timeout: Optional[float] = None) -> None:
        self.actions.append(("wait_for_load_state", state, timeout))

    async def wait_for_timeout(self, timeout: float) -> None:
        self.actions.append(("wait_for_timeout", timeout))

    async def wait_for_url(self, pattern: str, timeout: Optional[float] = None) -> None:
        if fnmatch(self.url, pattern):
            return
        if self.url_after is not None:
            delay, url = self.url_after
            if fnmatch(url, pattern) and (timeout is None or delay * 1000 <= timeout):
                await asyncio.sleep(delay)
                self.url = url
                return
        raise PlaywrightTimeoutError(f"Timeout {timeout}ms exceeded waiting for URL {pattern}")

    async def title(self) -> str:
        return self.title_text

    async def screenshot(self, path: Optional[str] = None, full_page: bool = False) -> bytes:
        if self.screenshot_error is not None:
            raise self.screenshot_error
        self.actions.append(("screenshot", path, full_page))
        if path:
            Path(path).write_bytes(PNG_BYTES)
        return PNG_BYTES


class FakeResponse:
    def __init__(self, url: str, status: int = 200, body: str = "", error: Optional[Exception] = None):
        self.url = url
        self.status = status
        self._body = body
        self._error = error

    async def text(self) -> str:
        if self._error is not None:
            raise self._error
        return self._body
