"""
================================================================================
Region
================================================================================

A scoped view of a page: a selector table plus an optional root selector.
Components and pages hold a Region and delegate element access to it.

    header = Region(page, HeaderSelectors, root=HeaderSelectors.HEADER.value)
    await header.click(HeaderSelectors.LOGO)

Timeouts default to the `probe` and `element` values of the Timeouts the
region was built with; an explicit `timeout=` argument wins.

Error contract:
    - actions (click, fill, ...) propagate engine errors
    - probes (is_visible, is_element_visible) return False on timeout
    - get_optional_text returns None when the element is not visible

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional, Type, Union

from loguru import logger
from playwright.async_api import Locator, Page
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from e2e_tools.common.settings import Timeouts

from .selectors import SelectorTable


class Region:
    """
    Element access scoped to a root selector.

    Args:
        page: Playwright Page
        selectors: SelectorTable subclass whose members this region accepts
        root: Root selector; None scopes the region to the whole page
        timeouts: Defaults for probes (`probe`) and blocking waits (`element`)
    """

    def __init__(
        self,
        page: Page,
        selectors: Type[SelectorTable],
        root: Optional[str] = None,
        timeouts: Timeouts = Timeouts(),
    ):
        self.page = page
        self._selectors = selectors
        self._root_selector = root
        self.timeouts = timeouts

    @property
    def root_selector(self) -> Optional[str]:
        return self._root_selector

    @property
    def selectors(self) -> Type[SelectorTable]:
        return self._selectors

    def _probe_timeout(self, timeout: Optional[int]) -> int:
        return self.timeouts.probe if timeout is None else timeout

    def _wait_timeout(self, timeout: Optional[int]) -> int:
        return self.timeouts.element if timeout is None else timeout

    def root(self) -> Union[Page, Locator]:
        """Root locator, or the page itself when the region is unscoped."""
        if self._root_selector is None:
            return self.page
        return self.page.locator(self._root_selector)

    def locate(self, key: SelectorTable) -> Locator:
        """
        Build a locator for `key` inside the root (no waiting).

        Raises:
            TypeError: If `key` is not a member of this region's selector table
        """
        if not isinstance(key, self._selectors):
            raise TypeError(
                f"{key!r} is not a {self._selectors.__name__} member"
            )
        return self.root().locator(key.value)

    # =========================================================================
    # Probes
    # =========================================================================

    async def is_visible(self, timeout: Optional[int] = None) -> bool:
        """Whether the root is visible (an unscoped region is always visible)."""
        if self._root_selector is None:
            return True
        try:
            await self.page.locator(self._root_selector).first.wait_for(
                state="visible", timeout=self._probe_timeout(timeout)
            )
            return True
        except PlaywrightTimeoutError:
            logger.debug(f"Region not visible: {self._root_selector}")
            return False

    async def is_element_visible(
        self,
        key: SelectorTable,
        timeout: Optional[int] = None,
    ) -> bool:
        """Whether `key` becomes visible within `timeout` ms."""
        try:
            await self.locate(key).first.wait_for(
                state="visible", timeout=self._probe_timeout(timeout)
            )
            return True
        except PlaywrightTimeoutError:
            logger.debug(f"Element not visible: {key.name}")
            return False

    async def get_optional_text(
        self,
        key: SelectorTable,
        timeout: Optional[int] = None,
    ) -> Optional[str]:
        """Text of `key`, or None when it is not visible."""
        if await self.is_element_visible(key, timeout):
            return await self.get_text(key)
        return None

    # =========================================================================
    # Waits
    # =========================================================================

    async def wait_for_visible(self, timeout: Optional[int] = None) -> None:
        """Block until the root is visible."""
        if self._root_selector is None:
            return
        await self.page.locator(self._root_selector).first.wait_for(
            state="visible", timeout=self._wait_timeout(timeout)
        )

    async def wait_for_element(
        self,
        key: SelectorTable,
        state: str = "visible",
        timeout: Optional[int] = None,
    ) -> None:
        """Block until `key` reaches `state`."""
        await self.locate(key).first.wait_for(
            state=state, timeout=self._wait_timeout(timeout)
        )

    # =========================================================================
    # Actions
    # =========================================================================

    async def click(self, key: SelectorTable, **kwargs) -> None:
        logger.debug(f"Click: {key.name}")
        await self.locate(key).first.click(**kwargs)

    async def fill(self, key: SelectorTable, text: str) -> None:
        logger.debug(f"Fill: {key.name}")
        await self.locate(key).first.fill(text)

    async def clear(self, key: SelectorTable) -> None:
        await self.locate(key).first.clear()

    async def press(self, key: SelectorTable, keys: str) -> None:
        await self.locate(key).first.press(keys)

    async def select_option(self, key: SelectorTable, value: str) -> None:
        await self.locate(key).first.select_option(value)

    async def set_checked(self, key: SelectorTable, checked: bool) -> None:
        await self.locate(key).first.set_checked(checked)

    async def is_checked(self, key: SelectorTable) -> bool:
        return await self.locate(key).first.is_checked()

    async def set_input_files(self, key: SelectorTable, path: Union[str, Path]) -> None:
        await self.locate(key).first.set_input_files(str(path))

    async def scroll_to(self, key: SelectorTable) -> None:
        await self.locate(key).first.scroll_into_view_if_needed()

    async def scroll_into_view(self) -> None:
        """Scroll the root into view (no-op for an unscoped region)."""
        if self._root_selector is None:
            return
        await self.page.locator(self._root_selector).first.scroll_into_view_if_needed()

    # =========================================================================
    # Root Geometry
    # =========================================================================

    async def root_bounding_box(self) -> Optional[Dict[str, float]]:
        if self._root_selector is None:
            return None
        return await self.page.locator(self._root_selector).first.bounding_box()

    async def evaluate_root(self, expression: str) -> Any:
        """Evaluate a JS function `el => ...` against the root element."""
        if self._root_selector is None:
            raise ValueError("Unscoped region has no root element")
        return await self.page.locator(self._root_selector).first.evaluate(expression)

    # =========================================================================
    # Queries
    # =========================================================================

    async def get_text(self, key: SelectorTable) -> str:
        """Text content of the first match (empty string when it has none)."""
        return (await self.locate(key).first.text_content()) or ""

    async def get_attribute(self, key: SelectorTable, name: str) -> Optional[str]:
        return await self.locate(key).first.get_attribute(name)

    async def input_value(self, key: SelectorTable) -> str:
        return await self.locate(key).first.input_value()

    async def count(self, key: SelectorTable) -> int:
        return await self.locate(key).count()

    async def texts(self, key: SelectorTable, item_selector: Optional[str] = None) -> List[str]:
        """
        Stripped, non-empty text of every match.

        Args:
            key: Element (or container) selector
            item_selector: Optional child selector applied inside each match
        """
        locator = self.locate(key)
        if item_selector:
            locator = locator.locator(item_selector)
        contents = await locator.all_text_contents()
        return [text.strip() for text in contents if text and text.strip()]

    async def visibility_map(self, keys: Dict[str, SelectorTable]) -> Dict[str, bool]:
        """Probe several elements, keyed by caller-chosen names."""
        return {name: await self.is_element_visible(key) for name, key in keys.items()}


__all__ = [
    "Region",
]
