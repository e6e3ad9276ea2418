"""
================================================================================
Page Base
================================================================================

Page-level capabilities shared by every page object.

Provides:
    - Navigation relative to the environment base URL
    - Visibility probes and blocking waits
    - Best-effort screenshots attached to Allure
    - API response capture for failure diagnostics

Concrete pages hold a PageBase instead of inheriting from it:

    class LoginPage:
        def __init__(self, page, base_url):
            self.base = PageBase(page, base_url)

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

import allure
from loguru import logger
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Page, Response
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from e2e_tools.common.settings import Timeouts
from e2e_tools.report_tools import allure_step, attach_json, attach_png, attach_text

from .selectors import SelectorLike, to_selector

DEFAULT_SCREENSHOT_DIR = Path("test-results/screenshots")

# Captured /api/ responses kept for diagnostics
MAX_CAPTURED_RESPONSES = 20
MAX_CAPTURED_BODY_LENGTH = 1000


class PageBase:
    """
    Common page operations.

    Args:
        page: Playwright Page object
        base_url: Application origin (no trailing slash required)
        screenshot_dir: Output directory for take_screenshot()
        timeouts: Page load, probe and blocking wait defaults
    """

    def __init__(
        self,
        page: Page,
        base_url: str,
        screenshot_dir: Optional[Path] = None,
        timeouts: Timeouts = Timeouts(),
    ):
        self.page = page
        self.timeouts = timeouts
        self.base_url = base_url.rstrip("/")
        self.screenshot_dir = Path(screenshot_dir) if screenshot_dir else DEFAULT_SCREENSHOT_DIR

        self._captured_responses: List[Dict[str, Any]] = []
        self._setup_response_capture()

    def _setup_response_capture(self) -> None:
        """Record the most recent /api/ responses."""

        async def capture_response(response: Response) -> None:
            if "/api/" not in response.url:
                return
            try:
                body = await response.text()
            except PlaywrightError:
                body = "<unable to read>"

            self._captured_responses.append({
                "timestamp": datetime.now().isoformat(),
                "url": response.url,
                "status": response.status,
                "body": body[:MAX_CAPTURED_BODY_LENGTH],
            })
            if len(self._captured_responses) > MAX_CAPTURED_RESPONSES:
                self._captured_responses.pop(0)

        self.page.on("response", capture_response)

    @property
    def captured_responses(self) -> List[Dict[str, Any]]:
        return list(self._captured_responses)

    @property
    def current_url(self) -> str:
        return self.page.url

    # =========================================================================
    # Navigation
    # =========================================================================

    async def navigate_to(self, path: str) -> None:
        """
        Open `base_url + path` and wait for the network to settle.

        Navigation and load-state errors propagate.
        """
        full_url = f"{self.base_url}{path}"
        with allure.step(f"Navigate to {path}"):
            await self.page.goto(full_url)
            await self.wait_for_page_load()
        logger.debug(f"Navigated to: {full_url}")

    async def wait_for_page_load(self, timeout: Optional[int] = None) -> None:
        """Wait for the `networkidle` load state (default: `timeouts.page_load`)."""
        if timeout is None:
            timeout = self.timeouts.page_load
        await self.page.wait_for_load_state("networkidle", timeout=timeout)

    async def get_page_title(self) -> str:
        return await self.page.title()

    # =========================================================================
    # Probes and Waits
    # =========================================================================

    async def is_element_visible(
        self,
        selector: SelectorLike,
        timeout: Optional[int] = None,
    ) -> bool:
        """
        Check whether an element becomes visible within `timeout` ms.

        Never raises on timeout.
        """
        target = to_selector(selector)
        if timeout is None:
            timeout = self.timeouts.probe
        try:
            await self.page.locator(target).first.wait_for(state="visible", timeout=timeout)
            return True
        except PlaywrightTimeoutError:
            logger.debug(f"Not visible within {timeout}ms: {target}")
            return False

    async def wait_for_element(
        self,
        selector: SelectorLike,
        timeout: Optional[int] = None,
    ) -> None:
        """Block until the element is visible; timeouts propagate."""
        await self.page.locator(to_selector(selector)).first.wait_for(
            state="visible",
            timeout=self.timeouts.element if timeout is None else timeout,
        )

    async def scroll_to_element(self, selector: SelectorLike) -> None:
        await self.page.locator(to_selector(selector)).first.scroll_into_view_if_needed()

    async def wait(self, milliseconds: int) -> None:
        """Fixed pause."""
        await self.page.wait_for_timeout(milliseconds)

    # =========================================================================
    # Screenshot and Debug Utilities
    # =========================================================================

    async def take_screenshot(self, name: str) -> Optional[Path]:
        """
        Save a full-page PNG and attach it to Allure.

        Best-effort: failures are logged and None is returned.
        """
        timestamp = datetime.now().strftime("%Y-%m-%dT%H-%M-%S-%f")
        filepath = self.screenshot_dir / f"{name}-{timestamp}.png"
        try:
            filepath.parent.mkdir(parents=True, exist_ok=True)
            await self.page.screenshot(path=str(filepath), full_page=True)
            attach_png(filepath, name=name)
        except (PlaywrightError, OSError) as e:
            logger.warning(f"Screenshot '{name}' failed: {e}")
            return None

        logger.debug(f"Screenshot saved: {filepath}")
        return filepath

    @allure_step("Capture failure details")
    async def capture_failure(self, test_name: str) -> None:
        """
        Capture debugging information on test failure.

        Saves:
            - Screenshot
            - Current URL
            - Recent API responses
        """
        await self.take_screenshot(f"failure_{test_name}")
        attach_text(self.page.url, name="Current URL")
        if self._captured_responses:
            attach_json(self._captured_responses[-10:], name="Recent API Responses")


__all__ = [
    "PageBase",
    "DEFAULT_SCREENSHOT_DIR",
]
