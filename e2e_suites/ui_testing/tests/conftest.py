"""
================================================================================
UI Testing Pytest Configuration
================================================================================

Fixtures for the live browser specs.

Key Features:
- Browser and page lifecycle management (one isolated context per test)
- Page Object fixtures for Home / Login / Contact
- Screenshot, URL and recent API responses attached on failure

================================================================================
"""

from typing import AsyncGenerator

import pytest
from playwright.async_api import Page

from e2e_suites.ui_testing.framework import BrowserManager, PageBase
from e2e_suites.ui_testing.pages import ContactPage, HomePage, LoginPage
from e2e_tools.common import TestSettings


# ================================================================================
# Browser Fixtures
# ================================================================================

@pytest.fixture
async def browser_manager(settings: TestSettings) -> AsyncGenerator[BrowserManager, None]:
    """
    Function-scoped browser manager.

    Launches the configured browser and closes every context on teardown.
    """
    async with BrowserManager.from_settings(settings) as manager:
        yield manager


@pytest.fixture
async def page(
    request: pytest.FixtureRequest,
    browser_manager: BrowserManager,
    settings: TestSettings,
) -> AsyncGenerator[Page, None]:
    """
    Function-scoped page in a fresh context.

    Captures failure details when the test body failed.
    """
    page = await browser_manager.new_page()
    diagnostics = PageBase(
        page,
        settings.environment.base_url,
        settings.screenshot_dir,
        settings.timeouts,
    )
    yield page

    report = getattr(request.node, "rep_call", None)
    if report is not None and report.failed:
        await diagnostics.capture_failure(request.node.name)


# ================================================================================
# Page Object Fixtures
# ================================================================================

@pytest.fixture
def home_page(page: Page, settings: TestSettings) -> HomePage:
    return HomePage(
        page,
        settings.environment.base_url,
        settings.screenshot_dir,
        settings.timeouts,
    )


@pytest.fixture
def login_page(page: Page, settings: TestSettings) -> LoginPage:
    """
    Provides LoginPage instance.

    Use this fixture for tests that interact with the login page.
    """
    return LoginPage(
        page,
        settings.environment.base_url,
        settings.screenshot_dir,
        settings.timeouts,
    )


@pytest.fixture
def contact_page(page: Page, settings: TestSettings) -> ContactPage:
    return ContactPage(
        page,
        settings.environment.base_url,
        settings.screenshot_dir,
        settings.timeouts,
    )
