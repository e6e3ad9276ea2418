"""
================================================================================
Header Component
================================================================================

Site header: logo, main navigation, authentication controls, user menu,
search, mobile menu and utility icons.

All selectors are `data-testid` based and scoped to the header root.

================================================================================
"""

from __future__ import annotations

from enum import unique
from typing import Any, Dict, List, Optional

import allure
from loguru import logger
from playwright.async_api import Page

from e2e_suites.ui_testing.framework.region import Region
from e2e_suites.ui_testing.framework.selectors import SelectorTable, by_test_id
from e2e_tools.common.settings import Timeouts


# Dropdown / mobile menu animation delay
MENU_ANIMATION_MS = 500


@unique
class HeaderSelectors(SelectorTable):
    # Structure
    HEADER = by_test_id("header")
    LOGO = by_test_id("logo")
    LOGO_IMAGE = by_test_id("logo-image")
    LOGO_TEXT = by_test_id("logo-text")
    MAIN_NAVIGATION = by_test_id("main-navigation")
    NAV_MENU = by_test_id("nav-menu")

    # Navigation links
    HOME_LINK = by_test_id("nav-home")
    ABOUT_LINK = by_test_id("nav-about")
    SERVICES_LINK = by_test_id("nav-services")
    CONTACT_LINK = by_test_id("nav-contact")

    # Authentication
    AUTH_SECTION = by_test_id("auth-section")
    LOGIN_BUTTON = by_test_id("login-button")
    SIGNUP_BUTTON = by_test_id("signup-button")
    LOGOUT_BUTTON = by_test_id("logout-button")

    # User menu
    USER_MENU = by_test_id("user-menu")
    USER_AVATAR = by_test_id("user-avatar")
    USER_NAME = by_test_id("user-name")
    USER_DROPDOWN = by_test_id("user-dropdown")
    PROFILE_LINK = by_test_id("profile-link")
    SETTINGS_LINK = by_test_id("settings-link")
    DASHBOARD_LINK = by_test_id("dashboard-link")

    # Search
    SEARCH_SECTION = by_test_id("search-section")
    SEARCH_INPUT = by_test_id("search-input")
    SEARCH_BUTTON = by_test_id("search-button")
    SEARCH_RESULTS = by_test_id("search-results")

    # Mobile
    MOBILE_MENU_TOGGLE = by_test_id("mobile-menu-toggle")
    MOBILE_MENU = by_test_id("mobile-menu")
    MOBILE_NAV_LINKS = by_test_id("mobile-nav-links")

    # Utilities
    LANGUAGE_SELECTOR = by_test_id("language-selector")
    THEME_TOGGLE = by_test_id("theme-toggle")
    NOTIFICATION_BELL = by_test_id("notification-bell")
    CART_ICON = by_test_id("cart-icon")
    CART_COUNT = by_test_id("cart-count")


SEARCH_RESULT_ITEMS = "li, .search-result-item"

NAV_LINKS: Dict[str, HeaderSelectors] = {
    "home": HeaderSelectors.HOME_LINK,
    "about": HeaderSelectors.ABOUT_LINK,
    "services": HeaderSelectors.SERVICES_LINK,
    "contact": HeaderSelectors.CONTACT_LINK,
}


class HeaderComponent:
    """Header component."""

    def __init__(self, page: Page, timeouts: Timeouts = Timeouts()):
        self.page = page
        self.region = Region(
            page, HeaderSelectors, root=HeaderSelectors.HEADER.value, timeouts=timeouts
        )

    async def _click_if_visible(self, key: HeaderSelectors) -> bool:
        if await self.region.is_element_visible(key):
            await self.region.click(key)
            return True
        logger.debug(f"Header element not present, skipped click: {key.name}")
        return False

    async def is_header_visible(self) -> bool:
        return await self.region.is_visible()

    # =========================================================================
    # Logo and Navigation
    # =========================================================================

    @allure.step("Header: click logo")
    async def click_logo(self) -> None:
        await self.region.wait_for_visible()
        await self.region.click(HeaderSelectors.LOGO)

    async def get_logo_text(self) -> Optional[str]:
        return await self.region.get_optional_text(HeaderSelectors.LOGO_TEXT)

    @allure.step("Header: navigate to Home")
    async def navigate_to_home(self) -> None:
        await self.region.wait_for_visible()
        await self.region.click(HeaderSelectors.HOME_LINK)

    @allure.step("Header: navigate to About")
    async def navigate_to_about(self) -> None:
        await self.region.wait_for_visible()
        await self._click_if_visible(HeaderSelectors.ABOUT_LINK)

    @allure.step("Header: navigate to Services")
    async def navigate_to_services(self) -> None:
        await self.region.wait_for_visible()
        await self._click_if_visible(HeaderSelectors.SERVICES_LINK)

    @allure.step("Header: navigate to Contact")
    async def navigate_to_contact(self) -> None:
        await self.region.wait_for_visible()
        await self.region.click(HeaderSelectors.CONTACT_LINK)

    async def get_navigation_links(self) -> List[str]:
        """Texts of the visible main navigation links, in menu order."""
        links = []
        for key in NAV_LINKS.values():
            text = await self.region.get_optional_text(key)
            if text and text.strip():
                links.append(text.strip())
        return links

    # =========================================================================
    # Authentication
    # =========================================================================

    @allure.step("Header: click Login")
    async def click_login(self) -> None:
        await self.region.wait_for_visible()
        await self._click_if_visible(HeaderSelectors.LOGIN_BUTTON)

    @allure.step("Header: click Sign Up")
    async def click_signup(self) -> None:
        await self.region.wait_for_visible()
        await self._click_if_visible(HeaderSelectors.SIGNUP_BUTTON)

    @allure.step("Header: click Logout")
    async def click_logout(self) -> None:
        await self.region.wait_for_visible()
        await self._click_if_visible(HeaderSelectors.LOGOUT_BUTTON)

    async def is_user_logged_in(self) -> bool:
        """Logged in when the user menu, logout button or user name is shown."""
        for key in (
            HeaderSelectors.USER_MENU,
            HeaderSelectors.LOGOUT_BUTTON,
            HeaderSelectors.USER_NAME,
        ):
            if await self.region.is_element_visible(key):
                return True
        return False

    async def get_user_name(self) -> Optional[str]:
        return await self.region.get_optional_text(HeaderSelectors.USER_NAME)

    async def get_authentication_state(self) -> Dict[str, Any]:
        region = self.region
        return {
            "is_logged_in": await self.is_user_logged_in(),
            "user_name": await self.get_user_name(),
            "has_login_button": await region.is_element_visible(HeaderSelectors.LOGIN_BUTTON),
            "has_signup_button": await region.is_element_visible(HeaderSelectors.SIGNUP_BUTTON),
            "has_logout_button": await region.is_element_visible(HeaderSelectors.LOGOUT_BUTTON),
            "has_user_menu": await region.is_element_visible(HeaderSelectors.USER_MENU),
        }

    # =========================================================================
    # User Menu
    # =========================================================================

    @allure.step("Header: open user menu")
    async def click_user_menu(self) -> None:
        """Open the user menu, falling back to the avatar."""
        await self.region.wait_for_visible()
        if not await self._click_if_visible(HeaderSelectors.USER_MENU):
            await self._click_if_visible(HeaderSelectors.USER_AVATAR)

    async def _open_user_menu_link(self, key: HeaderSelectors) -> None:
        await self.click_user_menu()
        await self.page.wait_for_timeout(MENU_ANIMATION_MS)
        await self._click_if_visible(key)

    @allure.step("Header: navigate to Profile")
    async def navigate_to_profile(self) -> None:
        await self._open_user_menu_link(HeaderSelectors.PROFILE_LINK)

    @allure.step("Header: navigate to Settings")
    async def navigate_to_settings(self) -> None:
        await self._open_user_menu_link(HeaderSelectors.SETTINGS_LINK)

    @allure.step("Header: navigate to Dashboard")
    async def navigate_to_dashboard(self) -> None:
        await self._open_user_menu_link(HeaderSelectors.DASHBOARD_LINK)

    # =========================================================================
    # Search
    # =========================================================================

    @allure.step("Header: search '{search_term}'")
    async def search(self, search_term: str) -> None:
        """Submit a search with the button, or Enter when there is no button."""
        if not await self.region.is_element_visible(HeaderSelectors.SEARCH_INPUT):
            logger.debug("Header search is not available")
            return

        await self.region.fill(HeaderSelectors.SEARCH_INPUT, search_term)
        if not await self._click_if_visible(HeaderSelectors.SEARCH_BUTTON):
            await self.region.press(HeaderSelectors.SEARCH_INPUT, "Enter")

    async def get_search_results(self) -> List[str]:
        if not await self.region.is_element_visible(HeaderSelectors.SEARCH_RESULTS):
            return []
        return await self.region.texts(HeaderSelectors.SEARCH_RESULTS, SEARCH_RESULT_ITEMS)

    # =========================================================================
    # Mobile Menu
    # =========================================================================

    async def toggle_mobile_menu(self) -> None:
        await self._click_if_visible(HeaderSelectors.MOBILE_MENU_TOGGLE)

    async def is_mobile_menu_open(self) -> bool:
        return await self.region.is_element_visible(HeaderSelectors.MOBILE_MENU)

    @allure.step("Header: navigate via mobile menu to '{link_name}'")
    async def navigate_via_mobile_menu(self, link_name: str) -> None:
        """
        Open the mobile menu and follow a main navigation link.

        Raises:
            ValueError: If `link_name` is not home/about/services/contact
        """
        key = NAV_LINKS.get(link_name.lower())
        if key is None:
            raise ValueError(
                f"Unknown navigation link '{link_name}', expected one of {sorted(NAV_LINKS)}"
            )

        await self.toggle_mobile_menu()
        await self.page.wait_for_timeout(MENU_ANIMATION_MS)
        await self._click_if_visible(key)

    # =========================================================================
    # Utilities
    # =========================================================================

    async def change_language(self, language: str) -> None:
        if await self.region.is_element_visible(HeaderSelectors.LANGUAGE_SELECTOR):
            await self.region.select_option(HeaderSelectors.LANGUAGE_SELECTOR, language)

    async def toggle_theme(self) -> None:
        await self._click_if_visible(HeaderSelectors.THEME_TOGGLE)

    async def click_notifications(self) -> None:
        await self._click_if_visible(HeaderSelectors.NOTIFICATION_BELL)

    async def click_cart(self) -> None:
        await self._click_if_visible(HeaderSelectors.CART_ICON)

    async def get_cart_count(self) -> int:
        """Cart badge value; 0 when absent or not numeric."""
        text = await self.region.get_optional_text(HeaderSelectors.CART_COUNT)
        if not text:
            return 0
        try:
            return int(text.strip())
        except ValueError:
            return 0


__all__ = [
    "HeaderComponent",
    "HeaderSelectors",
]
