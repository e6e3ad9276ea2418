"""
================================================================================
Home Page Object
================================================================================

Landing page (`/`): hero, features, content sections and calls to action.

================================================================================
"""

from __future__ import annotations

from enum import Enum, unique
from pathlib import Path
from typing import Dict, List, Optional, Union

import allure
from loguru import logger
from playwright.async_api import Page
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from e2e_suites.ui_testing.components import FooterComponent, HeaderComponent
from e2e_suites.ui_testing.framework.page_base import PageBase
from e2e_suites.ui_testing.framework.region import Region
from e2e_suites.ui_testing.framework.selectors import SelectorTable, by_test_id
from e2e_tools.common.settings import Timeouts


SCROLL_SETTLE_MS = 500


@unique
class HomeSelectors(SelectorTable):
    # Hero
    HERO_SECTION = by_test_id("hero-section")
    HERO_TITLE = by_test_id("hero-title")
    HERO_SUBTITLE = by_test_id("hero-subtitle")
    HERO_CTA_BUTTON = by_test_id("hero-cta-button")

    # Features
    FEATURES_SECTION = by_test_id("features-section")
    FEATURE_CARD = by_test_id("feature-card")
    FEATURE_TITLE = by_test_id("feature-title")
    FEATURE_DESCRIPTION = by_test_id("feature-description")

    WELCOME_MESSAGE = by_test_id("welcome-message")
    MAIN_NAVIGATION = by_test_id("main-navigation")

    # Content
    ABOUT_SECTION = by_test_id("about-section")
    SERVICES_SECTION = by_test_id("services-section")

    # Calls to action
    CTA_SECTION = by_test_id("cta-section")
    PRIMARY_CTA_BUTTON = by_test_id("primary-cta")
    SECONDARY_CTA_BUTTON = by_test_id("secondary-cta")

    META_DESCRIPTION = 'meta[name="description"]'


class HomeSection(str, Enum):
    HERO = "hero"
    FEATURES = "features"
    ABOUT = "about"
    SERVICES = "services"
    CTA = "cta"


SECTION_SELECTORS: Dict[HomeSection, HomeSelectors] = {
    HomeSection.HERO: HomeSelectors.HERO_SECTION,
    HomeSection.FEATURES: HomeSelectors.FEATURES_SECTION,
    HomeSection.ABOUT: HomeSelectors.ABOUT_SECTION,
    HomeSection.SERVICES: HomeSelectors.SERVICES_SECTION,
    HomeSection.CTA: HomeSelectors.CTA_SECTION,
}


def _strip_or_none(text: Optional[str]) -> Optional[str]:
    return text.strip() if text is not None else None


class HomePage:
    """Home page object (async)."""

    URL_PATH = "/"

    def __init__(
        self,
        page: Page,
        base_url: str,
        screenshot_dir: Optional[Path] = None,
        timeouts: Timeouts = Timeouts(),
    ):
        self.base = PageBase(page, base_url, screenshot_dir, timeouts)
        self.body = Region(page, HomeSelectors, timeouts=timeouts)
        self.header = HeaderComponent(page, timeouts)
        self.footer = FooterComponent(page, timeouts)

    @property
    def page(self) -> Page:
        return self.base.page

    @property
    def timeouts(self) -> Timeouts:
        return self.base.timeouts

    @allure.step("Open home page")
    async def navigate_to_home(self) -> "HomePage":
        await self.base.navigate_to(self.URL_PATH)
        return self

    async def is_home_page_loaded(self) -> bool:
        """Hero section present and hero title visible."""
        try:
            await self.body.wait_for_element(HomeSelectors.HERO_SECTION)
        except PlaywrightTimeoutError as e:
            logger.error(f"Home page failed to load: {e}")
            return False
        return await self.body.is_element_visible(HomeSelectors.HERO_TITLE)

    # =========================================================================
    # Hero
    # =========================================================================

    async def get_hero_title(self) -> str:
        await self.body.wait_for_element(HomeSelectors.HERO_TITLE)
        return await self.body.get_text(HomeSelectors.HERO_TITLE)

    async def get_hero_subtitle(self) -> str:
        await self.body.wait_for_element(HomeSelectors.HERO_SUBTITLE)
        return await self.body.get_text(HomeSelectors.HERO_SUBTITLE)

    @allure.step("Click hero call to action")
    async def click_hero_cta(self) -> None:
        await self.body.wait_for_element(HomeSelectors.HERO_CTA_BUTTON)
        await self.body.click(HomeSelectors.HERO_CTA_BUTTON)

    # =========================================================================
    # Features
    # =========================================================================

    async def get_feature_cards(self) -> List[Dict[str, Optional[str]]]:
        """Title and description of every feature card, in page order."""
        await self.body.wait_for_element(HomeSelectors.FEATURES_SECTION)
        cards = await self.body.locate(HomeSelectors.FEATURE_CARD).all()

        features = []
        for card in cards:
            title = await card.locator(HomeSelectors.FEATURE_TITLE.value).text_content()
            description = await card.locator(HomeSelectors.FEATURE_DESCRIPTION.value).text_content()
            features.append({
                "title": _strip_or_none(title),
                "description": _strip_or_none(description),
            })
        return features

    async def is_features_visible(self) -> bool:
        return await self.body.is_element_visible(HomeSelectors.FEATURES_SECTION)

    # =========================================================================
    # Calls to Action
    # =========================================================================

    async def _click_cta(self, key: HomeSelectors) -> None:
        await self.body.scroll_to(key)
        await self.body.wait_for_element(key)
        await self.body.click(key)

    @allure.step("Click primary call to action")
    async def click_primary_cta(self) -> None:
        await self._click_cta(HomeSelectors.PRIMARY_CTA_BUTTON)

    @allure.step("Click secondary call to action")
    async def click_secondary_cta(self) -> None:
        await self._click_cta(HomeSelectors.SECONDARY_CTA_BUTTON)

    async def get_welcome_message(self) -> Optional[str]:
        return await self.body.get_optional_text(HomeSelectors.WELCOME_MESSAGE)

    # =========================================================================
    # Sections
    # =========================================================================

    async def verify_main_sections(self) -> Dict[str, bool]:
        return await self.body.visibility_map(
            {section.value: key for section, key in SECTION_SELECTORS.items()}
        )

    async def scroll_to_section(self, section: Union[HomeSection, str]) -> None:
        """
        Scroll a main section into view.

        Raises:
            ValueError: If `section` is not a HomeSection name
        """
        try:
            key = SECTION_SELECTORS[HomeSection(section)]
        except ValueError:
            raise ValueError(f"Unknown section: {section}") from None

        await self.body.scroll_to(key)
        await self.base.wait(SCROLL_SETTLE_MS)

    async def get_page_metadata(self) -> Dict[str, Optional[str]]:
        """Document title, current URL and meta description (None if absent)."""
        description = None
        if await self.body.count(HomeSelectors.META_DESCRIPTION):
            description = await self.body.get_attribute(HomeSelectors.META_DESCRIPTION, "content")

        return {
            "title": await self.base.get_page_title(),
            "url": self.base.current_url,
            "description": description,
        }


__all__ = [
    "HomePage",
    "HomeSelectors",
    "HomeSection",
]
