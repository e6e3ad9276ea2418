"""
================================================================================
Footer Component
================================================================================

Site footer: company and contact info, quick links, social links,
newsletter signup, copyright and locale selectors.

================================================================================
"""

from __future__ import annotations

from enum import unique
from typing import Dict, List, Optional

import allure
from loguru import logger
from playwright.async_api import Page

from e2e_suites.ui_testing.framework.outcome import ActionOutcome, race_signals
from e2e_suites.ui_testing.framework.region import Region
from e2e_suites.ui_testing.framework.selectors import SelectorTable, by_test_id
from e2e_tools.common.settings import Timeouts


SCROLL_ANIMATION_MS = 500
BACK_TO_TOP_ANIMATION_MS = 1000


@unique
class FooterSelectors(SelectorTable):
    # Sections
    FOOTER = by_test_id("footer")
    FOOTER_CONTENT = by_test_id("footer-content")
    FOOTER_TOP = by_test_id("footer-top")
    FOOTER_BOTTOM = by_test_id("footer-bottom")

    # Company
    COMPANY_SECTION = by_test_id("company-section")
    COMPANY_NAME = by_test_id("company-name")
    COMPANY_DESCRIPTION = by_test_id("company-description")
    COMPANY_LOGO = by_test_id("company-logo")

    # Contact
    CONTACT_SECTION = by_test_id("contact-section")
    CONTACT_TITLE = by_test_id("contact-title")
    ADDRESS_INFO = by_test_id("address-info")
    PHONE_INFO = by_test_id("phone-info")
    EMAIL_INFO = by_test_id("email-info")

    # Quick links
    QUICK_LINKS_SECTION = by_test_id("quick-links-section")
    QUICK_LINKS_TITLE = by_test_id("quick-links-title")
    QUICK_LINKS_LIST = by_test_id("quick-links-list")
    HOME_LINK = by_test_id("footer-home-link")
    ABOUT_LINK = by_test_id("footer-about-link")
    SERVICES_LINK = by_test_id("footer-services-link")
    CONTACT_LINK = by_test_id("footer-contact-link")
    PRIVACY_POLICY_LINK = by_test_id("privacy-policy-link")
    TERMS_OF_SERVICE_LINK = by_test_id("terms-of-service-link")

    # Social
    SOCIAL_SECTION = by_test_id("social-section")
    SOCIAL_TITLE = by_test_id("social-title")
    SOCIAL_LINKS = by_test_id("social-links")
    FACEBOOK_LINK = by_test_id("facebook-link")
    TWITTER_LINK = by_test_id("twitter-link")
    LINKEDIN_LINK = by_test_id("linkedin-link")
    INSTAGRAM_LINK = by_test_id("instagram-link")
    YOUTUBE_LINK = by_test_id("youtube-link")

    # Newsletter
    NEWSLETTER_SECTION = by_test_id("newsletter-section")
    NEWSLETTER_TITLE = by_test_id("newsletter-title")
    NEWSLETTER_DESCRIPTION = by_test_id("newsletter-description")
    NEWSLETTER_INPUT = by_test_id("newsletter-input")
    NEWSLETTER_BUTTON = by_test_id("newsletter-button")
    NEWSLETTER_SUCCESS = by_test_id("newsletter-success")
    NEWSLETTER_ERROR = by_test_id("newsletter-error")

    # Legal
    COPYRIGHT_SECTION = by_test_id("copyright-section")
    COPYRIGHT_TEXT = by_test_id("copyright-text")
    LEGAL_LINKS = by_test_id("legal-links")

    # Other
    BACK_TO_TOP_BUTTON = by_test_id("back-to-top")
    LANGUAGE_SELECTOR = by_test_id("footer-language-selector")
    CURRENCY_SELECTOR = by_test_id("currency-selector")


SOCIAL_LINKS: Dict[str, FooterSelectors] = {
    "facebook": FooterSelectors.FACEBOOK_LINK,
    "twitter": FooterSelectors.TWITTER_LINK,
    "linkedin": FooterSelectors.LINKEDIN_LINK,
    "instagram": FooterSelectors.INSTAGRAM_LINK,
    "youtube": FooterSelectors.YOUTUBE_LINK,
}

QUICK_LINKS = (
    FooterSelectors.HOME_LINK,
    FooterSelectors.ABOUT_LINK,
    FooterSelectors.SERVICES_LINK,
    FooterSelectors.CONTACT_LINK,
    FooterSelectors.PRIVACY_POLICY_LINK,
    FooterSelectors.TERMS_OF_SERVICE_LINK,
)

FOOTER_SECTIONS: Dict[str, FooterSelectors] = {
    "company": FooterSelectors.COMPANY_SECTION,
    "contact": FooterSelectors.CONTACT_SECTION,
    "quick_links": FooterSelectors.QUICK_LINKS_SECTION,
    "social": FooterSelectors.SOCIAL_SECTION,
    "newsletter": FooterSelectors.NEWSLETTER_SECTION,
    "copyright": FooterSelectors.COPYRIGHT_SECTION,
}

STICKY_POSITIONS = ("fixed", "sticky")


class FooterComponent:
    """
    Footer component.

    Footer links are followed only when present; navigation helpers scroll the
    footer into view first.
    """

    def __init__(self, page: Page, timeouts: Timeouts = Timeouts()):
        self.page = page
        self.timeouts = timeouts
        self.region = Region(
            page, FooterSelectors, root=FooterSelectors.FOOTER.value, timeouts=timeouts
        )

    async def is_footer_visible(self) -> bool:
        return await self.region.is_visible()

    async def scroll_to_footer(self) -> None:
        await self.region.scroll_into_view()
        await self.page.wait_for_timeout(SCROLL_ANIMATION_MS)

    async def _follow_link(self, key: FooterSelectors) -> bool:
        await self.region.scroll_into_view()
        if await self.region.is_element_visible(key):
            await self.region.click(key)
            return True
        logger.debug(f"Footer link not present: {key.name}")
        return False

    # =========================================================================
    # Company / Contact
    # =========================================================================

    async def get_company_name(self) -> Optional[str]:
        return await self.region.get_optional_text(FooterSelectors.COMPANY_NAME)

    async def get_company_description(self) -> Optional[str]:
        return await self.region.get_optional_text(FooterSelectors.COMPANY_DESCRIPTION)

    async def get_contact_info(self) -> Dict[str, str]:
        """Address / phone / email, only for entries that are shown."""
        entries = {
            "address": FooterSelectors.ADDRESS_INFO,
            "phone": FooterSelectors.PHONE_INFO,
            "email": FooterSelectors.EMAIL_INFO,
        }
        info = {}
        for name, key in entries.items():
            text = await self.region.get_optional_text(key)
            if text is not None:
                info[name] = text
        return info

    # =========================================================================
    # Links
    # =========================================================================

    @allure.step("Footer: navigate to Home")
    async def navigate_to_home(self) -> bool:
        return await self._follow_link(FooterSelectors.HOME_LINK)

    @allure.step("Footer: navigate to About")
    async def navigate_to_about(self) -> bool:
        return await self._follow_link(FooterSelectors.ABOUT_LINK)

    @allure.step("Footer: navigate to Services")
    async def navigate_to_services(self) -> bool:
        return await self._follow_link(FooterSelectors.SERVICES_LINK)

    @allure.step("Footer: navigate to Contact")
    async def navigate_to_contact(self) -> bool:
        return await self._follow_link(FooterSelectors.CONTACT_LINK)

    @allure.step("Footer: open Privacy Policy")
    async def click_privacy_policy(self) -> bool:
        return await self._follow_link(FooterSelectors.PRIVACY_POLICY_LINK)

    @allure.step("Footer: open Terms of Service")
    async def click_terms_of_service(self) -> bool:
        return await self._follow_link(FooterSelectors.TERMS_OF_SERVICE_LINK)

    async def get_quick_links(self) -> List[str]:
        links = []
        for key in QUICK_LINKS:
            text = await self.region.get_optional_text(key)
            if text and text.strip():
                links.append(text.strip())
        return links

    @allure.step("Footer: open social link '{platform}'")
    async def click_social_link(self, platform: str) -> bool:
        """
        Follow a social link.

        Raises:
            ValueError: For a platform with no known selector
        """
        key = SOCIAL_LINKS.get(platform.lower())
        if key is None:
            raise ValueError(
                f"Unknown social platform '{platform}', expected one of {sorted(SOCIAL_LINKS)}"
            )
        return await self._follow_link(key)

    async def get_available_social_links(self) -> List[str]:
        return [
            platform
            for platform, key in SOCIAL_LINKS.items()
            if await self.region.is_element_visible(key)
        ]

    # =========================================================================
    # Newsletter
    # =========================================================================

    @allure.step("Footer: subscribe to newsletter with {email}")
    async def subscribe_to_newsletter(
        self,
        email: str,
        timeout: Optional[int] = None,
    ) -> ActionOutcome:
        """
        Submit the newsletter form and wait for its success or error message.

        Returns:
            SUCCESS / FAILURE carrying the shown message, or UNKNOWN when the
            form is missing or no message appears within `timeout` ms
            (default: `timeouts.quick_outcome`)
        """
        if timeout is None:
            timeout = self.timeouts.quick_outcome
        await self.region.scroll_into_view()

        if not await self.region.is_element_visible(FooterSelectors.NEWSLETTER_INPUT):
            return ActionOutcome.unknown("Newsletter form not present")

        await self.region.fill(FooterSelectors.NEWSLETTER_INPUT, email)
        if await self.region.is_element_visible(FooterSelectors.NEWSLETTER_BUTTON):
            await self.region.click(FooterSelectors.NEWSLETTER_BUTTON)
        else:
            await self.region.press(FooterSelectors.NEWSLETTER_INPUT, "Enter")

        winner = await race_signals(
            {
                "success": self.region.wait_for_element(
                    FooterSelectors.NEWSLETTER_SUCCESS, timeout=timeout
                ),
                "error": self.region.wait_for_element(
                    FooterSelectors.NEWSLETTER_ERROR, timeout=timeout
                ),
            },
            timeout,
        )

        if winner == "success":
            message = await self.region.get_text(FooterSelectors.NEWSLETTER_SUCCESS)
            return ActionOutcome.success(signal=winner, message=message)
        if winner == "error":
            message = await self.region.get_text(FooterSelectors.NEWSLETTER_ERROR)
            logger.info(f"Newsletter subscription rejected: {message}")
            return ActionOutcome.failure(signal=winner, message=message)

        logger.warning(f"No newsletter result within {timeout}ms")
        return ActionOutcome.unknown(f"No newsletter result within {timeout}ms")

    async def get_newsletter_result(self) -> Dict[str, Optional[str]]:
        return {
            "success": await self.region.get_optional_text(FooterSelectors.NEWSLETTER_SUCCESS),
            "error": await self.region.get_optional_text(FooterSelectors.NEWSLETTER_ERROR),
        }

    # =========================================================================
    # Legal / Misc
    # =========================================================================

    async def get_copyright_text(self) -> Optional[str]:
        return await self.region.get_optional_text(FooterSelectors.COPYRIGHT_TEXT)

    async def click_back_to_top(self) -> None:
        if await self.region.is_element_visible(FooterSelectors.BACK_TO_TOP_BUTTON):
            await self.region.click(FooterSelectors.BACK_TO_TOP_BUTTON)
            await self.page.wait_for_timeout(BACK_TO_TOP_ANIMATION_MS)

    async def verify_footer_sections(self) -> Dict[str, bool]:
        return await self.region.visibility_map(FOOTER_SECTIONS)

    async def change_language(self, language: str) -> None:
        if await self.region.is_element_visible(FooterSelectors.LANGUAGE_SELECTOR):
            await self.region.select_option(FooterSelectors.LANGUAGE_SELECTOR, language)

    async def change_currency(self, currency: str) -> None:
        if await self.region.is_element_visible(FooterSelectors.CURRENCY_SELECTOR):
            await self.region.select_option(FooterSelectors.CURRENCY_SELECTOR, currency)

    async def get_footer_height(self) -> float:
        if not await self.region.is_visible():
            return 0
        box = await self.region.root_bounding_box()
        return box["height"] if box else 0

    async def is_footer_sticky(self) -> bool:
        position = await self.region.evaluate_root("el => window.getComputedStyle(el).position")
        return position in STICKY_POSITIONS


__all__ = [
    "FooterComponent",
    "FooterSelectors",
]
