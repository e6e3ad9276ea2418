"""
================================================================================
Contact Page Object (Async / Playwright)
================================================================================

Contact form page (`/contact`).

`fill_contact_form()` only touches fields that carry a value: a field left
as None is skipped, never cleared or defaulted. Empty strings are typed as
given (used by validation scenarios).

================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import unique
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import allure
from loguru import logger
from playwright.async_api import Page
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from e2e_suites.ui_testing.components import FooterComponent, HeaderComponent
from e2e_suites.ui_testing.framework.outcome import ActionOutcome, race_signals
from e2e_suites.ui_testing.framework.page_base import PageBase
from e2e_suites.ui_testing.framework.region import Region
from e2e_suites.ui_testing.framework.selectors import SelectorTable, by_test_id
from e2e_tools.common.settings import Timeouts


VALIDATION_SETTLE_MS = 1000


@unique
class ContactSelectors(SelectorTable):
    # Form
    CONTACT_FORM = by_test_id("contact-form")
    FIRST_NAME_INPUT = by_test_id("first-name-input")
    LAST_NAME_INPUT = by_test_id("last-name-input")
    EMAIL_INPUT = by_test_id("email-input")
    PHONE_INPUT = by_test_id("phone-input")
    SUBJECT_INPUT = by_test_id("subject-input")
    MESSAGE_TEXTAREA = by_test_id("message-textarea")
    SUBMIT_BUTTON = by_test_id("submit-button")
    INQUIRY_TYPE_SELECT = by_test_id("inquiry-type-select")
    ATTACHMENT_INPUT = by_test_id("attachment-input")
    PRIVACY_CHECKBOX = by_test_id("privacy-checkbox")
    NEWSLETTER_CHECKBOX = by_test_id("newsletter-checkbox")
    RESET_BUTTON = by_test_id("reset-button")
    CLEAR_BUTTON = by_test_id("clear-button")

    # Messages
    ERROR_MESSAGE = by_test_id("error-message")
    SUCCESS_MESSAGE = by_test_id("success-message")
    FIELD_ERROR = by_test_id("field-error")
    FIRST_NAME_ERROR = by_test_id("first-name-error")
    LAST_NAME_ERROR = by_test_id("last-name-error")
    EMAIL_ERROR = by_test_id("email-error")
    PHONE_ERROR = by_test_id("phone-error")
    SUBJECT_ERROR = by_test_id("subject-error")
    MESSAGE_ERROR = by_test_id("message-error")

    # Page content
    CONTACT_TITLE = by_test_id("contact-title")
    CONTACT_DESCRIPTION = by_test_id("contact-description")
    CONTACT_INFO = by_test_id("contact-info")
    ADDRESS_SECTION = by_test_id("address-section")
    PHONE_SECTION = by_test_id("phone-section")
    EMAIL_SECTION = by_test_id("email-section")
    HOURS_SECTION = by_test_id("hours-section")

    # Status
    LOADING_SPINNER = by_test_id("loading-spinner")
    FORM_STATUS = by_test_id("form-status")


FIELD_ERRORS: Dict[str, ContactSelectors] = {
    "first_name": ContactSelectors.FIRST_NAME_ERROR,
    "last_name": ContactSelectors.LAST_NAME_ERROR,
    "email": ContactSelectors.EMAIL_ERROR,
    "phone": ContactSelectors.PHONE_ERROR,
    "subject": ContactSelectors.SUBJECT_ERROR,
    "message": ContactSelectors.MESSAGE_ERROR,
}

CONTACT_INFO_SECTIONS: Dict[str, ContactSelectors] = {
    "address": ContactSelectors.ADDRESS_SECTION,
    "phone": ContactSelectors.PHONE_SECTION,
    "email": ContactSelectors.EMAIL_SECTION,
    "hours": ContactSelectors.HOURS_SECTION,
}


@dataclass
class ContactFormData:
    """Contact form values; None means "leave the field alone"."""
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    subject: Optional[str] = None
    message: Optional[str] = None
    inquiry_type: Optional[str] = None
    attachment: Optional[Union[str, Path]] = None
    accept_privacy: Optional[bool] = None
    subscribe_newsletter: Optional[bool] = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "ContactFormData":
        """
        Build from a fixture mapping.

        Raises:
            ValueError: On keys that are not form fields
        """
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown contact form fields: {sorted(unknown)}")
        return cls(**dict(data))


class ContactPage:
    """Contact page object (async)."""

    URL_PATH = "/contact"

    def __init__(
        self,
        page: Page,
        base_url: str,
        screenshot_dir: Optional[Path] = None,
        timeouts: Timeouts = Timeouts(),
    ):
        self.base = PageBase(page, base_url, screenshot_dir, timeouts)
        self.form = Region(page, ContactSelectors, timeouts=timeouts)
        self.header = HeaderComponent(page, timeouts)
        self.footer = FooterComponent(page, timeouts)

    @property
    def page(self) -> Page:
        return self.base.page

    @property
    def timeouts(self) -> Timeouts:
        return self.base.timeouts

    @allure.step("Open contact page")
    async def navigate_to_contact(self) -> "ContactPage":
        await self.base.navigate_to(self.URL_PATH)
        return self

    async def is_contact_page_loaded(self) -> bool:
        try:
            await self.form.wait_for_element(ContactSelectors.CONTACT_FORM)
        except PlaywrightTimeoutError as e:
            logger.error(f"Contact page failed to load: {e}")
            return False
        return await self.form.is_element_visible(ContactSelectors.SUBMIT_BUTTON)

    # =========================================================================
    # Field Input
    # =========================================================================

    async def _replace_value(self, key: ContactSelectors, value: str) -> None:
        await self.form.wait_for_element(key)
        await self.form.clear(key)
        await self.form.fill(key, value)

    async def fill_first_name(self, first_name: str) -> None:
        await self._replace_value(ContactSelectors.FIRST_NAME_INPUT, first_name)

    async def fill_last_name(self, last_name: str) -> None:
        await self._replace_value(ContactSelectors.LAST_NAME_INPUT, last_name)

    async def fill_email(self, email: str) -> None:
        await self._replace_value(ContactSelectors.EMAIL_INPUT, email)

    async def fill_phone(self, phone: str) -> None:
        """Phone is optional on the form; skipped when the input is absent."""
        if await self.form.is_element_visible(ContactSelectors.PHONE_INPUT):
            await self.form.clear(ContactSelectors.PHONE_INPUT)
            await self.form.fill(ContactSelectors.PHONE_INPUT, phone)

    async def fill_subject(self, subject: str) -> None:
        await self._replace_value(ContactSelectors.SUBJECT_INPUT, subject)

    async def fill_message(self, message: str) -> None:
        await self._replace_value(ContactSelectors.MESSAGE_TEXTAREA, message)

    async def select_inquiry_type(self, inquiry_type: str) -> None:
        if await self.form.is_element_visible(ContactSelectors.INQUIRY_TYPE_SELECT):
            await self.form.select_option(ContactSelectors.INQUIRY_TYPE_SELECT, inquiry_type)

    async def check_privacy_policy(self, check: bool = True) -> None:
        if await self.form.is_element_visible(ContactSelectors.PRIVACY_CHECKBOX):
            await self.form.set_checked(ContactSelectors.PRIVACY_CHECKBOX, check)

    async def check_newsletter(self, check: bool = True) -> None:
        if await self.form.is_element_visible(ContactSelectors.NEWSLETTER_CHECKBOX):
            await self.form.set_checked(ContactSelectors.NEWSLETTER_CHECKBOX, check)

    async def upload_attachment(self, file_path: Union[str, Path]) -> None:
        if await self.form.is_element_visible(ContactSelectors.ATTACHMENT_INPUT):
            await self.form.set_input_files(ContactSelectors.ATTACHMENT_INPUT, file_path)

    @allure.step("Click Submit")
    async def click_submit(self) -> None:
        await self.form.wait_for_element(ContactSelectors.SUBMIT_BUTTON)
        await self.form.click(ContactSelectors.SUBMIT_BUTTON)

    @allure.step("Fill contact form")
    async def fill_contact_form(self, data: ContactFormData) -> None:
        if data.first_name is not None:
            await self.fill_first_name(data.first_name)
        if data.last_name is not None:
            await self.fill_last_name(data.last_name)
        if data.email is not None:
            await self.fill_email(data.email)
        if data.phone is not None:
            await self.fill_phone(data.phone)
        if data.subject is not None:
            await self.fill_subject(data.subject)
        if data.message is not None:
            await self.fill_message(data.message)

        if data.inquiry_type is not None:
            await self.select_inquiry_type(data.inquiry_type)
        if data.attachment is not None:
            await self.upload_attachment(data.attachment)

        if data.accept_privacy is not None:
            await self.check_privacy_policy(data.accept_privacy)
        if data.subscribe_newsletter is not None:
            await self.check_newsletter(data.subscribe_newsletter)

    @allure.step("Submit contact form")
    async def submit_contact_form(
        self,
        data: ContactFormData,
        timeout: Optional[int] = None,
    ) -> ActionOutcome:
        """
        Fill, submit and race the success / error messages.

        Returns:
            SUCCESS or FAILURE with the shown message, UNKNOWN after `timeout` ms
            (default: `timeouts.action_outcome`)
        """
        if timeout is None:
            timeout = self.timeouts.action_outcome
        await self.fill_contact_form(data)
        await self.click_submit()

        winner = await race_signals(
            {
                "success": self.form.wait_for_element(
                    ContactSelectors.SUCCESS_MESSAGE, timeout=timeout
                ),
                "error": self.form.wait_for_element(
                    ContactSelectors.ERROR_MESSAGE, timeout=timeout
                ),
            },
            timeout,
        )

        if winner == "success":
            message = await self.form.get_text(ContactSelectors.SUCCESS_MESSAGE)
            return ActionOutcome.success(signal=winner, message=message.strip())
        if winner == "error":
            message = await self.form.get_text(ContactSelectors.ERROR_MESSAGE)
            logger.info(f"Contact form rejected: {message.strip()}")
            return ActionOutcome.failure(signal=winner, message=message.strip())

        logger.warning(f"No contact form result within {timeout}ms")
        return ActionOutcome.unknown(f"No submission result within {timeout}ms")

    # =========================================================================
    # Messages and State
    # =========================================================================

    async def get_success_message(self) -> Optional[str]:
        return await self.form.get_optional_text(ContactSelectors.SUCCESS_MESSAGE)

    async def get_error_message(self) -> Optional[str]:
        return await self.form.get_optional_text(ContactSelectors.ERROR_MESSAGE)

    async def get_field_error(self, field: str) -> Optional[str]:
        """Inline error for a form field (first_name, email, ...); None if absent."""
        key = FIELD_ERRORS.get(field)
        if key is None:
            logger.debug(f"No inline error selector for field: {field}")
            return None
        return await self.form.get_optional_text(key)

    async def is_loading(self) -> bool:
        return await self.form.is_element_visible(ContactSelectors.LOADING_SPINNER)

    async def is_submission_successful(self) -> bool:
        return await self.form.is_element_visible(ContactSelectors.SUCCESS_MESSAGE)

    @allure.step("Clear contact form")
    async def clear_form(self) -> None:
        await self.form.clear(ContactSelectors.FIRST_NAME_INPUT)
        await self.form.clear(ContactSelectors.LAST_NAME_INPUT)
        await self.form.clear(ContactSelectors.EMAIL_INPUT)
        if await self.form.is_element_visible(ContactSelectors.PHONE_INPUT):
            await self.form.clear(ContactSelectors.PHONE_INPUT)
        await self.form.clear(ContactSelectors.SUBJECT_INPUT)
        await self.form.clear(ContactSelectors.MESSAGE_TEXTAREA)

        await self.check_privacy_policy(False)
        await self.check_newsletter(False)

    async def click_reset(self) -> None:
        if await self.form.is_element_visible(ContactSelectors.RESET_BUTTON):
            await self.form.click(ContactSelectors.RESET_BUTTON)

    async def get_contact_info(self) -> Dict[str, str]:
        """Address / phone / email / hours blocks that are shown on the page."""
        info = {}
        for name, key in CONTACT_INFO_SECTIONS.items():
            text = await self.form.get_optional_text(key)
            if text is not None:
                info[name] = text
        return info

    @allure.step("Verify contact form validation")
    async def verify_form_validation(self) -> Dict[str, Optional[str]]:
        """Submit as-is and collect the validation messages that appear."""
        await self.click_submit()
        await self.base.wait(VALIDATION_SETTLE_MS)

        errors = {}
        for field in ("first_name", "last_name", "email", "subject", "message"):
            errors[field] = await self.get_field_error(field)
        errors["general"] = await self.get_error_message()
        return errors


__all__ = [
    "ContactPage",
    "ContactSelectors",
    "ContactFormData",
]
