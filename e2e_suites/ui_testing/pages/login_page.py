"""
================================================================================
Login Page Object (Async / Playwright)
================================================================================

Sign-in page (`/login`).

Selectors carry comma-separated fallbacks so the same page object works
against the common admin templates (plain form, bootstrap, data-testid).

`login()` reports what happened after submit as an ActionOutcome:
    - SUCCESS: success message shown or redirect to /dashboard or /home
    - FAILURE: error banner shown (message = banner text)
    - UNKNOWN: nothing observable within the timeout

================================================================================
"""

from __future__ import annotations

from enum import unique
from pathlib import Path
from typing import Optional

import allure
from loguru import logger
from playwright.async_api import Page
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from e2e_suites.ui_testing.components import FooterComponent, HeaderComponent
from e2e_suites.ui_testing.framework.exceptions import (
    ElementNotFoundError,
    LoginResultTimeoutError,
)
from e2e_suites.ui_testing.framework.outcome import ActionOutcome, race_signals
from e2e_suites.ui_testing.framework.page_base import PageBase
from e2e_suites.ui_testing.framework.region import Region
from e2e_suites.ui_testing.framework.selectors import SelectorTable
from e2e_tools.common.settings import Timeouts


# Post-login redirect targets
SUCCESS_URL_PATTERNS = {
    "dashboard": "**/dashboard",
    "home": "**/home",
}


@unique
class LoginSelectors(SelectorTable):
    # Page header
    PAGE_TITLE = 'h1, .login-title, [data-testid="login-title"]'
    PAGE_SUBTITLE = '.login-subtitle, .subtitle, p:has-text("Enter your credential")'

    # Form
    LOGIN_FORM = 'form, .login-form, .auth-form, [data-testid="login-form"]'
    EMAIL_INPUT = (
        'input[type="email"], input[name="email"], input[placeholder*="Email"], '
        '#email, input:first-of-type'
    )
    PASSWORD_INPUT = (
        'input[type="password"], input[name="password"], '
        'input[placeholder*="Password"], #password'
    )
    LOGIN_BUTTON = 'button[type="submit"], .login-button, button:has-text("Sign In"), .btn-primary'
    REMEMBER_ME_CHECKBOX = (
        'input[type="checkbox"][name="remember"], input[name="rememberMe"], '
        '#remember-me, [data-testid="remember-me"]'
    )

    # Errors
    ERROR_MESSAGE = '.error-message, .alert-danger, .text-danger, [role="alert"]'
    FIELD_ERROR = '.field-error, .invalid-feedback, .error-text'
    EMAIL_ERROR = '.email-error, input[type="email"] + .error'
    PASSWORD_ERROR = '.password-error, input[type="password"] + .error'

    # Links
    FORGOT_PASSWORD_LINK = 'a:has-text("Forgot Password"), .forgot-password, a[href*="forgot"]'
    SIGN_UP_LINK = 'a:has-text("Sign Up"), .signup-link, a[href*="signup"], a[href*="register"]'
    OR_DIVIDER = '.divider, .or-divider, :has-text("or")'

    # Social login
    GOOGLE_LOGIN_BUTTON = (
        'button:has-text("Google"), .google-login, [data-testid="google-login"]'
    )
    FACEBOOK_LOGIN_BUTTON = (
        'button:has-text("Facebook"), .facebook-login, [data-testid="facebook-login"]'
    )

    # Status
    SUCCESS_MESSAGE = '.success-message, .alert-success, .text-success'
    WELCOME_MESSAGE = '.welcome-message, .greeting'
    LOADING_SPINNER = '.spinner, .loading, .loader, [data-loading="true"]'

    # Structure
    LOGIN_CONTAINER = '.login-container, .auth-container, .signin-container'
    FORM_CONTAINER = '.form-container, .login-form-container'


class LoginPage:
    """Login page object (async)."""

    URL_PATH = "/login"

    def __init__(
        self,
        page: Page,
        base_url: str,
        screenshot_dir: Optional[Path] = None,
        timeouts: Timeouts = Timeouts(),
    ):
        self.base = PageBase(page, base_url, screenshot_dir, timeouts)
        self.form = Region(page, LoginSelectors, timeouts=timeouts)
        self.header = HeaderComponent(page, timeouts)
        self.footer = FooterComponent(page, timeouts)

    @property
    def page(self) -> Page:
        return self.base.page

    @property
    def timeouts(self) -> Timeouts:
        return self.base.timeouts

    @allure.step("Open login page")
    async def navigate_to_login(self) -> "LoginPage":
        await self.base.navigate_to(self.URL_PATH)
        return self

    async def is_login_page_loaded(self) -> bool:
        """Login form present and login button visible."""
        try:
            await self.form.wait_for_element(LoginSelectors.LOGIN_FORM)
        except PlaywrightTimeoutError as e:
            logger.error(f"Login page failed to load: {e}")
            return False
        return await self.form.is_element_visible(LoginSelectors.LOGIN_BUTTON)

    # =========================================================================
    # Form Input
    # =========================================================================

    async def _replace_value(self, key: LoginSelectors, value: str) -> None:
        await self.form.wait_for_element(key)
        await self.form.clear(key)
        await self.form.fill(key, value)

    @allure.step("Fill email: {email}")
    async def fill_email(self, email: str) -> None:
        await self._replace_value(LoginSelectors.EMAIL_INPUT, email)

    async def fill_username(self, username: str) -> None:
        """The application signs in by email; username goes to the email field."""
        await self.fill_email(username)

    @allure.step("Fill password")
    async def fill_password(self, password: str) -> None:
        await self._replace_value(LoginSelectors.PASSWORD_INPUT, password)

    @allure.step("Click Sign In")
    async def click_login_button(self) -> None:
        await self.form.wait_for_element(LoginSelectors.LOGIN_BUTTON)
        await self.form.click(LoginSelectors.LOGIN_BUTTON)

    async def check_remember_me(self, check: bool = True) -> None:
        """Set the remember-me checkbox when the page offers one."""
        if await self.form.is_element_visible(LoginSelectors.REMEMBER_ME_CHECKBOX):
            await self.form.set_checked(LoginSelectors.REMEMBER_ME_CHECKBOX, check)

    # =========================================================================
    # Login Flow
    # =========================================================================

    def _result_signals(self, timeout: int) -> dict:
        signals = {
            "success_message": self.form.wait_for_element(
                LoginSelectors.SUCCESS_MESSAGE, timeout=timeout
            ),
            "error_message": self.form.wait_for_element(
                LoginSelectors.ERROR_MESSAGE, timeout=timeout
            ),
        }
        for name, pattern in SUCCESS_URL_PATTERNS.items():
            signals[f"{name}_redirect"] = self.page.wait_for_url(pattern, timeout=timeout)
        return signals

    async def _race_login_result(self, timeout: int) -> ActionOutcome:
        winner = await race_signals(self._result_signals(timeout), timeout)

        if winner is None:
            return ActionOutcome.unknown(f"No login result within {timeout}ms")
        if winner == "error_message":
            message = await self.form.get_text(LoginSelectors.ERROR_MESSAGE)
            return ActionOutcome.failure(signal=winner, message=message.strip())
        if winner == "success_message":
            message = await self.form.get_text(LoginSelectors.SUCCESS_MESSAGE)
            return ActionOutcome.success(signal=winner, message=message.strip())
        return ActionOutcome.success(signal=winner)

    @allure.step("Login (email={email})")
    async def login(
        self,
        email: str,
        password: str,
        remember_me: bool = False,
        timeout: Optional[int] = None,
    ) -> ActionOutcome:
        """
        Fill the form, submit it and race the post-login signals.

        Returns:
            ActionOutcome; UNKNOWN is returned (not raised) when no signal
            appears within `timeout` ms (default: `timeouts.quick_outcome`)
        """
        if timeout is None:
            timeout = self.timeouts.quick_outcome
        await self.fill_username(email)
        await self.fill_password(password)
        if remember_me:
            await self.check_remember_me()
        await self.click_login_button()

        outcome = await self._race_login_result(timeout)
        logger.info(f"Login outcome for {email}: {outcome.status.value} ({outcome.signal})")
        return outcome

    @allure.step("Wait for login result")
    async def wait_for_login_result(self, timeout: Optional[int] = None) -> ActionOutcome:
        """
        Strict variant of the post-login race (default: `timeouts.action_outcome`).

        Raises:
            LoginResultTimeoutError: If no signal appears within `timeout` ms
        """
        if timeout is None:
            timeout = self.timeouts.action_outcome
        outcome = await self._race_login_result(timeout)
        if outcome.is_unknown:
            raise LoginResultTimeoutError(timeout)
        return outcome

    async def is_login_successful(self) -> bool:
        """Redirected, success message shown, or login form gone."""
        current_url = self.base.current_url
        if "/dashboard" in current_url or "/home" in current_url:
            return True
        if await self.form.is_element_visible(LoginSelectors.SUCCESS_MESSAGE):
            return True
        return not await self.form.is_element_visible(LoginSelectors.LOGIN_FORM)

    # =========================================================================
    # Links
    # =========================================================================

    @allure.step("Click Forgot Password")
    async def click_forgot_password(self) -> None:
        await self.form.wait_for_element(LoginSelectors.FORGOT_PASSWORD_LINK)
        await self.form.click(LoginSelectors.FORGOT_PASSWORD_LINK)

    @allure.step("Click Sign Up")
    async def click_sign_up_link(self) -> None:
        if await self.form.is_element_visible(LoginSelectors.SIGN_UP_LINK):
            await self.form.click(LoginSelectors.SIGN_UP_LINK)

    async def _click_social_login(self, key: LoginSelectors, provider: str) -> None:
        if not await self.form.is_element_visible(key):
            raise ElementNotFoundError(f"{provider} login button not available")
        await self.form.click(key)

    @allure.step("Login with Google")
    async def login_with_google(self) -> None:
        await self._click_social_login(LoginSelectors.GOOGLE_LOGIN_BUTTON, "Google")

    @allure.step("Login with Facebook")
    async def login_with_facebook(self) -> None:
        await self._click_social_login(LoginSelectors.FACEBOOK_LOGIN_BUTTON, "Facebook")

    # =========================================================================
    # Messages and State
    # =========================================================================

    async def get_error_message(self) -> Optional[str]:
        return await self.form.get_optional_text(LoginSelectors.ERROR_MESSAGE)

    async def get_field_error(self, field: str) -> Optional[str]:
        """Inline error for `email`/`username`, otherwise for the password."""
        if field in ("email", "username"):
            key = LoginSelectors.EMAIL_ERROR
        else:
            key = LoginSelectors.PASSWORD_ERROR
        return await self.form.get_optional_text(key)

    async def get_success_message(self) -> Optional[str]:
        return await self.form.get_optional_text(LoginSelectors.SUCCESS_MESSAGE)

    async def is_loading(self) -> bool:
        return await self.form.is_element_visible(LoginSelectors.LOADING_SPINNER)

    @allure.step("Clear login form")
    async def clear_form(self) -> None:
        await self.form.clear(LoginSelectors.EMAIL_INPUT)
        await self.form.clear(LoginSelectors.PASSWORD_INPUT)
        await self.check_remember_me(False)

    async def get_login_title(self) -> str:
        """Heading text, or the document title when there is no heading."""
        title = await self.form.get_optional_text(LoginSelectors.PAGE_TITLE)
        if title is not None:
            return title
        return await self.base.get_page_title()


__all__ = [
    "LoginPage",
    "LoginSelectors",
]
