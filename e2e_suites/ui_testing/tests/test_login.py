"""
================================================================================
Login Feature UI Tests (Async / Playwright)
================================================================================

Live specs for the sign-in page. They need a running application and are
skipped unless E2E_ENABLED=true.

================================================================================
"""

import allure
import pytest
from loguru import logger

from e2e_suites.ui_testing.framework import LoginResultTimeoutError
from e2e_suites.ui_testing.pages import LoginPage, LoginSelectors
from e2e_tools.common import FixtureData


@pytest.fixture
async def opened_login_page(login_page: LoginPage) -> LoginPage:
    return await login_page.navigate_to_login()


@allure.epic("UI Testing")
@allure.feature("Authentication")
@pytest.mark.e2e
@pytest.mark.auth
class TestLogin:
    """Login UI test suite (async)."""

    @allure.story("Page Layout")
    @allure.title("Login page renders the sign-in form")
    @allure.severity(allure.severity_level.CRITICAL)
    @pytest.mark.P0
    @pytest.mark.smoke
    @pytest.mark.asyncio
    async def test_login_page_displayed(self, opened_login_page: LoginPage):
        page = opened_login_page
        assert await page.is_login_page_loaded()
        assert "Sign In" in await page.base.get_page_title()

        for key in (
            LoginSelectors.EMAIL_INPUT,
            LoginSelectors.PASSWORD_INPUT,
            LoginSelectors.LOGIN_BUTTON,
            LoginSelectors.FORGOT_PASSWORD_LINK,
            LoginSelectors.SIGN_UP_LINK,
        ):
            assert await page.form.is_element_visible(key), f"{key.name} not visible"

    @allure.story("Happy Path")
    @allure.title("Login succeeds with valid credentials")
    @allure.severity(allure.severity_level.BLOCKER)
    @pytest.mark.P0
    @pytest.mark.smoke
    @pytest.mark.asyncio
    async def test_login_success(self, opened_login_page: LoginPage, fixture_data: FixtureData):
        """Verify user can login and reach a signed-in state."""
        user = fixture_data.get_user("validUser")

        with allure.step("Submit valid credentials"):
            await opened_login_page.fill_email(user.email)
            await opened_login_page.fill_password(user.password)
            await opened_login_page.click_login_button()

        with allure.step("Verify login result"):
            outcome = await opened_login_page.wait_for_login_result()
            assert outcome.is_success, outcome.message
            assert await opened_login_page.is_login_successful()

    @allure.story("Negative Path")
    @allure.title("Login fails with invalid credentials")
    @allure.severity(allure.severity_level.CRITICAL)
    @pytest.mark.P0
    @pytest.mark.asyncio
    async def test_login_invalid_credentials(
        self, opened_login_page: LoginPage, fixture_data: FixtureData
    ):
        """Verify invalid credential login displays an error."""
        user = fixture_data.get_user("invalidUser")

        outcome = await opened_login_page.login(user.email, user.password)

        assert outcome.is_failure
        error_message = await opened_login_page.get_error_message()
        assert error_message
        assert "invalid" in error_message.lower()

    @allure.story("Form Validation")
    @allure.title("Empty form shows a validation error")
    @allure.severity(allure.severity_level.NORMAL)
    @pytest.mark.P1
    @pytest.mark.regression
    @pytest.mark.asyncio
    async def test_empty_fields_validation(self, opened_login_page: LoginPage):
        await opened_login_page.click_login_button()
        await opened_login_page.base.wait(1000)

        email_error = await opened_login_page.get_field_error("email")
        password_error = await opened_login_page.get_field_error("password")
        general_error = await opened_login_page.get_error_message()

        assert email_error or password_error or general_error

    @allure.story("Form Validation")
    @allure.title("Malformed email shows a validation error")
    @allure.severity(allure.severity_level.NORMAL)
    @pytest.mark.P1
    @pytest.mark.regression
    @pytest.mark.asyncio
    async def test_invalid_email_format(
        self, opened_login_page: LoginPage, fixture_data: FixtureData
    ):
        user = fixture_data.get_user("invalidEmailFormat")

        await opened_login_page.fill_email(user.email)
        await opened_login_page.fill_password(user.password)
        await opened_login_page.click_login_button()
        await opened_login_page.base.wait(1000)

        email_error = await opened_login_page.get_field_error("email")
        general_error = await opened_login_page.get_error_message()
        assert email_error or general_error

    @allure.story("Navigation")
    @allure.title("Forgot password link opens the recovery page")
    @allure.severity(allure.severity_level.NORMAL)
    @pytest.mark.P2
    @pytest.mark.asyncio
    async def test_forgot_password_navigation(self, opened_login_page: LoginPage):
        await opened_login_page.click_forgot_password()
        await opened_login_page.base.wait_for_page_load()
        assert "forgot" in opened_login_page.base.current_url

    @allure.story("Navigation")
    @allure.title("Sign up link opens the registration page")
    @allure.severity(allure.severity_level.NORMAL)
    @pytest.mark.P2
    @pytest.mark.asyncio
    async def test_sign_up_navigation(self, opened_login_page: LoginPage):
        await opened_login_page.click_sign_up_link()
        await opened_login_page.base.wait_for_page_load()
        current_url = opened_login_page.base.current_url
        assert "signup" in current_url or "register" in current_url

    @allure.story("Form Behaviour")
    @allure.title("Clearing the form empties both fields")
    @allure.severity(allure.severity_level.MINOR)
    @pytest.mark.P2
    @pytest.mark.asyncio
    async def test_clear_form(self, opened_login_page: LoginPage, fixture_data: FixtureData):
        user = fixture_data.get_user("testUser")

        await opened_login_page.fill_email(user.email)
        await opened_login_page.fill_password(user.password)
        await opened_login_page.clear_form()

        assert await opened_login_page.form.input_value(LoginSelectors.EMAIL_INPUT) == ""
        assert await opened_login_page.form.input_value(LoginSelectors.PASSWORD_INPUT) == ""

    @allure.story("Happy Path")
    @allure.title("Test user login resolves to success or a shown error")
    @allure.severity(allure.severity_level.NORMAL)
    @pytest.mark.P1
    @pytest.mark.asyncio
    async def test_login_with_test_user(
        self, opened_login_page: LoginPage, fixture_data: FixtureData
    ):
        user = fixture_data.get_user("testUser")

        outcome = await opened_login_page.login(user.email, user.password)
        logger.info(f"Login attempt result: {outcome.status.value} ({outcome.message})")

        assert not outcome.is_unknown
        assert await opened_login_page.is_login_successful() or outcome.message

    @allure.story("Page Layout")
    @allure.title("Subtitle, divider and form container are present")
    @allure.severity(allure.severity_level.MINOR)
    @pytest.mark.P3
    @pytest.mark.asyncio
    async def test_page_elements_and_content(self, opened_login_page: LoginPage):
        subtitle = await opened_login_page.form.get_optional_text(LoginSelectors.PAGE_SUBTITLE)
        if subtitle is not None:
            assert "credential" in subtitle

        assert await opened_login_page.form.is_element_visible(LoginSelectors.OR_DIVIDER)
        assert await opened_login_page.form.is_element_visible(LoginSelectors.LOGIN_FORM)

    @allure.story("Loading State")
    @allure.title("Spinner is gone once the login result is shown")
    @allure.severity(allure.severity_level.MINOR)
    @pytest.mark.P3
    @pytest.mark.asyncio
    async def test_loading_state_clears(
        self, opened_login_page: LoginPage, fixture_data: FixtureData
    ):
        user = fixture_data.get_user("validUser")

        await opened_login_page.fill_email(user.email)
        await opened_login_page.fill_password(user.password)
        await opened_login_page.click_login_button()

        try:
            await opened_login_page.wait_for_login_result()
        except LoginResultTimeoutError as e:
            pytest.fail(str(e))

        assert not await opened_login_page.is_loading()
