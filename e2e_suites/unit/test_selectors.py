from enum import unique

import pytest

from e2e_suites.ui_testing.components import FooterSelectors, HeaderSelectors
from e2e_suites.ui_testing.framework import SelectorTable, by_test_id
from e2e_suites.ui_testing.framework.selectors import to_selector
from e2e_suites.ui_testing.pages import ContactSelectors, HomeSelectors, LoginSelectors


def test_by_test_id():
    assert by_test_id("login-button") == '[data-testid="login-button"]'


def test_selector_table_members_are_strings():
    assert str(HeaderSelectors.LOGO) == '[data-testid="logo"]'
    assert HeaderSelectors.LOGO.selector == HeaderSelectors.LOGO.value
    assert to_selector(HeaderSelectors.LOGO) == '[data-testid="logo"]'
    assert to_selector("#raw") == "#raw"


@pytest.mark.parametrize("target", ["", None, 42])
def test_to_selector_rejects_malformed(target):
    with pytest.raises(TypeError):
        to_selector(target)


def test_duplicate_selectors_are_rejected():
    with pytest.raises(ValueError):
        @unique
        class Broken(SelectorTable):
            ONE = "#same"
            TWO = "#same"


def test_unknown_key_fails_at_attribute_access():
    with pytest.raises(AttributeError):
        LoginSelectors.EMAIL_INPTU


@pytest.mark.parametrize(
    "table",
    [HeaderSelectors, FooterSelectors, HomeSelectors, LoginSelectors, ContactSelectors],
)
def test_tables_hold_non_empty_selectors(table):
    assert len(table) > 0
    assert all(member.value.strip() for member in table)
