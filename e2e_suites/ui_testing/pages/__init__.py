"""Page objects for the site under test."""

from .contact_page import ContactFormData, ContactPage, ContactSelectors
from .home_page import HomePage, HomeSection, HomeSelectors
from .login_page import LoginPage, LoginSelectors

__all__ = [
    "ContactFormData",
    "ContactPage",
    "ContactSelectors",
    "HomePage",
    "HomeSection",
    "HomeSelectors",
    "LoginPage",
    "LoginSelectors",
]
