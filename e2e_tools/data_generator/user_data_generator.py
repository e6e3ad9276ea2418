"""
================================================================================
User Test Data Generator
================================================================================

Random user data for sign-up / contact form scenarios that must not collide
with the static fixture records.

Features:
- Alphanumeric random strings
- Random email addresses on a given domain
- Timestamp-unique user records (UserCredentials)
- Invalid email samples for negative testing

================================================================================
"""

import random
import string
import time
from typing import List

from loguru import logger

from e2e_tools.common.fixture_data import UserCredentials


ALPHANUMERIC = string.ascii_letters + string.digits

INVALID_EMAILS = [
    "invalid-email",
    "not_an_email",
    "@no_local_part.com",
    "no_domain@",
    "spaces in@email.com",
    "double@@at.com",
]


def generate_random_string(length: int = 10) -> str:
    """Generate an alphanumeric string of the given length."""
    if length < 0:
        raise ValueError(f"length must be non-negative, got {length}")
    return "".join(random.choices(ALPHANUMERIC, k=length))


def generate_random_email(domain: str = "example.com") -> str:
    """Generate a random lowercase email address on `domain`."""
    local = generate_random_string(8).lower()
    return f"{local}@{domain}"


def generate_random_user() -> UserCredentials:
    """
    Generate a user record unique to the current millisecond.

    Returns:
        UserCredentials with scenario "randomUser"
    """
    timestamp = int(time.time() * 1000)
    first_name = f"FirstName{timestamp}"
    last_name = f"LastName{timestamp}"
    user = UserCredentials(
        scenario="randomUser",
        email=f"testuser{timestamp}@example.com",
        password=f"TestPass{timestamp}!",
        first_name=first_name,
        last_name=last_name,
        full_name=f"{first_name} {last_name}",
    )
    logger.debug(f"Generated random user: {user.email}")
    return user


def invalid_emails() -> List[str]:
    """Malformed email samples."""
    return list(INVALID_EMAILS)


__all__ = [
    "generate_random_string",
    "generate_random_email",
    "generate_random_user",
    "invalid_emails",
]
