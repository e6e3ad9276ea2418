"""Random test data generation."""

from .user_data_generator import (
    generate_random_email,
    generate_random_string,
    generate_random_user,
    invalid_emails,
)

__all__ = [
    "generate_random_email",
    "generate_random_string",
    "generate_random_user",
    "invalid_emails",
]
