"""
================================================================================
API Testing Framework
================================================================================

Components:
    - http_client: JSON client with Allure request logging
    - login_api: /auth/login request and extraction helpers
    - response_validator: login response validation (errors / warnings)
    - predicates: is_one_of / is_after and timestamp helpers

================================================================================
"""

from .http_client import ApiResponse, HttpClient, HttpClientError
from .login_api import extract_access_token, extract_user_data, is_token_valid, login_api
from .predicates import ISO_TIMESTAMP_PATTERN, is_after, is_one_of
from .response_validator import (
    LoginResponseValidator,
    LoginValidationResult,
    assert_login_response,
    validate_login_response,
)

__all__ = [
    "ApiResponse",
    "HttpClient",
    "HttpClientError",
    "extract_access_token",
    "extract_user_data",
    "is_token_valid",
    "login_api",
    "ISO_TIMESTAMP_PATTERN",
    "is_after",
    "is_one_of",
    "LoginResponseValidator",
    "LoginValidationResult",
    "assert_login_response",
    "validate_login_response",
]
