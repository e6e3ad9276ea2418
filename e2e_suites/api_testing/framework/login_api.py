"""
================================================================================
Login API Helpers
================================================================================

Request and extraction helpers around `POST /auth/login`.

Usage:
    with HttpClient.from_settings(settings) as client:
        response = login_api(client, user.email, user.password)
        token = extract_access_token(response)

================================================================================
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, Optional

import allure
from loguru import logger

from .http_client import ApiResponse, HttpClient
from .predicates import is_after


LOGIN_PATH = "/auth/login"


@allure.step("POST /auth/login (email={email})")
def login_api(client: HttpClient, email: str, password: str) -> ApiResponse:
    """Send the login request and return the decoded response."""
    response = client.post(LOGIN_PATH, json={"email": email, "password": password})
    logger.info(f"Login API for {email}: {response.status} {response.status_text}")
    return response


def _data(response: ApiResponse) -> Dict[str, Any]:
    body = response.body
    if isinstance(body, dict) and isinstance(body.get("data"), dict):
        return body["data"]
    return {}


def extract_user_data(response: ApiResponse) -> Optional[Dict[str, Any]]:
    """`data.user` from a login response, or None."""
    user = _data(response).get("user")
    return user if isinstance(user, dict) and user else None


def extract_access_token(response: ApiResponse) -> Optional[str]:
    """`data.access_token` from a login response, or None."""
    return _data(response).get("access_token") or None


def is_token_valid(response: ApiResponse, now: Optional[datetime] = None) -> bool:
    """Whether `data.access_token_expire_at` lies in the future."""
    expire_at = _data(response).get("access_token_expire_at")
    if not expire_at:
        return False
    return is_after(expire_at, now or datetime.now(timezone.utc))


__all__ = [
    "LOGIN_PATH",
    "login_api",
    "extract_user_data",
    "extract_access_token",
    "is_token_valid",
]
