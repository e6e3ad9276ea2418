"""
================================================================================
HTTP Client with Allure Integration
================================================================================

Thin JSON client used by the API checks:
    - JSON request/response handling into an `ApiResponse` snapshot
    - Allure step per request with redacted headers/body and a cURL command
    - Transport and decode failures surfaced as HttpClientError

No retries: a login check must see the first response the server gives.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import allure
import httpx
from loguru import logger

from e2e_tools.common.settings import TestSettings
from e2e_tools.report_tools import (
    MASK,
    SENSITIVE_HEADERS,
    attach_json,
    attach_text,
    build_curl_command,
)


# Maximum response length to include in Allure reports
MAX_RESPONSE_LENGTH = 3000

DEFAULT_TIMEOUT = 30.0

DEFAULT_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}

SENSITIVE_BODY_TOKENS = ("password", "secret", "token", "api_key", "authorization", "session")


class HttpClientError(Exception):
    """Raised when a request cannot be sent or its response cannot be decoded."""
    pass


@dataclass(frozen=True)
class ApiResponse:
    """
    Decoded HTTP response.

    Attributes:
        status: HTTP status code
        status_text: Reason phrase
        headers: Response headers (lower-case keys)
        body: Parsed JSON body (None for an empty body)
    """
    status: int
    status_text: str
    headers: Dict[str, str] = field(default_factory=dict)
    body: Any = None

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300


class HttpClient:
    """
    JSON HTTP client.

    Usage:
        >>> with HttpClient.from_settings(settings) as client:
        ...     response = client.post("/auth/login", json={"email": e, "password": p})
        ...     response.status
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        """
        Args:
            base_url: API root, e.g. http://localhost:3001/api
            timeout: Request timeout in seconds
            transport: Optional httpx transport (tests use httpx.MockTransport)
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport
        self.session: Optional[httpx.Client] = None

    @classmethod
    def from_settings(cls, settings: TestSettings, **kwargs: Any) -> "HttpClient":
        return cls(
            base_url=settings.environment.api_url,
            timeout=settings.api_timeout,
            **kwargs,
        )

    def __enter__(self) -> "HttpClient":
        """Enter context manager - initialize HTTP session."""
        self.session = httpx.Client(
            base_url=self.base_url,
            timeout=httpx.Timeout(self.timeout),
            transport=self._transport,
        )
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Exit context manager - close HTTP session."""
        if self.session:
            self.session.close()
            self.session = None

    def request(
        self,
        method: str,
        url: str,
        json: Any = None,
        headers: Optional[Dict[str, str]] = None,
        **kwargs: Any,
    ) -> ApiResponse:
        """
        Send a JSON request.

        Args:
            method: HTTP method
            url: Path relative to base_url
            json: JSON-serialisable body
            headers: Extra headers (merged over the JSON defaults)
            **kwargs: Passed to httpx (params, cookies, ...)

        Raises:
            HttpClientError: Outside a context manager, on transport errors,
                or when the response body is not JSON
        """
        if self.session is None:
            raise HttpClientError(
                "HttpClient must be used within a context manager. "
                "Use 'with HttpClient(...) as client:'"
            )

        request_headers = {**DEFAULT_HEADERS, **(headers or {})}
        try:
            response = self.session.request(
                method, url, json=json, headers=request_headers, **kwargs
            )
        except httpx.HTTPError as e:
            logger.error(f"{method} {url} failed: {e}")
            raise HttpClientError(f"API request failed: {e}") from e

        self._log_to_allure(method, url, request_headers, json, response)
        logger.debug(f"{method} {url} -> {response.status_code}")

        return ApiResponse(
            status=response.status_code,
            status_text=response.reason_phrase,
            headers=dict(response.headers),
            body=self._decode_body(response),
        )

    def get(self, url: str, **kwargs: Any) -> ApiResponse:
        return self.request("GET", url, **kwargs)

    def post(self, url: str, **kwargs: Any) -> ApiResponse:
        return self.request("POST", url, **kwargs)

    def put(self, url: str, **kwargs: Any) -> ApiResponse:
        return self.request("PUT", url, **kwargs)

    def patch(self, url: str, **kwargs: Any) -> ApiResponse:
        return self.request("PATCH", url, **kwargs)

    def delete(self, url: str, **kwargs: Any) -> ApiResponse:
        return self.request("DELETE", url, **kwargs)

    @staticmethod
    def _decode_body(response: httpx.Response) -> Any:
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise HttpClientError(
                f"API request failed: response from {response.request.url} "
                f"is not valid JSON ({e})"
            ) from e

    def _log_to_allure(
        self,
        method: str,
        url: str,
        headers: Dict[str, str],
        body: Any,
        response: httpx.Response,
    ) -> None:
        """
        Attach request/response details to the current Allure step.

        Attaches:
            - Request URL
            - Request headers and body (redacted)
            - cURL command for reproduction
            - Response status and body (truncated)
        """
        full_url = str(response.request.url)
        status_mark = "✅" if response.status_code < 400 else "❌"

        with allure.step(f"{status_mark} {method} {url} → {response.status_code}"):
            attach_text(full_url, name="Request URL")

            safe_headers = self._redact_headers(headers)
            attach_json(safe_headers, name="Request Headers")

            safe_body = self._redact_body(body)
            if safe_body:
                attach_json(safe_body, name="Request Body")

            attach_text(
                build_curl_command(method, full_url, safe_headers, safe_body),
                name="cURL Command",
            )
            attach_text(
                f"{response.status_code} {response.reason_phrase}",
                name="Response Status",
            )

            try:
                response_content = json.dumps(response.json(), ensure_ascii=False, indent=2)
            except ValueError:
                response_content = response.text or "<empty>"

            if len(response_content) > MAX_RESPONSE_LENGTH:
                response_content = (
                    f"{response_content[:MAX_RESPONSE_LENGTH]}\n\n"
                    f"... [Truncated, full length: {len(response_content)} chars] ..."
                )
            attach_text(response_content, name="Response Body")

    def _redact_headers(self, headers: Dict[str, Any]) -> Dict[str, Any]:
        """Mask sensitive header values before logging."""
        return {
            key: MASK if key.lower() in SENSITIVE_HEADERS else value
            for key, value in headers.items()
        }

    def _redact_body(self, payload: Any) -> Any:
        """Recursively mask sensitive fields in request bodies."""
        if isinstance(payload, dict):
            redacted = {}
            for key, value in payload.items():
                if any(token in str(key).lower() for token in SENSITIVE_BODY_TOKENS):
                    redacted[key] = MASK
                else:
                    redacted[key] = self._redact_body(value)
            return redacted
        if isinstance(payload, list):
            return [self._redact_body(item) for item in payload]
        return payload


__all__ = [
    "ApiResponse",
    "HttpClient",
    "HttpClientError",
    "MAX_RESPONSE_LENGTH",
]
