# ================================================================================
# Login Response Validator
# ================================================================================
#
# Structural, type and date checks for the `/auth/login` response.
#
# Key Features:
#   - Collects every problem in one pass (no short-circuit)
#   - Hard problems go to `errors`, tolerated deviations to `warnings`
#   - `is_valid` is derived from the error list, never set separately
#   - Loguru logging and an Allure validation summary per call
#
# ================================================================================

from datetime import datetime, timezone
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Tuple

import allure
from loguru import logger

from .http_client import ApiResponse
from .predicates import is_after, is_one_of, is_valid_email, parse_iso_datetime


EXPECTED_STATUS = 200
SUCCESS_MESSAGE = "Successfully logged in."

REQUIRED_FIELDS = ("success", "message", "data")
REQUIRED_DATA_FIELDS = ("user", "access_token", "access_token_expire_at")
REQUIRED_USER_FIELDS = ("id", "name", "email", "is_active", "created_at", "updated_at")

# Full user record returned by the backend
USER_RECORD_FIELDS = (
    "id",
    "name",
    "email",
    "phone",
    "google_id",
    "ebay_user_id",
    "is_active",
    "reset_token",
    "reset_token_expire_at",
    "created_at",
    "updated_at",
)

# The backend reports is_active either as 0/1 or as a boolean
ACTIVE_FLAG_VALUES = (0, 1, True, False)
ACTIVE_VALUES = (1, True)


@dataclass(frozen=True)
class LoginValidationResult:
    """
    Outcome of validating one login response.

    Attributes:
        errors: Problems that make the response invalid, in check order
        warnings: Tolerated deviations, in check order
    """
    errors: Tuple[str, ...] = ()
    warnings: Tuple[str, ...] = ()

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def as_dict(self) -> Dict[str, Any]:
        return {
            "is_valid": self.is_valid,
            "errors": list(self.errors),
            "warnings": list(self.warnings),
        }


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class LoginResponseValidator:
    """
    Validator for login API responses.

    Example:
        validator = LoginResponseValidator()
        result = validator.validate(response, expected_user={"email": "admin@admin.com"})
        assert result.is_valid, result.errors
    """

    @allure.step("Validate login response")
    def validate(
        self,
        response: ApiResponse,
        expected_user: Optional[Mapping[str, Any]] = None,
        now: Optional[datetime] = None,
    ) -> LoginValidationResult:
        """
        Run every login response check.

        Args:
            response: Decoded API response
            expected_user: Optional {"email", "name"} record to compare against
            now: Reference time for the expiry check (defaults to current UTC time)

        Returns:
            LoginValidationResult
        """
        errors: List[str] = []
        warnings: List[str] = []
        now = now or datetime.now(timezone.utc)

        if response.status != EXPECTED_STATUS:
            errors.append(f"Expected status {EXPECTED_STATUS}, got {response.status}")

        body = response.body
        if not isinstance(body, dict):
            errors.append(f"Response body should be a JSON object, got {type(body).__name__}")
            body = {}

        for name in REQUIRED_FIELDS:
            if name not in body:
                errors.append(f"Missing required field: {name}")

        if "success" in body and body["success"] is not True:
            errors.append(f"Expected success to be true, got {body['success']}")

        if "message" in body:
            message = body["message"]
            if not isinstance(message, str) or not message.strip():
                errors.append("Message field should be a non-empty string")

        data = body.get("data")
        if data is not None and not isinstance(data, dict):
            errors.append("Data field should be an object")
        elif isinstance(data, dict):
            self._check_data(data, expected_user, now, errors, warnings)

        result = LoginValidationResult(errors=tuple(errors), warnings=tuple(warnings))
        self._log_result(result)
        self._attach_validation_summary(result)
        return result

    def _check_data(
        self,
        data: Dict[str, Any],
        expected_user: Optional[Mapping[str, Any]],
        now: datetime,
        errors: List[str],
        warnings: List[str],
    ) -> None:
        for name in REQUIRED_DATA_FIELDS:
            if name not in data:
                errors.append(f"Missing required data field: {name}")

        user = data.get("user")
        if isinstance(user, dict):
            self._check_user(user, expected_user, errors, warnings)

        if "access_token" in data and not isinstance(data["access_token"], str):
            warnings.append("Access token should be a string")

        expire_at = data.get("access_token_expire_at")
        if expire_at:
            expires = parse_iso_datetime(expire_at)
            if expires is None:
                errors.append("Invalid access_token_expire_at date format")
            elif not is_after(expires, now):
                warnings.append("Access token appears to be expired")

    def _check_user(
        self,
        user: Dict[str, Any],
        expected_user: Optional[Mapping[str, Any]],
        errors: List[str],
        warnings: List[str],
    ) -> None:
        for name in REQUIRED_USER_FIELDS:
            if name not in user:
                errors.append(f"Missing required user field: {name}")

        user_id = user.get("id")
        if user_id is not None and not _is_number(user_id):
            errors.append("User ID should be a number")

        email = user.get("email")
        if email is not None and not isinstance(email, str):
            errors.append("User email should be a string")

        is_active = user.get("is_active")
        if is_active is not None and not is_one_of(is_active, ACTIVE_FLAG_VALUES):
            warnings.append("User is_active should be 0, 1, true, or false")

        if expected_user:
            expected_email = expected_user.get("email")
            if expected_email and email != expected_email:
                errors.append(f"Expected email {expected_email}, got {email}")

            expected_name = expected_user.get("name")
            if expected_name and user.get("name") != expected_name:
                warnings.append(f"Expected name {expected_name}, got {user.get('name')}")

    def _log_result(self, result: LoginValidationResult) -> None:
        for error in result.errors:
            logger.warning(f"❌ {error}")
        for warning in result.warnings:
            logger.warning(f"⚠️ {warning}")
        if result.is_valid:
            logger.debug(f"✅ Login response valid ({len(result.warnings)} warnings)")

    def _attach_validation_summary(self, result: LoginValidationResult) -> None:
        """Attach validation summary to Allure report."""
        summary_lines = [
            f"Valid: {result.is_valid}",
            f"Errors: {len(result.errors)}",
            f"Warnings: {len(result.warnings)}",
            "",
            "Details:",
            "-" * 40,
        ]
        summary_lines.extend(f"❌ ERROR | {e}" for e in result.errors)
        summary_lines.extend(f"⚠️ WARN  | {w}" for w in result.warnings)

        allure.attach(
            "\n".join(summary_lines),
            name="Validation Summary",
            attachment_type=allure.attachment_type.TEXT
        )


def validate_login_response(
    response: ApiResponse,
    expected_user: Optional[Mapping[str, Any]] = None,
    now: Optional[datetime] = None,
) -> LoginValidationResult:
    """Functional shortcut for LoginResponseValidator().validate()."""
    return LoginResponseValidator().validate(response, expected_user, now)


@allure.step("Assert login response")
def assert_login_response(
    response: ApiResponse,
    expected_user: Optional[Mapping[str, Any]] = None,
    now: Optional[datetime] = None,
) -> None:
    """
    Strict assertions for a successful login.

    Stricter than validate(): requires the exact success message, the full
    user record, an active user, parseable dates and an unexpired token.

    Raises:
        AssertionError: On the first failed expectation
    """
    now = now or datetime.now(timezone.utc)

    assert response.status == EXPECTED_STATUS, (
        f"Expected status {EXPECTED_STATUS}, got {response.status}"
    )
    assert response.ok, f"Response not ok: {response.status} {response.status_text}"

    body = response.body
    assert isinstance(body, dict), f"Response body should be a JSON object, got {body!r}"
    for name in REQUIRED_FIELDS:
        assert name in body, f"Missing required field: {name}"

    assert body["success"] is True, f"Expected success to be true, got {body['success']}"
    assert isinstance(body["message"], str), "Message field should be a string"
    assert body["message"] == SUCCESS_MESSAGE, (
        f"Expected message {SUCCESS_MESSAGE!r}, got {body['message']!r}"
    )

    data = body["data"]
    assert isinstance(data, dict), "Data field should be an object"
    for name in REQUIRED_DATA_FIELDS:
        assert name in data, f"Missing required data field: {name}"

    user = data["user"]
    assert isinstance(user, dict), "User field should be an object"
    for name in USER_RECORD_FIELDS:
        assert name in user, f"Missing required user field: {name}"

    assert _is_number(user["id"]), f"User ID should be a number, got {user['id']!r}"
    assert isinstance(user["name"], str), "User name should be a string"
    assert isinstance(user["email"], str), "User email should be a string"
    assert is_one_of(user["is_active"], ACTIVE_FLAG_VALUES), (
        f"User is_active should be one of {ACTIVE_FLAG_VALUES}, got {user['is_active']!r}"
    )

    assert user["id"] > 0, f"User ID should be positive, got {user['id']}"
    assert user["name"].strip(), "User name should not be blank"
    assert is_valid_email(user["email"]), f"Invalid user email format: {user['email']}"
    assert is_one_of(user["is_active"], ACTIVE_VALUES), "User should be active"

    for name in ("created_at", "updated_at"):
        assert parse_iso_datetime(user[name]) is not None, (
            f"User {name} is not a valid date: {user[name]!r}"
        )

    assert isinstance(data["access_token"], str), "Access token should be a string"
    expires = parse_iso_datetime(data["access_token_expire_at"])
    assert expires is not None, (
        f"Invalid access_token_expire_at date format: {data['access_token_expire_at']!r}"
    )
    assert is_after(expires, now), f"Access token expired at {data['access_token_expire_at']}"

    if expected_user:
        for name in ("email", "name", "id"):
            expected = expected_user.get(name)
            if expected:
                assert user[name] == expected, f"Expected {name} {expected!r}, got {user[name]!r}"


__all__ = [
    "LoginValidationResult",
    "LoginResponseValidator",
    "validate_login_response",
    "assert_login_response",
    "REQUIRED_FIELDS",
    "REQUIRED_DATA_FIELDS",
    "REQUIRED_USER_FIELDS",
    "USER_RECORD_FIELDS",
]
