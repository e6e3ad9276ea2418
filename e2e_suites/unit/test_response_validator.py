import copy
from datetime import datetime, timezone

import pytest

from e2e_suites.api_testing.framework import (
    LoginResponseValidator,
    assert_login_response,
    validate_login_response,
)
from e2e_suites.api_testing.framework.http_client import ApiResponse


NOW = datetime(2025, 6, 1, tzinfo=timezone.utc)

ADMIN_BODY = {
    "success": True,
    "message": "Successfully logged in.",
    "data": {
        "user": {
            "id": 1,
            "name": "Admin",
            "email": "admin@admin.com",
            "is_active": 1,
            "created_at": "2024-01-01T00:00:00.000000Z",
            "updated_at": "2024-01-01T00:00:00.000000Z",
        },
        "access_token": "abc",
        "access_token_expire_at": "2999-01-01T00:00:00.000000Z",
    },
}


def _response(body, status=200) -> ApiResponse:
    return ApiResponse(status=status, status_text="OK", body=body)


@pytest.fixture
def body():
    return copy.deepcopy(ADMIN_BODY)


def test_well_formed_response_is_valid(body):
    result = validate_login_response(_response(body), {"email": "admin@admin.com"}, now=NOW)

    assert result.as_dict() == {"is_valid": True, "errors": [], "warnings": []}


def test_expired_token_is_only_a_warning(body):
    body["data"]["access_token_expire_at"] = "2020-01-01T00:00:00.000000Z"

    result = validate_login_response(_response(body), {"email": "admin@admin.com"}, now=NOW)

    assert result.is_valid
    assert result.errors == ()
    assert result.warnings == ("Access token appears to be expired",)


def test_missing_message_field(body):
    del body["message"]

    result = validate_login_response(_response(body), now=NOW)

    assert not result.is_valid
    assert result.errors == ("Missing required field: message",)
    assert result.warnings == ()


def test_missing_data_field(body):
    del body["data"]

    result = validate_login_response(_response(body), now=NOW)

    assert not result.is_valid
    assert any("data" in error for error in result.errors)


def test_unexpected_active_flag_is_a_warning(body):
    body["data"]["user"]["is_active"] = 2

    result = validate_login_response(_response(body), now=NOW)

    assert result.is_valid
    assert result.warnings == ("User is_active should be 0, 1, true, or false",)


@pytest.mark.parametrize("flag", [0, 1, True, False])
def test_accepted_active_flags(body, flag):
    body["data"]["user"]["is_active"] = flag

    assert validate_login_response(_response(body), now=NOW).warnings == ()


def test_validate_is_idempotent(body):
    validator = LoginResponseValidator()
    response = _response(body)

    assert validator.validate(response, now=NOW) == validator.validate(response, now=NOW)


@pytest.mark.parametrize(
    "expire_at",
    [
        "Tue, 01 Jan 2999 00:00:00 GMT",
        "2999-01-01T00:00:00+0000",
        "2999-01-01T00:00:00.12345Z",
    ],
)
def test_other_expiry_formats_are_accepted(body, expire_at):
    body["data"]["access_token_expire_at"] = expire_at

    result = validate_login_response(_response(body), now=NOW)

    assert result.as_dict() == {"is_valid": True, "errors": [], "warnings": []}


def test_expired_http_date_is_only_a_warning(body):
    body["data"]["access_token_expire_at"] = "Wed, 01 Jan 2020 00:00:00 GMT"

    result = validate_login_response(_response(body), now=NOW)

    assert result.errors == ()
    assert result.warnings == ("Access token appears to be expired",)


def test_collects_every_problem(body):
    body["success"] = False
    body["data"]["user"]["id"] = "1"
    body["data"]["user"]["email"] = 42
    del body["data"]["user"]["created_at"]
    body["data"]["access_token_expire_at"] = "not a date"

    result = validate_login_response(_response(body, status=401), now=NOW)

    assert result.errors == (
        "Expected status 200, got 401",
        "Expected success to be true, got False",
        "Missing required user field: created_at",
        "User ID should be a number",
        "User email should be a string",
        "Invalid access_token_expire_at date format",
    )


def test_expected_user_mismatch(body):
    result = validate_login_response(
        _response(body),
        {"email": "someone@else.com", "name": "Someone"},
        now=NOW,
    )

    assert result.errors == ("Expected email someone@else.com, got admin@admin.com",)
    assert result.warnings == ("Expected name Someone, got Admin",)


def test_non_object_body():
    result = validate_login_response(_response(["not", "an", "object"]), now=NOW)

    assert result.errors[0] == "Response body should be a JSON object, got list"
    assert "Missing required field: success" in result.errors


def test_data_of_wrong_type(body):
    body["data"] = "token"

    result = validate_login_response(_response(body), now=NOW)

    assert result.errors == ("Data field should be an object",)


def test_empty_data_object_reports_missing_fields(body):
    body["data"] = {}

    result = validate_login_response(_response(body), now=NOW)

    assert result.errors == (
        "Missing required data field: user",
        "Missing required data field: access_token",
        "Missing required data field: access_token_expire_at",
    )


def test_non_string_token_is_a_warning(body):
    body["data"]["access_token"] = 12345

    result = validate_login_response(_response(body), now=NOW)

    assert result.is_valid
    assert result.warnings == ("Access token should be a string",)


def test_bool_id_is_not_numeric(body):
    body["data"]["user"]["id"] = True

    assert "User ID should be a number" in validate_login_response(_response(body), now=NOW).errors


def _full_record(body):
    body["data"]["user"].update({
        "phone": None,
        "google_id": None,
        "ebay_user_id": None,
        "reset_token": None,
        "reset_token_expire_at": None,
    })
    return body


def test_assert_login_response_accepts_full_record(body):
    assert_login_response(_response(_full_record(body)), {"email": "admin@admin.com"}, now=NOW)


def test_assert_login_response_rejects_expired_token(body):
    body = _full_record(body)
    body["data"]["access_token_expire_at"] = "2020-01-01T00:00:00.000000Z"

    with pytest.raises(AssertionError, match="Access token expired"):
        assert_login_response(_response(body), now=NOW)


def test_assert_login_response_requires_full_user_record(body):
    with pytest.raises(AssertionError, match="Missing required user field: phone"):
        assert_login_response(_response(body), now=NOW)
