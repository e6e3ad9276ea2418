"""
================================================================================
API Testing Pytest Configuration
================================================================================

Shared fixtures for the login API specs.

Fixtures:
    - http_client: HTTP client bound to the environment's API root
    - valid_user: validUser fixture record

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Generator

import pytest

from e2e_tools.common import FixtureData, TestSettings, UserCredentials

from ..framework import HttpClient


@pytest.fixture
def http_client(settings: TestSettings) -> Generator[HttpClient, None, None]:
    """
    Provide configured HTTP client for API requests.

    Usage:
        def test_example(http_client):
            response = login_api(http_client, email, password)
            assert response.status == 200
    """
    with HttpClient.from_settings(settings) as client:
        yield client


@pytest.fixture
def valid_user(fixture_data: FixtureData) -> UserCredentials:
    return fixture_data.get_user("validUser")
