"""
Repository-level pytest configuration (showcase-safe).

Provides:
  - Loguru initialised once per session from config/config.yaml
  - Session-wide run settings and read-only fixture data

Important:
  This repository is designed for portfolio display. Values in config/ are
  placeholders. Real projects should load secrets from a secure secret
  manager in CI/CD.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from e2e_tools.common import FixtureData, TestSettings, init_logger, load_settings


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return repo root path."""
    return Path(__file__).parent


@pytest.fixture(scope="session", autouse=True)
def _init_logging() -> None:
    init_logger()


@pytest.fixture(scope="session")
def settings() -> TestSettings:
    """Resolved run settings (environment, timeouts, e2e switch)."""
    return load_settings()


@pytest.fixture(scope="session")
def fixture_data() -> FixtureData:
    """Read-only fixture records from config/test_data.yaml."""
    return FixtureData()
