"""
================================================================================
E2E Tools Common Utilities
================================================================================

Shared configuration, run settings, fixture data and logging setup.

Exports:
    - ConfigLoader / ConfigurationError: YAML + env configuration
    - load_settings / TestSettings / EnvironmentSettings: resolved run options
    - FixtureData / UserCredentials: read-only demo records
    - init_logger: Loguru setup

Usage:
    from e2e_tools.common import init_logger, load_settings

    init_logger()
    api_url = load_settings().environment.api_url

================================================================================
"""

from .config_loader import ConfigLoader, ConfigurationError
from .fixture_data import FixtureData, UserCredentials
from .log_config import init_logger
from .settings import EnvironmentSettings, TestSettings, Timeouts, load_settings

__all__ = [
    "ConfigLoader",
    "ConfigurationError",
    "FixtureData",
    "UserCredentials",
    "init_logger",
    "EnvironmentSettings",
    "TestSettings",
    "Timeouts",
    "load_settings",
]
