"""
================================================================================
E2E Tools
================================================================================

Shared infrastructure for the e2e suites.

Modules:
    - common: Configuration loading, environment settings, fixture data, logging
    - report_tools: Allure attachment helpers
    - data_generator: Random user / email / string generation

Example:
    from e2e_tools.common import init_logger, load_settings, FixtureData

    init_logger()
    settings = load_settings()
    user = FixtureData().get_user("validUser")

================================================================================
"""

__version__ = "1.0.0"

__all__ = [
    "common",
    "report_tools",
    "data_generator",
]
