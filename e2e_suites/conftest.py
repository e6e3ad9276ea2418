"""
================================================================================
Suite Pytest Configuration
================================================================================

Registers project-wide markers, tags tests by directory and keeps the live
browser/API specs out of offline runs.

E2E specs (marked `e2e`) need a running application and only run when
`e2e.enabled` is true in config/config.yaml or E2E_ENABLED=true is set.

================================================================================
"""

import pytest

from e2e_tools.common import load_settings


def pytest_configure(config):
    """Configure pytest with project-wide custom markers."""

    # Priority markers
    config.addinivalue_line(
        "markers", "P0: Critical priority tests - must pass for deployment"
    )
    config.addinivalue_line(
        "markers", "P1: High priority tests - important functionality"
    )
    config.addinivalue_line(
        "markers", "P2: Medium priority tests - edge cases and minor features"
    )
    config.addinivalue_line(
        "markers", "P3: Low priority tests - extensive validation"
    )

    # Test type markers
    config.addinivalue_line(
        "markers", "smoke: Quick verification tests"
    )
    config.addinivalue_line(
        "markers", "regression: Full regression test suite"
    )
    config.addinivalue_line(
        "markers", "e2e: End-to-end tests against a running application"
    )
    config.addinivalue_line(
        "markers", "unit: Offline tests with a fake page / mock transport"
    )

    # Domain markers
    config.addinivalue_line(
        "markers", "api: API-specific tests"
    )
    config.addinivalue_line(
        "markers", "ui: UI-specific tests"
    )

    # Feature markers
    config.addinivalue_line(
        "markers", "auth: Tests related to authentication"
    )
    config.addinivalue_line(
        "markers", "contact: Tests related to the contact form"
    )


def pytest_collection_modifyitems(config, items):
    """
    Add directory markers and skip e2e specs unless they are enabled.
    """
    e2e_enabled = load_settings().e2e_enabled
    skip_e2e = pytest.mark.skip(
        reason="e2e specs need a running app (set E2E_ENABLED=true)"
    )

    for item in items:
        path = str(item.fspath)

        # Auto-add 'api' marker to tests in api_testing directory
        if "api_testing" in path:
            item.add_marker(pytest.mark.api)

        # Auto-add 'ui' marker to tests in ui_testing directory
        if "ui_testing" in path:
            item.add_marker(pytest.mark.ui)

        if "unit" in item.nodeid.split("/"):
            item.add_marker(pytest.mark.unit)

        if not e2e_enabled and item.get_closest_marker("e2e"):
            item.add_marker(skip_e2e)


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """
    Expose each phase report on the item (`item.rep_setup`, `item.rep_call`).

    Fixtures read it during teardown to capture failure details.
    """
    outcome = yield
    report = outcome.get_result()
    setattr(item, f"rep_{report.when}", report)


def pytest_report_header(config):
    """Add custom header to pytest output."""
    settings = load_settings()
    return [
        "",
        "=" * 60,
        "Page Object E2E Scaffold",
        f"environment: {settings.environment.name} ({settings.environment.base_url})",
        f"e2e enabled: {settings.e2e_enabled}",
        "=" * 60,
        "",
    ]
