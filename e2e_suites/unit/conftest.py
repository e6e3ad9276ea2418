"""Offline fixtures: a fake Playwright page and a clean ConfigLoader per test."""

import pytest

from e2e_tools.common import ConfigLoader

from .fakes import FakePage


@pytest.fixture
def fake_page() -> FakePage:
    return FakePage()


@pytest.fixture(autouse=True)
def _reset_config_loader():
    """Tests that point ConfigLoader at a temp file must not leak the singleton."""
    ConfigLoader.reset()
    yield
    ConfigLoader.reset()
