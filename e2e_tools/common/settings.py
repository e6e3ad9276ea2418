"""
================================================================================
Test Run Settings
================================================================================

Resolves the target environment and run options once per process and hands
them to fixtures as an immutable object.

    settings = load_settings()
    settings.environment.base_url   # UI origin
    settings.environment.api_url    # API root used by login_api()

================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from loguru import logger

from .config_loader import ConfigLoader, ConfigurationError


DEFAULT_ENVIRONMENT = "dev"

# Fallback table when config.yaml has no `environments` section
DEFAULT_ENVIRONMENTS = {
    "dev": {
        "base_url": "http://localhost:3000",
        "api_url": "http://localhost:3001/api",
    },
    "staging": {
        "base_url": "https://staging.example.com",
        "api_url": "https://staging-api.example.com",
    },
    "production": {
        "base_url": "https://example.com",
        "api_url": "https://api.example.com",
    },
}


@dataclass(frozen=True)
class EnvironmentSettings:
    """Base URL / API URL pair for one target environment."""
    name: str
    base_url: str
    api_url: str


@dataclass(frozen=True)
class Timeouts:
    """
    UI timeouts in milliseconds.

    Attributes:
        page_load: `networkidle` wait after navigation
        element: Blocking element waits and the browser context default
        probe: Visibility probes that answer True/False
        action_outcome: Result race after contact submit and the strict login wait
        quick_outcome: Result race after `login()` and newsletter subscribe
    """
    page_load: int = 30000
    element: int = 10000
    probe: int = 5000
    action_outcome: int = 10000
    quick_outcome: int = 5000


@dataclass(frozen=True)
class TestSettings:
    """
    Immutable run configuration.

    Attributes:
        environment: Resolved target environment
        headless: Launch browsers headless
        browser: chromium / firefox / webkit
        timeouts: UI timeouts
        screenshot_dir: Where take_screenshot() writes files
        e2e_enabled: Whether live browser/API specs should run
        api_timeout: HTTP timeout in seconds
    """
    __test__ = False

    environment: EnvironmentSettings
    headless: bool = True
    browser: str = "chromium"
    timeouts: Timeouts = Timeouts()
    screenshot_dir: Path = Path("test-results/screenshots")
    e2e_enabled: bool = False
    api_timeout: float = 30.0


def resolve_environment(
    config: ConfigLoader,
    name: Optional[str] = None,
) -> EnvironmentSettings:
    """
    Resolve an environment entry by name.

    Unknown names fall back to `dev` with a warning. Explicit `ui.base_url`
    and `api.base_url` values override the table entry.
    """
    environments = config.get_section("environments") or DEFAULT_ENVIRONMENTS
    env_name = name or config.get("environment", DEFAULT_ENVIRONMENT)

    entry = environments.get(env_name)
    if entry is None:
        logger.warning(
            f"Unknown environment '{env_name}', falling back to '{DEFAULT_ENVIRONMENT}'"
        )
        env_name = DEFAULT_ENVIRONMENT
        entry = environments.get(DEFAULT_ENVIRONMENT) or DEFAULT_ENVIRONMENTS[DEFAULT_ENVIRONMENT]

    try:
        base_url = config.get("ui.base_url") or entry["base_url"]
        api_url = config.get("api.base_url") or entry["api_url"]
    except (KeyError, TypeError) as e:
        raise ConfigurationError(
            f"Environment '{env_name}' must define base_url and api_url"
        ) from e

    return EnvironmentSettings(
        name=env_name,
        base_url=str(base_url).rstrip("/"),
        api_url=str(api_url).rstrip("/"),
    )


def load_settings(
    config: Optional[ConfigLoader] = None,
    environment: Optional[str] = None,
) -> TestSettings:
    """
    Build TestSettings from configuration.

    Args:
        config: Configuration loader instance. Creates new one if None.
        environment: Explicit environment name, overrides config
    """
    if config is None:
        config = ConfigLoader()

    env = resolve_environment(config, environment)
    timeouts = Timeouts(
        page_load=int(config.get("ui.timeouts.page_load", 30000)),
        element=int(config.get("ui.timeouts.element", 10000)),
        probe=int(config.get("ui.timeouts.probe", 5000)),
        action_outcome=int(config.get("ui.timeouts.action_outcome", 10000)),
        quick_outcome=int(config.get("ui.timeouts.quick_outcome", 5000)),
    )
    settings = TestSettings(
        environment=env,
        headless=bool(config.get("ui.headless", True)),
        browser=str(config.get("ui.browser", "chromium")),
        timeouts=timeouts,
        screenshot_dir=Path(config.get("ui.screenshot_dir", "test-results/screenshots")),
        e2e_enabled=bool(config.get("e2e.enabled", False)),
        api_timeout=float(config.get("api.timeout", 30.0)),
    )
    logger.debug(
        f"Settings resolved: env={env.name} base_url={env.base_url} "
        f"api_url={env.api_url} e2e_enabled={settings.e2e_enabled}"
    )
    return settings


__all__ = [
    "EnvironmentSettings",
    "Timeouts",
    "TestSettings",
    "resolve_environment",
    "load_settings",
]
