"""
================================================================================
Fixture Data
================================================================================

Read-only demo records loaded from `config/test_data.yaml`:

    users:          scenario name -> email/password + optional profile fields
    contact_form:   valid / invalid contact form payloads
    search_data:    query lists

Records are loaded once and never mutated during a run. Values below are
placeholders; real projects should load secrets from a secret manager.

================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

import yaml
from loguru import logger

from .config_loader import CONFIG_DIR, ConfigurationError


DEFAULT_TEST_DATA_PATH = CONFIG_DIR / "test_data.yaml"

DEFAULT_USER_SCENARIO = "validUser"


@dataclass(frozen=True)
class UserCredentials:
    """One user record keyed by scenario name."""
    scenario: str
    email: str
    password: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    full_name: Optional[str] = None
    name: Optional[str] = None
    role: Optional[str] = None

    @property
    def username(self) -> str:
        """Login identifier (the app signs in by email)."""
        return self.email

    def as_expected_user(self) -> Dict[str, Any]:
        """Mapping consumed by the login response validator."""
        expected: Dict[str, Any] = {"email": self.email}
        if self.name:
            expected["name"] = self.name
        return expected


def _freeze(value: Any) -> Any:
    if isinstance(value, dict):
        return MappingProxyType({k: _freeze(v) for k, v in value.items()})
    if isinstance(value, list):
        return tuple(_freeze(v) for v in value)
    return value


class FixtureData:
    """
    Loader for static fixture records.

    Usage:
        data = FixtureData()
        user = data.get_user("invalidUser")
        form = data.get_test_data("contact_form")["valid_data"]
    """

    def __init__(self, path: Optional[Path] = None) -> None:
        self._path = Path(path) if path else DEFAULT_TEST_DATA_PATH
        self._data = self._load()

    def _load(self) -> Mapping[str, Any]:
        if not self._path.exists():
            raise ConfigurationError(f"Fixture data file not found: {self._path}")
        try:
            with open(self._path, "r", encoding="utf-8") as f:
                raw = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in fixture data: {e}") from e

        if not isinstance(raw, dict):
            raise ConfigurationError(f"Fixture data root must be a mapping: {self._path}")
        logger.debug(f"Loaded fixture data from: {self._path}")
        return _freeze(raw)

    @property
    def scenarios(self) -> tuple:
        return tuple(self._data.get("users", {}).keys())

    def get_user(self, scenario: str = DEFAULT_USER_SCENARIO) -> UserCredentials:
        """
        Get user credentials by scenario name.

        Unknown scenarios fall back to `validUser`.
        """
        users = self._data.get("users", {})
        record = users.get(scenario)
        if record is None:
            logger.warning(
                f"Unknown user scenario '{scenario}', using '{DEFAULT_USER_SCENARIO}'"
            )
            scenario = DEFAULT_USER_SCENARIO
            record = users.get(DEFAULT_USER_SCENARIO)
            if record is None:
                raise ConfigurationError("Fixture data has no 'validUser' record")

        return UserCredentials(
            scenario=scenario,
            email=str(record.get("email", "")),
            password=str(record.get("password", "")),
            first_name=record.get("first_name"),
            last_name=record.get("last_name"),
            full_name=record.get("full_name"),
            name=record.get("name"),
            role=record.get("role"),
        )

    def get_test_data(self, category: str) -> Mapping[str, Any]:
        """
        Get a read-only data category (e.g. "contact_form", "search_data").

        Raises:
            KeyError: If the category is not defined
        """
        if category == "users" or category not in self._data:
            raise KeyError(f"Unknown test data category: {category}")
        return self._data[category]


__all__ = [
    "UserCredentials",
    "FixtureData",
    "DEFAULT_TEST_DATA_PATH",
]
