"""
================================================================================
Configuration Loader
================================================================================

Reads config/config.yaml once per process. Any dotted key can be overridden
from the environment by upper-casing it and replacing dots with underscores:

    ui.base_url        -> UI_BASE_URL
    e2e.enabled        -> E2E_ENABLED
    ui.timeouts.probe  -> UI_TIMEOUTS_PROBE

Environment values are strings; `get()` coerces them to the type of the
default it was given (bool, int, float), and leaves them alone otherwise.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from loguru import logger


CONFIG_DIR = Path(__file__).resolve().parents[2] / "config"
DEFAULT_CONFIG_PATH = CONFIG_DIR / "config.yaml"

TRUTHY_VALUES = ("true", "1", "yes", "on")

_MISSING = object()


class ConfigurationError(Exception):
    """Raised when the configuration file cannot be used."""
    pass


def env_key(path: str) -> str:
    """Environment variable name that overrides a dotted config path."""
    return path.upper().replace(".", "_")


def coerce_env_value(raw: str, like: Any) -> Any:
    """
    Convert an environment string to the type of `like`.

    Unparseable numbers are returned unchanged so the caller sees the raw value.
    """
    # bool first: bool is a subclass of int
    if isinstance(like, bool):
        return raw.strip().lower() in TRUTHY_VALUES
    for number_type in (int, float):
        if isinstance(like, number_type):
            try:
                return number_type(raw)
            except ValueError:
                logger.warning(f"Cannot read {raw!r} as {number_type.__name__}, keeping string")
                return raw
    return raw


def _lookup(tree: Dict[str, Any], path: str) -> Any:
    node: Any = tree
    for part in path.split("."):
        if not isinstance(node, dict) or part not in node:
            return _MISSING
        node = node[part]
    return node


class ConfigLoader:
    """
    Process-wide configuration, environment first, then YAML, then default.

    The first construction wins; later calls return the same instance and
    ignore their `config_path`. Tests call `ConfigLoader.reset()` to start over.

        >>> config = ConfigLoader()
        >>> config.get("ui.timeouts.page_load", 30000)
        30000
    """

    _instance: Optional["ConfigLoader"] = None

    def __new__(cls, config_path: Optional[Path] = None) -> "ConfigLoader":
        if cls._instance is None:
            instance = super().__new__(cls)
            instance._data = {}
            instance._config_path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH
            instance._load()
            cls._instance = instance
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Forget the shared instance."""
        cls._instance = None

    @property
    def config_path(self) -> Path:
        return self._config_path

    def _load(self) -> None:
        path = self._config_path
        if not path.is_file():
            logger.warning(f"No configuration at {path}; using defaults and environment only")
            self._data = {}
            return

        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8"))
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Cannot parse {path}: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"Top level of {path} must be a mapping")

        self._data = data
        logger.debug(f"Configuration loaded: {path}")

    def reload(self) -> None:
        """Re-read the file (environment overrides are always read live)."""
        self._load()
        logger.info(f"Configuration reloaded: {self._config_path}")

    def has(self, path: str) -> bool:
        return env_key(path) in os.environ or _lookup(self._data, path) is not _MISSING

    def get(self, path: str, default: Any = None) -> Any:
        """
        Value at a dotted `path`.

        Args:
            path: e.g. "ui.timeouts.probe"
            default: Returned when neither the environment nor the file has
                the key (or the file holds null); also picks the env coercion
        """
        raw = os.environ.get(env_key(path))
        if raw is not None:
            return coerce_env_value(raw, default)

        value = _lookup(self._data, path)
        if value is _MISSING or value is None:
            return default
        return value

    def get_section(self, name: str) -> Dict[str, Any]:
        """Top-level mapping `name`, or {} when absent or not a mapping."""
        section = self._data.get(name)
        return section if isinstance(section, dict) else {}


__all__ = [
    "ConfigLoader",
    "ConfigurationError",
    "CONFIG_DIR",
    "DEFAULT_CONFIG_PATH",
    "coerce_env_value",
    "env_key",
]
