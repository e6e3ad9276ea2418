"""
================================================================================
Selector Tables
================================================================================

Each screen or region declares its selectors as a `SelectorTable` enum:

    @unique
    class LoginSelectors(SelectorTable):
        EMAIL_INPUT = 'input[type="email"]'
        LOGIN_BUTTON = 'button[type="submit"]'

Keys are unique and immutable; a misspelled key fails at attribute access
instead of producing an empty selector at runtime.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from enum import Enum
from typing import Union


class SelectorTable(str, Enum):
    """Base class for selector enums (values are CSS / Playwright selectors)."""

    @property
    def selector(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


def by_test_id(value: str) -> str:
    """Build a `[data-testid="..."]` selector."""
    return f'[data-testid="{value}"]'


SelectorLike = Union[str, SelectorTable]


def to_selector(target: SelectorLike) -> str:
    """Resolve a raw selector string or table member to a selector string."""
    if isinstance(target, SelectorTable):
        return target.value
    if not isinstance(target, str) or not target:
        raise TypeError(f"Selector must be a non-empty string or SelectorTable, got {target!r}")
    return target


__all__ = [
    "SelectorTable",
    "SelectorLike",
    "by_test_id",
    "to_selector",
]
