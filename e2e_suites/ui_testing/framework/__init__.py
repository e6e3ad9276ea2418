"""
================================================================================
UI Testing Framework
================================================================================

Playwright-based page object framework.

Components:
    - selectors: SelectorTable enums for per-screen selectors
    - region: scoped element access used by components and pages
    - page_base: navigation, probes, screenshots, response capture
    - outcome: ActionOutcome and the signal race behind composite actions
    - browser_manager: browser lifecycle management

Author: Automation Team
License: MIT
================================================================================
"""

from .browser_manager import BrowserManager
from .exceptions import ElementNotFoundError, LoginResultTimeoutError, UiTestingError
from .outcome import ActionOutcome, OutcomeStatus, race_signals
from .page_base import PageBase
from .region import Region
from .selectors import SelectorTable, by_test_id

__all__ = [
    "BrowserManager",
    "ElementNotFoundError",
    "LoginResultTimeoutError",
    "UiTestingError",
    "ActionOutcome",
    "OutcomeStatus",
    "race_signals",
    "PageBase",
    "Region",
    "SelectorTable",
    "by_test_id",
]
