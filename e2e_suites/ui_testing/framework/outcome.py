"""
================================================================================
Action Outcomes
================================================================================

Composite actions (login, contact form submit, newsletter subscribe) race
several page signals and report which one won:

    outcome = await login_page.login(email, password)
    if outcome.is_unknown:
        ...  # no signal within the timeout

`race_signals()` runs named awaitables concurrently and returns the name of
the first one that completes. A Playwright timeout inside one signal only
drops that signal; any other error propagates.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from enum import Enum
from typing import Awaitable, Dict, Mapping, Optional

from loguru import logger
from playwright.async_api import TimeoutError as PlaywrightTimeoutError


class OutcomeStatus(str, Enum):
    SUCCESS = "success"
    FAILURE = "failure"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class ActionOutcome:
    """
    Result of a composite action.

    Attributes:
        status: SUCCESS / FAILURE / UNKNOWN
        message: Text shown by the application (error banner etc.), if any
        signal: Name of the signal that resolved the race, if any
    """
    status: OutcomeStatus
    message: Optional[str] = None
    signal: Optional[str] = None

    @classmethod
    def success(cls, signal: Optional[str] = None, message: Optional[str] = None) -> "ActionOutcome":
        return cls(OutcomeStatus.SUCCESS, message=message, signal=signal)

    @classmethod
    def failure(cls, signal: Optional[str] = None, message: Optional[str] = None) -> "ActionOutcome":
        return cls(OutcomeStatus.FAILURE, message=message, signal=signal)

    @classmethod
    def unknown(cls, message: Optional[str] = None) -> "ActionOutcome":
        return cls(OutcomeStatus.UNKNOWN, message=message)

    @property
    def is_success(self) -> bool:
        return self.status is OutcomeStatus.SUCCESS

    @property
    def is_failure(self) -> bool:
        return self.status is OutcomeStatus.FAILURE

    @property
    def is_unknown(self) -> bool:
        return self.status is OutcomeStatus.UNKNOWN


async def race_signals(
    signals: Mapping[str, Awaitable],
    timeout_ms: int,
) -> Optional[str]:
    """
    Wait for the first signal to complete successfully.

    Args:
        signals: Signal name -> awaitable (e.g. a locator visibility wait)
        timeout_ms: Overall deadline in milliseconds

    Returns:
        Name of the winning signal, or None if none completed in time
    """
    if not signals:
        return None

    tasks: Dict[asyncio.Future, str] = {
        asyncio.ensure_future(awaitable): name
        for name, awaitable in signals.items()
    }
    pending = set(tasks)
    loop = asyncio.get_running_loop()
    deadline = loop.time() + timeout_ms / 1000

    try:
        while pending:
            remaining = deadline - loop.time()
            if remaining <= 0:
                break

            done, pending = await asyncio.wait(
                pending,
                timeout=remaining,
                return_when=asyncio.FIRST_COMPLETED,
            )
            # Declaration order among signals that finished in the same tick
            for task in [t for t in tasks if t in done]:
                error = task.exception()
                if error is None:
                    logger.debug(f"Signal resolved: {tasks[task]}")
                    return tasks[task]
                if isinstance(error, PlaywrightTimeoutError):
                    logger.debug(f"Signal timed out: {tasks[task]}")
                    continue
                raise error

        logger.debug(f"No signal resolved within {timeout_ms}ms: {list(signals)}")
        return None
    finally:
        for task in pending:
            task.cancel()
        if pending:
            await asyncio.gather(*pending, return_exceptions=True)


__all__ = [
    "OutcomeStatus",
    "ActionOutcome",
    "race_signals",
]
