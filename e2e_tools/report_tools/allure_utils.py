"""
================================================================================
Allure Report Utilities
================================================================================

Helpers for enriching Allure reports from page objects and API helpers.

Features:
- Custom attachment helpers (JSON, text, PNG)
- cURL command builder for API reproduction (sensitive headers masked)
- `allure_step` decorator that works for sync and async callables

================================================================================
"""

import inspect
import json
from functools import wraps
from pathlib import Path
from typing import Any, Dict, Optional, Union

import allure
from loguru import logger


# Header names (lower-case) whose values never reach a report
SENSITIVE_HEADERS = frozenset({"authorization", "x-api-key", "cookie", "set-cookie"})

MASK = "***MASKED***"


# ================================================================================
# Attachment Helpers
# ================================================================================

def attach_json(data: Any, name: str = "Data"):
    """
    Attach JSON data to Allure report.

    Args:
        data: Data to attach (will be JSON serialized)
        name: Attachment name
    """
    json_str = json.dumps(data, indent=2, default=str, ensure_ascii=False)
    allure.attach(
        json_str,
        name=name,
        attachment_type=allure.attachment_type.JSON
    )


def attach_text(text: str, name: str = "Text"):
    """
    Attach text content to Allure report.

    Args:
        text: Text to attach
        name: Attachment name
    """
    allure.attach(
        text,
        name=name,
        attachment_type=allure.attachment_type.TEXT
    )


def attach_png(source: Union[bytes, Path, str], name: str = "Screenshot"):
    """
    Attach a PNG image (raw bytes or a file path) to Allure report.

    Args:
        source: PNG bytes or path to a PNG file
        name: Attachment name
    """
    if isinstance(source, (str, Path)):
        with open(source, "rb") as f:
            source = f.read()
    allure.attach(
        source,
        name=name,
        attachment_type=allure.attachment_type.PNG
    )


def build_curl_command(
    method: str,
    url: str,
    headers: Optional[Dict[str, str]] = None,
    body: Optional[Any] = None
) -> str:
    """
    Build a copy-paste ready cURL command with sensitive headers masked.

    Args:
        method: HTTP method
        url: Request URL
        headers: Request headers
        body: Request body
    """
    cmd_parts = [f"curl -X {method}"]

    if headers:
        for key, value in headers.items():
            if key.lower() in SENSITIVE_HEADERS:
                value = MASK
            cmd_parts.append(f"-H '{key}: {value}'")

    if body:
        body_str = json.dumps(body, ensure_ascii=False) if isinstance(body, (dict, list)) else str(body)
        cmd_parts.append(f"-d '{body_str}'")

    cmd_parts.append(f"'{url}'")

    return " \\\n  ".join(cmd_parts)


# ================================================================================
# Decorators
# ================================================================================

def _format_title(title: str, func, args, kwargs) -> str:
    try:
        bound = inspect.signature(func).bind(*args, **kwargs)
        bound.apply_defaults()
        return title.format(**bound.arguments)
    except (KeyError, IndexError, TypeError, ValueError):
        return title


def allure_step(step_name: str):
    """
    Decorator to wrap function as Allure step.

    The step name may reference call arguments, e.g. "Fill email: {email}".

    Args:
        step_name: Step name for report
    """
    def decorator(func):
        @wraps(func)
        async def async_wrapper(*args, **kwargs):
            title = _format_title(step_name, func, args, kwargs)
            logger.debug(f"Step: {title}")
            with allure.step(title):
                return await func(*args, **kwargs)

        @wraps(func)
        def sync_wrapper(*args, **kwargs):
            title = _format_title(step_name, func, args, kwargs)
            logger.debug(f"Step: {title}")
            with allure.step(title):
                return func(*args, **kwargs)

        if inspect.iscoroutinefunction(func):
            return async_wrapper
        return sync_wrapper

    return decorator


__all__ = [
    "attach_json",
    "attach_text",
    "attach_png",
    "build_curl_command",
    "SENSITIVE_HEADERS",
    "MASK",
    "allure_step",
]
