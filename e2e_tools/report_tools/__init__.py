"""Allure reporting helpers."""

from .allure_utils import (
    MASK,
    SENSITIVE_HEADERS,
    allure_step,
    attach_json,
    attach_png,
    attach_text,
    build_curl_command,
)

__all__ = [
    "MASK",
    "SENSITIVE_HEADERS",
    "allure_step",
    "attach_json",
    "attach_png",
    "attach_text",
    "build_curl_command",
]
