"""
Denylist sanitization for free-text fields.

This is not an HTML sanitizer: it removes a handful of known-dangerous
tokens and nothing else. Text rendered as HTML still needs output encoding
(or screening.markup.strip_markup()) at render time.
"""
import re
from typing import Any

from comment_guard.config.constants import EVENT_HANDLER_PATTERN, JAVASCRIPT_URL_PATTERN

_ANGLE_BRACKETS_RE = re.compile(r"[<>]")
_JAVASCRIPT_URL_RE = re.compile(JAVASCRIPT_URL_PATTERN, re.IGNORECASE)
_EVENT_HANDLER_RE = re.compile(EVENT_HANDLER_PATTERN, re.IGNORECASE)


def _sanitize_pass(text: str) -> str:
    text = text.strip()
    text = _ANGLE_BRACKETS_RE.sub("", text)
    text = _JAVASCRIPT_URL_RE.sub("", text)
    text = _EVENT_HANDLER_RE.sub("", text)
    return text.replace("\0", "")


def sanitize_user_input(value: Any) -> Any:
    """
    Strip ``<``/``>``, ``javascript:``, ``on<event>=`` handlers and NUL
    bytes from a string, after trimming it. Non-strings are returned as is.

    Removing one token can splice its neighbours into a new one
    (``"javajavascript:script:"``), so passes repeat until the text stops
    changing. Every pass either shortens the text or leaves it unchanged,
    hence the loop terminates and the result is idempotent.
    """
    if not isinstance(value, str):
        return value

    current = value
    while True:
        cleaned = _sanitize_pass(current)
        if cleaned == current:
            return cleaned
        current = cleaned
