"""
Comment body validation.

Checks, in order:
- presence (unless ``allow_empty``)
- type
- trimmed length bounds
- disallowed content on the raw body (script blocks, ``javascript:`` URLs)

Disallowed content fails the whole input; nothing is stripped here.
See sanitize.sanitize_user_input() for denylist stripping.
"""
import logging
import re
from typing import Any, List, Optional

from comment_guard.config.constants import JAVASCRIPT_URL_PATTERN, SCRIPT_BLOCK_PATTERN
from comment_guard.models.query import ContentOptions
from comment_guard.models.validation import ValidationResult

logger = logging.getLogger(__name__)

_SCRIPT_BLOCK_RE = re.compile(SCRIPT_BLOCK_PATTERN, re.IGNORECASE)
_JAVASCRIPT_URL_RE = re.compile(JAVASCRIPT_URL_PATTERN, re.IGNORECASE)


def contains_script_block(text: str) -> bool:
    return _SCRIPT_BLOCK_RE.search(text) is not None


def contains_javascript_url(text: str) -> bool:
    return _JAVASCRIPT_URL_RE.search(text) is not None


def validate_comment_content(
    content: Any,
    options: Optional[ContentOptions] = None,
) -> ValidationResult:
    """
    Validate a comment body.

    Args:
        content: Raw value from the request.
        options: Length bounds and empty policy (defaults: 1..1000, not empty).

    Returns:
        ValidationResult whose ``sanitized`` is the trimmed body ("" when
        the body is missing or not a string).
    """
    if options is None:
        options = ContentOptions()

    if not content and not options.allow_empty:
        logger.debug("Comment content missing")
        return ValidationResult.from_errors(["Content is required"], sanitized="")

    if content and not isinstance(content, str):
        logger.debug("Comment content has type %s", type(content).__name__)
        return ValidationResult.from_errors(["Content must be a string"], sanitized="")

    if not content:
        # allow_empty and nothing given
        return ValidationResult.from_errors([], sanitized="")

    errors: List[str] = []
    trimmed = content.strip()

    if len(trimmed) < options.min_length:
        plural = "" if options.min_length == 1 else "s"
        errors.append(f"Content must be at least {options.min_length} character{plural} long")

    if len(trimmed) > options.max_length:
        errors.append(f"Content cannot exceed {options.max_length} characters")

    if contains_script_block(content):
        errors.append("Script tags are not allowed")

    if contains_javascript_url(content):
        errors.append("JavaScript URLs are not allowed")

    return ValidationResult.from_errors(errors, sanitized=trimmed)
