"""
Comment author validation (display name + contact email).
"""
import logging
import re
from collections.abc import Mapping
from typing import Any, List

from comment_guard.config.constants import AUTHOR_NAME_PATTERN, MAX_AUTHOR_NAME_LENGTH
from comment_guard.models.validation import ValidationResult
from comment_guard.validation.formats import is_valid_email

logger = logging.getLogger(__name__)

_AUTHOR_NAME_RE = re.compile(AUTHOR_NAME_PATTERN)


def _sanitize_author(author: Mapping) -> dict:
    name = author.get("name")
    email = author.get("email")
    return {
        "name": name.strip() if isinstance(name, str) else "",
        "email": email.lower().strip() if isinstance(email, str) else "",
    }


def validate_author(author: Any) -> ValidationResult:
    """
    Validate ``{"name": ..., "email": ...}``.

    Name: required, non-empty after trim, at most 50 characters of
    letters, digits, whitespace and ``-_.``. Email: required and must
    pass is_valid_email().

    Sanitized value: ``{"name": trimmed, "email": lower-cased and trimmed}``.
    """
    if not isinstance(author, Mapping):
        logger.debug("Author payload missing or not a mapping")
        return ValidationResult.from_errors(
            ["Author information is required"],
            sanitized={"name": "", "email": ""},
        )

    errors: List[str] = []

    name = author.get("name")
    if not name or not isinstance(name, str):
        errors.append("Author name is required")
    else:
        name = name.strip()
        if len(name) < 1:
            errors.append("Author name cannot be empty")
        elif len(name) > MAX_AUTHOR_NAME_LENGTH:
            errors.append(f"Author name cannot exceed {MAX_AUTHOR_NAME_LENGTH} characters")
        elif _AUTHOR_NAME_RE.fullmatch(name) is None:
            errors.append("Author name contains invalid characters")

    email = author.get("email")
    if not email or not isinstance(email, str):
        errors.append("Author email is required")
    elif not is_valid_email(email):
        errors.append("Invalid email address")

    return ValidationResult.from_errors(errors, sanitized=_sanitize_author(author))
