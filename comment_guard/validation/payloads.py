"""
Request-body composites for the comment endpoints.

Each composite runs the field validators and merges their errors in field
order, so a client sees every problem with the body in one response.
"""
import logging
from collections.abc import Mapping
from typing import Any, List, Optional

from comment_guard.config.constants import COMMENT_STATUSES, DEFAULT_COMMENT_STATUS
from comment_guard.models.query import ContentOptions
from comment_guard.models.validation import ValidationResult
from comment_guard.validation.author import validate_author
from comment_guard.validation.content import validate_comment_content
from comment_guard.validation.identifiers import IdPredicate, is_valid_object_id

logger = logging.getLogger(__name__)


def validate_new_comment(
    payload: Any,
    options: Optional[ContentOptions] = None,
    id_predicate: IdPredicate = is_valid_object_id,
) -> ValidationResult:
    """
    Validate a create-comment body: ``content``, ``author`` and an optional
    ``parentId`` for replies.

    Returns:
        ValidationResult with sanitized ``{"content", "author", "parentId"}``.
    """
    if not isinstance(payload, Mapping):
        logger.debug("Comment payload missing or not a mapping")
        return ValidationResult.from_errors(
            ["Comment data is required"],
            sanitized={"content": "", "author": {"name": "", "email": ""}, "parentId": None},
        )

    content_result = validate_comment_content(payload.get("content"), options)
    author_result = validate_author(payload.get("author"))

    errors: List[str] = content_result.errors + author_result.errors

    parent_id = payload.get("parentId")
    if parent_id is not None and not id_predicate(parent_id):
        errors.append("Invalid parent comment ID format")

    return ValidationResult.from_errors(
        errors,
        sanitized={
            "content": content_result.sanitized,
            "author": author_result.sanitized,
            "parentId": parent_id,
        },
    )


def validate_comment_update(
    payload: Any,
    options: Optional[ContentOptions] = None,
) -> ValidationResult:
    """Validate an edit-comment body; only ``content`` may change."""
    if not isinstance(payload, Mapping):
        return ValidationResult.from_errors(["Comment data is required"], sanitized={"content": ""})

    content_result = validate_comment_content(payload.get("content"), options)
    return ValidationResult.from_errors(
        content_result.errors, sanitized={"content": content_result.sanitized}
    )


def validate_comment_status(status: Any = None) -> ValidationResult:
    """Validate the ``status`` list filter; absent means ``approved``."""
    if status is None:
        return ValidationResult.from_errors([], sanitized=DEFAULT_COMMENT_STATUS)
    if status not in COMMENT_STATUSES:
        return ValidationResult.from_errors(
            [f"Comment status must be one of: {', '.join(COMMENT_STATUSES)}"],
            sanitized=DEFAULT_COMMENT_STATUS,
        )
    return ValidationResult.from_errors([], sanitized=status)
