"""
Bulk moderation payload validation (``{"ids": [...], ...}``).
"""
import logging
from collections.abc import Mapping
from typing import Any, List, Optional

from comment_guard.config import settings
from comment_guard.models.validation import ValidationResult
from comment_guard.validation.identifiers import IdPredicate, is_valid_object_id
from comment_guard.validation.sanitize import sanitize_user_input

logger = logging.getLogger(__name__)


def validate_bulk_operation(
    data: Any,
    max_items: Optional[int] = None,
    id_predicate: IdPredicate = is_valid_object_id,
) -> ValidationResult:
    """
    Validate a bulk request.

    ``ids`` must be a non-empty list of at most *max_items* identifiers
    accepted by *id_predicate*. Every other field is passed through
    sanitize_user_input() into the sanitized payload.

    Args:
        data: Raw request body.
        max_items: Upper bound on ``len(ids)`` (default MAX_BULK_ITEMS, 50).
        id_predicate: Identifier format rule (default: 24-hex object ids).
    """
    if max_items is None:
        max_items = settings.MAX_BULK_ITEMS

    if not isinstance(data, Mapping):
        logger.debug("Bulk payload missing or not a mapping")
        return ValidationResult.from_errors(["Bulk operation data is required"], sanitized={"ids": []})

    errors: List[str] = []
    ids = data.get("ids")

    if not isinstance(ids, (list, tuple)):
        errors.append("IDs array is required")
    elif len(ids) == 0:
        errors.append("At least one ID is required")
    elif len(ids) > max_items:
        errors.append(f"Cannot process more than {max_items} items at once")
    else:
        invalid_ids = [item for item in ids if not id_predicate(item)]
        if invalid_ids:
            errors.append(f"Invalid ID format: {', '.join(str(item) for item in invalid_ids)}")

    sanitized = {"ids": list(ids) if isinstance(ids, (list, tuple)) else []}
    for key, value in data.items():
        if key != "ids":
            sanitized[key] = sanitize_user_input(value)

    return ValidationResult.from_errors(errors, sanitized=sanitized)
