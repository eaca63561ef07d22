"""
Validation of moderation payloads: user reports, moderator actions and
report reviews.

All three share one shape: a required enum field plus optional free-text
notes capped at MAX_NOTE_LENGTH.
"""
import logging
from collections.abc import Mapping
from typing import Any, List, Optional, Sequence

from comment_guard.config.constants import (
    MAX_NOTE_LENGTH,
    MODERATION_STATUSES,
    REPORT_REASONS,
    REVIEW_ACTIONS,
    REVIEW_STATUSES,
)
from comment_guard.models.validation import ValidationResult

logger = logging.getLogger(__name__)


def _check_required_choice(
    value: Any,
    choices: Sequence[str],
    label: str,
    errors: List[str],
) -> None:
    if not value:
        errors.append(f"{label} is required")
    elif value not in choices:
        errors.append(f"{label} must be one of: {', '.join(choices)}")


def _check_optional_text(value: Any, label: str, errors: List[str]) -> None:
    if not value:
        return
    if not isinstance(value, str):
        errors.append(f"{label} must be a string")
    elif len(value.strip()) > MAX_NOTE_LENGTH:
        errors.append(f"{label} cannot exceed {MAX_NOTE_LENGTH} characters")


def _trimmed(value: Any) -> str:
    return value.strip() if isinstance(value, str) else ""


def validate_report(report_data: Any) -> ValidationResult:
    """
    Validate a user report: ``reason`` from REPORT_REASONS, optional
    ``description`` of at most 500 characters.
    """
    if not isinstance(report_data, Mapping):
        logger.debug("Report payload missing or not a mapping")
        return ValidationResult.from_errors(
            ["Report data is required"],
            sanitized={"reason": None, "description": ""},
        )

    errors: List[str] = []
    reason = report_data.get("reason")
    description = report_data.get("description")

    _check_required_choice(reason, REPORT_REASONS, "Report reason", errors)
    _check_optional_text(description, "Report description", errors)

    return ValidationResult.from_errors(
        errors,
        sanitized={"reason": reason, "description": _trimmed(description)},
    )


def validate_moderation_action(action_data: Any) -> ValidationResult:
    """
    Validate a moderator decision: ``status`` from MODERATION_STATUSES,
    optional ``reason`` of at most 500 characters.
    """
    if not isinstance(action_data, Mapping):
        logger.debug("Moderation payload missing or not a mapping")
        return ValidationResult.from_errors(
            ["Moderation action data is required"],
            sanitized={"status": None, "reason": ""},
        )

    errors: List[str] = []
    status = action_data.get("status")
    reason = action_data.get("reason")

    _check_required_choice(status, MODERATION_STATUSES, "Moderation status", errors)
    _check_optional_text(reason, "Moderation reason", errors)

    return ValidationResult.from_errors(
        errors,
        sanitized={"status": status, "reason": _trimmed(reason)},
    )


def validate_report_review(review_data: Any) -> ValidationResult:
    """
    Validate a moderator's review of a report: ``status`` from
    REVIEW_STATUSES, optional ``notes`` and optional ``actionTaken`` from
    REVIEW_ACTIONS.
    """
    if not isinstance(review_data, Mapping):
        logger.debug("Review payload missing or not a mapping")
        return ValidationResult.from_errors(
            ["Review data is required"],
            sanitized={"status": None, "notes": "", "actionTaken": None},
        )

    errors: List[str] = []
    status = review_data.get("status")
    notes = review_data.get("notes")
    action_taken: Optional[Any] = review_data.get("actionTaken")

    _check_required_choice(status, REVIEW_STATUSES, "Review status", errors)
    _check_optional_text(notes, "Review notes", errors)
    if action_taken is not None and action_taken not in REVIEW_ACTIONS:
        errors.append(f"Action taken must be one of: {', '.join(REVIEW_ACTIONS)}")

    return ValidationResult.from_errors(
        errors,
        sanitized={"status": status, "notes": _trimmed(notes), "actionTaken": action_taken},
    )
