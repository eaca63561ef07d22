"""
Request Gate — caller-side adapter between validators and HTTP handlers.

Validators report problems as data. The gate is where a handler turns a
failing result into a 400 response (or an exception its framework maps to
one), and where metrics and logs for validation are recorded.
"""
import logging
import time
from typing import Any, Callable, List, Optional, Tuple

from jsonschema import ValidationError, validate

from comment_guard.config import settings
from comment_guard.config.schemas import ERROR_RESPONSE_SCHEMA
from comment_guard.gate.metrics import (
    classify_error,
    record_moderation_decision,
    record_validation_call,
    record_validation_failure,
    timed_validator,
)
from comment_guard.models.analysis import ContentAnalysis
from comment_guard.models.validation import ValidationResult
from comment_guard.screening.analyzer import analyze_content, decide_moderation
from comment_guard.screening.spam_scorer import author_info_from_request

logger = logging.getLogger(__name__)

VALIDATION_ERROR_CODE: str = "VALIDATION_ERROR"


class RequestValidationError(Exception):
    """Raised by require_valid() when a validator rejects the input."""

    status_code = 400

    def __init__(self, validator: str, errors: List[str]) -> None:
        self.validator = validator
        self.errors = list(errors)
        super().__init__(f"Validation failed in '{validator}': {self.errors}")

    def to_response(self) -> Tuple[int, dict]:
        """
        Build ``(400, body)`` for this error.

        Raises:
            jsonschema.ValidationError: if the body breaks ERROR_RESPONSE_SCHEMA
                (for example, an empty error list).
        """
        return self.status_code, _checked_body({
            "error": "Validation failed",
            "code": VALIDATION_ERROR_CODE,
            "errors": self.errors,
            "validator": self.validator,
        })


def _checked_body(body: dict) -> dict:
    """Return *body* after checking it against ERROR_RESPONSE_SCHEMA."""
    try:
        validate(instance=body, schema=ERROR_RESPONSE_SCHEMA)
    except ValidationError as e:
        logger.error("Error response violates schema: %s", e.message)
        raise
    return body


def build_error_response(result: ValidationResult) -> Tuple[int, dict]:
    """
    Map a failing ValidationResult to ``(400, body)``.

    Raises:
        ValueError: if *result* is valid (there is nothing to report).
    """
    if result.is_valid:
        raise ValueError("build_error_response() called with a valid result")
    return 400, _checked_body({
        "error": "Validation failed",
        "code": VALIDATION_ERROR_CODE,
        "errors": list(result.errors),
    })


def record_result(validator: str, result: ValidationResult) -> None:
    """Count the outcome of one validator call and categorise its errors."""
    record_validation_call(validator, result.is_valid)
    for message in result.errors:
        record_validation_failure(validator, classify_error(message))


def run_validator(
    validator: str,
    fn: Callable[..., ValidationResult],
    *args: Any,
    **kwargs: Any,
) -> ValidationResult:
    """Call *fn*, time it under *validator*, and record the outcome."""
    with timed_validator(validator):
        result = fn(*args, **kwargs)
    record_result(validator, result)
    if not result.is_valid:
        logger.warning("Validation failed in %s: %s", validator, result.errors)
    return result


def require_valid(validator: str, result: ValidationResult) -> Any:
    """
    Return ``result.sanitized`` or raise.

    Raises:
        RequestValidationError: if *result* carries errors.
    """
    if result.is_valid:
        return result.sanitized
    logger.warning("Rejecting request in %s: %s", validator, result.errors)
    raise RequestValidationError(validator, result.errors)


def screen_comment(
    content: Any,
    author_info: Any = None,
    trust_level: Optional[str] = None,
    flag_for_review: bool = False,
) -> Tuple[ContentAnalysis, str]:
    """
    Screen a comment body and decide its initial moderation status.

    Args:
        content: Comment body (already validated).
        author_info: Author history as sent by the auth layer (camelCase or snake_case keys).
        trust_level: "trusted" | "low" | None.
        flag_for_review: Force a manual review.

    Returns:
        ``(analysis, decision)`` where decision is "approved" | "rejected" | "pending".
    """
    start_time = time.monotonic()
    analysis = analyze_content(content, author_info_from_request(author_info))
    decision = decide_moderation(analysis, trust_level=trust_level, flag_for_review=flag_for_review)
    record_moderation_decision(decision)

    if decision != "approved":
        logger.info(
            "Comment %s (spam_score=%d, blocked_terms=%s) in %.1fms",
            decision,
            analysis.spam.score,
            analysis.blocked_terms.terms,
            (time.monotonic() - start_time) * 1000,
        )
    return analysis, decision


def configure_logging(level: Optional[str] = None) -> None:
    """Apply LOG_LEVEL / LOG_FORMAT from settings to the root logger."""
    logging.basicConfig(
        level=getattr(logging, (level or settings.LOG_LEVEL).upper(), logging.INFO),
        format=settings.LOG_FORMAT,
    )
