"""
Prometheus Metrics — validation and moderation observability.

Exposes counters and histograms for:
- Validation failures per validator and error category
- Validation latency per validator
- Auto-moderation decisions per outcome

Usage
-----
    from comment_guard.gate.metrics import record_validation_failure, timed_validator

    with timed_validator("validate_author"):
        result = validate_author(body.get("author"))

    for message in result.errors:
        record_validation_failure("validate_author", classify_error(message))
"""
from __future__ import annotations

from contextlib import contextmanager
from typing import Generator

from prometheus_client import Counter, Histogram


# ---------------------------------------------------------------------------
# Metric definitions
# ---------------------------------------------------------------------------

# Total validation errors, labelled by validator and error category.
VALIDATION_FAILURES: Counter = Counter(
    "comment_validation_failures_total",
    "Validation errors by validator and error category",
    ["validator", "category"],
)

# Validator calls, labelled by outcome ("valid" / "invalid").
VALIDATION_CALLS: Counter = Counter(
    "comment_validation_calls_total",
    "Validator invocations by outcome",
    ["validator", "outcome"],
)

# Validator latency (seconds).
VALIDATION_LATENCY: Histogram = Histogram(
    "comment_validation_seconds",
    "Validator processing time in seconds",
    ["validator"],
    buckets=(0.0005, 0.001, 0.005, 0.01, 0.05, 0.1, 0.5),
)

# Auto-moderation outcomes.
MODERATION_DECISIONS: Counter = Counter(
    "comment_moderation_decisions_total",
    "Auto-moderation decisions by outcome",
    ["decision"],
)


# ---------------------------------------------------------------------------
# Error categories
# ---------------------------------------------------------------------------

_CATEGORY_MARKERS = (
    ("disallowed_content", ("not allowed",)),
    ("cross_field", ("must be before",)),
    ("wrong_type", ("must be a string", "array is required")),
    ("missing", ("is required", "cannot be empty")),
    ("length", ("cannot exceed", "at least", "more than")),
    ("format", ("must be one of", "invalid", "must be a positive", "must be \"asc\"")),
)


def classify_error(message: str) -> str:
    """Map a validator error message to a coarse category label."""
    lowered = message.lower()
    for category, markers in _CATEGORY_MARKERS:
        if any(marker in lowered for marker in markers):
            return category
    return "other"


# ---------------------------------------------------------------------------
# Convenience helpers
# ---------------------------------------------------------------------------

def record_validation_failure(validator: str, category: str = "other") -> None:
    """Increment the failure counter for *validator*."""
    VALIDATION_FAILURES.labels(validator=validator, category=category).inc()


def record_validation_call(validator: str, valid: bool) -> None:
    VALIDATION_CALLS.labels(validator=validator, outcome="valid" if valid else "invalid").inc()


def record_moderation_decision(decision: str) -> None:
    MODERATION_DECISIONS.labels(decision=decision).inc()


@contextmanager
def timed_validator(validator: str) -> Generator[None, None, None]:
    """
    Context manager that records validator latency.

    Usage::

        with timed_validator("validate_report"):
            result = validate_report(body)
    """
    with VALIDATION_LATENCY.labels(validator=validator).time():
        yield
