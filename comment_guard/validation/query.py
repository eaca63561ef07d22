"""
Query-string validation: pagination, sorting, date windows.

Each validator returns a ValidationResult whose ``values`` always hold a
usable value object; invalid parameters fall back to the defaults and add an error.
``None`` means the parameter was not sent.
"""
from typing import Any, List, Sequence

from comment_guard.config.constants import (
    DEFAULT_LIMIT,
    DEFAULT_PAGE,
    DEFAULT_SORT_FIELD,
    DEFAULT_SORT_FIELDS,
    DEFAULT_SORT_ORDER,
    MAX_LIMIT,
    SORT_ORDERS,
)
from comment_guard.models.query import DateRange, PaginationSpec, SortSpec
from comment_guard.models.validation import ValidationResult
from comment_guard.validation.coercion import parse_datetime, parse_int_prefix


def validate_pagination(page: Any = None, limit: Any = None) -> ValidationResult:
    """
    Validate ``page`` (integer >= 1) and ``limit`` (integer in 1..100).

    Defaults: page 1, limit 20, kept on error.
    """
    errors: List[str] = []
    valid_page = DEFAULT_PAGE
    valid_limit = DEFAULT_LIMIT

    if page is not None:
        page_num = parse_int_prefix(page)
        if page_num is None or page_num < 1:
            errors.append("Page must be a positive integer")
        else:
            valid_page = page_num

    if limit is not None:
        limit_num = parse_int_prefix(limit)
        if limit_num is None or limit_num < 1:
            errors.append("Limit must be a positive integer")
        elif limit_num > MAX_LIMIT:
            errors.append(f"Limit cannot exceed {MAX_LIMIT}")
        else:
            valid_limit = limit_num

    return ValidationResult.from_errors(
        errors, sanitized=PaginationSpec(page=valid_page, limit=valid_limit)
    )


def validate_sort(
    sort: Any = None,
    order: Any = None,
    allowed_fields: Sequence[str] = DEFAULT_SORT_FIELDS,
) -> ValidationResult:
    """
    Validate a sort field against *allowed_fields* and an ``asc``/``desc`` order.

    Defaults: ``createdAt`` / ``desc``.
    """
    errors: List[str] = []
    valid_sort = DEFAULT_SORT_FIELD
    valid_order = DEFAULT_SORT_ORDER

    if sort is not None:
        if sort not in allowed_fields:
            errors.append(f"Sort field must be one of: {', '.join(allowed_fields)}")
        else:
            valid_sort = sort

    if order is not None:
        if order not in SORT_ORDERS:
            errors.append('Sort order must be "asc" or "desc"')
        else:
            valid_order = order

    return ValidationResult.from_errors(
        errors, sanitized=SortSpec(field=valid_sort, order=valid_order)
    )


def validate_date_range(date_from: Any = None, date_to: Any = None) -> ValidationResult:
    """
    Validate an optional ``dateFrom``/``dateTo`` window.

    Empty values are treated as absent. Unparseable bounds are reported and
    left as None. When both bounds parse, ``dateFrom`` must not be later
    than ``dateTo``.
    """
    errors: List[str] = []
    valid_from = None
    valid_to = None

    if date_from:
        valid_from = parse_datetime(date_from)
        if valid_from is None:
            errors.append("Invalid dateFrom format")

    if date_to:
        valid_to = parse_datetime(date_to)
        if valid_to is None:
            errors.append("Invalid dateTo format")

    if valid_from is not None and valid_to is not None and valid_from > valid_to:
        errors.append("dateFrom must be before dateTo")

    return ValidationResult.from_errors(
        errors, sanitized=DateRange(date_from=valid_from, date_to=valid_to)
    )
