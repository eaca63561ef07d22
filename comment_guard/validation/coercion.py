"""
Lenient coercion of query-string values to ints and datetimes.
"""
import math
import re
from datetime import date, datetime, timezone
from typing import Any, Optional

_INT_PREFIX_RE = re.compile(r"\s*([+-]?[0-9]+)")

# Outside this magnitude range numbers print in exponent form ("1e+21").
_PLAIN_NOTATION_MIN = 1e-6
_PLAIN_NOTATION_MAX = 1e21


def _leading_int(text: str) -> Optional[int]:
    match = _INT_PREFIX_RE.match(text)
    if match is None:
        return None
    return int(match.group(1))


def parse_int_prefix(value: Any) -> Optional[int]:
    """
    Parse the leading integer of *value*, or return None.

    Strings are read up to the first non-digit (``"12abc"`` → 12,
    ``"1.9"`` → 1); only ASCII digits count. Numbers are read from their
    printed form, so ``3.7`` → 3 but ``1e300`` → 1 (the digits before the
    exponent). Booleans, non-finite numbers and anything else without a
    leading integer give None.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        if abs(value) < _PLAIN_NOTATION_MAX:
            return value
        try:
            value = float(value)
        except OverflowError:
            return None
    if isinstance(value, float):
        if not math.isfinite(value):
            return None
        if value == 0 or _PLAIN_NOTATION_MIN <= abs(value) < _PLAIN_NOTATION_MAX:
            return int(value)
        return _leading_int(repr(value))
    if not isinstance(value, str):
        return None
    return _leading_int(value)


def parse_datetime(value: Any) -> Optional[datetime]:
    """
    Parse *value* into a timezone-aware datetime, or return None.

    Accepts datetime/date objects, epoch milliseconds and ISO-8601 strings
    (a trailing ``Z`` is understood). Naive results are taken as UTC.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime(value.year, value.month, value.day)
    elif isinstance(value, (int, float)):
        try:
            parsed = datetime.fromtimestamp(value / 1000.0, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None
    elif isinstance(value, str):
        text = value.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return None
    else:
        return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed
