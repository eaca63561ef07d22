"""
Identifier format predicates.

The store's identifiers are 24 hex characters; callers that need another
format build their own predicate with :func:`pattern_id_predicate` and pass
it as ``id_predicate`` to the validators that check identifiers.
"""
import re
from typing import Any, Callable

from comment_guard.config.constants import OBJECT_ID_PATTERN

IdPredicate = Callable[[Any], bool]

_OBJECT_ID_RE = re.compile(OBJECT_ID_PATTERN)


def is_valid_object_id(value: Any) -> bool:
    """True when *value* is a 24-character hexadecimal string."""
    return isinstance(value, str) and _OBJECT_ID_RE.fullmatch(value) is not None


def pattern_id_predicate(pattern: str, flags: int = 0) -> IdPredicate:
    """Build an identifier predicate that full-matches string ids against *pattern*."""
    compiled = re.compile(pattern, flags)

    def predicate(value: Any) -> bool:
        return isinstance(value, str) and compiled.fullmatch(value) is not None

    return predicate
