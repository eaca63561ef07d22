"""
Blocked-term detection and masking (whole words, case-insensitive).
"""
import re
from typing import List, Optional, Sequence

from comment_guard.config import settings


def _terms_regex(terms: Sequence[str]) -> Optional["re.Pattern[str]"]:
    cleaned = sorted({t.strip().lower() for t in terms if t and t.strip()}, key=len, reverse=True)
    if not cleaned:
        return None
    alternation = "|".join(re.escape(t) for t in cleaned)
    return re.compile(rf"\b(?:{alternation})\b", re.IGNORECASE)


def find_blocked_terms(content: str, terms: Optional[Sequence[str]] = None) -> List[str]:
    """Distinct blocked terms present in *content*, lower-cased, in order of first hit."""
    if not content:
        return []
    pattern = _terms_regex(settings.BLOCKED_TERMS if terms is None else terms)
    if pattern is None:
        return []
    hits = (m.group(0).lower() for m in pattern.finditer(content))
    return list(dict.fromkeys(hits))


def mask_blocked_terms(content: str, terms: Optional[Sequence[str]] = None) -> str:
    """Replace every blocked term in *content* with asterisks of the same length."""
    if not content:
        return ""
    pattern = _terms_regex(settings.BLOCKED_TERMS if terms is None else terms)
    if pattern is None:
        return content
    return pattern.sub(lambda m: "*" * len(m.group(0)), content)
