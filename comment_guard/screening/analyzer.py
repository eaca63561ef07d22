"""
Content Analysis — full screening of one comment body.

Executes, on the markup-stripped text:
    1. Blocked-term detection (+ masked copy)
    2. Spam scoring
    3. Element extraction (URLs, emails, phones, commercial keywords)
    4. Sentiment
    5. Complexity
    6. Flag derivation

and the auto-moderation decision that consumes the flags.
"""
import logging
import re
import time
from collections.abc import Mapping
from typing import Any, Optional, Sequence

from comment_guard.config.constants import (
    LONG_CONTENT_CHARS,
    REPEATED_CONTENT_PATTERN,
    SHORT_CONTENT_CHARS,
)
from comment_guard.models.analysis import (
    AnalysisMeta,
    BlockedTermsReport,
    ComplexityReport,
    ContentAnalysis,
    ContentFlags,
    ProblematicElements,
    SpamReport,
)
from comment_guard.screening.markup import strip_markup
from comment_guard.screening.signals import (
    analyze_complexity,
    analyze_sentiment,
    extract_problematic_elements,
)
from comment_guard.screening.spam_scorer import SpamScorer, count_suspicious_matches, spam_scorer
from comment_guard.screening.terms import find_blocked_terms, mask_blocked_terms

logger = logging.getLogger(__name__)

_REPEATED_CONTENT_RE = re.compile(REPEATED_CONTENT_PATTERN, re.IGNORECASE)


def analyze_content(
    content: Any,
    author_info: Optional[Mapping] = None,
    scorer: Optional[SpamScorer] = None,
    blocked_terms: Optional[Sequence[str]] = None,
    spam_threshold: Optional[int] = None,
) -> ContentAnalysis:
    """
    Screen a comment body.

    Args:
        content: Raw comment body; non-strings are screened as "".
        author_info: Author history for the spam scorer.
        scorer: SpamScorer instance. Defaults to the module-level scorer.
        blocked_terms: Blocked-term list. Defaults to settings.BLOCKED_TERMS.
        spam_threshold: Spam cut-off. Defaults to settings.SPAM_THRESHOLD.

    Returns:
        ContentAnalysis report.
    """
    start_time = time.monotonic()
    if scorer is None:
        scorer = spam_scorer

    raw = content if isinstance(content, str) else ""
    sanitized = strip_markup(raw)

    hits = find_blocked_terms(sanitized, blocked_terms)
    blocked = BlockedTermsReport(
        detected=bool(hits),
        terms=hits,
        masked=mask_blocked_terms(sanitized, blocked_terms) if hits else None,
    )

    verdict = scorer.detect(sanitized, author_info, threshold=spam_threshold)
    elements = ProblematicElements(**extract_problematic_elements(sanitized))
    complexity = ComplexityReport(**analyze_complexity(sanitized))

    flags = ContentFlags(
        has_blocked_terms=blocked.detected,
        is_spam=verdict.is_spam,
        is_suspicious=bool(
            elements.urls
            or elements.emails
            or elements.phone_numbers
            or count_suspicious_matches(sanitized)
        ),
        contains_urls=bool(elements.urls),
        contains_emails=bool(elements.emails),
        contains_phones=bool(elements.phone_numbers),
        has_repeated_content=_REPEATED_CONTENT_RE.search(raw) is not None,
        is_short=len(sanitized) < SHORT_CONTENT_CHARS,
        is_long=len(sanitized) > LONG_CONTENT_CHARS,
    )

    elapsed_ms = int((time.monotonic() - start_time) * 1000)

    return ContentAnalysis(
        sanitized=sanitized,
        blocked_terms=blocked,
        spam=SpamReport(**verdict.to_dict()),
        elements=elements,
        sentiment=analyze_sentiment(sanitized),
        complexity=complexity,
        flags=flags,
        meta=AnalysisMeta(
            original_length=len(raw),
            sanitized_length=len(sanitized),
            processing_ms=elapsed_ms,
        ),
    )


def decide_moderation(
    analysis: ContentAnalysis,
    trust_level: Optional[str] = None,
    flag_for_review: bool = False,
) -> str:
    """
    Auto-moderation decision for a screened comment.

    Rules (first match wins):
        trusted author, no blocked terms, not spam   → approved
        blocked terms and spam                       → rejected
        blocked terms from a low-trust author        → rejected
        any flag raised, or review requested         → pending
        otherwise                                    → approved
    """
    flags = analysis.flags

    if trust_level == "trusted" and not flags.has_blocked_terms and not flags.is_spam:
        return "approved"

    if flags.has_blocked_terms and flags.is_spam:
        return "rejected"

    if flags.has_blocked_terms and trust_level == "low":
        return "rejected"

    if flags.has_blocked_terms or flags.is_spam or flags.is_suspicious or flag_for_review:
        logger.debug(
            "Comment held for review (blocked=%s spam=%s suspicious=%s requested=%s)",
            flags.has_blocked_terms, flags.is_spam, flags.is_suspicious, flag_for_review,
        )
        return "pending"

    return "approved"
