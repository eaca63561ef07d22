"""
Spam Scoring — rule-based parametric scorer.

Computes a 0..100 spam score by combining:
- Per-pattern match counts (URLs, emails, phone numbers, repeated chars,
  commercial/urgency keywords, shouting, repeated phrases)
- Suspicious-topic keywords (lottery, pharmacy, finance, promises)
- Length extremes
- Author history

Weights are configurable per instance.
"""
import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Dict, Optional

import numpy as np

from comment_guard.config import settings
from comment_guard.config.constants import (
    CASE_SENSITIVE_PATTERNS,
    MAX_SPAM_SCORE,
    SINGLE_HIT_PATTERNS,
    SPAM_PATTERNS,
    SUSPICIOUS_PATTERNS,
)

DEFAULT_WEIGHTS: Dict[str, float] = {
    "urls": 15,
    "emails": 10,
    "phone_numbers": 8,
    "repeated_chars": 5,
    "commercial_keywords": 3,
    "urgency_keywords": 4,
    "excessive_caps": 6,
    "repeated_phrases": 8,
    "suspicious_keyword": 2,
    "very_short": 5,
    "very_long": 3,
    "new_user": 5,
    "spam_history": 10,
}

VERY_SHORT_CHARS: int = 5
VERY_LONG_CHARS: int = 800

_COMPILED_SPAM = {
    name: re.compile(pattern, 0 if name in CASE_SENSITIVE_PATTERNS else re.IGNORECASE)
    for name, pattern in SPAM_PATTERNS.items()
}
_COMPILED_SUSPICIOUS = {
    name: re.compile(pattern, re.IGNORECASE) for name, pattern in SUSPICIOUS_PATTERNS.items()
}


@dataclass(frozen=True)
class SpamVerdict:
    is_spam: bool
    score: int
    threshold: int

    def to_dict(self) -> dict:
        return {"is_spam": self.is_spam, "score": self.score, "threshold": self.threshold}


def count_suspicious_matches(content: str) -> int:
    """Total suspicious-topic keyword hits in *content*."""
    return sum(len(p.findall(content)) for p in _COMPILED_SUSPICIOUS.values())


class SpamScorer:
    """
    Parametric spam scorer with configurable weights.

    Scores are clipped to [0, 100]; ``detect`` compares against a
    threshold (default SPAM_THRESHOLD from settings, 15).
    """

    def __init__(self, weights: Optional[Dict[str, float]] = None):
        self.weights = weights if weights is not None else DEFAULT_WEIGHTS.copy()

    def score(self, content: str, author_info: Optional[Mapping] = None) -> int:
        """
        Compute the spam score of *content*.

        Args:
            content: Comment text (ideally already passed through strip_markup).
            author_info: Optional ``{"is_new_user": bool, "has_history": bool,
                         "spam_history": bool}``.

        Returns:
            Integer score in [0, 100]; 0 for empty content.
        """
        if not content:
            return 0

        raw_score = 0.0

        # 1. Spam patterns
        for name, pattern in _COMPILED_SPAM.items():
            hits = len(pattern.findall(content))
            if hits == 0:
                continue
            if name in SINGLE_HIT_PATTERNS:
                raw_score += self.weights[name]
            else:
                raw_score += self.weights[name] * hits

        # 2. Suspicious topics (lower weight)
        raw_score += self.weights["suspicious_keyword"] * count_suspicious_matches(content)

        # 3. Length extremes
        if len(content) < VERY_SHORT_CHARS:
            raw_score += self.weights["very_short"]
        elif len(content) > VERY_LONG_CHARS:
            raw_score += self.weights["very_long"]

        # 4. Author history
        author_info = author_info or {}
        if author_info.get("is_new_user"):
            raw_score += self.weights["new_user"]
        if author_info.get("has_history") and author_info.get("spam_history"):
            raw_score += self.weights["spam_history"]

        return int(np.clip(raw_score, 0, MAX_SPAM_SCORE))

    def detect(
        self,
        content: str,
        author_info: Optional[Mapping] = None,
        threshold: Optional[int] = None,
    ) -> SpamVerdict:
        """Score *content* and compare against *threshold*."""
        if threshold is None:
            threshold = settings.SPAM_THRESHOLD
        spam_score = self.score(content, author_info)
        return SpamVerdict(is_spam=spam_score >= threshold, score=spam_score, threshold=threshold)


def author_info_from_request(raw: Any) -> Dict[str, bool]:
    """Normalise an author-info mapping sent with camelCase keys."""
    if not isinstance(raw, Mapping):
        return {}
    return {
        "is_new_user": bool(raw.get("isNewUser", raw.get("is_new_user", False))),
        "has_history": bool(raw.get("hasHistory", raw.get("has_history", False))),
        "spam_history": bool(raw.get("spamHistory", raw.get("spam_history", False))),
    }


# Module-level default scorer instance
spam_scorer = SpamScorer()
