"""
Lightweight text signals: extracted contact/commercial elements,
word-list sentiment and readability metrics.
"""
import re
from typing import Dict, List

import numpy as np

from comment_guard.config.constants import NEGATIVE_WORDS, POSITIVE_WORDS, SPAM_PATTERNS

_URL_RE = re.compile(SPAM_PATTERNS["urls"], re.IGNORECASE)
_EMAIL_RE = re.compile(SPAM_PATTERNS["emails"], re.IGNORECASE)
_PHONE_RE = re.compile(SPAM_PATTERNS["phone_numbers"])
_COMMERCIAL_RE = re.compile(SPAM_PATTERNS["commercial_keywords"], re.IGNORECASE)
_SENTENCE_SPLIT_RE = re.compile(r"[.!?]+")

_POSITIVE = frozenset(POSITIVE_WORDS)
_NEGATIVE = frozenset(NEGATIVE_WORDS)


def _unique(items) -> List[str]:  # noqa: ANN001
    return list(dict.fromkeys(items))


def extract_problematic_elements(content: str) -> Dict[str, List[str]]:
    """
    Pull URLs, email addresses, phone numbers and commercial keywords out of
    *content*. Each list is de-duplicated, first occurrence first.
    """
    if not content:
        return {"urls": [], "emails": [], "phone_numbers": [], "suspicious_keywords": []}

    return {
        "urls": _unique(m.group(0) for m in _URL_RE.finditer(content)),
        "emails": _unique(m.group(0) for m in _EMAIL_RE.finditer(content)),
        "phone_numbers": _unique(m.group(0) for m in _PHONE_RE.finditer(content)),
        "suspicious_keywords": _unique(m.group(0).lower() for m in _COMMERCIAL_RE.finditer(content)),
    }


def analyze_sentiment(content: str) -> str:
    """'positive' | 'negative' | 'neutral' by counting lexicon words."""
    if not content:
        return "neutral"

    words = content.lower().split()
    positive = sum(1 for w in words if w in _POSITIVE)
    negative = sum(1 for w in words if w in _NEGATIVE)

    if positive > negative:
        return "positive"
    if negative > positive:
        return "negative"
    return "neutral"


def analyze_complexity(content: str) -> dict:
    """
    Readability metrics and a 0..100 complexity score.

    score = 10 × avg word length + 30 × vocabulary richness
            + 20 × min(avg sentence length / 10, 1), capped at 100.

    Returns:
        {"score": int, "metrics": {...}}; metrics is empty for empty content.
    """
    if not content:
        return {"score": 0, "metrics": {}}

    words = content.split()
    sentences = [s for s in _SENTENCE_SPLIT_RE.split(content) if s.strip()]

    avg_word_length = float(np.mean([len(w) for w in words])) if words else 0.0
    avg_sentence_length = len(words) / len(sentences) if sentences else 0.0
    unique_words = len({w.lower() for w in words})
    vocabulary_richness = unique_words / len(words) if words else 0.0

    metrics = {
        "word_count": len(words),
        "sentence_count": len(sentences),
        "avg_word_length": round(avg_word_length, 2),
        "avg_sentence_length": round(avg_sentence_length, 2),
        "vocabulary_richness": round(vocabulary_richness, 2),
        "unique_word_count": unique_words,
    }

    raw = (
        avg_word_length * 10
        + vocabulary_richness * 30
        + min(avg_sentence_length / 10, 1.0) * 20
    )
    score = int(round(float(np.clip(raw, 0.0, 100.0))))

    return {"score": score, "metrics": metrics}
