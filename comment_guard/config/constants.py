"""
Constants used across validation and screening.
Closed enums and limits mirror the Comments API contract.
"""
from typing import Dict, List, Tuple

# =============================================================================
# Closed enums
# =============================================================================
REPORT_REASONS: Tuple[str, ...] = (
    "spam",
    "inappropriate",
    "harassment",
    "hate_speech",
    "violence",
    "misinformation",
    "copyright",
    "other",
)

MODERATION_STATUSES: Tuple[str, ...] = ("approved", "rejected", "flagged")

REVIEW_STATUSES: Tuple[str, ...] = ("reviewed", "resolved", "dismissed")

REVIEW_ACTIONS: Tuple[str, ...] = (
    "none",
    "comment_removed",
    "comment_flagged",
    "user_warned",
    "user_banned",
)

COMMENT_STATUSES: Tuple[str, ...] = ("pending", "approved", "rejected", "flagged")
DEFAULT_COMMENT_STATUS: str = "approved"

# Sortable comment fields (API names, camelCase on the wire)
DEFAULT_SORT_FIELDS: Tuple[str, ...] = ("createdAt", "likes", "reports")
SORT_ORDERS: Tuple[str, ...] = ("asc", "desc")
DEFAULT_SORT_FIELD: str = "createdAt"
DEFAULT_SORT_ORDER: str = "desc"

# =============================================================================
# Limits
# =============================================================================
MAX_COMMENT_LENGTH: int = 1000
MAX_AUTHOR_NAME_LENGTH: int = 50
MAX_NOTE_LENGTH: int = 500          # report description, moderation reason, review notes
MAX_BULK_ITEMS: int = 50

DEFAULT_PAGE: int = 1
DEFAULT_LIMIT: int = 20
MAX_LIMIT: int = 100

# =============================================================================
# Format patterns
# =============================================================================
OBJECT_ID_PATTERN: str = r"[0-9a-fA-F]{24}"
EMAIL_PATTERN: str = r"[^\s@]+@[^\s@]+\.[^\s@]+"
AUTHOR_NAME_PATTERN: str = r"[a-zA-Z0-9\s\-_.]+"

IPV4_PATTERN: str = (
    r"(?:(?:25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?)\.){3}"
    r"(?:25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?)"
)
# Full 8-group form plus the loopback/unspecified shorthands only.
IPV6_PATTERN: str = r"(?:[0-9a-fA-F]{1,4}:){7}[0-9a-fA-F]{1,4}|::1|::"

SCRIPT_BLOCK_PATTERN: str = r"<script\b[^<]*(?:(?!</script>)<[^<]*)*</script>"
JAVASCRIPT_URL_PATTERN: str = r"javascript:"
EVENT_HANDLER_PATTERN: str = r"on\w+\s*="

# =============================================================================
# Screening: blocked terms (platform list, extended via settings)
# =============================================================================
BLOCKED_TERMS: Tuple[str, ...] = ("spam", "scam", "phishing", "bot", "fake")

# =============================================================================
# Screening: spam patterns and weights
# =============================================================================
SPAM_PATTERNS: Dict[str, str] = {
    "urls": r"https?://[^\s]+",
    "emails": r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b",
    "phone_numbers": r"\b(?:\d{1,3}[-.]){2,}\d{1,4}\b",
    "repeated_chars": r"(.)\1{5,}",
    "commercial_keywords": (
        r"\b(?:buy|sell|cheap|free|discount|offer|deal|visit|click|website"
        r"|link|money|cash|prize|win|winner)\b"
    ),
    "urgency_keywords": (
        r"\b(?:urgent|immediate|asap|hurry|limited time|act now|don't miss"
        r"|expires|deadline)\b"
    ),
    "excessive_caps": r"[A-Z]{10,}",
    "repeated_phrases": r"(.{3,})\s*\1\s*\1",
}

# Patterns scored as a single hit regardless of match count
SINGLE_HIT_PATTERNS: Tuple[str, ...] = ("excessive_caps",)

# Patterns matched case-sensitively (all others ignore case)
CASE_SENSITIVE_PATTERNS: Tuple[str, ...] = ("excessive_caps",)

SUSPICIOUS_PATTERNS: Dict[str, str] = {
    "lottery": r"\b(?:lottery|million|inheritance|beneficiary|deceased|will|testament)\b",
    "medical": r"\b(?:viagra|cialis|pharmacy|prescription|pills|medication|cure|treatment)\b",
    "financial": r"\b(?:loan|credit|debt|mortgage|investment|profit|income|earning)\b",
    "promises": r"\b(?:guarantee|100%|risk.?free|no.?obligation|satisfaction|promised)\b",
}

REPEATED_CONTENT_PATTERN: str = r"(.{10,})\s*\1"

SPAM_THRESHOLD: int = 15
MAX_SPAM_SCORE: int = 100

# =============================================================================
# Screening: sentiment lexicon
# =============================================================================
POSITIVE_WORDS: List[str] = [
    "good", "great", "excellent", "amazing", "awesome", "fantastic", "wonderful",
    "love", "like", "enjoy", "happy", "pleased", "satisfied", "perfect", "brilliant",
]

NEGATIVE_WORDS: List[str] = [
    "bad", "terrible", "awful", "horrible", "worst", "hate", "dislike", "angry",
    "frustrated", "disappointed", "annoyed", "disgusted", "furious", "outraged",
]

SHORT_CONTENT_CHARS: int = 10
LONG_CONTENT_CHARS: int = 800
