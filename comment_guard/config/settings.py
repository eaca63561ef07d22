"""
Environment settings loaded from .env file.
"""
import os
from typing import Tuple

from dotenv import load_dotenv

from comment_guard.config import constants

load_dotenv()


# --- Content limits ---
MAX_COMMENT_LENGTH: int = int(os.getenv("MAX_COMMENT_LENGTH", str(constants.MAX_COMMENT_LENGTH)))
MAX_BULK_ITEMS: int = int(os.getenv("MAX_BULK_ITEMS", str(constants.MAX_BULK_ITEMS)))

# --- Screening ---
SPAM_THRESHOLD: int = int(os.getenv("SPAM_THRESHOLD", str(constants.SPAM_THRESHOLD)))
BLOCKED_TERMS: Tuple[str, ...] = tuple(
    term.strip().lower()
    for term in os.getenv("BLOCKED_TERMS", ",".join(constants.BLOCKED_TERMS)).split(",")
    if term.strip()
)

# --- Logging ---
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
LOG_FORMAT: str = os.getenv("LOG_FORMAT", "%(asctime)s [%(levelname)s] %(name)s - %(message)s")
