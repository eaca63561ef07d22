"""
Value objects for validated query parameters and content options.
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from comment_guard.config import constants, settings


@dataclass(frozen=True)
class ContentOptions:
    """Bounds applied by validate_comment_content()."""

    min_length: int = 1
    max_length: int = field(default_factory=lambda: settings.MAX_COMMENT_LENGTH)
    allow_empty: bool = False


@dataclass(frozen=True)
class PaginationSpec:
    page: int = constants.DEFAULT_PAGE
    limit: int = constants.DEFAULT_LIMIT

    @property
    def offset(self) -> int:
        """Number of records to skip for this page."""
        return (self.page - 1) * self.limit

    def to_dict(self) -> dict:
        return {"page": self.page, "limit": self.limit}


@dataclass(frozen=True)
class SortSpec:
    field: str = constants.DEFAULT_SORT_FIELD
    order: str = constants.DEFAULT_SORT_ORDER

    @property
    def direction(self) -> int:
        """1 for ascending, -1 for descending."""
        return 1 if self.order == "asc" else -1

    def to_dict(self) -> dict:
        return {"sort": self.field, "order": self.order}


@dataclass(frozen=True)
class DateRange:
    """Inclusive date window; a missing bound is ``None``."""

    date_from: Optional[datetime] = None
    date_to: Optional[datetime] = None

    def contains(self, moment: datetime) -> bool:
        if self.date_from is not None and moment < self.date_from:
            return False
        if self.date_to is not None and moment > self.date_to:
            return False
        return True

    def to_dict(self) -> dict:
        return {
            "dateFrom": self.date_from.isoformat() if self.date_from else None,
            "dateTo": self.date_to.isoformat() if self.date_to else None,
        }
