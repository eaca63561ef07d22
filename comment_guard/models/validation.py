"""
ValidationResult — outcome of a single validator call.
"""
from dataclasses import dataclass, field
from typing import Any, List, Optional


@dataclass
class ValidationResult:
    """
    Result of validating one untrusted input.

    ``is_valid`` always equals ``not errors``; build instances through
    :meth:`from_errors` rather than setting the flag by hand.
    ``sanitized`` is populated even on failure with best-effort defaults.
    """

    is_valid: bool
    errors: List[str] = field(default_factory=list)
    sanitized: Any = None

    @classmethod
    def from_errors(cls, errors: Optional[List[str]], sanitized: Any = None) -> "ValidationResult":
        errors = list(errors or [])
        return cls(is_valid=len(errors) == 0, errors=errors, sanitized=sanitized)

    @property
    def values(self) -> Any:
        """Alias of ``sanitized`` used by the query-parameter validators."""
        return self.sanitized

    def to_dict(self) -> dict:
        sanitized = self.sanitized
        if hasattr(sanitized, "to_dict"):
            sanitized = sanitized.to_dict()
        return {
            "is_valid": self.is_valid,
            "errors": list(self.errors),
            "sanitized": sanitized,
        }
