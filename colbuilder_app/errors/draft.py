"""
Draft error classifications for column definitions.

These exceptions categorize the ways a draft column definition can be
refused, either at evaluation time or at the input boundary.
"""

from typing import Optional, Dict, Any


class DraftError(Exception):
    """Base class for problems with the draft column definition."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = True


class ValidationRejected(DraftError):
    """A required field is missing or a numeric field is zero where disallowed."""

    def __init__(self, message: str, field: Optional[str] = None,
                 value: Any = None, kind: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.field = field
        self.value = value
        self.kind = kind


class DraftFieldError(DraftError):
    """Unknown draft field or a value outside a fixed option set."""

    def __init__(self, message: str, field: Optional[str] = None,
                 allowed: Optional[list] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.field = field
        self.allowed = allowed or []


class UnknownColumnKindError(DraftError):
    """Column kind outside the supported enumeration."""

    def __init__(self, message: str, kind: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.kind = kind
        self.recoverable = False
