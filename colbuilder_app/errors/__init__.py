"""
Error classification for the column builder.

Draft errors describe problems with the column definition being edited;
configuration errors describe problems loading builder settings.
"""

from .draft import (
    DraftError,
    ValidationRejected,
    DraftFieldError,
    UnknownColumnKindError,
)
from .config import ConfigError

__all__ = [
    # Draft errors
    "DraftError",
    "ValidationRejected",
    "DraftFieldError",
    "UnknownColumnKindError",
    # Configuration errors
    "ConfigError",
]
