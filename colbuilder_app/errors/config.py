"""
Configuration error classifications.
"""

from typing import Optional, Dict, Any


class ConfigError(Exception):
    """Builder configuration could not be loaded or failed validation."""

    def __init__(self, message: str, path: Optional[str] = None,
                 errors: Optional[list] = None,
                 context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []
        self.context = context or {}
        self.recoverable = False
