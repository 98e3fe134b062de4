"""
Logging configuration and utilities for the column builder.
"""
from .config import configure_logging, get_builder_logger, get_logger

__all__ = ["configure_logging", "get_logger", "get_builder_logger"]
