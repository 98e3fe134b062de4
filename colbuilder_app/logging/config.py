"""
Centralized logging configuration for the column builder.

All components log through structlog so that draft rejections and accepted
columns show up as structured events, either human-readable or as JSON.
Module loggers stay lazy: they pick up whatever configure_logging() set last,
even when the package was imported before it ran.
"""
import logging
import sys
from typing import Any, Optional, TextIO

import structlog
from structlog.types import FilteringBoundLogger

SUBSYSTEM = "column_builder"


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    stream: Optional[TextIO] = None,
    extra_processors: Optional[list] = None
) -> None:
    """
    Route builder events through stdlib logging and pick the renderer.

    Calling it again replaces the previous setup, so a UI layer can switch
    between JSON and console output or raise the level to hide rejections.

    Args:
        level: Minimum level; rejected drafts are DEBUG, decisions INFO/WARNING
        format_json: One JSON object per event instead of console lines
        include_timestamp: Add an ISO timestamp to each event
        include_caller: Add filename and line number to each event
        stream: Destination for rendered events (stdout by default)
        extra_processors: Processors run before the renderer
    """
    stream = stream or sys.stdout

    logging.basicConfig(
        level=getattr(logging, level.upper()),
        stream=stream,
        format="%(message)s",
        force=True
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.FILENAME,
                        structlog.processors.CallsiteParameter.LINENO]
        ))

    if extra_processors:
        processors.extend(extra_processors)

    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        # No ANSI codes when events go to a file or a notebook cell
        colors = hasattr(stream, "isatty") and stream.isatty()
        processors.append(structlog.dev.ConsoleRenderer(colors=colors))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        # Cached loggers would keep the processor chain of an earlier call
        cache_logger_on_first_use=False,
    )


def get_logger(name: str, **initial_values: Any) -> FilteringBoundLogger:
    """Get a lazy structlog logger (name is typically __name__)."""
    return structlog.get_logger(name, **initial_values)


def get_builder_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger carrying the column builder subsystem context.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Lazy structlog logger with subsystem="column_builder"
    """
    return get_logger(name, subsystem=SUBSYSTEM)


def log_column_decision(
    logger: FilteringBoundLogger,
    kind: str,
    accepted: bool,
    reason: Optional[str] = None,
    column: Optional[dict[str, Any]] = None
) -> None:
    """
    Log the outcome of a single add-column attempt.

    Args:
        logger: Structlog logger instance
        kind: Column kind that was evaluated
        accepted: Whether the draft was appended to the accepted list
        reason: Rejection reason, if any
        column: The accepted configuration object, if any
    """
    bound_logger = logger.bind(
        kind=kind,
        decision="ACCEPTED" if accepted else "REJECTED",
    )

    if reason:
        bound_logger = bound_logger.bind(reason=reason)
    if column:
        bound_logger = bound_logger.bind(column=column)

    if accepted:
        bound_logger.info("Column accepted")
    else:
        bound_logger.warning("Column rejected")
