"""Structured logging configuration for huekey using structlog."""

import logging
import sys
from pathlib import Path
from typing import Any, cast

import structlog

# Global state for lazy initialization
_logging_initialized = False


def setup_logging(
    level: str = "INFO",
    log_file: Path | None = None,
    structured: bool = False,
    add_timestamp: bool = True,
    colorize: bool = False,
) -> None:
    """Configure structured logging.

    Logs go to stderr so stdout stays free for profiling reports.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path to log file
        structured: Use JSON structured output
        add_timestamp: Add timestamps to logs
        colorize: Colorize console output (only for non-structured)
    """
    global _logging_initialized

    processors: list[Any] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
    ]

    if add_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    processors.extend(
        [
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
        ]
    )

    if structured:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=colorize))

    structlog.configure(
        processors=processors,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handlers: list[logging.Handler] = []

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    handlers.append(console_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter("%(message)s"))
        handlers.append(file_handler)

    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, level.upper()),
        handlers=handlers,
        force=True,
    )
    _logging_initialized = True


def _ensure_logging_initialized() -> None:
    """Ensure logging is initialized (called lazily, not at import time)."""
    if _logging_initialized:
        return

    try:
        from ..config import get_settings

        settings = get_settings()
        setup_logging(level=settings.log_level, structured=settings.structured_logs)
    except (AttributeError, ValueError):
        # Invalid settings should not prevent logging from working
        setup_logging(level="INFO")


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Structured logger instance
    """
    _ensure_logging_initialized()
    return cast(structlog.stdlib.BoundLogger, structlog.get_logger(name))
