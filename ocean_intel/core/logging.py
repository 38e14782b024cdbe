"""
Core Logging Module

Centralized logging configuration with trace_id injection. The trace_id is
carried in a contextvar so every engine log line emitted while serving one
request (stats, smoothing, scoring) can be correlated.

Usage:
    # At application startup:
    from ocean_intel.core.logging import setup_logging
    setup_logging()

    # In request handlers:
    from ocean_intel.core.logging import set_trace_id
    import logging

    set_trace_id("abc123")
    logger = logging.getLogger(__name__)
    logger.info("Scoring stocks")  # Will include trace_id in logs
"""

import logging
import sys
from contextvars import ContextVar
from typing import Optional


# ==================== Context Variables ====================

TRACE_ID: ContextVar[str] = ContextVar("trace_id", default="-")


def set_trace_id(trace_id: str) -> None:
    """
    Set the trace_id for the current context.

    Args:
        trace_id: Unique identifier for the request/trace
    """
    TRACE_ID.set(trace_id)


def get_trace_id() -> str:
    """
    Get the trace_id for the current context.

    Returns:
        Current trace_id or "-" if not set
    """
    return TRACE_ID.get()


# ==================== Log Filters ====================

class TraceIdFilter(logging.Filter):
    """
    Logging filter that injects trace_id into log records.

    Reads trace_id from the contextvar and adds it to the record,
    making it available to formatters.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        record.trace_id = get_trace_id()
        return True


# ==================== Logging Setup ====================

_logging_setup_done = False


def setup_logging(log_level: Optional[str] = None, force: bool = False) -> None:
    """
    Configure application-wide logging with trace_id support.

    Sets up:
    - Root logger level from settings or parameter
    - Console handler with structured formatting
    - TraceIdFilter for automatic trace_id injection

    Idempotent unless force=True is specified.

    Args:
        log_level: Optional log level override (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        force: If True, reconfigure even if already set up
    """
    global _logging_setup_done

    if _logging_setup_done and not force:
        return

    if log_level is None:
        from ocean_intel.core.config import settings
        log_level = settings.LOG_LEVEL

    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    if force:
        root_logger.handlers.clear()

    if not root_logger.handlers:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(numeric_level)

        formatter = logging.Formatter(
            fmt="%(asctime)s [%(levelname)s] [%(trace_id)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )
        console_handler.setFormatter(formatter)
        console_handler.addFilter(TraceIdFilter())

        root_logger.addHandler(console_handler)

    _logging_setup_done = True

    logger = logging.getLogger(__name__)
    logger.info(f"Logging configured with level: {log_level.upper()}")

