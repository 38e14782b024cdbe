"""
Core Package

Centralized configuration, logging and error handling for the ocean
intelligence service.

Modules:
- config: Environment configuration and settings
- logging: Structured logging with trace_id support
- errors: Standardized error classes and HTTP conversion

Usage:
    from ocean_intel.core import settings, setup_logging, set_trace_id
    from ocean_intel.core import ValidationError, NotFoundError
"""

# Configuration
from ocean_intel.core.config import settings, get_settings, is_production

# Logging
from ocean_intel.core.logging import (
    setup_logging,
    set_trace_id,
    get_trace_id
)

# Errors
from ocean_intel.core.errors import (
    AppError,
    ValidationError,
    NotFoundError,
    UpstreamError,
    InternalError,
    error_payload,
    missing_field,
    to_http_exception
)

__all__ = [
    # Config
    "settings",
    "get_settings",
    "is_production",
    # Logging
    "setup_logging",
    "set_trace_id",
    "get_trace_id",
    # Errors
    "AppError",
    "ValidationError",
    "NotFoundError",
    "UpstreamError",
    "InternalError",
    "error_payload",
    "missing_field",
    "to_http_exception",
]
