"""
Core Errors Module

Standardized error classes and helpers for consistent error handling across
the engine and its HTTP surface.

The analytics engine only ever raises ValidationError, and only for
malformed records (missing or mistyped fields). Empty inputs and degenerate
numbers (zero MSY, all-missing columns) are defined results, not errors.

Usage:
    from ocean_intel.core.errors import ValidationError, error_payload

    raise ValidationError("Missing field 'stock_health'", details={"field": "stock_health"})

    payload = error_payload("upstream_error", "Marine feed unavailable", trace_id="abc123")
"""

import logging
from typing import Optional, Dict, Any

logger = logging.getLogger(__name__)


# ==================== Base Error Class ====================

class AppError(Exception):
    """
    Base application error class.

    Attributes:
        code: Error code (e.g., "validation_error", "not_found")
        message: Human-readable error message
        details: Optional additional error context
        status_code: HTTP status code for this error type
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        status_code: int = 500
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self._default_code()
        self.details = details or {}
        self.status_code = status_code

    def _default_code(self) -> str:
        """
        Generate default error code from class name.

        Returns:
            snake_case version of class name without the Error suffix
        """
        name = self.__class__.__name__
        if name.endswith("Error"):
            name = name[:-5]

        result = []
        for i, char in enumerate(name):
            if char.isupper() and i > 0:
                result.append("_")
            result.append(char.lower())

        return "".join(result)

    def to_dict(self, trace_id: Optional[str] = None) -> Dict[str, Any]:
        """
        Convert error to dictionary for JSON responses.

        Args:
            trace_id: Optional request trace ID

        Returns:
            Error dict with code, message, details, trace_id
        """
        return error_payload(self.code, self.message, self.details, trace_id)


# ==================== Specific Error Classes ====================

class ValidationError(AppError):
    """
    Validation error (400 Bad Request).

    Raised when a record handed to the engine is missing a required field
    or carries a value of the wrong type. details["field"] names it.
    """

    def __init__(
        self,
        message: str = "Validation failed",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            code="validation_error",
            details=details,
            status_code=400
        )


class NotFoundError(AppError):
    """
    Not found error (404 Not Found).

    Raised when a dataset file (archive, stocks, species) does not exist.
    """

    def __init__(
        self,
        message: str = "Resource not found",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            code="not_found",
            details=details,
            status_code=404
        )


class UpstreamError(AppError):
    """
    Upstream feed error (502 Bad Gateway).

    Raised when the live marine/weather feed fails or answers with an
    unusable payload.
    """

    def __init__(
        self,
        message: str = "Upstream feed unavailable",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            code="upstream_error",
            details=details,
            status_code=502
        )


class InternalError(AppError):
    """
    Internal server error (500 Internal Server Error).
    """

    def __init__(
        self,
        message: str = "Internal server error",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            code="internal_error",
            details=details,
            status_code=500
        )


# ==================== Helper Functions ====================

def error_payload(
    code: str,
    message: str,
    details: Optional[Dict[str, Any]] = None,
    trace_id: Optional[str] = None
) -> Dict[str, Any]:
    """
    Create a standardized error payload dict.

    Args:
        code: Error code
        message: Error message
        details: Optional error details
        trace_id: Optional request trace ID

    Returns:
        Error dict suitable for JSON response

    Example:
        >>> payload = error_payload("bad_request", "Invalid input", trace_id="abc123")
        >>> payload["code"]
        'bad_request'
    """
    result = {
        "code": code,
        "message": message,
    }

    if details:
        result["details"] = details

    if trace_id:
        result["trace_id"] = trace_id

    return result


def missing_field(field: str, index: Optional[int] = None) -> ValidationError:
    """
    Build the ValidationError raised for a record lacking a required field.

    Args:
        field: Name of the missing/mistyped field
        index: Position of the offending record in its input list, if known
    """
    details: Dict[str, Any] = {"field": field}
    message = f"Missing or invalid field '{field}'"
    if index is not None:
        details["record"] = index
        message += f" in record {index}"
    return ValidationError(message, details=details)


def to_http_exception(error: AppError):
    """
    Convert AppError to FastAPI HTTPException.

    Args:
        error: AppError to convert

    Returns:
        HTTPException instance carrying error.to_dict() as detail
    """
    from fastapi import HTTPException
    from ocean_intel.core.logging import get_trace_id

    trace_id = get_trace_id()
    if trace_id == "-":
        trace_id = None

    return HTTPException(
        status_code=error.status_code,
        detail=error.to_dict(trace_id=trace_id)
    )
