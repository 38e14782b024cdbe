"""
Base Schemas

Response envelope shared by every HTTP endpoint:
{status, data, request_id}.
"""

from typing import Any, Dict, Optional
from pydantic import BaseModel, Field, ConfigDict


class ApiResponse(BaseModel):
    """
    Standard success envelope returned by the API routers.
    """
    status: str = Field("success", description="Execution status")
    data: Any = Field(None, description="Response payload")
    request_id: Optional[str] = Field(None, description="Echo of x-request-id header")

    model_config = ConfigDict(extra="allow")


class ErrorResponse(BaseModel):
    """
    Standard error payload.
    Matches AppError.to_dict() output.
    """
    code: str = Field(..., description="Error code (validation_error, not_found, ...)")
    message: str = Field(..., description="Human-readable error message")
    details: Optional[Dict[str, Any]] = Field(None, description="Offending field / record")
    trace_id: Optional[str] = Field(None, description="Request trace ID")

    model_config = ConfigDict(extra="allow")
