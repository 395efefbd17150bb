"""
API Error Response Schemas

Body of every failed API request.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class ErrorDetail(BaseModel):
    """What went wrong."""

    type: str = Field(..., description="Exception class", examples=["NotFoundException"])
    message: str = Field(..., examples=["Blog post item not found: 42"])
    code: Optional[str] = Field(
        None, description="Machine-readable error code", examples=["CONTENT_NOT_FOUND"]
    )
    details: Optional[Dict[str, Any]] = None
    debug: Optional[Dict[str, Any]] = Field(
        None, description="Exception and traceback, only when debug is on"
    )


class ErrorResponse(BaseModel):
    """Standard error body, tagged with the request it belongs to."""

    model_config = ConfigDict(
        extra="forbid",
        json_schema_extra={
            "examples": [
                {
                    "error": {
                        "type": "ValidationException",
                        "message": "Invalid contact submission",
                        "code": "VALIDATION_INVALID_INPUT",
                        "details": {"fields": ["email"]},
                    },
                    "request_id": "5f0c3c0e9b2a4d0e",
                    "path": "/api/v1/contact",
                    "method": "POST",
                }
            ]
        },
    )

    error: ErrorDetail
    request_id: Optional[str] = None
    path: Optional[str] = None
    method: Optional[str] = None
