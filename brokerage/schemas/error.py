"""
Error response schemas for API documentation and consistent error formatting.
"""

from pydantic import BaseModel, Field
from typing import List, Optional, Any, Dict


class ErrorDetail(BaseModel):
    """Schema for individual error detail."""

    field: Optional[str] = Field(None, description="Field name that caused the error", examples=["email"])
    message: str = Field(..., description="Human-readable error message")
    type: Optional[str] = Field(None, description="Error type identifier")
    input: Optional[Any] = Field(None, description="Input value that caused the error")


class ErrorResponse(BaseModel):
    """Schema for standardized error responses."""

    code: str = Field(..., description="Error code identifier", examples=["VALIDATION_ERROR"])
    message: str = Field(..., description="Human-readable error message")
    timestamp: str = Field(..., description="Error timestamp in ISO format")
    request_id: Optional[str] = Field(None, description="Unique request identifier for tracking")
    details: Optional[List[ErrorDetail]] = Field(None, description="Detailed error information")


class APIErrorResponse(BaseModel):
    """Schema for API error response wrapper."""

    error: ErrorResponse


_ERROR_EXAMPLES = {
    400: ("Bad Request - Invalid request or business rule violation", "BAD_REQUEST", "Invalid request parameters"),
    401: ("Unauthorized - Admin session required", "UNAUTHORIZED", "Authentication required"),
    403: ("Forbidden - Account inactive or insufficient role", "FORBIDDEN", "Access forbidden"),
    404: ("Not Found - Resource does not exist", "NOT_FOUND", "Property not found"),
    409: ("Conflict - Resource already exists", "CONFLICT", "Resource already exists"),
    422: ("Unprocessable Entity - Validation failed", "VALIDATION_ERROR", "Request validation failed"),
    500: ("Internal Server Error", "INTERNAL_SERVER_ERROR", "An unexpected error occurred"),
}

COMMON_ERROR_RESPONSES: Dict[int, Dict[str, Any]] = {
    status_code: {
        "description": description,
        "model": APIErrorResponse,
        "content": {
            "application/json": {
                "example": {
                    "error": {
                        "code": code,
                        "message": message,
                        "timestamp": "2024-01-01T00:00:00Z",
                        "request_id": "abc12345"
                    }
                }
            }
        }
    }
    for status_code, (description, code, message) in _ERROR_EXAMPLES.items()
}


def get_error_responses(*status_codes: int) -> Dict[int, Dict[str, Any]]:
    """
    Get error response schemas for specific status codes.

    Args:
        status_codes: HTTP status codes to include

    Returns:
        Dictionary of error response schemas
    """
    return {
        code: COMMON_ERROR_RESPONSES[code]
        for code in status_codes
        if code in COMMON_ERROR_RESPONSES
    }


def get_public_error_responses() -> Dict[int, Dict[str, Any]]:
    return get_error_responses(404, 422, 500)


def get_crud_error_responses() -> Dict[int, Dict[str, Any]]:
    """Get error response schemas for admin CRUD operations."""
    return get_error_responses(400, 401, 403, 404, 409, 422, 500)
