"""
Exception hierarchy for the brokerage API.

Every error raised from a service is an APIException subclass carrying an HTTP
status and a stable error code; the handlers in main.py render them through
ErrorHandlerService into the common error envelope.
"""

from typing import Any, Dict, Optional, List
from fastapi import HTTPException, status


class APIException(HTTPException):
    """Base API exception class."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    error_code: str = "API_ERROR"

    def __init__(
        self,
        detail: str,
        field_errors: Optional[List[Dict[str, Any]]] = None,
        headers: Optional[Dict[str, str]] = None
    ):
        super().__init__(status_code=type(self).status_code, detail=detail, headers=headers)
        self.field_errors = field_errors or []


class ValidationError(APIException):
    """Input that passed schema parsing but fails a business check, e.g. an unknown video link."""
    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY
    error_code = "VALIDATION_ERROR"


class NotFoundError(APIException):
    status_code = status.HTTP_404_NOT_FOUND
    error_code = "NOT_FOUND"

    def __init__(self, resource: str, resource_id: Optional[str] = None):
        detail = f"{resource} not found"
        if resource_id:
            detail += f" with ID: {resource_id}"
        super().__init__(detail)


class UnauthorizedError(APIException):
    status_code = status.HTTP_401_UNAUTHORIZED
    error_code = "UNAUTHORIZED"

    def __init__(self, detail: str = "Authentication required"):
        super().__init__(detail)


class ForbiddenError(APIException):
    status_code = status.HTTP_403_FORBIDDEN
    error_code = "FORBIDDEN"

    def __init__(self, detail: str = "Access forbidden"):
        super().__init__(detail)


class ConflictError(APIException):
    status_code = status.HTTP_409_CONFLICT
    error_code = "CONFLICT"


class BadRequestError(APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    error_code = "BAD_REQUEST"


class ServiceUnavailableError(APIException):
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    error_code = "SERVICE_UNAVAILABLE"

    def __init__(self, detail: str = "Service temporarily unavailable"):
        super().__init__(detail)


# Admin session
class InvalidCredentialsError(UnauthorizedError):
    def __init__(self, detail: str = "Invalid email or password"):
        super().__init__(detail)


class InactiveUserError(ForbiddenError):
    def __init__(self, detail: str = "Admin account is inactive"):
        super().__init__(detail)


# Missing records
class PropertyNotFoundError(NotFoundError):
    def __init__(self, property_id: str):
        super().__init__("Property", property_id)


class MediaNotFoundError(NotFoundError):
    def __init__(self, media_id: str):
        super().__init__("Media", media_id)


class InquiryNotFoundError(NotFoundError):
    def __init__(self, inquiry_id: str):
        super().__init__("Inquiry", inquiry_id)


class TeamMemberNotFoundError(NotFoundError):
    def __init__(self, member_id: str):
        super().__init__("Team member", member_id)


# Workflow rules
class BusinessRuleViolationError(BadRequestError):
    def __init__(self, rule: str, detail: Optional[str] = None):
        message = f"Business rule violation: {rule}"
        if detail:
            message += f" - {detail}"
        super().__init__(message)


class InvalidStatusTransitionError(BadRequestError):
    """Inquiry status move that the follow-up workflow does not allow."""

    def __init__(self, current: str, requested: str):
        super().__init__(f"Cannot change inquiry status from '{current}' to '{requested}'")


class DuplicateResourceError(ConflictError):
    def __init__(self, resource: str, identifier: str):
        super().__init__(f"{resource} with identifier '{identifier}' already exists")


# Uploads
class FileUploadError(BadRequestError):
    def __init__(self, detail: str):
        super().__init__(f"File upload error: {detail}")


class UnsupportedFileTypeError(BadRequestError):
    def __init__(self, file_type: str, supported_types: List[str]):
        supported = ", ".join(supported_types)
        super().__init__(f"Unsupported file type '{file_type}'. Supported types: {supported}")


class FileSizeExceededError(BadRequestError):
    def __init__(self, size: int, max_size: int):
        super().__init__(f"File size {size} bytes exceeds maximum allowed size {max_size} bytes")
