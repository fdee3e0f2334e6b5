"""
Utility modules: exceptions, file handling, video links and ordering.
"""

from .exceptions import (
    APIException,
    ValidationError,
    NotFoundError,
    UnauthorizedError,
    ForbiddenError,
    ConflictError,
    BadRequestError,
    InvalidCredentialsError,
    InactiveUserError,
    BusinessRuleViolationError,
    DuplicateResourceError,
    FileUploadError,
    UnsupportedFileTypeError,
    FileSizeExceededError,
)
from .ordering import validate_full_order
from .video import VideoRef, parse_video_url

__all__ = [
    "APIException",
    "ValidationError",
    "NotFoundError",
    "UnauthorizedError",
    "ForbiddenError",
    "ConflictError",
    "BadRequestError",
    "InvalidCredentialsError",
    "InactiveUserError",
    "BusinessRuleViolationError",
    "DuplicateResourceError",
    "FileUploadError",
    "UnsupportedFileTypeError",
    "FileSizeExceededError",
    "validate_full_order",
    "VideoRef",
    "parse_video_url",
]
