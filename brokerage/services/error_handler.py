"""
Error response formatting for every failure the API returns.
Every error leaves the API as {"error": {code, message, timestamp, request_id, details?}}.
"""

from typing import Dict, Any, Optional, List, Sequence
from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException
from sqlalchemy.exc import SQLAlchemyError, IntegrityError
from brokerage.utils.exceptions import APIException
from datetime import datetime, timezone
import logging
import uuid

logger = logging.getLogger(__name__)

# Substring of the driver message -> what the client is told
CONSTRAINT_MESSAGES = (
    ("unique", "Duplicate value for unique field"),
    ("foreign key", "Referenced record does not exist"),
    ("not null", "Required field cannot be empty"),
    ("check constraint", "Value does not meet validation requirements"),
)


class ErrorHandlerService:
    """
    Turns exceptions into the error envelope and logs them with the request id.
    """

    @staticmethod
    def format_error_response(
        error_code: str,
        message: str,
        details: Optional[List[Dict[str, Any]]] = None,
        request_id: Optional[str] = None
    ) -> Dict[str, Any]:
        """
        Build the error envelope.

        Args:
            error_code: Stable machine-readable code, e.g. NOT_FOUND
            message: Human-readable message
            details: Per-field problems; omitted from the body when empty
            request_id: Id from the X-Request-ID middleware

        Returns:
            Dictionary ready to be sent as JSON
        """
        body = {
            "code": error_code,
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "request_id": request_id,
        }
        if details:
            body["details"] = details
        return {"error": body}

    @staticmethod
    def _respond(
        status_code: int,
        error_code: str,
        message: str,
        request: Optional[Request],
        details: Optional[List[Dict[str, Any]]] = None,
        headers: Optional[Dict[str, str]] = None
    ) -> JSONResponse:
        content = ErrorHandlerService.format_error_response(
            error_code, message, details, ErrorHandlerService._request_id(request)
        )
        return JSONResponse(
            status_code=status_code,
            content=jsonable_encoder(content, custom_encoder={bytes: lambda b: f"<{len(b)} bytes>"}),
            headers=headers
        )

    @staticmethod
    def _log_context(request: Optional[Request], **extra) -> Dict[str, Any]:
        return {
            "request_id": ErrorHandlerService._request_id(request),
            "path": request.url.path if request else None,
            **extra
        }

    @staticmethod
    def handle_api_exception(
        exception: APIException,
        request: Optional[Request] = None
    ) -> JSONResponse:
        """Render an APIException with its own status, code and field errors."""
        logger.warning(
            f"API Exception: {exception.error_code} - {exception.detail}",
            extra=ErrorHandlerService._log_context(
                request, error_code=exception.error_code, status_code=exception.status_code
            )
        )
        return ErrorHandlerService._respond(
            exception.status_code,
            exception.error_code,
            exception.detail,
            request,
            details=exception.field_errors,
            headers=exception.headers
        )

    @staticmethod
    def handle_validation_error(
        errors: Sequence[Dict[str, Any]],
        request: Optional[Request] = None
    ) -> JSONResponse:
        """
        Render request or model validation errors as a 422 with one detail per field.

        Args:
            errors: RequestValidationError.errors() or pydantic ValidationError.errors()
            request: Current request, when there is one

        Returns:
            422 response; field paths read like "body -> email"
        """
        details = [
            {
                "field": " -> ".join(str(loc) for loc in error.get("loc", ())),
                "message": error.get("msg", "Invalid value"),
                "type": error.get("type"),
                "input": error.get("input"),
            }
            for error in errors
        ]

        logger.warning(
            f"Validation Error: {len(details)} field errors",
            extra=ErrorHandlerService._log_context(request, error_count=len(details))
        )
        return ErrorHandlerService._respond(
            422, "VALIDATION_ERROR", "Request validation failed", request, details=details
        )

    @staticmethod
    def handle_database_error(
        exception: SQLAlchemyError,
        request: Optional[Request] = None
    ) -> JSONResponse:
        """
        Integrity violations become 409 with a generic constraint message;
        anything else is a 500 that hides the driver text.
        """
        if isinstance(exception, IntegrityError):
            status_code, error_code = 409, "INTEGRITY_ERROR"
            constraint = ErrorHandlerService._extract_constraint_info(exception)
            message = f"Constraint violation: {constraint}" if constraint else "Data integrity constraint violation"
        else:
            status_code, error_code = 500, "DATABASE_ERROR"
            message = "Database operation failed"

        logger.error(
            f"Database Error: {error_code} - {exception}",
            extra=ErrorHandlerService._log_context(
                request, error_code=error_code, exception_type=type(exception).__name__
            ),
            exc_info=exception
        )
        return ErrorHandlerService._respond(status_code, error_code, message, request)

    @staticmethod
    def handle_http_exception(
        exception: HTTPException,
        request: Optional[Request] = None
    ) -> JSONResponse:
        """Routing errors such as 404 for unknown paths or 405."""
        logger.warning(
            f"HTTP Exception: {exception.status_code} - {exception.detail}",
            extra=ErrorHandlerService._log_context(request, status_code=exception.status_code)
        )
        return ErrorHandlerService._respond(
            exception.status_code,
            f"HTTP_{exception.status_code}",
            str(exception.detail),
            request,
            headers=getattr(exception, "headers", None)
        )

    @staticmethod
    def handle_unexpected_error(
        exception: Exception,
        request: Optional[Request] = None
    ) -> JSONResponse:
        logger.error(
            f"Unexpected Error: {type(exception).__name__} - {exception}",
            extra=ErrorHandlerService._log_context(request, exception_type=type(exception).__name__),
            exc_info=exception
        )
        return ErrorHandlerService._respond(
            500,
            "INTERNAL_SERVER_ERROR",
            "An unexpected error occurred. Please try again later.",
            request
        )

    @staticmethod
    def _request_id(request: Optional[Request]) -> str:
        """Request id assigned by the middleware, or a fresh one."""
        if request is not None:
            request_id = getattr(request.state, "request_id", None)
            if request_id:
                return request_id
        return str(uuid.uuid4())[:8]

    @staticmethod
    def _extract_constraint_info(exception: IntegrityError) -> Optional[str]:
        error_msg = str(exception.orig).lower()
        for needle, message in CONSTRAINT_MESSAGES:
            if needle in error_msg:
                return message
        return None
