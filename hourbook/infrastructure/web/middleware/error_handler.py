"""
Global error handler middleware for the FastAPI application.
Catches and formats all exceptions consistently.
"""

import logging
import traceback
import uuid
from typing import Any, Dict, Optional
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse
from fastapi import status

from hourbook.config import settings
from hourbook.domain.models.base import DomainException, ValidationError, BusinessRuleViolation


logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"

ERROR_STATUS_CODES = {
    "VALIDATION_ERROR": status.HTTP_422_UNPROCESSABLE_ENTITY,
    "BUSINESS_RULE_VIOLATION": status.HTTP_422_UNPROCESSABLE_ENTITY,
    "ENTITY_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "FORBIDDEN": status.HTTP_403_FORBIDDEN,
    "DUPLICATE_ENTITY": status.HTTP_409_CONFLICT,
    "CONCURRENCY_CONFLICT": status.HTTP_409_CONFLICT,
    "DELETE_BLOCKED": status.HTTP_409_CONFLICT,
    "AI_DISABLED": status.HTTP_503_SERVICE_UNAVAILABLE,
    "AI_NOT_CONFIGURED": status.HTTP_503_SERVICE_UNAVAILABLE,
    "AI_INVALID_PROMPT": status.HTTP_422_UNPROCESSABLE_ENTITY,
}

ERROR_TITLES = {
    status.HTTP_403_FORBIDDEN: "Forbidden",
    status.HTTP_404_NOT_FOUND: "Not Found",
    status.HTTP_409_CONFLICT: "Conflict",
    status.HTTP_422_UNPROCESSABLE_ENTITY: "Unprocessable Entity",
    status.HTTP_502_BAD_GATEWAY: "Bad Gateway",
    status.HTTP_503_SERVICE_UNAVAILABLE: "Service Unavailable",
}


def status_for_error_code(error_code: Optional[str]) -> int:
    """HTTP status for a use case error code. Unknown AI codes are upstream failures."""
    if error_code in ERROR_STATUS_CODES:
        return ERROR_STATUS_CODES[error_code]
    if error_code and error_code.startswith("AI_"):
        return status.HTTP_502_BAD_GATEWAY
    return status.HTTP_500_INTERNAL_SERVER_ERROR


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """
    Assigns every request an ID and turns uncaught exceptions into JSON error responses.
    """

    async def dispatch(self, request: Request, call_next):
        request.state.request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex

        try:
            response = await call_next(request)
        except Exception as exc:
            response = await self.handle_exception(request, exc)

        response.headers[REQUEST_ID_HEADER] = request.state.request_id
        return response

    async def handle_exception(self, request: Request, exc: Exception) -> JSONResponse:
        """
        Handle different types of exceptions and return appropriate responses.
        """
        error_response = self.format_error_response(exc)
        error_response["request_id"] = request.state.request_id

        if error_response["status_code"] >= 500:
            logger.error(
                f"Unhandled exception: {type(exc).__name__}: {str(exc)} "
                f"(request_id={request.state.request_id}, path={request.url.path}, "
                f"user={getattr(request.state, 'user_id', None)})",
                exc_info=True,
            )
        else:
            logger.info(f"{type(exc).__name__} on {request.url.path}: {error_response['message']}")

        if settings.debug:
            error_response["debug"] = {
                "exception_type": type(exc).__name__,
                "traceback": traceback.format_exc().split("\n")
            }

        return JSONResponse(
            status_code=error_response["status_code"],
            content=error_response
        )

    def format_error_response(self, exc: Exception) -> Dict[str, Any]:
        """
        Format exception into a consistent error response structure.
        """
        if isinstance(exc, ValidationError):
            code = "VALIDATION_ERROR"
        elif isinstance(exc, BusinessRuleViolation):
            code = "BUSINESS_RULE_VIOLATION"
        elif isinstance(exc, DomainException):
            code = exc.code
        else:
            return {
                "error": "Internal Server Error",
                "message": "An unexpected error occurred",
                "status_code": status.HTTP_500_INTERNAL_SERVER_ERROR
            }

        status_code = status_for_error_code(code)
        return {
            "error": ERROR_TITLES.get(status_code, "Internal Server Error"),
            "message": exc.message,
            "error_code": code,
            "status_code": status_code,
        }
