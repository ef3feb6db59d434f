# =============================================================================
# leetlab/exceptions.py - Custom Exceptions and Handlers
# =============================================================================
# Centralized exception handling for the API.
# Every error response carries a machine-readable code and, where possible,
# a suggestion on how to fix the request.
# =============================================================================

import logging
from typing import Any

from fastapi import Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class LeetLabException(Exception):
    """
    Base exception for the LeetLab API.

    All custom exceptions inherit from this class.
    """

    def __init__(
        self,
        message: str,
        code: str = "LEETLAB_ERROR",
        status_code: int = 500,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.suggestion = suggestion
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        result = {
            "detail": self.message,
            "code": self.code,
        }
        if self.suggestion:
            result["suggestion"] = self.suggestion
        if self.details:
            result["details"] = self.details
        return result

    def to_response(self) -> JSONResponse:
        """Render as a JSON response (used outside the exception handlers)."""
        return JSONResponse(status_code=self.status_code, content=self.to_dict())


# =============================================================================
# Request Body Exceptions
# =============================================================================

class InvalidJSONBodyError(LeetLabException):
    """Raised when a JSON request body cannot be decoded."""

    def __init__(self, error: str):
        super().__init__(
            message=f"Invalid JSON body: {error}",
            code="INVALID_JSON",
            status_code=400,
            suggestion="Send a valid JSON document or drop the application/json Content-Type",
            details={"error": error}
        )


class PayloadTooLargeError(LeetLabException):
    """Raised when a JSON request body exceeds the configured limit."""

    def __init__(self, size: int, limit: int):
        super().__init__(
            message=f"Request body too large: {size} bytes (max: {limit} bytes)",
            code="PAYLOAD_TOO_LARGE",
            status_code=413,
            suggestion=f"Send a body smaller than {limit} bytes",
            details={"size": size, "limit": limit}
        )


class UnsupportedMediaTypeError(LeetLabException):
    """Raised when a JSON body uses a charset or Content-Encoding that cannot be read."""

    def __init__(self, kind: str, value: str):
        super().__init__(
            message=f"Unsupported {kind}: {value}",
            code="UNSUPPORTED_MEDIA_TYPE",
            status_code=415,
            suggestion="Send JSON as utf-8, utf-16 or utf-32, optionally compressed with gzip or deflate",
            details={kind: value}
        )


# =============================================================================
# Routing Exceptions
# =============================================================================

class RouterImportError(LeetLabException):
    """Raised when the configured auth router cannot be loaded."""

    def __init__(self, path: str, error: str):
        super().__init__(
            message=f"Cannot load router {path!r}: {error}",
            code="ROUTER_IMPORT_ERROR",
            status_code=500,
            suggestion="Set AUTH_ROUTER to 'package.module:attribute' pointing at a fastapi.APIRouter",
            details={"path": path, "error": error}
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def leetlab_exception_handler(
    request: Request,
    exc: LeetLabException
) -> JSONResponse:
    """Convert LeetLabException to JSON response."""
    if exc.status_code >= 500:
        logger.error(f"{exc.code} on {request.method} {request.url.path}: {exc.message}")
    return exc.to_response()


async def unexpected_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """Handle unexpected exceptions."""
    logger.exception(f"Unexpected error: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "detail": "An unexpected error occurred",
            "code": "INTERNAL_ERROR",
        }
    )
