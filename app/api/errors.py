"""Translate typed auth errors into JSON error responses."""

import logging

from fastapi import Request
from fastapi.responses import JSONResponse

from app.core.errors import AuthServiceError, CredentialValidationError

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"


def error_response(error: AuthServiceError) -> JSONResponse:
    """Build the {error[, details]} body for a typed error; 5xx never leaks the message."""
    if error.status_code >= 500:
        return JSONResponse(
            status_code=error.status_code,
            content={"error": INTERNAL_ERROR_MESSAGE},
        )
    content: dict[str, object] = {"error": error.message}
    if isinstance(error, CredentialValidationError):
        content["details"] = error.details
    return JSONResponse(status_code=error.status_code, content=content)


async def auth_service_error_handler(request: Request, exc: AuthServiceError) -> JSONResponse:
    """App-level handler for AuthServiceError raised past the route (hashing, storage, auth deps)."""
    if exc.status_code >= 500:
        logger.error(
            "Unhandled service error",
            extra={
                "path": request.url.path,
                "error_type": type(exc).__name__,
                "reason": exc.message[:500],
            },
        )
    return error_response(exc)
