"""Typed errors raised by the auth services and translated to HTTP at the router."""

from typing import Any


class AuthServiceError(Exception):
    """Base error for registration/authentication failures; carries the HTTP status to map to."""

    status_code: int = 500
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class CredentialValidationError(AuthServiceError):
    """Raised when a request payload fails schema validation; details are per field."""

    status_code = 400
    default_message = "Validation failed"

    def __init__(
        self,
        details: list[dict[str, Any]],
        message: str | None = None,
    ) -> None:
        self.details = details
        super().__init__(message)


class UserAlreadyExistsError(AuthServiceError):
    """Raised when registering an email that is already taken."""

    status_code = 409
    default_message = "User already exists"


class InvalidCredentialsError(AuthServiceError):
    """Raised for unknown email and wrong password alike, so account existence is not leaked."""

    status_code = 401
    default_message = "Invalid email or password"


class HashingError(AuthServiceError):
    """Raised when the password hashing primitive fails (not a password mismatch)."""


class StorageError(AuthServiceError):
    """Raised when a database operation fails unexpectedly."""


class NotAuthenticatedError(AuthServiceError):
    """Raised when a request has no valid session token."""

    status_code = 401
    default_message = "Not authenticated"


class PermissionDeniedError(AuthServiceError):
    """Raised when the authenticated user lacks the required role."""

    status_code = 403
    default_message = "Admin access required"
