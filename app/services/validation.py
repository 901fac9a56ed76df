"""Validate raw auth payloads into schemas before any database or hashing work."""

from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from app.core.errors import CredentialValidationError
from app.schemas.auth import SignInRequest, SignUpRequest

ModelT = TypeVar("ModelT", bound=BaseModel)


def format_validation_errors(error: ValidationError) -> list[dict[str, str]]:
    """Flatten pydantic errors into [{field, message}], one entry per failing location."""
    details: list[dict[str, str]] = []
    for err in error.errors():
        loc = [str(part) for part in err.get("loc", ())]
        details.append(
            {
                "field": ".".join(loc) or "body",
                "message": err.get("msg", "Invalid value"),
            }
        )
    return details


def _validate(model: type[ModelT], data: Any) -> ModelT:
    if not isinstance(data, dict):
        raise CredentialValidationError(
            [{"field": "body", "message": "Request body must be a JSON object"}]
        )
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise CredentialValidationError(format_validation_errors(e)) from e


def validate_sign_up(data: Any) -> SignUpRequest:
    """Return a validated SignUpRequest or raise CredentialValidationError."""
    return _validate(SignUpRequest, data)


def validate_sign_in(data: Any) -> SignInRequest:
    """Return a validated SignInRequest or raise CredentialValidationError."""
    return _validate(SignInRequest, data)
