"""Request/response schemas for auth endpoints."""

from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

Role = Literal["user", "admin"]

NAME_MIN_LEN = 1
NAME_MAX_LEN = 255
EMAIL_MAX_LEN = 255
PASSWORD_MIN_LEN = 6
PASSWORD_MAX_LEN = 128


class SignUpRequest(BaseModel):
    """Registration payload. Email case is preserved as submitted."""

    name: str = Field(
        ..., min_length=NAME_MIN_LEN, max_length=NAME_MAX_LEN, description="Display name"
    )
    email: EmailStr = Field(..., description="Email address (unique)")
    password: str = Field(
        ...,
        min_length=PASSWORD_MIN_LEN,
        max_length=PASSWORD_MAX_LEN,
        description="Password",
    )
    role: Role = Field(default="user", description="Role: user or admin")

    @field_validator("name", "email", mode="before")
    @classmethod
    def strip_whitespace(cls, v: Any) -> Any:
        return v.strip() if isinstance(v, str) else v

    @field_validator("email")
    @classmethod
    def validate_email_length(cls, v: str) -> str:
        if len(v) > EMAIL_MAX_LEN:
            raise ValueError(f"Email must be at most {EMAIL_MAX_LEN} characters")
        return v


class SignInRequest(BaseModel):
    """Credentials for sign-in."""

    email: EmailStr = Field(..., description="Email address")
    password: str = Field(..., min_length=1, max_length=PASSWORD_MAX_LEN, description="Password")

    @field_validator("email", mode="before")
    @classmethod
    def strip_email(cls, v: Any) -> Any:
        return v.strip() if isinstance(v, str) else v


class UserPublic(BaseModel):
    """User projection returned to clients (never includes the password hash)."""

    id: int
    name: str
    email: str
    role: str
    created_at: datetime | None = None
    updated_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)


class AuthResponse(BaseModel):
    """Response for successful sign-up and sign-in; the JWT travels in a cookie."""

    message: str
    user: UserPublic


class MessageResponse(BaseModel):
    """Plain acknowledgement."""

    message: str


class ErrorDetail(BaseModel):
    """One failing field of a validation error."""

    field: str
    message: str


class ErrorResponse(BaseModel):
    """Error body: {error} plus per-field details for validation failures."""

    error: str
    details: list[ErrorDetail] | None = None


class UsersListResponse(BaseModel):
    """Response for GET /auth/users (admin only)."""

    users: list[UserPublic]
