"""Sign-up/sign-in/sign-out routes and auth dependencies (get_current_user, require_admin)."""

import json
import logging
from typing import Annotated, Any

import jwt
from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import JSONResponse
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from app.api.errors import error_response
from app.core.cookies import clear_auth_cookie, get_auth_cookie, set_auth_cookie
from app.core.database import get_db
from app.core.errors import (
    AuthServiceError,
    CredentialValidationError,
    InvalidCredentialsError,
    NotAuthenticatedError,
    PermissionDeniedError,
    UserAlreadyExistsError,
)
from app.core.security import create_access_token, decode_access_token
from app.schemas.auth import (
    AuthResponse,
    ErrorResponse,
    MessageResponse,
    UserPublic,
    UsersListResponse,
)
from app.services.auth import AuthService
from app.services.users import UserRepository
from app.services.validation import validate_sign_in, validate_sign_up

logger = logging.getLogger(__name__)

router = APIRouter()
security = HTTPBearer(auto_error=False)


def get_auth_service(db: Annotated[Session, Depends(get_db)]) -> AuthService:
    """Dependency: AuthService bound to the request's DB session."""
    return AuthService(UserRepository(db))


async def read_body(request: Request) -> bytes:
    """Dependency: raw request body, read on the event loop so routes can stay sync."""
    return await request.body()


def _parse_json(raw: bytes) -> Any:
    try:
        return json.loads(raw.decode("utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise CredentialValidationError(
            [{"field": "body", "message": f"Invalid JSON: {e!s}"}]
        ) from e


@router.post(
    "/signup",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
)
def sign_up(
    body: Annotated[bytes, Depends(read_body)],
    response: Response,
    service: Annotated[AuthService, Depends(get_auth_service)],
) -> AuthResponse | JSONResponse:
    """
    Register a user from {name, email, password, role}.
    On success the session JWT is set as an HTTP-only cookie.
    Sync so FastAPI runs bcrypt and the DB calls in its threadpool.
    """
    try:
        payload = validate_sign_up(_parse_json(body))
        user = service.create_user(payload)
    except (CredentialValidationError, UserAlreadyExistsError) as e:
        logger.error("Sign Up Error: %s", e.message)
        return error_response(e)
    except AuthServiceError as e:
        logger.error("Sign Up Error: %s", e)
        raise

    set_auth_cookie(response, create_access_token(user))
    logger.info("User Registered successfully with: %s", user.email)
    return AuthResponse(message="User Registered", user=user)


@router.post(
    "/signin",
    response_model=AuthResponse,
    responses={400: {"model": ErrorResponse}, 401: {"model": ErrorResponse}},
)
def sign_in(
    body: Annotated[bytes, Depends(read_body)],
    response: Response,
    service: Annotated[AuthService, Depends(get_auth_service)],
) -> AuthResponse | JSONResponse:
    """Authenticate with email and password; sets the session cookie."""
    try:
        payload = validate_sign_in(_parse_json(body))
        user = service.authenticate_user(payload)
    except (CredentialValidationError, InvalidCredentialsError) as e:
        logger.error("Sign In Error: %s", e.message)
        return error_response(e)
    except AuthServiceError as e:
        logger.error("Sign In Error: %s", e)
        raise

    set_auth_cookie(response, create_access_token(user))
    logger.info("User signed in successfully: %s", user.email)
    return AuthResponse(message="User signed in successfully", user=user)


@router.post("/signout", response_model=MessageResponse)
def sign_out(response: Response) -> MessageResponse:
    """Clear the session cookie. Tokens are stateless, so nothing is revoked server-side."""
    clear_auth_cookie(response)
    logger.info("User signed out successfully")
    return MessageResponse(message="User signed out successfully")


def get_current_user(
    request: Request,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    service: Annotated[AuthService, Depends(get_auth_service)],
) -> UserPublic:
    """Dependency: require a valid session token (cookie, else Bearer header) and return the user."""
    token = get_auth_cookie(request)
    if not token and credentials is not None:
        token = credentials.credentials
    if not token:
        raise NotAuthenticatedError()
    try:
        payload = decode_access_token(token)
    except jwt.PyJWTError as e:
        raise NotAuthenticatedError("Invalid or expired token") from e
    user_id = payload.get("id")
    if not isinstance(user_id, int) or isinstance(user_id, bool):
        raise NotAuthenticatedError("Invalid token payload")
    user = service.get_user(user_id)
    if user is None:
        raise NotAuthenticatedError("User not found")
    return user


def require_admin(
    current_user: Annotated[UserPublic, Depends(get_current_user)],
) -> UserPublic:
    """Dependency: require authenticated user with role 'admin'."""
    if current_user.role != "admin":
        raise PermissionDeniedError()
    return current_user


@router.get(
    "/me",
    response_model=UserPublic,
    responses={401: {"model": ErrorResponse}},
)
def read_current_user(
    current_user: Annotated[UserPublic, Depends(get_current_user)],
) -> UserPublic:
    """Return the user the session cookie belongs to."""
    return current_user


@router.get(
    "/users",
    response_model=UsersListResponse,
    responses={401: {"model": ErrorResponse}, 403: {"model": ErrorResponse}},
)
def list_users(
    _admin: Annotated[UserPublic, Depends(require_admin)],
    service: Annotated[AuthService, Depends(get_auth_service)],
) -> UsersListResponse:
    """List all users (admin only)."""
    return UsersListResponse(users=service.list_users())
