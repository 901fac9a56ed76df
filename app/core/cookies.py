"""Session cookie helpers: one place for the attributes used to set and clear it."""

from typing import Any

from fastapi import Request, Response

from app.core.config import settings


def _cookie_options() -> dict[str, Any]:
    return {
        "httponly": True,
        "secure": settings.cookie_secure,
        "samesite": settings.COOKIE_SAMESITE,
        "path": "/",
    }


def set_auth_cookie(response: Response, token: str) -> None:
    """Attach the signed session token as an HTTP-only cookie."""
    response.set_cookie(
        key=settings.COOKIE_NAME,
        value=token,
        max_age=settings.COOKIE_MAX_AGE_SECONDS,
        **_cookie_options(),
    )


def clear_auth_cookie(response: Response) -> None:
    """Expire the session cookie (same attributes as when it was set)."""
    response.delete_cookie(key=settings.COOKIE_NAME, **_cookie_options())


def get_auth_cookie(request: Request) -> str | None:
    """Return the session token from the request cookie, if present."""
    return request.cookies.get(settings.COOKIE_NAME)
