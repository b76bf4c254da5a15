"""Admin session cookie helpers (read the token, set it, clear it)."""
from __future__ import annotations

from fastapi import Request, Response

from catalog.core.config import Settings, get_settings
from catalog.services.admin_auth import AdminAuth, AdminSessions

ADMIN_COOKIE_NAME = "admin_session"


def admin_token(request: Request) -> str | None:
    return request.cookies.get(ADMIN_COOKIE_NAME)


def current_admin(request: Request, sessions: AdminSessions) -> AdminAuth:
    """AdminAuth for the cookie on ``request``; unauthenticated when the cookie is missing or stale."""
    return sessions.auth_for(admin_token(request))


def set_admin_cookie(response: Response, token: str, settings: Settings | None = None) -> None:
    settings = settings or get_settings()
    response.set_cookie(
        ADMIN_COOKIE_NAME,
        value=token,
        httponly=True,
        samesite="strict",
        secure=settings.app_env == "prod",
        max_age=max(60, settings.admin_session_timeout_minutes * 60),
        path="/",
    )


def clear_admin_cookie(response: Response) -> None:
    response.delete_cookie(ADMIN_COOKIE_NAME, path="/")
