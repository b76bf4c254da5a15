"""
Admin authentication: a credential check plus a session flag.

``AdminAuth`` keeps its state in a per-session key-value storage, the same way
the catalog keeps records. ``AdminSessions`` hands the HTTP layer one storage
per cookie token.
"""

from __future__ import annotations

import json
import logging
import secrets
from datetime import datetime, timezone
from typing import Callable, Optional

from catalog.core.config import Settings, get_settings
from catalog.core.security import constant_time_equals, verify_password
from catalog.core.utils import parse_iso
from catalog.repositories.json_storage import KeyValueStorage, MemoryStorage

logger = logging.getLogger(__name__)

ADMIN_AUTH_KEY = "admin_authenticated"
ADMIN_USER_KEY = "admin_user"
ADMIN_SESSION_START_KEY = "admin_session_start"

ADMIN_PERMISSIONS = (
    "courses.create",
    "courses.read",
    "courses.update",
    "courses.delete",
    "blog.create",
    "blog.read",
    "blog.update",
    "blog.delete",
    "settings.read",
    "settings.update",
)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class AdminAuth:
    """Checks admin credentials and remembers the result in ``session_storage``."""

    def __init__(
        self,
        session_storage: KeyValueStorage,
        settings: Optional[Settings] = None,
        *,
        now: Callable[[], datetime] = _utc_now,
    ) -> None:
        self.storage = session_storage
        self.settings = settings or get_settings()
        self._now = now

    def is_authenticated(self) -> bool:
        return self.storage.get_item(ADMIN_AUTH_KEY) == "true"

    def validate_credentials(self, email: str, password: str) -> bool:
        if (email or "").strip().lower() != self.settings.admin_email:
            return False
        if self.settings.admin_password_hash:
            return verify_password(password or "", self.settings.admin_password_hash)
        return constant_time_equals(password, self.settings.admin_password)

    def login(self, email: str, password: str) -> bool:
        if not self.validate_credentials(email, password):
            logger.warning("Admin login rejected for %s", email)
            return False
        self.storage.set_item(ADMIN_AUTH_KEY, "true")
        self.storage.set_item(
            ADMIN_USER_KEY,
            json.dumps({"email": self.settings.admin_email, "role": "admin", "name": "Administrator"}),
        )
        self.storage.set_item(ADMIN_SESSION_START_KEY, self._now().isoformat())
        return True

    def logout(self) -> None:
        self.storage.remove_item(ADMIN_AUTH_KEY)
        self.storage.remove_item(ADMIN_USER_KEY)
        self.storage.remove_item(ADMIN_SESSION_START_KEY)

    def get_admin_user(self) -> Optional[dict]:
        raw = self.storage.get_item(ADMIN_USER_KEY)
        if not raw:
            return None
        try:
            user = json.loads(raw)
        except ValueError:
            return None
        return user if isinstance(user, dict) else None

    def get_permissions(self) -> list[str]:
        if not self.is_authenticated():
            return []
        return list(ADMIN_PERMISSIONS)

    def has_permission(self, permission: str) -> bool:
        return permission in self.get_permissions()

    def get_display_name(self) -> str:
        user = self.get_admin_user() or {}
        return user.get("name") or "Administrator"

    def init_session(self) -> None:
        if self.is_authenticated() and not self.storage.get_item(ADMIN_SESSION_START_KEY):
            self.storage.set_item(ADMIN_SESSION_START_KEY, self._now().isoformat())

    def check_session_timeout(self, timeout_minutes: Optional[int] = None) -> bool:
        """Log out and return True once the session is older than ``timeout_minutes``."""
        started = self.storage.get_item(ADMIN_SESSION_START_KEY)
        if not started:
            return False
        limit = self.settings.admin_session_timeout_minutes if timeout_minutes is None else timeout_minutes
        elapsed_minutes = (self._now() - parse_iso(started)).total_seconds() / 60
        if elapsed_minutes > limit:
            self.logout()
            return True
        return False

    def get_session_info(self) -> dict:
        return {
            "isAuthenticated": self.is_authenticated(),
            "user": self.get_admin_user(),
            "permissions": self.get_permissions(),
            "sessionStart": self.storage.get_item(ADMIN_SESSION_START_KEY),
        }


class AdminSessions:
    """Maps opaque cookie tokens to per-session storages."""

    def __init__(self, settings: Optional[Settings] = None, *, now: Callable[[], datetime] = _utc_now) -> None:
        self.settings = settings or get_settings()
        self._now = now
        self._sessions: dict[str, MemoryStorage] = {}

    def _auth(self, storage: KeyValueStorage) -> AdminAuth:
        return AdminAuth(storage, self.settings, now=self._now)

    def sweep_expired(self) -> int:
        """Forget sessions past the timeout, including ones nobody presents again."""
        expired = [token for token, storage in self._sessions.items() if self._auth(storage).check_session_timeout()]
        for token in expired:
            del self._sessions[token]
        return len(expired)

    def login(self, email: str, password: str) -> Optional[str]:
        self.sweep_expired()
        storage = MemoryStorage()
        if not self._auth(storage).login(email, password):
            return None
        token = secrets.token_urlsafe(32)
        self._sessions[token] = storage
        return token

    def auth_for(self, token: Optional[str]) -> AdminAuth:
        """An AdminAuth for ``token``; unknown or expired tokens get an unauthenticated one."""
        storage = self._sessions.get(token) if token else None
        auth = self._auth(storage if storage is not None else MemoryStorage())
        if storage is not None and auth.check_session_timeout():
            self._sessions.pop(token, None)
        return auth

    def logout(self, token: Optional[str]) -> None:
        storage = self._sessions.pop(token, None) if token else None
        if storage is not None:
            self._auth(storage).logout()

    def active_count(self) -> int:
        return len(self._sessions)
