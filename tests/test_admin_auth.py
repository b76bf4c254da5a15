from __future__ import annotations

import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

# Make the catalog package importable during local test runs
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from catalog.core.config import BACKEND_LOCAL, Settings
from catalog.core.security import hash_password
from catalog.repositories.json_storage import MemoryStorage
from catalog.services.admin_auth import ADMIN_AUTH_KEY, ADMIN_PERMISSIONS, AdminAuth, AdminSessions


def _settings(**overrides) -> Settings:
    values = dict(
        app_env="test",
        storage_backend=BACKEND_LOCAL,
        data_file=Path("unused.json"),
        database_url="",
        admin_email="admin@tnqdo.com",
        admin_password="admin123",
        admin_password_hash="",
        admin_session_timeout_minutes=60,
        seed_defaults=False,
        cors_origins=(),
    )
    values.update(overrides)
    return Settings(**values)


class _Clock:
    def __init__(self) -> None:
        self.now = datetime(2025, 1, 1, 10, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture()
def clock():
    return _Clock()


@pytest.fixture()
def auth(clock):
    return AdminAuth(MemoryStorage(), _settings(), now=clock)


def test_login_with_default_credentials(auth):
    assert auth.is_authenticated() is False
    assert auth.login("Admin@TNQDO.com ", "admin123") is True
    assert auth.is_authenticated() is True
    assert auth.get_admin_user()["email"] == "admin@tnqdo.com"
    assert auth.get_display_name() == "Administrator"
    assert auth.has_permission("courses.delete")
    assert auth.get_permissions() == list(ADMIN_PERMISSIONS)


def test_wrong_credentials_leave_session_untouched(auth):
    assert auth.login("admin@tnqdo.com", "nope") is False
    assert auth.login("someone@tnqdo.com", "admin123") is False
    assert auth.is_authenticated() is False
    assert auth.get_permissions() == []
    assert auth.get_admin_user() is None


def test_logout_clears_every_session_key(auth):
    auth.login("admin@tnqdo.com", "admin123")
    auth.logout()
    assert auth.is_authenticated() is False
    assert auth.storage.keys() == []


def test_password_hash_takes_precedence():
    settings = _settings(admin_password_hash=hash_password("s3cret"))
    auth = AdminAuth(MemoryStorage(), settings)
    assert auth.login("admin@tnqdo.com", "admin123") is False
    assert auth.login("admin@tnqdo.com", "s3cret") is True


def test_session_times_out(auth, clock):
    auth.login("admin@tnqdo.com", "admin123")
    clock.now += timedelta(minutes=30)
    assert auth.check_session_timeout() is False
    assert auth.is_authenticated() is True

    clock.now += timedelta(minutes=31)
    assert auth.check_session_timeout() is True
    assert auth.is_authenticated() is False


def test_custom_timeout_and_init_session(auth, clock):
    auth.storage.set_item(ADMIN_AUTH_KEY, "true")
    assert auth.check_session_timeout(5) is False
    auth.init_session()
    clock.now += timedelta(minutes=6)
    assert auth.check_session_timeout(5) is True


def test_session_info_shape(auth):
    auth.login("admin@tnqdo.com", "admin123")
    info = auth.get_session_info()
    assert info["isAuthenticated"] is True
    assert info["sessionStart"] == "2025-01-01T10:00:00+00:00"
    assert "blog.update" in info["permissions"]


def test_sessions_registry_issues_independent_tokens():
    sessions = AdminSessions(_settings())
    assert sessions.login("admin@tnqdo.com", "bad") is None

    first = sessions.login("admin@tnqdo.com", "admin123")
    second = sessions.login("admin@tnqdo.com", "admin123")
    assert first and second and first != second
    assert sessions.auth_for(first).is_authenticated() is True

    sessions.logout(first)
    assert sessions.auth_for(first).is_authenticated() is False
    assert sessions.auth_for(second).is_authenticated() is True
    assert sessions.auth_for(None).is_authenticated() is False
    assert sessions.auth_for("forged").is_authenticated() is False


def test_abandoned_sessions_are_swept_on_login(clock):
    sessions = AdminSessions(_settings(), now=clock)
    abandoned = sessions.login("admin@tnqdo.com", "admin123")
    assert sessions.active_count() == 1

    clock.now += timedelta(minutes=61)
    fresh = sessions.login("admin@tnqdo.com", "admin123")

    assert sessions.active_count() == 1
    assert sessions.auth_for(fresh).is_authenticated() is True
    assert sessions.auth_for(abandoned).is_authenticated() is False


def test_sweep_keeps_live_sessions(clock):
    sessions = AdminSessions(_settings(), now=clock)
    sessions.login("admin@tnqdo.com", "admin123")
    clock.now += timedelta(minutes=10)
    assert sessions.sweep_expired() == 0
    assert sessions.active_count() == 1
