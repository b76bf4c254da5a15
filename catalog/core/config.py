"""
Configuration helpers for the TNQDO catalog backend.

Routers, services and scripts read settings through ``get_settings()`` instead
of touching ``os.environ`` directly, so tests can swap the environment and call
``get_settings.cache_clear()``.
"""

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
import os

DEFAULT_DATA_FILE = Path(__file__).resolve().parents[1] / "data.json"

BACKEND_LOCAL = "local"
BACKEND_SQL = "sql"


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    storage_backend: str
    data_file: Path
    database_url: str
    admin_email: str
    admin_password: str
    admin_password_hash: str
    admin_session_timeout_minutes: int
    seed_defaults: bool
    cors_origins: tuple[str, ...]


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    def _bool(value: str | None, default: bool = False) -> bool:
        if value is None:
            return default
        return value.strip().lower() in {"1", "true", "yes", "on"}

    backend = (os.getenv("CATALOG_BACKEND") or BACKEND_LOCAL).strip().lower()
    if backend not in {BACKEND_LOCAL, BACKEND_SQL}:
        backend = BACKEND_LOCAL
    data_file = (os.getenv("CATALOG_DATA_FILE") or "").strip()
    origins = os.getenv("CORS_ORIGINS", "http://localhost:5173,http://127.0.0.1:5173")

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        storage_backend=backend,
        data_file=Path(data_file) if data_file else DEFAULT_DATA_FILE,
        database_url=os.getenv("DATABASE_URL", ""),
        admin_email=os.getenv("ADMIN_EMAIL", "admin@tnqdo.com").strip().lower(),
        admin_password=os.getenv("ADMIN_PASSWORD", "admin123"),
        admin_password_hash=os.getenv("ADMIN_PASSWORD_HASH", ""),
        admin_session_timeout_minutes=_int(os.getenv("ADMIN_SESSION_TIMEOUT_MINUTES", "60"), 60),
        seed_defaults=_bool(os.getenv("SEED_DEFAULTS"), True),
        cors_origins=tuple(o.strip().rstrip("/") for o in origins.split(",") if o.strip()),
    )
