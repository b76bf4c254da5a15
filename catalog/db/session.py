"""
Engine and session helpers for the SQL catalog backend.

The engine is built once per ``DATABASE_URL``; tests point the variable at a
temporary SQLite file and clear both caches.
"""
from __future__ import annotations

from contextlib import contextmanager
from functools import lru_cache
from typing import Iterator

from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker, Session

from catalog.core.config import get_settings

Base = declarative_base()


@lru_cache
def get_engine():
    url = (get_settings().database_url or "").strip()
    if not url:
        raise RuntimeError("Set DATABASE_URL (or CATALOG_BACKEND=local) before using the SQL catalog backend.")
    return create_engine(url, future=True, pool_pre_ping=True)


@lru_cache
def _get_sessionmaker():
    # expire_on_commit=False: repositories map rows to dataclasses after commit.
    return sessionmaker(bind=get_engine(), autoflush=False, expire_on_commit=False, future=True)


@contextmanager
def get_session() -> Iterator[Session]:
    """One short-lived session per repository call; uncommitted work is rolled back on close."""
    session: Session = _get_sessionmaker()()
    try:
        yield session
    finally:
        session.close()
