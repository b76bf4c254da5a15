"""
Persistence adapters.

Two variants implement the same repository interfaces: ``local_repository``
(JSON documents in a key-value storage) and ``sql_repository`` (SQLAlchemy).
Services depend on the Protocols below, never on a concrete backend; the
composition root in ``catalog.services.container`` picks one.
"""
from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol, Sequence

from catalog.domain.models import BlogPost, CourseDetail


class StorageError(Exception):
    """Raised when a write could not be persisted (quota, serialization, SQL failure)."""


class CourseRepository(Protocol):
    def get_all(self) -> list[CourseDetail]: ...

    def get_by_id(self, course_id: str) -> Optional[CourseDetail]: ...

    def add(self, partial: Mapping[str, Any]) -> CourseDetail: ...

    def update(self, course_id: str, partial: Mapping[str, Any]) -> Optional[CourseDetail]: ...

    def delete(self, course_id: str) -> bool: ...

    def search(self, query: str = "", level: str = "") -> list[CourseDetail]: ...

    def featured(self, limit: int = 3) -> list[CourseDetail]: ...

    def seed_if_empty(self, defaults: Sequence[CourseDetail]) -> bool: ...

    def clear(self) -> None: ...

    def export_snapshot(self) -> str: ...

    def import_snapshot(self, text: str) -> bool: ...


class BlogRepository(Protocol):
    def get_all(self) -> list[BlogPost]: ...

    def get_by_id(self, post_id: str) -> Optional[BlogPost]: ...

    def get_by_slug(self, slug: str) -> Optional[BlogPost]: ...

    def add(self, partial: Mapping[str, Any]) -> BlogPost: ...

    def update(self, post_id: str, partial: Mapping[str, Any]) -> Optional[BlogPost]: ...

    def delete(self, post_id: str) -> bool: ...

    def search(self, query: str = "", category: str = "") -> list[BlogPost]: ...

    def by_category(self, category: str) -> list[BlogPost]: ...

    def categories(self) -> list[str]: ...

    def featured(self, limit: int = 3) -> list[BlogPost]: ...

    def recent(self, limit: int = 5) -> list[BlogPost]: ...

    def increment_views(self, post_id: str) -> None: ...

    def seed_if_empty(self, defaults: Sequence[BlogPost]) -> bool: ...

    def clear(self) -> None: ...


__all__ = ["StorageError", "CourseRepository", "BlogRepository"]
