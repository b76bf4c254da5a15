"""
Composition root: one notifier, one repository per collection, one admin session registry.

Routers and scripts get their collaborators from a ``Catalog`` instead of
module-level globals, so tests can build an isolated one over memory storage.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Optional

from catalog.core.config import BACKEND_SQL, Settings, get_settings
from catalog.core.events import EventNotifier
from catalog.repositories import BlogRepository, CourseRepository
from catalog.repositories.json_storage import JsonFileStorage, KeyValueStorage
from catalog.repositories.local_repository import LocalBlogRepository, LocalCourseRepository
from catalog.repositories.seed_data import default_courses, default_posts
from catalog.services.admin_auth import AdminSessions
from catalog.services.blog_service import BlogService
from catalog.services.course_service import AuthGate, CourseService

logger = logging.getLogger(__name__)


@dataclass
class Catalog:
    settings: Settings
    course_repository: CourseRepository
    blog_repository: BlogRepository
    notifier: EventNotifier = field(default_factory=EventNotifier)
    sessions: Optional[AdminSessions] = None

    def __post_init__(self) -> None:
        if self.sessions is None:
            self.sessions = AdminSessions(self.settings)

    def course_service(self, auth: AuthGate) -> CourseService:
        return CourseService(self.course_repository, self.notifier, auth)

    def blog_service(self, auth: AuthGate) -> BlogService:
        return BlogService(self.blog_repository, self.notifier, auth)

    def seed_defaults(self) -> None:
        self.course_repository.seed_if_empty(default_courses())
        self.blog_repository.seed_if_empty(default_posts())


def _sql_repositories() -> tuple[CourseRepository, BlogRepository]:
    from catalog.db.create_tables import create_all
    from catalog.repositories.sql_repository import SQLBlogRepository, SQLCourseRepository

    create_all()
    return SQLCourseRepository(), SQLBlogRepository()


def build_catalog(settings: Optional[Settings] = None, storage: Optional[KeyValueStorage] = None) -> Catalog:
    """
    Wire a Catalog for ``settings.storage_backend``.

    ``storage`` overrides the JSON file of the local backend (tests pass a
    ``MemoryStorage``); it is ignored for the SQL backend.
    """
    settings = settings or get_settings()
    if settings.storage_backend == BACKEND_SQL:
        courses, posts = _sql_repositories()
    else:
        kv = storage if storage is not None else JsonFileStorage(settings.data_file)
        courses, posts = LocalCourseRepository(kv), LocalBlogRepository(kv)
    catalog = Catalog(settings=settings, course_repository=courses, blog_repository=posts)
    if settings.seed_defaults:
        catalog.seed_defaults()
    logger.info("Catalog ready (backend=%s)", settings.storage_backend)
    return catalog


@lru_cache
def get_catalog() -> Catalog:
    return build_catalog()
