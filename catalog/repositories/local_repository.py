"""Course and blog repositories over the JSON key-value storage."""
from __future__ import annotations

import json
import logging
from typing import Any, Callable, Mapping, Optional, Sequence

from catalog.core.utils import utc_now_iso
from catalog.domain import queries
from catalog.domain.models import (
    COURSE_ID_PREFIX,
    POST_ID_PREFIX,
    BlogPost,
    CourseDetail,
    build_course,
    build_post,
    merge_course,
    merge_post,
)
from catalog.repositories import StorageError
from catalog.repositories.json_storage import (
    BLOG_COUNTER_KEY,
    BLOG_KEY,
    COURSES_COUNTER_KEY,
    COURSES_KEY,
    EntityStore,
    KeyValueStorage,
)

logger = logging.getLogger(__name__)


def _index_of(documents: list[dict], record_id: str) -> Optional[int]:
    for index, document in enumerate(documents):
        if document.get("id") == record_id:
            return index
    return None


class LocalCourseRepository:
    """Courses kept as one JSON array under ``tnqdo_courses``."""

    def __init__(self, storage: KeyValueStorage, *, clock: Callable[[], str] = utc_now_iso) -> None:
        self.store = EntityStore(storage, COURSES_KEY, COURSES_COUNTER_KEY)
        self._clock = clock

    # -------------------------- reads --------------------------
    def get_all(self) -> list[CourseDetail]:
        return [CourseDetail.from_dict(document) for document in self.store.load_all()]

    def get_by_id(self, course_id: str) -> Optional[CourseDetail]:
        for course in self.get_all():
            if course.id == course_id:
                return course
        return None

    def search(self, query: str = "", level: str = "") -> list[CourseDetail]:
        return [course for course in self.get_all() if queries.course_matches(course, query, level)]

    def featured(self, limit: int = 3) -> list[CourseDetail]:
        return queries.first_active(self.get_all(), limit)

    # -------------------------- writes --------------------------
    def add(self, partial: Mapping[str, Any]) -> CourseDetail:
        documents = self.store.load_all()
        counter = self.store.next_id()
        course = build_course(f"{COURSE_ID_PREFIX}{counter}", partial, self._clock())
        documents.append(course.to_dict())
        if not self.store.save_all(documents):
            raise StorageError("Failed to add course")
        self.store.advance_counter()
        logger.info("Course %s added; %d courses stored", course.id, len(documents))
        return course

    def update(self, course_id: str, partial: Mapping[str, Any]) -> Optional[CourseDetail]:
        documents = self.store.load_all()
        index = _index_of(documents, course_id)
        if index is None:
            return None
        updated = merge_course(CourseDetail.from_dict(documents[index]), partial)
        documents[index] = updated.to_dict()
        if not self.store.save_all(documents):
            raise StorageError("Failed to update course")
        return updated

    def delete(self, course_id: str) -> bool:
        documents = self.store.load_all()
        remaining = [document for document in documents if document.get("id") != course_id]
        if len(remaining) == len(documents):
            return False
        if not self.store.save_all(remaining):
            raise StorageError("Failed to delete course")
        return True

    # -------------------------- maintenance --------------------------
    def seed_if_empty(self, defaults: Sequence[CourseDetail]) -> bool:
        return self.store.seed_if_empty([course.to_dict() for course in defaults])

    def clear(self) -> None:
        self.store.clear()

    def export_snapshot(self) -> str:
        return self.store.export_snapshot()

    def import_snapshot(self, text: str) -> bool:
        """False for malformed text; a storage failure raises StorageError."""
        try:
            valid = isinstance(json.loads(text), list)
        except (TypeError, ValueError):
            valid = False
        if not valid:
            logger.error("Rejected course backup: not a JSON array")
            return False
        if not self.store.import_snapshot(text):
            raise StorageError("Failed to import courses")
        return True


class LocalBlogRepository:
    """Blog posts kept as one JSON array under ``tnqdo_blog_posts``."""

    def __init__(self, storage: KeyValueStorage, *, clock: Callable[[], str] = utc_now_iso) -> None:
        self.store = EntityStore(storage, BLOG_KEY, BLOG_COUNTER_KEY)
        self._clock = clock

    # -------------------------- reads --------------------------
    def get_all(self) -> list[BlogPost]:
        return [BlogPost.from_dict(document) for document in self.store.load_all()]

    def get_by_id(self, post_id: str) -> Optional[BlogPost]:
        for post in self.get_all():
            if post.id == post_id:
                return post
        return None

    def get_by_slug(self, slug: str) -> Optional[BlogPost]:
        # Slugs are not unique; the first stored match wins.
        for post in self.get_all():
            if post.slug == slug:
                return post
        return None

    def search(self, query: str = "", category: str = "") -> list[BlogPost]:
        return [post for post in self.get_all() if queries.post_matches(post, query, category)]

    def by_category(self, category: str) -> list[BlogPost]:
        return [post for post in self.get_all() if post.is_published and post.category == category]

    def categories(self) -> list[str]:
        return queries.unique_categories(self.get_all())

    def featured(self, limit: int = 3) -> list[BlogPost]:
        return queries.most_viewed(self.get_all(), limit)

    def recent(self, limit: int = 5) -> list[BlogPost]:
        return queries.most_recent(self.get_all(), limit)

    # -------------------------- writes --------------------------
    def add(self, partial: Mapping[str, Any]) -> BlogPost:
        documents = self.store.load_all()
        counter = self.store.next_id()
        post = build_post(f"{POST_ID_PREFIX}{counter}", partial, self._clock())
        documents.append(post.to_dict())
        if not self.store.save_all(documents):
            raise StorageError("Failed to add blog post")
        self.store.advance_counter()
        return post

    def update(self, post_id: str, partial: Mapping[str, Any]) -> Optional[BlogPost]:
        documents = self.store.load_all()
        index = _index_of(documents, post_id)
        if index is None:
            return None
        updated = merge_post(BlogPost.from_dict(documents[index]), partial, self._clock())
        documents[index] = updated.to_dict()
        if not self.store.save_all(documents):
            raise StorageError("Failed to update blog post")
        return updated

    def delete(self, post_id: str) -> bool:
        documents = self.store.load_all()
        remaining = [document for document in documents if document.get("id") != post_id]
        if len(remaining) == len(documents):
            return False
        if not self.store.save_all(remaining):
            raise StorageError("Failed to delete blog post")
        return True

    def increment_views(self, post_id: str) -> None:
        documents = self.store.load_all()
        index = _index_of(documents, post_id)
        if index is None:
            return
        post = BlogPost.from_dict(documents[index])
        documents[index]["views"] = post.views + 1
        if not self.store.save_all(documents):
            logger.error("Error incrementing views for post %s", post_id)

    # -------------------------- maintenance --------------------------
    def seed_if_empty(self, defaults: Sequence[BlogPost]) -> bool:
        return self.store.seed_if_empty([post.to_dict() for post in defaults])

    def clear(self) -> None:
        self.store.clear()
