"""Course and blog repositories backed by SQLAlchemy (the remote relational variant)."""
from __future__ import annotations

import json
import logging
from contextlib import contextmanager
from typing import Any, Callable, Iterator, Mapping, Optional, Sequence

from sqlalchemy import select, update, delete, func
from sqlalchemy.exc import SQLAlchemyError

from catalog.core.casing import keys_to_camel, keys_to_snake
from catalog.core.utils import utc_now_iso
from catalog.db.models import BlogPostRow, CourseRow, IdCounter
from catalog.db.session import get_session
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

logger = logging.getLogger(__name__)

COURSES_COUNTER = "courses"
BLOG_COUNTER = "blog_posts"


# -------------------------- wire mapping --------------------------
def _row_values(row: Any) -> dict[str, Any]:
    return {column.name: getattr(row, column.name) for column in row.__table__.columns if column.name != "pk"}


def course_to_row(course: CourseDetail) -> dict[str, Any]:
    return keys_to_snake(course.to_dict())


def course_from_row(row: CourseRow) -> CourseDetail:
    return CourseDetail.from_dict(keys_to_camel(_row_values(row)))


def post_to_row(post: BlogPost) -> dict[str, Any]:
    document = post.to_dict()
    author = document.pop("author")
    document["authorName"] = author.get("name", "")
    document["authorAvatar"] = author.get("avatar")
    return keys_to_snake(document)


def post_from_row(row: BlogPostRow) -> BlogPost:
    document = keys_to_camel(_row_values(row))
    document["author"] = {"name": document.pop("authorName", ""), "avatar": document.pop("authorAvatar", None)}
    return BlogPost.from_dict(document)


class _SQLBase:
    def __init__(self, session_factory: Callable = get_session, *, clock: Callable[[], str] = utc_now_iso) -> None:
        self._session_factory = session_factory
        self._clock = clock

    @contextmanager
    def _session(self) -> Iterator[Any]:
        try:
            with self._session_factory() as session:
                yield session
        except SQLAlchemyError as exc:
            logger.error("Database error: %s", exc)
            raise StorageError(f"Database error: {exc.__class__.__name__}") from exc

    @staticmethod
    def _counter(session, name: str) -> int:
        counter = session.get(IdCounter, name)
        return int(counter.value) if counter else 1

    @staticmethod
    def _set_counter(session, name: str, value: int) -> None:
        counter = session.get(IdCounter, name)
        if counter:
            counter.value = value
        else:
            session.add(IdCounter(name=name, value=value))


class SQLCourseRepository(_SQLBase):
    """CRUD helpers for courses wrapping the SQLAlchemy session."""

    # -------------------------- reads --------------------------
    def get_all(self) -> list[CourseDetail]:
        with self._session() as session:
            rows = session.execute(select(CourseRow).order_by(CourseRow.pk)).scalars().all()
            return [course_from_row(row) for row in rows]

    def get_by_id(self, course_id: str) -> Optional[CourseDetail]:
        with self._session() as session:
            stmt = select(CourseRow).where(CourseRow.id == course_id).order_by(CourseRow.pk).limit(1)
            row = session.execute(stmt).scalars().first()
            return course_from_row(row) if row else None

    def search(self, query: str = "", level: str = "") -> list[CourseDetail]:
        with self._session() as session:
            stmt = select(CourseRow).where(CourseRow.is_active.is_(True))
            if level:
                stmt = stmt.where(CourseRow.level == level)
            rows = session.execute(stmt.order_by(CourseRow.pk)).scalars().all()
            courses = [course_from_row(row) for row in rows]
        # Case folding happens in Python: SQLite's lower() ignores Vietnamese letters.
        return [course for course in courses if queries.course_matches(course, query, level)]

    def featured(self, limit: int = 3) -> list[CourseDetail]:
        if limit <= 0:
            return []
        with self._session() as session:
            stmt = select(CourseRow).where(CourseRow.is_active.is_(True)).order_by(CourseRow.pk).limit(limit)
            return [course_from_row(row) for row in session.execute(stmt).scalars().all()]

    # -------------------------- writes --------------------------
    def add(self, partial: Mapping[str, Any]) -> CourseDetail:
        with self._session() as session:
            counter = self._counter(session, COURSES_COUNTER)
            course = build_course(f"{COURSE_ID_PREFIX}{counter}", partial, self._clock())
            session.add(CourseRow(**course_to_row(course)))
            self._set_counter(session, COURSES_COUNTER, counter + 1)
            session.commit()
            return course

    def update(self, course_id: str, partial: Mapping[str, Any]) -> Optional[CourseDetail]:
        with self._session() as session:
            stmt = select(CourseRow).where(CourseRow.id == course_id).order_by(CourseRow.pk).limit(1)
            row = session.execute(stmt).scalars().first()
            if not row:
                return None
            updated = merge_course(course_from_row(row), partial)
            for column, value in course_to_row(updated).items():
                setattr(row, column, value)
            session.commit()
            return updated

    def delete(self, course_id: str) -> bool:
        with self._session() as session:
            result = session.execute(delete(CourseRow).where(CourseRow.id == course_id))
            session.commit()
            return (result.rowcount or 0) > 0

    # -------------------------- maintenance --------------------------
    def seed_if_empty(self, defaults: Sequence[CourseDetail]) -> bool:
        with self._session() as session:
            existing = session.execute(select(func.count()).select_from(CourseRow)).scalar_one()
            if existing:
                return False
            for course in defaults:
                session.add(CourseRow(**course_to_row(course)))
            self._set_counter(session, COURSES_COUNTER, len(defaults) + 1)
            session.commit()
        logger.info("Initialized %d default courses", len(defaults))
        return True

    def clear(self) -> None:
        with self._session() as session:
            session.execute(delete(CourseRow))
            session.execute(delete(IdCounter).where(IdCounter.name == COURSES_COUNTER))
            session.commit()

    def export_snapshot(self) -> str:
        return json.dumps([course.to_dict() for course in self.get_all()], ensure_ascii=False, indent=2)

    def import_snapshot(self, text: str) -> bool:
        try:
            items = json.loads(text)
        except (TypeError, ValueError) as exc:
            logger.error("Error importing courses: %s", exc)
            return False
        if not isinstance(items, list):
            return False
        courses = [CourseDetail.from_dict(item) for item in items if isinstance(item, dict)]
        # Database failures raise StorageError from here on.
        with self._session() as session:
            session.execute(delete(CourseRow))
            for course in courses:
                session.add(CourseRow(**course_to_row(course)))
            session.commit()
        return True


class SQLBlogRepository(_SQLBase):
    """CRUD helpers for blog posts wrapping the SQLAlchemy session."""

    # -------------------------- reads --------------------------
    def get_all(self) -> list[BlogPost]:
        with self._session() as session:
            rows = session.execute(select(BlogPostRow).order_by(BlogPostRow.pk)).scalars().all()
            return [post_from_row(row) for row in rows]

    def get_by_id(self, post_id: str) -> Optional[BlogPost]:
        with self._session() as session:
            stmt = select(BlogPostRow).where(BlogPostRow.id == post_id).order_by(BlogPostRow.pk).limit(1)
            row = session.execute(stmt).scalars().first()
            return post_from_row(row) if row else None

    def get_by_slug(self, slug: str) -> Optional[BlogPost]:
        with self._session() as session:
            stmt = select(BlogPostRow).where(BlogPostRow.slug == slug).order_by(BlogPostRow.pk).limit(1)
            row = session.execute(stmt).scalars().first()
            return post_from_row(row) if row else None

    def search(self, query: str = "", category: str = "") -> list[BlogPost]:
        with self._session() as session:
            stmt = select(BlogPostRow).where(BlogPostRow.is_published.is_(True))
            if category:
                stmt = stmt.where(BlogPostRow.category == category)
            rows = session.execute(stmt.order_by(BlogPostRow.pk)).scalars().all()
            posts = [post_from_row(row) for row in rows]
        return [post for post in posts if queries.post_matches(post, query, category)]

    def by_category(self, category: str) -> list[BlogPost]:
        with self._session() as session:
            stmt = (
                select(BlogPostRow)
                .where(BlogPostRow.is_published.is_(True), BlogPostRow.category == category)
                .order_by(BlogPostRow.pk)
            )
            return [post_from_row(row) for row in session.execute(stmt).scalars().all()]

    def categories(self) -> list[str]:
        with self._session() as session:
            names = session.execute(select(BlogPostRow.category).order_by(BlogPostRow.pk)).scalars().all()
        return list(dict.fromkeys(names))

    def featured(self, limit: int = 3) -> list[BlogPost]:
        return queries.most_viewed(self.get_all(), limit)

    def recent(self, limit: int = 5) -> list[BlogPost]:
        return queries.most_recent(self.get_all(), limit)

    # -------------------------- writes --------------------------
    def add(self, partial: Mapping[str, Any]) -> BlogPost:
        with self._session() as session:
            counter = self._counter(session, BLOG_COUNTER)
            post = build_post(f"{POST_ID_PREFIX}{counter}", partial, self._clock())
            session.add(BlogPostRow(**post_to_row(post)))
            self._set_counter(session, BLOG_COUNTER, counter + 1)
            session.commit()
            return post

    def update(self, post_id: str, partial: Mapping[str, Any]) -> Optional[BlogPost]:
        with self._session() as session:
            stmt = select(BlogPostRow).where(BlogPostRow.id == post_id).order_by(BlogPostRow.pk).limit(1)
            row = session.execute(stmt).scalars().first()
            if not row:
                return None
            updated = merge_post(post_from_row(row), partial, self._clock())
            for column, value in post_to_row(updated).items():
                setattr(row, column, value)
            session.commit()
            return updated

    def delete(self, post_id: str) -> bool:
        with self._session() as session:
            result = session.execute(delete(BlogPostRow).where(BlogPostRow.id == post_id))
            session.commit()
            return (result.rowcount or 0) > 0

    def increment_views(self, post_id: str) -> None:
        try:
            with self._session_factory() as session:
                stmt = (
                    update(BlogPostRow)
                    .where(BlogPostRow.id == post_id)
                    .values(views=BlogPostRow.views + 1)
                )
                session.execute(stmt)
                session.commit()
        except SQLAlchemyError as exc:
            logger.error("Error incrementing views for post %s: %s", post_id, exc)

    # -------------------------- maintenance --------------------------
    def seed_if_empty(self, defaults: Sequence[BlogPost]) -> bool:
        with self._session() as session:
            existing = session.execute(select(func.count()).select_from(BlogPostRow)).scalar_one()
            if existing:
                return False
            for post in defaults:
                session.add(BlogPostRow(**post_to_row(post)))
            self._set_counter(session, BLOG_COUNTER, len(defaults) + 1)
            session.commit()
        logger.info("Initialized %d default blog posts", len(defaults))
        return True

    def clear(self) -> None:
        with self._session() as session:
            session.execute(delete(BlogPostRow))
            session.execute(delete(IdCounter).where(IdCounter.name == BLOG_COUNTER))
            session.commit()
