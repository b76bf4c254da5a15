"""
Smoke tests for the SQL repositories against a temporary SQLite database.
"""
from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Make the catalog package importable during local test runs
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from catalog.core import config as core_config
from catalog.db import models
from catalog.db import session as db_session
from catalog.repositories import StorageError
from catalog.repositories.seed_data import default_courses, default_posts
from catalog.repositories.sql_repository import (
    SQLBlogRepository,
    SQLCourseRepository,
    post_from_row,
    post_to_row,
)


@pytest.fixture()
def temp_db(tmp_path, monkeypatch):
    """Point DATABASE_URL at a throwaway SQLite file and reset the cached engine around the test."""
    db_file = tmp_path / "test.db"
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{db_file}")
    core_config.get_settings.cache_clear()
    db_session.get_engine.cache_clear()
    db_session._get_sessionmaker.cache_clear()  # type: ignore[attr-defined]

    engine = db_session.get_engine()
    models.Base.metadata.drop_all(bind=engine)
    models.Base.metadata.create_all(bind=engine)

    yield db_file

    models.Base.metadata.drop_all(bind=engine)
    engine.dispose()
    db_session.get_engine.cache_clear()
    db_session._get_sessionmaker.cache_clear()  # type: ignore[attr-defined]
    core_config.get_settings.cache_clear()


def _clock():
    return "2025-03-01T00:00:00.000Z"


def test_course_crud_flow(temp_db):
    repo = SQLCourseRepository(clock=_clock)
    course = repo.add({"name": "N5 Cơ Bản", "price": 1500000, "level": "N5"})
    assert course.id == "course-1"
    assert repo.get_by_id("course-1") == course

    second = repo.add({"name": "N4", "level": "N4"})
    assert second.id == "course-2"

    updated = repo.update("course-1", {"price": 1800000, "createdAt": "2000-01-01T00:00:00Z"})
    assert updated.price == 1800000
    assert updated.created_at == course.created_at
    assert repo.get_by_id("course-1") == updated

    assert repo.delete("course-2") is True
    assert repo.delete("course-2") is False
    assert [c.id for c in repo.get_all()] == ["course-1"]
    assert repo.update("course-2", {"name": "x"}) is None


def test_course_search_and_featured(temp_db):
    repo = SQLCourseRepository(clock=_clock)
    repo.add({"name": "N5 Cơ Bản", "level": "N5"})
    n4 = repo.add({"name": "N5 Review Cho N4", "level": "N4"})
    repo.add({"name": "Hidden N5", "level": "N4", "isActive": False})

    assert repo.search("n5", "N4") == [n4]
    assert [c.name for c in repo.featured(5)] == ["N5 Cơ Bản", "N5 Review Cho N4"]


def test_course_seed_export_import(temp_db):
    repo = SQLCourseRepository(clock=_clock)
    assert repo.seed_if_empty(default_courses()) is True
    assert repo.seed_if_empty(default_courses()) is False
    assert repo.get_all() == default_courses()

    snapshot = repo.export_snapshot()
    repo.clear()
    assert repo.get_all() == []
    assert repo.add({"name": "after clear"}).id == "course-1"

    assert repo.import_snapshot(snapshot) is True
    assert [c.id for c in repo.get_all()] == [c.id for c in default_courses()]
    assert repo.import_snapshot("[oops") is False


def test_blog_flow(temp_db):
    repo = SQLBlogRepository(clock=_clock)
    repo.seed_if_empty(default_posts())

    post = repo.add({"title": "Văn hóa trà đạo", "category": "Văn hóa", "tags": ["trà"]})
    assert post.id == "post-4"
    assert repo.get_by_slug("van-hoa-tra-dao") == post

    repo.increment_views("blog-3")
    repo.increment_views("blog-3")
    assert repo.get_by_id("blog-3").views == 158

    assert [p.id for p in repo.by_category("Văn hóa")] == ["blog-3", "post-4"]
    assert [p.id for p in repo.search("trà")] == ["post-4"]
    assert repo.categories() == ["Học tiếng Nhật", "JLPT", "Văn hóa"]
    assert [p.id for p in repo.featured(1)] == ["blog-1"]
    assert repo.recent(1)[0].id == "post-4"

    assert repo.delete("post-4") is True
    assert repo.get_by_slug("van-hoa-tra-dao") is None


def test_post_row_mapping_flattens_author():
    post = default_posts()[0]
    row = post_to_row(post)
    assert row["author_name"] == post.author.name
    assert row["author_avatar"] == post.author.avatar
    assert "is_published" in row and "isPublished" not in row
    assert post_from_row(models.BlogPostRow(**row)) == post


def test_create_all_reports_catalog_tables(temp_db):
    from catalog.db.create_tables import create_all

    assert create_all() == ["blog_posts", "courses", "id_counters"]


def test_import_accepts_duplicate_ids_like_the_local_store(temp_db):
    repo = SQLCourseRepository(clock=_clock)
    assert repo.import_snapshot('[{"id": "a", "name": "A"}, {"id": "a", "name": "B"}]') is True
    assert [c.name for c in repo.get_all()] == ["A", "B"]
    assert repo.get_by_id("a").name == "A"

    repo.import_snapshot('[{"id": "course-1", "name": "Imported"}]')
    added = repo.add({"name": "New"})
    assert added.id == "course-1"
    assert repo.get_by_id("course-1").name == "Imported"


def test_import_database_failure_raises_storage_error(temp_db):
    repo = SQLCourseRepository(clock=_clock)
    models.Base.metadata.drop_all(bind=db_session.get_engine())

    with pytest.raises(StorageError):
        repo.import_snapshot('[{"id": "course-1"}]')
    assert repo.import_snapshot("{bad") is False
    models.Base.metadata.create_all(bind=db_session.get_engine())
