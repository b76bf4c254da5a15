from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Make the catalog package importable during local test runs
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from catalog.domain.models import DEFAULT_COURSE_IMAGE, DEFAULT_POST_CATEGORY, DEFAULT_REQUIREMENTS
from catalog.repositories import StorageError
from catalog.repositories.json_storage import MemoryStorage
from catalog.repositories.local_repository import LocalBlogRepository, LocalCourseRepository
from catalog.repositories.seed_data import default_courses, default_posts


class _Clock:
    def __init__(self, *values: str) -> None:
        self.values = list(values)

    def __call__(self) -> str:
        return self.values.pop(0) if len(self.values) > 1 else self.values[0]


@pytest.fixture()
def courses():
    return LocalCourseRepository(MemoryStorage(), clock=_Clock("2025-02-01T08:00:00.000Z"))


@pytest.fixture()
def posts():
    return LocalBlogRepository(
        MemoryStorage(),
        clock=_Clock("2025-02-01T08:00:00.000Z", "2025-02-02T08:00:00.000Z", "2025-02-03T08:00:00.000Z"),
    )


def test_first_course_gets_counter_id_and_defaults(courses):
    course = courses.add({"name": "N5 Cơ Bản", "price": 1500000, "level": "N5"})

    assert course.id == "course-1"
    assert course.is_active is True
    assert course.created_at == "2025-02-01T08:00:00.000Z"
    assert course.features == []
    assert course.image == DEFAULT_COURSE_IMAGE
    assert course.requirements == list(DEFAULT_REQUIREMENTS)
    assert course.syllabus[0].week == 1
    assert courses.get_by_id("course-1") == course


def test_ids_keep_counting_after_delete(courses):
    first = courses.add({"name": "A"})
    assert courses.delete(first.id) is True
    second = courses.add({"name": "B"})
    assert second.id == "course-2"
    assert courses.delete("course-99") is False


def test_update_keeps_id_and_created_at(courses):
    course = courses.add({"name": "A", "price": 100})
    updated = courses.update(
        course.id,
        {"id": "hijack", "createdAt": "1999-01-01T00:00:00Z", "price": 200, "is_active": False},
    )

    assert updated.id == course.id
    assert updated.created_at == course.created_at
    assert updated.price == 200
    assert updated.is_active is False
    assert updated.name == "A"
    assert courses.get_by_id(course.id) == updated


def test_update_missing_course_returns_none(courses):
    assert courses.update("course-404", {"name": "x"}) is None


def test_search_level_filter_wins_over_query_match(courses):
    courses.add({"name": "N5 Cơ Bản", "level": "N5"})
    n4 = courses.add({"name": "N5 Review Cho N4", "level": "N4"})

    assert courses.search("n5", "N4") == [n4]


def test_search_skips_inactive_and_matches_description(courses):
    courses.add({"name": "Hidden", "description": "kanji", "isActive": False})
    visible = courses.add({"name": "Visible", "description": "Luyện KANJI mỗi ngày"})

    assert courses.search("kanji") == [visible]
    assert courses.search() == [visible]


def test_featured_is_first_active_in_storage_order(courses):
    courses.seed_if_empty(default_courses())
    featured = courses.featured(3)
    assert [c.id for c in featured] == ["jlpt-n5", "jlpt-n4", "jlpt-n3"]
    assert courses.featured(0) == []


def test_failed_write_raises_storage_error():
    repo = LocalCourseRepository(MemoryStorage(quota=10))
    with pytest.raises(StorageError):
        repo.add({"name": "Too big for the quota"})
    assert repo.get_all() == []


def test_export_clear_import_roundtrip(courses):
    courses.seed_if_empty(default_courses())
    snapshot = courses.export_snapshot()
    courses.clear()
    assert courses.get_all() == []
    assert courses.import_snapshot(snapshot) is True
    assert courses.get_all() == default_courses()


def test_post_defaults_and_slug(posts):
    post = posts.add({"title": "Lộ Trình Học JLPT N5 Trong 3 Tháng"})

    assert post.id == "post-1"
    assert post.slug == "lo-trinh-hoc-jlpt-n5-trong-3-thang"
    assert post.category == DEFAULT_POST_CATEGORY
    assert post.author.name == "TNQDO"
    assert post.views == 0
    assert post.published_at == post.updated_at == "2025-02-01T08:00:00.000Z"
    assert posts.get_by_slug(post.slug) == post


def test_update_post_keeps_views_and_moves_updated_at(posts):
    post = posts.add({"title": "Kanji"})
    posts.increment_views(post.id)
    updated = posts.update(post.id, {"title": "Kanji 2", "views": 0, "id": "other"})

    assert updated.id == post.id
    assert updated.views == 1
    assert updated.title == "Kanji 2"
    assert updated.updated_at == "2025-02-02T08:00:00.000Z"


def test_increment_views_twice_changes_only_views(posts):
    posts.seed_if_empty(default_posts())
    before = posts.get_by_id("blog-1")

    posts.increment_views("blog-1")
    posts.increment_views("blog-1")

    after = posts.get_by_id("blog-1")
    assert after.views == before.views + 2
    assert after.to_dict() | {"views": before.views} == before.to_dict()


def test_increment_views_on_missing_post_is_silent(posts):
    posts.increment_views("post-404")
    assert posts.get_all() == []


def test_blog_queries_only_consider_published_posts(posts):
    posts.seed_if_empty(default_posts())
    draft = posts.add({"title": "Mnemonics draft", "isPublished": False, "category": "JLPT"})

    assert draft not in posts.search("mnemonics")
    assert [p.id for p in posts.search("mnemonics")] == ["blog-1"]
    assert [p.id for p in posts.by_category("JLPT")] == ["blog-2"]
    assert [p.id for p in posts.featured(2)] == ["blog-1", "blog-2"]
    assert [p.id for p in posts.recent(5)] == ["blog-3", "blog-2", "blog-1"]
    assert posts.categories() == ["Học tiếng Nhật", "JLPT", "Văn hóa"]


def test_search_matches_tags(posts):
    tagged = posts.add({"title": "Một bài viết", "tags": ["Kaiwa", "Giao tiếp"]})
    assert posts.search("kaiwa") == [tagged]


def test_explicit_empty_lists_are_kept(courses):
    course = courses.add({"name": "X", "requirements": [], "outcomes": [], "syllabus": []})

    assert course.requirements == []
    assert course.outcomes == []
    assert course.syllabus == []
    assert courses.get_by_id(course.id) == course


def test_explicit_empty_author_is_kept(posts):
    post = posts.add({"title": "Ẩn danh", "author": {}})
    assert post.author.name == ""
    assert posts.get_by_id(post.id).author.name == ""


def test_update_to_empty_string_sticks(courses, posts):
    course = courses.add({"name": "A", "level": "N3"})
    updated = courses.update(course.id, {"image": "", "level": ""})
    assert (updated.image, updated.level) == ("", "")
    assert courses.get_by_id(course.id).image == ""

    post = posts.add({"title": "B"})
    assert posts.update(post.id, {"category": ""}).category == ""


def test_import_keeps_duplicate_ids_with_first_match(courses):
    assert courses.import_snapshot('[{"id": "a", "name": "A"}, {"id": "a", "name": "B"}]') is True
    assert [c.name for c in courses.get_all()] == ["A", "B"]
    assert courses.get_by_id("a").name == "A"


def test_import_storage_failure_raises():
    repo = LocalCourseRepository(MemoryStorage(quota=40))
    assert repo.import_snapshot("not json") is False
    with pytest.raises(StorageError):
        repo.import_snapshot('[{"id": "course-1", "name": "Một khóa học khá dài"}]')
