"""Search/filter/sort rules shared by the local and SQL repositories."""
from __future__ import annotations

from typing import Iterable

from catalog.core.utils import parse_iso
from catalog.domain.models import BlogPost, Course


def _contains(haystack: str, needle: str) -> bool:
    return needle in (haystack or "").lower()


def course_matches(course: Course, query: str = "", level: str = "") -> bool:
    """Active courses whose name/description contain ``query`` (case-insensitive), optionally of one level."""
    if not course.is_active:
        return False
    if level and course.level != level:
        return False
    needle = (query or "").lower()
    if not needle:
        return True
    return _contains(course.name, needle) or _contains(course.description, needle)


def post_matches(post: BlogPost, query: str = "", category: str = "") -> bool:
    if not post.is_published:
        return False
    if category and post.category != category:
        return False
    needle = (query or "").lower()
    if not needle:
        return True
    return (
        _contains(post.title, needle)
        or _contains(post.excerpt, needle)
        or _contains(post.content, needle)
        or any(_contains(tag, needle) for tag in post.tags)
    )


def first_active(courses: Iterable[Course], limit: int) -> list:
    """Storage order, not a ranking."""
    if limit <= 0:
        return []
    picked = []
    for course in courses:
        if course.is_active:
            picked.append(course)
            if len(picked) >= limit:
                break
    return picked


def most_viewed(posts: Iterable[BlogPost], limit: int) -> list[BlogPost]:
    published = [post for post in posts if post.is_published]
    # sorted() is stable: equal view counts keep storage order
    return sorted(published, key=lambda post: post.views, reverse=True)[: max(0, limit)]


def most_recent(posts: Iterable[BlogPost], limit: int) -> list[BlogPost]:
    published = [post for post in posts if post.is_published]
    return sorted(published, key=lambda post: parse_iso(post.published_at), reverse=True)[: max(0, limit)]


def unique_categories(posts: Iterable[BlogPost]) -> list[str]:
    seen: dict[str, None] = {}
    for post in posts:
        seen.setdefault(post.category, None)
    return list(seen)
