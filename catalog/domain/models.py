"""
Catalog records (courses, blog posts) and the rules for creating and merging them.

Records live in storage as JSON documents with camelCase keys (``isActive``,
``createdAt``...). The dataclasses below are the in-process view; ``to_dict``
and ``from_dict`` translate between the two. Both storage variants build and
merge records through the helpers at the bottom of this module so defaults and
immutable fields stay identical.
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Mapping, Optional

from catalog.core.casing import to_camel
from catalog.core.utils import later_iso
from catalog.domain.slugs import generate_slug

COURSE_LEVELS = ("N5", "N4", "N3", "Business", "Professional")

COURSE_ID_PREFIX = "course-"
POST_ID_PREFIX = "post-"

DEFAULT_COURSE_LEVEL = "N5"
DEFAULT_COURSE_IMAGE = (
    "https://images.unsplash.com/photo-1516979187457-637abb4f9353"
    "?ixlib=rb-4.0.3&auto=format&fit=crop&w=400&q=80"
)
DEFAULT_POST_IMAGE = (
    "https://images.unsplash.com/photo-1499750310107-5fef28a66643"
    "?ixlib=rb-4.0.3&auto=format&fit=crop&w=800&q=80"
)
DEFAULT_POST_CATEGORY = "Học tiếng Nhật"
DEFAULT_AUTHOR_NAME = "TNQDO"
DEFAULT_REQUIREMENTS = ("Có đam mê học tiếng Nhật", "Cam kết học tập nghiêm túc")
DEFAULT_OUTCOMES = ("Nắm vững kiến thức cấp độ", "Có thể giao tiếp cơ bản")
DEFAULT_SYLLABUS_TOPIC = "Giới thiệu khóa học"
DEFAULT_SYLLABUS_CONTENT = ("Tổng quan chương trình", "Mục tiêu học tập", "Phương pháp học")

# Fields a caller may change through update(); id, createdAt and views are not listed.
COURSE_UPDATABLE_FIELDS = (
    "name",
    "level",
    "description",
    "duration",
    "price",
    "image",
    "features",
    "isActive",
    "syllabus",
    "requirements",
    "outcomes",
)
POST_UPDATABLE_FIELDS = (
    "title",
    "slug",
    "excerpt",
    "content",
    "image",
    "category",
    "tags",
    "author",
    "publishedAt",
    "isPublished",
)


def _as_int(value: Any, default: int = 0) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def _str_or(value: Any, default: str) -> str:
    # Only a missing value takes the default; a stored "" stays "".
    return default if value is None else str(value)


def _as_str_list(value: Any) -> list[str]:
    if not isinstance(value, (list, tuple)):
        return []
    return [str(item) for item in value]


@dataclass
class SyllabusWeek:
    week: int
    topic: str
    content: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {"week": self.week, "topic": self.topic, "content": list(self.content)}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SyllabusWeek":
        return cls(
            week=_as_int(data.get("week"), 1),
            topic=str(data.get("topic") or ""),
            content=_as_str_list(data.get("content")),
        )


def default_syllabus() -> list[SyllabusWeek]:
    return [SyllabusWeek(week=1, topic=DEFAULT_SYLLABUS_TOPIC, content=list(DEFAULT_SYLLABUS_CONTENT))]


def _syllabus_from(value: Any) -> list[SyllabusWeek]:
    if not isinstance(value, (list, tuple)):
        return []
    weeks = []
    for item in value:
        if isinstance(item, SyllabusWeek):
            weeks.append(item)
        elif isinstance(item, Mapping):
            weeks.append(SyllabusWeek.from_dict(item))
    return weeks


@dataclass
class Course:
    """Catalog listing of a course (what cards and tables show)."""

    id: str
    name: str = ""
    level: str = DEFAULT_COURSE_LEVEL
    description: str = ""
    duration: str = ""
    price: int = 0
    image: str = DEFAULT_COURSE_IMAGE
    features: list[str] = field(default_factory=list)
    is_active: bool = True
    created_at: str = ""

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "level": self.level,
            "description": self.description,
            "duration": self.duration,
            "price": self.price,
            "image": self.image,
            "features": list(self.features),
            "isActive": self.is_active,
            "createdAt": self.created_at,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Course":
        return cls(**_course_fields(data))


@dataclass
class CourseDetail(Course):
    """Course plus the syllabus/requirements/outcomes shown on the detail page."""

    syllabus: list[SyllabusWeek] = field(default_factory=default_syllabus)
    requirements: list[str] = field(default_factory=lambda: list(DEFAULT_REQUIREMENTS))
    outcomes: list[str] = field(default_factory=lambda: list(DEFAULT_OUTCOMES))

    def to_dict(self) -> dict:
        data = super().to_dict()
        data["syllabus"] = [week.to_dict() for week in self.syllabus]
        data["requirements"] = list(self.requirements)
        data["outcomes"] = list(self.outcomes)
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CourseDetail":
        return cls(
            **_course_fields(data),
            syllabus=_syllabus_from(data.get("syllabus")),
            requirements=_as_str_list(data.get("requirements")),
            outcomes=_as_str_list(data.get("outcomes")),
        )

    def summary(self) -> Course:
        return Course(
            id=self.id,
            name=self.name,
            level=self.level,
            description=self.description,
            duration=self.duration,
            price=self.price,
            image=self.image,
            features=list(self.features),
            is_active=self.is_active,
            created_at=self.created_at,
        )


def _course_fields(data: Mapping[str, Any]) -> dict:
    is_active = data.get("isActive")
    return {
        "id": str(data.get("id") or ""),
        "name": str(data.get("name") or ""),
        "level": _str_or(data.get("level"), DEFAULT_COURSE_LEVEL),
        "description": str(data.get("description") or ""),
        "duration": str(data.get("duration") or ""),
        "price": _as_int(data.get("price"), 0),
        "image": _str_or(data.get("image"), DEFAULT_COURSE_IMAGE),
        "features": _as_str_list(data.get("features")),
        "is_active": True if is_active is None else bool(is_active),
        "created_at": str(data.get("createdAt") or ""),
    }


@dataclass
class Author:
    name: str = DEFAULT_AUTHOR_NAME
    avatar: Optional[str] = None

    def to_dict(self) -> dict:
        data = {"name": self.name}
        if self.avatar:
            data["avatar"] = self.avatar
        return data

    @classmethod
    def from_value(cls, value: Any) -> "Author":
        if isinstance(value, Author):
            return value
        if isinstance(value, Mapping):
            return cls(name=str(value.get("name") or ""), avatar=value.get("avatar") or None)
        return cls()


@dataclass
class BlogPost:
    id: str
    title: str = ""
    slug: str = ""
    excerpt: str = ""
    content: str = ""
    image: str = DEFAULT_POST_IMAGE
    category: str = DEFAULT_POST_CATEGORY
    tags: list[str] = field(default_factory=list)
    author: Author = field(default_factory=Author)
    published_at: str = ""
    updated_at: str = ""
    is_published: bool = True
    views: int = 0

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "slug": self.slug,
            "excerpt": self.excerpt,
            "content": self.content,
            "image": self.image,
            "category": self.category,
            "tags": list(self.tags),
            "author": self.author.to_dict(),
            "publishedAt": self.published_at,
            "updatedAt": self.updated_at,
            "isPublished": self.is_published,
            "views": self.views,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "BlogPost":
        is_published = data.get("isPublished")
        return cls(
            id=str(data.get("id") or ""),
            title=str(data.get("title") or ""),
            slug=str(data.get("slug") or ""),
            excerpt=str(data.get("excerpt") or ""),
            content=str(data.get("content") or ""),
            image=_str_or(data.get("image"), DEFAULT_POST_IMAGE),
            category=_str_or(data.get("category"), DEFAULT_POST_CATEGORY),
            tags=_as_str_list(data.get("tags")),
            author=Author.from_value(data.get("author")),
            published_at=str(data.get("publishedAt") or ""),
            updated_at=str(data.get("updatedAt") or ""),
            is_published=True if is_published is None else bool(is_published),
            views=max(0, _as_int(data.get("views"), 0)),
        )


# ------------------------------------------------------------------ build/merge
def normalize_partial(partial: Mapping[str, Any] | None) -> dict[str, Any]:
    """Accept ``is_active`` as well as ``isActive``; ``None`` values mean "not supplied"."""
    if not partial:
        return {}
    return {to_camel(key): value for key, value in partial.items() if value is not None}


def _plain(value: Any) -> Any:
    if isinstance(value, (SyllabusWeek, Author)):
        return value.to_dict()
    if isinstance(value, (list, tuple)):
        return [_plain(item) for item in value]
    return value


def build_course(course_id: str, partial: Mapping[str, Any] | None, now: str) -> CourseDetail:
    """Materialize a new course: caller fields over documented defaults."""
    data = normalize_partial(partial)
    is_active = data.get("isActive")
    syllabus = _syllabus_from(_plain(data.get("syllabus"))) if "syllabus" in data else default_syllabus()
    return CourseDetail(
        id=course_id,
        name=str(data.get("name") or ""),
        level=str(data.get("level") or DEFAULT_COURSE_LEVEL),
        description=str(data.get("description") or ""),
        duration=str(data.get("duration") or ""),
        price=_as_int(data.get("price"), 0),
        image=str(data.get("image") or DEFAULT_COURSE_IMAGE),
        features=_as_str_list(data.get("features")),
        is_active=True if is_active is None else bool(is_active),
        created_at=now,
        syllabus=syllabus,
        requirements=_as_str_list(data["requirements"]) if "requirements" in data else list(DEFAULT_REQUIREMENTS),
        outcomes=_as_str_list(data["outcomes"]) if "outcomes" in data else list(DEFAULT_OUTCOMES),
    )


def merge_course(existing: CourseDetail, partial: Mapping[str, Any] | None) -> CourseDetail:
    """Shallow-merge the updatable fields of ``partial``; id and createdAt always survive."""
    data = normalize_partial(partial)
    document = existing.to_dict()
    for key in COURSE_UPDATABLE_FIELDS:
        if key in data:
            document[key] = _plain(data[key])
    merged = CourseDetail.from_dict(document)
    return replace(merged, id=existing.id, created_at=existing.created_at)


def build_post(post_id: str, partial: Mapping[str, Any] | None, now: str) -> BlogPost:
    data = normalize_partial(partial)
    title = str(data.get("title") or "")
    is_published = data.get("isPublished")
    return BlogPost(
        id=post_id,
        title=title,
        slug=str(data.get("slug") or generate_slug(title)),
        excerpt=str(data.get("excerpt") or ""),
        content=str(data.get("content") or ""),
        image=str(data.get("image") or DEFAULT_POST_IMAGE),
        category=str(data.get("category") or DEFAULT_POST_CATEGORY),
        tags=_as_str_list(data.get("tags")),
        author=Author.from_value(data["author"]) if "author" in data else Author(),
        published_at=str(data.get("publishedAt") or now),
        updated_at=now,
        is_published=True if is_published is None else bool(is_published),
        views=0,
    )


def merge_post(existing: BlogPost, partial: Mapping[str, Any] | None, now: str) -> BlogPost:
    """Shallow-merge updatable fields; id and views are kept, updatedAt moves forward."""
    data = normalize_partial(partial)
    document = existing.to_dict()
    for key in POST_UPDATABLE_FIELDS:
        if key in data:
            document[key] = _plain(data[key])
    merged = BlogPost.from_dict(document)
    return replace(
        merged,
        id=existing.id,
        views=existing.views,
        updated_at=later_iso(existing.updated_at, now),
    )
