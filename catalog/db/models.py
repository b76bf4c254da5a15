"""SQLAlchemy models mirroring the catalog JSON documents (snake_case columns)."""
from __future__ import annotations

from sqlalchemy import (
    Boolean,
    Column,
    Integer,
    String,
    Text,
    JSON,
)

from .session import Base


class CourseRow(Base):
    __tablename__ = "courses"

    # Surrogate key keeps insertion ("storage") order.
    pk = Column(Integer, primary_key=True, autoincrement=True)
    # Not unique: an imported backup may repeat ids; lookups take the first row.
    id = Column(String(64), nullable=False, index=True)
    name = Column(String(255), nullable=False, default="")
    level = Column(String(32), nullable=False, default="N5")
    description = Column(Text, nullable=False, default="")
    duration = Column(String(64), nullable=False, default="")
    price = Column(Integer, nullable=False, default=0)
    image = Column(Text, nullable=False, default="")
    features = Column(JSON, nullable=False, default=list)
    is_active = Column(Boolean, nullable=False, default=True)
    # ISO-8601 strings, stored exactly as the JSON documents carry them.
    created_at = Column(String(40), nullable=False, default="")
    syllabus = Column(JSON, nullable=False, default=list)
    requirements = Column(JSON, nullable=False, default=list)
    outcomes = Column(JSON, nullable=False, default=list)


class BlogPostRow(Base):
    __tablename__ = "blog_posts"

    pk = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String(64), nullable=False, index=True)
    title = Column(String(255), nullable=False, default="")
    slug = Column(String(255), nullable=False, default="", index=True)
    excerpt = Column(Text, nullable=False, default="")
    content = Column(Text, nullable=False, default="")
    image = Column(Text, nullable=False, default="")
    category = Column(String(128), nullable=False, default="")
    tags = Column(JSON, nullable=False, default=list)
    author_name = Column(String(255), nullable=False, default="")
    author_avatar = Column(Text, nullable=True)
    published_at = Column(String(40), nullable=False, default="")
    updated_at = Column(String(40), nullable=False, default="")
    is_published = Column(Boolean, nullable=False, default=True)
    views = Column(Integer, nullable=False, default=0)


class IdCounter(Base):
    __tablename__ = "id_counters"

    name = Column(String(64), primary_key=True)
    value = Column(Integer, nullable=False, default=1)
