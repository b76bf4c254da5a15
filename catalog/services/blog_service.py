"""
Blog use cases: published-post reads for the public site, drafts and CRUD for admins.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from catalog.core import events
from catalog.core.events import EventNotifier
from catalog.domain.models import BlogPost
from catalog.repositories import BlogRepository, StorageError
from catalog.services.course_service import AuthGate
from catalog.services.results import NOT_AUTHENTICATED, POST_NOT_FOUND, OperationResult, Result

logger = logging.getLogger(__name__)


class BlogService:
    def __init__(self, repository: BlogRepository, notifier: EventNotifier, auth: AuthGate) -> None:
        self.repository = repository
        self.notifier = notifier
        self.auth = auth

    # -------------------------------------- public reads --------------------------------------
    def get_all_posts(self) -> Result[list[BlogPost]]:
        try:
            posts = self.repository.get_all()
        except StorageError as exc:
            logger.error("Error getting blog posts: %s", exc)
            return Result(data=[], error=str(exc))
        return Result(data=[post for post in posts if post.is_published])

    def get_post_by_id(self, post_id: str) -> Result[BlogPost]:
        try:
            post = self.repository.get_by_id(post_id)
        except StorageError as exc:
            return Result(error=str(exc))
        if post is None:
            return Result(error=POST_NOT_FOUND)
        return Result(data=post)

    def get_post_by_slug(self, slug: str) -> Result[BlogPost]:
        """Published post for the detail page; each successful read counts one view."""
        try:
            post = self.repository.get_by_slug(slug)
            if post is None or not post.is_published:
                return Result(error=POST_NOT_FOUND)
            self.repository.increment_views(post.id)
        except StorageError as exc:
            logger.error("Error getting blog post %s: %s", slug, exc)
            return Result(error=str(exc))
        return Result(data=post)

    def get_posts_by_category(self, category: str) -> Result[list[BlogPost]]:
        try:
            return Result(data=self.repository.by_category(category))
        except StorageError as exc:
            logger.error("Error getting posts by category: %s", exc)
            return Result(data=[], error=str(exc))

    def search_posts(self, query: str = "", category: str = "") -> Result[list[BlogPost]]:
        try:
            return Result(data=self.repository.search(query, category))
        except StorageError as exc:
            logger.error("Error searching posts: %s", exc)
            return Result(data=[], error=str(exc))

    def get_featured_posts(self, limit: int = 3) -> Result[list[BlogPost]]:
        try:
            return Result(data=self.repository.featured(limit))
        except StorageError as exc:
            return Result(data=[], error=str(exc))

    def get_recent_posts(self, limit: int = 5) -> Result[list[BlogPost]]:
        try:
            return Result(data=self.repository.recent(limit))
        except StorageError as exc:
            return Result(data=[], error=str(exc))

    def get_categories(self) -> Result[list[str]]:
        try:
            return Result(data=self.repository.categories())
        except StorageError as exc:
            return Result(data=[], error=str(exc))

    # -------------------------------------- admin --------------------------------------
    def get_all_posts_admin(self) -> Result[list[BlogPost]]:
        if not self.auth.is_authenticated():
            return Result(data=[], error=NOT_AUTHENTICATED)
        try:
            return Result(data=self.repository.get_all())
        except StorageError as exc:
            return Result(data=[], error=str(exc))

    def create_post(self, post_data: Mapping[str, Any]) -> Result[BlogPost]:
        if not self.auth.is_authenticated():
            return Result(error=NOT_AUTHENTICATED)
        try:
            post = self.repository.add(post_data)
        except StorageError as exc:
            logger.error("Error creating blog post: %s", exc)
            return Result(error=str(exc))
        self.notifier.publish(events.BLOG_CREATED, post)
        self.notifier.publish(events.BLOG_UPDATED)
        return Result(data=post)

    def update_post(self, post_id: str, post_data: Mapping[str, Any]) -> Result[BlogPost]:
        if not self.auth.is_authenticated():
            return Result(error=NOT_AUTHENTICATED)
        try:
            post = self.repository.update(post_id, post_data)
        except StorageError as exc:
            logger.error("Error updating blog post %s: %s", post_id, exc)
            return Result(error=str(exc))
        if post is None:
            return Result(error=POST_NOT_FOUND)
        self.notifier.publish(events.BLOG_UPDATED, post)
        return Result(data=post)

    def delete_post(self, post_id: str) -> OperationResult:
        if not self.auth.is_authenticated():
            return OperationResult(success=False, error=NOT_AUTHENTICATED)
        try:
            removed = self.repository.delete(post_id)
        except StorageError as exc:
            logger.error("Error deleting blog post %s: %s", post_id, exc)
            return OperationResult(success=False, error=str(exc))
        if not removed:
            return OperationResult(success=False, error=POST_NOT_FOUND)
        self.notifier.publish(events.BLOG_DELETED, post_id)
        self.notifier.publish(events.BLOG_UPDATED)
        return OperationResult(success=True)
