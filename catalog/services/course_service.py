"""
Course use cases: public catalog reads and admin management.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Protocol

from catalog.core import events
from catalog.core.events import EventNotifier
from catalog.domain.models import Course, CourseDetail
from catalog.repositories import CourseRepository, StorageError
from catalog.services.results import (
    COURSE_NOT_FOUND,
    INVALID_BACKUP,
    NOT_AUTHENTICATED,
    OperationResult,
    Result,
)

logger = logging.getLogger(__name__)


class AuthGate(Protocol):
    def is_authenticated(self) -> bool: ...


class CourseService:
    """Wraps a CourseRepository with the result convention, the admin gate and change events."""

    def __init__(self, repository: CourseRepository, notifier: EventNotifier, auth: AuthGate) -> None:
        self.repository = repository
        self.notifier = notifier
        self.auth = auth

    # -------------------------------------- public reads --------------------------------------
    def get_all_courses(self) -> Result[list[Course]]:
        try:
            courses = self.repository.get_all()
        except StorageError as exc:
            logger.error("Error getting courses: %s", exc)
            return Result(data=[], error=str(exc))
        return Result(data=[course.summary() for course in courses])

    def get_course_by_id(self, course_id: str) -> Result[CourseDetail]:
        try:
            course = self.repository.get_by_id(course_id)
        except StorageError as exc:
            logger.error("Error getting course %s: %s", course_id, exc)
            return Result(error=str(exc))
        if course is None:
            return Result(error=COURSE_NOT_FOUND)
        return Result(data=course)

    def get_featured_courses(self, limit: int = 3) -> Result[list[Course]]:
        try:
            courses = self.repository.featured(limit)
        except StorageError as exc:
            logger.error("Get featured courses error: %s", exc)
            return Result(error=str(exc))
        return Result(data=[course.summary() for course in courses])

    def search_courses(self, query: str = "", level: str = "") -> Result[list[Course]]:
        try:
            courses = self.repository.search(query, level)
        except StorageError as exc:
            logger.error("Search courses error: %s", exc)
            return Result(error=str(exc))
        return Result(data=[course.summary() for course in courses])

    # -------------------------------------- admin --------------------------------------
    def get_admin_course_detail(self, course_id: str) -> Result[CourseDetail]:
        if not self.auth.is_authenticated():
            return Result(error=NOT_AUTHENTICATED)
        return self.get_course_by_id(course_id)

    def get_all_courses_admin(self) -> Result[list[CourseDetail]]:
        if not self.auth.is_authenticated():
            return Result(error=NOT_AUTHENTICATED)
        try:
            return Result(data=self.repository.get_all())
        except StorageError as exc:
            return Result(data=[], error=str(exc))

    def create_course(self, course_data: Mapping[str, Any]) -> Result[Course]:
        if not self.auth.is_authenticated():
            logger.error("Create course failed: not authenticated")
            return Result(error=NOT_AUTHENTICATED)
        try:
            created = self.repository.add(course_data)
        except StorageError as exc:
            logger.error("Error creating course: %s", exc)
            return Result(error=str(exc))
        summary = created.summary()
        self.notifier.publish(events.COURSE_CREATED, summary)
        self.notifier.publish(events.COURSES_UPDATED)
        return Result(data=summary)

    def update_course(self, course_id: str, course_data: Mapping[str, Any]) -> Result[Course]:
        if not self.auth.is_authenticated():
            return Result(error=NOT_AUTHENTICATED)
        try:
            updated = self.repository.update(course_id, course_data)
        except StorageError as exc:
            logger.error("Error updating course %s: %s", course_id, exc)
            return Result(error=str(exc))
        if updated is None:
            return Result(error=COURSE_NOT_FOUND)
        summary = updated.summary()
        self.notifier.publish(events.COURSE_UPDATED, summary)
        self.notifier.publish(events.COURSES_UPDATED)
        return Result(data=summary)

    def delete_course(self, course_id: str) -> OperationResult:
        if not self.auth.is_authenticated():
            return OperationResult(success=False, error=NOT_AUTHENTICATED)
        try:
            removed = self.repository.delete(course_id)
        except StorageError as exc:
            logger.error("Error deleting course %s: %s", course_id, exc)
            return OperationResult(success=False, error=str(exc))
        if not removed:
            return OperationResult(success=False, error=COURSE_NOT_FOUND)
        self.notifier.publish(events.COURSE_DELETED, course_id)
        self.notifier.publish(events.COURSES_UPDATED)
        return OperationResult(success=True)

    def export_courses(self) -> Result[str]:
        if not self.auth.is_authenticated():
            return Result(error=NOT_AUTHENTICATED)
        try:
            return Result(data=self.repository.export_snapshot())
        except StorageError as exc:
            return Result(error=str(exc))

    def import_courses(self, backup: str) -> OperationResult:
        """
        Replace every course with a previously exported JSON array.

        The id counter is not reconciled with the imported ids, so a later
        create can reuse an id that arrived through the import.
        """
        if not self.auth.is_authenticated():
            return OperationResult(success=False, error=NOT_AUTHENTICATED)
        try:
            imported = self.repository.import_snapshot(backup)
        except StorageError as exc:
            return OperationResult(success=False, error=str(exc))
        if not imported:
            return OperationResult(success=False, error=INVALID_BACKUP)
        self.notifier.publish(events.COURSES_UPDATED)
        return OperationResult(success=True)

    def clear_courses(self) -> OperationResult:
        if not self.auth.is_authenticated():
            return OperationResult(success=False, error=NOT_AUTHENTICATED)
        try:
            self.repository.clear()
        except StorageError as exc:
            return OperationResult(success=False, error=str(exc))
        self.notifier.publish(events.COURSES_UPDATED)
        return OperationResult(success=True)
