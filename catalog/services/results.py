"""Result objects returned by every service call."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")

NOT_AUTHENTICATED = "Not authenticated"
COURSE_NOT_FOUND = "Course not found"
POST_NOT_FOUND = "Post not found"
INVALID_BACKUP = "Invalid backup data"


@dataclass
class Result(Generic[T]):
    data: Optional[T] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class OperationResult:
    """Outcome of delete-style calls that carry no data."""

    success: bool
    error: Optional[str] = None
