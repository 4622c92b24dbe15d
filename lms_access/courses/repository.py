"""Course lookup port and its in-memory implementation."""

import threading
from typing import Protocol

from lms_access.core.identifiers import CourseId
from lms_access.core.logging import get_logger

from .models import Course


logger = get_logger(__name__)


class CourseRepository(Protocol):
    """Read access to courses by id."""

    def get(self, course_id: CourseId) -> Course | None: ...


class InMemoryCourseRepository:
    """Course store keyed by course id. Safe for concurrent use."""

    def __init__(self, courses: list[Course] | None = None):
        self._courses: dict[CourseId, Course] = {}
        self._lock = threading.Lock()
        for course in courses or []:
            self.save(course)

    def get(self, course_id: CourseId) -> Course | None:
        with self._lock:
            return self._courses.get(course_id)

    def save(self, course: Course) -> None:
        """Insert or replace the course with the same id."""
        with self._lock:
            self._courses[course.id] = course

        logger.debug("course_saved", course_id=course.id.value)

    def __len__(self) -> int:
        with self._lock:
            return len(self._courses)
