"""Enrollment lookup port and its in-memory implementation."""

import threading
from datetime import datetime
from typing import Protocol

from lms_access.core.identifiers import CourseId, LearnerId
from lms_access.core.logging import get_logger

from .models import Enrollment, EnrollmentKey


logger = get_logger(__name__)


class EnrollmentRepository(Protocol):
    """Storage for enrollments keyed by (learner, course)."""

    def find_active_for(
        self, learner_id: LearnerId, course_id: CourseId, at: datetime
    ) -> Enrollment | None:
        """Return the enrollment for the pair only if its window contains ``at``."""
        ...

    def save(self, enrollment: Enrollment) -> None:
        """Insert or fully replace the enrollment for its (learner, course)."""
        ...


class InMemoryEnrollmentRepository:
    """Enrollment store backed by a dict. Safe for concurrent use."""

    def __init__(self, enrollments: list[Enrollment] | None = None):
        self._enrollments: dict[EnrollmentKey, Enrollment] = {}
        self._lock = threading.Lock()
        for enrollment in enrollments or []:
            self.save(enrollment)

    def find_active_for(
        self, learner_id: LearnerId, course_id: CourseId, at: datetime
    ) -> Enrollment | None:
        with self._lock:
            enrollment = self._enrollments.get((learner_id, course_id))

        if enrollment is None or not enrollment.is_active_at(at):
            return None
        return enrollment

    def get(self, learner_id: LearnerId, course_id: CourseId) -> Enrollment | None:
        """Return the stored enrollment regardless of its window."""
        with self._lock:
            return self._enrollments.get((learner_id, course_id))

    def save(self, enrollment: Enrollment) -> None:
        with self._lock:
            replaced = enrollment.key in self._enrollments
            self._enrollments[enrollment.key] = enrollment

        end = enrollment.period.end
        logger.debug(
            "enrollment_saved",
            learner_id=enrollment.learner_id.value,
            course_id=enrollment.course_id.value,
            starts_at=enrollment.period.start.isoformat(),
            ends_at=end.isoformat() if end else None,
            replaced=replaced,
        )
