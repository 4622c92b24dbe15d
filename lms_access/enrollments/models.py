"""Enrollment entity.

An enrollment binds one learner to one course for a bounded or open-ended
window. Storage keeps at most one enrollment per (learner, course); saving
a new one for the same pair replaces the old one outright.
"""

from dataclasses import dataclass
from datetime import datetime

from lms_access.core.identifiers import CourseId, LearnerId
from lms_access.core.time_range import TimeRange


EnrollmentKey = tuple[LearnerId, CourseId]


@dataclass(frozen=True)
class Enrollment:
    """A learner's access window to a course."""

    learner_id: LearnerId
    course_id: CourseId
    period: TimeRange

    @property
    def key(self) -> EnrollmentKey:
        return (self.learner_id, self.course_id)

    def is_active_at(self, at: datetime) -> bool:
        """Check if the enrollment window covers ``at``."""
        return self.period.contains(at)
