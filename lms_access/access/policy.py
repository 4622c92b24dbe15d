"""Access policy.

Decides whether a learner may open a piece of course content at a given
instant. Checks run in a fixed order and stop at the first failure, so
the order decides which reason is reported when several conditions fail:

1. Enrollment covers the instant       -> else ENROLLMENT_NOT_ACTIVE
2. Course exists                       -> else CONTENT_NOT_AVAILABLE
   Course has started                  -> else COURSE_NOT_STARTED
3. Content exists in the course        -> else CONTENT_NOT_AVAILABLE
   Content is available at the instant -> else CONTENT_NOT_AVAILABLE

Whether the course has already ended is not checked.
"""

from datetime import datetime
from typing import Protocol

from lms_access.core.clock import ensure_utc_aware
from lms_access.core.identifiers import ContentId, CourseId, LearnerId
from lms_access.core.logging import get_logger
from lms_access.courses.repository import CourseRepository
from lms_access.enrollments.repository import EnrollmentRepository

from .models import AccessDecision, DenialReason


logger = get_logger(__name__)


class AccessPolicyProtocol(Protocol):
    """Anything that can decide content access."""

    def decide(
        self,
        learner_id: LearnerId,
        course_id: CourseId,
        content_id: ContentId,
        at: datetime,
    ) -> AccessDecision: ...


class AccessPolicy:
    """Read-only decision function over course and enrollment storage."""

    def __init__(
        self,
        course_repository: CourseRepository,
        enrollment_repository: EnrollmentRepository,
    ):
        """Initialize with the repositories consulted on every decision."""
        self.course_repository = course_repository
        self.enrollment_repository = enrollment_repository

    def decide(
        self,
        learner_id: LearnerId,
        course_id: CourseId,
        content_id: ContentId,
        at: datetime,
    ) -> AccessDecision:
        """Evaluate access for one (learner, course, content, instant).

        Never raises for a policy outcome; always returns a decision.
        A naive ``at`` is read as UTC.
        """
        at = ensure_utc_aware(at)
        decision = self._evaluate(learner_id, course_id, content_id, at)

        logger.debug(
            "access_decided",
            learner_id=learner_id.value,
            course_id=course_id.value,
            content_id=content_id.value,
            at=at.isoformat(),
            allowed=decision.allowed,
            reason=decision.reason.value if decision.reason else None,
        )

        return decision

    def _evaluate(
        self,
        learner_id: LearnerId,
        course_id: CourseId,
        content_id: ContentId,
        at: datetime,
    ) -> AccessDecision:
        # 1. Enrollment (repository applies the window filter)
        enrollment = self.enrollment_repository.find_active_for(
            learner_id, course_id, at
        )
        if enrollment is None:
            return AccessDecision.deny(DenialReason.ENROLLMENT_NOT_ACTIVE)

        # 2. Course exists and has started
        course = self.course_repository.get(course_id)
        if course is None:
            return AccessDecision.deny(DenialReason.CONTENT_NOT_AVAILABLE)

        if not course.period.has_started_at(at):
            return AccessDecision.deny(DenialReason.COURSE_NOT_STARTED)

        # 3. Content exists and is released
        content = course.find_content(content_id)
        if content is None:
            return AccessDecision.deny(DenialReason.CONTENT_NOT_AVAILABLE)

        if not content.is_available_at(at, course):
            return AccessDecision.deny(DenialReason.CONTENT_NOT_AVAILABLE)

        return AccessDecision.allow()
