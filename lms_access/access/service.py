"""Content access service.

Turns policy decisions into content:
- Denied decisions are raised as AccessDeniedError
- Allowed decisions re-read the course and return the requested item
- Typed accessors narrow the item to lesson, homework or prep material
"""

from datetime import datetime
from typing import NoReturn, TypeVar

from lms_access.core.clock import Clock, ensure_utc_aware
from lms_access.core.context import RequestContext
from lms_access.core.identifiers import ContentId, CourseId, LearnerId
from lms_access.core.logging import get_logger
from lms_access.courses.models import CourseContent, Homework, Lesson, PrepMaterial
from lms_access.courses.repository import CourseRepository

from .models import DenialReason
from .policy import AccessPolicyProtocol
from .schemas import AccessCheckResponse


logger = get_logger(__name__)

ContentT = TypeVar("ContentT", Lesson, Homework, PrepMaterial)


# ==============================================================================
# Custom Exceptions
# ==============================================================================


class AccessError(Exception):
    """Base access error."""

    def __init__(self, message: str, code: str = "access_error"):
        self.message = message
        self.code = code
        super().__init__(message)


class AccessDeniedError(AccessError):
    """Learner may not access the requested content."""

    def __init__(self, reason: DenialReason, message: str = ""):
        self.reason = reason
        super().__init__(
            message or f"Access denied: {reason.value}", reason.value.lower()
        )


# ==============================================================================
# Content Access Service
# ==============================================================================


class ContentAccessService:
    """Service for retrieving course content a learner is allowed to see."""

    def __init__(
        self,
        access_policy: AccessPolicyProtocol,
        course_repository: CourseRepository,
        clock: Clock | None = None,
    ):
        """Initialize with a policy, course storage and an optional clock.

        Without a clock every call must pass ``at`` explicitly.
        """
        self.access_policy = access_policy
        self.course_repository = course_repository
        self.clock = clock

    def _resolve_instant(self, at: datetime | None) -> datetime:
        """Use ``at`` if given (naive means UTC), otherwise read the clock once."""
        if at is not None:
            return ensure_utc_aware(at)
        if self.clock is None:
            raise ValueError("No instant given and no clock configured")
        return self.clock.now()

    # ==========================================================================
    # Access Checks
    # ==========================================================================

    def check_access(
        self,
        learner_id: LearnerId,
        course_id: CourseId,
        content_id: ContentId,
        at: datetime | None = None,
    ) -> AccessCheckResponse:
        """Evaluate access without raising.

        Returns:
            AccessCheckResponse with the decision and the instant used
        """
        with RequestContext(learner_id=learner_id):
            at = self._resolve_instant(at)
            decision = self.access_policy.decide(learner_id, course_id, content_id, at)
            return AccessCheckResponse.from_decision(
                decision, learner_id, course_id, content_id, at
            )

    # ==========================================================================
    # Retrieval
    # ==========================================================================

    def get_content(
        self,
        learner_id: LearnerId,
        course_id: CourseId,
        content_id: ContentId,
        at: datetime | None = None,
    ) -> CourseContent:
        """Return the content item if the learner may access it at ``at``.

        The course is looked up again after the decision; content that
        disappeared in between is reported as CONTENT_NOT_AVAILABLE.

        Raises:
            AccessDeniedError: If access is denied or the content is gone
        """
        with RequestContext(learner_id=learner_id):
            return self._fetch(learner_id, course_id, content_id, at)

    def get_lesson(
        self,
        learner_id: LearnerId,
        course_id: CourseId,
        lesson_id: ContentId,
        at: datetime | None = None,
    ) -> Lesson:
        """Return a lesson; other kinds are denied as CONTENT_NOT_AVAILABLE."""
        return self._fetch_as(
            learner_id, course_id, lesson_id, at, Lesson, "Content is not a lesson"
        )

    def get_homework(
        self,
        learner_id: LearnerId,
        course_id: CourseId,
        homework_id: ContentId,
        at: datetime | None = None,
    ) -> Homework:
        """Return a homework assignment."""
        return self._fetch_as(
            learner_id, course_id, homework_id, at, Homework, "Content is not homework"
        )

    def get_prep_material(
        self,
        learner_id: LearnerId,
        course_id: CourseId,
        prep_material_id: ContentId,
        at: datetime | None = None,
    ) -> PrepMaterial:
        """Return prep material."""
        return self._fetch_as(
            learner_id,
            course_id,
            prep_material_id,
            at,
            PrepMaterial,
            "Content is not prep material",
        )

    # ==========================================================================
    # Helpers
    # ==========================================================================

    def _fetch(
        self,
        learner_id: LearnerId,
        course_id: CourseId,
        content_id: ContentId,
        at: datetime | None,
    ) -> CourseContent:
        at = self._resolve_instant(at)

        decision = self.access_policy.decide(learner_id, course_id, content_id, at)
        if decision.reason is not None:
            self._deny(learner_id, course_id, content_id, decision.reason)

        course = self.course_repository.get(course_id)
        if course is None:
            self._deny(
                learner_id,
                course_id,
                content_id,
                DenialReason.CONTENT_NOT_AVAILABLE,
                "Course not found",
            )

        content = course.find_content(content_id)
        if content is None:
            self._deny(
                learner_id,
                course_id,
                content_id,
                DenialReason.CONTENT_NOT_AVAILABLE,
                "Content not found",
            )

        logger.info(
            "content_access_granted",
            learner_id=learner_id.value,
            course_id=course_id.value,
            content_id=content_id.value,
            content_type=content.content_type.value,
        )

        return content

    def _fetch_as(
        self,
        learner_id: LearnerId,
        course_id: CourseId,
        content_id: ContentId,
        at: datetime | None,
        expected: type[ContentT],
        message: str,
    ) -> ContentT:
        with RequestContext(learner_id=learner_id):
            content = self._fetch(learner_id, course_id, content_id, at)
            if not isinstance(content, expected):
                self._deny(
                    learner_id,
                    course_id,
                    content_id,
                    DenialReason.CONTENT_NOT_AVAILABLE,
                    message,
                )
            return content

    @staticmethod
    def _deny(
        learner_id: LearnerId,
        course_id: CourseId,
        content_id: ContentId,
        reason: DenialReason,
        message: str = "",
    ) -> NoReturn:
        logger.info(
            "content_access_denied",
            learner_id=learner_id.value,
            course_id=course_id.value,
            content_id=content_id.value,
            reason=reason.value,
            detail=message or None,
        )
        raise AccessDeniedError(reason, message)
