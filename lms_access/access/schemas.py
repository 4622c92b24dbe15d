"""Pydantic schemas for access checks."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from lms_access.core.identifiers import ContentId, CourseId, LearnerId

from .models import AccessDecision, DenialReason


class AccessCheckResponse(BaseModel):
    """Result of an access check, ready for serialization."""

    model_config = ConfigDict(frozen=True)

    learner_id: str
    course_id: str
    content_id: str
    checked_at: datetime
    has_access: bool = Field(..., description="Whether access is allowed")
    reason: DenialReason | None = Field(
        default=None, description="Denial reason, None when allowed"
    )

    @classmethod
    def from_decision(
        cls,
        decision: AccessDecision,
        learner_id: LearnerId,
        course_id: CourseId,
        content_id: ContentId,
        at: datetime,
    ) -> "AccessCheckResponse":
        """Create response from an AccessDecision."""
        return cls(
            learner_id=learner_id.value,
            course_id=course_id.value,
            content_id=content_id.value,
            checked_at=at,
            has_access=decision.allowed,
            reason=decision.reason,
        )

    def to_decision(self) -> AccessDecision:
        if self.has_access:
            return AccessDecision.allow()
        if self.reason is None:
            raise ValueError("Denied access check has no reason")
        return AccessDecision.deny(self.reason)
