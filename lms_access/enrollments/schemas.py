"""Pydantic schema for enrollment records."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from lms_access.core.clock import ensure_utc_aware
from lms_access.core.identifiers import CourseId, LearnerId
from lms_access.core.time_range import TimeRange

from .models import Enrollment


class EnrollmentRecord(BaseModel):
    """Raw enrollment as stored or received."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    learner_id: str = Field(..., min_length=1)
    course_id: str = Field(..., min_length=1)
    starts_at: datetime
    ends_at: datetime | None = Field(default=None, description="None = no end")

    @field_validator("starts_at", "ends_at")
    @classmethod
    def ensure_utc(cls, v: datetime | None) -> datetime | None:
        return ensure_utc_aware(v) if v is not None else None

    def to_domain(self) -> Enrollment:
        return Enrollment(
            learner_id=LearnerId(self.learner_id),
            course_id=CourseId(self.course_id),
            period=TimeRange(self.starts_at, self.ends_at),
        )

    @classmethod
    def from_enrollment(cls, enrollment: Enrollment) -> "EnrollmentRecord":
        return cls(
            learner_id=enrollment.learner_id.value,
            course_id=enrollment.course_id.value,
            starts_at=enrollment.period.start,
            ends_at=enrollment.period.end,
        )
