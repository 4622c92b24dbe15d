"""Pydantic schemas for course records.

Validate raw course data (mappings, JSON documents) arriving from storage
or from callers and turn it into domain objects.
"""

from datetime import datetime
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from lms_access.core.clock import ensure_utc_aware
from lms_access.core.identifiers import ContentId, CourseId
from lms_access.core.time_range import TimeRange

from .models import Course, CourseContent, Homework, Lesson, PrepMaterial


class _RecordBase(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class LessonRecord(_RecordBase):
    """Raw lesson."""

    type: Literal["lesson"] = "lesson"
    id: str = Field(..., min_length=1)
    title: str
    scheduled_at: datetime

    @field_validator("scheduled_at")
    @classmethod
    def ensure_utc(cls, v: datetime) -> datetime:
        return ensure_utc_aware(v)

    def to_domain(self) -> Lesson:
        return Lesson(
            id=ContentId(self.id), title=self.title, scheduled_at=self.scheduled_at
        )


class HomeworkRecord(_RecordBase):
    """Raw homework assignment."""

    type: Literal["homework"] = "homework"
    id: str = Field(..., min_length=1)
    title: str

    def to_domain(self) -> Homework:
        return Homework(id=ContentId(self.id), title=self.title)


class PrepMaterialRecord(_RecordBase):
    """Raw prep material."""

    type: Literal["prep_material"] = "prep_material"
    id: str = Field(..., min_length=1)
    title: str

    def to_domain(self) -> PrepMaterial:
        return PrepMaterial(id=ContentId(self.id), title=self.title)


ContentRecord = Annotated[
    LessonRecord | HomeworkRecord | PrepMaterialRecord,
    Field(discriminator="type"),
]


class CourseRecord(_RecordBase):
    """Raw course with its content, in storage order."""

    id: str = Field(..., min_length=1)
    title: str
    starts_at: datetime
    ends_at: datetime | None = None
    content: list[ContentRecord] = Field(default_factory=list)

    @field_validator("starts_at", "ends_at")
    @classmethod
    def ensure_utc(cls, v: datetime | None) -> datetime | None:
        return ensure_utc_aware(v) if v is not None else None

    def to_domain(self) -> Course:
        """Build the course and append content in record order."""
        course = Course(
            id=CourseId(self.id),
            title=self.title,
            period=TimeRange(self.starts_at, self.ends_at),
        )
        for item in self.content:
            course.add_content(item.to_domain())
        return course

    @classmethod
    def from_course(cls, course: Course) -> "CourseRecord":
        """Serialize a course back to its record form."""
        items = [*course.lessons, *course.homework, *course.prep_materials]
        return cls(
            id=course.id.value,
            title=course.title,
            starts_at=course.start,
            ends_at=course.end,
            content=[content_to_record(item) for item in items],
        )


def content_to_record(
    content: CourseContent,
) -> LessonRecord | HomeworkRecord | PrepMaterialRecord:
    """Serialize one content item."""
    match content:
        case Lesson():
            return LessonRecord(
                id=content.id.value,
                title=content.title,
                scheduled_at=content.scheduled_at,
            )
        case Homework():
            return HomeworkRecord(id=content.id.value, title=content.title)
        case PrepMaterial():
            return PrepMaterialRecord(id=content.id.value, title=content.title)
    raise TypeError(f"Unsupported content: {content!r}")
