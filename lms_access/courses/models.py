"""Course aggregate and its content items.

Content comes in three kinds:
- Lesson: scheduled, available from its own ``scheduled_at``
- Homework: available once the owning course has started
- PrepMaterial: same rule as homework

Every kind answers ``is_available_at(now, course)``; the course is passed
in because homework and prep material take their availability from the
course period rather than from their own state.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from lms_access.core.identifiers import ContentId, CourseId
from lms_access.core.time_range import TimeRange


class ContentType(str, Enum):
    """Kind of course content."""

    LESSON = "lesson"
    HOMEWORK = "homework"
    PREP_MATERIAL = "prep_material"


# ==============================================================================
# Content
# ==============================================================================


@dataclass(frozen=True)
class Lesson:
    """Scheduled lesson."""

    id: ContentId
    title: str
    scheduled_at: datetime

    content_type = ContentType.LESSON

    def is_available_at(self, now: datetime, course: "Course") -> bool:
        return now >= self.scheduled_at


@dataclass(frozen=True)
class Homework:
    """Homework assignment without its own schedule."""

    id: ContentId
    title: str

    content_type = ContentType.HOMEWORK

    def is_available_at(self, now: datetime, course: "Course") -> bool:
        return course.period.has_started_at(now)


@dataclass(frozen=True)
class PrepMaterial:
    """Preparation material, readable as soon as the course starts."""

    id: ContentId
    title: str

    content_type = ContentType.PREP_MATERIAL

    def is_available_at(self, now: datetime, course: "Course") -> bool:
        return course.period.has_started_at(now)


CourseContent = Lesson | Homework | PrepMaterial


# ==============================================================================
# Course
# ==============================================================================


@dataclass
class Course:
    """A course with a validity period and three ordered content lists.

    Content is appended after construction and never removed. Content ids
    are expected to be unique across the three lists; this is not enforced.
    """

    id: CourseId
    title: str
    period: TimeRange
    _lessons: list[Lesson] = field(default_factory=list, init=False, repr=False)
    _homework: list[Homework] = field(default_factory=list, init=False, repr=False)
    _prep_materials: list[PrepMaterial] = field(
        default_factory=list, init=False, repr=False
    )

    @property
    def start(self) -> datetime:
        return self.period.start

    @property
    def end(self) -> datetime | None:
        return self.period.end

    @property
    def lessons(self) -> tuple[Lesson, ...]:
        return tuple(self._lessons)

    @property
    def homework(self) -> tuple[Homework, ...]:
        return tuple(self._homework)

    @property
    def prep_materials(self) -> tuple[PrepMaterial, ...]:
        return tuple(self._prep_materials)

    def add_lesson(self, lesson: Lesson) -> None:
        self._lessons.append(lesson)

    def add_homework(self, homework: Homework) -> None:
        self._homework.append(homework)

    def add_prep_material(self, prep_material: PrepMaterial) -> None:
        self._prep_materials.append(prep_material)

    def add_content(self, content: CourseContent) -> None:
        """Append ``content`` to the list matching its kind."""
        match content:
            case Lesson():
                self.add_lesson(content)
            case Homework():
                self.add_homework(content)
            case PrepMaterial():
                self.add_prep_material(content)
            case _:
                raise TypeError(f"Unsupported content: {content!r}")

    def find_content(self, content_id: ContentId) -> CourseContent | None:
        """Find content by id: lessons first, then homework, then prep material."""
        for lesson in self._lessons:
            if lesson.id == content_id:
                return lesson

        for homework in self._homework:
            if homework.id == content_id:
                return homework

        for prep_material in self._prep_materials:
            if prep_material.id == content_id:
                return prep_material

        return None
