"""Shared fixtures: a fixed clock, in-memory storage and the Biology course."""

import json
import logging
from datetime import UTC, datetime

import pytest
import structlog

from lms_access.access import AccessPolicy, ContentAccessService
from lms_access.config.settings import Settings
from lms_access.core import (
    ContentId,
    CourseId,
    FixedClock,
    LearnerId,
    TimeRange,
    configure_structlog,
)
from lms_access.courses import (
    Course,
    Homework,
    InMemoryCourseRepository,
    Lesson,
    PrepMaterial,
)
from lms_access.enrollments import Enrollment, InMemoryEnrollmentRepository


def utc(*args: int) -> datetime:
    """Build a UTC datetime."""
    return datetime(*args, tzinfo=UTC)


@pytest.fixture
def learner_id() -> LearnerId:
    return LearnerId("student-1")


@pytest.fixture
def course_id() -> CourseId:
    return CourseId("biology")


@pytest.fixture
def lesson() -> Lesson:
    return Lesson(
        id=ContentId("lesson-1"),
        title="Cell structure",
        scheduled_at=utc(2025, 5, 15, 10, 0),
    )


@pytest.fixture
def homework() -> Homework:
    return Homework(id=ContentId("homework-1"), title="Label the cell")


@pytest.fixture
def prep_material() -> PrepMaterial:
    return PrepMaterial(id=ContentId("prep-1"), title="Reading list")


@pytest.fixture
def course(
    course_id: CourseId, lesson: Lesson, homework: Homework, prep_material: PrepMaterial
) -> Course:
    """Biology, running 2025-05-13 to 2025-06-12."""
    course = Course(
        id=course_id,
        title="Biology",
        period=TimeRange(utc(2025, 5, 13), utc(2025, 6, 12)),
    )
    course.add_lesson(lesson)
    course.add_homework(homework)
    course.add_prep_material(prep_material)
    return course


@pytest.fixture
def enrollment(learner_id: LearnerId, course_id: CourseId) -> Enrollment:
    """Enrollment window 2025-05-01 to 2025-05-30."""
    return Enrollment(
        learner_id=learner_id,
        course_id=course_id,
        period=TimeRange(utc(2025, 5, 1), utc(2025, 5, 30)),
    )


@pytest.fixture
def course_repository(course: Course) -> InMemoryCourseRepository:
    return InMemoryCourseRepository([course])


@pytest.fixture
def enrollment_repository(enrollment: Enrollment) -> InMemoryEnrollmentRepository:
    return InMemoryEnrollmentRepository([enrollment])


@pytest.fixture
def policy(
    course_repository: InMemoryCourseRepository,
    enrollment_repository: InMemoryEnrollmentRepository,
) -> AccessPolicy:
    return AccessPolicy(course_repository, enrollment_repository)


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(utc(2025, 5, 20, 12, 0))


@pytest.fixture
def service(
    policy: AccessPolicy,
    course_repository: InMemoryCourseRepository,
    clock: FixedClock,
) -> ContentAccessService:
    return ContentAccessService(policy, course_repository, clock)


@pytest.fixture
def json_log(tmp_path):
    """Send all logs to a JSON file; yields a reader returning parsed lines."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    settings = Settings(
        environment="testing", log_level="DEBUG", log_format="json", log_to_file=True
    )
    configure_structlog(settings, log_dir=tmp_path)

    def read() -> list[dict]:
        for handler in logging.getLogger().handlers:
            handler.flush()
        text = (tmp_path / "lms-access.log").read_text(encoding="utf-8")
        return [json.loads(line) for line in text.splitlines()]

    yield read

    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
    structlog.reset_defaults()
