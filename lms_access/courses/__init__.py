"""Courses module.

Course aggregate and its three kinds of content:
- Lesson: available from its scheduled time
- Homework: available once the course has started
- PrepMaterial: available once the course has started
"""

from .models import ContentType, Course, CourseContent, Homework, Lesson, PrepMaterial
from .repository import CourseRepository, InMemoryCourseRepository
from .schemas import CourseRecord, HomeworkRecord, LessonRecord, PrepMaterialRecord


__all__ = [
    "ContentType",
    "Course",
    "CourseContent",
    "CourseRecord",
    "CourseRepository",
    "Homework",
    "HomeworkRecord",
    "InMemoryCourseRepository",
    "Lesson",
    "LessonRecord",
    "PrepMaterial",
    "PrepMaterialRecord",
]
