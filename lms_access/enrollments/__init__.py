"""Enrollments module.

A learner's time-bounded access window to a course, stored with upsert
semantics per (learner, course).
"""

from .models import Enrollment, EnrollmentKey
from .repository import EnrollmentRepository, InMemoryEnrollmentRepository
from .schemas import EnrollmentRecord


__all__ = [
    "Enrollment",
    "EnrollmentKey",
    "EnrollmentRecord",
    "EnrollmentRepository",
    "InMemoryEnrollmentRepository",
]
