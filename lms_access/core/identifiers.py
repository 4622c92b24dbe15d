"""Identity value types for learners, courses and course content.

Identifiers are created at the boundary (caller input or repository
records) and never mutated. Two identifiers are equal only when they are
of the same kind and wrap the same string.
"""

from dataclasses import dataclass
from typing import ClassVar


class InvalidIdentifierError(ValueError):
    """Identifier value is empty or whitespace-only."""

    def __init__(self, kind: str):
        self.kind = kind
        self.message = f"{kind} cannot be empty"
        self.code = "invalid_identifier"
        super().__init__(self.message)


@dataclass(frozen=True, slots=True)
class _Identifier:
    """Non-empty string-backed identity."""

    kind: ClassVar[str] = "Identifier"

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value.strip():
            raise InvalidIdentifierError(self.kind)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class LearnerId(_Identifier):
    """Identifies a learner (student)."""

    kind: ClassVar[str] = "LearnerId"


@dataclass(frozen=True, slots=True)
class CourseId(_Identifier):
    """Identifies a course."""

    kind: ClassVar[str] = "CourseId"


@dataclass(frozen=True, slots=True)
class ContentId(_Identifier):
    """Identifies a lesson, homework assignment or prep material."""

    kind: ClassVar[str] = "ContentId"
