"""Access decision value types."""

from dataclasses import dataclass
from enum import Enum


class DenialReason(str, Enum):
    """Why access to content was refused.

    A missing course and missing content both report CONTENT_NOT_AVAILABLE
    so callers cannot tell which courses or content ids exist.
    """

    ENROLLMENT_NOT_ACTIVE = "ENROLLMENT_NOT_ACTIVE"  # No enrollment covers the instant
    COURSE_NOT_STARTED = "COURSE_NOT_STARTED"  # Course period not started yet
    CONTENT_NOT_AVAILABLE = "CONTENT_NOT_AVAILABLE"  # Missing or not yet released


@dataclass(frozen=True, slots=True)
class AccessDecision:
    """Outcome of one access evaluation.

    Build with ``allow()`` or ``deny(reason)``. A decision carries a reason
    if and only if it is a denial.
    """

    allowed: bool
    reason: DenialReason | None = None

    def __post_init__(self) -> None:
        if self.allowed and self.reason is not None:
            raise ValueError("An allowed decision cannot carry a denial reason")
        if not self.allowed and self.reason is None:
            raise ValueError("A denied decision requires a reason")

    @classmethod
    def allow(cls) -> "AccessDecision":
        return cls(allowed=True)

    @classmethod
    def deny(cls, reason: DenialReason) -> "AccessDecision":
        return cls(allowed=False, reason=reason)

    @property
    def denied(self) -> bool:
        return not self.allowed
