"""Inclusive time interval used for course periods and enrollment windows."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True, slots=True)
class TimeRange:
    """Interval with an inclusive start and an optional inclusive end.

    ``end=None`` means the range is open-ended. ``start <= end`` is not
    checked; a reversed range contains no instant.
    """

    start: datetime
    end: datetime | None = None

    @property
    def is_bounded(self) -> bool:
        return self.end is not None

    def contains(self, at: datetime) -> bool:
        """True if ``at`` falls within the range, both ends included."""
        if not self.has_started_at(at):
            return False
        if self.end is None:
            return True
        return at <= self.end

    def has_started_at(self, at: datetime) -> bool:
        """True once ``at`` reaches the start, regardless of the end."""
        return at >= self.start

    def has_ended_before(self, at: datetime) -> bool:
        """True if the range is bounded and ``at`` is past its end."""
        if self.end is None:
            return False
        return at > self.end
