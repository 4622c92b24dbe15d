"""Time sources.

The policy always takes an explicit instant. A clock is only read by the
content access service, once per call, when the caller did not pass one.
"""

from datetime import UTC, datetime, timedelta, tzinfo
from typing import Protocol, runtime_checkable
from zoneinfo import ZoneInfo

from lms_access.config.settings import get_settings


@runtime_checkable
class Clock(Protocol):
    """Anything that can tell the current instant."""

    def now(self) -> datetime: ...


def ensure_utc_aware(dt: datetime) -> datetime:
    """Treat naive datetimes as UTC."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt


class SystemClock:
    """Wall-clock time in a fixed timezone."""

    def __init__(self, tz: tzinfo | str | None = None):
        """Initialize with a tzinfo or IANA name (defaults to settings)."""
        if tz is None:
            tz = get_settings().default_timezone
        self.tz = ZoneInfo(tz) if isinstance(tz, str) else tz

    def now(self) -> datetime:
        return datetime.now(self.tz)


class FixedClock:
    """Clock frozen at a given instant; can be moved explicitly."""

    def __init__(self, instant: datetime):
        self._instant = ensure_utc_aware(instant)

    def now(self) -> datetime:
        return self._instant

    def set(self, instant: datetime) -> None:
        self._instant = ensure_utc_aware(instant)

    def advance(self, delta: timedelta) -> datetime:
        """Move the clock forward by ``delta`` and return the new instant."""
        self._instant += delta
        return self._instant
