"""Tests for clocks."""

from datetime import UTC, datetime, timedelta
from zoneinfo import ZoneInfo

from lms_access.core.clock import Clock, FixedClock, SystemClock, ensure_utc_aware


class TestFixedClock:
    """FixedClock only moves when told to."""

    def test_now_is_fixed(self) -> None:
        """The same instant comes back on every read."""
        instant = datetime(2025, 5, 13, 12, 0, tzinfo=UTC)
        clock = FixedClock(instant)

        assert clock.now() == instant
        assert clock.now() == instant

    def test_naive_instant_treated_as_utc(self) -> None:
        """A naive instant gets UTC."""
        clock = FixedClock(datetime(2025, 5, 13, 12, 0))
        assert clock.now().tzinfo is UTC

    def test_advance(self) -> None:
        """advance() moves the clock and returns the new instant."""
        clock = FixedClock(datetime(2025, 5, 13, tzinfo=UTC))

        result = clock.advance(timedelta(hours=2))

        assert result == datetime(2025, 5, 13, 2, 0, tzinfo=UTC)
        assert clock.now() == result

    def test_set(self) -> None:
        """set() jumps to the given instant."""
        clock = FixedClock(datetime(2025, 5, 13, tzinfo=UTC))
        clock.set(datetime(2025, 6, 1, tzinfo=UTC))
        assert clock.now() == datetime(2025, 6, 1, tzinfo=UTC)

    def test_satisfies_protocol(self) -> None:
        """FixedClock is a Clock."""
        assert isinstance(FixedClock(datetime.now(UTC)), Clock)


class TestSystemClock:
    """SystemClock returns aware wall-clock time."""

    def test_now_is_aware(self) -> None:
        """now() has a timezone."""
        now = SystemClock().now()
        assert now.tzinfo is not None

    def test_timezone_name(self) -> None:
        """A timezone name is resolved."""
        clock = SystemClock("Europe/Berlin")
        assert clock.now().tzinfo == ZoneInfo("Europe/Berlin")

    def test_close_to_real_time(self) -> None:
        """now() follows the wall clock."""
        before = datetime.now(UTC)
        now = SystemClock(UTC).now()
        after = datetime.now(UTC)
        assert before <= now <= after

    def test_satisfies_protocol(self) -> None:
        """SystemClock is a Clock."""
        assert isinstance(SystemClock(), Clock)


def test_ensure_utc_aware_keeps_aware_values() -> None:
    """Aware values pass through unchanged."""
    berlin = datetime(2025, 5, 13, tzinfo=ZoneInfo("Europe/Berlin"))
    assert ensure_utc_aware(berlin) is berlin
