"""Tests for TimeRange."""

from datetime import UTC, datetime, timedelta

import pytest

from lms_access.core.time_range import TimeRange


START = datetime(2025, 5, 13, tzinfo=UTC)
END = datetime(2025, 6, 12, tzinfo=UTC)
SECOND = timedelta(seconds=1)


class TestBoundedRange:
    """Both ends are inclusive."""

    @pytest.fixture
    def period(self) -> TimeRange:
        return TimeRange(START, END)

    @pytest.mark.parametrize(
        "at,expected",
        [
            (START - SECOND, False),
            (START, True),
            (START + timedelta(days=10), True),
            (END, True),
            (END + SECOND, False),
        ],
    )
    def test_contains(self, period: TimeRange, at: datetime, expected: bool) -> None:
        """Both ends are contained."""
        assert period.contains(at) is expected

    def test_has_started_at(self, period: TimeRange) -> None:
        """Started from the start instant on."""
        assert period.has_started_at(START - SECOND) is False
        assert period.has_started_at(START) is True

    def test_has_started_ignores_end(self, period: TimeRange) -> None:
        """A range that has ended has still started."""
        assert period.has_started_at(END + timedelta(days=365)) is True

    def test_has_ended_before(self, period: TimeRange) -> None:
        """Ended only strictly after the end."""
        assert period.has_ended_before(END) is False
        assert period.has_ended_before(END + SECOND) is True
        assert period.has_ended_before(START - SECOND) is False

    def test_is_bounded(self, period: TimeRange) -> None:
        """A range with an end is bounded."""
        assert period.is_bounded is True


class TestUnboundedRange:
    """No end means containment only depends on the start."""

    @pytest.fixture
    def period(self) -> TimeRange:
        return TimeRange(START)

    def test_contains_far_future(self, period: TimeRange) -> None:
        """Any later instant is contained."""
        assert period.contains(START + timedelta(days=10_000)) is True

    def test_contains_start(self, period: TimeRange) -> None:
        """The start is contained."""
        assert period.contains(START) is True

    def test_not_before_start(self, period: TimeRange) -> None:
        """Instants before the start are not contained."""
        assert period.contains(START - SECOND) is False

    def test_never_ends(self, period: TimeRange) -> None:
        """An open range never ends."""
        assert period.has_ended_before(START + timedelta(days=10_000)) is False
        assert period.is_bounded is False


class TestReversedRange:
    """start > end is accepted and contains nothing."""

    def test_contains_nothing(self) -> None:
        """No instant is inside a reversed range."""
        period = TimeRange(END, START)

        assert period.contains(START) is False
        assert period.contains(END) is False
        assert period.contains(START + timedelta(days=5)) is False


def test_immutable() -> None:
    """Ranges cannot be changed."""
    period = TimeRange(START, END)
    with pytest.raises(AttributeError):
        period.end = None  # type: ignore[misc]
