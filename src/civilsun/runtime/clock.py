"""Clock providers for the sunrise/sunset command.

The wall clock is read exactly once per invocation into a ClockSnapshot;
everything downstream works from that snapshot so a run is reproducible
from its inputs.
"""
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, timezone
from typing import Optional

from ..core.julian import CalendarDate


@dataclass(frozen=True)
class ClockSnapshot:
    """A single reading of a clock, as an aware local datetime."""

    at: datetime

    def __post_init__(self):
        if self.at.tzinfo is None or self.at.utcoffset() is None:
            raise ValueError("ClockSnapshot requires a timezone-aware datetime")

    @property
    def offset_minutes(self) -> float:
        """Local minus UTC offset in minutes."""
        return self.at.utcoffset().total_seconds() / 60.0

    @property
    def local_date(self) -> date:
        return self.at.date()

    def calendar_date(self, hour: Optional[float] = None) -> CalendarDate:
        """Calendar date of the snapshot.

        Args:
            hour: Fractional local hour to evaluate at (default: the
                snapshot's own time of day)
        """
        if hour is None:
            return CalendarDate.from_datetime(self.at)
        return CalendarDate.from_date(self.at.date(), hour)


class Clock:
    """Source of the current local time."""

    def now(self) -> datetime:
        raise NotImplementedError

    def snapshot(self, day: Optional[date] = None) -> ClockSnapshot:
        """Read the clock once.

        Args:
            day: Move the reading to this calendar date, keeping the time of
                day; the UTC offset is the one in force on that date
        """
        at = self.now()
        if day is not None:
            at = datetime.combine(day, at.time(), tzinfo=at.tzinfo)
        return ClockSnapshot(at)


class SystemClock(Clock):
    """Reads the operating system clock in the local timezone."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc).astimezone()

    def snapshot(self, day: Optional[date] = None) -> ClockSnapshot:
        at = self.now()
        if day is not None:
            # a naive local time resolves to the offset in force on that date
            at = datetime.combine(day, at.time()).astimezone()
        return ClockSnapshot(at)

    def __repr__(self) -> str:
        return "SystemClock()"


class FixedClock(Clock):
    """Clock frozen at a given instant, for tests and explicit dates."""

    def __init__(self, at: datetime):
        """Initialize fixed clock.

        Args:
            at: The instant to report; must be timezone-aware
        """
        if at.tzinfo is None:
            raise ValueError("FixedClock requires a timezone-aware datetime")
        self._at = at

    @classmethod
    def at_noon(cls, day: date, offset_minutes: float = 0.0) -> "FixedClock":
        """Local noon of `day` at a fixed UTC offset."""
        tz = timezone(timedelta(minutes=offset_minutes))
        return cls(datetime.combine(day, time(12, 0), tzinfo=tz))

    def now(self) -> datetime:
        return self._at

    def __repr__(self) -> str:
        return f"FixedClock({self._at.isoformat()})"
