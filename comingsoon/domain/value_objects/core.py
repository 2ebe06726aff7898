"""Domain value objects for the launch countdown.

Value objects are immutable types that represent domain concepts with
self-validation. They have no identity, only value.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import ClassVar

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 60 * SECONDS_PER_MINUTE
SECONDS_PER_DAY = 24 * SECONDS_PER_HOUR

# Index 0 unused so the table reads by month number.
_DAYS_IN_MONTH = (0, 31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap_year(year: int) -> bool:
    """Gregorian rule: divisible by 4, except centuries not divisible by 400."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_month(year: int, month: int) -> int:
    """Number of days in the given month (February is 29 in leap years)."""
    if month < 1 or month > 12:
        raise ValueError(f"Month must be 1-12, got {month}")
    if month == 2 and is_leap_year(year):
        return 29
    return _DAYS_IN_MONTH[month]


def _check_range(name: str, value: int, low: int, high: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise ValueError(f"{name} must be an integer")
    if value < low or value > high:
        raise ValueError(f"{name} must be {low}-{high}, got {value}")


@dataclass(frozen=True, order=True)
class CivilTimestamp:
    """Timezone-naive wall-clock reading (year/month/day/hour/minute/second).

    Field order makes the generated comparisons field-by-field, which is
    the ordering the countdown uses to decide whether the target has passed.
    """

    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: int = 0

    def __post_init__(self) -> None:
        """Validate every field against its calendar range.

        Raises:
            ValueError: If any field is out of range (day is bounded by month length).
        """
        _check_range("Year", self.year, 1, 9999)
        _check_range("Month", self.month, 1, 12)
        _check_range("Day", self.day, 1, days_in_month(self.year, self.month))
        _check_range("Hour", self.hour, 0, 23)
        _check_range("Minute", self.minute, 0, 59)
        _check_range("Second", self.second, 0, 59)

    @classmethod
    def from_datetime(cls, value: datetime) -> CivilTimestamp:
        """Take the wall-clock fields of a datetime; tzinfo and microseconds are dropped."""
        return cls(
            year=value.year,
            month=value.month,
            day=value.day,
            hour=value.hour,
            minute=value.minute,
            second=value.second,
        )

    @classmethod
    def parse(cls, value: str) -> CivilTimestamp:
        """Parse an ISO-8601 local date-time such as 2026-12-01T10:00:00.

        Raises:
            ValueError: If the string is not ISO-8601 or carries a UTC offset.
        """
        try:
            parsed = datetime.fromisoformat(value.strip())
        except ValueError as e:
            raise ValueError(
                f"Invalid civil timestamp: {value!r}. Expected YYYY-MM-DDTHH:MM:SS."
            ) from e
        if parsed.tzinfo is not None:
            raise ValueError(f"Civil timestamp must not carry a timezone: {value!r}")
        return cls.from_datetime(parsed)

    def to_datetime(self) -> datetime:
        """Naive datetime with the same fields."""
        return datetime(
            self.year, self.month, self.day, self.hour, self.minute, self.second
        )

    def isoformat(self) -> str:
        return (
            f"{self.year:04d}-{self.month:02d}-{self.day:02d}"
            f"T{self.hour:02d}:{self.minute:02d}:{self.second:02d}"
        )

    def seconds_of_day(self) -> int:
        """Seconds elapsed since midnight."""
        return self.hour * SECONDS_PER_HOUR + self.minute * SECONDS_PER_MINUTE + self.second


@dataclass(frozen=True)
class RemainingDuration:
    """Normalized days/hours/minutes/seconds breakdown of a time span.

    Always derived from two CivilTimestamps; hours < 24, minutes < 60,
    seconds < 60 and every field is non-negative.
    """

    days: int = 0
    hours: int = 0
    minutes: int = 0
    seconds: int = 0

    ZERO: ClassVar[RemainingDuration]

    def __post_init__(self) -> None:
        """Enforce normalization.

        Raises:
            ValueError: If a field is negative or exceeds its unit.
        """
        if self.days < 0:
            raise ValueError("Days must be non-negative")
        _check_range("Hours", self.hours, 0, 23)
        _check_range("Minutes", self.minutes, 0, 59)
        _check_range("Seconds", self.seconds, 0, 59)

    @classmethod
    def from_total_seconds(cls, total: int) -> RemainingDuration:
        """Greedy decomposition: days, then hours, minutes and seconds of the remainder.

        Negative totals clamp to zero.
        """
        total = max(0, total)
        days, rest = divmod(total, SECONDS_PER_DAY)
        hours, rest = divmod(rest, SECONDS_PER_HOUR)
        minutes, seconds = divmod(rest, SECONDS_PER_MINUTE)
        return cls(days=days, hours=hours, minutes=minutes, seconds=seconds)

    def total_seconds(self) -> int:
        return (
            self.days * SECONDS_PER_DAY
            + self.hours * SECONDS_PER_HOUR
            + self.minutes * SECONDS_PER_MINUTE
            + self.seconds
        )

    def is_zero(self) -> bool:
        """Return whether the countdown has reached its terminal state."""
        return self.total_seconds() == 0


RemainingDuration.ZERO = RemainingDuration()
