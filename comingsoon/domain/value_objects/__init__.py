"""Domain value objects and calendar helpers."""

from comingsoon.domain.value_objects.core import (
    SECONDS_PER_DAY,
    CivilTimestamp,
    RemainingDuration,
    days_in_month,
    is_leap_year,
)

__all__ = [
    "SECONDS_PER_DAY",
    "CivilTimestamp",
    "RemainingDuration",
    "days_in_month",
    "is_leap_year",
]
