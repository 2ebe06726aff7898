"""Countdown engine: remaining time to the launch target and the per-second ticker.

remaining() is pure calendar arithmetic on CivilTimestamp fields. The
ticker never decrements a previous value; every tick reads the clock and
recomputes from the fixed target, so scheduling jitter cannot accumulate.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from contextlib import aclosing, suppress

from comingsoon.application.interfaces.services import IClock
from comingsoon.domain.value_objects import (
    SECONDS_PER_DAY,
    CivilTimestamp,
    RemainingDuration,
    days_in_month,
    is_leap_year,
)
from comingsoon.shared.telemetry.logging import get_logger
from comingsoon.shared.utils.async_helpers import ticker

logger = get_logger(__name__)


def _days_before_year(year: int) -> int:
    """Days from 0001-01-01 to January 1st of year."""
    y = year - 1
    return y * 365 + y // 4 - y // 100 + y // 400


def _day_of_year(ts: CivilTimestamp) -> int:
    """1-based ordinal of the date within its year."""
    return sum(days_in_month(ts.year, m) for m in range(1, ts.month)) + ts.day


def day_number(ts: CivilTimestamp) -> int:
    """Ordinal day count of the timestamp's date (0001-01-01 is day 1)."""
    return _days_before_year(ts.year) + _day_of_year(ts)


def remaining(now: CivilTimestamp, target: CivilTimestamp) -> RemainingDuration:
    """Time left from now until target, normalized to days/hours/minutes/seconds.

    Zero when now is at or past target (field-by-field ordering).
    Otherwise: whole calendar days between the two dates, plus the
    time-of-day difference (a negative difference borrows from the days).
    """
    if now >= target:
        return RemainingDuration.ZERO
    whole_days = day_number(target) - day_number(now)
    intraday = target.seconds_of_day() - now.seconds_of_day()
    return RemainingDuration.from_total_seconds(whole_days * SECONDS_PER_DAY + intraday)


TickCallback = Callable[[RemainingDuration], None]


class CountdownTicker:
    """Cancellable periodic task publishing remaining() once per interval.

    At most one ticking task exists: start() cancels the previous one. The
    task ends by itself after publishing a zero duration.
    """

    def __init__(
        self,
        clock: IClock,
        target: CivilTimestamp,
        on_tick: TickCallback,
        interval_seconds: float = 1.0,
    ) -> None:
        self._clock = clock
        self._target = target
        self._on_tick = on_tick
        self._interval = interval_seconds
        self._task: asyncio.Task[None] | None = None

    @property
    def target(self) -> CivilTimestamp:
        return self._target

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    def compute(self) -> RemainingDuration:
        """Remaining time from the clock's current reading."""
        return remaining(self._clock.now(), self._target)

    def start(self) -> None:
        """Cancel any running tick loop and start a new one. Requires a running event loop."""
        self.stop()
        self._task = asyncio.create_task(self._run(), name="countdown-ticker")
        logger.debug("Countdown ticker started (target %s)", self._target.isoformat())

    def stop(self) -> None:
        """Cancel the tick loop immediately; no-op when not running."""
        task, self._task = self._task, None
        if task is not None and not task.done():
            task.cancel()
            logger.debug("Countdown ticker cancelled")

    async def aclose(self) -> None:
        """Cancel the tick loop and wait until the task has finished."""
        task = self._task
        self.stop()
        if task is not None:
            with suppress(asyncio.CancelledError):
                await task

    async def _run(self) -> None:
        async with aclosing(ticker(self._interval, self.compute)) as ticks:
            async for duration in ticks:
                self._on_tick(duration)
                if duration.is_zero():
                    logger.info("Countdown reached zero; ticker stopped")
                    return


__all__ = [
    "CountdownTicker",
    "TickCallback",
    "day_number",
    "days_in_month",
    "is_leap_year",
    "remaining",
]
