"""Asyncio helpers: periodic ticker and retry with exponential backoff."""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator, Awaitable, Callable
from typing import TypeVar

T = TypeVar("T")


async def ticker(
    period_seconds: float,
    block: Callable[[], T],
    *,
    initial_delay_seconds: float = 0.0,
) -> AsyncIterator[T]:
    """Yield block() immediately (after the optional initial delay), then every period.

    The consumer stops the loop by breaking out of the iteration or by
    cancelling the task that drives it.
    """
    if initial_delay_seconds > 0:
        await asyncio.sleep(initial_delay_seconds)
    while True:
        yield block()
        await asyncio.sleep(period_seconds)


async def retry_with_backoff(
    operation: Callable[[], Awaitable[T]],
    *,
    times: int = 3,
    initial_delay_seconds: float = 0.1,
    max_delay_seconds: float = 1.0,
    backoff_multiplier: float = 2.0,
) -> T:
    """Await operation() up to `times` attempts, sleeping with exponential backoff between failures.

    Args:
        operation: Zero-argument coroutine factory; called once per attempt.
        times: Maximum number of attempts (at least 1).
        initial_delay_seconds: Delay after the first failure.
        max_delay_seconds: Upper bound for any single delay.
        backoff_multiplier: Factor applied to the delay after each failure.

    Returns:
        The first successful result.

    Raises:
        ValueError: If times is less than 1.
        Exception: The last exception raised by operation when every attempt fails.
    """
    if times < 1:
        raise ValueError("times must be at least 1")
    delay = initial_delay_seconds
    last_error: Exception | None = None
    for attempt in range(times):
        try:
            return await operation()
        except Exception as e:
            last_error = e
            if attempt < times - 1:
                await asyncio.sleep(delay)
                delay = min(delay * backoff_multiplier, max_delay_seconds)
    assert last_error is not None
    raise last_error
