"""Pytest configuration and fixtures for the coming-soon service.

HTTP tests run comingsoon.main:app through its lifespan (so the
controller, countdown and broadcaster exist) behind httpx ASGITransport.
Unit tests use the fakes below instead of the system clock and the
mock endpoint.
"""

import asyncio
import os
from collections.abc import AsyncIterator, Callable
from datetime import timedelta

import pytest
from httpx import ASGITransport, AsyncClient

# Far-future launch and log-only links so app tests never depend on today's date or a browser.
os.environ.setdefault("LAUNCH_TARGET", "2099-01-01T00:00:00")
os.environ.setdefault("LINK_OPENER", "log")
os.environ.setdefault("TELEMETRY_ENABLED", "false")

from comingsoon.application.dtos.early_access import (  # noqa: E402
    EarlyAccessRequest,
    EarlyAccessResponse,
)
from comingsoon.core.limiter import limiter  # noqa: E402
from comingsoon.domain.value_objects import CivilTimestamp  # noqa: E402
from comingsoon.main import app  # noqa: E402

LAUNCH = CivilTimestamp(2026, 12, 1, 10, 0, 0)


class FakeClock:
    """IClock returning a settable timestamp."""

    def __init__(self, current: CivilTimestamp) -> None:
        self.current = current

    def now(self) -> CivilTimestamp:
        return self.current

    def advance(self, seconds: int) -> None:
        self.current = CivilTimestamp.from_datetime(
            self.current.to_datetime() + timedelta(seconds=seconds)
        )


class FakeEarlyAccessClient:
    """IEarlyAccessClient that records calls and returns a configured outcome."""

    def __init__(
        self,
        response: EarlyAccessResponse | None = None,
        error: Exception | None = None,
        email_ok: bool = True,
    ) -> None:
        self.response = response or EarlyAccessResponse(
            success=True, message="Welcome aboard", access_code="IAIAIN-123456"
        )
        self.error = error
        self.email_ok = email_ok
        self.requests: list[EarlyAccessRequest] = []
        self.checked_emails: list[str] = []
        self.release = asyncio.Event()
        self.release.set()

    async def submit_early_access_request(
        self, request: EarlyAccessRequest
    ) -> EarlyAccessResponse:
        self.requests.append(request)
        await self.release.wait()
        if self.error is not None:
            raise self.error
        return self.response

    async def validate_email(self, email: str) -> bool:
        self.checked_emails.append(email)
        return self.email_ok


class RecordingLinkOpener:
    """ILinkOpener that remembers URLs (or fails, when told to)."""

    def __init__(self, fail: bool = False) -> None:
        self.fail = fail
        self.opened: list[str] = []

    async def open(self, url: str) -> None:
        self.opened.append(url)
        if self.fail:
            raise RuntimeError("no handler for url")


async def _wait_until(predicate: Callable[[], bool], timeout: float = 1.0) -> None:
    async def poll() -> None:
        while not predicate():
            await asyncio.sleep(0.005)

    await asyncio.wait_for(poll(), timeout)


@pytest.fixture
def wait_until() -> Callable[..., object]:
    """Await until predicate() is true (fails the test on timeout)."""
    return _wait_until


@pytest.fixture
def fake_clock() -> FakeClock:
    """Clock one day, two hours, three minutes and four seconds before LAUNCH."""
    return FakeClock(CivilTimestamp(2026, 11, 30, 7, 56, 56))


@pytest.fixture
def fake_client() -> FakeEarlyAccessClient:
    return FakeEarlyAccessClient()


@pytest.fixture
def link_opener() -> RecordingLinkOpener:
    return RecordingLinkOpener()


@pytest.fixture(autouse=True)
def reset_rate_limits() -> None:
    """Each test starts with empty SlowAPI counters."""
    limiter.reset()


@pytest.fixture
async def client() -> AsyncIterator[AsyncClient]:
    """Async HTTP client against the FastAPI app (ASGI), lifespan included."""
    async with app.router.lifespan_context(app):
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            yield ac
