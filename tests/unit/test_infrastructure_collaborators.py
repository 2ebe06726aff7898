"""Tests for the mock early access client, link openers and system clock."""

import random
from datetime import datetime

import pytest

from comingsoon.application.dtos.early_access import EarlyAccessRequest
from comingsoon.infrastructure.external.early_access import MockEarlyAccessClient
from comingsoon.infrastructure.external.early_access.mock_client import (
    ACCESS_CODE_PREFIX,
    SUCCESS_MESSAGE,
)
from comingsoon.infrastructure.external.platform import (
    BrowserLinkOpener,
    LinkOpenerFactory,
    LoggingLinkOpener,
    SystemClock,
)

REQUEST = EarlyAccessRequest(
    full_name="Ada",
    email="ada@example.com",
    institution="Analytical Society",
    role="Student",
    agree_to_terms=True,
)


class TestMockEarlyAccessClient:
    async def test_accepts_with_access_code(self) -> None:
        response = await MockEarlyAccessClient().submit_early_access_request(REQUEST)
        assert response.success
        assert response.message == SUCCESS_MESSAGE
        assert response.access_code.startswith(ACCESS_CODE_PREFIX)
        number = int(response.access_code.removeprefix(ACCESS_CODE_PREFIX))
        assert 100000 <= number <= 999998

    async def test_seeded_rng_is_deterministic(self) -> None:
        first = await MockEarlyAccessClient(rng=random.Random(7)).submit_early_access_request(REQUEST)
        second = await MockEarlyAccessClient(rng=random.Random(7)).submit_early_access_request(REQUEST)
        assert first.access_code == second.access_code

    async def test_validate_email_accepts(self) -> None:
        assert await MockEarlyAccessClient().validate_email("anything@example.com")


class TestLinkOpenerFactory:
    def test_known_kinds(self) -> None:
        assert isinstance(LinkOpenerFactory.create("log"), LoggingLinkOpener)
        assert isinstance(LinkOpenerFactory.create("BROWSER"), BrowserLinkOpener)

    def test_unknown_kind_rejected(self) -> None:
        with pytest.raises(ValueError, match="Unsupported link opener"):
            LinkOpenerFactory.create("carrier-pigeon")

    async def test_logging_opener_records(self) -> None:
        opener = LoggingLinkOpener()
        await opener.open("https://example.com")
        assert opener.opened == ["https://example.com"]

    async def test_browser_opener_runs_webbrowser_off_loop(self, monkeypatch) -> None:
        calls: list[tuple[str, int]] = []
        monkeypatch.setattr(
            "comingsoon.infrastructure.external.platform.link_opener.webbrowser.open",
            lambda url, new: calls.append((url, new)) or True,
        )
        await BrowserLinkOpener().open("https://example.com")
        assert calls == [("https://example.com", 2)]


def test_system_clock_reads_local_time() -> None:
    before = datetime.now().replace(microsecond=0)
    now = SystemClock().now().to_datetime()
    after = datetime.now()
    assert before <= now <= after
