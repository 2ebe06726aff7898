"""Tests for SubmitEarlyAccessUseCase and ValidateEmailUseCase."""

import pytest

from comingsoon.application.dtos.early_access import EarlyAccessRequest
from comingsoon.application.use_cases import SubmitEarlyAccessUseCase, ValidateEmailUseCase
from comingsoon.domain.exceptions import ValidationException
from conftest import FakeEarlyAccessClient


def make_request(**overrides) -> EarlyAccessRequest:
    fields = {
        "full_name": "Ada Lovelace",
        "email": "ada@example.com",
        "institution": "Analytical Society",
        "role": "Student",
        "referral_code": None,
        "agree_to_terms": True,
    }
    fields.update(overrides)
    return EarlyAccessRequest(**fields)


class TestSubmitEarlyAccessUseCase:
    async def test_valid_request_is_sent_once(self, fake_client: FakeEarlyAccessClient) -> None:
        response = await SubmitEarlyAccessUseCase(fake_client)(make_request())
        assert response.success
        assert response.access_code == "IAIAIN-123456"
        assert len(fake_client.requests) == 1

    @pytest.mark.parametrize(
        ("overrides", "message"),
        [
            ({"full_name": "  "}, "Full name is required"),
            ({"email": ""}, "Email is required"),
            ({"agree_to_terms": False}, "You must agree to terms"),
            ({"email": "not-an-email"}, "Invalid email format"),
        ],
    )
    async def test_invalid_request_never_reaches_client(
        self, fake_client: FakeEarlyAccessClient, overrides: dict, message: str
    ) -> None:
        with pytest.raises(ValidationException, match=message) as exc_info:
            await SubmitEarlyAccessUseCase(fake_client)(make_request(**overrides))
        assert exc_info.value.error_code == "VALIDATION_ERROR"
        assert fake_client.requests == []

    async def test_client_errors_propagate(self) -> None:
        client = FakeEarlyAccessClient(error=ConnectionError("endpoint down"))
        with pytest.raises(ConnectionError, match="endpoint down"):
            await SubmitEarlyAccessUseCase(client)(make_request())
        assert len(client.requests) == 1


class TestValidateEmailUseCase:
    async def test_blank_is_false_without_remote_call(self, fake_client) -> None:
        assert await ValidateEmailUseCase(fake_client)(" ") is False
        assert fake_client.checked_emails == []

    async def test_bad_format_raises(self, fake_client) -> None:
        with pytest.raises(ValidationException, match="Invalid email format"):
            await ValidateEmailUseCase(fake_client)("nope")

    async def test_remote_verdict_is_returned(self) -> None:
        client = FakeEarlyAccessClient(email_ok=False)
        assert await ValidateEmailUseCase(client)("ada@example.com") is False
        assert client.checked_emails == ["ada@example.com"]
