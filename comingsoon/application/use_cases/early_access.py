"""Early access use cases: submit a waitlist request and check an email."""

from __future__ import annotations

from comingsoon.application.dtos.early_access import (
    EarlyAccessRequest,
    EarlyAccessResponse,
)
from comingsoon.application.interfaces.services import IEarlyAccessClient
from comingsoon.application.services.validators import is_valid_email
from comingsoon.domain.exceptions import ValidationException
from comingsoon.shared.telemetry.logging import get_logger
from comingsoon.shared.telemetry.tracing import add_span_attributes, traced

logger = get_logger(__name__)


class SubmitEarlyAccessUseCase:
    """Validates a request and forwards it to the early access endpoint exactly once."""

    def __init__(self, client: IEarlyAccessClient) -> None:
        self._client = client

    @traced("early_access.submit")
    async def __call__(self, request: EarlyAccessRequest) -> EarlyAccessResponse:
        """Submit the request.

        Returns:
            The endpoint's response (success may still be False).

        Raises:
            ValidationException: Blank name or email, terms not agreed, or bad email format.
            Exception: Whatever the client raises; not retried.
        """
        if not request.full_name.strip():
            raise ValidationException("Full name is required", field="full_name")
        if not request.email.strip():
            raise ValidationException("Email is required", field="email")
        if not request.agree_to_terms:
            raise ValidationException("You must agree to terms", field="agree_to_terms")
        if not is_valid_email(request.email):
            raise ValidationException("Invalid email format", field="email")

        response = await self._client.submit_early_access_request(request)
        add_span_attributes(success=response.success)
        logger.info(
            "Early access submission finished: success=%s access_code=%s",
            response.success,
            response.access_code,
        )
        return response


class ValidateEmailUseCase:
    """Local format check, then asks the endpoint."""

    def __init__(self, client: IEarlyAccessClient) -> None:
        self._client = client

    async def __call__(self, email: str) -> bool:
        """Return False for a blank email, otherwise the endpoint's verdict.

        Raises:
            ValidationException: If the email does not match the expected format.
        """
        if not email.strip():
            return False
        if not is_valid_email(email):
            raise ValidationException("Invalid email format", field="email")
        return await self._client.validate_email(email)
