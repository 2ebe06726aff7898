"""Stateless early access endpoints for API clients (no screen state involved)."""

from fastapi import APIRouter, Request, status

from comingsoon.api.v1.dependencies import SubmitEarlyAccessDep, ValidateEmailDep
from comingsoon.core.limiter import limit_intents, limit_submit
from comingsoon.domain.exceptions import SubmissionFailedException
from comingsoon.schemas.early_access import (
    EarlyAccessCreate,
    EarlyAccessResult,
    EmailCheckRequest,
    EmailCheckResponse,
)

router = APIRouter()


@router.post(
    "",
    response_model=EarlyAccessResult,
    status_code=status.HTTP_201_CREATED,
)
@limit_submit
async def submit_early_access(
    request: Request,
    body: EarlyAccessCreate,
    submit: SubmitEarlyAccessDep,
) -> EarlyAccessResult:
    """Join the waitlist.

    400 on validation failure (blank name/email, bad email, terms not
    agreed); 502 when the endpoint reports failure.
    """
    response = await submit(body.to_request())
    if not response.success:
        raise SubmissionFailedException(response.message)
    return EarlyAccessResult.from_response(response)


@router.post("/validate-email", response_model=EmailCheckResponse)
@limit_intents
async def validate_email(
    request: Request,
    body: EmailCheckRequest,
    check: ValidateEmailDep,
) -> EmailCheckResponse:
    """False for a blank email, 400 for a malformed one, else the endpoint's verdict."""
    valid = await check(body.email)
    return EmailCheckResponse(email=body.email, valid=valid)
