"""Launching screen endpoints: read state, send intents.

Every write maps to exactly one controller intent; the response is the
state right after the intent was applied. Submissions resolve in the
background, so POST /submit answers 202 with is_submitting set.
"""

from fastapi import APIRouter, Request, status

from comingsoon.api.v1.dependencies import LaunchingControllerDep
from comingsoon.application.dtos.launching import (
    ClearError,
    CloseSuccessDialog,
    InitializeCountdown,
    LaunchingIntent,
    OpenLink,
    SubmitEarlyAccessRequest,
    UpdateAgreeToTerms,
    UpdateField,
)
from comingsoon.application.use_cases import LaunchingController
from comingsoon.core.limiter import limit_intents, limit_submit
from comingsoon.domain.enums import FormField
from comingsoon.schemas.launching import (
    AgreeToTermsRequest,
    CountdownResponse,
    FieldUpdateRequest,
    LaunchingStateResponse,
    OpenLinkRequest,
)

router = APIRouter()


def state_response(controller: LaunchingController) -> LaunchingStateResponse:
    """Serialize the controller's current state."""
    return LaunchingStateResponse.from_state(
        controller.state,
        is_form_valid=controller.is_form_valid(),
        target=controller.target,
    )


async def _dispatch(
    controller: LaunchingController, intent: LaunchingIntent
) -> LaunchingStateResponse:
    await controller.handle_intent(intent)
    return state_response(controller)


@router.get("/state", response_model=LaunchingStateResponse)
def get_state(controller: LaunchingControllerDep) -> LaunchingStateResponse:
    """Current screen state."""
    return state_response(controller)


@router.get("/countdown", response_model=CountdownResponse)
def get_countdown(controller: LaunchingControllerDep) -> CountdownResponse:
    """Remaining time recomputed from the clock right now."""
    return CountdownResponse.from_duration(
        controller.current_countdown(), controller.target
    )


@router.post("/countdown/start", response_model=LaunchingStateResponse)
async def start_countdown(controller: LaunchingControllerDep) -> LaunchingStateResponse:
    """(Re)start the per-second countdown; a running one is cancelled first."""
    return await _dispatch(controller, InitializeCountdown())


@router.put("/form/agree-to-terms", response_model=LaunchingStateResponse)
@limit_intents
async def update_agree_to_terms(
    request: Request,
    body: AgreeToTermsRequest,
    controller: LaunchingControllerDep,
) -> LaunchingStateResponse:
    return await _dispatch(controller, UpdateAgreeToTerms(agree=body.agree))


@router.put("/form/{field}", response_model=LaunchingStateResponse)
@limit_intents
async def update_field(
    request: Request,
    field: FormField,
    body: FieldUpdateRequest,
    controller: LaunchingControllerDep,
) -> LaunchingStateResponse:
    """Store a text field value; blank checks apply immediately, email format asynchronously."""
    return await _dispatch(controller, UpdateField(field=field, value=body.value))


@router.post(
    "/submit",
    response_model=LaunchingStateResponse,
    status_code=status.HTTP_202_ACCEPTED,
)
@limit_submit
async def submit(
    request: Request, controller: LaunchingControllerDep
) -> LaunchingStateResponse:
    """Submit the form.

    Invalid form: error_message is set and nothing is sent. Valid form:
    is_submitting is set and the outcome arrives later (poll /state or
    listen on the WebSocket stream).
    """
    return await _dispatch(controller, SubmitEarlyAccessRequest())


@router.post("/clear-error", response_model=LaunchingStateResponse)
async def clear_error(controller: LaunchingControllerDep) -> LaunchingStateResponse:
    return await _dispatch(controller, ClearError())


@router.post("/close-success-dialog", response_model=LaunchingStateResponse)
async def close_success_dialog(
    controller: LaunchingControllerDep,
) -> LaunchingStateResponse:
    return await _dispatch(controller, CloseSuccessDialog())


@router.post(
    "/open-link",
    response_model=LaunchingStateResponse,
    status_code=status.HTTP_202_ACCEPTED,
)
@limit_intents
async def open_link(
    request: Request,
    body: OpenLinkRequest,
    controller: LaunchingControllerDep,
) -> LaunchingStateResponse:
    """Fire-and-forget navigation through the configured link opener."""
    return await _dispatch(controller, OpenLink(url=str(body.url)))
