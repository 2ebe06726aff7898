"""Presentation-layer dependency injection (composition root).

Builds collaborators from settings and exposes FastAPI Depends()
providers. Long-lived objects (controller, endpoint client) are created
once in lifespan and stored on app.state; routes never construct
infrastructure themselves.
"""

from typing import Annotated

from fastapi import Depends, HTTPException, Request

from comingsoon.application.interfaces.services import (
    IClock,
    IEarlyAccessClient,
    ILinkOpener,
)
from comingsoon.application.use_cases import (
    LaunchingController,
    SubmitEarlyAccessUseCase,
    ValidateEmailUseCase,
)
from comingsoon.core.config import Settings
from comingsoon.infrastructure.external.early_access import MockEarlyAccessClient
from comingsoon.infrastructure.external.platform import (
    LinkOpenerFactory,
    SystemClock,
)


def build_early_access_client(settings: Settings) -> IEarlyAccessClient:
    return MockEarlyAccessClient(latency_seconds=settings.submission_latency_seconds)


def build_launching_controller(
    settings: Settings,
    client: IEarlyAccessClient,
    *,
    clock: IClock | None = None,
    link_opener: ILinkOpener | None = None,
) -> LaunchingController:
    """Wire the controller with its collaborators. Call inside the running event loop.

    Args:
        settings: Loaded settings (target, interval, submit guard, validity mode).
        client: Early access endpoint client.
        clock: Override for the system clock (tests).
        link_opener: Override for the configured link opener (tests).
    """
    return LaunchingController(
        submit=SubmitEarlyAccessUseCase(client),
        clock=clock or SystemClock(),
        link_opener=link_opener or LinkOpenerFactory.create(settings.link_opener),
        target=settings.launch_target_timestamp,
        countdown_interval_seconds=settings.countdown_interval_seconds,
        guard_reentrant_submit=settings.guard_reentrant_submit,
        strict_form_validity=settings.strict_form_validity,
    )


def get_launching_controller(request: Request) -> LaunchingController:
    """Controller created in lifespan; 503 if the app has not started."""
    controller = getattr(request.app.state, "launching_controller", None)
    if controller is None:
        raise HTTPException(status_code=503, detail="Launching controller not ready")
    return controller


def get_early_access_client(request: Request) -> IEarlyAccessClient:
    client = getattr(request.app.state, "early_access_client", None)
    if client is None:
        raise HTTPException(status_code=503, detail="Early access client not ready")
    return client


def get_submit_early_access_use_case(
    client: Annotated[IEarlyAccessClient, Depends(get_early_access_client)],
) -> SubmitEarlyAccessUseCase:
    return SubmitEarlyAccessUseCase(client)


def get_validate_email_use_case(
    client: Annotated[IEarlyAccessClient, Depends(get_early_access_client)],
) -> ValidateEmailUseCase:
    return ValidateEmailUseCase(client)


LaunchingControllerDep = Annotated[LaunchingController, Depends(get_launching_controller)]
SubmitEarlyAccessDep = Annotated[
    SubmitEarlyAccessUseCase, Depends(get_submit_early_access_use_case)
]
ValidateEmailDep = Annotated[ValidateEmailUseCase, Depends(get_validate_email_use_case)]
