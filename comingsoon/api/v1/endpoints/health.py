"""Health check endpoint. Used for liveness probes."""

from fastapi import APIRouter, Request

from comingsoon.schemas.health import HealthResponse

router = APIRouter()


@router.get("", response_model=HealthResponse)
def health_check(request: Request) -> HealthResponse:
    """Return ok, plus whether the countdown task is alive."""
    controller = getattr(request.app.state, "launching_controller", None)
    return HealthResponse(
        countdown_running=bool(controller and controller.is_countdown_running)
    )
