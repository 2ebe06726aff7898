"""Application lifespan: startup and shutdown.

Composition root for long-lived objects. Startup builds the early access
client, the launching controller and the WebSocket manager, stores them
on app.state, starts the countdown and the state broadcaster. Shutdown
reverses that so no countdown or submission task outlives the app.
"""

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from comingsoon.api.v1.dependencies import (
    build_early_access_client,
    build_launching_controller,
)
from comingsoon.api.websocket import ConnectionManager, run_launching_broadcast
from comingsoon.application.dtos.launching import InitializeCountdown
from comingsoon.core.config import get_settings
from comingsoon.shared.telemetry.logging import get_logger, setup_logging

logger = get_logger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup order: logging, collaborators and controller, countdown,
    broadcaster, telemetry (if enabled). Shutdown order: broadcaster,
    controller (ticker and in-flight tasks), telemetry.
    """
    settings = get_settings()
    setup_logging(settings.debug)

    # ---- Startup ----
    app.state.ws_manager = ConnectionManager()
    app.state.early_access_client = build_early_access_client(settings)
    controller = build_launching_controller(settings, app.state.early_access_client)
    app.state.launching_controller = controller
    await controller.handle_intent(InitializeCountdown())
    logger.info("Countdown started towards %s", controller.target.isoformat())

    app.state.launching_broadcast_task = asyncio.create_task(
        run_launching_broadcast(controller, app.state.ws_manager),
        name="launching-broadcast",
    )

    if settings.telemetry_enabled:
        from comingsoon.shared.telemetry.telemetry import TelemetryConfig, set_telemetry

        telemetry = TelemetryConfig(
            service_name=settings.app_name,
            service_version=settings.app_version,
            enabled=True,
            environment=settings.telemetry_environment,
        )
        telemetry.setup_telemetry(
            exporter_type=settings.telemetry_exporter,
            otlp_endpoint=settings.telemetry_otlp_endpoint,
            sample_rate=settings.telemetry_sample_rate,
        )
        set_telemetry(telemetry)
        telemetry.instrument_fastapi(app)
        telemetry.instrument_logging()
        logger.info("Telemetry initialized")

    yield

    # ---- Shutdown ----
    broadcast_task = getattr(app.state, "launching_broadcast_task", None)
    if broadcast_task is not None:
        broadcast_task.cancel()
        try:
            await broadcast_task
        except asyncio.CancelledError:
            pass
        app.state.launching_broadcast_task = None

    await controller.aclose()
    app.state.launching_controller = None
    logger.info("Launching controller closed")

    from comingsoon.shared.telemetry.telemetry import get_telemetry, set_telemetry

    telemetry_instance = get_telemetry()
    if telemetry_instance is not None:
        telemetry_instance.shutdown()
        set_telemetry(None)
