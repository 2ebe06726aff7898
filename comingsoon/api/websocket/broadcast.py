"""Fan-out of controller state and effects to WebSocket clients.

Message shapes:
    {"type": "state", "data": <LaunchingStateResponse>}
    {"type": "effect", "data": <EffectResponse>}
"""

from __future__ import annotations

import asyncio
from typing import Any

from comingsoon.api.websocket.manager import ConnectionManager
from comingsoon.application.dtos.launching import LaunchingEffect, LaunchingScreenState
from comingsoon.application.use_cases import LaunchingController
from comingsoon.schemas.launching import EffectResponse, LaunchingStateResponse
from comingsoon.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


def state_message(
    controller: LaunchingController, state: LaunchingScreenState | None = None
) -> dict[str, Any]:
    state = controller.state if state is None else state
    payload = LaunchingStateResponse.from_state(
        state,
        is_form_valid=controller.is_form_valid(state),
        target=controller.target,
    )
    return {"type": "state", "data": payload.model_dump(mode="json")}


def effect_message(effect: LaunchingEffect) -> dict[str, Any]:
    return {"type": "effect", "data": EffectResponse.from_effect(effect).model_dump(mode="json")}


async def _pump_states(controller: LaunchingController, manager: ConnectionManager) -> None:
    queue = controller.subscribe()
    try:
        while True:
            state = await queue.get()
            await manager.broadcast(state_message(controller, state))
    finally:
        controller.unsubscribe(queue)


async def _pump_effects(controller: LaunchingController, manager: ConnectionManager) -> None:
    queue = controller.subscribe_effects()
    try:
        while True:
            effect = await queue.get()
            await manager.broadcast(effect_message(effect))
    finally:
        controller.unsubscribe_effects(queue)


async def run_launching_broadcast(
    controller: LaunchingController, manager: ConnectionManager
) -> None:
    """Forward every state change and effect to all connected clients.

    Run as a background task from lifespan; cancelling the task stops both pumps.
    """
    logger.info("Launching state broadcast started")
    try:
        await asyncio.gather(
            _pump_states(controller, manager),
            _pump_effects(controller, manager),
        )
    except asyncio.CancelledError:
        logger.info("Launching state broadcast cancelled")
        raise
