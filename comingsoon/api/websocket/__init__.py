"""WebSocket connection manager and the launching state broadcaster.

Used by the launching stream endpoint and the lifespan broadcaster.
"""

from comingsoon.api.websocket.broadcast import (
    effect_message,
    run_launching_broadcast,
    state_message,
)
from comingsoon.api.websocket.manager import ConnectionManager

__all__ = [
    "ConnectionManager",
    "effect_message",
    "run_launching_broadcast",
    "state_message",
]
