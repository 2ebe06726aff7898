"""WebSocket connection manager for the launching state stream.

Tracks open connections and fans out state snapshots. Use via
app.state.ws_manager (set in lifespan).
"""

from __future__ import annotations

import asyncio
from typing import Any

from fastapi import WebSocket

from comingsoon.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


class ConnectionManager:
    """Manages WebSocket connections; connection set is lock-protected."""

    def __init__(self) -> None:
        self._connections: set[WebSocket] = set()
        self._lock = asyncio.Lock()

    async def connect(self, websocket: WebSocket) -> None:
        """Accept and register a new connection."""
        await websocket.accept()
        async with self._lock:
            self._connections.add(websocket)

    async def disconnect(self, websocket: WebSocket) -> None:
        """Remove a connection (call on disconnect)."""
        async with self._lock:
            self._connections.discard(websocket)

    async def send(self, websocket: WebSocket, message: dict[str, Any]) -> None:
        """Send to one connection (e.g. the initial snapshot)."""
        await websocket.send_json(message)

    async def broadcast(self, message: dict[str, Any]) -> None:
        """Send a JSON message to every connection; drop the ones that fail."""
        async with self._lock:
            snapshot = list(self._connections)
        dead: list[WebSocket] = []
        for ws in snapshot:
            try:
                await ws.send_json(message)
            except Exception:
                dead.append(ws)
        if dead:
            logger.debug("Dropping %d dead WebSocket connection(s)", len(dead))
            async with self._lock:
                for ws in dead:
                    self._connections.discard(ws)

    async def get_connection_count(self) -> int:
        """Return the number of active connections (lock-safe)."""
        async with self._lock:
            return len(self._connections)
