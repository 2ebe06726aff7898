"""WebSocket endpoints: live launching state stream and connection status.

Uses only the ConnectionManager and controller stored on app.state in
lifespan. Each client gets the current snapshot on connect; later
updates arrive through the lifespan broadcaster.
"""

from fastapi import APIRouter, Request, WebSocket, WebSocketDisconnect

from comingsoon.api.websocket import state_message
from comingsoon.schemas.health import WebSocketStatusResponse

router = APIRouter()


@router.websocket("/launching")
async def launching_stream(websocket: WebSocket):
    """Push {"type": "state"} snapshots and {"type": "effect"} events.

    The client may send "ping" to get "pong"; anything else is ignored.
    """
    manager = websocket.app.state.ws_manager
    controller = getattr(websocket.app.state, "launching_controller", None)
    await manager.connect(websocket)
    try:
        if controller is not None:
            await manager.send(websocket, state_message(controller))
        while True:
            data = await websocket.receive_text()
            if data == "ping":
                await websocket.send_text("pong")
    except WebSocketDisconnect:
        pass
    finally:
        await manager.disconnect(websocket)


@router.get("/status", response_model=WebSocketStatusResponse)
async def websocket_status(request: Request) -> WebSocketStatusResponse:
    manager = request.app.state.ws_manager
    return WebSocketStatusResponse(total_connections=await manager.get_connection_count())
