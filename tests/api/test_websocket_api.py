"""WebSocket stream tests (/api/v1/ws). Starlette TestClient drives the socket."""

from fastapi.testclient import TestClient

from comingsoon.main import app


def receive_until(ws, predicate, limit: int = 20) -> dict:
    for _ in range(limit):
        message = ws.receive_json()
        if predicate(message):
            return message
    raise AssertionError("expected message not received")


def test_stream_sends_snapshot_then_changes() -> None:
    with TestClient(app) as client:
        with client.websocket_connect("/api/v1/ws/launching") as ws:
            first = ws.receive_json()
            assert first["type"] == "state"
            assert first["data"]["countdown"]["target"] == "2099-01-01T00:00:00"

            client.put("/api/v1/launching/form/full_name", json={"value": "Ada Lovelace"})
            update = receive_until(
                ws,
                lambda m: m["type"] == "state" and m["data"]["full_name"] == "Ada Lovelace",
            )
            assert update["data"]["full_name_error"] is None


def test_stream_forwards_effects() -> None:
    with TestClient(app) as client:
        with client.websocket_connect("/api/v1/ws/launching") as ws:
            ws.receive_json()
            client.post("/api/v1/launching/open-link", json={"url": "https://twitter.com"})
            effect = receive_until(ws, lambda m: m["type"] == "effect")
            assert effect["data"] == {
                "kind": "open_link",
                "message": None,
                "url": "https://twitter.com/",
            }


def test_status_counts_connections() -> None:
    with TestClient(app) as client:
        assert client.get("/api/v1/ws/status").json() == {"total_connections": 0}
        with client.websocket_connect("/api/v1/ws/launching") as ws:
            ws.receive_json()
            assert client.get("/api/v1/ws/status").json() == {"total_connections": 1}
