"""Tests for the status server."""

import pytest

from hue_tween.control.server import StatusServer
from hue_tween.engine import TweenEngine
from hue_tween.tweeners import PositionTweener


@pytest.fixture
def engine() -> TweenEngine:
    engine = TweenEngine()
    engine.add("spot", PositionTweener([(1, 0, 0), (2, 0, 0)], segment_duration=1.0))
    for _ in range(2):
        engine.update(1.0)
    return engine


@pytest.fixture
async def client(aiohttp_client, engine):
    server = StatusServer(engine)
    return await aiohttp_client(server.create_app())


async def test_status_endpoint(client):
    resp = await client.get("/api/status")

    assert resp.status == 200
    data = await resp.json()
    assert data["type"] == "status"
    assert data["frame"] == 2
    assert data["total_loops"] == 1
    assert data["tweeners"][0]["name"] == "spot"


async def test_tweener_endpoint(client):
    resp = await client.get("/api/tweeners/spot")

    assert resp.status == 200
    data = await resp.json()
    assert data["loops"] == 1
    assert data["instruction"] == {
        "variant": "segment",
        "start_index": 1,
        "end_index": 0,
        "ratio": 0.0,
    }


async def test_unknown_tweener_is_404(client):
    resp = await client.get("/api/tweeners/missing")

    assert resp.status == 404
    data = await resp.json()
    assert data["type"] == "error"


async def test_websocket_status_and_commands(client):
    ws = await client.ws_connect("/ws")

    initial = await ws.receive_json()
    assert initial["type"] == "status"

    await ws.send_json({"type": "get_status"})
    assert (await ws.receive_json())["total_loops"] == 1

    await ws.send_json({"type": "get_tweener", "name": "spot"})
    reply = await ws.receive_json()
    assert reply["type"] == "tweener"
    assert reply["name"] == "spot"

    await ws.send_str("not json")
    assert (await ws.receive_json())["type"] == "error"

    await ws.send_json({"type": "reboot"})
    assert (await ws.receive_json())["type"] == "error"

    await ws.close()


class FakeSocket:
    """Stands in for a WebSocketResponse during broadcasts."""

    def __init__(self, on_send=None, error: Exception | None = None):
        self.on_send = on_send
        self.error = error
        self.sent: list[dict] = []

    async def send_json(self, data: dict) -> None:
        if self.on_send:
            self.on_send()
        if self.error:
            raise self.error
        self.sent.append(data)


async def test_broadcast_survives_clients_joining_mid_send(engine):
    server = StatusServer(engine)
    late = FakeSocket()
    early = FakeSocket(on_send=lambda: server._clients.add(late))
    server._clients.add(early)

    await server._broadcast_status()

    assert early.sent[0]["type"] == "status"
    assert late in server._clients

    await server._broadcast_status()
    assert late.sent


async def test_broadcast_drops_dead_clients(engine):
    server = StatusServer(engine)
    dead = FakeSocket(error=ConnectionResetError())
    alive = FakeSocket()
    server._clients.update({dead, alive})

    await server._broadcast_status()

    assert server._clients == {alive}
    assert alive.sent
