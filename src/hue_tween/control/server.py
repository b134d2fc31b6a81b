"""Status server for hue-tween.

Exposes tweener state (loop counts, current blend, current value) over
HTTP and WebSocket on localhost:9877. Designed to run alongside the main
render loop in a separate thread.
"""

import asyncio
import json
import threading
from typing import TYPE_CHECKING

from aiohttp import web, WSMsgType

from ..config.schema import DEFAULT_PORT

if TYPE_CHECKING:
    from ..engine import TweenEngine

STATUS_BROADCAST_HZ = 10
STATUS_INTERVAL = 1.0 / STATUS_BROADCAST_HZ


class StatusServer:
    """HTTP + WebSocket server reporting TweenEngine state."""

    def __init__(
        self,
        engine: "TweenEngine",
        host: str = "localhost",
        port: int = DEFAULT_PORT,
    ):
        self.engine = engine
        self.host = host
        self.port = port

        self._app: web.Application | None = None
        self._runner: web.AppRunner | None = None
        self._site: web.TCPSite | None = None
        self._clients: set[web.WebSocketResponse] = set()
        self._running = False
        self._loop: asyncio.AbstractEventLoop | None = None
        self._status_task: asyncio.Task | None = None

    def create_app(self) -> web.Application:
        """Build the aiohttp application with all routes."""
        app = web.Application()
        app.router.add_get("/api/status", self._handle_status)
        app.router.add_get("/api/tweeners/{name}", self._handle_tweener)
        app.router.add_get("/ws", self._handle_websocket)
        return app

    async def _handle_status(self, request: web.Request) -> web.Response:
        return web.json_response(self.engine.get_status())

    async def _handle_tweener(self, request: web.Request) -> web.Response:
        name = request.match_info["name"]
        status = self.engine.get_tweener_status(name)
        if status is None:
            return web.json_response(
                {"type": "error", "message": f"Unknown tweener '{name}'"},
                status=404,
            )
        return web.json_response(status)

    async def _handle_websocket(self, request: web.Request) -> web.WebSocketResponse:
        """Handle incoming WebSocket connection."""
        ws = web.WebSocketResponse()
        await ws.prepare(request)

        self._clients.add(ws)
        print(f"[CONTROL] Client connected ({len(self._clients)} total)")

        try:
            await ws.send_json(self.engine.get_status())

            async for msg in ws:
                if msg.type == WSMsgType.TEXT:
                    try:
                        data = json.loads(msg.data)
                    except json.JSONDecodeError:
                        await ws.send_json({"type": "error", "message": "Invalid JSON"})
                        continue
                    await self._handle_command(data, ws)
                elif msg.type == WSMsgType.ERROR:
                    print(f"[CONTROL] WebSocket error: {ws.exception()}")
        finally:
            self._clients.discard(ws)
            print(f"[CONTROL] Client disconnected ({len(self._clients)} total)")

        return ws

    async def _handle_command(self, data: dict, ws: web.WebSocketResponse) -> None:
        """Handle a command from client."""
        cmd_type = data.get("type") if isinstance(data, dict) else None

        if cmd_type == "get_status":
            await ws.send_json(self.engine.get_status())

        elif cmd_type == "get_tweener":
            name = data.get("name", "")
            status = self.engine.get_tweener_status(name)
            if status is None:
                await ws.send_json({"type": "error", "message": f"Unknown tweener '{name}'"})
            else:
                await ws.send_json({"type": "tweener", **status})

        else:
            await ws.send_json({"type": "error", "message": f"Unknown command: {cmd_type}"})

    async def _broadcast_status(self) -> None:
        """Broadcast status to all connected clients."""
        if not self._clients:
            return

        status = self.engine.get_status()
        dead_clients = set()

        for ws in list(self._clients):
            try:
                await ws.send_json(status)
            except (ConnectionResetError, RuntimeError):
                dead_clients.add(ws)

        self._clients -= dead_clients

    async def _status_loop(self) -> None:
        """Periodically broadcast status to all clients."""
        while self._running:
            await self._broadcast_status()
            await asyncio.sleep(STATUS_INTERVAL)

    async def _start_async(self) -> None:
        """Start the server (async)."""
        self._app = self.create_app()

        self._runner = web.AppRunner(self._app)
        await self._runner.setup()

        self._site = web.TCPSite(self._runner, self.host, self.port)
        await self._site.start()

        self._running = True
        print(f"[CONTROL] Status server running on http://{self.host}:{self.port}/api/status")

        self._status_task = asyncio.create_task(self._status_loop())

    async def _stop_async(self) -> None:
        """Stop the server (async)."""
        self._running = False

        if self._status_task:
            self._status_task.cancel()
            try:
                await self._status_task
            except asyncio.CancelledError:
                pass

        for ws in list(self._clients):
            await ws.close()
        self._clients.clear()

        if self._runner:
            await self._runner.cleanup()

    def start_in_thread(self) -> threading.Thread:
        """Start the server in a background thread.

        Returns the thread so caller can join it on shutdown.
        """
        def run():
            self._loop = asyncio.new_event_loop()
            asyncio.set_event_loop(self._loop)

            try:
                self._loop.run_until_complete(self._start_async())
                self._loop.run_forever()
            finally:
                self._loop.run_until_complete(self._stop_async())
                self._loop.close()

        thread = threading.Thread(target=run, daemon=True, name="StatusServer")
        thread.start()
        return thread

    def stop(self) -> None:
        """Signal the server to stop."""
        self._running = False
        if self._loop:
            self._loop.call_soon_threadsafe(self._loop.stop)
