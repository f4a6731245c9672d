"""WebSocket radio hub standing in for the shared broadcast medium.

Every actor connects to /ws/radio; each number frame received from one
actor is relayed to every other actor in the same radio group.
"""

import logging
import time
from typing import Any, Dict, Optional

from fastapi import FastAPI, WebSocket, WebSocketDisconnect

logger = logging.getLogger(__name__)


def number_frame(value: int, group: int) -> dict[str, Any]:
    """Build the wire frame for one broadcast integer."""
    return {"type": "number", "value": value, "group": group}


def parse_number_frame(message: Any) -> Optional[int]:
    """Extract the integer from a number frame.

    Returns:
        The broadcast value, or None for anything that is not a number frame
        carrying an integer (booleans included)
    """
    if not isinstance(message, dict) or message.get("type") != "number":
        return None
    value = message.get("value")
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value


class RadioClient:
    """Represents an actor connected to the hub."""

    def __init__(self, client_id: str, websocket: WebSocket, group: int):
        """Initialize radio client.

        Args:
            client_id: Unique client identifier
            websocket: WebSocket connection instance
            group: Radio group the actor listens on
        """
        self.client_id = client_id
        self.websocket = websocket
        self.group = group
        self.connected_at = time.time()
        self.numbers_sent = 0

    async def send_number(self, value: int) -> bool:
        """Send one number frame to the actor.

        Returns:
            True if sent successfully, False on error
        """
        try:
            await self.websocket.send_json(number_frame(value, self.group))
            self.numbers_sent += 1
            return True
        except Exception as e:
            logger.error(
                f"Error relaying to client {self.client_id}: {e}",
                extra={"actor": self.client_id, "signal": value},
            )
            return False


class RadioHub:
    """Relays broadcast integers between connected actors."""

    def __init__(self):
        self.clients: Dict[str, RadioClient] = {}
        self.next_client_id = 0
        self.relayed = 0
        self.dropped = 0

        logger.info("Radio hub initialized")

    def _generate_client_id(self) -> str:
        client_id = f"actor_{self.next_client_id}"
        self.next_client_id += 1
        return client_id

    async def handle_connection(self, websocket: WebSocket, group: int = 0) -> None:
        """Handle one actor's WebSocket connection lifecycle.

        Args:
            websocket: WebSocket connection instance
            group: Radio group from the connection query string
        """
        await websocket.accept()

        client_id = self._generate_client_id()
        client = RadioClient(client_id, websocket, group)
        self.clients[client_id] = client

        logger.info(
            f"Actor connected: {client_id} group={group} (total: {len(self.clients)})"
        )

        try:
            while True:
                try:
                    message = await websocket.receive_json()
                except (ValueError, KeyError, TypeError) as e:
                    # Non-JSON text or a binary frame
                    self.dropped += 1
                    logger.debug(f"Dropping undecodable frame from {client_id}: {e!r}")
                    continue
                value = parse_number_frame(message)
                if value is None:
                    self.dropped += 1
                    logger.debug(f"Dropping malformed frame from {client_id}: {message}")
                    continue
                await self.broadcast(client_id, value)

        except WebSocketDisconnect:
            logger.info(f"Actor disconnected: {client_id}")
        finally:
            self.clients.pop(client_id, None)
            logger.info(f"Actor removed: {client_id} (total: {len(self.clients)})")

    async def broadcast(self, sender_id: str, value: int) -> int:
        """Relay a value to every other actor in the sender's group.

        Returns:
            Number of actors the value was delivered to
        """
        sender = self.clients.get(sender_id)
        group = sender.group if sender else 0
        delivered = 0

        for client in list(self.clients.values()):
            if client.client_id == sender_id or client.group != group:
                continue
            if await client.send_number(value):
                delivered += 1

        self.relayed += 1
        logger.debug(
            f"Relayed from {sender_id} to {delivered} actor(s)",
            extra={"actor": sender_id, "signal": value},
        )
        return delivered

    def get_status(self) -> dict[str, Any]:
        groups: Dict[int, int] = {}
        for client in self.clients.values():
            groups[client.group] = groups.get(client.group, 0) + 1
        return {
            "connected_actors": len(self.clients),
            "groups": groups,
            "relayed": self.relayed,
            "dropped": self.dropped,
        }


def create_app(hub: Optional[RadioHub] = None) -> FastAPI:
    """Create the hub FastAPI application.

    Args:
        hub: Hub instance to serve (a new one is created if omitted)
    """
    hub = hub if hub is not None else RadioHub()
    started_at = time.time()

    app = FastAPI(
        title="Orchestra Radio Hub",
        version="1.0.0",
        description="Shared broadcast medium for conductor and listener actors",
    )
    app.state.hub = hub

    @app.websocket("/ws/radio")
    async def radio_endpoint(websocket: WebSocket, group: int = 0) -> None:
        await hub.handle_connection(websocket, group)

    @app.get("/api/status")
    async def get_status() -> dict[str, Any]:
        status = hub.get_status()
        status["uptime_sec"] = time.time() - started_at
        return status

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        return {"status": "healthy", "service": "orchestra-hub"}

    return app
