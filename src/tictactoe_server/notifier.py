"""
Live websocket connections and move-event fan-out.
"""

import logging
from typing import List

from fastapi import WebSocket
from starlette.websockets import WebSocketState

from .models import MoveEvent

logger = logging.getLogger(__name__)


def is_live(websocket: WebSocket) -> bool:
    """Open, or closed by the peer without the server having read the close yet."""
    return (
        websocket.client_state != WebSocketState.DISCONNECTED
        and websocket.application_state != WebSocketState.DISCONNECTED
    )


class NotificationHub:
    """Manages the websocket connections that receive every move."""

    def __init__(self):
        self.connections: List[WebSocket] = []

    def register(self, websocket: WebSocket) -> None:
        self.connections.append(websocket)
        logger.info("Connection registered (%d live)", len(self.connections))

    async def broadcast(self, event: MoveEvent) -> None:
        """Send the event to all live clients.

        Closed connections are pruned first. A failed send is logged and
        does not stop delivery to the remaining clients.
        """
        self.connections = [ws for ws in self.connections if is_live(ws)]
        data = event.model_dump_json(by_alias=True)
        for ws in list(self.connections):
            try:
                await ws.send_text(data)
            except Exception as exc:
                logger.warning("Failed to send move event to %s: %s", ws.client, exc)

    def __len__(self) -> int:
        return len(self.connections)
