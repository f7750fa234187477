"""Pytest configuration and fixtures."""

import json

import pytest
from fastapi.testclient import TestClient
from starlette.websockets import WebSocketState

from tictactoe_server.config import Settings
from tictactoe_server.main import create_app
from tictactoe_server.service import GameService


class FakeSocket:
    """Stands in for a server-side websocket; records what it is sent."""

    def __init__(self, client_state=WebSocketState.CONNECTED, fail=False):
        self.client_state = client_state
        self.application_state = WebSocketState.CONNECTED
        self.client = ("testclient", 50000)
        self.fail = fail
        self.sent = []

    async def send_text(self, data: str) -> None:
        if self.fail:
            raise RuntimeError("connection reset")
        self.sent.append(json.loads(data))


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def settings() -> Settings:
    return Settings(host="127.0.0.1", http_port=0, events_port=0)


@pytest.fixture
def service() -> GameService:
    return GameService()


@pytest.fixture
def make_socket():
    return FakeSocket


@pytest.fixture
def app(service, settings):
    return create_app(service, settings)


@pytest.fixture
def client(app):
    # Context manager keeps one event loop for requests and websockets.
    with TestClient(app) as client:
        yield client
