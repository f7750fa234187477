"""Tic Tac Toe coordination server: game registry, move rules and live move events."""

from .main import create_app, create_events_app
from .service import GameService

__all__ = ["create_app", "create_events_app", "GameService"]
