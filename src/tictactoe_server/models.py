"""
Models for the Tic Tac Toe coordination server (FastAPI).
"""

from enum import Enum
from typing import Any, List, Optional
from pydantic import BaseModel, ConfigDict, Field


class Marker(str, Enum):
    X = "X"
    O = "O"


MARKERS = (Marker.X.value, Marker.O.value)


def empty_board() -> List[List[str]]:
    return [["" for _ in range(3)] for _ in range(3)]


class CamelModel(BaseModel):
    """Accepts and emits the camelCase keys the browser client uses."""
    model_config = ConfigDict(populate_by_name=True)


# PUBLIC_INTERFACE
class Game(CamelModel):
    """In-memory object for one active match."""
    id: int = Field(..., description="Game identifier")
    player1: str = Field(..., description="Player using the X marker.")
    player2: str = Field(..., description="Player using the O marker.")
    board: List[List[str]] = Field(default_factory=empty_board, description="3x3 board, values are 'X', 'O', or ''.")
    last_marker: Optional[str] = Field(None, alias="lastMarker", description="Marker of the most recent move.")
    winner: str = Field("", description="Identifier of the winner, empty while undecided.")


# PUBLIC_INTERFACE
class GameCreateRequest(CamelModel):
    """To start a new game between two players."""
    player1: Optional[str] = None
    player2: Optional[str] = None


# PUBLIC_INTERFACE
class MoveRequest(CamelModel):
    """Make a move in a game.

    Fields stay loosely typed so that bad values reach the move validator
    and come back with its messages instead of a schema error.
    """
    game_id: Any = Field(None, alias="gameId")
    row: Any = None
    column: Any = None
    marker: Any = None


# PUBLIC_INTERFACE
class MoveEvent(CamelModel):
    """Pushed to every real-time client after a move is applied."""
    game_id: Any = Field(..., alias="gameId")
    row: int
    column: int
    marker: str
    winner: str = ""
