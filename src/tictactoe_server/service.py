"""
Move processing: validation, board mutation, winner resolution and notification.
"""

import logging
from typing import Any, Dict, Optional

from .errors import CellOccupied
from .game_logic import as_index, get_winner, validate_move
from .models import Game, MoveEvent
from .notifier import NotificationHub
from .store import GameStore

logger = logging.getLogger(__name__)


def _coerce_id(game_id: Any) -> Any:
    # JSON clients may send the id as a string.
    if isinstance(game_id, str) and game_id.strip().isdigit():
        return int(game_id)
    return game_id


class GameService:
    """Owns the game registry and the live connections of one server process."""

    def __init__(self, store: Optional[GameStore] = None, hub: Optional[NotificationHub] = None):
        self.store = store if store is not None else GameStore()
        self.hub = hub if hub is not None else NotificationHub()

    # PUBLIC_INTERFACE
    def create_game(self, player1: Optional[str], player2: Optional[str]) -> Game:
        return self.store.create(player1, player2)

    # PUBLIC_INTERFACE
    def get_game(self, game_id: Any) -> Optional[Game]:
        return self.store.get(_coerce_id(game_id))

    # PUBLIC_INTERFACE
    def games_for_user(self, user_id: str) -> Dict[int, Game]:
        return self.store.list_for_user(user_id)

    # PUBLIC_INTERFACE
    async def apply_move(self, game_id: Any, row: Any, column: Any, marker: Any) -> str:
        """
        Apply one move and tell every connected client about it.
        Returns the winner's id, or an empty string while the game continues.
        Raises a MoveError subclass when the move is rejected; nothing is changed or sent then.
        """
        # No awaits until the board is updated, so the occupancy check cannot race.
        with self.store.lock:
            game = self.get_game(game_id)
            error = validate_move(game, row, column, marker, game_id=game_id)
            if error:
                raise error
            row, column = as_index(row), as_index(column)
            if game.board[row][column]:
                raise CellOccupied("position already occupied")

            game.board[row][column] = marker
            game.last_marker = marker
            game.winner = get_winner(game)
            winner = game.winner

        await self.hub.broadcast(
            MoveEvent(game_id=game_id, row=row, column=column, marker=marker, winner=winner)
        )

        if winner:
            self.store.remove(game.id)
            logger.info("Game %s won by %s", game.id, winner)
        return winner
