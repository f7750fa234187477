"""
In-memory storage for active games.
"""

import logging
import threading
import time
from typing import Dict, Optional

from .errors import InvalidInput
from .models import Game, empty_board

logger = logging.getLogger(__name__)


class GameStore:
    """Registry of active games keyed by id. Lost on restart."""

    def __init__(self):
        self.games: Dict[int, Game] = {}  # id : Game
        self.lock = threading.RLock()
        self._last_id = 0

    def _next_id(self) -> int:
        # Millisecond timestamps, bumped so two games created in the same
        # millisecond still get distinct ids.
        game_id = max(int(time.time() * 1000), self._last_id + 1)
        self._last_id = game_id
        return game_id

    # PUBLIC_INTERFACE
    def create(self, player1: Optional[str], player2: Optional[str]) -> Game:
        """Create a game with an empty board. player1 plays X, player2 plays O."""
        if not player1 or not player2:
            raise InvalidInput("player names not supplied")
        with self.lock:
            game = Game(id=self._next_id(), player1=player1, player2=player2, board=empty_board())
            self.games[game.id] = game
        logger.info("Created game %s: %s vs %s", game.id, player1, player2)
        return game

    # PUBLIC_INTERFACE
    def get(self, game_id) -> Optional[Game]:
        """The stored game, or None. Unhashable ids (a JSON list or object) are never found."""
        with self.lock:
            try:
                return self.games.get(game_id)
            except TypeError:
                return None

    # PUBLIC_INTERFACE
    def list_for_user(self, user_id: str) -> Dict[int, Game]:
        """Every game the user plays in, keyed by game id."""
        with self.lock:
            return {
                game_id: game
                for game_id, game in self.games.items()
                if user_id in (game.player1, game.player2)
            }

    # PUBLIC_INTERFACE
    def remove(self, game_id) -> None:
        """Forget a game. Unknown ids are ignored."""
        with self.lock:
            self.games.pop(game_id, None)

    def __len__(self) -> int:
        return len(self.games)
