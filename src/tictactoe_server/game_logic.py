"""
Game logic functions for Tic Tac Toe (move validation and win detection).
"""

from typing import Any, List, Optional

from .errors import GameNotFound, InvalidCoordinate, InvalidMarker, MoveError, OutOfTurn
from .models import MARKERS, Game


# PUBLIC_INTERFACE
def as_index(value: Any) -> Optional[int]:
    """Board index 0-2 for value, or None. Integral floats such as 1.0 count."""
    # bool is an int subclass, but True is not a row.
    if isinstance(value, bool):
        return None
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if isinstance(value, int) and 0 <= value <= 2:
        return value
    return None


# PUBLIC_INTERFACE
def validate_move(game: Optional[Game], row: Any, column: Any, marker: Any, game_id: Any = None) -> Optional[MoveError]:
    """
    Check a move request against the game rules.
    Returns the first failing rule as an error, or None when the move may be applied.
    Cell occupancy is left to the caller, which checks it against the live board.
    A game that already has a winner is treated as gone.
    """
    if as_index(row) is None:
        return InvalidCoordinate(f"invalid row {row}")
    if as_index(column) is None:
        return InvalidCoordinate(f"invalid column {column}")
    if marker not in MARKERS:
        return InvalidMarker(f'invalid marker "{marker}"')
    if game is None or game.winner:
        return GameNotFound(f"game {game_id} not found on server")
    if game.last_marker and game.last_marker == marker:
        return OutOfTurn("It is not your turn.")
    return None


# PUBLIC_INTERFACE
def has_won(board: List[List[str]], marker: str) -> bool:
    """
    True if marker fills a row, a column or either diagonal.
    """
    lines = []
    # rows and columns
    for i in range(3):
        lines.append(board[i])
        lines.append([board[0][i], board[1][i], board[2][i]])
    # diagonals
    lines.append([board[0][0], board[1][1], board[2][2]])
    lines.append([board[0][2], board[1][1], board[2][0]])

    return any(all(cell == marker for cell in line) for line in lines)


# PUBLIC_INTERFACE
def get_winner(game: Game) -> str:
    """Winning player's id, or an empty string. X is checked first."""
    if has_won(game.board, "X"):
        return game.player1
    if has_won(game.board, "O"):
        return game.player2
    return ""
