"""
Errors raised for rejected game requests. Each carries the text sent back to the client.
"""


class GameError(ValueError):
    """Base for every client-input error; the HTTP layer turns these into 400 responses."""


class InvalidInput(GameError):
    """Required request fields are missing or empty."""


class MoveError(GameError):
    """A move request that breaks a game rule."""


class InvalidCoordinate(MoveError):
    pass


class InvalidMarker(MoveError):
    pass


class GameNotFound(MoveError):
    pass


class OutOfTurn(MoveError):
    pass


class CellOccupied(MoveError):
    pass
