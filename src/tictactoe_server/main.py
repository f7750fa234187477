from pathlib import Path
from typing import Dict, Optional
import logging

from fastapi import APIRouter, Depends, FastAPI, Request, WebSocket
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from fastapi.staticfiles import StaticFiles

from .config import Settings, get_config
from .errors import GameError
from .models import Game, GameCreateRequest, MoveRequest
from .service import GameService

logger = logging.getLogger(__name__)

openapi_tags = [
    {"name": "game", "description": "Start games, list them and play moves"},
    {"name": "ws", "description": "Websocket feed of every applied move"},
]

router = APIRouter()
events_router = APIRouter()


def get_service(request: Request) -> GameService:
    return request.app.state.service


async def game_error_handler(request: Request, exc: GameError):
    return PlainTextResponse(str(exc), status_code=400)


async def bad_body_handler(request: Request, exc: RequestValidationError):
    return PlainTextResponse("invalid request body", status_code=400)


@router.get("/heartbeat", response_class=PlainTextResponse)
def heartbeat():
    """Liveness probe."""
    return "I am alive!"


# ---------------- Game API ---------------- #

# PUBLIC_INTERFACE
@router.get("/games/{user_id}", response_model=Dict[str, Game], tags=["game"], summary="List a player's games")
async def list_games(user_id: str, service: GameService = Depends(get_service)):
    """Every active game where the user is player1 or player2, keyed by game id."""
    return {str(game_id): game for game_id, game in service.games_for_user(user_id).items()}


# PUBLIC_INTERFACE
@router.post("/game", response_model=Game, status_code=201, tags=["game"], summary="Start a new game")
async def create_game(req: GameCreateRequest, service: GameService = Depends(get_service)):
    """player1 plays X, player2 plays O. Both names are required."""
    return service.create_game(req.player1, req.player2)


# PUBLIC_INTERFACE
@router.post("/move", response_class=PlainTextResponse, tags=["game"], summary="Make a move in a game")
async def make_a_move(req: MoveRequest, service: GameService = Depends(get_service)):
    """Checks legality, applies the move and returns the winner (empty while the game goes on)."""
    return await service.apply_move(req.game_id, req.row, req.column, req.marker)


# --------------- WebSocket Real-time Move Events --------------- #

# PUBLIC_INTERFACE
@events_router.websocket("/", name="move_events")
async def move_events(websocket: WebSocket):
    """
    Push-only feed: every applied move, in any game, is sent as
    {"gameId", "row", "column", "marker", "winner"}.
    Frames sent by the client are read and discarded.
    """
    hub = websocket.app.state.service.hub
    await websocket.accept()
    hub.register(websocket)
    try:
        while True:
            message = await websocket.receive()
            if message["type"] == "websocket.disconnect":
                break
    except Exception:
        logger.exception("WS: error on connection from %s", websocket.client)
    logger.info("WS: client %s disconnected", websocket.client)


def _init_app(app: FastAPI, service: GameService, settings: Settings) -> FastAPI:
    app.state.service = service
    app.state.settings = settings
    return app


# PUBLIC_INTERFACE
def create_app(service: Optional[GameService] = None, settings: Optional[Settings] = None) -> FastAPI:
    """HTTP API: heartbeat, game creation, listing and moves."""
    settings = settings or get_config()
    app = FastAPI(
        title="Tic Tac Toe Server",
        description="Tracks in-progress games, validates moves and reports winners.",
        version="1.0.0",
        openapi_tags=openapi_tags,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(GameError, game_error_handler)
    app.add_exception_handler(RequestValidationError, bad_body_handler)
    app.include_router(router)

    # Built browser client, if any. Mounted last so the API routes win.
    if settings.static_dir and Path(settings.static_dir).is_dir():
        app.mount("/", StaticFiles(directory=settings.static_dir, html=True), name="client")

    return _init_app(app, service or GameService(), settings)


# PUBLIC_INTERFACE
def create_events_app(service: GameService, settings: Optional[Settings] = None) -> FastAPI:
    """Websocket listener, served on its own port and sharing the HTTP app's service."""
    app = FastAPI(title="Tic Tac Toe Move Events", openapi_tags=openapi_tags)
    app.include_router(events_router)
    return _init_app(app, service, settings or get_config())
