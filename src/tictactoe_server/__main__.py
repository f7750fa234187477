"""
Runs the HTTP API and the move-event websocket listener in one process.
"""
import asyncio
import logging

import uvicorn

from .config import get_config
from .main import create_app, create_events_app
from .service import GameService

logger = logging.getLogger(__name__)


async def serve() -> None:
    config = get_config()
    service = GameService()
    servers = [
        uvicorn.Server(uvicorn.Config(create_app(service, config), host=config.host, port=config.http_port, log_config=None)),
        uvicorn.Server(uvicorn.Config(create_events_app(service, config), host=config.host, port=config.events_port, log_config=None)),
    ]
    logger.info("listening on port %s (events on %s)", config.http_port, config.events_port)
    await asyncio.gather(*(server.serve() for server in servers))


def main() -> None:
    logging.basicConfig(
        level=get_config().log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    asyncio.run(serve())


if __name__ == "__main__":
    main()
