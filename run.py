"""Entry point for the LinkVault API server.

Starts the FastAPI application with Uvicorn.  Bind address, port and
log level come from ``Settings`` (``HOST``, ``PORT``, ``LOG_LEVEL``),
which also reads a ``.env`` file placed next to this script.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from linkvault_api.app.core.config import settings
from linkvault_api.app.main import app


async def main() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    logging.getLogger(__name__).info("LinkVault listening on http://%s:%s", settings.host, settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
