"""
Main entrypoint for the LinkVault API.

This module assembles the FastAPI application: it sets up logging,
loads the JSON store, installs CORS and error handling and includes
the routers.  ``create_app`` builds the app and is called at import
time to provide ``app`` for ASGI servers, e.g.::

    uvicorn linkvault_api.app.main:app --reload

Tests call ``create_app`` directly with their own settings and store.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .api.endpoints import preview
from .api.router import router as api_router
from .core.config import Settings, settings as default_settings
from .core.errors import StorageError
from .core.logging_config import setup_logging
from .core.store import JsonStore, get_database_path

logger = logging.getLogger(__name__)


def create_app(config: Optional[Settings] = None, store: Optional[JsonStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    config : Optional[Settings]
        Settings to use; defaults to the module-level ``settings``.
    store : Optional[JsonStore]
        Store to serve.  When omitted, a store is opened at the
        configured database path and loaded from disk.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    config = config or default_settings
    # Logging first so that store loading below is logged.
    setup_logging(config.log_level, config.log_file or None)

    if store is None:
        store = JsonStore(get_database_path(config))
        store.load()

    app = FastAPI(title=config.project_name, version=config.api_version, debug=config.debug)
    app.state.settings = config
    app.state.store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origin_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(StorageError)
    async def storage_error_handler(request: Request, exc: StorageError) -> JSONResponse:
        logger.error("Storage failure on %s %s: %s", request.method, request.url.path, exc.message)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Storage failure"},
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        # Malformed or missing bodies count as bad input, same as a missing field.
        logger.info("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": "Invalid request body"},
        )

    app.include_router(api_router, prefix="/api")
    app.include_router(preview.router, tags=["preview"])

    logger.info("LinkVault API ready, database at %s", store.path)
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
