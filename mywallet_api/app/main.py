"""
Main entrypoint for the MyWallet API.

This module assembles the FastAPI application, sets up logging, CORS
and error handlers, and includes the API router.  The ``create_app``
function builds and configures the app, which is then instantiated at
module import time as ``app``::

    uvicorn mywallet_api.app.main:app --port 5000

The application title and version are provided via ``Settings`` from
``core.config``.
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.router import router as api_router
from .core.config import settings
from .core.db import init_db
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Logging first so that everything below can log.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)
    app.include_router(api_router)

    @app.on_event("startup")
    async def startup_event() -> None:
        # Creates the database file if needed and applies migrations.
        init_db()
        logger.info("%s %s started", settings.project_name, settings.api_version)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
