"""Serve the MyWallet API with uvicorn.

Host and port come from ``HOST`` and ``PORT`` (defaults ``0.0.0.0`` and
``5000``).  If the database cannot be initialised at startup the error
is logged and the process exits with a non‑zero status.

Usage:
    python -m mywallet_api
"""

import asyncio
import logging
import sys

from uvicorn import Config, Server

from mywallet_api.app.core.config import settings
from mywallet_api.app.main import app


async def main() -> None:
    # log_config=None keeps the handlers installed by setup_logging
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_config=None,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    logging.getLogger(__name__).info("Starting server on port %s", settings.port)
    await server.serve()
    # uvicorn returns instead of raising when the startup hook fails
    if not server.started:
        sys.exit(1)


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        pass
