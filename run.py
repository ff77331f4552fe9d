"""Entry point for the School Management API.

Launches the FastAPI application with Uvicorn.  Host and port are
read from the ``HOST`` and ``PORT`` environment variables (defaults
``0.0.0.0`` and ``3000``); see ``school_management_api/app/core/config.py``
for the full list of supported variables.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from school_management_api.app.core.config import settings
from school_management_api.app.main import app


async def main() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
        log_config=None,
    )
    server = Server(config)
    logging.getLogger(__name__).info("Running on: http://%s:%s", settings.host, settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
