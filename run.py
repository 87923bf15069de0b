"""Entry point for the Travel API.

Starts the FastAPI application with Uvicorn.  Host and port are read
from the ``API_HOST`` and ``API_PORT`` environment variables through
``Settings``.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from travel_api.app.core.config import settings
from travel_api.app.main import app


async def main() -> None:
    """Serve the API until interrupted."""
    config = Config(app=app, host=settings.api_host, port=settings.api_port, reload=False, log_level=settings.log_level.lower())
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        logging.getLogger(__name__).info("Travel API stopped")
