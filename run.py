"""Entry point that serves the Vocabulary List API with Uvicorn.

Host and port are read from the ``API_HOST`` and ``API_PORT``
environment variables (defaults ``0.0.0.0`` and ``8000``).  All other
configuration is read by :mod:`vocabulary_api.app.core.config`.

Usage:
    python run.py
"""
import asyncio
import logging
import os

from uvicorn import Config, Server

from vocabulary_api.app.main import app


async def run_api() -> None:
    """Start the API server and wait until it stops."""
    host = os.getenv("API_HOST", "0.0.0.0")
    port = int(os.getenv("API_PORT", "8000"))
    config = Config(app=app, host=host, port=port, reload=False, log_level="info")
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(run_api())
    except KeyboardInterrupt:
        logging.getLogger(__name__).info("Shutting down")
