"""Entry point for the Bookshelf API.

Serves the FastAPI application with Uvicorn.  Host and port come from
the ``HOST`` and ``PORT`` environment variables (defaults ``0.0.0.0``
and ``9000``); the data file location from ``BOOKS_DATA_PATH``.

Usage:
    python run.py
"""
import logging

from uvicorn import Config, Server

from bookshelf_api.app.core.config import settings
from bookshelf_api.app.main import app


def main() -> None:
    """Run the API server until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    logging.getLogger(__name__).info("Serving %s on %s:%s", settings.project_name, settings.host, settings.port)
    server.run()


if __name__ == "__main__":
    try:
        main()
    except (KeyboardInterrupt, SystemExit):
        pass
