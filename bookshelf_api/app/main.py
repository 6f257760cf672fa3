"""
Main entrypoint for the Bookshelf API.

This module assembles the FastAPI application, sets up logging, owns
the book store and includes the API router.  ``create_app`` builds
and configures the app, which is then instantiated at module import
time as ``app``, e.g.::

    uvicorn bookshelf_api.app.main:app --reload
"""

from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .api.router import router
from .core.config import Settings, settings as default_settings
from .core.exceptions import BookshelfError
from .core.logging_config import setup_logging
from .core.messages import get_message
from .core.storage import BookStore


def fail_response(status_code: int, message: str) -> JSONResponse:
    """Build the ``{"status": "fail", "message": ...}`` error body."""
    return JSONResponse(status_code=status_code, content={"status": "fail", "message": message})


def create_app(settings: Optional[Settings] = None, store: Optional[BookStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Defaults to the module-level settings
        read from the environment.
    store : Optional[BookStore]
        Pre-built store.  By default a store is created for
        ``settings.resolve_data_path()``.  Either way it is loaded from
        disk once, when the application starts.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version)
    app.state.settings = settings
    if store is None:
        store = BookStore(settings.resolve_data_path())
    app.state.book_store = store

    app.include_router(router)

    @app.exception_handler(BookshelfError)
    async def bookshelf_error_handler(request: Request, exc: BookshelfError) -> JSONResponse:
        return fail_response(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def payload_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        return fail_response(
            status.HTTP_400_BAD_REQUEST,
            get_message("invalid_payload", settings.locale),
        )

    @app.on_event("startup")
    async def startup_event() -> None:
        # Populate the collection from the data file before serving requests.
        app.state.book_store.load()

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
