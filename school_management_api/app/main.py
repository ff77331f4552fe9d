"""
Main entrypoint for the School Management API.

This module assembles the FastAPI application: it sets up logging,
registers the error handlers that turn domain errors into
``{"error": ...}`` responses and includes the router.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``, e.g.::

    uvicorn school_management_api.app.main:app --reload

The school store is opened on startup and closed on shutdown; request
handlers obtain it through ``core.db.get_store``.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .api.endpoints.schools import INVALID_INPUT_MESSAGE
from .api.router import router
from .core.config import settings
from .core.db import SchoolStore
from .core.exceptions import StorageError, ValidationError
from .core.logging_config import setup_logging

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
    """Render domain and request errors as ``{"error": message}``."""

    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
        logger.debug("Rejected %s %s: %s", request.method, request.url.path, exc.message)
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.debug("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": INVALID_INPUT_MESSAGE})

    @app.exception_handler(StorageError)
    async def storage_error_handler(request: Request, exc: StorageError) -> JSONResponse:
        logger.error("Storage failure on %s %s", request.method, request.url.path, exc_info=exc)
        return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": exc.message})


def create_app(store: Optional[SchoolStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[SchoolStore]
        Store to serve requests from.  When omitted, a store for
        ``settings.database_url`` is created on startup.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version)
    app.state.store = store

    register_exception_handlers(app)
    app.include_router(router)

    @app.on_event("startup")
    async def startup_event() -> None:
        app.state.store = (app.state.store or SchoolStore()).open()

    @app.on_event("shutdown")
    async def shutdown_event() -> None:
        if app.state.store is not None:
            app.state.store.close()

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
