"""
Main entrypoint for the Vocabulary List API.

This module assembles the FastAPI application, sets up logging,
registers the error handler for service failures and includes the
versioned routers.  ``create_app`` builds and configures the app,
which is instantiated at module import time as ``app``::

    uvicorn vocabulary_api.app.main:app --reload
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .api.v1.router import router as v1_router
from .core.config import settings
from .core.db import init_db
from .core.errors import InvalidInput, VocabularyError
from .core.logging_config import setup_logging

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Configure logging before the app exists so startup hooks and handlers use it.
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)

    app.include_router(v1_router, prefix="/api/v1")

    @app.exception_handler(VocabularyError)
    async def vocabulary_error_handler(request: Request, exc: VocabularyError) -> JSONResponse:
        logger.info("%s %s -> %s: %s", request.method, request.url.path, exc.kind, exc.message)
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in exc.errors()
        )
        error = InvalidInput(f"Invalid request: {problems}")
        logger.info("%s %s -> %s: %s", request.method, request.url.path, error.kind, error.message)
        return JSONResponse(status_code=error.status_code, content=error.to_dict())

    @app.get("/health", tags=["health"])
    async def health_check() -> dict:
        return {"status": "healthy", "storage": settings.storage_backend}

    @app.on_event("startup")
    async def startup_event() -> None:
        if settings.storage_backend == "sqlite":
            # Creates the database file on first start.
            init_db()

    return app


app = create_app()
