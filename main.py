"""
Dishes FastAPI Application
Main entry point: configuration, MongoDB lifecycle, middleware, and error handlers
"""

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging
import uvicorn
from contextlib import asynccontextmanager
import anyio
from pymongo.errors import PyMongoError

from api.routes import dishes, comments, health
from adapters import mongo_adapter
from app.config import settings

from api.middleware import (
    CrossOriginMiddleware,
    RequestLoggingMiddleware,
    validation_exception_handler,
    http_exception_handler,
    method_not_supported_handler,
    service_error_handler,
    general_exception_handler,
)
from app.exceptions import MethodNotSupportedError, ServiceError

# Setup logging with configured level and format
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()), format=settings.log_format
)
_logger = logging.getLogger("dishes.main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for application startup and shutdown.
    Opens the MongoDB client and ensures indexes; closes the client on shutdown.
    """
    _logger.info(f"Starting {settings.app_name} in {settings.environment.value} mode")

    db = await anyio.to_thread.run_sync(
        mongo_adapter.connect, settings.mongo_uri, settings.mongo_db_name
    )
    try:
        await anyio.to_thread.run_sync(mongo_adapter.ensure_indexes, db)
    except PyMongoError as e:
        _logger.warning("Could not ensure MongoDB indexes; continuing: %s", e)

    try:
        yield
    finally:
        _logger.info(f"Shutting down {settings.app_name}")
        mongo_adapter.close()


def create_app() -> FastAPI:
    app = FastAPI(
        title=settings.api_title,
        version=settings.app_version,
        description=settings.api_description,
        lifespan=lifespan,
        debug=settings.debug,
        openapi_url=(
            f"{settings.api_prefix}/openapi.json" if not settings.is_production() else None
        ),
        docs_url=f"{settings.api_prefix}/docs" if not settings.is_production() else None,
        redoc_url=f"{settings.api_prefix}/redoc" if not settings.is_production() else None,
    )

    # Cross-origin headers are decided per route (see api.cors)
    app.add_middleware(CrossOriginMiddleware)
    app.add_middleware(RequestLoggingMiddleware)

    # Register exception handlers
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(MethodNotSupportedError, method_not_supported_handler)
    app.add_exception_handler(ServiceError, service_error_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    app.include_router(dishes.router, prefix=settings.api_prefix)
    app.include_router(comments.router, prefix=settings.api_prefix)
    app.include_router(health.router, prefix=settings.api_prefix)
    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development(),
        log_level=settings.log_level.lower(),
    )
