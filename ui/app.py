"""FastAPI application factory."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from config import load_config
from core.errors import BasePushIDError
from generation.push_id import PushID
from internal.logging import get_logger, LogLevel, StructuredLogger
from ui.routes import ids, timestamps, health

VERSION = "1.0.0"


def create_app(config=None):
    """Create and configure the FastAPI application."""
    config = config or load_config()
    
    # Configure structured logging
    StructuredLogger.configure(min_level=LogLevel.parse(config.logging.level))
    logger_instance = get_logger()

    # Fails fast on an unknown encoding in config
    push_id = PushID(config.generator.encoding)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger_instance.info("Application starting", version=VERSION, encoding=push_id.encoding)
        yield
        logger_instance.info("Application shutdown complete", last_timestamp=push_id.timestamp)

    app = FastAPI(
        title="Push ID Service",
        version=VERSION,
        description="sortable unique identifier generation",
        lifespan=lifespan,
    )

    @app.exception_handler(BasePushIDError)
    async def push_id_error_handler(request: Request, exc: BasePushIDError):
        logger_instance.warn("Request rejected", error=exc.message, path=request.url.path, error_id=exc.error_id)
        return JSONResponse(content=exc.to_dict(), status_code=400)

    # Initialize route modules with dependencies
    ids.init(push_id, config.generator.max_batch)
    health.init(push_id)

    app.include_router(ids.router)
    app.include_router(timestamps.router)
    app.include_router(health.router)

    return app
