"""FastAPI application factory."""

import asyncio
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from config import load_config
from internal.health import (
    HealthChecker,
    check_event_loop,
    create_codec_check,
    create_random_source_check,
)
from internal.logging import LogLevel, StructuredLogger
from ksuid import KsuidError, RandomSourceError
from utils.crash import create_async_handler
from ui.routes import health, ksuids

VERSION = "1.0.0"


def create_app(config=None):
    """Create and configure the FastAPI application."""
    config = config or load_config()

    # Configure structured logging
    log_level = LogLevel.parse(config.logging.level, default=LogLevel.INFO)
    logger_instance = StructuredLogger.configure(min_level=log_level)

    health_checker = HealthChecker()
    health_checker.register("event_loop", check_event_loop, critical=True)
    health_checker.register("random_source", create_random_source_check(), critical=True)
    health_checker.register("codec", create_codec_check(), critical=True)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger_instance.info("Application starting", version=VERSION, default_variant=config.ksuid.default_variant)
        loop = asyncio.get_running_loop()
        loop.set_exception_handler(create_async_handler(logger_instance))
        yield
        logger_instance.info("Application shutdown complete")

    app = FastAPI(
        title="KSUID Service",
        version=VERSION,
        description="K-sortable unique id generation and inspection",
        lifespan=lifespan,
    )

    @app.exception_handler(KsuidError)
    async def ksuid_error_handler(request: Request, exc: KsuidError):
        status_code = 503 if isinstance(exc, RandomSourceError) else 400
        logger_instance.warn("Request failed", error=exc, path=request.url.path, **exc.context)
        return JSONResponse(content=exc.to_dict(), status_code=status_code)

    # Initialize route modules with dependencies
    ksuids.init(config.ksuid)
    health.init(health_checker)

    app.include_router(ksuids.router)
    app.include_router(health.router)

    return app
