"""FastAPI application factory."""

import asyncio
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from api.routes import health, ids
from config import load_config
from core.errors import UIDError
from core.health import HealthChecker, check_event_loop, create_clock_check, create_generator_check
from internal.logging import LogLevel, StructuredLogger
from uid.generator import create_monotonic_generator
from utils.crash import create_async_handler


def create_app(config=None, clock=None):
    """Create and configure the FastAPI application."""
    config = config or load_config()

    log_level = LogLevel[config.logging.level.upper()]
    logger_instance = StructuredLogger.configure(min_level=log_level)

    # One generator per app: ids served by this process are monotonic
    generator = create_monotonic_generator(config.uid, clock=clock)
    health_checker = HealthChecker()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger_instance.info("Application starting", version="1.0.0", alphabet=config.uid.alphabet)
        loop = asyncio.get_running_loop()
        loop.set_exception_handler(create_async_handler(logger_instance))

        yield

        logger_instance.info("Application shutdown complete", **generator.get_stats())

    app = FastAPI(
        title="Sortable UID Service",
        version="1.0.0",
        description="lexicographically sortable, monotonic unique identifiers",
        lifespan=lifespan,
    )

    health_checker.register("event_loop", check_event_loop, critical=True)
    health_checker.register("clock", create_clock_check(generator, clock), critical=False)
    health_checker.register("generator", create_generator_check(generator), critical=False)

    ids.init(generator, config)
    health.init(generator, health_checker)

    app.include_router(ids.router)
    app.include_router(health.router)

    # Identifiers sent by clients; generator faults are answered with 503 by the ids route
    @app.exception_handler(UIDError)
    async def uid_error_handler(request: Request, exc: UIDError):
        logger_instance.warn("Request failed", error=exc, path=request.url.path, error_id=exc.error_id)
        return JSONResponse(content=exc.to_dict(), status_code=400)

    return app
