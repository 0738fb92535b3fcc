"""
Wolf Dynasty API - FastAPI Application
"""

from contextlib import asynccontextmanager

import uvicorn
from fastapi import APIRouter, FastAPI, Request, Response
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException

from wolf_dynasty.api.responses import write_json_error
from wolf_dynasty.api.v1 import add_routes
from wolf_dynasty.core import Settings, configure_logging, get_settings
from wolf_dynasty.core.errors import WolfDynastyError
from wolf_dynasty.services import Services, build_services

CORS_ALLOW_HEADERS = "authorization"
CORS_ALLOW_METHODS = "PATCH,PUT,POST,OPTIONS,GET,DELETE"


async def cors_middleware(request: Request, call_next) -> Response:
    """Allow any origin; answer every OPTIONS request without routing it."""
    if request.method == "OPTIONS":
        response = Response(status_code=200)
        response.headers["Access-Control-Allow-Headers"] = CORS_ALLOW_HEADERS
        response.headers["Access-Control-Allow-Methods"] = CORS_ALLOW_METHODS
    else:
        response = await call_next(request)

    response.headers["Access-Control-Allow-Origin"] = "*"
    return response


async def wolf_dynasty_error_handler(request: Request, exc: WolfDynastyError) -> Response:
    """Log the failure once and render it as ``{"error": message}``."""
    log = logger.error if exc.status_code >= 500 else logger.warning
    log(f"{request.method} {request.url} {exc.message} {exc.status_code}")
    return write_json_error(exc.message, exc.status_code)


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> Response:
    """Unknown routes and wrong methods get the same error envelope."""
    logger.warning(f"{request.method} {request.url} {exc.detail} {exc.status_code}")
    response = write_json_error(str(exc.detail), exc.status_code)
    if exc.headers:
        response.headers.update(exc.headers)
    return response


def create_app(services: Services | None = None, settings: Settings | None = None) -> FastAPI:
    """
    Build the application.

    Args:
        services: Pre-built clients (tests inject fakes here). Built from
            ``settings`` when omitted.
        settings: Defaults to the cached environment settings.
    """
    settings = settings or get_settings()
    if services is None:
        configure_logging(settings)
        services = build_services(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan events."""
        logger.info("Starting Wolf Dynasty API...")
        logger.info(f"Environment: {settings.environment}")
        yield
        logger.info("Shutting down Wolf Dynasty API...")
        services.close()

    app = FastAPI(
        title="Wolf Dynasty API",
        description="Dynasty fantasy league teams and Yahoo player metadata",
        version="0.1.0",
        lifespan=lifespan,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )
    app.state.services = services

    app.middleware("http")(cors_middleware)
    app.add_exception_handler(WolfDynastyError, wolf_dynasty_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)

    router = APIRouter()
    add_routes(services, router)
    app.include_router(router)

    return app


def run() -> None:
    """Console entry point: serve the API with uvicorn."""
    settings = get_settings()
    uvicorn.run(
        "wolf_dynasty.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        timeout_keep_alive=settings.timeout_keep_alive,
        timeout_graceful_shutdown=settings.graceful_shutdown_timeout,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
