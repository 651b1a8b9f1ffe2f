"""
FastAPI application entry point for the device relay.

This is the backend for:
- Device report ingestion (ESP32 pings with optional readings)
- Operator queries over recent device history
- Output-control commands relayed to polling devices
- Operator login and user management
"""
import asyncio
import logging
import time
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api.dependencies import ServiceContainer, build_container
from .api.middleware import BodySizeLimitMiddleware
from .api.routes import api_router
from .config import AppSettings, get_settings
from .domain.exceptions import (
    AuthenticationException,
    AuthorizationException,
    DomainException,
    EntityNotFoundException,
)
from .logging_config import configure_logging

logger = logging.getLogger(__name__)


async def sweep_expired_sessions(container: ServiceContainer, interval: float) -> None:
    """Periodically drop expired sessions until cancelled."""
    while True:
        await asyncio.sleep(interval)
        try:
            await container.auth_service.purge_expired_sessions()
        except Exception:
            logger.exception("Session sweep failed")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    """
    Application lifespan handler.

    Starts the expired-session sweeper and stops it on shutdown.
    """
    settings: AppSettings = app.state.settings
    container: ServiceContainer = app.state.container

    logger.info(f"Starting {settings.app_name} v{settings.app_version}")
    logger.info(f"Environment: {settings.environment}")

    sweeper = asyncio.create_task(
        sweep_expired_sessions(container, settings.auth.session_sweep_interval_seconds)
    )

    yield

    logger.info("Shutting down application...")
    sweeper.cancel()
    try:
        await sweeper
    except asyncio.CancelledError:
        pass
    logger.info("Shutdown complete")


def create_app(settings: Optional[AppSettings] = None) -> FastAPI:
    """
    Application factory.

    Creates and configures the FastAPI application. Each call builds its own
    stores, so separate apps never share state.
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Telemetry ingestion and command relay for networked devices",
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        openapi_url="/openapi.json" if settings.debug else None,
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.container = build_container(settings)

    # Oversized bodies are refused before routing
    app.add_middleware(BodySizeLimitMiddleware, max_body_bytes=settings.max_body_bytes)

    # Configure CORS; requests without an Origin (devices, curl) are unaffected
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors.allowed_origins,
        allow_credentials=settings.cors.allow_credentials,
        allow_methods=settings.cors.allowed_methods,
        allow_headers=settings.cors.allowed_headers,
    )

    register_request_logging(app)

    # Register exception handlers
    register_exception_handlers(app, settings)

    # Register routes
    register_routes(app, settings)

    return app


def register_request_logging(app: FastAPI) -> None:
    """Log one line per request: method, path, status and duration."""
    access_logger = logging.getLogger("device_relay.access")

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        access_logger.info(
            f"{request.method} {request.url.path} {response.status_code} {elapsed_ms:.1f} ms"
        )
        return response


def register_exception_handlers(app: FastAPI, settings: AppSettings) -> None:
    """Register global exception handlers."""

    @app.exception_handler(DomainException)
    async def domain_exception_handler(request: Request, exc: DomainException):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=exc.to_dict(),
        )

    @app.exception_handler(AuthenticationException)
    async def authentication_handler(request: Request, exc: AuthenticationException):
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content=exc.to_dict(),
            headers={"WWW-Authenticate": "Bearer"},
        )

    @app.exception_handler(AuthorizationException)
    async def authorization_handler(request: Request, exc: AuthorizationException):
        return JSONResponse(
            status_code=status.HTTP_403_FORBIDDEN,
            content=exc.to_dict(),
        )

    @app.exception_handler(EntityNotFoundException)
    async def not_found_handler(request: Request, exc: EntityNotFoundException):
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content=exc.to_dict(),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                'error': 'VALIDATION_ERROR',
                'message': 'Malformed request',
                'details': {'validation_errors': jsonable_encoder(exc.errors())},
            },
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={
                'error': 'HTTP_ERROR',
                'message': str(exc.detail),
                'details': {},
            },
            headers=getattr(exc, 'headers', None),
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled exception on {request.method} {request.url.path}")

        if settings.debug:
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={
                    'error': 'INTERNAL_ERROR',
                    'message': str(exc),
                    'details': {'type': type(exc).__name__},
                },
            )

        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                'error': 'INTERNAL_ERROR',
                'message': 'An internal error occurred',
                'details': {},
            },
        )


def register_routes(app: FastAPI, settings: AppSettings) -> None:
    """Register API routes."""

    @app.get("/", tags=["Root"])
    async def root():
        """Root endpoint."""
        prefix = settings.api_prefix
        return {
            'name': settings.app_name,
            'version': settings.app_version,
            'endpoints': [
                f"{prefix}/health",
                f"{prefix}/logs",
                f"{prefix}/logs/:deviceId",
                f"{prefix}/status/:deviceId",
                f"{prefix}/login",
                f"{prefix}/users",
                f"{prefix}/control",
                f"{prefix}/commands/:deviceId",
            ],
        }

    app.include_router(api_router, prefix=settings.api_prefix)


def run() -> None:
    """Run the service with uvicorn."""
    import uvicorn

    settings = get_settings()
    configure_logging(settings.log_level, settings.log_format)

    uvicorn.run(
        "device_relay.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        log_config=None,
    )


if __name__ == "__main__":
    run()
