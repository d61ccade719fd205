"""FastAPI application entry point."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api.routes import dashboard, health, optimize, predictions, routes
from .config import Settings, settings as default_settings
from .errors import AppError, NotFoundError, ProviderError, ValidationError
from .logging_setup import configure_logging
from .persistence.memory import InMemoryStore
from .persistence.seed import seed_sample_data
from .services.routing.directions_client import DirectionsClient

logger = logging.getLogger(__name__)

_UNSET = object()


def _format_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error.get("loc", ()) if item != "body")
        parts.append(f"{location}: {error.get('msg')}" if location else str(error.get("msg")))
    return "Validation error: " + "; ".join(parts)


def build_directions_client(config: Settings) -> DirectionsClient | None:
    """Create the provider client, or None when no API key is configured."""
    if not config.provider_configured:
        logger.warning("Google Maps API key not configured; route optimization will use the simulated estimator")
        return None
    try:
        return DirectionsClient(
            api_key=config.google_maps_api_key,
            base_url=config.directions_base_url,
            timeout=config.provider_timeout_seconds,
            connect_timeout=config.provider_connect_timeout_seconds,
            max_retries=config.provider_max_retries,
            backoff_seconds=config.provider_backoff_seconds,
        )
    except ProviderError as exc:
        logger.warning(f"Directions client unavailable: {exc.detail}")
        return None


def _register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content={"message": exc.detail}, headers=exc.headers)

    @app.exception_handler(RequestValidationError)
    async def request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": _format_validation_errors(exc)},
        )

    @app.exception_handler(ValidationError)
    async def validation_error(request: Request, exc: ValidationError) -> JSONResponse:
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"message": str(exc)})

    @app.exception_handler(NotFoundError)
    async def not_found_error(request: Request, exc: NotFoundError) -> JSONResponse:
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"message": str(exc)})

    @app.exception_handler(AppError)
    async def app_error(request: Request, exc: AppError) -> JSONResponse:
        logger.exception(f"Unhandled application error on {request.method} {request.url.path}: {exc}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": "Internal server error"},
        )

    @app.exception_handler(Exception)
    async def internal_error(request: Request, exc: Exception) -> JSONResponse:
        logger.exception(f"Unexpected error on {request.method} {request.url.path}: {exc}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": "Internal server error"},
        )


def create_app(
    config: Settings | None = None,
    store: InMemoryStore | None = None,
    directions_client: DirectionsClient | None | object = _UNSET,
) -> FastAPI:
    """Build the API with its own store and provider client.

    ``store`` and ``directions_client`` may be injected (tests); otherwise a
    fresh store is created, seeded when ``seed_sample_data`` is on, and the
    client is built from the configured API key.
    """
    config = config or default_settings
    configure_logging(config.log_level)

    app = FastAPI(title=config.app_name)
    if config.frontend_allowed_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=list(config.frontend_allowed_origins),
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    if store is None:
        store = InMemoryStore()
        if config.seed_sample_data:
            seed_sample_data(store)
    app.state.store = store
    app.state.directions_client = (
        build_directions_client(config) if directions_client is _UNSET else directions_client
    )
    app.state.settings = config

    @app.get("/")
    def root():
        return {
            "service": config.app_name,
            "status": "running",
            "api_prefix": config.api_prefix,
            "health": f"{config.api_prefix}/health",
            "directions_configured": app.state.directions_client is not None,
            "docs": "/docs",
        }

    _register_exception_handlers(app)
    app.include_router(health.router, prefix=config.api_prefix)
    app.include_router(routes.router, prefix=config.api_prefix)
    app.include_router(optimize.router, prefix=config.api_prefix)
    app.include_router(dashboard.router, prefix=config.api_prefix)
    app.include_router(predictions.router, prefix=config.api_prefix)
    return app


app = create_app()
