"""
FastAPI Application Entry Point.

Builds the notes API: one shared NoteRepository over the configured data
file, standard error envelopes, and request context logging.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.routing import APIRoute

from notekeeper.api import health
from notekeeper.api.v1 import router as api_v1_router
from notekeeper.core.concurrency import shutdown_pools
from notekeeper.core.config import get_app_config
from notekeeper.core.dependencies import build_note_repository
from notekeeper.core.exception_handlers import register_exception_handlers
from notekeeper.core.logging import get_logger, setup_logging
from notekeeper.core.middleware import RequestContextMiddleware
from notekeeper.repositories.note import NoteRepository

logger = get_logger(__name__)

_app: FastAPI | None = None


def _route_summary(app: FastAPI) -> list[str]:
    """List "METHOD path" for every note route, for the startup log."""
    return [
        f"{method} {route.path}"
        for route in app.routes
        if isinstance(route, APIRoute) and "notes" in route.tags
        for method in sorted(route.methods)
    ]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    app_config = get_app_config()
    setup_logging(level=app_config.logging.level)
    store = app.state.note_repository.store

    logger.info(
        "Application starting",
        extra={
            "app_name": app_config.application.name,
            "env": app_config.application.environment,
            "data_file": str(getattr(store, "path", "-")),
            "endpoints": _route_summary(app),
        },
    )
    yield
    await shutdown_pools()
    logger.info("Application shutting down")


def create_app(note_repository: NoteRepository | None = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        note_repository: Repository to serve; built from configuration when omitted
    """
    app_config = get_app_config()
    app_settings = app_config.application

    app = FastAPI(
        title=app_settings.name,
        description=app_settings.description,
        version=app_settings.version,
        docs_url="/docs" if app_settings.docs_enabled else None,
        redoc_url="/redoc" if app_settings.docs_enabled else None,
        lifespan=lifespan,
    )

    app.state.note_repository = note_repository or build_note_repository()

    app.add_middleware(RequestContextMiddleware)

    cors_origins = app_settings.cors.origins
    if cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    register_exception_handlers(app)

    app.include_router(health.router, tags=["health"])
    app.include_router(api_v1_router, prefix=app_settings.api_prefix)

    return app


def get_app() -> FastAPI:
    """
    Get the application instance (lazy initialization).

    This function creates the app on first call and caches it.
    Use this instead of importing `app` directly to avoid
    import-time configuration errors.
    """
    global _app
    if _app is None:
        _app = create_app()
    return _app


# For uvicorn: `uvicorn notekeeper.main:app`
def __getattr__(name: str) -> FastAPI:
    """Support lazy access to `app` for uvicorn compatibility."""
    if name == "app":
        return get_app()
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
