"""
Noteful Backend — FastAPI Application Factory
===============================================

What:  Creates and configures the FastAPI application instance.
How:   create_app(settings) builds the engine and session factory, keeps them
       on app.state, registers middleware, exception handlers and routers.
Who:   uvicorn imports `noteful.main:app`; tests call create_app() with their
       own Settings and engine.

Application Architecture:
    Middleware:          RequestID → Logging → CORS
    Routes:              /folders, /notes (under API_PREFIX), /health
    Exception Handlers:  ValidationError→400 │ ConstraintError→400
                         NotFoundError→404 │ DatabaseError→500 │ other→500

Lifecycle:
    Startup:   configure logging, log the database backend in use
    Shutdown:  dispose the engine (close pooled connections)
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncEngine

from noteful import __version__
from noteful.config import Settings, settings as default_settings
from noteful.database import create_engine_for, dispose_engine, session_factory_for
from noteful.exceptions import (
    ConstraintError,
    DatabaseError,
    NotefulError,
    NotFoundError,
    ValidationError,
)
from noteful.middleware.logging import RequestLoggingMiddleware
from noteful.middleware.request_id import RequestIDMiddleware
from noteful.routes import folders, health, notes
from noteful.schemas.common import ErrorResponse
from noteful.services.resource_service import BODY_NOT_OBJECT

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(level: str) -> None:
    """
    Configure root logging once, to stdout.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    """
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    app_settings: Settings = app.state.settings
    setup_logging(app_settings.log_level)
    logger.info("Noteful Backend %s starting up", __version__)
    logger.info("Database backend: %s", app.state.engine.dialect.name)
    logger.info(
        "Serving at http://%s:%d%s",
        app_settings.backend_host,
        app_settings.backend_port,
        app_settings.api_prefix,
    )

    yield

    logger.info("Noteful Backend shutting down...")
    await dispose_engine(app.state.engine)
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse.of(message).model_dump(),
    )


def _request_id(request: Request) -> str:
    return getattr(request.state, "request_id", "")


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exception types to status codes and the {"error": {"message"}} body.

    Handler hierarchy:
        ValidationError         → 400
        ConstraintError         → 400
        RequestValidationError  → 400 (malformed JSON body)
        NotFoundError           → 404
        DatabaseError           → 500, generic message, details logged
        NotefulError (base)     → its status_code
        Exception (fallback)    → 500, stack trace logged
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        logger.warning("[%s] Validation error: %s", _request_id(request), exc.message)
        return _error(400, exc.message)

    @app.exception_handler(ConstraintError)
    async def handle_constraint_error(request: Request, exc: ConstraintError):
        logger.warning(
            "[%s] Constraint error: %s | Context: %s",
            _request_id(request),
            exc.message,
            exc.context,
        )
        return _error(400, exc.message)

    @app.exception_handler(RequestValidationError)
    async def handle_malformed_body(request: Request, exc: RequestValidationError):
        logger.warning("[%s] Malformed request: %s", _request_id(request), exc.errors())
        return _error(400, BODY_NOT_OBJECT)

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return _error(404, exc.message)

    @app.exception_handler(DatabaseError)
    async def handle_database_error(request: Request, exc: DatabaseError):
        logger.error(
            "[%s] Database error: %s | Context: %s",
            _request_id(request),
            exc.message,
            exc.context,
        )
        return _error(500, "An internal error occurred. Please try again later.")

    @app.exception_handler(NotefulError)
    async def handle_app_error(request: Request, exc: NotefulError):
        logger.error("[%s] %s: %s", _request_id(request), type(exc).__name__, exc.message)
        return _error(exc.status_code, exc.message)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.error(
            "[%s] Unexpected error: %s",
            _request_id(request),
            str(exc),
            exc_info=exc,
        )
        return _error(500, "An unexpected error occurred. Please try again later.")


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(
    app_settings: Optional[Settings] = None,
    engine: Optional[AsyncEngine] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        app_settings: Settings to use (defaults to the environment-loaded ones)
        engine: Pre-built engine, e.g. an in-memory SQLite engine shared with
                a test fixture. Built from app_settings when omitted.

    Returns:
        Fully configured FastAPI instance.
    """
    app_settings = app_settings or default_settings
    engine = engine or create_engine_for(app_settings)

    app = FastAPI(
        title="Noteful API",
        description="Folders and the notes inside them.",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = app_settings
    app.state.engine = engine
    app.state.session_factory = session_factory_for(engine)

    # Middleware executes in REVERSE order of addition:
    # RequestID → Logging → CORS → route
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID", "Location"],
    )
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    app.include_router(folders.router, prefix=app_settings.api_prefix)
    app.include_router(notes.router, prefix=app_settings.api_prefix)
    app.include_router(health.router)

    return app


app = create_app()
