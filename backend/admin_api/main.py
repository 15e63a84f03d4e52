"""
DA Admin Backend — FastAPI Application Factory
================================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   Called by uvicorn (`uvicorn admin_api.main:app`), by
       `python -m admin_api`, and by tests with their own Settings.
When:  Once at server startup; the returned app handles all requests.

Application Architecture:
    ┌──────────────────────────────────────────────────────────┐
    │                      FastAPI App                         │
    │                                                          │
    │  Middleware Chain:                                       │
    │  ┌─────────┐ ┌──────────┐ ┌──────────┐ ┌──────┐ ┌──────┐ │
    │  │ Req ID  │→│ Logging  │→│ Security │→│ CORS │→│ GZip │ │
    │  └─────────┘ └──────────┘ └──────────┘ └──────┘ └──────┘ │
    │  (the 500 error boundary sits between CORS and GZip)     │
    │                                                          │
    │  Static route table:                                     │
    │  /, /api/health, /api/test, /api/users, /api/auth,       │
    │  /api/data                                               │
    │                                                          │
    │  Exception Handlers:                                     │
    │  ┌────────────────────────────────────────────────────┐  │
    │  │ Validation→400 │ TooLarge→413 │ NoRoute→404 │ →500 │  │
    │  └────────────────────────────────────────────────────┘  │
    └──────────────────────────────────────────────────────────┘

Lifecycle:
    Startup:
    1. Initialize logging
    2. Open the database handle (fatal outside production on failure)
    Shutdown:
    1. Dispose the database handle
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.middleware.gzip import GZipMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from admin_api import __version__
from admin_api.config import Settings, settings
from admin_api.database import bootstrap_database
from admin_api.exceptions import (
    MalformedBodyError,
    PayloadTooLargeError,
    ValidationError,
)
from admin_api.middleware.cors import CORSPolicyMiddleware, build_origin_allowlist
from admin_api.middleware.errors import ErrorBoundaryMiddleware, internal_error_response
from admin_api.middleware.logging import RequestLoggingMiddleware
from admin_api.middleware.request_id import RequestIDMiddleware, request_id_var
from admin_api.middleware.security_headers import SecurityHeadersMiddleware
from admin_api.responses import error_response
from admin_api.routes.table import build_router

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(app_settings: Settings) -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    """
    logging.basicConfig(
        level=getattr(logging, app_settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Our access log replaces uvicorn's
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Startup opens the database handle and stores it on app.state.database;
    shutdown disposes it.

    bootstrap_database() raises outside production when the database is
    unreachable, which makes uvicorn abort startup.
    """
    app_settings: Settings = app.state.settings

    # ── Startup ───────────────────────────────────────────────────────────
    setup_logging(app_settings)
    logger.info("DA Admin Backend starting up...")
    logger.info("Environment: %s", app_settings.environment)

    app.state.database = await bootstrap_database(app_settings)

    logger.info("Server running on port %d", app_settings.port)
    logger.info("API URL: http://localhost:%d", app_settings.port)

    yield

    # ── Shutdown ──────────────────────────────────────────────────────────
    logger.info("DA Admin Backend shutting down...")
    if app.state.database is not None:
        await app.state.database.dispose()
        app.state.database = None
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _request_target(request: Request) -> str:
    path = request.url.path
    if request.url.query:
        path = f"{path}?{request.url.query}"
    return path


def register_exception_handlers(app: FastAPI, app_settings: Settings) -> None:
    """
    Handler hierarchy:
        MalformedBodyError        → 400 Bad Request
        PayloadTooLargeError      → 413 Payload Too Large
        ValidationError           → 400 Bad Request (missing fields)
        HTTPException 404 / 405   → 404 Route not found
        HTTPException (other)     → its own status
        Exception (fallback)      → 500, message gated by environment
    """

    @app.exception_handler(MalformedBodyError)
    async def handle_malformed_body(request: Request, exc: MalformedBodyError):
        logger.warning("[%s] Malformed JSON body: %s", request_id_var.get(""), exc.detail)
        return error_response(400, error=exc.message, message=exc.detail)

    @app.exception_handler(PayloadTooLargeError)
    async def handle_payload_too_large(request: Request, exc: PayloadTooLargeError):
        return error_response(
            413,
            error=exc.message,
            message=f"Request body exceeds the {exc.limit} byte limit",
            details=exc.context,
        )

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        """Client sent incomplete input; name what is missing."""
        return error_response(exc.status_code, error=exc.message, details=exc.context)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        # A known path with an unregistered method is still "no route"
        if exc.status_code in (404, 405):
            return error_response(404, error="Route not found", path=_request_target(request))
        return error_response(
            exc.status_code,
            error=str(exc.detail),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """
        Last resort for faults raised outside ErrorBoundaryMiddleware, i.e.
        in the outer middleware themselves. Route faults are converted by
        the boundary so their 500s keep CORS and request ID headers.
        """
        return internal_error_response(exc, app_settings.verbose_errors)


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        app_settings: Overrides the module-level settings (tests pass their own).
    """
    app_settings = app_settings or settings

    app = FastAPI(
        title="DA Admin Backend API",
        description="Mock REST endpoints for users, auth and dashboard data.",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.settings = app_settings
    app.state.database = None

    # ── Register Middleware ───────────────────────────────────────────────
    # Middleware executes in REVERSE order of addition: the last added runs
    # first. Execution order:
    # RequestID → Logging → Security → CORS → ErrorBoundary → GZip

    app.add_middleware(GZipMiddleware, minimum_size=500)

    app.add_middleware(ErrorBoundaryMiddleware, verbose_errors=app_settings.verbose_errors)

    app.add_middleware(
        CORSPolicyMiddleware,
        is_development=app_settings.is_development,
        allowlist=build_origin_allowlist(
            app_settings.allowed_origins, app_settings.frontend_url
        ),
    )

    app.add_middleware(SecurityHeadersMiddleware)

    app.add_middleware(RequestLoggingMiddleware)

    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app, app_settings)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(build_router())

    return app


# ── Application Instance ─────────────────────────────────────────────────
# uvicorn expects `admin_api.main:app` to be importable
app = create_app()
