"""
Beverage API: FastAPI Application Factory
=========================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   Called by uvicorn to start the server (uvicorn beverage_api.main:app)
       and by the test suite to build isolated app instances.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────────┐ ┌──────────┐ ┌─────────────────┐  │
    │  │  CORS        │→│ Req ID   │→│  Logging        │  │
    │  └──────────────┘ └──────────┘ └─────────────────┘  │
    │                                                     │
    │  Routes:                                            │
    │  ┌──────────────┐ ┌──────────┐ ┌─────────────────┐  │
    │  │ GET hello /  │ │POST pets │ │POST beverages/  │  │
    │  │     good-bye │ │          │ │     {drink}     │  │
    │  └──────────────┘ └──────────┘ └─────────────────┘  │
    │  ┌──────────────┐                                   │
    │  │ GET /health  │                                   │
    │  └──────────────┘                                   │
    │                                                     │
    │  Exception Handlers:                                │
    │  ┌──────────────────────────────────────────────┐   │
    │  │ RequestValidation/ValidationError→400 │ *→500│   │
    │  └──────────────────────────────────────────────┘   │
    └─────────────────────────────────────────────────────┘
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from beverage_api import __version__
from beverage_api.config import Settings, settings
from beverage_api.exceptions import BeverageAPIError, ValidationError
from beverage_api.middleware.logging import RequestLoggingMiddleware
from beverage_api.middleware.request_id import (
    REQUEST_ID_HEADER,
    RequestIDMiddleware,
    internal_error_response,
    request_id_var,
)
from beverage_api.routes import beverages, greetings, health, pets

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(level: str = "INFO") -> None:
    """
    Configure logging for the entire application.

    What:    One stdout handler on the root logger with a uniform format.
    When:    Called once during app startup, before anything else logs.

    Format: 2026-01-15T12:00:00 [INFO] beverage_api.routes.beverages: Beverage ordered: ...
    """
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
        force=True,
    )

    # uvicorn's own access log duplicates RequestLoggingMiddleware
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Manage application lifecycle: startup and shutdown logging.

    There are no pools, files or clients to open or close; the lifespan only
    configures logging and announces where the server is listening.
    """
    app_settings: Settings = app.state.settings

    # ── Startup ───────────────────────────────────────────────────────────
    setup_logging(app_settings.log_level)
    logger.info("=" * 60)
    logger.info("%s %s starting up...", app_settings.app_name, __version__)
    logger.info(
        "Server ready at http://%s:%d",
        app_settings.backend_host,
        app_settings.backend_port,
    )
    if app_settings.docs_enabled:
        logger.info(
            "API docs: http://%s:%d/docs",
            app_settings.backend_host,
            app_settings.backend_port,
        )
    logger.info("=" * 60)

    yield

    # ── Shutdown ──────────────────────────────────────────────────────────
    logger.info("%s shutting down...", app_settings.app_name)


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _validation_response(exc: ValidationError) -> JSONResponse:
    rid = request_id_var.get("")
    logger.warning("[%s] Validation error: %s", rid, exc.message)
    return JSONResponse(
        status_code=400,
        content={
            "error": "validation_error",
            "message": exc.message,
            "details": exc.context,
            "request_id": rid,
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register global exception handlers for consistent error responses.

    Handler hierarchy:
        RequestValidationError  → 400 Bad Request (schema mismatch, converted to ValidationError)
        ValidationError         → 400 Bad Request
        BeverageAPIError (base) → 500 Internal Server Error
        Exception (fallback)    → 500 Internal Server Error (normally answered by
                                  RequestIDMiddleware so the request ID is kept)

    FastAPI answers schema mismatches with 422 by default; this service answers
    them with 400 so existing clients keep seeing the status they expect.
    Error bodies never contain stack traces; those go to the server log.
    """

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        """Path, query or body did not match the route's schema."""
        return _validation_response(ValidationError.from_pydantic_errors(exc.errors()))

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        return _validation_response(exc)

    @app.exception_handler(BeverageAPIError)
    async def handle_app_error(request: Request, exc: BeverageAPIError):
        rid = request_id_var.get("")
        logger.error("[%s] Application error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(
            status_code=500,
            content={
                "error": "server_error",
                "message": exc.message,
                "request_id": rid,
            },
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """
        Last resort for errors raised outside RequestIDMiddleware (e.g. in CORS handling).
        Errors from routes are answered by RequestIDMiddleware with the same payload.
        """
        logger.error("Unexpected error outside request scope: %s", str(exc), exc_info=True)
        return internal_error_response(request_id_var.get(""))


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        app_settings: Settings to build the app with. Defaults to the module
                      singleton; tests pass their own instance.

    Returns: Fully configured FastAPI instance ready to receive requests.
    """
    app_settings = app_settings or settings

    app = FastAPI(
        title=app_settings.app_name,
        description=(
            "Greeting endpoints, a pet submission placeholder, and a validated "
            "beverage ordering endpoint."
        ),
        version=__version__,
        docs_url="/docs" if app_settings.docs_enabled else None,
        redoc_url="/redoc" if app_settings.docs_enabled else None,
        openapi_url="/openapi.json" if app_settings.docs_enabled else None,
        lifespan=lifespan,
    )
    app.state.settings = app_settings

    # ── Register Middleware ───────────────────────────────────────────────
    # Middleware executes in REVERSE order of addition:
    # Logging added first, then RequestID, then CORS →
    # execution order is CORS → RequestID → Logging → route

    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=[REQUEST_ID_HEADER],
    )

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(greetings.router)
    app.include_router(pets.router)
    app.include_router(beverages.router)
    app.include_router(health.router)

    return app


# ── Application Instance ─────────────────────────────────────────────────
# uvicorn expects `beverage_api.main:app` to be importable
app = create_app()
