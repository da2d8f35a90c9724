"""
Membership Backend — FastAPI Application Factory
==================================================

What:  Creates and configures the FastAPI application instance.
How:   create_app() registers middleware, exception handlers and routers,
       and returns the app; uvicorn serves `app.main:app`.

Application Architecture:
    ┌──────────────────────────────────────────────────────────┐
    │                      FastAPI App                         │
    │                                                          │
    │  Middleware:   Request ID → Access Log → CORS            │
    │                                                          │
    │  Routers (/api):                                         │
    │    departments · roles · event-types · events · members  │
    │  Plus:  GET /health                                      │
    │                                                          │
    │  Exception Handlers:                                     │
    │    RequestValidationError → 400                          │
    │    NotFoundError → 404   ConflictError → 409             │
    │    StorageError / MembershipError / Exception → 500      │
    └──────────────────────────────────────────────────────────┘

Lifecycle:
    Startup:   configure logging, validate settings (log, don't exit)
    Shutdown:  dispose the database engine
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app import __version__
from app.config import settings
from app.database import dispose_engine
from app.exceptions import (
    ConflictError,
    MembershipError,
    NotFoundError,
    StorageError,
)
from app.middleware.logging import RequestLoggingMiddleware
from app.middleware.request_id import (
    REQUEST_ID_HEADER,
    RequestIDLogFilter,
    RequestIDMiddleware,
    request_id_var,
)
from app.routes import departments, event_types, events, health, members, roles

logger = logging.getLogger(__name__)

MALFORMED_JSON_MESSAGE = "Invalid JSON payload"


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure the root logger once for the whole process.

    Format: 2024-05-25T10:00:00 [INFO] app.services.base [a1b2c3d4] Created department 1

    The request id comes from RequestIDLogFilter, attached to the handler so
    records from every logger (ours and third-party) carry it.
    """
    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(RequestIDLogFilter())

    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s [%(request_id)s] %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[handler],
        force=True,
    )

    # Third-party loggers that are chatty at INFO
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    setup_logging()
    logger.info("Membership Backend %s starting up...", __version__)

    # A missing salt only breaks member writes; the server still starts so
    # the other resources and /health stay available.
    try:
        settings.validate_required_for_production()
    except ValueError as e:
        logger.error("Configuration error: %s", str(e))

    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)

    yield

    logger.info("Membership Backend shutting down...")
    await dispose_engine()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _is_malformed_json(exc: RequestValidationError) -> bool:
    return any(error.get("type") == "json_invalid" for error in exc.errors())


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exception types to status codes and bodies.

        RequestValidationError  → 400 {"message": ..., "details": [...]}
        NotFoundError           → 404 {"message": "<Entity> not found"}
        ConflictError           → 409 {"message": ...}
        StorageError            → 500 {"error": <storage message>}
        MembershipError (base)  → 500 {"error": message}
        Exception (fallback)    → 500 {"error": str(exc)}

    Client errors use a `message` key, server failures an `error` key.
    """

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError):
        rid = request_id_var.get("")
        if _is_malformed_json(exc):
            logger.warning("[%s] Malformed JSON body on %s", rid, request.url.path)
            return JSONResponse(status_code=400, content={"message": MALFORMED_JSON_MESSAGE})

        logger.warning("[%s] Invalid request on %s: %s", rid, request.url.path, exc.errors())
        return JSONResponse(
            status_code=400,
            content={
                "message": "Invalid request",
                "details": jsonable_encoder(exc.errors()),
            },
        )

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return JSONResponse(status_code=404, content={"message": exc.message})

    @app.exception_handler(ConflictError)
    async def handle_conflict(request: Request, exc: ConflictError):
        logger.warning("[%s] Conflict: %s", request_id_var.get(""), exc.message)
        return JSONResponse(status_code=409, content={"message": exc.message})

    @app.exception_handler(StorageError)
    async def handle_storage_error(request: Request, exc: StorageError):
        logger.error(
            "[%s] Storage error: %s | Context: %s",
            request_id_var.get(""),
            exc.message,
            exc.context,
        )
        return JSONResponse(status_code=500, content={"error": exc.message})

    @app.exception_handler(MembershipError)
    async def handle_membership_error(request: Request, exc: MembershipError):
        logger.error(
            "[%s] %s: %s | Context: %s",
            request_id_var.get(""),
            type(exc).__name__,
            exc.message,
            exc.context,
        )
        return JSONResponse(status_code=500, content={"error": exc.message})

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.error(
            "[%s] Unexpected error: %s",
            request_id_var.get(""),
            str(exc),
            exc_info=True,
        )
        return JSONResponse(status_code=500, content={"error": str(exc)})


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    """Assemble middleware, exception handlers and routers into an app."""
    app = FastAPI(
        title="Membership API",
        description=(
            "CRUD backend for departments, roles, event types, events and "
            "members of a membership organization."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added runs first: RequestID → Logging → CORS → routes
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=[REQUEST_ID_HEADER],
    )
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(departments.router)
    app.include_router(roles.router)
    app.include_router(event_types.router)
    app.include_router(events.router)
    app.include_router(members.router)
    app.include_router(health.router)

    return app


# uvicorn app.main:app
app = create_app()
