"""
Movies Library Backend — FastAPI Application Factory
======================================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   Called by uvicorn to start the server (uvicorn movielib.main:app).

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────┐ ┌─────────────┐ ┌──────────────────┐  │
    │  │  Req ID  │→│  Logging    │→│  CORS            │  │
    │  └──────────┘ └─────────────┘ └──────────────────┘  │
    │                                                     │
    │  Routes:                                            │
    │  ┌─────────────┐ ┌─────────┐ ┌───────────────────┐  │
    │  │ /movies     │ │ /genres │ │ /health-check ... │  │
    │  └─────────────┘ └─────────┘ └───────────────────┘  │
    │                                                     │
    │  Exception Handlers:                                │
    │  ┌───────────────────────────────────────────────┐  │
    │  │ Validation→400 │ NotFound→404 │ Database→500  │  │
    │  │ no route→404   │ anything else→500            │  │
    │  └───────────────────────────────────────────────┘  │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup:  logging → database connection (abort on failure) → serve
    Shutdown: close the database client
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from movielib import __version__
from movielib.config import settings
from movielib.database import close_database_connection, connect_to_database
from movielib.exceptions import (
    DatabaseError,
    MovieLibError,
    NotFoundError,
    ValidationError,
)
from movielib.middleware.logging import RequestLoggingMiddleware
from movielib.middleware.request_id import RequestIDMiddleware, request_id_var
from movielib.routes import about, genres, health, movies

logger = logging.getLogger(__name__)

STORE_ERROR_MESSAGE = "Internal server error."
UNHANDLED_ERROR_MESSAGE = "Internal Server Error"
NO_ROUTE_MESSAGE = "Not Found"


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    Called once during app startup, before the database connection is opened.
    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Reduce noise from third-party libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("pymongo").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Open the database connection before serving; close it on shutdown.

    A connection failure is not caught here: it propagates to uvicorn,
    which aborts startup, so the API is never served without a store.
    """
    setup_logging()
    logger.info("Movies Library API starting up...")

    await connect_to_database()

    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)
    logger.info("API docs: http://%s:%d%s", settings.backend_host, settings.backend_port, settings.docs_url)

    yield

    logger.info("Movies Library API shutting down...")
    await close_database_connection()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exception types to HTTP status codes and `{"error": ...}` bodies.

    Handler hierarchy:
        ValidationError           → 400 Bad Request
        NotFoundError             → 404 Not Found
        DatabaseError             → 500 "Internal server error."
        MovieLibError (base)      → 500 "Internal server error."
        HTTPException 404/405     → 404 "Not Found" (no route matched)
        Exception (fallback)      → 500 "Internal Server Error"

    Stack traces and driver errors are logged server-side only.
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        rid = request_id_var.get("")
        logger.warning("[%s] Validation error: %s", rid, exc.message)
        return JSONResponse(status_code=400, content={"error": exc.message})

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return JSONResponse(status_code=404, content={"error": exc.message})

    @app.exception_handler(DatabaseError)
    async def handle_database_error(request: Request, exc: DatabaseError):
        rid = request_id_var.get("")
        logger.error("[%s] Database error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(status_code=500, content={"error": STORE_ERROR_MESSAGE})

    @app.exception_handler(MovieLibError)
    async def handle_app_error(request: Request, exc: MovieLibError):
        rid = request_id_var.get("")
        logger.error("[%s] Application error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(status_code=500, content={"error": STORE_ERROR_MESSAGE})

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        # A known path with an unregistered method still matched no route
        if exc.status_code in (404, 405):
            return JSONResponse(status_code=404, content={"error": NO_ROUTE_MESSAGE})
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=exc)
        return JSONResponse(
            status_code=500,
            content={"error": UNHANDLED_ERROR_MESSAGE},
            headers={"X-Request-ID": rid},
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    The OpenAPI document is generated from the routers below and served as
    Swagger UI at settings.docs_url (default /api-docs).
    """
    app = FastAPI(
        title="Movies Library API",
        description="CRUD API over the movies and genres collections of the movies library.",
        version=__version__,
        docs_url=settings.docs_url,
        redoc_url=None,
        openapi_url="/openapi.json",
        servers=[
            {
                "url": f"http://localhost:{settings.backend_port}",
                "description": "Local server",
            }
        ],
        lifespan=lifespan,
    )

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added = first to execute: RequestID → Logging → CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(health.router)
    app.include_router(about.router)
    app.include_router(movies.router)
    app.include_router(genres.router)

    return app


app = create_app()


def run() -> None:
    """Console entry point: serve the app with uvicorn on the configured port."""
    uvicorn.run(
        "movielib.main:app",
        host=settings.backend_host,
        port=settings.backend_port,
        log_level=settings.log_level.lower(),
    )
