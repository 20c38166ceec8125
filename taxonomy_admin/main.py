"""FastAPI application entry point.

Taxonomy admin service for the internal operations portal.
"""

import uuid
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from taxonomy_admin import __version__
from taxonomy_admin.config import settings
from taxonomy_admin.core.errors import AuthorizationError, NotFoundError, TaxonomyError
from taxonomy_admin.infra.database import close_db_engine, create_schema, verify_db_connection
from taxonomy_admin.infra.logging import (
    bind_request_context,
    clear_request_context,
    get_logger,
    setup_logging,
)

# Import routers
from taxonomy_admin.api.routes.dimensions import router as dimensions_router
from taxonomy_admin.api.routes.health import router as health_router
from taxonomy_admin.api.routes.taxonomy import router as taxonomy_router

# Setup logging first
setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler.

    Startup:
    - Optionally create missing tables (local development)
    - Verify database connection

    Shutdown:
    - Close database connections
    """
    logger.info("Taxonomy admin starting", environment=settings.environment)

    if settings.db_create_schema:
        await create_schema()

    db_ok = await verify_db_connection()
    if not db_ok:
        logger.warning("Database connection failed - will retry on first request")

    yield

    logger.info("Taxonomy admin shutting down")
    await close_db_engine()
    logger.info("Cleanup complete")


# Create FastAPI app
app = FastAPI(
    title="Taxonomy Admin",
    description="Product taxonomy administration for the operations portal",
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs" if settings.environment == "dev" else None,
    redoc_url=None,
)

# CORS middleware (mainly for local development)
if settings.environment == "dev":
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Bind request id and acting user to the log context; log mutating requests."""
    request_id = request.headers.get("X-Request-Id") or uuid.uuid4().hex
    bind_request_context(request_id=request_id, user_id=request.headers.get("X-User-Id"))
    if request.method != "GET":
        logger.info("Taxonomy request received", method=request.method, path=request.url.path)

    try:
        response = await call_next(request)
    finally:
        clear_request_context()

    response.headers["X-Request-Id"] = request_id
    return response


# =============================================================================
# Exception Handlers
# =============================================================================


def _error_response(status_code: int, exc: Exception, message: str | None = None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "success": False,
            "error": message or str(exc),
            "error_type": type(exc).__name__,
        },
    )


@app.exception_handler(AuthorizationError)
async def authorization_error_handler(request: Request, exc: AuthorizationError) -> JSONResponse:
    logger.warning("Authorization failed", error=str(exc), path=request.url.path)
    return _error_response(status.HTTP_403_FORBIDDEN, exc)


@app.exception_handler(NotFoundError)
async def not_found_error_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    logger.info("Resource not found", error=str(exc), path=request.url.path)
    return _error_response(status.HTTP_404_NOT_FOUND, exc)


@app.exception_handler(TaxonomyError)
async def taxonomy_error_handler(request: Request, exc: TaxonomyError) -> JSONResponse:
    logger.warning("Taxonomy error", error=str(exc), path=request.url.path)
    return _error_response(status.HTTP_400_BAD_REQUEST, exc)


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle uncaught exceptions."""
    logger.error(
        "Unhandled exception",
        error=str(exc),
        error_type=type(exc).__name__,
        path=request.url.path,
        exc_info=True,
    )
    return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, exc, "Internal server error")


# =============================================================================
# Include Routers
# =============================================================================

app.include_router(health_router, tags=["Health"])
app.include_router(taxonomy_router, prefix="/taxonomy", tags=["Taxonomy"])
app.include_router(dimensions_router, prefix="/dimensions", tags=["Dimensions"])


# =============================================================================
# Root Endpoint
# =============================================================================


@app.get("/")
async def root() -> dict:
    """Root endpoint - basic service info."""
    return {
        "service": "Taxonomy Admin",
        "version": __version__,
        "environment": settings.environment,
    }
