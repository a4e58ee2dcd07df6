"""InfiValidator reference service.

FastAPI application showing the validator in request handling, with
lifespan logging and global error handling.
"""

from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from infivalidator import __version__
from infivalidator.api.router import api_router
from infivalidator.config import get_settings
from infivalidator.logging_config import configure_logging
from infivalidator.models.responses import ErrorResponse
from infivalidator.validators import InfiValidatorError

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup and shutdown lifecycle."""
    configure_logging()
    settings = get_settings()

    logger.info("app_starting", debug=settings.DEBUG, deep_level=settings.DEEP_LEVEL)

    yield

    logger.info("app_stopped")


# ── Create Application ──

app = FastAPI(
    title="InfiValidator",
    description=(
        "Request validation with named rules and NoSQL/XSS injection cleaning "
        "for params, query and body."
    ),
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)


# ── Global Exception Handlers ──

@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Catch-all error handler for unhandled exceptions."""
    logger.error(
        "unhandled_exception",
        path=request.url.path,
        method=request.method,
        error=str(exc),
        error_type=type(exc).__name__,
    )
    return JSONResponse(
        status_code=500,
        content={
            "error": "internal_server_error",
            "message": "An unexpected error occurred. Please try again.",
        },
    )


@app.exception_handler(InfiValidatorError)
async def validator_error_handler(request: Request, exc: InfiValidatorError):
    """Malformed request input or misused validator."""
    logger.warning(
        "request_rejected",
        path=request.url.path,
        error=str(exc),
        error_type=type(exc).__name__,
    )
    return JSONResponse(
        status_code=400,
        content=ErrorResponse(error="validation_error", message=str(exc)).model_dump(),
    )


# ── Routes ──

app.include_router(api_router, prefix="/api/v1")


@app.get("/")
async def root():
    """Root endpoint with API info."""
    return {
        "name": "InfiValidator",
        "version": __version__,
        "docs": "/docs",
        "health": "/api/v1/health",
    }
