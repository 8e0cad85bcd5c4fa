"""FastAPI application factory.

Lifespan
--------
On startup the app configures logging.  The analysis flow itself is
stateless, so nothing else is acquired or shared between requests.

Routers
-------
    /analyze   — single-page SEO analysis
    /health    — liveness probe

Error handling
--------------
Every :class:`~backend.errors.AnalysisError` and every request-body
validation failure is answered with ``{"error": "<message>"}``: 400 for bad
input, 500 for fetch failures.  Any other exception is logged and answered
with a 500 ``{"error": ...}`` body as well.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from backend.errors import AnalysisError
from backend.logging_setup import configure as configure_logging

from backend.api.routers import analyze as analyze_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Configure logging on startup."""
    configure_logging()
    logger.info("SEO analyzer API starting")
    yield
    logger.info("SEO analyzer API stopped")


def _describe_validation_error(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "ValidationError: invalid request body"
    first = errors[0]
    loc = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    msg = first.get("msg", "invalid value")
    return f"ValidationError: {loc}: {msg}" if loc else f"ValidationError: {msg}"


async def _analysis_error_handler(request: Request, exc: AnalysisError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc)
    else:
        logger.info("%s %s rejected: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=exc.status_code, content={"error": str(exc)})


async def _request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    message = _describe_validation_error(exc)
    logger.info("%s %s rejected: %s", request.method, request.url.path, message)
    return JSONResponse(status_code=400, content={"error": message})


async def _unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("%s %s crashed", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content={"error": f"InternalError: unexpected {type(exc).__name__}"},
    )


def create_app() -> FastAPI:
    """Return a fully-configured FastAPI application instance."""
    app = FastAPI(
        title="SEO Analyzer API",
        description=(
            "Fetches a single web page and reports its title, meta description, "
            "meta keywords, structural counts and keyword frequency."
        ),
        version="0.1.0",
        lifespan=lifespan,
    )

    # Allow browser frontends on any origin (tighten for production).
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(AnalysisError, _analysis_error_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
    app.add_exception_handler(Exception, _unexpected_error_handler)

    app.include_router(analyze_router.router, prefix="/analyze", tags=["analyze"])

    @app.get("/health", tags=["health"])
    def health() -> dict[str, str]:
        return {"status": "ok"}

    return app


# Module-level instance used by uvicorn:
#   uvicorn backend.api.app:app --reload
app = create_app()
