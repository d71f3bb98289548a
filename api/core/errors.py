"""
Global exception handlers.

Every error leaves the API as {"error": <title>, ...details} so the
frontend can branch on a single key.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .cors import CORS_HEADERS
from .nocodb import NocoDBError, UpstreamStatusError
from .settings import ConfigError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""

    @app.exception_handler(ConfigError)
    async def config_error_handler(request: Request, exc: ConfigError):
        logger.error("environment_not_configured path=%s detail=%s", request.url.path, exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": "Server configuration error",
                "message": str(exc),
            },
        )

    @app.exception_handler(UpstreamStatusError)
    async def upstream_status_handler(request: Request, exc: UpstreamStatusError):
        logger.error("nocodb_api_error status=%s path=%s", exc.status_code, request.url.path)
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": "NocoDB API error", "status": exc.status_code},
        )

    @app.exception_handler(NocoDBError)
    async def nocodb_error_handler(request: Request, exc: NocoDBError):
        logger.error("nocodb_request_failed path=%s detail=%s", request.url.path, exc)
        return _internal_error(exc)

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    # Runs in ServerErrorMiddleware, outside the CORS middleware.
    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        logger.exception("function_error path=%s", request.url.path)
        return _internal_error(exc, headers=CORS_HEADERS)


def _internal_error(exc: Exception, headers: dict[str, str] | None = None) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        headers=headers,
        content={
            "error": "Internal server error",
            "message": str(exc),
        },
    )
