"""Error Handlers — global exception handlers for the civic API.

Invariants:
    - CivicApiError → its own structured body and status
    - Unmatched routes / disallowed methods → structured 404 body
    - Exception (catch-all) → structured 500 body, never an HTML error page

Design Decisions:
    - Three-layer handler: domain (CivicApiError), HTTP (Starlette), catch-all (Exception)
    - Same bodies the Dispatcher produces, so clients see one error shape
      whether the fault happened inside or outside dispatch
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.errors import CivicApiError, HandlerFaultError, RouteNotFoundError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_civic_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _register_civic_error_handler(app: FastAPI) -> None:
    """Register domain error handler."""

    @app.exception_handler(CivicApiError)
    async def civic_error_handler(request: Request, exc: CivicApiError):
        logger.warning(
            f"CivicApiError: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_http_error_handler(app: FastAPI) -> None:
    """Register Starlette HTTP error handler (routing misses, 405s)."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code in (
            status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED,
        ):
            error = RouteNotFoundError(request.url.path)
            return JSONResponse(
                status_code=error.http_status, content=error.to_response(),
            )
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail), "message": str(exc.detail)},
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        fault = HandlerFaultError("Internal Server Error", exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=fault.to_response(),
        )
