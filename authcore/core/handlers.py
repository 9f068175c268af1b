from __future__ import annotations

"""
Global exception handlers for the FastAPI application.

Translates authcore exceptions into JSON responses with a `detail` field.
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette import status
from structlog import get_logger

from authcore.core.exceptions import (
    AuthcoreError,
    AuthenticationError,
    InternalError,
    UserNotFoundError,
)

__all__ = [
    "authentication_error_handler",
    "user_not_found_error_handler",
    "internal_error_handler",
    "authcore_error_handler",
    "register_exception_handlers",
]

logger = get_logger(__name__)


def _client_ip(request: Request) -> str | None:
    return request.client.host if request.client else None


async def authentication_error_handler(request: Request, exc: AuthenticationError) -> JSONResponse:
    """Handles `AuthenticationError`, returning a `401 Unauthorized`."""
    logger.warning(
        "Authentication failure",
        error=exc.code,
        client_ip=_client_ip(request),
        path=request.url.path,
    )
    return JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED,
        content={"detail": str(exc)},
        headers={"WWW-Authenticate": "Bearer"},
    )


async def user_not_found_error_handler(request: Request, exc: UserNotFoundError) -> JSONResponse:
    """Handles `UserNotFoundError`, returning a `404 Not Found`."""
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"detail": str(exc)},
    )


async def internal_error_handler(request: Request, exc: InternalError) -> JSONResponse:
    """Handles failures of external collaborators, returning a `500`.

    The message is operator-facing but carries no account data, so it is
    returned as is.
    """
    logger.error(
        "Internal error",
        error=exc.code,
        message=exc.message,
        path=request.url.path,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": str(exc)},
    )


async def authcore_error_handler(request: Request, exc: AuthcoreError) -> JSONResponse:
    """Catch-all for any other `AuthcoreError`."""
    logger.error("Unhandled application error", error=exc.code, path=request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": str(exc)},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all handlers, most specific first."""
    app.add_exception_handler(AuthenticationError, authentication_error_handler)
    app.add_exception_handler(UserNotFoundError, user_not_found_error_handler)
    app.add_exception_handler(InternalError, internal_error_handler)
    app.add_exception_handler(AuthcoreError, authcore_error_handler)
