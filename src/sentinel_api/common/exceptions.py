"""FastAPI exception handlers for repository failures."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from sentinel_api.common.errors import ErrorKind, RepositoryError
from sentinel_api.common.logging import log_context

_UNHANDLED_LOGGER = logging.getLogger("sentinel_api.errors")
_REPOSITORY_LOGGER = logging.getLogger("sentinel_api.repository")

STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorKind.INTERNAL: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def status_for(error: RepositoryError) -> int:
    """Return the HTTP status code for a repository failure."""

    return STATUS_BY_KIND[error.kind]


async def repository_error_handler(request: Request, exc: RepositoryError) -> JSONResponse:
    """Map a :class:`RepositoryError` onto its transport status.

    Client-side kinds are returned without logging; internal failures are
    logged at ERROR level with structured metadata.
    """
    status_code = status_for(exc)
    if status_code >= 500:
        _REPOSITORY_LOGGER.error(
            "repository_error",
            extra=log_context(
                path=str(request.url.path),
                method=request.method,
                kind=str(exc.kind),
                detail=exc.message,
            ),
        )

    return JSONResponse(status_code=status_code, content={"detail": exc.message})


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all handler that logs the stack trace and returns HTTP 500."""
    _UNHANDLED_LOGGER.exception(
        "unhandled_exception",
        extra=log_context(
            path=str(request.url.path),
            method=request.method,
            exception_type=type(exc).__name__,
            detail=str(exc),
        ),
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the repository and catch-all handlers on ``app``."""

    app.add_exception_handler(RepositoryError, repository_error_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)


__all__ = [
    "STATUS_BY_KIND",
    "register_exception_handlers",
    "repository_error_handler",
    "status_for",
    "unhandled_exception_handler",
]
