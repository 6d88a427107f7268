"""
Error handlers mapping the Reverie exception taxonomy to HTTP responses.

Every ReverieException is rendered with its ``to_dict()`` body; only the
status code depends on the exception type.
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from reverie.application.exceptions import (NoReadAccessError,
                                            NoWriteAccessError,
                                            ProjectNotFoundError,
                                            TechnicalError, UserNotFoundError)
from reverie.domain.exceptions import ReverieException, ValidationException
from reverie.shared.telemetry.logging import get_logger

logger = get_logger(__name__)

# First match wins
STATUS_BY_EXCEPTION: tuple[tuple[type[ReverieException], int], ...] = (
    (ValidationException, 422),
    (UserNotFoundError, 404),
    (ProjectNotFoundError, 404),
    (NoReadAccessError, 403),
    (NoWriteAccessError, 403),
    (TechnicalError, 500),
)


def status_for(exc: ReverieException) -> int:
    for exc_type, status_code in STATUS_BY_EXCEPTION:
        if isinstance(exc, exc_type):
            return status_code
    return 500


def register_error_handlers(app: FastAPI) -> None:
    """Register the Reverie exception handler on the FastAPI app."""

    @app.exception_handler(ReverieException)
    async def reverie_error_handler(request: Request, exc: ReverieException) -> JSONResponse:
        status_code = status_for(exc)
        if status_code >= 500:
            logger.error("%s on %s: %s", exc.error_code, request.url.path, exc.message)
        else:
            logger.info("%s on %s: %s", exc.error_code, request.url.path, exc.message)
        return JSONResponse(status_code=status_code, content=exc.to_dict())
