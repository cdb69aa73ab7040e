"""Translate domain errors into HTTP responses"""
import logging
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from app.domain.exceptions import (
    AuthorizationError,
    ConflictError,
    HelpdeskError,
    NotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)

STATUS_CODES = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    AuthorizationError: status.HTTP_403_FORBIDDEN,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    ConflictError: status.HTTP_409_CONFLICT,
}


async def helpdesk_error_handler(request: Request, exc: HelpdeskError) -> JSONResponse:
    status_code = STATUS_CODES.get(type(exc), status.HTTP_400_BAD_REQUEST)
    logger.debug("%s %s -> %s: %s", request.method, request.url.path, status_code, exc.message)
    return JSONResponse(
        status_code=status_code,
        content={"detail": exc.message, "error": exc.kind},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register handlers for the domain error taxonomy"""
    app.add_exception_handler(HelpdeskError, helpdesk_error_handler)
