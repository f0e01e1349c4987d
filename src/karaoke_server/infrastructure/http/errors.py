"""Translation of domain errors into HTTP responses.

Queue and config endpoints answer with ``{"error": message}`` JSON; media
endpoints answer with short plain text. Filesystem paths and tracebacks are
logged server-side only.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from ...domain.media.value_objects import MediaKind
from ...domain.shared.exceptions import (
    DomainError,
    EntityNotFoundError,
    ForbiddenExtensionError,
    MediaNotFoundError,
)
from ...domain.shared.messages import ErrorMessages, LogTemplates

logger = logging.getLogger(__name__)

MEDIA_PATH_PREFIXES = ("/videos", "/sounds")


def is_media_request(request: Request) -> bool:
    return request.url.path.startswith(MEDIA_PATH_PREFIXES)


def status_for(error: DomainError) -> int:
    """Not-found errors map to 404; every other domain error is bad input (400)."""
    if isinstance(error, EntityNotFoundError):
        return status.HTTP_404_NOT_FOUND
    return status.HTTP_400_BAD_REQUEST


def _media_message(error: DomainError) -> str:
    if isinstance(error, MediaNotFoundError):
        if error.kind == MediaKind.AUDIO.value:
            return ErrorMessages.SOUND_NOT_FOUND
        return ErrorMessages.VIDEO_NOT_FOUND
    if isinstance(error, ForbiddenExtensionError):
        return ErrorMessages.FILE_TYPE_NOT_ALLOWED
    return error.message


async def handle_domain_error(request: Request, exc: DomainError) -> Response:
    status_code = status_for(exc)
    logger.info(LogTemplates.HTTP_DOMAIN_ERROR, request.method, request.url.path, exc.message)
    if is_media_request(request):
        return PlainTextResponse(_media_message(exc), status_code=status_code)
    return JSONResponse({"error": exc.message}, status_code=status_code)


async def handle_request_validation_error(request: Request, exc: Exception) -> Response:
    logger.info(LogTemplates.HTTP_DOMAIN_ERROR, request.method, request.url.path, exc)
    return JSONResponse({"error": ErrorMessages.INVALID_BODY}, status_code=status.HTTP_400_BAD_REQUEST)


async def handle_unexpected_error(request: Request, exc: Exception) -> Response:
    logger.exception(LogTemplates.HTTP_UNHANDLED_ERROR, request.method, request.url.path, exc_info=exc)
    if is_media_request(request):
        return PlainTextResponse(
            ErrorMessages.INTERNAL_ERROR, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
        )
    return JSONResponse(
        {"error": ErrorMessages.INTERNAL_ERROR}, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainError, handle_domain_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
