"""Exception handlers — translate failures into the response envelope.

This is the only place where errors become HTTP status codes:

- request validation (query, path, body) → 400 with per-field messages
- ``HTTPException`` (404 raised by endpoints, unknown routes, 405) → same code
- ``EntityNotFoundError`` that escaped an endpoint → 404
- anything else → 500 with a generic message; details go to the log only
"""

import logging
from collections import defaultdict
from collections.abc import Sequence
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.application.schemas import ErrorResponse
from app.domain.exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)

_LOCATIONS = frozenset({"body", "query", "path", "header", "cookie"})
_VALUE_ERROR_PREFIX = "Value error, "

INVALID_ID_MESSAGE = "Invalid movie ID format"
VALIDATION_FAILED_MESSAGE = "Validation failed"
INTERNAL_ERROR_MESSAGE = "Internal server error"


def _error_key(loc: Sequence[Any]) -> str:
    """Field name for an error location; the location itself for body-level errors."""
    names = [part for part in loc[1:] if isinstance(part, str)]
    if names:
        return names[-1]
    return str(loc[0]) if loc else "body"


def _error_message(error: dict[str, Any]) -> str:
    message = str(error.get("msg", "Invalid value"))
    if error.get("type") == "value_error" and message.startswith(_VALUE_ERROR_PREFIX):
        return message[len(_VALUE_ERROR_PREFIX):]
    return message


def flatten_validation_errors(
    errors: Sequence[dict[str, Any]],
) -> tuple[str, dict[str, list[str]]]:
    """Group validation errors by field and pick the envelope message."""
    grouped: dict[str, list[str]] = defaultdict(list)
    for error in errors:
        grouped[_error_key(error.get("loc", ()))].append(_error_message(error))

    locations = {error.get("loc", ("body",))[0] for error in errors}
    if "path" in locations:
        message = INVALID_ID_MESSAGE
    elif grouped and set(grouped) <= _LOCATIONS:
        # Only body-level problems, e.g. an empty update or unparsable JSON.
        message = next(iter(grouped.values()))[0]
    else:
        message = VALIDATION_FAILED_MESSAGE
    return message, dict(grouped)


def register_exception_handlers(app: FastAPI) -> None:
    """Register the envelope-producing exception handlers on ``app``."""

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        message, errors = flatten_validation_errors(exc.errors())
        logger.debug("Rejected %s %s: %s", request.method, request.url.path, errors)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=ErrorResponse(message=message, errors=errors).to_content(),
        )

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        message = str(exc.detail)
        # FastAPI raises a bare 400 when the body cannot be read at all.
        errors = {"body": [message]} if exc.status_code == status.HTTP_400_BAD_REQUEST else None
        return JSONResponse(
            status_code=exc.status_code,
            content=ErrorResponse(message=message, errors=errors).to_content(),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(EntityNotFoundError)
    async def handle_not_found(
        request: Request, exc: EntityNotFoundError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content=ErrorResponse(message=str(exc)).to_content(),
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
        logger.error(
            "Unhandled error on %s %s", request.method, request.url.path, exc_info=exc
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=ErrorResponse(message=INTERNAL_ERROR_MESSAGE).to_content(),
        )
