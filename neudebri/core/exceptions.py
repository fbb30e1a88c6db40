"""
Domain errors and the application-level exception handlers.

Services raise the domain errors below; routes translate them into
``HTTPException``. The handlers give every error body the same
``{"message": ...}`` shape.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from neudebri.schemas.base import ErrorResponse

logger = logging.getLogger(__name__)


class NeudebriError(Exception):
    """Base class for domain errors."""


class NotFoundError(NeudebriError):
    """A referenced record does not exist."""

    def __init__(self, entity: str, entity_id: str):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} not found")


class InvalidCredentialsError(NeudebriError):
    """Username/password mismatch or disabled account."""

    def __init__(self):
        super().__init__("Invalid credentials")


class DuplicateUsernameError(NeudebriError):
    """Registration with a username that is already taken."""

    def __init__(self, username: str):
        self.username = username
        super().__init__(f"Username '{username}' already exists")


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(message=str(exc.detail)).model_dump(exclude_none=True),
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Malformed request bodies are a 400 with a generic message."""
    return JSONResponse(
        status_code=400,
        content=ErrorResponse(
            message="Invalid request", errors=jsonable_encoder(exc.errors())
        ).model_dump(),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        f"Unhandled error on {request.method} {request.url.path}: {exc}",
        exc_info=exc,
    )
    body = ErrorResponse(message=str(exc))
    return JSONResponse(status_code=500, content=body.model_dump(exclude_none=True))


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the JSON error handlers to an application."""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
