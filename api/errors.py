"""
Exception handlers.

Translates module exceptions into HTTP responses. Store failures and
unexpected exceptions are logged and answered with a generic body so no
driver detail reaches the client.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from shared.exceptions import (
    AuthenticationError,
    AuthorizationError,
    CapacityError,
    CatalogError,
    ConflictError,
    ExternalServiceError,
    MutationError,
    NotFoundError,
    ValidationError,
)
from .models.errors import ErrorResponse, ValidationErrorResponse

logger = logging.getLogger(__name__)

# Checked in order; the first matching base wins
STATUS_CODES: list[tuple[type[CatalogError], int]] = [
    (NotFoundError, 404),
    (ValidationError, 400),
    (AuthenticationError, 401),
    (AuthorizationError, 403),
    (ConflictError, 409),
    (CapacityError, 409),
    (MutationError, 500),
    (ExternalServiceError, 500),
]

INTERNAL_ERROR = ErrorResponse(error="INTERNAL_ERROR", message="Internal server error")


def status_for(exc: CatalogError) -> int:
    for error_type, status_code in STATUS_CODES:
        if isinstance(exc, error_type):
            return status_code
    return 500


async def catalog_error_handler(request: Request, exc: CatalogError) -> JSONResponse:
    status_code = status_for(exc)

    if isinstance(exc, ExternalServiceError):
        logger.error(f"{request.method} {request.url.path} failed: {exc.message} {exc.details}")
        return JSONResponse(INTERNAL_ERROR.model_dump(), status_code=status_code)

    if isinstance(exc, MutationError):
        logger.warning(f"{request.method} {request.url.path}: {exc.message} {exc.details}")

    headers = {"WWW-Authenticate": "Bearer"} if status_code == 401 else None
    body = ErrorResponse(error=exc.code, message=exc.message, details=exc.details)
    return JSONResponse(jsonable_encoder(body), status_code=status_code, headers=headers)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    body = ValidationErrorResponse(detail=jsonable_encoder(exc.errors()))
    return JSONResponse(body.model_dump(), status_code=400)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(INTERNAL_ERROR.model_dump(), status_code=500)


def register_exception_handlers(app: FastAPI) -> None:
    """Install the handlers on an application."""
    app.add_exception_handler(CatalogError, catalog_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
