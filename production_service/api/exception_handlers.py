"""
Exception handlers for FastAPI application.

Every error leaves the service in the same envelope:
``{"error": true, "message": ..., "status_code": ...}``.
"""

import logging

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from production_service.clients.microservice_client import MicroserviceError
from production_service.core.domain import (
    AggregationException,
    DomainException,
    InvalidOperationException,
    PaymentNotApprovedException,
    ResourceNotFoundException,
    ValidationException,
)

logger = logging.getLogger(__name__)

# Checked in order; subclasses before their bases
DOMAIN_STATUS_CODES: tuple[tuple[type[DomainException], int], ...] = (
    (ValidationException, status.HTTP_400_BAD_REQUEST),
    (ResourceNotFoundException, status.HTTP_404_NOT_FOUND),
    (PaymentNotApprovedException, status.HTTP_409_CONFLICT),
    (InvalidOperationException, status.HTTP_409_CONFLICT),
    (AggregationException, status.HTTP_500_INTERNAL_SERVER_ERROR),
)


def status_code_for(exc: DomainException) -> int:
    for exc_type, code in DOMAIN_STATUS_CODES:
        if isinstance(exc, exc_type):
            return code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def _error_content(message: str, status_code: int, **extra) -> dict:
    return {"error": True, "message": message, "status_code": status_code, **extra}


async def domain_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Translate DomainException subclasses to their HTTP status."""
    if not isinstance(exc, DomainException):
        return await global_exception_handler(request, exc)

    status_code = status_code_for(exc)
    if status_code >= 500:
        logger.error(f"{exc.code} on {request.method} {request.url.path}: {exc.message}")
    else:
        logger.warning(f"{exc.code} on {request.method} {request.url.path}: {exc.message}")

    return JSONResponse(
        status_code=status_code,
        content=_error_content(exc.message, status_code, code=exc.code, details=exc.details),
    )


async def microservice_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Sibling service failures keep their own status code and message."""
    if not isinstance(exc, MicroserviceError):
        return await global_exception_handler(request, exc)

    logger.error(
        f"Microservice '{exc.service}' failed on {request.method} {request.url.path}: "
        f"{exc.message} ({exc.status_code})"
    )
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_content(exc.message, exc.status_code),
    )


async def http_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle HTTPException with consistent response format."""
    http_exc = exc if isinstance(exc, HTTPException) else HTTPException(status_code=500, detail=str(exc))
    return JSONResponse(
        status_code=http_exc.status_code,
        content=_error_content(http_exc.detail, http_exc.status_code),
        headers=http_exc.headers,
    )


async def validation_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle request validation errors with per-field details."""
    code = status.HTTP_422_UNPROCESSABLE_ENTITY
    if not isinstance(exc, RequestValidationError):
        return JSONResponse(status_code=code, content=_error_content(str(exc), code))

    errors = [
        {
            "field": ".".join(str(loc) for loc in error["loc"]),
            "message": error["msg"],
            "type": error["type"],
        }
        for error in exc.errors()
    ]

    logger.warning(f"Validation error on {request.url.path}: {errors}")

    return JSONResponse(
        status_code=code,
        content=_error_content("Validation error", code, details=errors),
    )


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Handle all unhandled exceptions.

    Logs the full exception with traceback and returns a safe error response.
    """
    logger.error(
        f"Unhandled exception on {request.method} {request.url.path}: {exc!s}",
        exc_info=exc,
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_content("Internal server error", status.HTTP_500_INTERNAL_SERVER_ERROR),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register all exception handlers with the FastAPI application.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(DomainException, domain_exception_handler)
    app.add_exception_handler(MicroserviceError, microservice_exception_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, global_exception_handler)

    logger.info("Exception handlers registered")
