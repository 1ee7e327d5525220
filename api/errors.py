"""
Exception handlers.

Translate application errors into the JSON error envelope:
    {"success": false, "error": {"code": ..., "message": ..., ...}}
"""
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from core.application.errors import (
    AppError,
    ConflictError,
    InfraError,
    NotFoundError,
    ValidationError,
)


logger = logging.getLogger(__name__)


def status_for(error: AppError) -> int:
    if isinstance(error, ValidationError):
        return status.HTTP_400_BAD_REQUEST
    if isinstance(error, NotFoundError):
        return status.HTTP_404_NOT_FOUND
    if isinstance(error, ConflictError):
        return status.HTTP_409_CONFLICT
    if isinstance(error, InfraError):
        return status.HTTP_503_SERVICE_UNAVAILABLE
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def error_response(status_code: int, error: dict) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "error": error})


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Map AppError subclasses to HTTP responses."""
    if isinstance(exc, InfraError):
        logger.error(
            f"Infrastructure error in {exc.service_name}: {exc.message}",
            exc_info=exc.original_error,
        )
    else:
        logger.info(f"{request.method} {request.url.path} rejected: [{exc.code}] {exc.message}")

    return error_response(status_for(exc), exc.to_dict())


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Reshape FastAPI body/param validation errors into the 400 envelope."""
    errors = exc.errors()
    first = errors[0] if errors else {}
    field = ".".join(str(part) for part in first.get("loc", ())[1:]) or None

    return error_response(
        status.HTTP_400_BAD_REQUEST,
        {
            "code": "VALIDATION_ERROR",
            "message": first.get("msg", "Invalid request"),
            "field": field,
            "details": {"errors": [
                {"loc": [str(part) for part in e.get("loc", ())], "msg": e.get("msg")}
                for e in errors
            ]},
        },
    )


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle all uncaught exceptions."""
    logger.error(f"Unhandled exception: {exc}", exc_info=True)

    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        {"code": "INTERNAL_ERROR", "message": "An unexpected error occurred"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, global_exception_handler)
