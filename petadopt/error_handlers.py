"""
Exception handlers for the FastAPI application.

Services raise ServiceError; store and framework faults are mapped onto the
same error envelope here, so routers never build error responses by hand.
"""

from typing import Any, Dict, List
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger
from pydantic import ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from .errors import DuplicateKeyError, ServiceError
from .utils.helpers import error_response

ROUTE_NOT_FOUND = "Route not found"
VALIDATION_ERROR = "Validation error"
DUPLICATE_KEY_ERROR = "Duplicate key error"
DUPLICATE_KEY_DETAILS = "A resource with that information already exists"
INTERNAL_SERVER_ERROR = "Internal server error"
GENERIC_FAILURE = "Something went wrong"


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register all exception handlers with the FastAPI application.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(ServiceError, service_error_handler)
    app.add_exception_handler(DuplicateKeyError, duplicate_key_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(ValidationError, model_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
    logger.debug("Exception handlers registered")


def _error_details(errors: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    # ctx may carry exception objects that are not JSON serializable
    return [
        {
            "loc": [str(part) for part in error.get("loc", ())],
            "msg": error.get("msg"),
            "type": error.get("type"),
        }
        for error in errors
    ]


async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    """Render a domain fault with the status code of its kind."""
    return JSONResponse(
        status_code=exc.status_code,
        content=error_response(exc.message, name=exc.name, details=exc.details)
    )


async def duplicate_key_handler(request: Request, exc: DuplicateKeyError) -> JSONResponse:
    logger.warning(f"{exc} ({request.method} {request.url.path})")
    return JSONResponse(
        status_code=400,
        content=error_response(DUPLICATE_KEY_ERROR, details=DUPLICATE_KEY_DETAILS)
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed bodies, query strings or form fields."""
    logger.warning(f"Request validation failed on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=400,
        content=error_response(VALIDATION_ERROR, details=_error_details(exc.errors()))
    )


async def model_validation_handler(request: Request, exc: ValidationError) -> JSONResponse:
    """Values rejected by a model inside a service, e.g. a partial update."""
    logger.warning(f"Model validation failed on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=400,
        content=error_response(VALIDATION_ERROR, details=_error_details(exc.errors()))
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == 404:
        return JSONResponse(
            status_code=404,
            content=error_response(ROUTE_NOT_FOUND, path=request.url.path)
        )
    return JSONResponse(
        status_code=exc.status_code,
        content=error_response(str(exc.detail)),
        headers=getattr(exc, "headers", None)
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last resort: 500, with the exception text exposed only in development."""
    logger.opt(exception=exc).error(
        f"Unhandled error on {request.method} {request.url.path}: {exc}"
    )
    config = request.app.state.settings
    message = str(exc) if config.is_development() else GENERIC_FAILURE
    return JSONResponse(
        status_code=500,
        content=error_response(INTERNAL_SERVER_ERROR, message=message)
    )
