"""
Exception handlers for FastAPI.

Every error is returned as an ``ApiError`` body. Unexpected exceptions are
logged in full server-side and reported with a generic message only.
"""

from fastapi import FastAPI, HTTPException, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from core.logging import get_logger

from .exceptions import ApiError, BestChoiceError, RequestValidationFailed
from .validation import violations_from_errors

logger = get_logger("api.errors")

_REQUEST_LOCATIONS = ("body", "query", "path", "header", "cookie")


def _response(payload: ApiError) -> JSONResponse:
    return JSONResponse(status_code=payload.status, content=jsonable_encoder(payload))


def _strip_location(errors) -> list[dict]:
    """FastAPI prefixes error locations with the request part; fields are reported bare."""
    stripped = []
    for error in errors:
        loc = tuple(error.get("loc", ()))
        if loc and loc[0] in _REQUEST_LOCATIONS:
            loc = loc[1:]
        stripped.append({**error, "loc": loc})
    return stripped


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        failure = RequestValidationFailed(
            "request", violations_from_errors(_strip_location(exc.errors()))
        )
        logger.warning(
            "validation_error",
            fields=[v.field for v in failure.violations],
            path=request.url.path,
        )
        return _response(ApiError.from_exception(failure, request.url.path))

    @app.exception_handler(ValidationError)
    async def pydantic_validation_handler(request: Request, exc: ValidationError):
        failure = RequestValidationFailed(exc.title, violations_from_errors(exc.errors()))
        logger.warning(
            "validation_error",
            model=exc.title,
            fields=[v.field for v in failure.violations],
            path=request.url.path,
        )
        return _response(ApiError.from_exception(failure, request.url.path))

    @app.exception_handler(BestChoiceError)
    async def domain_exception_handler(request: Request, exc: BestChoiceError):
        logger.warning(
            "domain_exception",
            error=exc.error_code,
            detail=exc.message,
            status_code=exc.status_code,
            path=request.url.path,
        )
        return _response(ApiError.from_exception(exc, request.url.path))

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        logger.warning("http_exception", detail=exc.detail, status_code=exc.status_code)
        return _response(
            ApiError.of(exc.status_code, "HTTP_ERROR", str(exc.detail), request.url.path)
        )

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception):
        logger.exception(
            "unhandled_exception",
            error=str(exc),
            error_type=type(exc).__name__,
            path=request.url.path,
        )
        # Exception text is not exposed to clients
        return _response(
            ApiError.of(500, "INTERNAL_ERROR", "Internal server error", request.url.path)
        )


__all__ = ["register_exception_handlers"]
