"""
Exception handlers.

Every failure leaves the API as ``{"success": false, "error": "..."}`` with
the matching status code.
"""
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..api.dto import error_envelope
from ..api.exceptions import NoteVaultError, handle_business_exception
from ..core.config import ENVIRONMENT
from ..core.logging_config import get_logger

logger = get_logger(__name__)

RATE_LIMITED_MESSAGE = "Too many requests. Please slow down."


def _error_response(status_code: int, error: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=error_envelope(error))


async def business_exception_handler(request: Request, exc: NoteVaultError) -> JSONResponse:
    http_exception = handle_business_exception(exc)
    if http_exception.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc}", exc_info=exc.__cause__)
    else:
        logger.debug(f"{request.method} {request.url.path} → {http_exception.status_code}: {exc}")
    return _error_response(http_exception.status_code, http_exception.detail)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    logger.debug(f"HTTP exception for {request.method} {request.url.path}: {exc.status_code} - {exc.detail}")
    response = _error_response(exc.status_code, str(exc.detail))
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.warning(f"Validation error for {request.method} {request.url.path}: {exc.errors()}")
    errors = exc.errors()
    if errors:
        first = errors[0]
        field = ".".join(str(part) for part in first.get("loc", ())[1:])
        message = f"{field}: {first.get('msg')}" if field else first.get("msg", "Invalid request")
    else:
        message = "Invalid request"
    return _error_response(status.HTTP_400_BAD_REQUEST, message)


async def rate_limit_exception_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    logger.warning(f"Rate limit exceeded for {request.method} {request.url.path}: {exc.detail}")
    return _error_response(status.HTTP_429_TOO_MANY_REQUESTS, RATE_LIMITED_MESSAGE)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unexpected error for {request.method} {request.url.path}: {exc}", exc_info=exc)
    error_detail = str(exc) if ENVIRONMENT != "production" else "Internal server error"
    return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, error_detail)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(NoteVaultError, business_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(RateLimitExceeded, rate_limit_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
