"""
Centralized error handlers for FastAPI.

Maps domain errors to `{"message": ...}` responses. Validation failures
surface the first violated rule; anything unexpected becomes a bare 500
without internal details.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .errors import FundWatchError

logger = logging.getLogger(__name__)

VALUE_ERROR_PREFIX = "Value error, "


def _message_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message})


def first_validation_message(exc: RequestValidationError) -> str:
    """Return the message of the first violated rule, without pydantic's prefix."""
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    message = str(errors[0].get("msg", "Invalid request"))
    if message.startswith(VALUE_ERROR_PREFIX):
        message = message[len(VALUE_ERROR_PREFIX):]
    return message


def register_error_handlers(app: FastAPI) -> None:
    """Register the domain, validation and catch-all handlers on the app."""

    @app.exception_handler(FundWatchError)
    async def handle_domain_error(request: Request, exc: FundWatchError) -> JSONResponse:
        logger.info("%s %s -> %d %s", request.method, request.url.path, exc.status_code, type(exc).__name__)
        return _message_response(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        message = first_validation_message(exc)
        logger.info("%s %s -> 400 validation: %s", request.method, request.url.path, message)
        return _message_response(400, message)

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unexpected error on %s %s: %s", request.method, request.url.path, type(exc).__name__)
        return _message_response(500, "Internal server error")
