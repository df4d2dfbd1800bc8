"""
Error taxonomy and the handlers that render it.

Services raise the domain errors defined here; ``register_exception_handlers``
maps each one to a plain‑text HTTP response at the request boundary.
Request validation failures are rendered as a JSON list of
human‑readable messages, and unexpected store failures
(``sqlite3.Error``) become HTTP 500 with the driver's message passed
through verbatim.
"""

import logging
import sqlite3
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse

logger = logging.getLogger(__name__)


class ServiceError(Exception):
    """Base class for errors that map onto an HTTP status code."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    headers: Optional[Dict[str, str]] = None

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(ServiceError):
    status_code = 422


class ConflictError(ServiceError):
    status_code = status.HTTP_409_CONFLICT


class NotFoundError(ServiceError):
    status_code = status.HTTP_404_NOT_FOUND


class AuthError(ServiceError):
    status_code = status.HTTP_401_UNAUTHORIZED
    headers = {"WWW-Authenticate": "Bearer"}


class InternalError(ServiceError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


def format_validation_errors(errors: List[Dict[str, Any]]) -> List[str]:
    """Turn pydantic error dicts into ``"field" message`` strings.

    The leading ``body`` element of each location is dropped so the
    message names the payload field; a missing body is reported as
    ``"body"``.  Malformed JSON keeps only the decoder message.
    """
    messages = []
    for error in errors:
        msg = _humanize(error)
        if error.get("type") == "json_invalid":
            messages.append(msg)
            continue
        loc = [str(part) for part in error.get("loc", ()) if part != "body"] or ["body"]
        messages.append(f'"{".".join(loc)}" {msg}')
    return messages


def _humanize(error: Dict[str, Any]) -> str:
    ctx = error.get("ctx") or {}
    kind = error.get("type", "")
    if kind == "missing":
        return "is required"
    if kind == "string_too_short":
        if ctx.get("min_length") == 1:
            return "is not allowed to be empty"
        return f"length must be at least {ctx.get('min_length')} characters long"
    if kind == "finite_number":
        return "must be a finite number"
    if kind == "literal_error":
        return f"must be one of {ctx.get('expected')}"
    if kind == "value_error" and "email" in str(error.get("msg", "")).lower():
        return "must be a valid email"
    return str(error.get("msg", "is invalid"))


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the error taxonomy handlers to ``app``."""

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        return JSONResponse(
            status_code=ValidationError.status_code,
            content=format_validation_errors(exc.errors()),
        )

    @app.exception_handler(ServiceError)
    async def service_error_handler(request: Request, exc: ServiceError) -> PlainTextResponse:
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
        return PlainTextResponse(exc.message, status_code=exc.status_code, headers=exc.headers)

    @app.exception_handler(sqlite3.Error)
    async def store_error_handler(request: Request, exc: sqlite3.Error) -> PlainTextResponse:
        logger.exception("Store failure on %s %s", request.method, request.url.path)
        error = InternalError(str(exc))
        return PlainTextResponse(error.message, status_code=error.status_code)
