# utils/errors.py
"""
Application errors and their HTTP mapping.

Services raise these; the handlers installed by `register_error_handlers`
turn them into `{"message": ...}` JSON bodies (plus `errors` for multi-field
validation failures).
"""
from __future__ import annotations

import logging
from typing import List, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from config.settings import Settings

log = logging.getLogger(__name__)


class AppError(Exception):
    status_code: int = 500
    default_message: str = "Server error"

    def __init__(self, message: Optional[str] = None, errors: Optional[List[str]] = None):
        self.message = message or self.default_message
        self.errors = errors
        super().__init__(self.message)

    def to_body(self) -> dict:
        body = {"message": self.message}
        if self.errors:
            body["errors"] = self.errors
        return body


class ValidationError(AppError):
    status_code = 400
    default_message = "Validation error"


class AuthError(AppError):
    status_code = 401
    default_message = "Not authorized"


class InvalidToken(AuthError):
    default_message = "Token is not valid"


class InvalidCredentials(AuthError):
    # same status and text for "no such user" and "wrong password"
    status_code = 400
    default_message = "Invalid credentials"


class Forbidden(AppError):
    status_code = 403
    default_message = "User not authorized"


class NotFound(AppError):
    status_code = 404
    default_message = "Not found"


class Conflict(AppError):
    status_code = 400
    default_message = "Conflict"


class DuplicateEmail(Conflict):
    default_message = "Email already in use"


def _format_validation_errors(exc: RequestValidationError) -> List[str]:
    out: List[str] = []
    for err in exc.errors():
        loc = [str(p) for p in err.get("loc", ()) if p not in ("body", "query", "path", "header")]
        msg = str(err.get("msg", "invalid value"))
        if msg.startswith("Value error, "):
            msg = msg[len("Value error, "):]
        out.append(f"{'.'.join(loc)}: {msg}" if loc else msg)
    return out


def register_error_handlers(app: FastAPI, settings: Settings) -> None:
    @app.exception_handler(AppError)
    async def _app_error(request: Request, exc: AppError):
        if exc.status_code >= 500:
            log.error("%s %s failed: %s", request.method, request.url.path, exc.message)
        return JSONResponse(status_code=exc.status_code, content=exc.to_body())

    @app.exception_handler(RequestValidationError)
    async def _request_validation(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=400,
            content={"message": "Validation error", "errors": _format_validation_errors(exc)},
        )

    @app.exception_handler(SQLAlchemyError)
    async def _database_error(request: Request, exc: SQLAlchemyError):
        log.error("Database error on %s %s", request.method, request.url.path, exc_info=exc)
        return JSONResponse(status_code=500, content={"message": "Database error"})

    @app.exception_handler(Exception)
    async def _unhandled(request: Request, exc: Exception):
        log.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
        body = {"message": "Server error"}
        if not settings.is_production:
            body["error"] = f"{type(exc).__name__}: {exc}"
        return JSONResponse(status_code=500, content=body)
