"""
Error taxonomy and the handlers that turn errors into the response envelope.

Every failure leaves the API as:
    {"success": false, "message": "...", "error": "..."?}
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError

from jobboard.core.config import get_settings

logger = logging.getLogger(__name__)


class AuthError(Exception):
    """Token could not be verified (bad signature, malformed, expired)."""


class APIError(Exception):
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(APIError):
    pass


class DuplicateEmail(APIError):
    pass


class InvalidCredentials(APIError):
    pass


class Unauthenticated(APIError):
    status_code = 401


class NotFound(APIError):
    pass


class AlreadyApplied(APIError):
    pass


class DuplicateJob(APIError):
    pass


class InternalError(APIError):
    status_code = 500

    def __init__(self, message: str = "Internal server error", error: str = None):
        super().__init__(message)
        self.error = error


def _envelope(exc: APIError) -> JSONResponse:
    body = {"success": False, "message": exc.message}
    if isinstance(exc, InternalError) and exc.error and get_settings().expose_error_details:
        body["error"] = exc.error
    return JSONResponse(status_code=exc.status_code, content=body)


async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
    return _envelope(exc)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report the first failing field the way the rest of the API reports errors."""
    errors = exc.errors()
    if not errors:
        return _envelope(ValidationError("Please fill all fields"))

    first = errors[0]
    if first.get("type") == "json_invalid":
        return _envelope(ValidationError("Invalid JSON body"))

    field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = f"{field}: {first.get('msg')}" if field else first.get("msg", "Invalid request")
    return _envelope(ValidationError(message))


async def internal_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return _envelope(InternalError(error=str(exc)))


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(APIError, api_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(PyMongoError, internal_error_handler)
    app.add_exception_handler(Exception, internal_error_handler)
