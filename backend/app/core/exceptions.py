"""
Error types raised by the credential protocol and their HTTP handlers.

Auth errors carry the literal message and status code returned to clients.
Storage failures are surfaced as a 500 instead of leaving the request
unanswered.
"""
import logging

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

MISSING_FIELDS_MESSAGE = "All fields are required"
SIGNUP_FAILED_MESSAGE = "Error while signup"
PASSWORD_MISMATCH_MESSAGE = "Password not match"
INTERNAL_ERROR_MESSAGE = "Internal server error"


class AuthError(Exception):
    """Client-facing failure of a signup or signin request."""

    status_code = status.HTTP_403_FORBIDDEN
    message = "Forbidden"

    def __init__(self, message: str | None = None, status_code: int | None = None):
        if message:
            self.message = message
        if status_code:
            self.status_code = status_code
        super().__init__(self.message)


class MissingFieldsError(AuthError):
    """Username or password absent from the request body."""
    message = MISSING_FIELDS_MESSAGE


class SignupFailedError(AuthError):
    """The store created no record."""
    message = SIGNUP_FAILED_MESSAGE


class UserNotFoundError(AuthError):
    """No record has the given username; reuses the signup failure message."""
    message = SIGNUP_FAILED_MESSAGE


class PasswordMismatchError(AuthError):
    """The stored password differs from the one supplied."""
    status_code = status.HTTP_409_CONFLICT
    message = PASSWORD_MISMATCH_MESSAGE


class StoreError(Exception):
    """The credential store could not complete an operation."""


async def auth_error_handler(request: Request, exc: AuthError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


async def store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
    logger.error(
        f"Store failure on {request.method} {request.url.path}: {exc}",
        exc_info=exc,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": INTERNAL_ERROR_MESSAGE},
    )


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Malformed bodies fail the same presence check as empty fields."""
    fields = [".".join(str(p) for p in err["loc"]) for err in exc.errors()]
    logger.debug(f"Rejected body on {request.url.path}: {fields}")
    return JSONResponse(
        status_code=status.HTTP_403_FORBIDDEN,
        content={"message": MISSING_FIELDS_MESSAGE},
    )
