"""
Core module - Errors and logging setup.
"""
from app.core.exceptions import (
    AuthError,
    MissingFieldsError,
    PasswordMismatchError,
    SignupFailedError,
    StoreError,
    UserNotFoundError,
)
from app.core.logging import setup_logging

__all__ = [
    "AuthError",
    "MissingFieldsError",
    "PasswordMismatchError",
    "SignupFailedError",
    "StoreError",
    "UserNotFoundError",
    "setup_logging",
]
