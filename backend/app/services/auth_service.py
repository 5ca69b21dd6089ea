"""
Signup and signin protocol over the credential store.
"""
import logging
from typing import Optional

from app.core.exceptions import (
    MissingFieldsError,
    PasswordMismatchError,
    SignupFailedError,
    UserNotFoundError,
)
from app.models.credential import CredentialRecord
from app.services.credential_store import CredentialStore

logger = logging.getLogger(__name__)


def _require_fields(username: Optional[str], password: Optional[str]) -> None:
    if not username or not password:
        raise MissingFieldsError()


class AuthService:
    """Service for signup and signin operations."""

    def __init__(self, store: CredentialStore):
        """Initialize with the credential store."""
        self.store = store

    async def signup(
        self, username: Optional[str], password: Optional[str]
    ) -> CredentialRecord:
        """
        Register a username/password pair.

        Args:
            username: Requested username
            password: Password, stored as given

        Returns:
            The created record

        Raises:
            MissingFieldsError: If either field is missing or empty
            SignupFailedError: If the store created nothing
            StoreError: If the store failed
        """
        _require_fields(username, password)

        record = await self.store.create(username, password)
        if record is None:
            raise SignupFailedError()

        logger.info(f"User '{username}' signed up")
        return record

    async def signin(
        self, username: Optional[str], password: Optional[str]
    ) -> CredentialRecord:
        """
        Check a username/password pair against the stored record.

        The lookup uses the username only; the password is compared
        afterwards by exact equality.

        Returns:
            The matching record

        Raises:
            MissingFieldsError: If either field is missing or empty
            UserNotFoundError: If no record has this username
            PasswordMismatchError: If the stored password differs
            StoreError: If the store failed
        """
        _require_fields(username, password)

        record = await self.store.find_by_username(username)
        if record is None:
            logger.info(f"Signin for unknown user '{username}'")
            raise UserNotFoundError()

        if record.password != password:
            logger.info(f"Signin password mismatch for '{username}'")
            raise PasswordMismatchError()

        return record
