"""
MongoDB-backed store for credential records.
"""
import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorCollection
from bson.errors import BSONError
from pymongo.errors import PyMongoError

from app.core.exceptions import StoreError
from app.database.databases import auth_db
from app.models.credential import CredentialRecord

logger = logging.getLogger(__name__)


class CredentialStore:
    """Persistence for (username, password) records."""

    def __init__(self, collection: AsyncIOMotorCollection):
        """Initialize with the users collection."""
        self.collection = collection

    async def create(self, username: str, password: str) -> Optional[CredentialRecord]:
        """
        Persist a new credential record.

        No existence check is made; the same username can be stored twice.

        Args:
            username: Username to store
            password: Password to store, as given

        Returns:
            The created record, or None if the driver reported no inserted id

        Raises:
            StoreError: If the insert fails
        """
        doc = {
            auth_db.Fields.USERNAME: username,
            auth_db.Fields.PASSWORD: password,
        }
        try:
            result = await self.collection.insert_one(doc)
        except (PyMongoError, BSONError, UnicodeEncodeError) as e:
            raise StoreError(f"insert failed: {e}") from e

        if result.inserted_id is None:
            logger.warning(f"Insert for '{username}' returned no id")
            return None

        doc["_id"] = result.inserted_id
        return CredentialRecord(**doc)

    async def find_by_username(self, username: str) -> Optional[CredentialRecord]:
        """
        Find a credential record by username.

        If several records share the username, which one is returned is
        unspecified.

        Raises:
            StoreError: If the query fails
        """
        try:
            doc = await self.collection.find_one({auth_db.Fields.USERNAME: username})
        except (PyMongoError, BSONError, UnicodeEncodeError) as e:
            raise StoreError(f"find failed: {e}") from e

        if not doc:
            return None
        return CredentialRecord(**doc)

    async def ping(self) -> None:
        """Check that the database server answers."""
        try:
            await self.collection.database.command("ping")
        except PyMongoError as e:
            raise StoreError(f"ping failed: {e}") from e
