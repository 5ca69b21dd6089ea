"""
Index management for the auth database.
"""
from motor.motor_asyncio import AsyncIOMotorDatabase

from app.database.databases import auth_db


async def create_indexes(db: AsyncIOMotorDatabase) -> None:
    """
    Create necessary indexes on the auth database.

    The username index is non-unique; signup never rejects an existing
    username.
    """
    users = db[auth_db.Collections.USERS]
    await users.create_index(auth_db.Fields.USERNAME)
