"""
Database module - MongoDB connection and database definitions.
"""
from app.database.connections import (
    create_mongo_client,
    close_mongo_client,
    get_auth_database,
)
from app.database.databases import auth_db
from app.database.registry import create_indexes

__all__ = [
    "create_mongo_client",
    "close_mongo_client",
    "get_auth_database",
    "auth_db",
    "create_indexes",
]
