"""
Backend-specific test fixtures and configuration.

These fixtures extend the global fixtures with helpers for simulating
storage failures and building apps around substitute stores.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient
from pymongo.errors import ServerSelectionTimeoutError


# =============================================================================
# Collection Doubles
# =============================================================================

@pytest.fixture
def failing_collection():
    """
    A users collection whose every operation fails as if MongoDB were down.
    """
    error = ServerSelectionTimeoutError("localhost:27017: connection refused")
    collection = MagicMock()
    collection.insert_one = AsyncMock(side_effect=error)
    collection.find_one = AsyncMock(side_effect=error)
    collection.database.command = AsyncMock(side_effect=error)
    return collection


@pytest.fixture
def encoding_collection(users_collection):
    """
    The in-memory users collection, but BSON-encoding documents and filters
    first as the real driver does.
    """
    import bson

    async def insert_one(doc):
        bson.encode(doc)
        return await users_collection.insert_one(doc)

    async def find_one(filter):
        bson.encode(filter)
        return await users_collection.find_one(filter)

    collection = MagicMock()
    collection.insert_one = AsyncMock(side_effect=insert_one)
    collection.find_one = AsyncMock(side_effect=find_one)
    return collection


@pytest.fixture
def unacknowledged_collection():
    """A users collection whose inserts report no inserted id."""
    collection = MagicMock()
    collection.insert_one = AsyncMock(return_value=MagicMock(inserted_id=None))
    return collection


# =============================================================================
# App Builders
# =============================================================================

@pytest.fixture
def client_for_collection():
    """
    Build a TestClient around a CredentialStore for the given collection.

    Usage in tests:
        def test_something(client_for_collection, failing_collection):
            with client_for_collection(failing_collection) as c:
                response = c.post("/signup", json={...})
    """
    from app.main import create_app
    from app.services.credential_store import CredentialStore

    def _build(collection) -> TestClient:
        return TestClient(create_app(store=CredentialStore(collection)))

    return _build


# =============================================================================
# Response Assertion Helpers
# =============================================================================

@pytest.fixture
def assert_message_response():
    """Helper to assert the {message} error body shape."""
    def _assert(response, status_code: int, message: str):
        assert response.status_code == status_code
        assert response.json() == {"message": message}
    return _assert
