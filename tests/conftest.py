"""
Global test fixtures for the credential service.

This module provides shared fixtures for all tests including:
- Mock MongoDB (mongomock-motor)
- Credential store and app instances wired to the mock database
- Sync and async HTTP test clients
"""

import sys
from pathlib import Path
from typing import Generator

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

# Add backend to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "backend"))


# =============================================================================
# MongoDB Fixtures (mongomock-motor)
# =============================================================================

@pytest.fixture
def mock_async_mongo_client():
    """
    Create an async mock MongoDB client using mongomock-motor.

    This provides an in-memory MongoDB that behaves like the real thing
    for testing purposes.
    """
    from mongomock_motor import AsyncMongoMockClient
    client = AsyncMongoMockClient()
    yield client
    client.close()


@pytest.fixture
def mock_auth_db(mock_async_mongo_client):
    """Provide mock auth database."""
    return mock_async_mongo_client["docker-2"]


@pytest.fixture
def users_collection(mock_auth_db):
    """Provide the mock users collection."""
    return mock_auth_db["users"]


@pytest.fixture
def credential_store(users_collection):
    """CredentialStore backed by the in-memory users collection."""
    from app.services.credential_store import CredentialStore
    return CredentialStore(users_collection)


# =============================================================================
# Credential Fixtures
# =============================================================================

@pytest.fixture
def alice_credentials() -> dict:
    """Credentials used across signup/signin tests."""
    return {
        "username": "alice",
        "password": "secret",
    }


# =============================================================================
# FastAPI Test Client Fixtures
# =============================================================================

@pytest.fixture
def app(credential_store):
    """
    Create FastAPI app for testing.

    The app is built with the in-memory store, so startup opens no
    MongoDB connection.
    """
    from app.main import create_app
    return create_app(store=credential_store)


@pytest.fixture
def client(app) -> Generator:
    """
    Create a TestClient for the FastAPI app.

    Use this for synchronous endpoint testing.
    """
    with TestClient(app) as c:
        yield c


@pytest_asyncio.fixture
async def async_client(app):
    """
    Create an async test client.

    Use this for testing async endpoints.
    """
    from httpx import AsyncClient, ASGITransport

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as ac:
        yield ac
