"""
Store and service dependencies.

The credential store lives on ``app.state`` and is set up by the
application lifespan or passed in by whoever builds the app.
"""
from typing import Annotated

from fastapi import Depends, Request

from app.services.auth_service import AuthService
from app.services.credential_store import CredentialStore


def get_credential_store(request: Request) -> CredentialStore:
    """Dependency to get the application's CredentialStore."""
    return request.app.state.credential_store


def get_auth_service(
    store: Annotated[CredentialStore, Depends(get_credential_store)],
) -> AuthService:
    """Dependency to get AuthService instance."""
    return AuthService(store)
