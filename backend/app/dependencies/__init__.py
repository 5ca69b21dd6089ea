"""
Dependencies for dependency injection in routes.
"""
from app.dependencies.store import get_auth_service, get_credential_store

__all__ = [
    "get_auth_service",
    "get_credential_store",
]
