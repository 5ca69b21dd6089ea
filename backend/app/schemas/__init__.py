"""
Request and response schemas for API endpoints.
"""
from app.schemas.auth import CredentialsRequest, AuthResponse

__all__ = [
    "CredentialsRequest",
    "AuthResponse",
]
