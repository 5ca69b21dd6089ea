"""
Pydantic models for database documents.
"""
from app.models.credential import CredentialRecord

__all__ = ["CredentialRecord"]
