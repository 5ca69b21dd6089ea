"""
Credential record model for the auth database users collection.
"""
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CredentialRecord(BaseModel):
    """
    One registered user as stored in MongoDB.

    The password is kept exactly as submitted.
    """
    model_config = ConfigDict(populate_by_name=True)

    id: Optional[str] = Field(None, alias="_id", description="MongoDB ObjectId as string")
    username: str = Field(..., description="Username (not unique)")
    password: str = Field(..., description="Password as submitted")

    @field_validator("id", mode="before")
    @classmethod
    def stringify_object_id(cls, value: Any) -> Optional[str]:
        return None if value is None else str(value)

    def to_response(self) -> dict[str, Any]:
        """Serialize for API responses, keeping the Mongo ``_id`` key."""
        return self.model_dump(by_alias=True)
