"""
Signup/signin request and response schemas.
"""
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class CredentialsRequest(BaseModel):
    """
    Signup and signin request body.

    Both fields are optional at the schema level so that absent values
    reach the presence check and get its 403 response.

    Numbers are accepted and stored as strings; objects and arrays are
    rejected.
    """
    model_config = ConfigDict(coerce_numbers_to_str=True)

    username: Optional[str] = Field(None, description="Username")
    password: Optional[str] = Field(None, description="Password")


class AuthResponse(BaseModel):
    """Successful signup/signin response."""
    message: str = Field(..., description="Outcome message")
    response: dict[str, Any] = Field(..., description="Stored credential record")
