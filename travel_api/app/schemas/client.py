"""
Pydantic models for client data.

``ClientCreate`` is the request body for registering a new client.
Only the presence and type of fields are checked here; the format of
``email`` and ``pesel`` is validated by ``ClientService`` so that a
malformed value is reported as a regular 400 error with a readable
message.
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator


class ClientCreate(BaseModel):
    """Schema for creating a client."""

    first_name: str = Field(..., alias="firstName", examples=["Jan"])
    last_name: str = Field(..., alias="lastName", examples=["Kowalski"])
    email: str = Field(..., examples=["jan.kowalski@example.com"])
    telephone: Optional[str] = Field(None, examples=["+48 600 100 200"])
    # Polish national identification number: 11 digits.
    pesel: Optional[str] = Field(None, examples=["90010112345"])

    model_config = {
        "populate_by_name": True,
    }

    @field_validator("telephone", "pesel", mode="before")
    @classmethod
    def _blank_to_none(cls, value):
        # Forms tend to submit empty strings for untouched optional inputs.
        if isinstance(value, str) and value == "":
            return None
        return value


class ClientCreated(BaseModel):
    """Response returned after a client is created."""

    id: int
