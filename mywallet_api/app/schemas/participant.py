"""
Pydantic models for participant data.

Defines the registration payload and the internal record read back
from the store.  The stored password hash never leaves the service
layer.
"""

from pydantic import BaseModel, EmailStr, Field


class ParticipantCreate(BaseModel):
    """Schema for registering a participant."""

    name: str = Field(..., min_length=1, examples=["Maria Silva"])
    email: EmailStr = Field(..., examples=["maria@example.com"])
    password: str = Field(..., min_length=3, examples=["s3nha"])


class ParticipantRecord(BaseModel):
    """A participant as stored, including the password hash."""

    id: int
    name: str
    email: str
    password: str
