"""
Pydantic models for login and sessions.
"""

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class LoginRequest(BaseModel):
    """Credentials posted to ``/user``."""

    email: EmailStr = Field(..., examples=["maria@example.com"])
    password: str = Field(..., min_length=3, examples=["s3nha"])


class LoginResponse(BaseModel):
    """Returned after a successful login.

    ``userID`` is the participant's id; ``token`` goes into the
    ``Authorization: Bearer`` header of later requests.
    """

    model_config = ConfigDict(populate_by_name=True)

    name: str
    user_id: int = Field(..., alias="userID")
    token: str


class SessionRecord(BaseModel):
    id: int
    id_user: int
    token: str
