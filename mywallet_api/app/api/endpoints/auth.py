"""
Login endpoint.

Exchanges e‑mail and password for an opaque bearer token backed by a
row in the ``sessions`` table.
"""

from fastapi import APIRouter

from mywallet_api.app.schemas.session import LoginRequest, LoginResponse
from mywallet_api.app.services.session_service import SessionService

router = APIRouter()


@router.post("", response_model=LoginResponse)
async def login(credentials: LoginRequest) -> LoginResponse:
    """Authenticate a participant and open a session.

    Returns HTTP 404 for an unknown e‑mail and HTTP 401 for a wrong
    password.
    """
    return await SessionService.login(credentials)
