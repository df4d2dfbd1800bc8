"""
Operation endpoints.

Both routes require ``Authorization: Bearer <token>``.  The token is
read through a non‑raising dependency and checked inside the handler,
so on ``POST`` an invalid body is reported (422) before a missing or
unknown token (401).
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, status
from fastapi.responses import PlainTextResponse

from mywallet_api.app.core.security import bearer_token
from mywallet_api.app.schemas.operation import OperationCreate, OperationRead
from mywallet_api.app.services.operation_service import OperationService
from mywallet_api.app.services.session_service import SessionService

router = APIRouter()


@router.get("", response_model=List[OperationRead])
async def list_operations(token: Optional[str] = Depends(bearer_token)) -> List[OperationRead]:
    """Return the operations of the participant owning the token."""
    session = await SessionService.require_session(token, "Nao encontrou token no banco de sessoes")
    return await OperationService.list_operations(session.id_user)


@router.post("", status_code=status.HTTP_201_CREATED, response_class=PlainTextResponse)
async def create_operation(
    operation: OperationCreate,
    token: Optional[str] = Depends(bearer_token),
) -> str:
    """Record an income or expense for the participant owning the token."""
    session = await SessionService.require_session(token, "Esse token n existe")
    await OperationService.create_operation(session.id_user, operation)
    return "Operação criada"
