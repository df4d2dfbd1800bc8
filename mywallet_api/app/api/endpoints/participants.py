"""
Participant endpoints.

Registration is the only operation; participants are never updated or
deleted through the API.
"""

from fastapi import APIRouter, status
from fastapi.responses import PlainTextResponse

from mywallet_api.app.schemas.participant import ParticipantCreate
from mywallet_api.app.services.participant_service import ParticipantService

router = APIRouter()


@router.post("", status_code=status.HTTP_201_CREATED, response_class=PlainTextResponse)
async def register_participant(participant: ParticipantCreate) -> str:
    """Register a new participant.

    Returns HTTP 422 for an invalid payload and HTTP 409 if the e‑mail
    is already registered.
    """
    await ParticipantService.create_participant(participant)
    return "Participante cadastrado"
