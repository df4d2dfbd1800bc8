"""
Business logic for logins and sessions.

A successful login inserts a row binding a fresh opaque token to the
participant.  Sessions never expire and are never deleted; a
participant may hold any number of them at once.
"""

import logging
from typing import Optional

from mywallet_api.app.core.db import get_connection
from mywallet_api.app.core.errors import AuthError, NotFoundError
from mywallet_api.app.core.security import generate_token, verify_password
from mywallet_api.app.schemas.session import LoginRequest, LoginResponse, SessionRecord
from mywallet_api.app.services.participant_service import ParticipantService

logger = logging.getLogger(__name__)

NOT_AUTHORIZED = "nao tem autorizacao para acessar"


class SessionService:
    """Service for authenticating participants and resolving tokens."""

    @classmethod
    async def login(cls, credentials: LoginRequest) -> LoginResponse:
        """Check the credentials and open a new session.

        Raises ``NotFoundError`` for an unknown e‑mail and ``AuthError``
        when the password does not match the stored hash.
        """
        participant = await ParticipantService.get_by_email(credentials.email)
        if participant is None:
            raise NotFoundError("Este email não existe, crie uma conta")
        if not verify_password(credentials.password, participant.password):
            logger.warning("Failed login for participant %s", participant.id)
            raise AuthError("Senha incorreta!")

        token = generate_token()
        conn = get_connection()
        try:
            conn.execute(
                "INSERT INTO sessions (id_user, token) VALUES (?, ?)",
                (participant.id, token),
            )
            conn.commit()
        finally:
            conn.close()
        logger.info("Participant %s logged in", participant.id)
        return LoginResponse(name=participant.name, user_id=participant.id, token=token)

    @classmethod
    async def get_session(cls, token: str) -> Optional[SessionRecord]:
        """Return the session for ``token`` or ``None``."""
        conn = get_connection()
        try:
            row = conn.execute(
                "SELECT id, id_user, token FROM sessions WHERE token = ?", (token,)
            ).fetchone()
            return SessionRecord(**dict(row)) if row else None
        finally:
            conn.close()

    @classmethod
    async def require_session(cls, token: Optional[str], unknown_message: str) -> SessionRecord:
        """Resolve a bearer token into its session.

        A missing token and a token without a session are both
        ``AuthError``; ``unknown_message`` is the text for the latter.
        """
        if not token:
            raise AuthError(NOT_AUTHORIZED)
        session = await cls.get_session(token)
        if session is None:
            raise AuthError(unknown_message)
        return session
