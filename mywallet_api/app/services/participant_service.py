"""
Business logic for participants.

Registration checks for an existing e‑mail, hashes the password and
stores the record.  The ``participants.email`` column is UNIQUE, so a
concurrent registration that passes the existence check is still
rejected by the store and reported as a conflict.
"""

import logging
import sqlite3
from typing import Optional

from mywallet_api.app.core.db import get_connection
from mywallet_api.app.core.errors import ConflictError
from mywallet_api.app.core.security import hash_password
from mywallet_api.app.schemas.participant import ParticipantCreate, ParticipantRecord

logger = logging.getLogger(__name__)

EMAIL_TAKEN = "Este email já existe no banco"


class ParticipantService:
    """Service for registering and looking up participants."""

    @classmethod
    async def create_participant(cls, data: ParticipantCreate) -> int:
        """Store a new participant and return its id.

        Raises ``ConflictError`` if the e‑mail is already registered.
        """
        conn = get_connection()
        try:
            cursor = conn.cursor()
            row = cursor.execute(
                "SELECT id FROM participants WHERE email = ?", (data.email,)
            ).fetchone()
            if row:
                raise ConflictError(EMAIL_TAKEN)
            try:
                cursor.execute(
                    "INSERT INTO participants (name, email, password) VALUES (?, ?, ?)",
                    (data.name, data.email, hash_password(data.password)),
                )
            except sqlite3.IntegrityError as exc:
                conn.rollback()
                raise ConflictError(EMAIL_TAKEN) from exc
            participant_id = cursor.lastrowid
            conn.commit()
            logger.info("Registered participant %s", participant_id)
            return participant_id
        finally:
            conn.close()

    @classmethod
    async def get_by_email(cls, email: str) -> Optional[ParticipantRecord]:
        """Return the stored participant with ``email`` or ``None``."""
        conn = get_connection()
        try:
            row = conn.execute(
                "SELECT id, name, email, password FROM participants WHERE email = ?",
                (email,),
            ).fetchone()
            if row is None:
                return None
            return ParticipantRecord(**dict(row))
        finally:
            conn.close()
