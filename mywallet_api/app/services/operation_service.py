"""
Service layer for wallet operations.

Operations are append‑only: they are created for the participant
owning the presented session and listed back per participant.  No
ordering is applied when listing; rows come back in the store's
natural order.
"""

import logging
from datetime import datetime
from typing import List, Optional

from mywallet_api.app.core.db import get_connection
from mywallet_api.app.schemas.operation import OperationCreate, OperationRead

logger = logging.getLogger(__name__)

DATE_FORMAT = "%d/%m"


class OperationService:
    """Service class for creating and listing operations."""

    @classmethod
    async def create_operation(
        cls, id_user: int, data: OperationCreate, now: Optional[datetime] = None
    ) -> OperationRead:
        """Insert an operation stamped with the day and month of ``now``."""
        date = (now or datetime.now()).strftime(DATE_FORMAT)
        conn = get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(
                """
                INSERT INTO operations (value, description, type, date, id_user)
                VALUES (?, ?, ?, ?, ?)
                """,
                (data.value, data.description, data.type, date, id_user),
            )
            operation_id = cursor.lastrowid
            conn.commit()
        finally:
            conn.close()
        logger.info("Created %s operation %s for participant %s", data.type, operation_id, id_user)
        return OperationRead(
            id=operation_id,
            value=data.value,
            description=data.description,
            type=data.type,
            date=date,
            id_user=id_user,
        )

    @classmethod
    async def list_operations(cls, id_user: int) -> List[OperationRead]:
        """Return every operation owned by ``id_user``."""
        conn = get_connection()
        try:
            rows = conn.execute(
                "SELECT id, value, description, type, date, id_user FROM operations WHERE id_user = ?",
                (id_user,),
            ).fetchall()
            return [OperationRead(**dict(row)) for row in rows]
        finally:
            conn.close()
