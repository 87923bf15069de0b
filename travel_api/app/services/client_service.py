"""
Business logic for clients.

``ClientService.create_client`` validates the client's e‑mail address
and PESEL number before inserting a new ``Client`` row.  Clients are
never modified after creation.
"""

import logging
import re
from typing import Optional

from fastapi.concurrency import run_in_threadpool

from travel_api.app.core.db import get_connection
from travel_api.app.core.errors import ValidationError
from travel_api.app.schemas.client import ClientCreate


logger = logging.getLogger(__name__)

# local@domain.tld with no whitespace and exactly one "@".
EMAIL_PATTERN = re.compile(r"[^@\s]+@[^@\s]+\.[^@\s]+")
PESEL_PATTERN = re.compile(r"[0-9]{11}")


def validate_email(email: str) -> None:
    """Raise ``ValidationError`` unless ``email`` looks like ``local@domain.tld``."""
    if not EMAIL_PATTERN.fullmatch(email):
        raise ValidationError("Invalid email format")


def validate_pesel(pesel: Optional[str]) -> None:
    """Raise ``ValidationError`` unless ``pesel`` is absent or exactly 11 digits."""
    if pesel is None or pesel == "":
        return
    if not PESEL_PATTERN.fullmatch(pesel):
        raise ValidationError("Invalid Pesel format")


class ClientService:
    """Service for creating clients."""

    @classmethod
    async def create_client(cls, data: ClientCreate) -> int:
        return await run_in_threadpool(cls._create_client, data)

    @classmethod
    def _create_client(cls, data: ClientCreate) -> int:
        """Validate ``data`` and insert a new client.

        Returns the generated client id.  Raises ``ValidationError`` for
        a malformed e‑mail or PESEL; database errors propagate as
        ``sqlite3.Error``.
        """
        try:
            validate_email(data.email)
            validate_pesel(data.pesel)
        except ValidationError as e:
            logger.warning("Rejected client %s %s: %s", data.first_name, data.last_name, e)
            raise

        conn = get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(
                "INSERT INTO Client (FirstName, LastName, Email, Telephone, Pesel) "
                "VALUES (?, ?, ?, ?, ?)",
                (
                    data.first_name,
                    data.last_name,
                    data.email,
                    data.telephone or None,
                    data.pesel or None,
                ),
            )
            client_id = cursor.lastrowid
            conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()
        logger.info("Created client %s (%s)", client_id, data.email)
        return client_id
