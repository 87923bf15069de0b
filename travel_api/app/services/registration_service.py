"""
Registration of clients for trips.

``RegistrationService.register_client`` signs a client up for a trip
after checking that both exist, that the client is not registered yet
and that the trip still has a free place.  All checks and the insert
run inside a single ``BEGIN IMMEDIATE`` transaction, so two requests
racing for the last place on a trip cannot both pass the capacity
check.  ``unregister_client`` removes an existing registration.

Every ``Client_Trip`` row counts against the trip's capacity, including
rows for clients who cancelled earlier and registered again.
"""

import logging
from datetime import date

from fastapi.concurrency import run_in_threadpool

from travel_api.app.core.dates import encode_date
from travel_api.app.core.db import transaction
from travel_api.app.core.errors import ConflictError, NotFoundError


logger = logging.getLogger(__name__)


class RegistrationService:
    """Service for registering and unregistering clients on trips."""

    # Database work runs in the threadpool; BEGIN IMMEDIATE may wait up to
    # settings.db_timeout seconds for a competing writer.

    @classmethod
    async def register_client(cls, client_id: int, trip_id: int) -> None:
        await run_in_threadpool(cls._register_client, client_id, trip_id)

    @classmethod
    async def unregister_client(cls, client_id: int, trip_id: int) -> None:
        await run_in_threadpool(cls._unregister_client, client_id, trip_id)

    @classmethod
    def _register_client(cls, client_id: int, trip_id: int) -> None:
        """Register ``client_id`` for ``trip_id`` with today's date.

        Raises ``NotFoundError`` if the client or trip is unknown and
        ``ConflictError`` if the client is already registered or the
        trip is full.
        """
        try:
            with transaction() as cursor:
                if cursor.execute(
                    "SELECT 1 FROM Client WHERE IdClient = ?", (client_id,)
                ).fetchone() is None:
                    raise NotFoundError("Client not found")

                trip = cursor.execute(
                    "SELECT MaxPeople FROM Trip WHERE IdTrip = ?", (trip_id,)
                ).fetchone()
                if trip is None:
                    raise NotFoundError("Trip not found")

                if cursor.execute(
                    "SELECT 1 FROM Client_Trip WHERE IdClient = ? AND IdTrip = ?",
                    (client_id, trip_id),
                ).fetchone() is not None:
                    raise ConflictError("Client is already registered for this trip")

                registered = cursor.execute(
                    "SELECT COUNT(*) AS total FROM Client_Trip WHERE IdTrip = ?",
                    (trip_id,),
                ).fetchone()["total"]
                if registered >= trip["MaxPeople"]:
                    raise ConflictError("Trip has reached maximum capacity")

                cursor.execute(
                    "INSERT INTO Client_Trip (IdClient, IdTrip, RegisteredAt) VALUES (?, ?, ?)",
                    (client_id, trip_id, encode_date(date.today())),
                )
        except (NotFoundError, ConflictError) as e:
            logger.warning("Registration of client %s for trip %s rejected: %s", client_id, trip_id, e)
            raise
        logger.info("Registered client %s for trip %s", client_id, trip_id)

    @classmethod
    def _unregister_client(cls, client_id: int, trip_id: int) -> None:
        """Remove the registration of ``client_id`` for ``trip_id``.

        Raises ``NotFoundError`` if no such registration exists.
        """
        with transaction() as cursor:
            deleted = cursor.execute(
                "DELETE FROM Client_Trip WHERE IdClient = ? AND IdTrip = ?",
                (client_id, trip_id),
            ).rowcount
            if deleted == 0:
                logger.warning("No registration of client %s for trip %s", client_id, trip_id)
                raise NotFoundError("Registration not found")
        logger.info("Unregistered client %s from trip %s", client_id, trip_id)
