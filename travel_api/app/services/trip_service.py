"""
Read access to trips.

``TripService`` returns the trip catalogue with the countries each trip
visits, and the trips a given client is registered for together with
their registration and payment dates.
"""

from typing import List

from fastapi.concurrency import run_in_threadpool

from travel_api.app.core.dates import decode_date
from travel_api.app.core.db import get_connection
from travel_api.app.core.errors import NotFoundError
from travel_api.app.schemas.trip import ClientTripRead, TripRead


class TripService:
    """Service for listing trips."""

    @classmethod
    async def list_trips(cls) -> List[TripRead]:
        return await run_in_threadpool(cls._list_trips)

    @classmethod
    async def list_client_trips(cls, client_id: int) -> List[ClientTripRead]:
        return await run_in_threadpool(cls._list_client_trips, client_id)

    @classmethod
    def _list_trips(cls) -> List[TripRead]:
        """Return all trips, each with the names of its countries.

        The join yields one row per (trip, country) pair; consecutive
        rows for the same trip are folded into a single ``TripRead``.
        Countries keep the order the database returns them in.  Trips
        without countries get an empty list.
        """
        conn = get_connection()
        try:
            rows = conn.execute(
                """
                SELECT t.IdTrip, t.Name, t.Description, t.DateFrom, t.DateTo, t.MaxPeople,
                       c.IdCountry, c.Name AS CountryName
                FROM Trip t
                LEFT JOIN Country_Trip ct ON t.IdTrip = ct.IdTrip
                LEFT JOIN Country c ON ct.IdCountry = c.IdCountry
                ORDER BY t.IdTrip
                """
            ).fetchall()
        finally:
            conn.close()

        trips: List[TripRead] = []
        current: TripRead | None = None
        for row in rows:
            if current is None or current.id_trip != row["IdTrip"]:
                current = TripRead(
                    id_trip=row["IdTrip"],
                    name=row["Name"],
                    description=row["Description"],
                    date_from=row["DateFrom"],
                    date_to=row["DateTo"],
                    max_people=row["MaxPeople"],
                )
                trips.append(current)
            if row["IdCountry"] is not None:
                current.countries.append(row["CountryName"])
        return trips

    @classmethod
    def _list_client_trips(cls, client_id: int) -> List[ClientTripRead]:
        """Return the trips ``client_id`` is registered for.

        Raises ``NotFoundError`` if the client does not exist.  A known
        client without registrations yields an empty list.
        """
        conn = get_connection()
        try:
            exists = conn.execute(
                "SELECT 1 FROM Client WHERE IdClient = ?", (client_id,)
            ).fetchone()
            if exists is None:
                raise NotFoundError("Client not found")

            rows = conn.execute(
                """
                SELECT t.IdTrip, t.Name, t.Description, t.DateFrom, t.DateTo, t.MaxPeople,
                       ct.RegisteredAt, ct.PaymentDate
                FROM Client_Trip ct
                JOIN Trip t ON ct.IdTrip = t.IdTrip
                WHERE ct.IdClient = ?
                """,
                (client_id,),
            ).fetchall()
        finally:
            conn.close()

        return [
            ClientTripRead(
                id_trip=row["IdTrip"],
                name=row["Name"],
                description=row["Description"],
                date_from=row["DateFrom"],
                date_to=row["DateTo"],
                max_people=row["MaxPeople"],
                registered_at=decode_date(row["RegisteredAt"]),
                payment_date=decode_date(row["PaymentDate"]) if row["PaymentDate"] is not None else None,
            )
            for row in rows
        ]
